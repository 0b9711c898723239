"""
Link resolution.

Replaces Link placeholders in a projected record with the records they point
to, fetching each hop with one less level of ``include``. Depth is the only
guard against cycles: a self-referential chain is valid content and is simply
cut off once ``include`` reaches zero, leaving the marker in place.
"""
from __future__ import annotations

import logging
from typing import Any, Awaitable, Callable, Dict, List, Optional, Tuple

from contentful_local.core.tasks import gather_or_cancel

from .errors import UnknownLinkTypeError
from .values import ASSET, ENTRY, Link, classify, copy_tree, document_fields

logger = logging.getLogger(__name__)

# fetch(id, include) -> record, or None when the target is not stored
Fetcher = Callable[[str, int], Awaitable[Optional[Dict[str, Any]]]]

# (field name, list index or None for a single value)
_Slot = Tuple[str, Optional[int]]


async def resolve_links(
    record: Dict[str, Any],
    include: int,
    fetch_entry: Fetcher,
    fetch_asset: Fetcher,
) -> Dict[str, Any]:
    """
    Return a copy of ``record`` with its Link fields replaced by the linked
    records, resolved ``include`` levels deep.

    Every link of the record is fetched concurrently. The first failing
    fetch (including an UnknownLinkTypeError) aborts the whole record.
    """
    resolved = copy_tree(record)
    fields = document_fields(resolved)
    if include <= 0 or not fields:
        return resolved

    slots: List[_Slot] = []
    links: List[Link] = []
    for name, raw in fields.items():
        value = classify(raw)
        if isinstance(value, Link):
            slots.append((name, None))
            links.append(value)
        elif isinstance(value, list):
            for index, item in enumerate(value):
                if isinstance(item, Link):
                    slots.append((name, index))
                    links.append(item)

    if not links:
        return resolved

    logger.debug(
        f"Resolving {len(links)} link(s) of {resolved.get('sys', {}).get('id')} "
        f"with include={include}"
    )
    targets = await gather_or_cancel(
        _fetch_link(link, include - 1, fetch_entry, fetch_asset) for link in links
    )

    for (name, index), link, target in zip(slots, links, targets):
        if target is None:
            # Dangling links stay markers, as the delivery API leaves them.
            logger.debug(f"Link target {link.link_type} {link.id} is not stored")
            continue
        if index is None:
            fields[name] = target
        else:
            fields[name][index] = target

    return resolved


def _fetch_link(link: Link, include: int, fetch_entry: Fetcher, fetch_asset: Fetcher) -> Awaitable[Optional[Dict[str, Any]]]:
    if link.link_type == ENTRY:
        return fetch_entry(link.id, include)
    if link.link_type == ASSET:
        return fetch_asset(link.id, include)
    return _reject_link(link)


async def _reject_link(link: Link) -> Optional[Dict[str, Any]]:
    raise UnknownLinkTypeError(link.link_type)
