from __future__ import annotations

import re
from typing import Any, Dict, Mapping, Optional, Set, Union

from .models import Query

MAX_INCLUDE = 10
DEFAULT_INCLUDE = 1

_SYS_PATTERN = re.compile("sys", re.IGNORECASE)

QueryInput = Union[Query, Mapping[str, Any], None]


def as_query(query: QueryInput) -> Query:
    if query is None:
        return Query()
    if isinstance(query, Query):
        return query
    return Query.model_validate(dict(query))


def normalize_select(select: Optional[str]) -> Optional[str]:
    """
    Every stage routes on sys.id / sys.type, so a selection always keeps sys.
    """
    if select and not _SYS_PATTERN.search(select):
        return f"{select},sys"
    return select


def apply_select(record: Dict[str, Any], select: Optional[str]) -> Dict[str, Any]:
    """
    Keep only the selected members of a record. "sys" and "fields" select
    the whole member, "fields.<name>" a single field.
    """
    if not select:
        return record

    members: Set[str] = set()
    field_names: Set[str] = set()
    for part in select.split(","):
        part = part.strip()
        if not part:
            continue
        head, _, rest = part.partition(".")
        if head == "fields" and rest:
            field_names.add(rest.split(".", 1)[0])
        else:
            members.add(head)

    selected = {key: value for key, value in record.items() if key in members}
    fields = record.get("fields")
    if field_names and "fields" not in members and isinstance(fields, dict):
        selected["fields"] = {name: value for name, value in fields.items() if name in field_names}
    return selected


def normalize_query(query: QueryInput, default_resolve_links: Optional[bool] = None) -> Query:
    """
    Fill in query defaults.

    * resolve_links: the client default, else True.
    * include: 1 when unset, clamped to at most MAX_INCLUDE. Zero or negative
      values are kept and disable link resolution.
    * select: gains ",sys" unless it already mentions sys.

    Normalizing a normalized query returns an equal query.
    """
    query = as_query(query)

    resolve_links = query.resolve_links
    if resolve_links is None:
        resolve_links = default_resolve_links
    if resolve_links is None:
        resolve_links = True

    include = DEFAULT_INCLUDE if query.include is None else query.include
    if include > MAX_INCLUDE:
        include = MAX_INCLUDE

    return query.model_copy(
        update={
            "resolve_links": resolve_links,
            "include": include,
            "select": normalize_select(query.select),
        }
    )
