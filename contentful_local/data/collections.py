"""
Assembles collections of entries or assets from a directory of documents.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, List, Optional

from contentful_local.core.tasks import gather_or_cancel
from contentful_local.domain.models import Query
from contentful_local.domain.ordering import sort_records
from contentful_local.storage.content_store import ContentStore

logger = logging.getLogger(__name__)

# Turns one stored document into the record returned to the caller.
Pipeline = Callable[[Dict[str, Any]], Awaitable[Dict[str, Any]]]


def make_collection(items: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Wrap records as a collection. Collections are never paginated, so
    ``skip`` is always 0 and ``limit`` is None (unbounded).
    """
    return {
        "sys": {"type": "Array"},
        "total": len(items),
        "skip": 0,
        "limit": None,
        "items": items,
    }


async def assemble_collection(
    store: ContentStore,
    directory: Path,
    query: Query,
    pipeline: Pipeline,
) -> Dict[str, Any]:
    """
    Read every document below ``directory``, run each through ``pipeline``
    concurrently and sort the results by ``query.order``.

    A missing or empty directory yields an empty collection. The first read
    or pipeline failure aborts the whole collection.
    """
    paths = await store.list_documents(directory)
    if not paths:
        logger.debug(f"No documents under {directory}")
        return make_collection([])

    logger.debug(f"Assembling {len(paths)} document(s) from {directory}")
    results = await gather_or_cancel(_load(store, path, pipeline) for path in paths)
    items = [item for item in results if item is not None]

    if query.skip or query.limit is not None:
        logger.debug("skip/limit are not applied to local collections")

    return make_collection(sort_records(items, query.order))


async def _load(store: ContentStore, path: Path, pipeline: Pipeline) -> Optional[Dict[str, Any]]:
    document = await store.read_document(path)
    if document is None:
        # Deleted by the sync process after the directory scan.
        logger.warning(f"Document vanished while assembling collection: {path}")
        return None
    return await pipeline(document)
