"""
Delivery-API shaped client over a local snapshot of a space.

Every request follows the same path: normalize the query, address the
document(s) on disk, project each record to one locale, resolve its links,
sort (collections only) and apply the selection. ``unwrap`` turns a result
into plain values and is called explicitly by the caller.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from contentful_local.data.collections import assemble_collection
from contentful_local.domain.links import Fetcher, resolve_links
from contentful_local.domain.locales import project_record
from contentful_local.domain.models import ClientConfig, Query, Space
from contentful_local.domain.query import QueryInput, apply_select, normalize_query
from contentful_local.domain.unwrap import unwrap, unwrap_collection
from contentful_local.domain.values import ASSET, ENTRY
from contentful_local.storage.content_store import ContentStore
from contentful_local.storage.json_content_store import JsonContentStore

logger = logging.getLogger(__name__)


class LocalClient:
    def __init__(self, config: ClientConfig, store: Optional[ContentStore] = None):
        self.config = config
        self.store = store or JsonContentStore(config.local_path, config.space)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def get_space(self) -> Dict[str, Any]:
        """The space the client is configured for, as stored."""
        return await self.store.read_space()

    async def get_entry(self, entry_id: str, query: QueryInput = None) -> Optional[Dict[str, Any]]:
        """
        Get one entry, or None if it is not stored.

        Without ``content_type`` the entry is looked up across all content types.
        """
        query = self._normalize(query)
        space = await self._load_space()
        record = await self._fetch_entry(entry_id, query, space)
        if record is None:
            return None
        return apply_select(record, query.select)

    async def get_entries(self, query: QueryInput = None) -> Dict[str, Any]:
        """Get the collection of entries, optionally limited to one content type."""
        query = self._normalize(query)
        space = await self._load_space()
        directory = self.store.collection_dir(ENTRY, query.content_type)
        return await self._collect(directory, query, space)

    async def get_asset(self, asset_id: str, query: QueryInput = None) -> Optional[Dict[str, Any]]:
        """Get one asset, or None if it is not stored."""
        query = self._normalize(query)
        space = await self._load_space()
        record = await self._fetch_asset(asset_id, query, space)
        if record is None:
            return None
        return apply_select(record, query.select)

    async def get_assets(self, query: QueryInput = None) -> Dict[str, Any]:
        """Get the collection of assets."""
        query = self._normalize(query)
        space = await self._load_space()
        directory = self.store.collection_dir(ASSET)
        return await self._collect(directory, query, space)

    def unwrap(self, record: Dict[str, Any]) -> Any:
        return unwrap(record)

    def unwrap_collection(self, collection: Dict[str, Any]) -> list:
        return unwrap_collection(collection)

    # Content types, entry parsing and syncing belong to the sync process
    # that writes the snapshot.

    def get_content_type(self, content_type_id: str) -> Dict[str, Any]:
        raise NotImplementedError("Content types are not part of the local snapshot.")

    def get_content_types(self, query: QueryInput = None) -> Dict[str, Any]:
        raise NotImplementedError("Content types are not part of the local snapshot.")

    def parse_entries(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        raise NotImplementedError("Parsing raw API responses is not supported locally.")

    def sync(self, query: QueryInput = None) -> Dict[str, Any]:
        raise NotImplementedError("The local client is read-only; sync the snapshot separately.")

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------

    def _normalize(self, query: QueryInput) -> Query:
        return normalize_query(query, self.config.resolve_links)

    async def _load_space(self) -> Space:
        return Space.model_validate(await self.store.read_space())

    async def _fetch_entry(self, entry_id: str, query: Query, space: Space) -> Optional[Dict[str, Any]]:
        path = await self.store.locate_entry(entry_id, query.content_type)
        if path is None:
            return None
        document = await self.store.read_document(path)
        if document is None:
            return None
        return await self._process(document, query, space)

    async def _fetch_asset(self, asset_id: str, query: Query, space: Space) -> Optional[Dict[str, Any]]:
        document = await self.store.read_document(self.store.asset_path(asset_id))
        if document is None:
            return None
        return await self._process(document, query, space)

    async def _collect(self, directory: Path, query: Query, space: Space) -> Dict[str, Any]:
        async def pipeline(document: Dict[str, Any]) -> Dict[str, Any]:
            return await self._process(document, query, space)

        collection = await assemble_collection(self.store, directory, query, pipeline)
        collection["items"] = [apply_select(item, query.select) for item in collection["items"]]
        return collection

    async def _process(self, document: Dict[str, Any], query: Query, space: Space) -> Dict[str, Any]:
        locale_code = query.locale or space.default_locale.code
        record = project_record(document, locale_code, space)

        include = query.include if query.resolve_links else 0
        return await resolve_links(
            record,
            include,
            self._linked(self._fetch_entry, space),
            self._linked(self._fetch_asset, space),
        )

    def _linked(self, fetch, space: Space) -> Fetcher:
        # Linked records are fetched with the remaining depth only.
        async def fetch_linked(record_id: str, include: int) -> Optional[Dict[str, Any]]:
            return await fetch(record_id, self._normalize({"include": include, "resolveLinks": True}), space)

        return fetch_linked


def create_client(
    space: str,
    local_path: Union[str, Path],
    resolve_links: Optional[bool] = None,
) -> LocalClient:
    """
    Create a client for the snapshot of ``space`` stored under ``local_path``.
    """
    config = ClientConfig(space=space, local_path=Path(local_path), resolve_links=resolve_links)
    logger.debug(f"Creating local client for space {space} at {config.local_path}")
    return LocalClient(config)
