import asyncio
import json
from pathlib import Path
from typing import Any, Dict, List, Optional
import logging

import aiofiles

from contentful_local.domain.errors import InvalidPathError, ReadFailureError
from contentful_local.domain.values import ASSET, ENTRY
from contentful_local.storage.content_store import (
    ALIAS_DIR,
    ASSETS_DIR,
    ENTRIES_DIR,
    SPACE_FILE,
    ContentStore,
)

logger = logging.getLogger(__name__)


class JsonContentStore(ContentStore):
    """
    Reads the snapshot written by the sync collaborator:

        <root>/<space>/space.json
        <root>/<space>/entries/<contentType>/<contentType>_<id>.json
        <root>/<space>/entries/.all/<id>.json
        <root>/<space>/assets/<id>.json
    """

    def __init__(self, root: Path, space: str):
        self._root = Path(root)
        self._space = space
        self._space_dir = self._root / space

    @property
    def space_dir(self) -> Path:
        return self._space_dir

    def space_path(self) -> Path:
        return self._space_dir / SPACE_FILE

    def entry_path(self, entry_id: str, content_type: Optional[str] = None) -> Path:
        entry_id = self._segment(entry_id)
        entries_dir = self._space_dir / ENTRIES_DIR
        if content_type:
            content_type = self._segment(content_type)
            return self._inside(entries_dir / content_type / f"{content_type}_{entry_id}.json")
        return self._inside(entries_dir / ALIAS_DIR / f"{entry_id}.json")

    def asset_path(self, asset_id: str) -> Path:
        asset_id = self._segment(asset_id)
        return self._inside(self._space_dir / ASSETS_DIR / f"{asset_id}.json")

    def collection_dir(self, kind: str, content_type: Optional[str] = None) -> Path:
        if kind == ASSET:
            return self._space_dir / ASSETS_DIR
        if kind != ENTRY:
            raise ValueError(f"Unknown record kind: {kind}")
        entries_dir = self._space_dir / ENTRIES_DIR
        if content_type:
            return self._inside(entries_dir / self._segment(content_type))
        return entries_dir

    async def locate_entry(self, entry_id: str, content_type: Optional[str] = None) -> Optional[Path]:
        path = self.entry_path(entry_id, content_type)
        if content_type:
            return path

        found = await asyncio.to_thread(self._find_entry, path, entry_id)
        if found is None:
            logger.debug(f"Entry {entry_id} not found in {self._space_dir}")
        return found

    async def read_document(self, path: Path) -> Optional[Dict[str, Any]]:
        logger.debug(f"Reading {path}")
        try:
            async with aiofiles.open(path, "r", encoding="utf-8") as f:
                raw = await f.read()
        except FileNotFoundError:
            return None
        except OSError as e:
            raise ReadFailureError(path, str(e)) from e

        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ReadFailureError(path, f"malformed JSON ({e})") from e

        if not isinstance(data, dict):
            raise ReadFailureError(path, "document is not a JSON object")
        return data

    async def read_space(self) -> Dict[str, Any]:
        path = self.space_path()
        data = await self.read_document(path)
        if data is None:
            raise ReadFailureError(path, "space document is missing")
        return data

    async def list_documents(self, directory: Path) -> List[Path]:
        return await asyncio.to_thread(self._scan_documents, Path(directory))

    def _scan_documents(self, directory: Path) -> List[Path]:
        if not directory.is_dir():
            return []

        documents: List[Path] = []
        for path in directory.rglob("*.json"):
            relative = path.relative_to(directory)
            # Hidden directories hold aliases of documents stored elsewhere.
            if any(part.startswith(".") for part in relative.parts[:-1]):
                continue
            if path.is_file():
                documents.append(path)
        return sorted(documents)

    def _scan_typed_entries(self, entry_id: str) -> List[Path]:
        entries_dir = self._space_dir / ENTRIES_DIR
        if not entries_dir.is_dir():
            return []

        suffix = f"_{entry_id}.json"
        matches: List[Path] = []
        for type_dir in entries_dir.iterdir():
            if not type_dir.is_dir() or type_dir.name.startswith("."):
                continue
            candidate = type_dir / f"{type_dir.name}{suffix}"
            if candidate.is_file():
                matches.append(candidate)
        return sorted(matches)

    def _find_entry(self, alias: Path, entry_id: str) -> Optional[Path]:
        if alias.is_file():
            return alias
        # Snapshots written before the alias existed only carry the typed path.
        matches = self._scan_typed_entries(entry_id)
        return matches[0] if matches else None

    def _segment(self, value: str) -> str:
        # Ids and content types name a single file or directory.
        if not value or value in (".", "..") or "/" in value or "\\" in value or "\x00" in value:
            raise InvalidPathError(value)
        return value

    def _inside(self, path: Path) -> Path:
        if not path.resolve().is_relative_to(self._space_dir.resolve()):
            raise InvalidPathError(str(path))
        return path
