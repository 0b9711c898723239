from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from pathlib import Path

ENTRIES_DIR = "entries"
ASSETS_DIR = "assets"
ALIAS_DIR = ".all"
SPACE_FILE = "space.json"


class ContentStore(ABC):
    """
    Abstract base class for read access to a cached space snapshot.
    """

    @abstractmethod
    def space_path(self) -> Path:
        """Path of the space metadata document."""
        pass

    @abstractmethod
    def entry_path(self, entry_id: str, content_type: Optional[str] = None) -> Path:
        """
        Path of an entry document.
        Without a content type this is the content-type agnostic alias.
        """
        pass

    @abstractmethod
    def asset_path(self, asset_id: str) -> Path:
        """Path of an asset document."""
        pass

    @abstractmethod
    def collection_dir(self, kind: str, content_type: Optional[str] = None) -> Path:
        """Directory holding every document of a kind ("Entry" or "Asset")."""
        pass

    @abstractmethod
    async def locate_entry(self, entry_id: str, content_type: Optional[str] = None) -> Optional[Path]:
        """Find the document of an entry on disk, or None if it is not stored."""
        pass

    @abstractmethod
    async def read_document(self, path: Path) -> Optional[Dict[str, Any]]:
        """
        Read and parse one JSON document.
        Returns None when the file does not exist.
        """
        pass

    @abstractmethod
    async def read_space(self) -> Dict[str, Any]:
        """Read the space metadata document. Its absence is a read failure."""
        pass

    @abstractmethod
    async def list_documents(self, directory: Path) -> List[Path]:
        """List every JSON document below a directory, in a stable order."""
        pass
