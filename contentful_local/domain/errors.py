from __future__ import annotations

from pathlib import Path
from typing import Optional


class ContentError(Exception):
    """Base class for failures raised while answering a content query."""


class ReadFailureError(ContentError):
    """
    A stored document could not be read or parsed.

    A missing single document is not a failure (lookups return None);
    everything else coming out of the filesystem or the JSON decoder is.
    """

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class UnknownLocaleError(ContentError):
    def __init__(self, code: Optional[str]):
        self.code = code
        super().__init__(f"Unknown locale: {code}")


class UnknownLinkTypeError(ContentError):
    def __init__(self, link_type: Optional[str]):
        self.link_type = link_type
        super().__init__(f"Unknown link type: {link_type}")


class InvalidPathError(ContentError):
    """An id or content type that would address a file outside the space."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid id or content type: {value!r}")
