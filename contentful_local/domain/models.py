"""
Pydantic models for the local content delivery client.

This module defines the structured data used throughout the application:
- Client configuration
- Space metadata and its locales
- The query object accepted by every client entry point

Entries and assets themselves stay plain JSON trees (``dict``); only the
parts the engine has to reason about are modelled here.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ConfigDict

from .errors import UnknownLocaleError


# ---------------------------------------------------------------------------
# Client configuration
# ---------------------------------------------------------------------------


class ClientConfig(BaseModel):
    """
    Configuration of a LocalClient. Immutable once the client is built.
    """

    model_config = ConfigDict(frozen=True)

    space: str = Field(
        description="Identifier of the space whose snapshot is served.",
    )
    local_path: Path = Field(
        description="Storage root; the space snapshot lives in <local_path>/<space>.",
    )
    resolve_links: Optional[bool] = Field(
        default=None,
        description="Client-wide default for Query.resolve_links. None means 'resolve'.",
    )


# ---------------------------------------------------------------------------
# Space metadata (space.json)
# ---------------------------------------------------------------------------


class Locale(BaseModel):
    """
    A language/region variant supported by a space.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    code: str
    name: Optional[str] = None
    default: bool = False
    fallback_code: Optional[str] = Field(
        default=None,
        alias="fallbackCode",
        description="Locale consulted when a field has no value for this one.",
    )


class Space(BaseModel):
    """
    Tenant-level configuration document, persisted at <local_path>/<space>/space.json.

    A Space is loaded per request and handed explicitly to the projection and
    link resolution stages.
    """

    model_config = ConfigDict(extra="ignore")

    sys: Dict[str, Any] = Field(default_factory=dict)
    name: Optional[str] = None
    locales: List[Locale] = Field(default_factory=list)

    def get_locale(self, code: Optional[str]) -> Locale:
        for locale in self.locales:
            if locale.code == code:
                return locale
        raise UnknownLocaleError(code)

    @property
    def default_locale(self) -> Locale:
        for locale in self.locales:
            if locale.default:
                return locale
        # A space without a flagged default still answers in its first locale.
        if self.locales:
            return self.locales[0]
        raise UnknownLocaleError(None)


# ---------------------------------------------------------------------------
# Query
# ---------------------------------------------------------------------------


class Query(BaseModel):
    """
    Search parameters accepted by every client entry point.

    All fields are optional. ``skip`` and ``limit`` are accepted for API
    compatibility but collections are never paginated.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    content_type: Optional[str] = None
    locale: Optional[str] = None
    order: Optional[str] = Field(
        default=None,
        description="Comma separated dot-paths; a leading '-' sorts descending.",
    )
    include: Optional[int] = Field(
        default=None,
        description="Number of link levels to resolve (0-10).",
    )
    resolve_links: Optional[bool] = Field(default=None, alias="resolveLinks")
    select: Optional[str] = None
    skip: Optional[int] = None
    limit: Optional[int] = None
