"""
Offline, read-only content delivery client backed by a local JSON snapshot.
"""

from contentful_local.client import LocalClient, create_client
from contentful_local.domain.errors import (
    ContentError,
    InvalidPathError,
    ReadFailureError,
    UnknownLinkTypeError,
    UnknownLocaleError,
)
from contentful_local.domain.models import ClientConfig, Query

__all__ = [
    "ClientConfig",
    "ContentError",
    "InvalidPathError",
    "LocalClient",
    "Query",
    "ReadFailureError",
    "UnknownLinkTypeError",
    "UnknownLocaleError",
    "create_client",
]
