"""
Field values as stored in entries and assets.

A projected field value is one of:

* a scalar (str, number, bool, None) or any plain JSON mapping such as a
  location or rich text document,
* a ``Link`` to another entry or asset,
* a list whose elements are scalars or Links.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict

ENTRY = "Entry"
ASSET = "Asset"


class Link(BaseModel):
    """A typed placeholder referencing another record by id."""

    model_config = ConfigDict(frozen=True)

    link_type: str
    id: str

    @classmethod
    def parse(cls, value: Any) -> Optional["Link"]:
        """Return a Link when ``value`` has the link marker shape, otherwise None."""
        if not isinstance(value, dict):
            return None
        sys = value.get("sys")
        if not isinstance(sys, dict) or sys.get("type") != "Link":
            return None
        return cls(link_type=str(sys.get("linkType")), id=str(sys.get("id")))


FieldValue = Union[Link, List[Any], Any]


def classify(value: Any) -> FieldValue:
    """
    Turn a raw projected value into the tagged form: Link, list of
    (Link | scalar), or the scalar itself.
    """
    link = Link.parse(value)
    if link is not None:
        return link
    if isinstance(value, list):
        return [Link.parse(item) or item for item in value]
    return value


def copy_tree(value: Any) -> Any:
    """
    Structural copy of a JSON tree. Mappings and lists are rebuilt; leaves
    are shared, since JSON leaves are immutable.
    """
    if isinstance(value, dict):
        return {key: copy_tree(item) for key, item in value.items()}
    if isinstance(value, list):
        return [copy_tree(item) for item in value]
    return value


def is_record(value: Any) -> bool:
    return isinstance(value, dict) and "sys" in value


def document_fields(record: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    fields = record.get("fields")
    return fields if isinstance(fields, dict) else None
