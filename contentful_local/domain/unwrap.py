from typing import Any, Dict, List, Optional

from .values import is_record


def unwrap(value: Any) -> Any:
    """
    Convert the wrapped sys/fields shape into plain values.

    * A collection (has "items") becomes a list of unwrapped items.
    * A record (has "fields") becomes a mapping of field name to value,
      unwrapping nested records and list elements that are records.
    * Anything else becomes None. An unresolved link marker therefore
      unwraps to nothing.

    The input is not modified.
    """
    if not isinstance(value, dict):
        return None
    if "items" in value:
        return unwrap_collection(value)
    if "fields" in value:
        return _unwrap_fields(value.get("fields") or {})
    return None


def unwrap_collection(collection: Dict[str, Any]) -> List[Any]:
    """Unwrap a collection one level deep into a list of plain items."""
    return [unwrap(item) for item in collection.get("items") or []]


def _unwrap_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    return {name: _unwrap_value(value) for name, value in fields.items()}


def _unwrap_value(value: Any) -> Optional[Any]:
    if is_record(value):
        return unwrap(value)
    if isinstance(value, list):
        return [unwrap(item) if is_record(item) else item for item in value]
    return value
