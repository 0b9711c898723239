from __future__ import annotations

import functools
from typing import Any, Callable, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict

_ABSENT = object()


class OrderKey(BaseModel):
    """One dot-path of an order expression and its direction."""

    model_config = ConfigDict(frozen=True)

    path: Tuple[str, ...]
    descending: bool = False


def parse_order(order: Optional[str]) -> List[OrderKey]:
    """
    Parse an order expression such as "sys.createdAt,-fields.lives".
    """
    keys: List[OrderKey] = []
    for part in (order or "").split(","):
        part = part.strip()
        descending = part.startswith("-")
        if descending:
            part = part[1:].strip()
        if not part:
            continue
        keys.append(OrderKey(path=tuple(part.split(".")), descending=descending))
    return keys


def value_at_path(obj: Any, path: Sequence[str]) -> Any:
    """
    Walk a dot-path through nested mappings. Missing segments and JSON nulls
    both yield the absent marker.
    """
    current = obj
    for segment in path:
        if not isinstance(current, dict) or segment not in current:
            return _ABSENT
        current = current[segment]
    return _ABSENT if current is None else current


def _type_rank(value: Any) -> Tuple[int, str]:
    # Numbers before strings before everything else, grouped by type name.
    if isinstance(value, (int, float)):
        return (0, "")
    if isinstance(value, str):
        return (1, "")
    return (2, type(value).__name__)


def compare_values(a: Any, b: Any) -> int:
    a_rank, b_rank = _type_rank(a), _type_rank(b)
    if a_rank != b_rank:
        return 1 if a_rank > b_rank else -1
    # Values of one type without a natural order between them (mappings) tie.
    try:
        if a > b:
            return 1
        if a < b:
            return -1
    except TypeError:
        pass
    return 0


def compare_by_key(key: OrderKey) -> Callable[[Any, Any], int]:
    direction = -1 if key.descending else 1

    def compare(a: Any, b: Any) -> int:
        a_value = value_at_path(a, key.path)
        b_value = value_at_path(b, key.path)

        if a_value is _ABSENT and b_value is _ABSENT:
            return 0
        if a_value is _ABSENT:
            return -1 * direction
        if b_value is _ABSENT:
            return 1 * direction
        return compare_values(a_value, b_value) * direction

    return compare


def sort_records(records: List[Any], order: Optional[str]) -> List[Any]:
    """
    Sort records by an order expression.

    Keys apply left to right; the first one that tells two records apart
    decides. Absent values (missing or null) sort first ascending and last
    descending. Records tying on every key keep their input order. An empty
    expression returns ``records`` unchanged.
    """
    keys = parse_order(order)
    if not keys:
        return records

    comparators = [compare_by_key(key) for key in keys]

    def compare(a: Any, b: Any) -> int:
        for comparator in comparators:
            result = comparator(a, b)
            if result:
                return result
        return 0

    return sorted(records, key=functools.cmp_to_key(compare))
