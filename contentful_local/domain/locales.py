"""
Locale projection.

Stored records keep every field as a map of locale code to value. Projection
reduces each map to the single value for one requested locale, following the
space's fallback chain when the requested locale has no value.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping

from .models import Space
from .values import copy_tree, document_fields


def resolve_locale_value(value_by_locale: Mapping[str, Any], locale_code: str, space: Space) -> Any:
    """
    Return the value stored for ``locale_code``, or for the first locale
    down its fallback chain that has one. Returns None when the chain ends
    without a value.

    Raises UnknownLocaleError if any code on the chain is not a locale of
    ``space``. The fallback chain must be acyclic.
    """
    locale = space.get_locale(locale_code)

    if locale.code in value_by_locale:
        return value_by_locale[locale.code]
    if locale.fallback_code:
        return resolve_locale_value(value_by_locale, locale.fallback_code, space)
    return None


def project_record(record: Dict[str, Any], locale_code: str, space: Space) -> Dict[str, Any]:
    """
    Return a copy of ``record`` with every field reduced to its value in
    ``locale_code``. ``sys`` is left untouched, and documents without
    ``fields`` are copied as they are.
    """
    space.get_locale(locale_code)

    clone = copy_tree(record)
    fields = document_fields(clone)
    if fields is None:
        return clone

    for name, value_by_locale in fields.items():
        # Non-mapping values were stored already projected to one locale.
        if isinstance(value_by_locale, dict):
            fields[name] = resolve_locale_value(value_by_locale, locale_code, space)
    return clone
