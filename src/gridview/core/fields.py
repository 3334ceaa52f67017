"""
Field access and string coercion for opaque host records.

Records may be mappings, dataclasses, named tuples, pydantic models or any
attribute-bearing object. Every stage reads fields through this module so that
lookups and text coercion follow one policy.

Notes:
    - "Own" fields only: mapping keys, named tuple fields, or instance attributes
      (``vars`` plus ``__slots__`` declared anywhere in the class hierarchy).
      Methods and class attributes never count as fields.
    - Coercion never raises: a missing field and ``None`` both become "".
    - Collation approximates a root-locale ``localeCompare``: accents and case
      are ignored at the primary level; lowercase precedes uppercase on ties.
      Characters are grouped as punctuation/symbols, then digits, then letters,
      so ``"{x}"`` sorts before ``"b"`` and ``"@"`` before ``"1"``.

Examples:
    >>> from gridview.core.fields import get_field, to_text, collation_key
    >>> get_field({"name": "Ann"}, "name")
    'Ann'
    >>> to_text(get_field({"name": "Ann"}, "email"))
    ''
    >>> sorted(["cat", "Bob", "Ann"], key=collation_key)
    ['Ann', 'Bob', 'cat']
"""

from __future__ import annotations

import unicodedata
from collections.abc import Mapping
from functools import lru_cache
from typing import Any

__all__ = [
    "MISSING",
    "has_field",
    "get_field",
    "to_text",
    "collation_key",
]


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


@lru_cache(maxsize=256)
def _slot_names(cls: type) -> frozenset[str]:
    names: set[str] = set()
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        names.update(slots)
    return frozenset(names)


def has_field(record: Any, key: str) -> bool:
    """Return True when `record` carries its own field named `key`."""
    if isinstance(record, Mapping):
        return key in record
    if isinstance(record, tuple):
        # Named tuples expose their fields through ``_fields``.
        return key in getattr(type(record), "_fields", ())
    try:
        own = vars(record)
    except TypeError:
        own = {}
    if key in own:
        return True
    # Slots may be declared on any base class, with or without a __dict__.
    return key in _slot_names(type(record)) and hasattr(record, key)


def get_field(record: Any, key: str, default: Any = MISSING) -> Any:
    """
    Read field `key` from a record.

    Args:
        record (Any): Mapping or attribute-bearing object.
        key (str): Field name.
        default (Any): Returned when the record has no such field.

    Returns:
        Any: The raw field value, or `default`.
    """
    if not has_field(record, key):
        return default
    if isinstance(record, Mapping):
        return record[key]
    return getattr(record, key)


def to_text(value: Any) -> str:
    """
    Coerce a field value to text for searching and default sorting.

    Args:
        value (Any): Raw value (possibly MISSING or None).

    Returns:
        str: "" for MISSING/None, otherwise ``str(value)``.
    """
    if value is MISSING or value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def _strip_accents(text: str) -> str:
    decomposed = unicodedata.normalize("NFKD", text)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def _char_class(ch: str) -> int:
    # Root collation groups: whitespace/punctuation/symbols < digits < letters.
    if ch.isalpha():
        return 2
    if ch.isdigit():
        return 1
    return 0


def collation_key(text: str) -> tuple[tuple[tuple[int, str], ...], str, str]:
    """
    Build a sort key giving locale-style ordering of strings.

    Args:
        text (str): Already coerced text.

    Returns:
        tuple: (classed base characters, case-folded text, case-swapped text).

    Notes:
        The primary level pairs each accent-stripped, case-folded character with
        its class, so symbols such as ``{`` or ``~`` sort before digits and
        letters instead of after them by code point. ``swapcase`` as the last
        level puts "ann" before "Ann", matching the lowercase-first tertiary
        ordering of ICU root collation.
    """
    folded = text.casefold()
    primary = tuple((_char_class(c), c) for c in _strip_accents(folded))
    return (primary, folded, text.swapcase())
