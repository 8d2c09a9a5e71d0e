"""Classification of runtime values into their most specific kind."""

from __future__ import annotations

import math
from collections.abc import Mapping
from typing import Any

from typeis.tags import UNDEFINED, Tag

# Exact classes whose instances count as primitives. Subclass instances are
# objects, the same way a boxed primitive is.
_PRIMITIVE_KINDS: dict[type, Tag] = {
    bool: Tag.BOOLEAN,
    int: Tag.NUMBER,
    float: Tag.NUMBER,
    str: Tag.STRING,
}


def classify(value: Any) -> Tag | type:
    """Derive the most specific descriptor for a value.

    Returns:
        A primitive kind Tag for None, UNDEFINED and plain bool, int,
        float and str values; the value's class for everything else

    """
    if value is None:
        return Tag.NULL
    if value is UNDEFINED:
        return Tag.UNDEFINED
    return _PRIMITIVE_KINDS.get(type(value), type(value))


def is_primitive(value: Any) -> bool:
    """Return True if the value classifies as a primitive kind."""
    return isinstance(classify(value), Tag)


def numeric_kind(value: Any) -> Tag | None:
    """Refine a number into NaN, integer or plain number.

    Integral floats count as integers. Returns None for anything that is
    not an int or float, bools included.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, int):
        return Tag.INTEGER
    if math.isnan(value):
        return Tag.NAN
    if value.is_integer():
        return Tag.INTEGER
    return Tag.NUMBER


def is_finite(value: Any) -> bool:
    """Return True for numbers that are neither NaN nor infinite."""
    kind = numeric_kind(value)
    # ints never overflow here; math.isfinite would for huge ones
    return kind is Tag.INTEGER or (kind is Tag.NUMBER and math.isfinite(value))


def is_iterable(value: Any) -> bool:
    """Return True if the value's class exposes a callable ``__iter__``."""
    if value is None or value is UNDEFINED:
        return False
    return callable(getattr(type(value), "__iter__", None))


def is_dense_sequence(value: Any) -> bool:
    """Structural check for an indexed sequence.

    Unlike ``isinstance(value, Sequence)`` this accepts classes that
    implement the protocol without registering with the ABC. Text, bytes
    and mappings are excluded.
    """
    if isinstance(value, (str, bytes, bytearray, Mapping)):
        return False
    cls = type(value)
    return callable(getattr(cls, "__len__", None)) and callable(
        getattr(cls, "__getitem__", None),
    )
