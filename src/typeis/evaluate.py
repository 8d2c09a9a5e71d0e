"""Matching runtime values against descriptors."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from enum import Enum
from typing import Any

from typeis.kinds import (
    is_dense_sequence,
    is_finite,
    is_iterable,
    is_primitive,
    numeric_kind,
)
from typeis.tags import UNDEFINED, Tag, resolve_tag
from typeis.validate import is_descriptor, is_nominal, malformed_descriptor

# =============================================================================
# Tag predicates: value -> bool
# =============================================================================

_TAG_PREDICATES: dict[Tag, Callable[[Any], bool]] = {
    Tag.ANY: lambda v: True,
    Tag.FALSEY: lambda v: not v,
    Tag.TRUTHY: lambda v: bool(v),
    Tag.NULLISH: lambda v: v is None or v is UNDEFINED,
    Tag.NAN: lambda v: numeric_kind(v) is Tag.NAN,
    Tag.FINITE: is_finite,
    Tag.INTEGER: lambda v: numeric_kind(v) is Tag.INTEGER,
    Tag.UINT: lambda v: numeric_kind(v) is Tag.INTEGER and v >= 0,
    Tag.UNDEFINED: lambda v: v is UNDEFINED,
    Tag.NULL: lambda v: v is None,
    Tag.BOOLEAN: lambda v: isinstance(v, bool),
    Tag.NUMBER: lambda v: numeric_kind(v) is not None,
    Tag.STRING: lambda v: isinstance(v, str),
    Tag.BIGINT: lambda v: isinstance(v, int) and not isinstance(v, bool),
    Tag.SYMBOL: lambda v: isinstance(v, Enum),
    Tag.FUNCTION: callable,
    Tag.OBJECT: lambda v: not is_primitive(v),
    Tag.ITERABLE: is_iterable,
    Tag.TYPE: is_descriptor,
}


def matches(descriptor: Any, value: Any) -> bool:
    """Test a value against a descriptor.

    Fixed tags are checked first, then unions (any member matching, in
    iteration order), then nominal types by isinstance. ``Sequence`` is
    checked structurally rather than nominally.

    Args:
        descriptor: The descriptor to test against
        value: Any runtime value

    Returns:
        True if the value satisfies the descriptor

    Raises:
        MalformedDescriptor: If evaluation reaches a leaf that is not a
            descriptor. Union members after the first match are not checked.

    """
    if (tag := resolve_tag(descriptor)) is not None:
        return _TAG_PREDICATES[tag](value)

    match descriptor:
        case list() | tuple() | set() | frozenset():
            return any(matches(member, value) for member in descriptor)
        case _ if descriptor is Sequence:
            return is_dense_sequence(value)
        case _ if is_nominal(descriptor):
            return isinstance(value, descriptor)

    raise malformed_descriptor(descriptor)
