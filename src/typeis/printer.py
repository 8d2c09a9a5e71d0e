"""Rendering descriptors and value kinds as display strings."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from typeis.kinds import classify, numeric_kind
from typeis.tags import UNION_TYPES, Tag, resolve_tag
from typeis.validate import find_malformed, is_nominal

if TYPE_CHECKING:
    from collections.abc import Iterator


def stringify(descriptor: Any) -> str:
    """Render a descriptor to its canonical display string.

    Classes render their name, fixed tags their canonical name, and unions
    their flattened members as ``<a | b | c>``.

    Raises:
        MalformedDescriptor: If any part of the descriptor is malformed

    """
    if (error := find_malformed(descriptor)) is not None:
        raise error
    return _render(descriptor)


def describe(value: Any) -> str:
    """Render the kind of a value.

    Numbers are refined to ``NaN``, ``int`` or ``number``.
    """
    kind = classify(value)
    if kind is Tag.NUMBER:
        return str(numeric_kind(value))
    return stringify(kind)


def _render(descriptor: Any) -> str:
    if isinstance(descriptor, UNION_TYPES):
        return f"<{' | '.join(_render(leaf) for leaf in _flatten(descriptor))}>"
    if is_nominal(descriptor):
        return descriptor.__name__ or "Anonymous"
    return str(resolve_tag(descriptor))


def _flatten(union: Any) -> Iterator[Any]:
    for member in union:
        if isinstance(member, UNION_TYPES):
            yield from _flatten(member)
        else:
            yield member
