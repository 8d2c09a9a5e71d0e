"""Structural validation of descriptors.

This is the only place that decides whether a value is a descriptor. The
evaluator calls into it for the ``"type"`` tag; nothing here calls the
evaluator.
"""

from __future__ import annotations

import types
from typing import Any

from typeis.errors import MalformedDescriptor
from typeis.tags import UNION_TYPES, resolve_tag


def is_nominal(value: Any) -> bool:
    """Return True for classes usable with isinstance.

    Parameterized generics such as ``list[int]`` pass ``isinstance(x, type)``
    but cannot be used for instance checks, so they are rejected.
    """
    return isinstance(value, type) and not isinstance(value, types.GenericAlias)


def is_descriptor(value: Any) -> bool:
    """Return True if the value is a well-formed descriptor.

    Fixed tags in any of their spellings, classes, and lists, tuples,
    sets or frozensets made only of descriptors qualify. Any class is
    accepted as a nominal type. A union that contains itself is not a
    descriptor.
    """
    return _is_descriptor(value, frozenset())


def _is_descriptor(value: Any, path: frozenset[int]) -> bool:
    if resolve_tag(value) is not None:
        return True
    if isinstance(value, UNION_TYPES):
        if id(value) in path:
            return False
        inner = path | {id(value)}
        return all(_is_descriptor(member, inner) for member in value)
    return is_nominal(value)


def find_malformed(value: Any) -> MalformedDescriptor | None:
    """Locate the first malformed leaf of a descriptor.

    Args:
        value: Candidate descriptor

    Returns:
        An error describing the first offending leaf in depth-first
        iteration order, or None if the value is a descriptor. A union
        that contains itself is reported as malformed.

    """
    return _find_malformed(value, frozenset())


def _find_malformed(value: Any, path: frozenset[int]) -> MalformedDescriptor | None:
    if resolve_tag(value) is not None or is_nominal(value):
        return None
    if isinstance(value, UNION_TYPES):
        if id(value) in path:
            kind = type(value).__name__
            msg = f"Expected a type descriptor, got a {kind} containing itself"
            return MalformedDescriptor(msg, descriptor=value, reason="not_a_descriptor")
        inner = path | {id(value)}
        for member in value:
            if (error := _find_malformed(member, inner)) is not None:
                return error
        return None
    return malformed_descriptor(value)


def malformed_descriptor(descriptor: Any) -> MalformedDescriptor:
    """Build the error for a leaf that is not a descriptor."""
    if isinstance(descriptor, str):
        msg = f"Unknown type descriptor string: {descriptor!r}"
        return MalformedDescriptor(msg, descriptor=descriptor, reason="unknown_string")

    from typeis.printer import describe

    msg = f"Expected a type descriptor, got {describe(descriptor)}"
    return MalformedDescriptor(msg, descriptor=descriptor, reason="not_a_descriptor")
