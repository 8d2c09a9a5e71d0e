"""Fixed descriptor tags and the aliases that resolve to them."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, StrEnum
from typing import Any, ClassVar, Final


class _Undefined:
    """Marker for a property that holds no value at all.

    Distinct from None, which stands for an explicit null value.
    """

    __slots__ = ()
    _instance: ClassVar[_Undefined | None] = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()


class Tag(StrEnum):
    """Fixed descriptor tags. Each value is the tag's canonical name."""

    ANY = "any"
    FALSEY = "falsey"
    TRUTHY = "truthy"
    NULLISH = "nullish"
    NAN = "NaN"
    FINITE = "finite"
    INTEGER = "int"
    UINT = "uint"
    UNDEFINED = "undefined"
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    BIGINT = "bigint"
    SYMBOL = "symbol"
    FUNCTION = "function"
    OBJECT = "object"
    ITERABLE = "iterable"
    TYPE = "type"


# Every string spelling of a tag, canonical names included.
_NAMES: dict[str, Tag] = {
    **{tag.value: tag for tag in Tag},
    "": Tag.ANY,
    "*": Tag.ANY,
    "!": Tag.FALSEY,
    "!!": Tag.TRUTHY,
    "integer": Tag.INTEGER,
    "iter": Tag.ITERABLE,
}

# Wrapper classes standing in for a primitive kind.
_TWINS: dict[type, Tag] = {
    bool: Tag.BOOLEAN,
    float: Tag.NUMBER,
    str: Tag.STRING,
    int: Tag.BIGINT,
    Enum: Tag.SYMBOL,
    Callable: Tag.FUNCTION,  # type: ignore[dict-item]
    object: Tag.OBJECT,
}

# Values compared by identity: True == 1 must not resolve to a tag.
_SINGLETONS: tuple[tuple[object, Tag], ...] = (
    (True, Tag.TRUTHY),
    (False, Tag.FALSEY),
    (None, Tag.NULL),
    (UNDEFINED, Tag.UNDEFINED),
    (iter, Tag.ITERABLE),
)

# Containers read as unions of their members.
UNION_TYPES: Final = (list, tuple, set, frozenset)


def resolve_tag(descriptor: Any) -> Tag | None:
    """Resolve a descriptor to its fixed tag, or None if it is not one.

    Args:
        descriptor: Any candidate descriptor

    Returns:
        The matching Tag, or None for unions, nominal types and
        anything unrecognized

    """
    if isinstance(descriptor, str):
        return _NAMES.get(descriptor)
    if isinstance(descriptor, type):
        return _TWINS.get(descriptor)
    for value, tag in _SINGLETONS:
        if descriptor is value:
            return tag
    return None


def tag_aliases(tag: Tag) -> tuple[object, ...]:
    """Return every descriptor form that resolves to the given tag."""
    names = tuple(name for name, t in _NAMES.items() if t is tag)
    twins = tuple(cls for cls, t in _TWINS.items() if t is tag)
    singles = tuple(value for value, t in _SINGLETONS if t is tag)
    return names + twins + singles
