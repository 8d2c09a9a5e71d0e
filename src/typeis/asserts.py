"""Asserting that values match descriptors."""

from __future__ import annotations

from typing import Any, TypeVar

from typeis.errors import TypeMismatch
from typeis.evaluate import matches
from typeis.printer import describe, stringify
from typeis.validate import find_malformed

T = TypeVar("T")

DEFAULT_MESSAGE = "Expected a value that is"


def assert_matches(
    descriptor: Any,
    value: T,
    message: str | None = None,
    *,
    origin: str | None = None,
) -> T:
    """Return a value unchanged if it matches a descriptor, else raise.

    Args:
        descriptor: The descriptor the value must satisfy
        value: The value to check; returned as-is, never copied or coerced
        message: Prefix for the mismatch message (default
            "Expected a value that is")
        origin: Name of the calling operation, recorded on the error

    Returns:
        The value itself

    Raises:
        MalformedDescriptor: If the descriptor is malformed. Checked before
            the value is looked at.
        TypeMismatch: If the value does not match. The message reads
            ``"{message}: {descriptor}; got {kind}"``.

    Example:
        port = assert_matches("uint", config["port"])

    """
    if (error := find_malformed(descriptor)) is not None:
        raise error

    if matches(descriptor, value):
        return value

    expected = stringify(descriptor)
    actual = describe(value)
    msg = f"{message or DEFAULT_MESSAGE}: {expected}; got {actual}"
    raise TypeMismatch(
        msg,
        descriptor=descriptor,
        value=value,
        expected=expected,
        actual=actual,
        origin=origin,
    )
