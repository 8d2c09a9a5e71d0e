"""Error types raised while evaluating type descriptors.

Every error carries the data it was built from as attributes, so callers
can inspect the offending descriptor or value without parsing messages.
"""

from __future__ import annotations

from typing import Any, Literal, TypeAlias

MalformedReason: TypeAlias = Literal["unknown_string", "not_a_descriptor"]


class TypeIsError(TypeError):
    """Base class for all typeis errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedDescriptor(TypeIsError):
    """A descriptor argument is not a well-formed descriptor.

    Always an authoring bug in the caller. ``reason`` tells an unknown tag
    name apart from a value that is not a descriptor at all.
    """

    def __init__(
        self,
        message: str,
        *,
        descriptor: Any,
        reason: MalformedReason,
    ) -> None:
        super().__init__(message)
        self.descriptor = descriptor
        self.reason = reason


class TypeMismatch(TypeIsError):
    """A value does not satisfy a well-formed descriptor.

    Attributes:
        descriptor: The descriptor that was asserted
        value: The offending value
        expected: Rendered descriptor
        actual: Rendered kind of the value
        origin: Name of the operation that made the assertion, if known

    """

    def __init__(
        self,
        message: str,
        *,
        descriptor: Any,
        value: Any,
        expected: str,
        actual: str,
        origin: str | None = None,
    ) -> None:
        super().__init__(message)
        self.descriptor = descriptor
        self.value = value
        self.expected = expected
        self.actual = actual
        self.origin = origin


class InvalidBinding(TypeIsError):
    """A typed reference was pointed at a primitive value."""

    def __init__(self, message: str, *, obj: Any) -> None:
        super().__init__(message)
        self.obj = obj
