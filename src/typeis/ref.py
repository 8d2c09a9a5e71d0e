"""Type-checked references to a property of an object."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Generic, TypeVar

from typeis.asserts import assert_matches
from typeis.errors import InvalidBinding
from typeis.evaluate import matches
from typeis.kinds import is_dense_sequence, is_primitive
from typeis.printer import describe, stringify
from typeis.tags import UNDEFINED, Tag
from typeis.validate import find_malformed


T = TypeVar("T")


class TypedRef(Generic[T]):
    """Typed, observable view of one property of an object.

    The descriptor is fixed at construction and checked on every read and
    write. The property is looked up fresh each time, so changes made to
    the object behind the reference's back are seen (and rejected on read
    if they violate the descriptor). Mappings and sequences are accessed by
    item, all other objects by attribute. A missing property, including an
    out-of-range sequence index, reads as UNDEFINED.

    Example:
        settings = {"retries": 3}
        retries = TypedRef("uint", settings, "retries")
        retries.observe(print)
        retries.write(5)   # prints 5
        retries.write(-1)  # raises TypeMismatch, settings unchanged

    """

    def __init__(self, descriptor: Any, obj: Any, prop: Any) -> None:
        """Bind a descriptor to ``obj[prop]`` or ``obj.prop``.

        Raises:
            MalformedDescriptor: If the descriptor is malformed
            InvalidBinding: If obj is a primitive value

        """
        if (error := find_malformed(descriptor)) is not None:
            raise error
        self._type = descriptor
        self._observers: list[Callable[[T], Any]] = []
        self.obj = obj
        self.prop = prop

    @property
    def type(self) -> Any:
        """The bound descriptor."""
        return self._type

    @property
    def type_name(self) -> str:
        """The bound descriptor rendered for display."""
        return stringify(self._type)

    @property
    def obj(self) -> Any:
        """The object holding the property."""
        return self._obj

    @obj.setter
    def obj(self, obj: Any) -> None:
        if is_primitive(obj):
            msg = f"Expected an object, got {describe(obj)}"
            raise InvalidBinding(msg, obj=obj)
        self._obj = obj

    def get_type(self) -> Any:
        """Return the bound descriptor."""
        return self._type

    def get_object(self) -> Any:
        """Return the object holding the property."""
        return self._obj

    def set_object(self, obj: Any) -> None:
        """Rebind to another object.

        The new object's property is not checked until the next read or
        write.

        Raises:
            InvalidBinding: If obj is a primitive value

        """
        self.obj = obj

    def read(self) -> T:
        """Return the current property value.

        Raises:
            TypeMismatch: If the value no longer matches the descriptor

        """
        return assert_matches(self._type, self._current(), origin="TypedRef.read")

    def write(self, value: T) -> None:
        """Assign the property, then notify observers in registration order.

        Nothing is assigned and no observer runs if the value does not
        match. An exception from an observer propagates immediately and
        the remaining observers are skipped.

        Raises:
            TypeMismatch: If the value does not match the descriptor
            InvalidBinding: If obj is a sequence and prop is not an index
                within it

        """
        value = assert_matches(self._type, value, origin="TypedRef.write")
        if isinstance(self._obj, Mapping):
            self._obj[self.prop] = value  # type: ignore[index]
        elif is_dense_sequence(self._obj):
            if not _in_range(self._obj, self.prop):
                msg = f"Expected an index into {describe(self._obj)}, got {self.prop!r}"
                raise InvalidBinding(msg, obj=self._obj)
            self._obj[self.prop] = value
        else:
            setattr(self._obj, self.prop, value)

        for callback in self._observers:
            callback(value)

    @property
    def value(self) -> T:
        """Checked property value; see read and write."""
        return self.read()

    @value.setter
    def value(self, value: T) -> None:
        self.write(value)

    def matches_additional(self, *descriptors: Any) -> bool:
        """Test the raw property value against extra descriptors.

        The value is not checked against the bound descriptor first. Several
        descriptors are treated as a union.
        """
        return matches(_join(descriptors), self._current())

    def assert_additional(self, *descriptors: Any) -> T:
        """Read the property and assert it also matches extra descriptors.

        Raises:
            TypeMismatch: If the value fails the bound descriptor or the
                extra ones

        """
        return assert_matches(
            _join(descriptors),
            self.read(),
            origin="TypedRef.assert_additional",
        )

    def observe(self, callback: Callable[[T], Any]) -> TypedRef[T]:
        """Register a callback run with each newly written value.

        There is no way to unregister a callback.

        Returns:
            This reference, for chaining

        Raises:
            TypeMismatch: If callback is not callable

        """
        self._observers.append(
            assert_matches(Callable, callback, origin="TypedRef.observe"),
        )
        return self

    @classmethod
    def optional(cls, descriptor: Any, obj: Any, prop: Any) -> Any:
        """Wrap obj unless it is already a reference or nullish.

        An existing TypedRef is returned as-is, even when its descriptor
        differs from the one requested. None and UNDEFINED are returned
        as-is so absence propagates instead of being wrapped.

        Raises:
            TypeMismatch: If obj is some other primitive value

        """
        assert_matches(
            [TypedRef, Tag.NULLISH, Tag.OBJECT],
            obj,
            origin="TypedRef.optional",
        )
        # TODO: check the existing reference's descriptor against the requested one
        if isinstance(obj, TypedRef):
            return obj
        if obj is None or obj is UNDEFINED:
            return obj
        return cls(descriptor, obj, prop)

    def _current(self) -> Any:
        if isinstance(self._obj, Mapping):
            return self._obj.get(self.prop, UNDEFINED)
        if is_dense_sequence(self._obj):
            if not _in_range(self._obj, self.prop):
                return UNDEFINED
            return self._obj[self.prop]
        return getattr(self._obj, self.prop, UNDEFINED)

    def __str__(self) -> str:
        value = self.read()
        to_json = getattr(value, "to_json", None)
        rendered = to_json() if callable(to_json) else value
        return f"*{self.type_name}[{self.prop}] = {rendered}"

    def __repr__(self) -> str:
        return f"TypedRef({self.type_name}, prop={self.prop!r})"


def _join(descriptors: tuple[Any, ...]) -> Any:
    if len(descriptors) == 1:
        return descriptors[0]
    return list(descriptors)


def _in_range(seq: Any, index: Any) -> bool:
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return -len(seq) <= index < len(seq)
