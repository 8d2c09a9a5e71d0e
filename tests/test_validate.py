"""Tests for typeis.validate module."""

from collections.abc import Sequence

from typeis import UNDEFINED, MalformedDescriptor, Tag, find_malformed, is_descriptor
from typeis.tags import tag_aliases
from typeis.validate import is_nominal


class Point:
    """A user class used as a nominal type."""


class TestIsDescriptor:
    """Test recognizing well-formed descriptors."""

    def test_every_tag_spelling(self) -> None:
        """Test that every spelling of every tag is a descriptor."""
        for tag in Tag:
            for alias in tag_aliases(tag):
                assert is_descriptor(alias), alias

    def test_nan_and_nullish(self) -> None:
        """Test the refinement tags."""
        assert is_descriptor("NaN")
        assert is_descriptor("nullish")
        assert is_descriptor("type")

    def test_nominal_types(self) -> None:
        """Test that any class is accepted."""
        assert is_descriptor(Point)
        assert is_descriptor(list)
        assert is_descriptor(Sequence)

    def test_unions(self) -> None:
        """Test lists, tuples, sets and frozensets of descriptors."""
        assert is_descriptor([str, None])
        assert is_descriptor((int, "NaN"))
        assert is_descriptor({str, Point})
        assert is_descriptor(frozenset({"finite", "null"}))
        assert is_descriptor([str, [None, {Point}]])

    def test_empty_union(self) -> None:
        """Test that an empty union is a descriptor."""
        assert is_descriptor([])
        assert is_descriptor(set())

    def test_rejects_plain_values(self) -> None:
        """Test values that are not descriptors."""
        assert not is_descriptor(5)
        assert not is_descriptor(1)
        assert not is_descriptor(3.5)
        assert not is_descriptor("bogus")
        assert not is_descriptor({})
        assert not is_descriptor(Point())

    def test_rejects_functions(self) -> None:
        """Test that plain functions are not nominal types."""
        assert not is_descriptor(len)
        assert not is_descriptor(lambda: None)

    def test_rejects_union_with_bad_member(self) -> None:
        """Test that one bad member spoils the whole union."""
        assert not is_descriptor([str, 5])
        assert not is_descriptor([str, ["bogus"]])

    def test_rejects_generic_alias(self) -> None:
        """Test that parameterized generics are rejected."""
        assert not is_nominal(list[int])
        assert not is_descriptor(list[int])


class TestFindMalformed:
    """Test locating malformed leaves."""

    def test_valid_descriptor(self) -> None:
        """Test that valid descriptors yield no error."""
        assert find_malformed([str, None, UNDEFINED]) is None

    def test_unknown_string(self) -> None:
        """Test the unknown-string case."""
        error = find_malformed("bogus")
        assert isinstance(error, MalformedDescriptor)
        assert error.reason == "unknown_string"
        assert error.descriptor == "bogus"
        assert str(error) == "Unknown type descriptor string: 'bogus'"

    def test_not_a_descriptor(self) -> None:
        """Test the not-a-descriptor case."""
        error = find_malformed(5)
        assert isinstance(error, MalformedDescriptor)
        assert error.reason == "not_a_descriptor"
        assert str(error) == "Expected a type descriptor, got int"

    def test_reports_first_bad_leaf(self) -> None:
        """Test that the nested offending leaf is named."""
        error = find_malformed([str, [None, "nope"], 5])
        assert error is not None
        assert error.descriptor == "nope"

    def test_object_leaf_named_by_class(self) -> None:
        """Test the message for an instance used as a descriptor."""
        error = find_malformed([Point()])
        assert error is not None
        assert error.message == "Expected a type descriptor, got Point"


class TestCyclicUnions:
    """Test unions that contain themselves."""

    def test_is_descriptor_rejects_cycle(self) -> None:
        """Test that a self-containing union is not a descriptor."""
        descriptor: list[object] = ["number"]
        descriptor.append(descriptor)
        assert not is_descriptor(descriptor)
        assert not is_descriptor([str, descriptor])

    def test_find_malformed_reports_cycle(self) -> None:
        """Test that a self-containing union is reported as malformed."""
        descriptor: list[object] = ["number"]
        descriptor.append(descriptor)
        error = find_malformed(descriptor)
        assert isinstance(error, MalformedDescriptor)
        assert error.reason == "not_a_descriptor"
        assert error.descriptor is descriptor
        assert str(error) == "Expected a type descriptor, got a list containing itself"

    def test_repeated_member_is_not_a_cycle(self) -> None:
        """Test that sharing one union in two places is allowed."""
        shared = [str, None]
        assert is_descriptor([shared, shared])
        assert find_malformed((shared, [shared])) is None
