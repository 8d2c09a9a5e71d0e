"""typeis - Runtime type descriptors and type-checked references."""

from typeis.asserts import (
    assert_matches,
)
from typeis.errors import (
    InvalidBinding,
    MalformedDescriptor,
    TypeIsError,
    TypeMismatch,
)
from typeis.evaluate import (
    matches,
)
from typeis.kinds import (
    classify,
    is_primitive,
    numeric_kind,
)
from typeis.printer import (
    describe,
    stringify,
)
from typeis.ref import (
    TypedRef,
)
from typeis.tags import (
    UNDEFINED,
    Tag,
)
from typeis.validate import (
    find_malformed,
    is_descriptor,
)

__all__ = [
    # Tags
    "UNDEFINED",
    "Tag",
    # Classification
    "classify",
    "describe",
    "is_primitive",
    "numeric_kind",
    # Descriptors
    "find_malformed",
    "is_descriptor",
    "stringify",
    # Evaluation
    "assert_matches",
    "matches",
    # References
    "TypedRef",
    # Errors
    "InvalidBinding",
    "MalformedDescriptor",
    "TypeIsError",
    "TypeMismatch",
]
