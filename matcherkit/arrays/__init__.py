"""
Array matchers.

Supported matchers:
    - has_exact_length: array has exactly N elements
    - length_satisfies: array length satisfies a sub-predicate
    - element_at: element at an index satisfies a sub-predicate
    - contains_all: array contains every expected element
"""

from .matchers import (
    ArrayMatcher,
    ContainsAll,
    ElementAt,
    HasExactLength,
    LengthSatisfies,
    contains_all,
    element_at,
    has_exact_length,
    length_satisfies,
)

__all__ = [
    # Matchers
    "ArrayMatcher",
    "ContainsAll",
    "ElementAt",
    "HasExactLength",
    "LengthSatisfies",
    # Constructors
    "contains_all",
    "element_at",
    "has_exact_length",
    "length_satisfies",
]
