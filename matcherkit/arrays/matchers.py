"""
Matchers for arrays.

An array here is any sequence other than text or bytes: lists,
tuples, ranges and user-defined sequences. Each matcher fails,
rather than raises, when handed something that is not an array.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..core.base import Matcher, TypeSafeMatcher
from ..core.models import MatcherUsageError, format_values
from ..integration.hamcrest import to_matcher

logger = logging.getLogger(__name__)


class ArrayMatcher(TypeSafeMatcher):
    """Base for matchers that examine an array."""

    accepted_type = Sequence
    rejected_types = (str, bytes, bytearray)
    accepted_kind = "an array"


@dataclass(frozen=True)
class HasExactLength(ArrayMatcher):
    length: int

    def _test_safely(self, item: Sequence) -> bool:
        return len(item) == self.length

    def describe_expectation(self) -> str:
        return f"array length should be {self.length}"

    def _describe_mismatch_safely(self, item: Sequence) -> str:
        return f"array length was {len(item)}"


@dataclass(frozen=True)
class LengthSatisfies(ArrayMatcher):
    matcher: Matcher

    def _test_safely(self, item: Sequence) -> bool:
        return self.matcher.test(len(item))

    def describe_expectation(self) -> str:
        return f"array length, {self.matcher.describe_expectation()}"

    def _describe_mismatch_safely(self, item: Sequence) -> str:
        return self.matcher.describe_mismatch(len(item))


@dataclass(frozen=True)
class ElementAt(ArrayMatcher):
    """Applies a matcher to the element at one position of the array."""

    index: int
    matcher: Matcher

    def in_range(self, item: Sequence) -> bool:
        # Negative indexes never wrap around.
        return 0 <= self.index < len(item)

    def _test_safely(self, item: Sequence) -> bool:
        if not self.in_range(item):
            logger.debug(f"Index {self.index} outside array of length {len(item)}")
            return False
        return self.matcher.test(item[self.index])

    def describe_expectation(self) -> str:
        return f"array at {self.index}, {self.matcher.describe_expectation()}"

    def _describe_mismatch_safely(self, item: Sequence) -> str:
        if not self.in_range(item):
            return (
                f"[{self.index}: index is not in range from 0 to {len(item)}]"
            )
        return f"[{self.index}] {self.matcher.describe_mismatch(item[self.index])}"


@dataclass(frozen=True)
class ContainsAll(ArrayMatcher):
    """
    Passes when every expected item occurs somewhere in the array.

    Duplicates are ignored on both sides: this is a subset test over
    distinct values, not a multiset comparison.
    """

    expected_items: tuple

    def _test_safely(self, item: Sequence) -> bool:
        values = distinct(item)
        return all(expected in values for expected in self.expected_items)

    def describe_expectation(self) -> str:
        return f"must contain following elements {format_values(self.expected_items)}"

    def _describe_mismatch_safely(self, item: Sequence) -> str:
        return f"following elements are in the array {format_values(distinct(item))}"


def distinct(items: Sequence) -> list:
    """Return the distinct values of items in first-seen order.

    Unhashable values are compared by equality instead of hash.
    """
    seen: set = set()
    values: list = []
    for value in items:
        try:
            if value in seen:
                continue
            seen.add(value)
        except TypeError:
            if value in values:
                continue
        values.append(value)
    return values


def is_array(value: Any) -> bool:
    return isinstance(value, ArrayMatcher.accepted_type) and not isinstance(
        value, ArrayMatcher.rejected_types
    )


def _require_int(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        logger.warning(f"Rejected {name}={value!r}: not an integer")
        raise MatcherUsageError(
            f"{name} must be an integer, got {type(value).__name__}"
        )


def has_exact_length(length: int) -> HasExactLength:
    """
    Match arrays with exactly ``length`` elements.

    On a nested array this checks the outermost dimension only.

    Example::

        assert_that(["a", "b"], has_exact_length(2))
        assert_that([["a", "b"]], has_exact_length(1))
    """
    _require_int("length", length)
    return HasExactLength(length)


def length_satisfies(matcher: Any) -> LengthSatisfies:
    """
    Match arrays whose length satisfies ``matcher``.

    Useful for soft conditions such as "not empty".

    Example::

        assert_that(["a", "b"], length_satisfies(greater_than(1)))
        assert_that(["a", "b"], length_satisfies(2))
    """
    return LengthSatisfies(to_matcher(matcher))


def element_at(index: int, matcher: Any) -> ElementAt:
    """
    Match arrays whose element at ``index`` satisfies ``matcher``.

    Nest calls to reach into multi-dimensional arrays, one call per
    dimension. An index outside ``[0, len(array))`` fails the match.

    Example::

        grid = [[["a", "b"]]]
        assert_that(grid, element_at(0, element_at(0, has_exact_length(2))))
        assert_that(grid, element_at(0, element_at(0, element_at(0, "a"))))
    """
    _require_int("index", index)
    return ElementAt(index, to_matcher(matcher))


def contains_all(*expected_items: Any) -> ContainsAll:
    """
    Match arrays that contain every one of ``expected_items``.

    Raises:
        MatcherUsageError: If an expected item is itself an array,
            usually a sign that ``contains_all(items)`` was meant to be
            ``contains_all(*items)``

    Example::

        assert_that(["a", "b", "c"], contains_all("a", "c"))
    """
    for expected in expected_items:
        if is_array(expected):
            logger.warning(f"Rejected array-valued expected item {expected!r}")
            raise MatcherUsageError(
                "contains_all cannot check for arrays; "
                "pass the elements themselves, e.g. contains_all(*items)"
            )
    return ContainsAll(tuple(expected_items))
