"""
Type-narrowing combinator.

``of_type(type_matcher).and_(matcher)`` first applies ``type_matcher`` to
the class of the examined value. Only when the class is accepted is the
value itself handed to ``matcher``.

The failure text is built for positive use. Negating the result with
PyHamcrest's ``is_not`` works, but the rendered message names the whole
combination rather than the part that matched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..core.base import IncompleteMatcher, Matcher
from ..integration.hamcrest import to_matcher
from .matchers import type_equals

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OfType(Matcher):
    type_matcher: Matcher
    matcher: Matcher

    def narrows(self, item: Any) -> bool:
        return self.type_matcher.test(type(item))

    def test(self, item: Any) -> bool:
        if not self.narrows(item):
            logger.debug(f"Value of type {type(item).__name__} rejected by type matcher")
            return False
        return self.matcher.test(item)

    def describe_expectation(self) -> str:
        return (
            f"{self.type_matcher.describe_expectation()} "
            f"with {self.matcher.describe_expectation()}"
        )

    def describe_mismatch(self, item: Any) -> str:
        if not self.narrows(item):
            return self.type_matcher.describe_mismatch(type(item))
        return self.matcher.describe_mismatch(item)


@dataclass(frozen=True)
class OfTypeBuilder(IncompleteMatcher):
    type_matcher: Matcher

    def and_(self, matcher: Any) -> OfType:
        return OfType(self.type_matcher, to_matcher(matcher))


def of_type(type_matcher: Any) -> OfTypeBuilder:
    """
    Start a matcher that narrows by class before matching the value.

    ``type_matcher`` examines ``type(value)``; a bare class is taken to
    mean ``type_equals(cls)``. The returned builder is not a matcher
    until completed with ``and_``.

    Example::

        assert_that("abc", of_type(type_equals(str)).and_("abc"))
        assert_that("test text", of_type(str).and_(starts_with("test")))
        assert_that(True, of_type(type_extends(int)).and_(1))
    """
    if isinstance(type_matcher, type):
        return OfTypeBuilder(type_equals(type_matcher))
    return OfTypeBuilder(to_matcher(type_matcher))
