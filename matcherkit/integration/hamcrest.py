"""
PyHamcrest integration.

Toolkit matchers speak plain strings; PyHamcrest speaks
``Description`` objects. This module converts in both directions:

    - HamcrestAdapter: a toolkit matcher usable with ``hamcrest.assert_that``,
      ``is_not``, ``all_of`` and friends
    - HamcrestPredicate: a PyHamcrest matcher (``greater_than``,
      ``starts_with``, ...) usable as a toolkit sub-predicate

PyHamcrest's own ``is_not``/``all_of``/``any_of`` treat an unknown
object as a value to compare with ``equal_to``, so toolkit matchers
must be adapted first; the same-named helpers here do that and pass
any other argument through untouched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from hamcrest import all_of as hamcrest_all_of
from hamcrest import any_of as hamcrest_any_of
from hamcrest import assert_that as hamcrest_assert_that
from hamcrest import is_not as hamcrest_is_not
from hamcrest.core.base_matcher import BaseMatcher
from hamcrest.core.description import Description
from hamcrest.core.helpers.wrap_matcher import wrap_matcher
from hamcrest.core.matcher import Matcher as HamcrestMatcher
from hamcrest.core.string_description import StringDescription

from ..core.base import IncompleteMatcher, Matcher
from ..core.models import MatcherUsageError

logger = logging.getLogger(__name__)


class HamcrestAdapter(BaseMatcher):
    """Exposes a toolkit matcher through the PyHamcrest matcher protocol."""

    def __init__(self, matcher: Matcher):
        self.matcher = matcher

    def _matches(self, item: Any) -> bool:
        return self.matcher.test(item)

    def describe_to(self, description: Description) -> None:
        description.append_text(self.matcher.describe_expectation())

    def describe_mismatch(self, item: Any, mismatch_description: Description) -> None:
        mismatch_description.append_text(self.matcher.describe_mismatch(item))


@dataclass(frozen=True)
class HamcrestPredicate(Matcher):
    """Exposes a PyHamcrest matcher through the toolkit matcher interface."""

    matcher: HamcrestMatcher

    def test(self, item: Any) -> bool:
        return self.matcher.matches(item)

    def describe_expectation(self) -> str:
        return str(StringDescription().append_description_of(self.matcher))

    def describe_mismatch(self, item: Any) -> str:
        description = StringDescription()
        self.matcher.describe_mismatch(item, description)
        return str(description)


def to_matcher(value: Any) -> Matcher:
    """
    Coerce a sub-predicate argument into a toolkit matcher.

    Toolkit matchers pass through, adapted toolkit matchers are
    unwrapped, PyHamcrest matchers are wrapped, and any other value
    becomes an ``equal_to`` match on that value.
    """
    _reject_incomplete(value)
    if isinstance(value, Matcher):
        return value
    if isinstance(value, HamcrestAdapter):
        return value.matcher
    return HamcrestPredicate(wrap_matcher(value))


def as_hamcrest(matcher: Any) -> HamcrestMatcher:
    """Return a PyHamcrest matcher for a toolkit matcher or PyHamcrest matcher."""
    _reject_incomplete(matcher)
    if isinstance(matcher, Matcher):
        return HamcrestAdapter(matcher)
    return wrap_matcher(matcher)


def _reject_incomplete(value: Any) -> None:
    if isinstance(value, IncompleteMatcher):
        logger.warning(f"Incomplete matcher used without and_(): {value!r}")
        raise MatcherUsageError(
            f"{type(value).__name__} is not a matcher; complete it with .and_(...)"
        )


def _adapt(value: Any) -> Any:
    """Adapt toolkit matchers; leave everything else for PyHamcrest to interpret."""
    _reject_incomplete(value)
    if isinstance(value, Matcher):
        return HamcrestAdapter(value)
    return value


def is_not(matcher: Any) -> HamcrestMatcher:
    """PyHamcrest's ``is_not`` over a toolkit matcher, PyHamcrest matcher, class or value."""
    return hamcrest_is_not(_adapt(matcher))


def all_of(*matchers: Any) -> HamcrestMatcher:
    """PyHamcrest's ``all_of`` over toolkit or PyHamcrest matchers."""
    return hamcrest_all_of(*(_adapt(m) for m in matchers))


def any_of(*matchers: Any) -> HamcrestMatcher:
    """PyHamcrest's ``any_of`` over toolkit or PyHamcrest matchers."""
    return hamcrest_any_of(*(_adapt(m) for m in matchers))


def assert_that(actual: Any, matcher: Any, reason: str = "") -> None:
    """
    Assert that ``actual`` satisfies ``matcher``.

    Accepts toolkit matchers as well as anything PyHamcrest accepts;
    failure reporting is PyHamcrest's own.

    Raises:
        AssertionError: If the match fails
    """
    hamcrest_assert_that(actual, _adapt(matcher), reason)
