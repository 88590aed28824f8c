"""
Base matcher interface.

This module defines the abstract base class that all matchers
implement, and the type-safe base used by matchers that only
accept one kind of input.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from .models import format_value

if TYPE_CHECKING:
    from ..integration.hamcrest import HamcrestAdapter


class Matcher(ABC):
    """
    Abstract base class for matchers.

    A matcher decides whether an item is acceptable and can describe
    both what it expects and why a rejected item failed. Matchers hold
    no state beyond their configuration, so one instance may be
    evaluated any number of times.
    """

    @abstractmethod
    def test(self, item: Any) -> bool:
        """
        Decide whether the item matches.

        Args:
            item: The value under examination

        Returns:
            True if the item is accepted
        """
        pass

    @abstractmethod
    def describe_expectation(self) -> str:
        """Describe what a matching item looks like."""
        pass

    @abstractmethod
    def describe_mismatch(self, item: Any) -> str:
        """
        Describe why the item was rejected.

        Only meaningful after ``test(item)`` returned False for the
        same item; implementations do not re-check this.
        """
        pass

    def as_hamcrest(self) -> HamcrestAdapter:
        """Wrap this matcher for use with PyHamcrest's ``assert_that``."""
        from ..integration.hamcrest import HamcrestAdapter

        return HamcrestAdapter(self)

    def __str__(self) -> str:
        return self.describe_expectation()


class IncompleteMatcher(ABC):
    """
    First half of a two-step matcher such as ``of_type(...).and_(...)``.

    Not a matcher: it cannot test anything until ``and_`` supplies the
    second predicate. Passing one where a matcher is expected raises
    MatcherUsageError.
    """

    @abstractmethod
    def and_(self, matcher: Any) -> Matcher:
        """Complete the matcher with the predicate for the narrowed value."""
        pass


class TypeSafeMatcher(Matcher):
    """
    Matcher that only accepts items of one kind.

    Items of any other kind fail the match instead of raising. Subclasses
    set ``accepted_type`` (anything ``isinstance`` accepts), optionally
    ``rejected_types`` to carve exceptions out of it, and a readable
    ``accepted_kind`` for mismatch text.
    """

    accepted_type = object
    rejected_types = ()
    accepted_kind = "an object"

    def accepts(self, item: Any) -> bool:
        return isinstance(item, self.accepted_type) and not isinstance(
            item, self.rejected_types
        )

    def test(self, item: Any) -> bool:
        return self.accepts(item) and self._test_safely(item)

    def describe_mismatch(self, item: Any) -> str:
        if not self.accepts(item):
            return (
                f"was not {self.accepted_kind}, "
                f"was {type(item).__name__} {format_value(item)}"
            )
        return self._describe_mismatch_safely(item)

    @abstractmethod
    def _test_safely(self, item: Any) -> bool:
        pass

    @abstractmethod
    def _describe_mismatch_safely(self, item: Any) -> str:
        pass
