"""
Matchers for classes.

The examined item is a class object, e.g. ``type(value)`` or a class
taken from a registry. Names are rendered as ``<module>.<qualname>``,
so ``str`` reads as ``'builtins.str'``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..core.base import Matcher, TypeSafeMatcher
from ..core.models import MatcherUsageError, format_value, qualified_name
from ..integration.hamcrest import to_matcher

logger = logging.getLogger(__name__)


class TypeMatcher(TypeSafeMatcher):
    """Base for matchers that examine a class."""

    accepted_type = type
    accepted_kind = "a class"


@dataclass(frozen=True)
class TypeEquals(TypeMatcher):
    """Exact class identity; subclasses and superclasses do not match."""

    other: type

    def _test_safely(self, item: type) -> bool:
        return item is self.other

    def describe_expectation(self) -> str:
        return f"class should be {format_value(self.other)}"

    def _describe_mismatch_safely(self, item: type) -> str:
        return f"was {format_value(item)}"


@dataclass(frozen=True)
class TypeExtends(TypeMatcher):
    """The class is ``other`` or a subclass of it, ABC registration included."""

    other: type

    def _test_safely(self, item: type) -> bool:
        return issubclass(item, self.other)

    def describe_expectation(self) -> str:
        return f"class should extend/implement {format_value(self.other)}"

    def _describe_mismatch_safely(self, item: type) -> str:
        return (
            f"class {format_value(item)} does not extend/implement "
            f"{format_value(self.other)}"
        )


@dataclass(frozen=True)
class QualifiedNameSatisfies(TypeMatcher):
    matcher: Matcher

    def _test_safely(self, item: type) -> bool:
        return self.matcher.test(qualified_name(item))

    def describe_expectation(self) -> str:
        return f"qualified name, {self.matcher.describe_expectation()}"

    def _describe_mismatch_safely(self, item: type) -> str:
        return self.matcher.describe_mismatch(qualified_name(item))


@dataclass(frozen=True)
class SimpleNameSatisfies(TypeMatcher):
    matcher: Matcher

    def _test_safely(self, item: type) -> bool:
        return self.matcher.test(item.__name__)

    def describe_expectation(self) -> str:
        return f"simple class name, {self.matcher.describe_expectation()}"

    def _describe_mismatch_safely(self, item: type) -> str:
        return self.matcher.describe_mismatch(item.__name__)


def require_class(name: str, value: Any) -> None:
    if not isinstance(value, type):
        logger.warning(f"Rejected {name}={value!r}: not a class")
        raise MatcherUsageError(
            f"{name} must be a class, got {type(value).__name__} {value!r}"
        )


def type_equals(other: type) -> TypeEquals:
    """
    Match a class that is exactly ``other``.

    Inheritance is ignored; use type_extends for that.

    Example::

        assert_that(int, type_equals(int))
        assert_that(bool, is_not(type_equals(int)))
    """
    require_class("other", other)
    return TypeEquals(other)


def type_extends(other: type) -> TypeExtends:
    """
    Match a class that is ``other`` or derives from it.

    Example::

        assert_that(list, type_extends(collections.abc.Sequence))
        assert_that(str, type_extends(str))
    """
    require_class("other", other)
    if getattr(other, "_is_protocol", False) and not getattr(
        other, "_is_runtime_protocol", False
    ):
        logger.warning(f"Rejected other={other!r}: protocol is not runtime checkable")
        raise MatcherUsageError(
            f"{format_value(other)} is a protocol without @runtime_checkable; "
            "subclass checks against it are not possible"
        )
    return TypeExtends(other)


def qualified_name_satisfies(matcher: Any) -> QualifiedNameSatisfies:
    """
    Match a class whose ``<module>.<qualname>`` satisfies ``matcher``.

    Example::

        assert_that(str, qualified_name_satisfies(starts_with("builtins")))
        assert_that(OrderedDict, qualified_name_satisfies("collections.OrderedDict"))
    """
    return QualifiedNameSatisfies(to_matcher(matcher))


def simple_name_satisfies(matcher: Any) -> SimpleNameSatisfies:
    """Match a class whose bare ``__name__`` satisfies ``matcher``."""
    return SimpleNameSatisfies(to_matcher(matcher))
