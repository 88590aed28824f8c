"""
Container matcher: collection type plus element type.

``container_of_type(list, str)`` matches a list whose elements are all
strings. ``.and_(matcher)`` hands the container, once its types are
confirmed, to further matchers:

    assert_that(["a", "b"], container_of_type(list, str).and_(has_items("a", "b")))
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import Any

from ..core.base import Matcher
from ..core.models import MatcherUsageError, format_value
from ..integration.hamcrest import to_matcher
from .matchers import require_class

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerOfType(Matcher):
    """
    Checks the container type, then each element's type, then any
    chained matchers, stopping at the first failure.

    The container is iterated once per test and again when describing
    a mismatch, so one-shot iterators are not suitable containers.
    """

    container_type: type
    element_type: Any
    matchers: tuple = ()

    def and_(self, matcher: Any) -> ContainerOfType:
        """Also require ``matcher`` on the container once its types check out."""
        return replace(self, matchers=self.matchers + (to_matcher(matcher),))

    def test(self, item: Any) -> bool:
        if not isinstance(item, self.container_type):
            return False
        if self._find_foreign_element(item) is not None:
            return False
        return all(matcher.test(item) for matcher in self.matchers)

    def describe_expectation(self) -> str:
        description = (
            f"a collection of type {format_value(self.container_type)} "
            f"with elements of type {describe_types(self.element_type)}"
        )
        for matcher in self.matchers:
            description += f" and {matcher.describe_expectation()}"
        return description

    def describe_mismatch(self, item: Any) -> str:
        if not isinstance(item, self.container_type):
            return (
                f"given object is not a collection of type "
                f"{format_value(self.container_type)}, was {format_value(type(item))}"
            )

        foreign = self._find_foreign_element(item)
        if foreign is not None:
            index, element = foreign
            return (
                f"found an element that does not match the element type, "
                f"with type {format_value(type(element))} at position {index}"
            )

        for matcher in self.matchers:
            if not matcher.test(item):
                return matcher.describe_mismatch(item)
        return ""

    def _find_foreign_element(self, item: Iterable) -> tuple[int, Any] | None:
        """Return (position, element) of the first element of the wrong type."""
        for index, element in enumerate(item):
            if not isinstance(element, self.element_type):
                logger.debug(
                    f"Element {index} has type {type(element).__name__}, "
                    f"expected {describe_types(self.element_type)}"
                )
                return index, element
        return None


def describe_types(types: Any) -> str:
    """Render a class or tuple of classes."""
    if isinstance(types, tuple):
        return " or ".join(describe_types(t) for t in types)
    return format_value(types)


def is_class_or_classes(value: Any) -> bool:
    """True for a class or a non-empty tuple of classes."""
    if isinstance(value, type):
        return True
    return (
        isinstance(value, tuple)
        and len(value) > 0
        and all(isinstance(t, type) for t in value)
    )


def container_of_type(container_type: type, element_type: Any) -> ContainerOfType:
    """
    Match a collection of ``container_type`` whose elements are all
    instances of ``element_type``.

    Args:
        container_type: An iterable class, e.g. list, set or collections.abc.Sequence
        element_type: A class or tuple of classes, as accepted by isinstance

    Raises:
        MatcherUsageError: If either type argument is unusable

    Example::

        assert_that(["a", "b"], container_of_type(list, str))
        assert_that({1, 2.5}, container_of_type(set, (int, float)))
    """
    require_class("container_type", container_type)
    if not issubclass(container_type, Iterable):
        logger.warning(f"Rejected container_type={container_type!r}: not iterable")
        raise MatcherUsageError(
            f"container_type must be an iterable class, got {format_value(container_type)}"
        )
    if not is_class_or_classes(element_type):
        logger.warning(f"Rejected element_type={element_type!r}")
        raise MatcherUsageError(
            "element_type must be a class or a tuple of classes, "
            f"got {element_type!r}"
        )
    return ContainerOfType(container_type, element_type)
