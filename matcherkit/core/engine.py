"""
Evaluation of matchers into result objects.

Hosts that want a value instead of an exception on mismatch, such
as report builders, call ``evaluate``. Usage errors raised by a
matcher are not caught here.
"""

from __future__ import annotations

import logging
from typing import Any

from .base import Matcher
from .models import MatchResult

logger = logging.getLogger(__name__)


def evaluate(item: Any, matcher: Matcher) -> MatchResult:
    """
    Evaluate a matcher against an item.

    Args:
        item: The value to examine
        matcher: The matcher to apply

    Returns:
        MatchResult indicating pass/fail, with mismatch text on failure
    """
    expected = matcher.describe_expectation()

    if matcher.test(item):
        return MatchResult.passed_result(expected=expected, actual=item)

    mismatch = matcher.describe_mismatch(item)
    logger.debug(f"Match failed: expected {expected}, {mismatch}")
    return MatchResult.failed_result(
        expected=expected,
        actual=item,
        mismatch=mismatch,
    )


def matches(item: Any, matcher: Matcher) -> bool:
    """Check whether the item satisfies the matcher."""
    return matcher.test(item)
