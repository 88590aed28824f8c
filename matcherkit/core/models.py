"""
Match result models.

This module defines data structures for matcher outcomes,
including the mismatch text of a failed match.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class MatcherUsageError(ValueError):
    """A matcher was constructed or used with invalid arguments.

    Distinct from a mismatch: a mismatch is a normal ``False`` result,
    a usage error means the assertion itself is malformed.
    """


class MatchStatus(str, Enum):
    """Status of a matcher evaluation."""
    PASSED = "passed"
    FAILED = "failed"


@dataclass
class MatchResult:
    """
    Result of evaluating one matcher against one item.

    Attributes:
        status: Whether the item matched
        expected: Expectation text of the matcher
        actual: The item that was examined
        mismatch: Why the item did not match (failed results only)
    """
    status: MatchStatus
    expected: str
    actual: Any = None
    mismatch: str | None = None

    @property
    def passed(self) -> bool:
        return self.status == MatchStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == MatchStatus.FAILED

    def __str__(self) -> str:
        """Format as a human-readable string."""
        if self.status == MatchStatus.PASSED:
            return f"PASS: {self.expected}"

        lines = [f"FAIL: {self.expected}"]
        lines.append(f"   Actual:   {format_value(self.actual)}")
        if self.mismatch:
            lines.append(f"   Mismatch: {self.mismatch}")
        return "\n".join(lines)

    @classmethod
    def passed_result(cls, expected: str, actual: Any = None) -> MatchResult:
        """Create a passing result."""
        return cls(
            status=MatchStatus.PASSED,
            expected=expected,
            actual=actual,
        )

    @classmethod
    def failed_result(
        cls,
        expected: str,
        actual: Any = None,
        mismatch: str | None = None,
    ) -> MatchResult:
        """Create a failing result."""
        return cls(
            status=MatchStatus.FAILED,
            expected=expected,
            actual=actual,
            mismatch=mismatch,
        )


def format_value(value: Any, max_length: int = 100) -> str:
    """Format a value for display, truncating if too long."""
    if isinstance(value, type):
        formatted = repr(qualified_name(value))
    else:
        formatted = repr(value)

    if len(formatted) > max_length:
        return formatted[: max_length - 3] + "..."

    return formatted


def format_values(values: Any) -> str:
    """Format an iterable of values as ``[a, b, c]``."""
    return "[" + ", ".join(format_value(v) for v in values) + "]"


def qualified_name(cls: type) -> str:
    """Return ``<module>.<qualname>`` for a class."""
    return f"{cls.__module__}.{cls.__qualname__}"
