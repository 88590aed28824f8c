from typing import Any

import pytest

from matcherkit.core import Matcher


class RecordingMatcher(Matcher):
    """Matcher with a fixed answer that records every call made to it."""

    def __init__(self, accept: bool):
        self.accept = accept
        self.calls: list[tuple[str, Any]] = []

    def test(self, item: Any) -> bool:
        self.calls.append(("test", item))
        return self.accept

    def describe_expectation(self) -> str:
        return "recorded expectation"

    def describe_mismatch(self, item: Any) -> str:
        self.calls.append(("describe_mismatch", item))
        return "recorded mismatch"

    def mismatch_was_described_after_failed_test(self) -> bool:
        """Every describe_mismatch call directly follows a failed test of the same item."""
        for position, (name, item) in enumerate(self.calls):
            if name != "describe_mismatch":
                continue
            if self.accept or position == 0:
                return False
            if self.calls[position - 1] != ("test", item):
                return False
        return True


@pytest.fixture
def accepting():
    """Create a recording matcher that accepts everything."""
    return RecordingMatcher(accept=True)


@pytest.fixture
def rejecting():
    """Create a recording matcher that rejects everything."""
    return RecordingMatcher(accept=False)
