"""
Host framework integration.

Bridges toolkit matchers and PyHamcrest matchers in both directions.
"""

from .hamcrest import (
    HamcrestAdapter,
    HamcrestPredicate,
    all_of,
    any_of,
    as_hamcrest,
    assert_that,
    is_not,
    to_matcher,
)

__all__ = [
    "HamcrestAdapter",
    "HamcrestPredicate",
    "all_of",
    "any_of",
    "as_hamcrest",
    "assert_that",
    "is_not",
    "to_matcher",
]
