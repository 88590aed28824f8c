"""
matcherkit - Array and class matchers for PyHamcrest

This package provides composable matchers for test assertions.

Subpackages:
    - core: Matcher interface, result models and evaluation
    - arrays: Length, element and containment matchers for arrays
    - classes: Class identity/hierarchy matchers and type-narrowing combinators
    - integration: PyHamcrest adapters

Usage:
    from hamcrest import greater_than, starts_with
    from matcherkit import assert_that, element_at, evaluate, length_satisfies, of_type

    assert_that(["a", "b"], length_satisfies(greater_than(1)))
    assert_that([["a", "b"]], element_at(0, element_at(1, "b")))
    assert_that("abcdef", of_type(str).and_(starts_with("abc")))

    # Or check without raising
    result = evaluate(["a"], length_satisfies(greater_than(1)))
    if not result.passed:
        print(result)  # Detailed failure message
"""

__version__ = "0.1.0"

# Re-export core for convenience
from .core import (
    # Models
    MatchResult,
    MatchStatus,
    MatcherUsageError,
    # Interface
    IncompleteMatcher,
    Matcher,
    TypeSafeMatcher,
    # Engine
    evaluate,
    matches,
)

# Re-export arrays for convenience
from .arrays import (
    contains_all,
    element_at,
    has_exact_length,
    length_satisfies,
)

# Re-export classes for convenience
from .classes import (
    container_of_type,
    of_type,
    qualified_name_satisfies,
    simple_name_satisfies,
    type_equals,
    type_extends,
)

# Re-export integration for convenience
from .integration import (
    all_of,
    any_of,
    as_hamcrest,
    assert_that,
    is_not,
    to_matcher,
)

__all__ = [
    # Package info
    "__version__",
    # Core - Models
    "MatchResult",
    "MatchStatus",
    "MatcherUsageError",
    # Core - Interface
    "IncompleteMatcher",
    "Matcher",
    "TypeSafeMatcher",
    # Core - Engine
    "evaluate",
    "matches",
    # Arrays
    "contains_all",
    "element_at",
    "has_exact_length",
    "length_satisfies",
    # Classes
    "container_of_type",
    "of_type",
    "qualified_name_satisfies",
    "simple_name_satisfies",
    "type_equals",
    "type_extends",
    # Integration
    "all_of",
    "any_of",
    "as_hamcrest",
    "assert_that",
    "is_not",
    "to_matcher",
]
