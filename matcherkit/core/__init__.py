"""
Matcher core.

This package provides the matcher interface shared by every
matcher family, the result models and the evaluation helpers.

Usage:
    from matcherkit.core import evaluate
    from matcherkit.arrays import has_exact_length

    result = evaluate(["a", "b"], has_exact_length(3))
    if not result.passed:
        print(result)  # Detailed failure message
"""

# Models
from .models import MatchResult, MatchStatus, MatcherUsageError, qualified_name

# Interface
from .base import IncompleteMatcher, Matcher, TypeSafeMatcher

# Engine
from .engine import evaluate, matches

__all__ = [
    # Models
    "MatchResult",
    "MatchStatus",
    "MatcherUsageError",
    "qualified_name",
    # Interface
    "IncompleteMatcher",
    "Matcher",
    "TypeSafeMatcher",
    # Engine
    "evaluate",
    "matches",
]
