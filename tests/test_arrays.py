from collections import UserList

import pytest
from hamcrest import equal_to, greater_than, less_than

from matcherkit import (
    MatcherUsageError,
    assert_that,
    contains_all,
    element_at,
    evaluate,
    has_exact_length,
    is_not,
    length_satisfies,
)

VALID = ["a", "b", "c"]
NOT_IN_ARRAY = ["d", "e", "f"]
MULTI = [[["a", "b"]]]


# has_exact_length

@pytest.mark.parametrize("array", [[], ["a"], ("a", "b", "c"), range(5), [[1, 2], [3]]])
def test_has_exact_length_of_own_length(array):
    """Test that every array matches its own length and no other."""
    assert has_exact_length(len(array)).test(array)
    assert not has_exact_length(len(array) + 1).test(array)


def test_has_exact_length_descriptions():
    """Test that the mismatch reports the observed length."""
    matcher = has_exact_length(3)
    assert matcher.describe_expectation() == "array length should be 3"
    assert not matcher.test(["a"])
    assert matcher.describe_mismatch(["a"]) == "array length was 1"


@pytest.mark.parametrize("item", ["abc", b"abc", 3, None, {"a": 1}])
def test_has_exact_length_rejects_non_arrays(item):
    """Test that text, bytes and non-sequences fail instead of raising."""
    matcher = has_exact_length(3)
    assert not matcher.test(item)
    assert matcher.describe_mismatch(item).startswith("was not an array")


@pytest.mark.parametrize("length", ["2", 2.0, True, None])
def test_has_exact_length_requires_integer(length):
    """Test that a non-integer length is a usage error."""
    with pytest.raises(MatcherUsageError):
        has_exact_length(length)


# length_satisfies

def test_length_satisfies_with_hamcrest_predicates():
    """Test integer predicates from PyHamcrest against the length."""
    assert_that(["a", "b"], length_satisfies(equal_to(2)))
    assert_that(["a"], is_not(length_satisfies(equal_to(2))))
    assert_that(["a", "b"], length_satisfies(greater_than(1)))
    assert_that(["a"], length_satisfies(less_than(2)))


def test_length_satisfies_wraps_plain_value():
    """Test that a plain integer means equality."""
    assert length_satisfies(2).test(["a", "b"])
    assert not length_satisfies(2).test(["a"])


def test_length_satisfies_delegates_descriptions(accepting, rejecting):
    """Test that descriptions come from the sub-predicate applied to the length."""
    matcher = length_satisfies(rejecting)
    assert matcher.describe_expectation() == "array length, recorded expectation"
    assert not matcher.test(["a", "b"])
    assert matcher.describe_mismatch(["a", "b"]) == "recorded mismatch"
    assert rejecting.calls == [("test", 2), ("describe_mismatch", 2)]

    assert length_satisfies(accepting).test(["a"])
    assert accepting.calls == [("test", 1)]


# element_at

def test_element_at_nested():
    """Test addressing a multi-dimensional array one dimension at a time."""
    assert_that(MULTI, element_at(0, element_at(0, has_exact_length(2))))
    assert_that(MULTI, element_at(0, element_at(0, element_at(0, equal_to("a")))))
    assert_that(MULTI, element_at(0, element_at(0, element_at(1, "b"))))


def test_element_at_wrong_inner_matcher():
    """Test that an inner mismatch is prefixed with the index."""
    matcher = element_at(0, element_at(0, has_exact_length(3)))
    assert_that(MULTI, is_not(matcher))
    assert matcher.describe_mismatch(MULTI) == "[0] [0] array length was 2"


def test_element_at_index_out_of_bound():
    """Test that an index past the end fails and reports the valid range."""
    matcher = element_at(0, element_at(2, has_exact_length(2)))
    assert_that(MULTI, is_not(matcher))
    assert matcher.describe_mismatch(MULTI) == (
        "[0] [2: index is not in range from 0 to 1]"
    )


@pytest.mark.parametrize("index", [-1, -3, 3, 10])
def test_element_at_out_of_range_never_calls_inner(rejecting, index):
    """Test that out-of-range and negative indexes skip the inner matcher."""
    matcher = element_at(index, rejecting)
    assert not matcher.test(VALID)
    assert "index is not in range from 0 to 3" in matcher.describe_mismatch(VALID)
    assert rejecting.calls == []


@pytest.mark.parametrize("index", [0, 1, 2])
def test_element_at_delegates_in_range(accepting, index):
    """Test that a valid index hands exactly that element to the inner matcher."""
    assert element_at(index, accepting).test(VALID)
    assert accepting.calls == [("test", VALID[index])]


def test_element_at_describes_only_after_failure(rejecting):
    """Test that the inner mismatch is described only after a failed test."""
    result = evaluate(VALID, element_at(1, rejecting))
    assert result.failed
    assert result.mismatch == "[1] recorded mismatch"
    assert rejecting.mismatch_was_described_after_failed_test()


def test_element_at_expectation():
    """Test the expectation text."""
    assert element_at(2, has_exact_length(1)).describe_expectation() == (
        "array at 2, array length should be 1"
    )


# contains_all

def test_contains_all_only_one():
    """Test a single expected element."""
    assert_that(VALID, contains_all("a"))


def test_contains_all_same():
    """Test that an array contains all of its own elements."""
    assert_that(VALID, contains_all(*VALID))


def test_contains_all_none():
    """Test that disjoint elements do not match."""
    assert_that(VALID, is_not(contains_all(*NOT_IN_ARRAY)))


@pytest.mark.parametrize("array", [[], ["a"], [None, 1, "x"]])
def test_contains_all_empty_always_passes(array):
    """Test that nothing expected means always matching."""
    assert contains_all().test(array)


def test_contains_all_ignores_duplicates():
    """Test subset semantics over distinct values on both sides."""
    assert contains_all("a", "a", "a").test(["a", "b"])
    assert contains_all("a", "b").test(["b", "b", "a", "a"])
    assert not contains_all("x").test(["a", "b"])


def test_contains_all_unhashable_elements():
    """Test that unhashable elements are compared by equality."""
    array = [{"id": 1}, {"id": 1}, {"id": 2}]
    assert contains_all({"id": 2}).test(array)
    assert not contains_all({"id": 3}).test(array)


def test_contains_all_mismatch_lists_distinct_elements():
    """Test that the mismatch lists each found element once."""
    matcher = contains_all("z")
    assert not matcher.test(["a", "a", "b"])
    assert matcher.describe_mismatch(["a", "a", "b"]) == (
        "following elements are in the array ['a', 'b']"
    )
    assert matcher.describe_expectation() == "must contain following elements ['z']"


@pytest.mark.parametrize(
    "expected",
    [(["a", "b"],), ("a", ("b",)), ([],), (range(3),), ("a", UserList(["b"]))],
)
def test_contains_all_rejects_arrays(expected):
    """Test that array-valued expected items are a usage error, not a mismatch."""
    with pytest.raises(MatcherUsageError, match="cannot check for arrays"):
        contains_all(*expected)


def test_contains_all_accepts_text_items():
    """Test that strings and bytes are elements, not arrays."""
    assert_that(["ab", b"cd"], contains_all("ab", b"cd"))


def test_usage_error_is_value_error():
    """Test that usage errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        contains_all(VALID)
