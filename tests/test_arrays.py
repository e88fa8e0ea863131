from collections import Counter

from hypothesis import given, strategies as st

from dailyalgos.arrays import (
    contains_duplicate,
    majority_element,
    majority_element_boyer_moore,
    majority_elements,
    sort_colors,
)

small_ints = st.lists(st.integers(-5, 5))


@given(st.lists(st.integers(0, 2)))
def test_sort_colors_in_place(nums):
    expected = sorted(nums)
    result = sort_colors(nums)
    assert result is None
    assert nums == expected


@given(small_ints)
def test_contains_duplicate_matches_set(nums):
    assert contains_duplicate(nums) == (len(set(nums)) != len(nums))


def test_contains_duplicate_examples():
    assert contains_duplicate([1, 2, 3, 1]) is True
    assert contains_duplicate([1, 2, 3, 4]) is False
    assert contains_duplicate([]) is False


@st.composite
def with_majority(draw):
    value = draw(st.integers(-50, 50))
    others = draw(st.lists(st.integers(-50, 50).filter(lambda x: x != value), max_size=20))
    extra = draw(st.integers(1, 5))
    nums = others + [value] * (len(others) + extra)
    return value, draw(st.permutations(nums))


@given(with_majority())
def test_majority_element_finds_majority(case):
    value, nums = case
    assert majority_element(nums) == value


@given(with_majority())
def test_boyer_moore_finds_majority(case):
    value, nums = case
    assert majority_element_boyer_moore(nums) == value


def test_majority_element_absent_and_empty():
    assert majority_element([1, 2, 3]) == 0
    assert majority_element([]) == 0


def test_boyer_moore_absent_and_empty():
    assert majority_element_boyer_moore([1, 2, 3]) == -1
    assert majority_element_boyer_moore([]) == 0


@given(small_ints)
def test_boyer_moore_agrees_with_counting_when_majority_exists(nums):
    counts = Counter(nums)
    if any(c > len(nums) // 2 for c in counts.values()):
        assert majority_element_boyer_moore(nums) == majority_element(nums)
    else:
        assert majority_element_boyer_moore(nums) in (0, -1)


@given(small_ints)
def test_majority_elements_matches_counts(nums):
    result = majority_elements(nums)
    expected = {x for x, c in Counter(nums).items() if c > len(nums) // 3}
    assert set(result) == expected
    assert len(result) == len(set(result))


def test_majority_elements_examples():
    assert majority_elements([3, 2, 3]) == [3]
    assert majority_elements([1]) == [1]
    assert sorted(majority_elements([1, 2])) == [1, 2]
    assert majority_elements([]) == []