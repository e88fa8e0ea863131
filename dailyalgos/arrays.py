"""Array routines: in-place sorting, duplicate detection, majority elements."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence

__all__ = [
    "sort_colors",
    "contains_duplicate",
    "majority_element",
    "majority_element_boyer_moore",
    "majority_elements",
]


def sort_colors(nums: list[int]) -> None:
    """Sort ``nums`` in place."""
    nums.sort()


def contains_duplicate(nums: Iterable[int]) -> bool:
    """Return True if any value occurs more than once."""
    seen: set[int] = set()
    for num in nums:
        if num in seen:
            return True
        seen.add(num)
    return False


def majority_element(nums: Sequence[int]) -> int:
    """Return the value occurring more than n/2 times by counting, or 0 if none does."""
    threshold = len(nums) // 2
    for value, count in Counter(nums).items():
        if count > threshold:
            return value
    return 0


def majority_element_boyer_moore(nums: Sequence[int]) -> int:
    """Return the value occurring more than n/2 times by voting.

    Returns 0 for an empty sequence and -1 when no value has a majority.
    """
    if not nums:
        return 0
    candidate = 0
    count = 0
    for num in nums:
        if count == 0:
            candidate = num
        count += 1 if num == candidate else -1
    occurrences = sum(1 for num in nums if num == candidate)
    return candidate if occurrences > len(nums) // 2 else -1


def majority_elements(nums: Sequence[int]) -> list[int]:
    """Return every value occurring more than n/3 times, found by two-candidate voting."""
    n = len(nums)
    if n < 1:
        return []
    candidate1 = candidate2 = 0
    vote1 = vote2 = 0
    for num in nums:
        if candidate1 == num:
            vote1 += 1
        elif candidate2 == num:
            vote2 += 1
        elif vote1 == 0:
            candidate1, vote1 = num, 1
        elif vote2 == 0:
            candidate2, vote2 = num, 1
        else:
            vote1 -= 1
            vote2 -= 1

    vote1 = vote2 = 0
    for num in nums:
        if candidate1 == num:
            vote1 += 1
        elif candidate2 == num:
            vote2 += 1

    result = []
    if vote1 > n // 3:
        result.append(candidate1)
    if vote2 > n // 3:
        result.append(candidate2)
    return result