"""Searching over sorted sequences: medians, binary search and its variants."""

from __future__ import annotations

from collections.abc import Callable, Sequence

__all__ = [
    "median_of_sorted_arrays",
    "search_insert",
    "guess_number",
    "binary_search",
    "next_greatest_letter",
]


def median_of_sorted_arrays(nums1: Sequence[int], nums2: Sequence[int]) -> float:
    """Return the median of the two sequences taken together."""
    merged = sorted([*nums1, *nums2])
    if not merged:
        raise ValueError("median of an empty collection is undefined")
    mid = len(merged) // 2
    if len(merged) % 2:
        return float(merged[mid])
    return (merged[mid - 1] + merged[mid]) / 2.0


def _bisect(nums: Sequence[int], target: int) -> tuple[bool, int]:
    """Binary search; return (found, index) where index is the hit or the insertion point."""
    low, high = 0, len(nums) - 1
    while low <= high:
        mid = (low + high) // 2
        value = nums[mid]
        if value == target:
            return True, mid
        if value > target:
            high = mid - 1
        else:
            low = mid + 1
    return False, low


def search_insert(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or where it would be inserted."""
    return _bisect(nums, target)[1]


def binary_search(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in sorted ``nums``, or -1 if it is absent."""
    found, index = _bisect(nums, target)
    return index if found else -1


def guess_number(n: int, guess: Callable[[int], int]) -> int:
    """Find the picked number in 1..n.

    ``guess(num)`` returns -1 if ``num`` is higher than the pick, 1 if lower, 0 if equal.
    """
    low, high = 1, n
    while low <= high:
        mid = (low + high) // 2
        answer = guess(mid)
        if answer == 0:
            return mid
        if answer < 0:
            high = mid - 1
        else:
            low = mid + 1
    raise ValueError(f"no number in 1..{n} matched the guess oracle")


def next_greatest_letter(letters: Sequence[str], target: str) -> str:
    """Return the smallest letter strictly greater than ``target``, wrapping to the first."""
    if not letters:
        raise ValueError("letters must not be empty")
    first, last = letters[0], letters[-1]
    if target >= last or target < first:
        return first
    low, high = 0, len(letters) - 1
    while low <= high:
        mid = (low + high) // 2
        if letters[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return letters[low]