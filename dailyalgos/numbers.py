"""Integer and bit-level routines: powers, bit counts, bit reversal."""

from __future__ import annotations

__all__ = [
    "power",
    "hamming_weight",
    "is_power_of_two",
    "is_power_of_two_recursive",
    "reverse_bits",
    "is_power_of_three",
    "is_power_of_four",
]

_UINT32_MAX = 0xFFFFFFFF


def _power_nonneg(x: float, n: int) -> float:
    if n < 1:
        return 1.0
    half = _power_nonneg(x, n // 2)
    square = half * half
    return square if n % 2 == 0 else square * x


def power(x: float, n: int) -> float:
    """Return ``x`` raised to the integer ``n`` by repeated squaring."""
    if n < 0:
        return _power_nonneg(1 / x, -n)
    return _power_nonneg(x, n)


def hamming_weight(n: int) -> int:
    """Return the number of set bits in a non-negative integer."""
    if n < 0:
        raise ValueError("hamming weight is defined for non-negative integers")
    return n.bit_count()


def is_power_of_two(n: int) -> bool:
    """Return True if ``n`` is a positive power of two."""
    return n > 0 and not (n & (n - 1))


def is_power_of_two_recursive(n: int, ones: int = 0) -> bool:
    """Return True if ``n`` has exactly one set bit, counting bits one shift at a time.

    ``ones`` is the number of set bits already seen.
    """
    while True:
        if ones > 1:
            return False
        if n == 0:
            return ones == 1
        ones += n & 1
        n >>= 1


def reverse_bits(n: int) -> int:
    """Reverse the bits of a 32-bit unsigned integer."""
    if not 0 <= n <= _UINT32_MAX:
        raise ValueError("value must fit in 32 unsigned bits")
    n = ((n & 0xFFFF0000) >> 16) | ((n & 0x0000FFFF) << 16)
    n = ((n & 0xFF00FF00) >> 8) | ((n & 0x00FF00FF) << 8)
    n = ((n & 0xF0F0F0F0) >> 4) | ((n & 0x0F0F0F0F) << 4)
    n = ((n & 0xCCCCCCCC) >> 2) | ((n & 0x33333333) << 2)
    n = ((n & 0xAAAAAAAA) >> 1) | ((n & 0x55555555) << 1)
    return n & _UINT32_MAX


def is_power_of_three(n: int) -> bool:
    """Return True if ``n`` is a positive power of three."""
    if n <= 0:
        return False
    while n % 3 == 0:
        n //= 3
    return n == 1


def is_power_of_four(n: int) -> bool:
    """Return True if ``n`` is a power of four whose bit lies within the low 32 bits."""
    return bool(n) and not (n & (n - 1)) and bool(n & 0x55555555)