"""Bit manipulation tricks and classic bitwise problems."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

_MASK32 = 0xFFFFFFFF


def get_bit(n: int, i: int) -> bool:
    """Return whether bit ``i`` of ``n`` is set."""
    return bool((n >> i) & 1)


def set_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` set."""
    return n | (1 << i)


def clear_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` cleared."""
    return n & ~(1 << i)


def toggle_bit(n: int, i: int) -> int:
    """Return ``n`` with bit ``i`` flipped."""
    return n ^ (1 << i)


def is_power_of_two(n: int) -> bool:
    """Return whether ``n`` is a positive power of two."""
    return n > 0 and (n & (n - 1)) == 0


def lowest_set_bit(n: int) -> int:
    """Return the value of the lowest set bit of ``n`` (0 if none)."""
    return n & -n


def clear_lowest_bit(n: int) -> int:
    """Return ``n`` with its lowest set bit cleared."""
    return n & (n - 1)


def count_set_bits(n: int) -> int:
    """Count set bits; negative numbers are taken as 32-bit two's complement."""
    if n < 0:
        n &= _MASK32
    count = 0
    while n:
        n &= n - 1
        count += 1
    return count


def count_bits_range(n: int) -> list[int]:
    """Return the number of set bits of every integer in ``0..n``."""
    counts = [0] * (n + 1)
    for i in range(1, n + 1):
        counts[i] = counts[i >> 1] + (i & 1)
    return counts


def single_number(nums: Iterable[int]) -> int:
    """Find the one value that appears once when every other appears twice."""
    result = 0
    for x in nums:
        result ^= x
    return result


def two_unique_numbers(nums: Sequence[int]) -> tuple[int, int]:
    """Find the two values that appear once when every other appears twice."""
    xor_all = single_number(nums)
    diff_bit = xor_all & -xor_all
    a = b = 0
    for x in nums:
        if x & diff_bit:
            a ^= x
        else:
            b ^= x
    return a, b


def single_number_thrice(nums: Iterable[int]) -> int:
    """Find the value that appears once when every other appears three times."""
    ones = twos = 0
    for x in nums:
        ones = (ones ^ x) & ~twos
        twos = (twos ^ x) & ~ones
    return ones


def opposite_signs(a: int, b: int) -> bool:
    """Return whether ``a`` and ``b`` have opposite signs."""
    return (a ^ b) < 0


def multiply_by_power_of_two(n: int, k: int) -> int:
    """Return ``n * 2**k`` using a shift."""
    return n << k


def divide_by_power_of_two(n: int, k: int) -> int:
    """Return ``n // 2**k`` using a shift."""
    return n >> k


def turn_off_kth_bit(n: int, k: int) -> int:
    """Clear the ``k``-th bit counted from the right, starting at 1."""
    if k < 1:
        raise ValueError("k counts from 1")
    return n & ~(1 << (k - 1))


def is_even(n: int) -> bool:
    """Return whether ``n`` is even."""
    return not n & 1


def next_power_of_two(n: int) -> int:
    """Return the smallest power of two not below ``n`` (1 for ``n <= 1``)."""
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def reverse_bits(n: int) -> int:
    """Reverse the bits of a 32-bit unsigned integer."""
    if not 0 <= n <= _MASK32:
        raise ValueError("value does not fit in 32 unsigned bits")
    return int(format(n, "032b")[::-1], 2)


def hamming_distance(x: int, y: int) -> int:
    """Return the number of differing bits between ``x`` and ``y``."""
    return count_set_bits(x ^ y)


def all_subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``, enumerated by bitmask."""
    return [
        [x for i, x in enumerate(nums) if mask >> i & 1]
        for mask in range(1 << len(nums))
    ]


def submasks(mask: int) -> Iterator[int]:
    """Yield every non-zero submask of ``mask`` in decreasing order."""
    sub = mask
    while sub > 0:
        yield sub
        sub = (sub - 1) & mask


def gray_code(n: int) -> list[int]:
    """Return the ``n``-bit reflected Gray code sequence."""
    return [i ^ (i >> 1) for i in range(1 << n)]


def all_unique(s: str) -> bool:
    """Return whether a string of lowercase letters has no repeated letter."""
    checker = 0
    for ch in s:
        if not "a" <= ch <= "z":
            raise ValueError(f"only lowercase a-z are supported, got {ch!r}")
        bit = 1 << (ord(ch) - ord("a"))
        if checker & bit:
            return False
        checker |= bit
    return True