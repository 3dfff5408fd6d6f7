"""Number theory: GCD, modular arithmetic, primes and combinatorics."""

from __future__ import annotations

import math
from itertools import compress

MOD = 10**9 + 7

_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by Euclid's algorithm."""
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    """Least common multiple."""
    return a // gcd(a, b) * b


def ext_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    old_r, r = a, b
    old_x, x = 1, 0
    old_y, y = 0, 1
    while r:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_x, x = x, old_x - q * x
        old_y, y = y, old_y - q * y
    return old_r, old_x, old_y


def mod_pow(base: int, exp: int, mod: int) -> int:
    """Compute ``base**exp % mod`` by repeated squaring."""
    if exp < 0:
        raise ValueError("exponent must be non-negative")
    result = 1
    base %= mod
    while exp > 0:
        if exp & 1:
            result = result * base % mod
        base = base * base % mod
        exp >>= 1
    return result


def mod_inverse(a: int, mod: int) -> int:
    """Modular inverse via Fermat's little theorem; ``mod`` must be prime."""
    return mod_pow(a, mod - 2, mod)


def mod_inverse_ext(a: int, mod: int) -> int:
    """Modular inverse via the extended Euclidean algorithm."""
    g, x, _ = ext_gcd(a, mod)
    if g not in (1, -1):
        raise ValueError(f"{a} has no inverse modulo {mod}")
    return (x * g) % mod


def is_prime(n: int) -> bool:
    """Trial-division primality test using the 6k +/- 1 pattern."""
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def sieve(n: int) -> list[int]:
    """Return all primes up to and including ``n`` (Eratosthenes)."""
    if n < 2:
        return []
    flags = [True] * (n + 1)
    flags[0] = flags[1] = False
    for i in range(2, math.isqrt(n) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, n + 1, i))
    return list(compress(range(n + 1), flags))


def segmented_sieve(lo: int, hi: int) -> list[int]:
    """Return all primes in the closed range ``[lo, hi]``."""
    if lo < 0:
        raise ValueError("lower bound must be non-negative")
    if hi < lo:
        return []
    flags = [True] * (hi - lo + 1)
    for v in range(lo, min(hi + 1, 2)):
        flags[v - lo] = False
    for p in sieve(math.isqrt(hi) + 1):
        start = max(p * p, -(-lo // p) * p)
        for j in range(start, hi + 1, p):
            flags[j - lo] = False
    return list(compress(range(lo, hi + 1), flags))


def prime_factors(n: int) -> list[int]:
    """Return the prime factors of ``n`` in non-decreasing order, with repeats."""
    factors = []
    p = 2
    while p * p <= n:
        while n % p == 0:
            factors.append(p)
            n //= p
        p += 1
    if n > 1:
        factors.append(n)
    return factors


def num_divisors(n: int) -> int:
    """Return the number of positive divisors of ``n``."""
    count = 0
    i = 1
    while i * i <= n:
        if n % i == 0:
            count += 1 if i == n // i else 2
        i += 1
    return count


def pascal_row(n: int) -> list[int]:
    """Return row ``n`` of Pascal's triangle."""
    row = [1] * (n + 1)
    for k in range(1, n + 1):
        row[k] = row[k - 1] * (n - k + 1) // k
    return row


def build_factorials(max_n: int, mod: int) -> tuple[list[int], list[int]]:
    """Return factorials and inverse factorials modulo a prime up to ``max_n``."""
    fact = [1] * (max_n + 1)
    for i in range(1, max_n + 1):
        fact[i] = fact[i - 1] * i % mod
    inv_fact = [1] * (max_n + 1)
    inv_fact[max_n] = mod_pow(fact[max_n], mod - 2, mod)
    for i in range(max_n - 1, -1, -1):
        inv_fact[i] = inv_fact[i + 1] * (i + 1) % mod
    return fact, inv_fact


_fact: list[int] = [1]
_inv_fact: list[int] = [1]


def _ensure_factorials(n: int) -> None:
    global _fact, _inv_fact
    if n < len(_fact):
        return
    _fact, _inv_fact = build_factorials(max(n, 2 * len(_fact)), MOD)


def n_choose_r(n: int, r: int) -> int:
    """Binomial coefficient ``C(n, r)`` modulo ``MOD``; 0 when out of range."""
    if r < 0 or r > n:
        return 0
    _ensure_factorials(n)
    return _fact[n] * _inv_fact[r] % MOD * _inv_fact[n - r] % MOD


def crt(a1: int, m1: int, a2: int, m2: int) -> int:
    """Solve ``x = a1 (mod m1)``, ``x = a2 (mod m2)`` for coprime moduli."""
    _, x, _ = ext_gcd(m1, m2)
    return (a1 + m1 * ((a2 - a1) % m2 * x % m2)) % (m1 * m2)


def euler_totient(n: int) -> int:
    """Euler's totient: how many of ``1..n`` are coprime to ``n``."""
    result = n
    p = 2
    while p * p <= n:
        if n % p == 0:
            while n % p == 0:
                n //= p
            result -= result // p
        p += 1
    if n > 1:
        result -= result // n
    return result


def miller_rabin(n: int, a: int) -> bool:
    """One Miller-Rabin round for odd ``n`` with witness ``a``."""
    if n % a == 0:
        return n == a
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1
    x = mod_pow(a, d, n)
    if x in (1, n - 1):
        return True
    for _ in range(r - 1):
        x = x * x % n
        if x == n - 1:
            return True
    return False


def is_prime_mr(n: int) -> bool:
    """Deterministic Miller-Rabin test for 64-bit sized ``n``."""
    if n < 2:
        return False
    for a in _MR_BASES:
        if n == a:
            return True
        if not miller_rabin(n, a):
            return False
    return True