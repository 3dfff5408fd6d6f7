import math

import pytest

from algobox.number_theory import (
    MOD,
    build_factorials,
    crt,
    euler_totient,
    ext_gcd,
    gcd,
    is_prime,
    is_prime_mr,
    lcm,
    miller_rabin,
    mod_inverse,
    mod_inverse_ext,
    mod_pow,
    n_choose_r,
    num_divisors,
    pascal_row,
    prime_factors,
    segmented_sieve,
    sieve,
)


def test_gcd_lcm_demo():
    assert gcd(48, 18) == 6
    assert lcm(4, 6) == 12


@pytest.mark.parametrize("a, b", [(48, 18), (17, 5), (100, 75), (0, 9), (240, 46)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    if a and b:
        assert lcm(a, b) * gcd(a, b) == a * b


@pytest.mark.parametrize("a, b", [(240, 46), (35, 15), (7, 3), (12, 0)])
def test_ext_gcd_bezout(a, b):
    g, x, y = ext_gcd(a, b)
    assert g == math.gcd(a, b)
    assert a * x + b * y == g


def test_mod_pow():
    assert mod_pow(2, 10, MOD) == 1024
    for base, exp, mod in [(3, 200, 13), (7, 0, 11), (123456, 789, MOD)]:
        assert mod_pow(base, exp, mod) == pow(base, exp, mod)
    with pytest.raises(ValueError):
        mod_pow(2, -1, 7)


@pytest.mark.parametrize("a", [2, 3, 10, 123456, MOD - 1])
def test_mod_inverses(a):
    assert a * mod_inverse(a, MOD) % MOD == 1
    assert a * mod_inverse_ext(a, MOD) % MOD == 1
    assert a * mod_inverse_ext(a, 1000) % 1000 == 1 if math.gcd(a, 1000) == 1 else True


def test_mod_inverse_ext_rejects_non_coprime():
    with pytest.raises(ValueError):
        mod_inverse_ext(6, 9)


def test_primality_demo():
    assert is_prime_mr(997) is True
    assert is_prime_mr(999) is False
    assert is_prime_mr(MOD) is True
    assert is_prime(MOD) is True


def test_primality_tests_agree():
    for n in range(-3, 3000):
        assert is_prime(n) == is_prime_mr(n)


def test_miller_rabin_witness_divides():
    assert miller_rabin(9, 3) is False
    assert miller_rabin(3, 3) is True


def test_sieve_matches_is_prime():
    assert sieve(50) == [p for p in range(51) if is_prime(p)]
    assert sieve(1) == []
    assert sieve(0) == []


def test_segmented_sieve():
    assert segmented_sieve(10, 50) == [p for p in sieve(50) if p >= 10]
    assert segmented_sieve(1, 100) == sieve(100)
    assert segmented_sieve(0, 30) == sieve(30)
    assert segmented_sieve(50, 10) == []
    lo, hi = 1_000_000, 1_000_200
    assert segmented_sieve(lo, hi) == [n for n in range(lo, hi + 1) if is_prime(n)]


@pytest.mark.parametrize("n", [2, 360, 97, 1024, 999, 600851475143])
def test_prime_factors(n):
    factors = prime_factors(n)
    assert math.prod(factors) == n
    assert factors == sorted(factors)
    assert all(is_prime(f) for f in factors)


def test_num_divisors():
    for p in sieve(100):
        assert num_divisors(p) == 2
        assert num_divisors(p * p) == 3
    assert num_divisors(1) == 1


@pytest.mark.parametrize("n", [0, 1, 5, 10, 30])
def test_pascal_row(n):
    row = pascal_row(n)
    assert sum(row) == 2**n
    assert row == row[::-1]
    assert row == [n_choose_r(n, k) for k in range(n + 1)]


def test_n_choose_r():
    assert n_choose_r(10, 3) == 120
    assert n_choose_r(5, 6) == 0
    assert n_choose_r(5, -1) == 0
    assert n_choose_r(2000, 700) == math.comb(2000, 700) % MOD


def test_build_factorials():
    fact, inv_fact = build_factorials(50, MOD)
    assert fact[20] == math.factorial(20) % MOD
    for f, inv in zip(fact, inv_fact):
        assert f * inv % MOD == 1


@pytest.mark.parametrize("a1, m1, a2, m2", [(2, 3, 3, 5), (1, 4, 0, 9), (6, 7, 10, 11)])
def test_crt(a1, m1, a2, m2):
    x = crt(a1, m1, a2, m2)
    assert 0 <= x < m1 * m2
    assert x % m1 == a1
    assert x % m2 == a2


def test_euler_totient():
    assert euler_totient(12) == 4
    for p in sieve(200):
        assert euler_totient(p) == p - 1