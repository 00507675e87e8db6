import math

import pytest

from cpkit.internal_math import (
    Barrett,
    bit_ceil,
    countr_zero,
    floor_sum_unsigned,
    inv_gcd,
    is_prime,
    primitive_root,
    safe_mod,
)


@pytest.mark.parametrize("m", [1, 2, 3, 7, 1000, 998244353])
def test_safe_mod_range_and_congruence(m):
    for x in range(-2000, 2000, 37):
        r = safe_mod(x, m)
        assert 0 <= r < m
        assert (x - r) % m == 0


def test_safe_mod_rejects_non_positive_modulus():
    with pytest.raises(ValueError):
        safe_mod(5, 0)


@pytest.mark.parametrize(
    "m", [1, 2, 3, 10, 998244353, 1000000007, 2**31 - 1, 2**32 - 1]
)
def test_barrett_mul_matches_remainder(m):
    bt = Barrett(m)
    values = sorted({v % m for v in (0, 1, m - 1, m // 2, m // 3, 12345)})
    for a in values:
        for b in values:
            assert bt.mul(a, b) == a * b % m
    assert bt.umod == m


def test_barrett_rejects_bad_modulus():
    with pytest.raises(ValueError):
        Barrett(0)
    with pytest.raises(ValueError):
        Barrett(1 << 32)


@pytest.mark.parametrize(
    "n", [2, 7, 61, 167772161, 469762049, 754974721, 998244353, 1000000007]
)
def test_is_prime_known_primes(n):
    assert is_prime(n) is True


@pytest.mark.parametrize(
    "n", [-5, 0, 1, 4, 23 * 89, 3 * 11 * 17, 7 * 61, 998244353 * 2, 46337 * 46337]
)
def test_is_prime_composites(n):
    assert is_prime(n) is False


def test_is_prime_small_range_matches_definition():
    for n in range(2, 1500):
        has_divisor = any(n % d == 0 for d in range(2, math.isqrt(n) + 1))
        assert is_prime(n) == (not has_divisor)


def test_inv_gcd_invariants():
    for a in range(-50, 50):
        for b in range(1, 30):
            g, x = inv_gcd(a, b)
            assert g == math.gcd(a, b) or (a % b == 0 and g == b)
            assert (x * a - g) % b == 0
            assert 0 <= x < max(1, b // g)


def test_inv_gcd_multiple_of_modulus():
    assert inv_gcd(30, 10) == (10, 0)


def test_inv_gcd_rejects_bad_modulus():
    with pytest.raises(ValueError):
        inv_gcd(3, 0)


@pytest.mark.parametrize(
    "m, g",
    [(2, 1), (167772161, 3), (469762049, 3), (754974721, 11), (998244353, 3)],
)
def test_primitive_root_known(m, g):
    assert primitive_root(m) == g


@pytest.mark.parametrize("p", [3, 5, 7, 11, 13, 17, 19, 23, 97, 101, 257])
def test_primitive_root_is_smallest_generator(p):
    g = primitive_root(p)
    assert 1 < g < p
    assert len({pow(g, k, p) for k in range(1, p)}) == p - 1
    for h in range(2, g):
        assert len({pow(h, k, p) for k in range(1, p)}) < p - 1


def test_primitive_root_rejects_composite():
    with pytest.raises(ValueError):
        primitive_root(4 * 25)


def test_floor_sum_unsigned_matches_direct_sum():
    for n in range(0, 9):
        for m in range(1, 9):
            for a in range(0, 11):
                for b in range(0, 11):
                    expected = sum((a * i + b) // m for i in range(n))
                    assert floor_sum_unsigned(n, m, a, b) == expected


def test_floor_sum_unsigned_rejects_negative():
    with pytest.raises(ValueError):
        floor_sum_unsigned(3, 2, -1, 0)
    with pytest.raises(ValueError):
        floor_sum_unsigned(3, 0, 1, 0)


def test_bit_ceil_invariants():
    assert bit_ceil(0) == 1
    for n in range(1, 300):
        c = bit_ceil(n)
        assert c & (c - 1) == 0
        assert c >= n
        assert c == 1 or c // 2 < n


def test_bit_ceil_rejects_negative():
    with pytest.raises(ValueError):
        bit_ceil(-1)


def test_countr_zero_invariants():
    for n in range(1, 2000):
        c = countr_zero(n)
        assert (n >> c) & 1 == 1
        assert n % (1 << c) == 0


def test_countr_zero_of_power_of_two():
    for k in range(40):
        assert countr_zero(1 << k) == k


def test_countr_zero_rejects_zero():
    with pytest.raises(ValueError):
        countr_zero(0)