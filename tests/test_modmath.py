import math
import random

import pytest

from cpkit.modmath import crt, floor_sum, floor_sum_inclusive, inv_mod, pow_mod


def test_pow_mod_matches_builtin():
    for x in range(-20, 21, 3):
        for n in range(0, 15):
            for m in range(1, 25):
                assert pow_mod(x, n, m) == pow(x, n, m)


def test_pow_mod_large_modulus():
    m = 998244353
    assert pow_mod(3, m - 1, m) == 1
    assert pow_mod(-2, 10**9, 10**9 + 7) == pow(-2, 10**9, 10**9 + 7)


def test_pow_mod_modulus_one_is_zero():
    assert pow_mod(5, 0, 1) == 0


def test_pow_mod_rejects_bad_arguments():
    with pytest.raises(ValueError):
        pow_mod(2, -1, 5)
    with pytest.raises(ValueError):
        pow_mod(2, 3, 0)


def test_inv_mod_invariant():
    for m in range(1, 40):
        for x in range(-40, 40):
            if math.gcd(x, m) != 1:
                continue
            y = inv_mod(x, m)
            assert 0 <= y < m
            assert (x * y) % m == 1 % m


def test_inv_mod_rejects_non_coprime():
    with pytest.raises(ValueError):
        inv_mod(2, 4)
    with pytest.raises(ValueError):
        inv_mod(3, 0)


def test_crt_recovers_value():
    rng = random.Random(12345)
    for _ in range(300):
        k = rng.randint(1, 4)
        moduli = [rng.randint(1, 60) for _ in range(k)]
        lcm = math.lcm(*moduli)
        x = rng.randint(0, 10**6)
        remainders = [x % mi + mi * rng.randint(-3, 3) for mi in moduli]
        y, z = crt(remainders, moduli)
        assert z == lcm
        assert y == x % lcm


def test_crt_no_solution():
    assert crt([0, 1], [2, 4]) == (0, 0)
    assert crt([1, 2], [6, 9]) == (0, 0)


def test_crt_empty():
    assert crt([], []) == (0, 1)


def test_crt_rejects_bad_input():
    with pytest.raises(ValueError):
        crt([1, 2], [3])
    with pytest.raises(ValueError):
        crt([1], [0])


def test_floor_sum_matches_direct_sum():
    for n in range(0, 9):
        for m in range(1, 7):
            for a in range(-8, 9):
                for b in range(-8, 9):
                    expected = sum((a * i + b) // m for i in range(n))
                    assert floor_sum(n, m, a, b) == expected


def test_floor_sum_rejects_out_of_range():
    with pytest.raises(ValueError):
        floor_sum(-1, 3, 1, 1)
    with pytest.raises(ValueError):
        floor_sum(1 << 32, 3, 1, 1)
    with pytest.raises(ValueError):
        floor_sum(3, 0, 1, 1)


def test_floor_sum_inclusive_matches_direct_sum():
    for a in range(0, 9):
        for b in range(0, 9):
            for c in range(1, 7):
                for n in range(0, 9):
                    expected = sum((a * i + b) // c for i in range(n + 1))
                    assert floor_sum_inclusive(a, b, c, n) == expected


def test_floor_sum_inclusive_agrees_with_floor_sum():
    for n in range(1, 12):
        for m in range(1, 8):
            for a in range(0, 10):
                for b in range(0, 10):
                    assert floor_sum_inclusive(a, b, m, n - 1) == floor_sum(n, m, a, b)


def test_floor_sum_inclusive_empty_range():
    assert floor_sum_inclusive(3, 4, 5, -1) == 0


def test_floor_sum_inclusive_rejects_bad_input():
    with pytest.raises(ValueError):
        floor_sum_inclusive(-1, 0, 3, 4)
    with pytest.raises(ValueError):
        floor_sum_inclusive(1, -1, 3, 4)
    with pytest.raises(ValueError):
        floor_sum_inclusive(1, 0, 0, 4)