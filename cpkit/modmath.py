"""Modular exponentiation, inverses, CRT and floor sums."""

from __future__ import annotations

from collections.abc import Iterable

from .internal_math import floor_sum_unsigned, inv_gcd

_MASK64 = (1 << 64) - 1


def pow_mod(x: int, n: int, m: int) -> int:
    """Return ``x**n mod m``."""
    if n < 0:
        raise ValueError("exponent must be non-negative")
    if m < 1:
        raise ValueError("modulus must be positive")
    if m == 1:
        return 0
    return pow(x % m, n, m)


def inv_mod(x: int, m: int) -> int:
    """Return ``y`` in ``[0, m)`` with ``x*y = 1 (mod m)``."""
    if m < 1:
        raise ValueError("modulus must be positive")
    g, inverse = inv_gcd(x, m)
    if g != 1:
        raise ValueError(f"{x} has no inverse modulo {m}")
    return inverse


def crt(r: Iterable[int], m: Iterable[int]) -> tuple[int, int]:
    """Solve ``x = r[i] (mod m[i])`` for all ``i``.

    Returns ``(y, z)`` where the solutions are ``x = y (mod z)`` with
    ``0 <= y < z = lcm(m)``, or ``(0, 0)`` when there is no solution.
    """
    remainders = list(r)
    moduli = list(m)
    if len(remainders) != len(moduli):
        raise ValueError("r and m must have the same length")
    r0, m0 = 0, 1
    for ri, mi in zip(remainders, moduli):
        if mi < 1:
            raise ValueError("moduli must be positive")
        r1, m1 = ri % mi, mi
        if m0 < m1:
            r0, r1 = r1, r0
            m0, m1 = m1, m0
        if m0 % m1 == 0:
            if r0 % m1 != r1:
                return 0, 0
            continue
        g, im = inv_gcd(m0, m1)
        u1 = m1 // g
        if (r1 - r0) % g:
            return 0, 0
        x = (r1 - r0) // g % u1 * im % u1
        r0 += x * m0
        m0 *= u1
        if r0 < 0:
            r0 += m0
    return r0, m0


def floor_sum(n: int, m: int, a: int, b: int) -> int:
    """Return ``sum(floor((a*i + b) / m) for i in range(n))``.

    Requires ``0 <= n < 2**32`` and ``1 <= m < 2**32``; the result is
    taken as a signed 64-bit integer.
    """
    if not 0 <= n < 1 << 32:
        raise ValueError("n must be in [0, 2**32)")
    if not 1 <= m < 1 << 32:
        raise ValueError("m must be in [1, 2**32)")
    ans = 0
    if a < 0:
        a2 = a % m
        ans -= n * (n - 1) // 2 * ((a2 - a) // m)
        a = a2
    if b < 0:
        b2 = b % m
        ans -= n * ((b2 - b) // m)
        b = b2
    total = (ans + floor_sum_unsigned(n, m, a, b)) & _MASK64
    return total - (1 << 64) if total >= 1 << 63 else total


def _floor_sum_inclusive(a: int, b: int, c: int, n: int) -> int:
    if n < 0:
        return 0
    if a == 0:
        return b // c * (n + 1)
    if a >= c or b >= c:
        return (
            n * (n + 1) // 2 * (a // c)
            + (n + 1) * (b // c)
            + _floor_sum_inclusive(a % c, b % c, c, n)
        )
    top = (a * n + b) // c
    return top * n - _floor_sum_inclusive(c, c - b - 1, a, top - 1)


def floor_sum_inclusive(a: int, b: int, c: int, n: int) -> int:
    """Return ``sum(floor((a*i + b) / c) for i in range(n + 1))``.

    ``a`` and ``b`` must be non-negative and ``c`` positive; a negative
    ``n`` gives the empty sum.
    """
    if a < 0 or b < 0:
        raise ValueError("a and b must be non-negative")
    if c < 1:
        raise ValueError("c must be positive")
    return _floor_sum_inclusive(a, b, c, n)