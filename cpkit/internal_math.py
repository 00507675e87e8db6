"""Number-theoretic and bit helpers shared by the modular arithmetic code."""

from __future__ import annotations

from itertools import count

_MASK64 = (1 << 64) - 1

_KNOWN_PRIMITIVE_ROOTS = {
    2: 1,
    167772161: 3,
    469762049: 3,
    754974721: 11,
    998244353: 3,
}


def safe_mod(x: int, m: int) -> int:
    """Return ``x mod m`` in ``[0, m)``."""
    if m < 1:
        raise ValueError("modulus must be positive")
    return x % m


class Barrett:
    """Modular multiplication by Barrett reduction for moduli below 2**32."""

    __slots__ = ("_m", "_im")

    def __init__(self, m: int) -> None:
        if not 1 <= m < 1 << 32:
            raise ValueError("modulus must be in [1, 2**32)")
        self._m = m
        self._im = (_MASK64 // m + 1) & _MASK64

    @property
    def umod(self) -> int:
        """The modulus."""
        return self._m

    def mul(self, a: int, b: int) -> int:
        """Return ``a * b % m`` for ``0 <= a, b < m``."""
        z = a * b
        x = (z * self._im) >> 64
        y = x * self._m
        return z - y + (self._m if z < y else 0)


def is_prime(n: int) -> bool:
    """Deterministic primality test, exact for ``n < 2**32``."""
    if n <= 1:
        return False
    if n in (2, 7, 61):
        return True
    if n % 2 == 0:
        return False
    d = n - 1
    while d % 2 == 0:
        d //= 2
    for base in (2, 7, 61):
        t = d
        y = pow(base, t, n)
        while t != n - 1 and y != 1 and y != n - 1:
            y = y * y % n
            t <<= 1
        if y != n - 1 and t % 2 == 0:
            return False
    return True


def inv_gcd(a: int, b: int) -> tuple[int, int]:
    """Return ``(g, x)`` with ``g = gcd(a, b)``, ``x*a = g (mod b)`` and ``0 <= x < b/g``."""
    if b < 1:
        raise ValueError("b must be positive")
    a %= b
    if a == 0:
        return b, 0
    s, t = b, a
    m0, m1 = 0, 1
    while t:
        u = s // t
        s -= t * u
        m0 -= m1 * u
        s, t = t, s
        m0, m1 = m1, m0
    if m0 < 0:
        m0 += b // s
    return s, m0


def primitive_root(m: int) -> int:
    """Return the smallest primitive root of the prime ``m``."""
    if m in _KNOWN_PRIMITIVE_ROOTS:
        return _KNOWN_PRIMITIVE_ROOTS[m]
    if not is_prime(m):
        raise ValueError("modulus must be prime")
    divisors = [2]
    x = (m - 1) // 2
    while x % 2 == 0:
        x //= 2
    i = 3
    while i * i <= x:
        if x % i == 0:
            divisors.append(i)
            while x % i == 0:
                x //= i
        i += 2
    if x > 1:
        divisors.append(x)
    return next(
        g for g in count(2)
        if all(pow(g, (m - 1) // d, m) != 1 for d in divisors)
    )


def floor_sum_unsigned(n: int, m: int, a: int, b: int) -> int:
    """Return ``sum(floor((a*i + b) / m) for i in range(n))`` modulo 2**64."""
    if n < 0 or a < 0 or b < 0 or m < 1:
        raise ValueError("n, a, b must be non-negative and m positive")
    ans = 0
    while True:
        if a >= m:
            ans += n * (n - 1) // 2 * (a // m)
            a %= m
        if b >= m:
            ans += n * (b // m)
            b %= m
        y_max = a * n + b
        if y_max < m:
            break
        n, b = divmod(y_max, m)
        m, a = a, m
    return ans & _MASK64


def bit_ceil(n: int) -> int:
    """Return the smallest power of two not less than ``n``."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if n <= 1:
        return 1
    return 1 << (n - 1).bit_length()


def countr_zero(n: int) -> int:
    """Return the number of trailing zero bits of a positive ``n``."""
    if n < 1:
        raise ValueError("n must be positive")
    return (n & -n).bit_length() - 1