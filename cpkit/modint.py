"""Integers modulo a fixed or run-time modulus."""

from __future__ import annotations

import functools
import operator
from typing import ClassVar

from .internal_math import Barrett, inv_gcd, is_prime

_MAX_MODULUS = (1 << 31) - 1


def _check_modulus(m: int) -> None:
    if not 1 <= m <= _MAX_MODULUS:
        raise ValueError(f"modulus must be in [1, {_MAX_MODULUS}], got {m}")


@functools.total_ordering
class _ModIntBase:
    """Shared arithmetic for modular integers; subclasses supply ``mod``."""

    __slots__ = ("_v",)
    mod: ClassVar[int]

    def __init__(self, v: int | _ModIntBase = 0) -> None:
        cls = type(self)
        if getattr(cls, "mod", None) is None:
            raise TypeError(f"{cls.__name__} has no modulus")
        if isinstance(v, _ModIntBase):
            if type(v) is not cls:
                raise TypeError("cannot convert between different modular types")
            self._v = v._v
            return
        self._v = operator.index(v) % cls.mod

    @classmethod
    def _from_raw(cls, v: int):
        obj = object.__new__(cls)
        obj._v = v
        return obj

    @classmethod
    def _mul(cls, a: int, b: int) -> int:
        return a * b % cls.mod

    def _coerce(self, other) -> int | None:
        if type(other) is type(self):
            return other._v
        if isinstance(other, int):
            return other % self.mod
        return None

    def _pow(self, n: int):
        n = operator.index(n)
        if n < 0:
            raise ValueError("exponent must be non-negative")
        return self._from_raw(pow(self._v, n, self.mod))

    def _inv_by_gcd(self):
        g, x = inv_gcd(self._v, self.mod)
        if g != 1:
            raise ZeroDivisionError(f"{self._v} is not invertible modulo {self.mod}")
        return self._from_raw(x)

    @property
    def value(self) -> int:
        """The representative in ``[0, mod)``."""
        return self._v

    def __add__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._from_raw((self._v + o) % self.mod)

    __radd__ = __add__

    def __sub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._from_raw((self._v - o) % self.mod)

    def __rsub__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._from_raw((o - self._v) % self.mod)

    def __mul__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._from_raw(self._mul(self._v, o))

    __rmul__ = __mul__

    def __truediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self * self._from_raw(o).inv()

    def __rtruediv__(self, other):
        o = self._coerce(other)
        if o is None:
            return NotImplemented
        return self._from_raw(o) * self.inv()

    def __pow__(self, n: int):
        return self.pow(n)

    def __neg__(self):
        return self._from_raw(-self._v % self.mod)

    def __pos__(self):
        return self

    def __eq__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._v == other._v

    def __lt__(self, other) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._v < other._v

    def __hash__(self) -> int:
        return hash((type(self), self._v))

    def __int__(self) -> int:
        return self._v

    def __str__(self) -> str:
        return str(self._v)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._v})"

    def pow(self, n: int):
        raise NotImplementedError

    def inv(self):
        raise NotImplementedError


class StaticModInt(_ModIntBase):
    """Integer modulo a modulus fixed by the subclass's ``mod`` attribute."""

    __slots__ = ()
    _prime: ClassVar[bool] = False

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        m = cls.__dict__.get("mod")
        if m is not None:
            _check_modulus(m)
            cls._prime = is_prime(m)

    @classmethod
    def raw(cls, v: int):
        """Build a value from ``v`` assumed already in ``[0, mod)``."""
        return cls._from_raw(operator.index(v))

    def pow(self, n: int):
        """Return ``self**n`` for ``n >= 0``."""
        return self._pow(n)

    def inv(self):
        """Return the multiplicative inverse."""
        if self._prime:
            if not self._v:
                raise ZeroDivisionError("zero has no inverse")
            return self._pow(self.mod - 2)
        return self._inv_by_gcd()


class ModInt998244353(StaticModInt):
    """Integer modulo 998244353."""

    __slots__ = ()
    mod = 998244353


class ModInt1000000007(StaticModInt):
    """Integer modulo 1000000007."""

    __slots__ = ()
    mod = 1000000007


_PREDEFINED = {cls.mod: cls for cls in (ModInt998244353, ModInt1000000007)}


@functools.lru_cache(maxsize=None)
def static_modint(m: int) -> type[StaticModInt]:
    """Return the modular integer type for modulus ``m``."""
    _check_modulus(m)
    if m in _PREDEFINED:
        return _PREDEFINED[m]
    return type(f"StaticModInt{m}", (StaticModInt,), {"__slots__": (), "mod": m})


class DynamicModInt(_ModIntBase):
    """Integer modulo a modulus chosen at run time with :meth:`set_mod`.

    Each subclass may hold its own modulus; the default is 998244353.
    """

    __slots__ = ()
    mod: ClassVar[int] = 998244353
    _bt: ClassVar[Barrett] = Barrett(998244353)

    @classmethod
    def set_mod(cls, m: int) -> None:
        """Change the modulus of this class."""
        _check_modulus(m)
        cls.mod = m
        cls._bt = Barrett(m)

    @classmethod
    def _mul(cls, a: int, b: int) -> int:
        return cls._bt.mul(a, b)

    @classmethod
    def raw(cls, v: int):
        """Build a value from ``v`` assumed already in ``[0, mod)``."""
        return cls._from_raw(operator.index(v))

    def pow(self, n: int):
        """Return ``self**n`` for ``n >= 0``."""
        return self._pow(n)

    def inv(self):
        """Return the multiplicative inverse."""
        return self._inv_by_gcd()


def binomial_table(size: int, mod: int = 998244353) -> list[list[int]]:
    """Return a ``size`` x ``size`` table of binomial coefficients modulo ``mod``.

    Entry ``[i][j]`` is ``C(i, j) mod mod`` for ``j <= i`` and zero otherwise.
    """
    if size < 1:
        raise ValueError("size must be positive")
    _check_modulus(mod)
    row = [1 % mod] + [0] * (size - 1)
    table = [row]
    for _ in range(1, size):
        row = [(x + y) % mod for x, y in zip(row, [0] + row[:-1])]
        table.append(row)
    return table