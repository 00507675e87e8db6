"""Convolution of integer sequences by the number-theoretic transform."""

from __future__ import annotations

import functools
from collections.abc import Sequence
from dataclasses import dataclass

from .internal_math import bit_ceil, countr_zero, inv_gcd, primitive_root

DEFAULT_MOD = 998244353

_MASK64 = (1 << 64) - 1
_NAIVE_THRESHOLD = 60

_MOD1 = 754974721  # 2^24 divides MOD1 - 1
_MOD2 = 167772161  # 2^25 divides MOD2 - 1
_MOD3 = 469762049  # 2^26 divides MOD3 - 1
_M2M3 = _MOD2 * _MOD3
_M1M3 = _MOD1 * _MOD3
_M1M2 = _MOD1 * _MOD2
_M1M2M3 = _MOD1 * _MOD2 * _MOD3
_I1 = inv_gcd(_M2M3, _MOD1)[1]
_I2 = inv_gcd(_M1M3, _MOD2)[1]
_I3 = inv_gcd(_M1M2, _MOD3)[1]
_MAX_AB_BIT = 24
_OFFSETS = (0, 0, _M1M2M3, 2 * _M1M2M3, 3 * _M1M2M3)


@dataclass(frozen=True)
class _FFTInfo:
    root: tuple[int, ...]
    iroot: tuple[int, ...]
    rate2: tuple[int, ...]
    irate2: tuple[int, ...]
    rate3: tuple[int, ...]
    irate3: tuple[int, ...]


@functools.lru_cache(maxsize=None)
def _fft_info(mod: int) -> _FFTInfo:
    g = primitive_root(mod)
    rank2 = countr_zero(mod - 1)
    root = [0] * (rank2 + 1)
    iroot = [0] * (rank2 + 1)
    root[rank2] = pow(g, (mod - 1) >> rank2, mod)
    iroot[rank2] = pow(root[rank2], mod - 2, mod)
    for i in range(rank2 - 1, -1, -1):
        root[i] = root[i + 1] * root[i + 1] % mod
        iroot[i] = iroot[i + 1] * iroot[i + 1] % mod

    def rates(step: int) -> tuple[list[int], list[int]]:
        rate, irate = [], []
        prod = iprod = 1
        for i in range(rank2 - step + 1):
            rate.append(root[i + step] * prod % mod)
            irate.append(iroot[i + step] * iprod % mod)
            prod = prod * iroot[i + step] % mod
            iprod = iprod * root[i + step] % mod
        return rate, irate

    rate2, irate2 = rates(2)
    rate3, irate3 = rates(3)
    return _FFTInfo(
        tuple(root), tuple(iroot),
        tuple(rate2), tuple(irate2),
        tuple(rate3), tuple(irate3),
    )


def _log2_length(a: Sequence[int]) -> int:
    n = len(a)
    if n < 1 or n & (n - 1):
        raise ValueError("length must be a positive power of two")
    return countr_zero(n)


def butterfly(a: list[int], mod: int = DEFAULT_MOD) -> None:
    """Apply the forward transform to ``a`` in place (bit-reversed output order)."""
    h = _log2_length(a)
    info = _fft_info(mod)
    length = 0
    while length < h:
        if h - length == 1:
            p = 1 << (h - length - 1)
            rot = 1
            blocks = 1 << length
            for s in range(blocks):
                offset = s << (h - length)
                for i in range(offset, offset + p):
                    left = a[i]
                    right = a[i + p] * rot % mod
                    a[i] = (left + right) % mod
                    a[i + p] = (left - right) % mod
                if s + 1 != blocks:
                    rot = rot * info.rate2[countr_zero(s + 1)] % mod
            length += 1
        else:
            p = 1 << (h - length - 2)
            rot = 1
            imag = info.root[2]
            blocks = 1 << length
            for s in range(blocks):
                rot2 = rot * rot % mod
                rot3 = rot2 * rot % mod
                offset = s << (h - length)
                for i in range(offset, offset + p):
                    a0 = a[i]
                    a1 = a[i + p] * rot
                    a2 = a[i + 2 * p] * rot2
                    a3 = a[i + 3 * p] * rot3
                    a1na3imag = (a1 - a3) % mod * imag
                    a[i] = (a0 + a2 + a1 + a3) % mod
                    a[i + p] = (a0 + a2 - a1 - a3) % mod
                    a[i + 2 * p] = (a0 - a2 + a1na3imag) % mod
                    a[i + 3 * p] = (a0 - a2 - a1na3imag) % mod
                if s + 1 != blocks:
                    rot = rot * info.rate3[countr_zero(s + 1)] % mod
            length += 2


def butterfly_inv(a: list[int], mod: int = DEFAULT_MOD) -> None:
    """Apply the inverse transform to ``a`` in place, without the 1/n factor."""
    h = _log2_length(a)
    info = _fft_info(mod)
    length = h
    while length:
        if length == 1:
            p = 1 << (h - length)
            irot = 1
            blocks = 1 << (length - 1)
            for s in range(blocks):
                offset = s << (h - length + 1)
                for i in range(offset, offset + p):
                    left = a[i]
                    right = a[i + p]
                    a[i] = (left + right) % mod
                    a[i + p] = (left - right) * irot % mod
                if s + 1 != blocks:
                    irot = irot * info.irate2[countr_zero(s + 1)] % mod
            length -= 1
        else:
            p = 1 << (h - length)
            irot = 1
            iimag = info.iroot[2]
            blocks = 1 << (length - 2)
            for s in range(blocks):
                irot2 = irot * irot % mod
                irot3 = irot2 * irot % mod
                offset = s << (h - length + 2)
                for i in range(offset, offset + p):
                    a0 = a[i]
                    a1 = a[i + p]
                    a2 = a[i + 2 * p]
                    a3 = a[i + 3 * p]
                    a2na3iimag = (a2 - a3) * iimag % mod
                    a[i] = (a0 + a1 + a2 + a3) % mod
                    a[i + p] = (a0 - a1 + a2na3iimag) * irot % mod
                    a[i + 2 * p] = (a0 + a1 - a2 - a3) * irot2 % mod
                    a[i + 3 * p] = (a0 - a1 - a2na3iimag) * irot3 % mod
                if s + 1 != blocks:
                    irot = irot * info.irate3[countr_zero(s + 1)] % mod
            length -= 2


def convolution_naive(a: Sequence[int], b: Sequence[int], mod: int = DEFAULT_MOD) -> list[int]:
    """Return the convolution of ``a`` and ``b`` modulo ``mod`` in quadratic time."""
    if not a or not b:
        return []
    ans = [0] * (len(a) + len(b) - 1)
    for i, x in enumerate(a):
        if x:
            for j, y in enumerate(b):
                ans[i + j] += x * y
    return [v % mod for v in ans]


def convolution_fft(a: Sequence[int], b: Sequence[int], mod: int = DEFAULT_MOD) -> list[int]:
    """Return the convolution of ``a`` and ``b`` modulo ``mod`` by the transform."""
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    z = bit_ceil(size)
    fa = [x % mod for x in a] + [0] * (z - len(a))
    fb = [x % mod for x in b] + [0] * (z - len(b))
    butterfly(fa, mod)
    butterfly(fb, mod)
    prod = [x * y % mod for x, y in zip(fa, fb)]
    butterfly_inv(prod, mod)
    iz = pow(z, mod - 2, mod)
    return [v * iz % mod for v in prod[:size]]


def convolution(a: Sequence[int], b: Sequence[int], mod: int = DEFAULT_MOD) -> list[int]:
    """Return ``c`` with ``c[k] = sum(a[i] * b[k - i]) mod mod``.

    ``mod`` must be a prime such that ``2**c`` divides ``mod - 1`` for a
    power of two not less than ``len(a) + len(b) - 1``.
    """
    if not a or not b:
        return []
    z = bit_ceil(len(a) + len(b) - 1)
    if (mod - 1) % z:
        raise ValueError(f"modulus {mod} does not support a transform of length {z}")
    a = [x % mod for x in a]
    b = [x % mod for x in b]
    if min(len(a), len(b)) <= _NAIVE_THRESHOLD:
        return convolution_naive(a, b, mod)
    return convolution_fft(a, b, mod)


def convolution_ll(a: Sequence[int], b: Sequence[int]) -> list[int]:
    """Return the exact convolution of signed 64-bit sequences.

    Each result is reduced to the signed 64-bit range, which gives the
    exact value whenever it fits there.
    """
    if not a or not b:
        return []
    size = len(a) + len(b) - 1
    if size > 1 << _MAX_AB_BIT:
        raise ValueError("result longer than 2**24 is not supported")
    c1 = convolution(a, b, _MOD1)
    c2 = convolution(a, b, _MOD2)
    c3 = convolution(a, b, _MOD3)
    result = []
    for x1, x2, x3 in zip(c1, c2, c3):
        x = (
            x1 * _I1 % _MOD1 * _M2M3
            + x2 * _I2 % _MOD2 * _M1M3
            + x3 * _I3 % _MOD3 * _M1M2
        ) & _MASK64
        signed = x - (1 << 64) if x >= 1 << 63 else x
        diff = (x1 - signed % _MOD1) % _MOD1
        x = (x - _OFFSETS[diff % 5]) & _MASK64
        result.append(x - (1 << 64) if x >= 1 << 63 else x)
    return result