"""Suffix arrays, LCP arrays and the Z algorithm."""

from __future__ import annotations

from collections.abc import Sequence

_THRESHOLD_NAIVE = 10
_THRESHOLD_DOUBLING = 40


def sa_naive(s: Sequence[int]) -> list[int]:
    """Suffix array by direct comparison of suffixes."""
    seq = list(s)
    return sorted(range(len(seq)), key=lambda i: seq[i:])


def sa_doubling(s: Sequence[int]) -> list[int]:
    """Suffix array by prefix doubling."""
    n = len(s)
    sa = list(range(n))
    rnk = list(s)
    k = 1
    while k < n:
        def key(x: int, k: int = k) -> tuple[int, int]:
            return rnk[x], rnk[x + k] if x + k < n else -1

        sa.sort(key=key)
        tmp = [0] * n
        for prev, cur in zip(sa, sa[1:]):
            tmp[cur] = tmp[prev] + (key(prev) < key(cur))
        rnk = tmp
        k *= 2
    return sa


def _sa_is(s: list[int], upper: int, threshold_naive: int, threshold_doubling: int) -> list[int]:
    n = len(s)
    if n == 0:
        return []
    if n == 1:
        return [0]
    if n == 2:
        return [0, 1] if s[0] < s[1] else [1, 0]
    if n < threshold_naive:
        return sa_naive(s)
    if n < threshold_doubling:
        return sa_doubling(s)

    sa = [0] * n
    ls = [False] * n
    for i in range(n - 2, -1, -1):
        ls[i] = ls[i + 1] if s[i] == s[i + 1] else s[i] < s[i + 1]
    sum_l = [0] * (upper + 1)
    sum_s = [0] * (upper + 1)
    for c, is_s in zip(s, ls):
        if not is_s:
            sum_s[c] += 1
        else:
            sum_l[c + 1] += 1
    for i in range(upper + 1):
        sum_s[i] += sum_l[i]
        if i < upper:
            sum_l[i + 1] += sum_s[i]

    def induce(lms: list[int]) -> None:
        sa[:] = [-1] * n
        buf = sum_s[:]
        for d in lms:
            if d == n:
                continue
            sa[buf[s[d]]] = d
            buf[s[d]] += 1
        buf = sum_l[:]
        sa[buf[s[n - 1]]] = n - 1
        buf[s[n - 1]] += 1
        # List iterators read live, so entries written ahead are visited.
        for v in sa:
            if v >= 1 and not ls[v - 1]:
                sa[buf[s[v - 1]]] = v - 1
                buf[s[v - 1]] += 1
        buf = sum_l[:]
        for v in reversed(sa):
            if v >= 1 and ls[v - 1]:
                buf[s[v - 1] + 1] -= 1
                sa[buf[s[v - 1] + 1]] = v - 1

    lms_map = [-1] * (n + 1)
    lms = [i for i in range(1, n) if not ls[i - 1] and ls[i]]
    for index, pos in enumerate(lms):
        lms_map[pos] = index
    m = len(lms)

    induce(lms)

    if m:
        sorted_lms = [v for v in sa if lms_map[v] != -1]
        rec_s = [0] * m
        rec_upper = 0
        rec_s[lms_map[sorted_lms[0]]] = 0
        for left, right in zip(sorted_lms, sorted_lms[1:]):
            l, r = left, right
            end_l = lms[lms_map[l] + 1] if lms_map[l] + 1 < m else n
            end_r = lms[lms_map[r] + 1] if lms_map[r] + 1 < m else n
            same = True
            if end_l - l != end_r - r:
                same = False
            else:
                while l < end_l and s[l] == s[r]:
                    l += 1
                    r += 1
                if l == n or r == n or s[l] != s[r]:
                    same = False
            if not same:
                rec_upper += 1
            rec_s[lms_map[right]] = rec_upper

        rec_sa = _sa_is(rec_s, rec_upper, threshold_naive, threshold_doubling)
        induce([lms[i] for i in rec_sa])
    return sa


def sa_is(s: Sequence[int], upper: int) -> list[int]:
    """Suffix array by induced sorting; elements of ``s`` lie in ``[0, upper]``."""
    return _sa_is(list(s), upper, _THRESHOLD_NAIVE, _THRESHOLD_DOUBLING)


def _codes(s: str | bytes | Sequence) -> list:
    if isinstance(s, str):
        return [ord(c) for c in s]
    return list(s)


def suffix_array(s: str | bytes | Sequence, upper: int | None = None) -> list[int]:
    """Return the starting positions of the suffixes of ``s`` in sorted order.

    With ``upper`` given, ``s`` must be integers in ``[0, upper]``.
    Strings and bytes are sorted by code point; other sequences may hold
    any mutually comparable values.
    """
    if upper is not None:
        if upper < 0:
            raise ValueError("upper must be non-negative")
        seq = list(s)
        if any(not 0 <= d <= upper for d in seq):
            raise ValueError(f"elements must lie in [0, {upper}]")
        return sa_is(seq, upper)
    if isinstance(s, (str, bytes, bytearray)):
        codes = _codes(s)
        return sa_is(codes, max(255, max(codes, default=0)))
    seq = list(s)
    order = sorted(range(len(seq)), key=seq.__getitem__)
    compressed = [0] * len(seq)
    now = 0
    for prev, cur in zip(order, order[1:]):
        if seq[prev] != seq[cur]:
            now += 1
        compressed[cur] = now
    return sa_is(compressed, now)


def lcp_array(s: str | bytes | Sequence, sa: Sequence[int]) -> list[int]:
    """Return the longest common prefixes of neighbouring suffixes in ``sa``."""
    seq = _codes(s)
    n = len(seq)
    if n < 1:
        raise ValueError("sequence must not be empty")
    if len(sa) != n:
        raise ValueError("suffix array length does not match the sequence")
    rnk = [0] * n
    for rank, pos in enumerate(sa):
        rnk[pos] = rank
    lcp = [0] * (n - 1)
    h = 0
    for i in range(n):
        if h > 0:
            h -= 1
        if rnk[i] == 0:
            continue
        j = sa[rnk[i] - 1]
        while j + h < n and i + h < n and seq[j + h] == seq[i + h]:
            h += 1
        lcp[rnk[i] - 1] = h
    return lcp


def z_algorithm(s: str | bytes | Sequence) -> list[int]:
    """Return ``z`` where ``z[i]`` is the common prefix length of ``s`` and ``s[i:]``."""
    seq = _codes(s)
    n = len(seq)
    if n == 0:
        return []
    z = [0] * n
    j = 0
    for i in range(1, n):
        k = 0 if j + z[j] <= i else min(j + z[j] - i, z[i - j])
        while i + k < n and seq[k] == seq[i + k]:
            k += 1
        z[i] = k
        if j + z[j] < i + z[i]:
            j = i
    z[0] = n
    return z