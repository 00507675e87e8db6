import operator
import random
from functools import reduce

import pytest

from cpkit.segtree import NEG_INF, MaxSegTree, SegTree


def _values(seed, n, lo=0, hi=20):
    rng = random.Random(seed)
    return [rng.randint(lo, hi) for _ in range(n)]


@pytest.mark.parametrize("n", [0, 1, 2, 5, 8, 13])
def test_sum_prod_matches_slices(n):
    values = _values(n, n)
    tree = SegTree(operator.add, 0, values)
    assert len(tree) == n
    for l in range(n + 1):
        for r in range(l, n + 1):
            assert tree.prod(l, r) == sum(values[l:r])
    assert tree.all_prod() == sum(values)


def test_non_commutative_op_keeps_order():
    words = list("segment")
    tree = SegTree(operator.add, "", words)
    for l in range(len(words) + 1):
        for r in range(l, len(words) + 1):
            assert tree.prod(l, r) == "".join(words[l:r])


def test_size_constructor_fills_identity():
    tree = SegTree(min, 10**9, 6)
    assert [tree.get(i) for i in range(6)] == [10**9] * 6
    tree.set(3, 4)
    assert tree.prod(0, 6) == 4
    assert tree.prod(0, 3) == 10**9


def test_set_and_get_after_updates():
    rng = random.Random(7)
    values = _values(1, 11)
    tree = SegTree(min, 10**9, values)
    for _ in range(60):
        p = rng.randrange(11)
        x = rng.randint(-5, 30)
        tree.set(p, x)
        values[p] = x
        l = rng.randrange(12)
        r = rng.randrange(l, 12)
        expected = reduce(min, values[l:r], 10**9)
        assert tree.prod(l, r) == expected
    assert [tree.get(i) for i in range(11)] == values


@pytest.mark.parametrize("limit", [0, 5, 17, 40, 1000])
def test_max_right_and_min_left(limit):
    values = _values(3, 10)
    tree = SegTree(operator.add, 0, values)
    n = len(values)
    for l in range(n + 1):
        r = tree.max_right(l, lambda x: x <= limit)
        assert sum(values[l:r]) <= limit
        assert r == n or sum(values[l:r + 1]) > limit
    for r in range(n + 1):
        l = tree.min_left(r, lambda x: x <= limit)
        assert sum(values[l:r]) <= limit
        assert l == 0 or sum(values[l - 1:r]) > limit


def test_errors():
    tree = SegTree(operator.add, 0, [1, 2, 3])
    with pytest.raises(IndexError):
        tree.get(3)
    with pytest.raises(IndexError):
        tree.set(-1, 0)
    with pytest.raises(IndexError):
        tree.prod(2, 1)
    with pytest.raises(IndexError):
        tree.max_right(4, lambda x: True)
    with pytest.raises(ValueError):
        tree.max_right(0, lambda x: x > 0)
    with pytest.raises(ValueError):
        tree.min_left(3, lambda x: x > 0)


def test_max_seg_tree_inclusive_queries():
    values = _values(5, 9, -50, 50)
    tree = MaxSegTree(values)
    for l in range(9):
        for r in range(l, 9):
            assert tree.query(l, r) == max(values[l:r + 1])
    tree.update(4, 1000)
    assert tree.query(0, 8) == 1000
    assert tree.query(5, 8) == max(values[5:])


def test_max_seg_tree_empty_and_clipped_queries():
    values = [3, 9, 4]
    tree = MaxSegTree(values)
    assert tree.query(2, 1) == NEG_INF
    assert tree.query(5, 7) == NEG_INF
    assert tree.query(-3, 10) == max(values)
    assert NEG_INF == -(10**18)