import random

import pytest

from cpkit.dsu import DSU, RollbackDSU


def test_merge_and_queries():
    d = DSU(5)
    assert d.groups() == [[0], [1], [2], [3], [4]]
    leader = d.merge(0, 3)
    assert leader in (0, 3)
    assert d.same(0, 3)
    assert not d.same(0, 1)
    assert d.size(3) == 2
    d.merge(3, 4)
    assert d.size(0) == 3
    assert d.groups() == [[0, 3, 4], [1], [2]]


def test_merge_same_set_returns_leader():
    d = DSU(3)
    first = d.merge(0, 1)
    assert d.merge(1, 0) == first
    assert d.leader(0) == d.leader(1) == first


def test_larger_set_keeps_leader():
    d = DSU(4)
    big = d.merge(0, 1)
    big = d.merge(big, 2)
    assert d.merge(3, 0) == big


def test_random_against_labels():
    rng = random.Random(1)
    n = 50
    d = DSU(n)
    label = list(range(n))
    for _ in range(80):
        a, b = rng.randrange(n), rng.randrange(n)
        d.merge(a, b)
        la, lb = label[a], label[b]
        label = [la if x == lb else x for x in label]
    for a in range(n):
        assert d.size(a) == label.count(label[a])
        for b in range(n):
            assert d.same(a, b) == (label[a] == label[b])
    groups = d.groups()
    assert sorted(v for g in groups for v in g) == list(range(n))


def test_index_errors():
    d = DSU(2)
    with pytest.raises(IndexError):
        d.leader(2)
    with pytest.raises(IndexError):
        d.merge(-1, 0)
    with pytest.raises(ValueError):
        DSU(-1)


def test_empty_dsu_has_no_groups():
    assert DSU().groups() == []


def test_rollback_restores_state():
    r = RollbackDSU(4)
    assert r.unite(0, 1)
    mark = r.snapshot()
    assert r.unite(2, 3)
    assert r.unite(1, 3)
    assert not r.unite(0, 2)
    assert r.find(0) == r.find(3)
    r.rollback(mark)
    assert r.find(0) == r.find(1)
    assert r.find(2) != r.find(0)
    assert r.find(2) == 2 and r.find(3) == 3
    r.rollback(0)
    assert [r.find(i) for i in range(4)] == [0, 1, 2, 3]


def test_rollback_tie_keeps_first_as_root():
    r = RollbackDSU(2)
    r.unite(0, 1)
    assert r.find(1) == 0


def test_rollback_errors():
    r = RollbackDSU(2)
    with pytest.raises(IndexError):
        r.find(5)
    with pytest.raises(ValueError):
        r.rollback(-1)