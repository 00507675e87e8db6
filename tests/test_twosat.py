import itertools
import random

import pytest

from cpkit.twosat import TwoSAT


def _holds(assignment, clauses):
    return all(assignment[i] == f or assignment[j] == g for i, f, j, g in clauses)


def _random_clauses(seed, n, m):
    rnd = random.Random(seed)
    return [
        (rnd.randrange(n), rnd.random() < 0.5, rnd.randrange(n), rnd.random() < 0.5)
        for _ in range(m)
    ]


def test_contradiction_is_unsatisfiable():
    ts = TwoSAT(1)
    ts.add_clause(0, True, 0, True)
    ts.add_clause(0, False, 0, False)
    assert ts.satisfiable() is False


def test_answer_satisfies_clauses():
    clauses = [(0, True, 1, True), (0, False, 1, False), (1, True, 2, False), (2, True, 2, True)]
    ts = TwoSAT(3)
    for clause in clauses:
        ts.add_clause(*clause)
    assert ts.satisfiable()
    assert _holds(ts.answer(), clauses)


def test_forced_value():
    ts = TwoSAT(2)
    ts.add_clause(1, False, 1, False)
    assert ts.satisfiable()
    assert ts.answer()[1] is False


@pytest.mark.parametrize("seed", range(20))
def test_matches_exhaustive_search(seed):
    n = 4
    clauses = _random_clauses(seed, n, 7)
    ts = TwoSAT(n)
    for clause in clauses:
        ts.add_clause(*clause)
    expected = any(
        _holds(assignment, clauses)
        for assignment in itertools.product([False, True], repeat=n)
    )
    assert ts.satisfiable() == expected
    if expected:
        assert _holds(ts.answer(), clauses)


def test_answer_is_a_copy():
    ts = TwoSAT(2)
    ts.add_clause(0, True, 0, True)
    ts.satisfiable()
    first = ts.answer()
    first[0] = not first[0]
    assert ts.answer()[0] != first[0]


def test_out_of_range_variable():
    ts = TwoSAT(2)
    with pytest.raises(IndexError):
        ts.add_clause(0, True, 2, False)