# cpkit

A collection of algorithms and data structures that come up again and again
in competitive programming, written in plain Python with no dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `cpkit.internal_math` | `safe_mod`, `is_prime`, `inv_gcd`, `primitive_root`, `floor_sum_unsigned`, `bit_ceil`, `countr_zero`, `Barrett` |
| `cpkit.modmath` | `pow_mod`, `inv_mod`, `crt`, `floor_sum`, `floor_sum_inclusive` |
| `cpkit.modint` | `StaticModInt`, `ModInt998244353`, `ModInt1000000007`, `DynamicModInt`, `static_modint`, `binomial_table` |
| `cpkit.convolution` | `convolution`, `convolution_ll`, `convolution_naive`, `convolution_fft`, `butterfly`, `butterfly_inv` |
| `cpkit.dsu` | `DSU` (union by size with path compression), `RollbackDSU` |
| `cpkit.fenwicktree` | `FenwickTree` |
| `cpkit.segtree` | `SegTree` (any monoid), `MaxSegTree` |
| `cpkit.lazysegtree` | `LazySegTree`, `RangeAddSumTree` |
| `cpkit.strings` | `suffix_array`, `lcp_array`, `z_algorithm`, `sa_is`, `sa_naive`, `sa_doubling` |
| `cpkit.scc` | `SCCGraph` (strongly connected components) |
| `cpkit.twosat` | `TwoSAT` |
| `cpkit.maxflow` | `MFGraph`, `FlowEdge` |
| `cpkit.mincostflow` | `MCFGraph`, `CostEdge` |
| `cpkit.linalg` | `solve_linear`, `InconsistentSystemError` |
| `cpkit.geometry` | `Point` |

## Examples

Modular arithmetic:

```python
from cpkit.modint import ModInt998244353 as mint

x = mint(3) ** 10
print(int(x / mint(2)))
```

`static_modint(m)` returns the type for any modulus `m`; `DynamicModInt.set_mod`
changes the modulus of a `DynamicModInt` class at run time.

Convolution modulo 998244353, and exact convolution of 64-bit integers:

```python
from cpkit.convolution import convolution, convolution_ll

convolution([1, 2, 3], [4, 5, 6], 998244353)   # [4, 13, 28, 27, 18]
convolution_ll([1, -2], [3, 4])               # [3, -2, -8]
```

Disjoint set union:

```python
from cpkit.dsu import DSU

d = DSU(5)
d.merge(0, 1)
d.merge(3, 4)
d.same(0, 1)   # True
d.groups()     # [[0, 1], [2], [3, 4]]
```

`RollbackDSU` offers `unite`, `find`, `snapshot` and `rollback` to undo unions.

A segment tree over any monoid, given the operation, its identity element and
the initial values:

```python
from cpkit.segtree import SegTree

st = SegTree(lambda a, b: a + b, 0, [5, 3, 7, 1])
st.prod(1, 3)                         # 10
st.max_right(0, lambda s: s <= 8)     # 2
```

`LazySegTree` adds `apply` and `apply_range` for range updates.
`MaxSegTree` and `RangeAddSumTree` are ready-made trees whose `query` and
`update` take inclusive bounds.

Maximum flow:

```python
from cpkit.maxflow import MFGraph

g = MFGraph(4)
g.add_edge(0, 1, 2)
g.add_edge(1, 3, 1)
g.add_edge(0, 2, 1)
g.add_edge(2, 3, 2)
g.flow(0, 3)   # 2
```

`MCFGraph.flow` returns `(flow, cost)` and `MCFGraph.slope` the breakpoints of
cost against flow.

Suffix arrays and friends:

```python
from cpkit.strings import suffix_array, lcp_array, z_algorithm

s = "abracadabra"
sa = suffix_array(s)
lcp_array(s, sa)
z_algorithm(s)
```

Linear systems:

```python
from cpkit.linalg import solve_linear

rank, x = solve_linear([[2, 0], [0, 4]], [2, 8])   # rank 2, x == [1.0, 2.0]
```

`solve_linear` raises `InconsistentSystemError` when there is no solution.

## Conventions

Ranges follow the half-open `[l, r)` convention, except for the `query` and
`update` methods of `MaxSegTree` and `RangeAddSumTree`. Invalid arguments,
such as out-of-range indices or a modulus below one, raise `ValueError` or
`IndexError`; inverting a non-invertible modular integer raises
`ZeroDivisionError`.

## What it does not do

cpkit is a library only: it has no command-line program and reads no input
files. Its pieces are meant to be imported into your own solutions.