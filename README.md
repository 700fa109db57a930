# algolab

Textbook data structures, two pseudorandom generators and small
finite-difference Poisson solvers built on NumPy and SciPy.

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

Search trees. Both keep their items in sorted order, ignore duplicate
insertions, iterate in ascending order and support `in`, `find_min`,
`find_max`, `insert`, `remove`, `clear`, `print_tree` and `copy.copy`:

- `algolab.splay_tree.SplayTree`: a top-down splay tree. Membership tests,
  `find_min` and `find_max` move the item they reach to the root;
  `root()` returns the item currently there.
- `algolab.treap.Treap`: a search tree balanced by random priorities. It
  takes an optional `rng`, any object with a `next_int()` method; by default
  a time-seeded `UniformRandom` is used.

Priority queues, both allowing duplicates and supporting `find_min`,
`insert`, `delete_min` (which returns the removed item) and `clear`:

- `algolab.binary_heap.BinaryHeap`: an array-based min-heap; `len()` gives
  its size, and a heap built from an iterable is heapified in linear time.
- `algolab.leftist_heap.LeftistHeap`: a mergeable min-heap; `merge(other)`
  absorbs every item of `other` and leaves it empty.

Containers:

- `algolab.vector.Vector`: a growable array with explicit `capacity()`,
  `reserve()` and `resize()`. Indexing outside `0 <= i < len(v)` raises
  `ArrayIndexOutOfBoundsError`; negative indices are not accepted.
- `algolab.linked_list.LinkedList`: a doubly linked list with `append`,
  `appendleft`, `pop`, `popleft`, `front`, `back`, `insert`, indexing,
  `del`, `reversed()` and `clear`.
- `algolab.matrix.Matrix`: a rectangular grid of rows; `Matrix(rows, cols)`
  is filled with zeros, `Matrix.from_rows(...)` copies given rows, and
  `m[r][c]` reads or writes an entry. `numrows()` and `numcols()` report the
  shape.

Random numbers in `algolab.uniform_random`:

- `Random48(initial_value)`: a 48-bit linear congruential generator with
  `next_int`, `next_long`, `next_double`, `next_below(high)` and
  `next_in_range(low, high)`.
- `UniformRandom(seed)`: a generator driven by the 32-bit Mersenne Twister
  seeded with `seed`, with the same methods except `next_long`.

Both are seeded from the clock when no seed is given.

Errors live in `algolab.exceptions`. Asking an empty structure for an item
raises `UnderflowError` (a subclass of `IndexError`); out-of-range arguments
raise `IllegalArgumentError` (a subclass of `ValueError`). All of them
derive from `DataStructureError`.

Linear algebra in `algolab.gmres`: `iterate_gmres(matrix, rhs, tol,
max_iter, restart)` solves `matrix @ u = rhs` from `u = 0` with restarted
GMRES and yields a `GmresStep` (`iteration`, `residual`, `converged`,
`solution`) after each restart cycle. It stops once the residual falls to
`tol * ||rhs||` or after `max_iter` cycles; the Krylov subspace size defaults
to `min(n, 10)`.

Poisson problems:

- `algolab.poisson1d`: `u'' = -pi^2 sin(pi x)` on `[0, 1]` with zero
  boundary values. `solve(n_points, tol, max_iter)` returns a
  `Poisson1DResult` with the interior points, the computed and exact
  solutions, the residual history and whether GMRES converged.
  `laplacian_1d` and `right_hand_side` build the system.
- `algolab.poisson2d`: `u_xx + u_yy = -2 pi^2 sin(pi x) sin(pi y)` on
  `[0.1, 1.1]^2`, with the exact solution `sin(pi x) sin(pi y)` giving the
  boundary values. `solve(n_points, tol, max_iter)` returns a
  `Poisson2DResult`, including `error`, the l2 norm of the error divided by
  the number of unknowns. `laplacian_2d`, `right_hand_side`, `error_norm`,
  `exact_solution` and `source_term` are available on their own.

Reading integer data in `algolab.readers`: `read_vector` reads a count `n`
followed by `n` integers, `read_matrix` reads `n` followed by the `n * n`
entries of a square matrix row by row; `format_vector` and `format_matrix`
render them for display.

## Examples

```python
from algolab.binary_heap import BinaryHeap
from algolab.leftist_heap import LeftistHeap
from algolab.splay_tree import SplayTree
from algolab.treap import Treap
from algolab.uniform_random import Random48

tree = SplayTree([5, 3, 8, 1])
assert 3 in tree
assert tree.root() == 3
assert list(tree) == [1, 3, 5, 8]

treap = Treap([5, 3, 8, 1], rng=Random48(42))
treap.remove(5)
assert list(treap) == [1, 3, 8]

heap = BinaryHeap([7, 2, 9])
heap.insert(1)
assert heap.delete_min() == 1

a, b = LeftistHeap([4, 6]), LeftistHeap([5, 3])
a.merge(b)
assert a.find_min() == 3 and not b
```

Solving the one-dimensional Poisson problem:

```python
from algolab.poisson1d import solve

result = solve(100, 1e-6, 10)
print(result.converged, result.residuals[-1])
```

## Commands

```
algolab-hello                 # prints "Hello World!"
algolab-vector FILE           # reads a count and that many integers, prints them
algolab-matrix FILE           # reads n and an n-by-n integer matrix, prints it
algolab-poisson1d             # solves the 1D problem, prints x, computed and exact u
algolab-poisson2d             # solves the 2D problem, reports the error norm
```

`algolab-vector` and `algolab-matrix` exit with status 2 when no file is
given and 1 when the file cannot be read or parsed.

Both solvers accept `--points`, `--tol` and `--max-iter`
(defaults 100, 1e-6 and 10 for the 1D problem; 201, 1e-7 and 1000 for the
2D problem) and report the residual after every GMRES restart cycle on
standard error, followed by `Converged` when the tolerance was met.

## What is not included

The package has no sorting routines and, besides the splay tree and the
treap, no other balanced search trees; it offers no binomial queue or
pairing heap either. Python's built-in `sorted()` and `heapq` cover those
needs. The solvers use plain restarted GMRES without preconditioning or
multigrid, and they write no result files or plots.