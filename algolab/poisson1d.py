"""Finite-difference solution of u'' = -pi^2 sin(pi x) on [0, 1] with u = 0 at both ends."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Sequence

import numpy as np
import scipy.sparse as sp

from algolab.gmres import iterate_gmres


@dataclass(frozen=True)
class Poisson1DResult:
    """Interior grid points with the computed and exact solutions."""

    x: np.ndarray
    solution: np.ndarray
    exact: np.ndarray
    residuals: tuple[float, ...]
    converged: bool


def laplacian_1d(n: int, h: float) -> sp.csc_matrix:
    """Return the n-by-n second-difference matrix scaled by 1/h^2."""
    if n < 2:
        raise ValueError("at least two interior points are required")
    diagonals = [np.ones(n - 1), -2.0 * np.ones(n), np.ones(n - 1)]
    matrix = sp.diags(diagonals, [-1, 0, 1], format="csc")
    return (matrix * (1.0 / (h * h))).tocsc()


def _grid(n: int, h: float) -> np.ndarray:
    return np.arange(1, n + 1) * h


def right_hand_side(n: int, h: float) -> np.ndarray:
    """Return -pi^2 sin(pi x) at the n interior points."""
    x = _grid(n, h)
    return -np.pi * np.pi * np.sin(np.pi * x)


def solve(n_points: int = 100, tol: float = 1.0e-6, max_iter: int = 10) -> Poisson1DResult:
    """Solve on a grid of n_points points, boundaries included, with GMRES."""
    n = n_points - 2
    if n < 2:
        raise ValueError("n_points must be at least 4")
    h = 1.0 / (n_points - 1.0)
    steps = list(iterate_gmres(laplacian_1d(n, h), right_hand_side(n, h), tol, max_iter))
    x = _grid(n, h)
    return Poisson1DResult(
        x=x,
        solution=steps[-1].solution,
        exact=np.sin(np.pi * x),
        residuals=tuple(step.residual for step in steps),
        converged=steps[-1].converged,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the problem and print x, computed and exact values per point."""
    parser = argparse.ArgumentParser(prog="poisson1d", description=__doc__)
    parser.add_argument("--points", type=int, default=100, help="grid points including boundaries")
    parser.add_argument("--tol", type=float, default=1.0e-6, help="relative residual tolerance")
    parser.add_argument("--max-iter", type=int, default=10, help="maximum GMRES restart cycles")
    args = parser.parse_args(argv)
    try:
        result = solve(args.points, args.tol, args.max_iter)
    except ValueError as exc:
        parser.error(str(exc))
    last = len(result.residuals) - 1
    for iteration, residual in enumerate(result.residuals):
        print(f"iter {iteration} residual = {residual:.12e}", file=sys.stderr)
        if iteration == last and result.converged:
            print("Converged", file=sys.stderr)
    for xi, computed, exact in zip(result.x, result.solution, result.exact):
        print(f"{xi:f} {computed:.12e} {exact:.12e}")
    return 0