"""Finite-difference solution of the Poisson equation on a square with Dirichlet data.

The problem is u_xx + u_yy = -2 pi^2 sin(pi x) sin(pi y) on [0.1, 1.1]^2, whose
exact solution sin(pi x) sin(pi y) also supplies the boundary values.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
import scipy.sparse as sp

from algolab.gmres import iterate_gmres

_X0, _X1, _Y0, _Y1 = 0.1, 1.1, 0.1, 1.1


@dataclass(frozen=True)
class Poisson2DResult:
    """Interior grid, computed and exact solutions (indexed [j, i]) and solver history."""

    x: np.ndarray
    y: np.ndarray
    h: float
    solution: np.ndarray
    exact: np.ndarray
    residuals: tuple[float, ...]
    converged: bool
    error: float


def exact_solution(x: Any, y: Any) -> Any:
    """Return sin(pi x) sin(pi y)."""
    return np.sin(np.pi * x) * np.sin(np.pi * y)


def source_term(x: Any, y: Any) -> Any:
    """Return the right-hand side -2 pi^2 sin(pi x) sin(pi y)."""
    return -2.0 * np.pi * np.pi * exact_solution(x, y)


def _second_difference(n: int) -> sp.spmatrix:
    return sp.diags([np.ones(n - 1), -2.0 * np.ones(n), np.ones(n - 1)], [-1, 0, 1])


def laplacian_2d(n: int, h: float) -> sp.csc_matrix:
    """Return the five-point Laplacian on an n-by-n interior grid, scaled by 1/h^2.

    Unknown (i, j) is stored at index j * n + i.
    """
    if n < 1:
        raise ValueError("at least one interior point is required")
    d = _second_difference(n)
    eye = sp.identity(n)
    matrix = sp.kron(eye, d) + sp.kron(d, eye)
    return (matrix * (1.0 / (h * h))).tocsc()


def _interior(start: float, n: int, h: float) -> np.ndarray:
    return start + np.arange(1, n + 1) * h


def right_hand_side(
    n: int,
    h: float,
    x0: float = _X0,
    x1: float = _X1,
    y0: float = _Y0,
    y1: float = _Y1,
) -> np.ndarray:
    """Return the source term at interior points with boundary values moved across."""
    if n < 1:
        raise ValueError("at least one interior point is required")
    xs = _interior(x0, n, h)
    ys = _interior(y0, n, h)
    grid_x, grid_y = np.meshgrid(xs, ys)
    rhs = source_term(grid_x, grid_y)
    scale = 1.0 / (h * h)
    rhs[0, :] -= exact_solution(xs, y0) * scale
    rhs[-1, :] -= exact_solution(xs, y1) * scale
    rhs[:, 0] -= exact_solution(x0, ys) * scale
    rhs[:, -1] -= exact_solution(x1, ys) * scale
    return rhs.ravel()


def error_norm(solution: Any, n: int, h: float, x0: float = _X0, y0: float = _Y0) -> float:
    """Return the l2 norm of the error against the exact solution, divided by n^2."""
    u = np.asarray(solution, dtype=float).ravel()
    if u.size != n * n:
        raise ValueError(f"solution has {u.size} values, expected {n * n}")
    grid_x, grid_y = np.meshgrid(_interior(x0, n, h), _interior(y0, n, h))
    diff = exact_solution(grid_x, grid_y).ravel() - u
    return float(np.sqrt(diff @ diff)) / (n * n)


def solve(n_points: int = 201, tol: float = 1.0e-7, max_iter: int = 1000) -> Poisson2DResult:
    """Solve on an n_points-by-n_points grid, boundaries included, with GMRES."""
    n = n_points - 2
    if n < 1:
        raise ValueError("n_points must be at least 3")
    h = (_X1 - _X0) / (n_points - 1.0)
    steps = list(
        iterate_gmres(laplacian_2d(n, h), right_hand_side(n, h, _X0, _X1, _Y0, _Y1), tol, max_iter)
    )
    final = steps[-1]
    xs = _interior(_X0, n, h)
    ys = _interior(_Y0, n, h)
    grid_x, grid_y = np.meshgrid(xs, ys)
    return Poisson2DResult(
        x=xs,
        y=ys,
        h=h,
        solution=final.solution.reshape(n, n),
        exact=exact_solution(grid_x, grid_y),
        residuals=tuple(step.residual for step in steps),
        converged=final.converged,
        error=error_norm(final.solution, n, h, _X0, _Y0),
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the problem, reporting the residual history and the error norm."""
    parser = argparse.ArgumentParser(prog="poisson2d", description=__doc__)
    parser.add_argument("--points", type=int, default=201, help="grid points per side including boundaries")
    parser.add_argument("--tol", type=float, default=1.0e-7, help="relative residual tolerance")
    parser.add_argument("--max-iter", type=int, default=1000, help="maximum GMRES restart cycles")
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
    print(f"l2norm of error = {result.error}", file=sys.stderr)
    return 0