"""Restarted GMRES for solving linear systems, one restart cycle per step."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator

import numpy as np
from scipy.linalg import solve_triangular


@dataclass(frozen=True)
class GmresStep:
    """State after one restart cycle of GMRES."""

    iteration: int
    residual: float
    converged: bool
    solution: np.ndarray


def _apply(matrix: Any, v: np.ndarray) -> np.ndarray:
    return np.asarray(matrix @ v, dtype=float).ravel()


def _cycle(matrix: Any, b: np.ndarray, x: np.ndarray, m: int, threshold: float) -> np.ndarray:
    r = b - _apply(matrix, x)
    beta = float(np.linalg.norm(r))
    if beta <= threshold or beta == 0.0:
        return x
    n = b.size
    basis = np.zeros((m + 1, n))
    hess = np.zeros((m + 1, m))
    cs = np.zeros(m)
    sn = np.zeros(m)
    g = np.zeros(m + 1)
    basis[0] = r / beta
    g[0] = beta
    steps = 0
    for k in range(m):
        w = _apply(matrix, basis[k])
        for i in range(k + 1):
            hess[i, k] = w @ basis[i]
            w = w - hess[i, k] * basis[i]
        h_next = float(np.linalg.norm(w))
        hess[k + 1, k] = h_next
        if h_next != 0.0:
            basis[k + 1] = w / h_next
        for i in range(k):
            upper = cs[i] * hess[i, k] + sn[i] * hess[i + 1, k]
            hess[i + 1, k] = -sn[i] * hess[i, k] + cs[i] * hess[i + 1, k]
            hess[i, k] = upper
        denom = math.hypot(hess[k, k], hess[k + 1, k])
        if denom == 0.0:
            break
        cs[k] = hess[k, k] / denom
        sn[k] = hess[k + 1, k] / denom
        hess[k, k] = denom
        hess[k + 1, k] = 0.0
        g[k + 1] = -sn[k] * g[k]
        g[k] = cs[k] * g[k]
        steps = k + 1
        if abs(g[k + 1]) <= threshold or h_next == 0.0:
            break
    if steps == 0:
        return x
    y = solve_triangular(hess[:steps, :steps], g[:steps])
    return x + basis[:steps].T @ y


def iterate_gmres(
    matrix: Any,
    rhs: Any,
    tol: float = 1.0e-6,
    max_iter: int = 10,
    restart: int | None = None,
) -> Iterator[GmresStep]:
    """Solve matrix @ u = rhs from u = 0, yielding the state after each restart cycle.

    Iteration stops once the residual norm falls to tol * ||rhs|| or after
    max_iter cycles. The Krylov subspace size defaults to min(n, 10).
    """
    b = np.asarray(rhs, dtype=float).ravel()
    n = b.size
    if n == 0:
        raise ValueError("right-hand side is empty")
    if tuple(matrix.shape) != (n, n):
        raise ValueError(f"matrix shape {tuple(matrix.shape)} does not match rhs length {n}")
    if max_iter < 1:
        raise ValueError("max_iter must be at least 1")
    m = min(n, 10) if restart is None else restart
    if m < 1:
        raise ValueError("restart must be at least 1")
    return _iterate(matrix, b, tol, max_iter, min(m, n))


def _iterate(matrix: Any, b: np.ndarray, tol: float, max_iter: int, m: int) -> Iterator[GmresStep]:
    threshold = tol * float(np.linalg.norm(b))
    x = np.zeros_like(b)
    for iteration in range(max_iter):
        x = _cycle(matrix, b, x, m, threshold)
        residual = float(np.linalg.norm(b - _apply(matrix, x)))
        converged = residual <= threshold
        yield GmresStep(iteration, residual, converged, x.copy())
        if converged:
            return