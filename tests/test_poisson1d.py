import numpy as np
import pytest
from scipy.sparse.linalg import spsolve

from algolab import poisson1d


def test_laplacian_is_symmetric_tridiagonal():
    a = poisson1d.laplacian_1d(6, 0.1).toarray()
    assert a.shape == (6, 6)
    np.testing.assert_allclose(a, a.T)
    assert np.count_nonzero(a) == 6 + 2 * 5


def test_laplacian_annihilates_constants_in_interior():
    a = poisson1d.laplacian_1d(8, 0.25)
    row_sums = a @ np.ones(8)
    np.testing.assert_allclose(row_sums[1:-1], 0.0, atol=1e-12)
    assert row_sums[0] < 0 and row_sums[-1] < 0


def test_laplacian_requires_two_points():
    with pytest.raises(ValueError):
        poisson1d.laplacian_1d(1, 0.5)


def test_discrete_operator_is_consistent_with_rhs():
    n = 198
    h = 1.0 / (n + 1)
    x = np.arange(1, n + 1) * h
    applied = poisson1d.laplacian_1d(n, h) @ np.sin(np.pi * x)
    np.testing.assert_allclose(applied, poisson1d.right_hand_side(n, h), atol=1e-3)


def test_small_problem_converges_to_direct_solution():
    result = poisson1d.solve(n_points=12, tol=1e-10)
    n = 10
    h = 1.0 / 11.0
    direct = spsolve(poisson1d.laplacian_1d(n, h), poisson1d.right_hand_side(n, h))
    assert result.converged
    assert result.x.shape == (n,)
    np.testing.assert_allclose(result.solution, direct, rtol=1e-7)
    assert np.max(np.abs(result.solution - result.exact)) < 0.02


def test_default_run_respects_iteration_limit():
    result = poisson1d.solve()
    assert 1 <= len(result.residuals) <= 10
    assert result.x.shape == (98,)
    assert result.x[0] == pytest.approx(1.0 / 99.0)


def test_solve_rejects_tiny_grid():
    with pytest.raises(ValueError):
        poisson1d.solve(n_points=3)


def test_main_prints_one_line_per_interior_point(capsys):
    assert poisson1d.main(["--points", "12", "--tol", "1e-10"]) == 0
    captured = capsys.readouterr()
    lines = captured.out.strip().splitlines()
    assert len(lines) == 10
    assert all(len(line.split()) == 3 for line in lines)
    assert captured.err.startswith("iter 0 residual = ")
    assert "Converged" in captured.err