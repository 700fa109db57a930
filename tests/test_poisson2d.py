import math

import numpy as np
import pytest

from algolab.poisson2d import (
    error_norm,
    exact_solution,
    laplacian_2d,
    main,
    right_hand_side,
    solve,
    source_term,
)


def test_source_is_minus_two_pi_squared_times_exact():
    assert source_term(0.5, 0.5) == pytest.approx(-2.0 * math.pi**2)
    assert exact_solution(0.5, 0.5) == pytest.approx(1.0)


def test_exact_solution_vanishes_on_integer_lines():
    assert exact_solution(1.0, 0.3) == pytest.approx(0.0, abs=1e-12)


def test_laplacian_shape_diagonal_and_symmetry():
    n, h = 4, 0.2
    matrix = laplacian_2d(n, h)
    assert matrix.shape == (n * n, n * n)
    assert np.allclose(matrix.diagonal(), -4.0 / (h * h))
    assert abs(matrix - matrix.T).max() == 0.0


def test_laplacian_interior_rows_sum_to_zero():
    n, h = 4, 0.5
    dense = laplacian_2d(n, h).toarray()
    interior = 1 * n + 1
    assert dense[interior].sum() == pytest.approx(0.0)
    assert dense[interior, interior + 1] == pytest.approx(1.0 / (h * h))
    assert dense[interior, interior + n] == pytest.approx(1.0 / (h * h))


def test_laplacian_rejects_empty_grid():
    with pytest.raises(ValueError):
        laplacian_2d(0, 0.1)


def test_rhs_away_from_boundary_is_source():
    n, h = 5, 0.2
    rhs = right_hand_side(n, h, 0.1, 1.1, 0.1, 1.1)
    x = 0.1 + 3 * h
    y = 0.1 + 3 * h
    assert rhs.shape == (n * n,)
    assert rhs[2 * n + 2] == pytest.approx(source_term(x, y))


def test_discretisation_is_consistent_with_exact_solution():
    n_points = 41
    n = n_points - 2
    h = 1.0 / (n_points - 1.0)
    xs = 0.1 + np.arange(1, n + 1) * h
    gx, gy = np.meshgrid(xs, xs)
    u = exact_solution(gx, gy).ravel()
    residual = laplacian_2d(n, h) @ u - right_hand_side(n, h, 0.1, 1.1, 0.1, 1.1)
    assert np.max(np.abs(residual)) < 0.05


def test_solve_converges_to_exact_solution():
    result = solve(12, 1.0e-8, 500)
    assert result.converged
    assert result.solution.shape == (10, 10)
    assert np.max(np.abs(result.solution - result.exact)) < 1.0e-2
    assert all(b <= a * (1 + 1e-12) for a, b in zip(result.residuals, result.residuals[1:]))


def test_result_error_matches_error_norm():
    result = solve(8, 1.0e-8, 300)
    n = result.x.size
    assert result.error == pytest.approx(error_norm(result.solution, n, result.h, 0.1, 0.1))
    assert error_norm(result.exact, n, result.h, 0.1, 0.1) == pytest.approx(0.0, abs=1e-15)


def test_error_norm_is_symmetric_about_exact():
    result = solve(8, 1.0e-8, 300)
    n = result.x.size
    zero = error_norm(np.zeros(n * n), n, result.h, 0.1, 0.1)
    double = error_norm(2.0 * result.exact, n, result.h, 0.1, 0.1)
    assert zero == pytest.approx(double)
    assert zero > 0.0


def test_error_norm_rejects_wrong_size():
    with pytest.raises(ValueError):
        error_norm(np.zeros(5), 3, 0.1)


def test_solve_rejects_too_few_points():
    with pytest.raises(ValueError):
        solve(2)


def test_main_reports_history_and_error(capsys):
    assert main(["--points", "10", "--max-iter", "300"]) == 0
    err = capsys.readouterr().err
    assert "iter 0 residual = " in err
    assert "l2norm of error = " in err


def test_main_rejects_bad_grid():
    with pytest.raises(SystemExit):
        main(["--points", "2"])