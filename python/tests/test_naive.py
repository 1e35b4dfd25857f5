import math

import numpy as np
import pytest
from quadroots import SolverState, default_context, naive_solve, solve_quadratic

F64_MAX = float(np.finfo(np.float64).max)


@pytest.mark.parametrize(
    ("a", "b", "c", "state", "x1", "x2"),
    [
        (0.0, 0.0, 0.0, SolverState.ALL_REAL, math.inf, -math.inf),
        (0.0, 0.0, 4.0, SolverState.NO_ROOT, math.nan, math.nan),
        (0.0, 2.0, 8.0, SolverState.ONE_REAL, -4.0, math.nan),
        (2.0, 8.0, 10.0, SolverState.NO_ROOT, math.nan, math.nan),
        (2.0, -8.0, 8.0, SolverState.ONE_REAL, 2.0, math.nan),
        (6.0, -33.0, 45.0, SolverState.TWO_REAL, 2.5, 3.0),
        (1.0, 0.0, -9.0, SolverState.TWO_REAL, -3.0, 3.0),
        (math.nan, 1.0, 1.0, SolverState.INVALID_INPUT, math.nan, math.nan),
    ],
)
def test_naive_solve(a, b, c, state, x1, x2):
    result = naive_solve(a, b, c)
    assert result[0] == state
    np.testing.assert_equal(float(result[1]), x1)
    np.testing.assert_equal(float(result[2]), x2)


def test_naive_solve_formula_order():
    # roots are not sorted for negative a
    state, x1, x2 = naive_solve(-1.0, 0.0, 9.0)
    assert state == SolverState.TWO_REAL
    assert (x1, x2) == (3.0, -3.0)


def test_naive_solve_overflows_where_solver_does_not():
    a, c = F64_MAX, -F64_MAX / 9.0
    assert naive_solve(a, 0.0, c)[0] == SolverState.OVER_UNDER_FLOW
    assert solve_quadratic(a, 0.0, c)[0] == SolverState.TWO_REAL


def test_naive_solve_double_root_overflow():
    a, b, c = math.ldexp(2.0, 1000), math.ldexp(-8.0, 1000), math.ldexp(8.0, 1000)
    assert naive_solve(a, b, c)[0] == SolverState.OVER_UNDER_FLOW
    assert solve_quadratic(a, b, c)[0] == SolverState.ONE_REAL


def test_naive_solve_loses_small_root_to_cancellation():
    state, x1, x2 = naive_solve(1.0, 1.0, 1e-300)
    assert state == SolverState.TWO_REAL
    assert x2 == 0.0
    assert solve_quadratic(1.0, 1.0, 1e-300)[2] == -1e-300


def test_naive_solve_misses_discriminant_sign():
    a, b, c = 94906265.625, 189812534.0, 94906268.375
    assert naive_solve(a, b, c)[0] == SolverState.ONE_REAL
    assert solve_quadratic(a, b, c)[0] == SolverState.TWO_REAL


def test_naive_solve_default_dtype():
    with default_context("dtype", "float32"):
        state, x1, x2 = naive_solve(6.0, -33.0, 45.0)
    assert x1.dtype == np.float32
    assert (x1, x2) == (2.5, 3.0)
