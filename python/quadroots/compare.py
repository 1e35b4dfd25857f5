# SPDX-License-Identifier: LicenseRef-Rateslib-Dual
#
# Copyright (c) 2026 Siffrorna Technology Limited
#
# Dual-licensed: Free Educational Licence or Paid Commercial Licence (commercial/professional use)
# Source-available, not open source.
#
# See LICENSE and https://rateslib.com/py/en/latest/i_licence.html for details,
# and/or contact info (at) rateslib (dot) com
####################################################################################################


from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np
from pandas import DataFrame

from quadroots import defaults
from quadroots.default import plot
from quadroots.enums.generics import NoInput, _drb
from quadroots.enums.parameters import SolverState, describe
from quadroots.errors import VE_CASE_NEEDS_THREE_COEFFICIENTS, VE_EMPTY_SWEEP
from quadroots.floats.formats import get_float_format
from quadroots.naive import naive_solve
from quadroots.solver.solver import solve_quadratic

if TYPE_CHECKING:
    from quadroots.default import PlotOutput
    from quadroots.typing import (  # pragma: no cover
        DTypeLike_,
        FloatScalar,
        Iterable,
        Number,
        Sequence,
        SolveResult,
    )

logger = logging.getLogger(__name__)


def is_same_result(r: SolveResult, t: SolveResult) -> bool:
    """
    Test whether two solve results agree.

    States must be equal. Root values are compared exactly, and only where the state carries
    them: *x1* for ``ONE_REAL`` and both roots for ``TWO_REAL``.
    """
    if r[0] != t[0]:
        return False
    if r[0] == SolverState.ONE_REAL:
        return bool(r[1] == t[1])
    if r[0] == SolverState.TWO_REAL:
        return bool(r[1] == t[1] and r[2] == t[2])
    return True


def format_equation(a: Number, b: Number, c: Number, dtype: DTypeLike_ = NoInput(0)) -> str:
    """
    Render the equation as text, omitting zero terms.

    Parameters
    ----------
    a, b, c: float
        The coefficient values.
    dtype: str, numpy.dtype or type, optional
        Determines the number of significant digits from ``defaults.display_precision``.

    Returns
    -------
    str

    Examples
    --------
    .. ipython:: python

       from quadroots import format_equation

       format_equation(1.0, 0.0, -9.0)
    """
    fmt = get_float_format(_drb(defaults.dtype, dtype))
    p = defaults.display_precision[fmt.name]
    terms = []
    for m, term in ((a, " * x^2"), (b, " * x"), (c, "")):
        m = float(fmt.cast(m))
        if m == 0:
            continue
        if not terms:
            terms.append(f"{m:.{p}g}{term}")
        elif m < 0:
            terms.append(f"- {-m:.{p}g}{term}")
        else:
            terms.append(f"+ {m:.{p}g}{term}")
    if not terms:
        return "0 = 0"
    return " ".join(terms) + " = 0"


def compare(a: Number, b: Number, c: Number, dtype: DTypeLike_ = NoInput(0)) -> DataFrame:
    """
    Solve one equation with :class:`~quadroots.QuadraticSolver` and with the naive formula.

    Parameters
    ----------
    a, b, c: float
        The coefficient values.
    dtype: str, numpy.dtype or type, optional
        The IEEE-754 format, *"float64"* or *"float32"*. If not given uses ``defaults.dtype``.

    Returns
    -------
    DataFrame
        Indexed by *["state", "x1", "x2"]* with a column for each solver. Whether the two results
        agree, per :func:`is_same_result`, is stored in ``DataFrame.attrs["same"]``.

    Examples
    --------
    .. ipython:: python

       from quadroots import compare

       compare(1e307, 0.0, -9e307)
    """
    dtype = _drb(defaults.dtype, dtype)
    r = solve_quadratic(a, b, c, dtype=dtype)
    t = naive_solve(a, b, c, dtype=dtype)
    df = DataFrame(
        {
            "QuadraticSolver": [describe(r[0]), r[1], r[2]],
            "Naive": [describe(t[0]), t[1], t[2]],
        },
        index=["state", "x1", "x2"],
    )
    df.attrs["same"] = is_same_result(r, t)
    return df


def comparison_table(
    cases: Iterable[Sequence[Number]], dtype: DTypeLike_ = NoInput(0)
) -> DataFrame:
    """
    Tabulate the solver and naive results for a collection of equations.

    Parameters
    ----------
    cases: iterable of (a, b, c)
        The equations to solve.
    dtype: str, numpy.dtype or type, optional
        The IEEE-754 format, *"float64"* or *"float32"*. If not given uses ``defaults.dtype``.

    Returns
    -------
    DataFrame
        One row per equation, with columns labelled by ``defaults.headers``.

    Notes
    -----
    Equations where the two solvers disagree are logged at *INFO* level on the
    ``quadroots.compare`` logger.
    """
    fmt = get_float_format(_drb(defaults.dtype, dtype))
    headers = defaults.headers
    rows = []
    for case in cases:
        if len(case) != 3:
            raise ValueError(VE_CASE_NEEDS_THREE_COEFFICIENTS.format(case))
        a, b, c = case
        r = solve_quadratic(a, b, c, dtype=fmt)
        t = naive_solve(a, b, c, dtype=fmt)
        same = is_same_result(r, t)
        equation = format_equation(a, b, c, dtype=fmt)
        logger.debug("Compared %s (%s): %s, %s", equation, fmt.name, describe(r[0]), same)
        if not same:
            logger.info(
                "Solvers differ for %s (%s): %s (%r, %r) vs naive %s (%r, %r)",
                equation,
                fmt.name,
                describe(r[0]),
                float(r[1]),
                float(r[2]),
                describe(t[0]),
                float(t[1]),
                float(t[2]),
            )
        rows.append(
            {
                headers["equation"]: equation,
                headers["dtype"]: fmt.name,
                headers["state"]: describe(r[0]),
                headers["x1"]: float(r[1]),
                headers["x2"]: float(r[2]),
                headers["naive_state"]: describe(t[0]),
                headers["naive_x1"]: float(t[1]),
                headers["naive_x2"]: float(t[2]),
                headers["same"]: same,
            }
        )
    columns = [
        headers[k]
        for k in ["equation", "dtype", "state", "x1", "x2", "naive_state", "naive_x1", "naive_x2"]
    ]
    return DataFrame(rows, columns=columns + [headers["same"]])


def relative_residual(a: Number, b: Number, c: Number, x: Number | FloatScalar) -> float:
    """
    Return :math:`|ax^2 + bx + c| / (|a|x^2 + |b||x| + |c|)` evaluated in float64.

    NaN is returned for a non-finite ``x`` and zero when the denominator vanishes.
    """
    a, b, c, x = float(a), float(b), float(c), float(x)
    if not np.isfinite(x):
        return float("nan")
    with np.errstate(all="ignore"):
        den = abs(a) * abs(x) * abs(x) + abs(b) * abs(x) + abs(c)
        if den == 0:
            return 0.0
        return abs(a * x * x + b * x + c) / den


def _max_residual(a: Number, b: Number, c: Number, result: SolveResult) -> float:
    state, x1, x2 = result
    if state == SolverState.TWO_REAL:
        return max(relative_residual(a, b, c, x1), relative_residual(a, b, c, x2))
    if state == SolverState.ONE_REAL:
        return relative_residual(a, b, c, x1)
    return float("nan")


def plot_residuals(
    a: Number,
    b: Number,
    cs: Sequence[Number],
    dtype: DTypeLike_ = NoInput(0),
) -> PlotOutput:
    """
    Plot the relative residual of the roots of both solvers over a sweep of constant terms.

    Parameters
    ----------
    a, b: float
        The fixed quadratic and linear coefficients.
    cs: sequence of float
        The constant terms to solve for.
    dtype: str, numpy.dtype or type, optional
        The IEEE-754 format, *"float64"* or *"float32"*. If not given uses ``defaults.dtype``.

    Returns
    -------
    (fig, ax, line) : Matplotlib.Figure, Matplotplib.Axes, Matplotlib.Lines2D

    Notes
    -----
    For each equation the larger residual of its roots is shown. Equations without a real root
    for a solver leave a gap in that solver's line.
    """
    if len(cs) == 0:
        raise ValueError(VE_EMPTY_SWEEP)
    fmt = get_float_format(_drb(defaults.dtype, dtype))
    x = [float(c) for c in cs]
    y_solver = [_max_residual(a, b, c, solve_quadratic(a, b, c, dtype=fmt)) for c in cs]
    y_naive = [_max_residual(a, b, c, naive_solve(a, b, c, dtype=fmt)) for c in cs]
    return plot([x, x], [y_solver, y_naive], labels=["QuadraticSolver", "Naive"], logy=True)
