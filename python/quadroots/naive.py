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

from typing import TYPE_CHECKING

import numpy as np

from quadroots import defaults
from quadroots.enums.generics import NoInput, _drb
from quadroots.enums.parameters import SolverState
from quadroots.floats.formats import get_float_format
from quadroots.solver.cases import _finalize

if TYPE_CHECKING:
    from quadroots.typing import DTypeLike_, Number, SolveResult  # pragma: no cover


def naive_solve(
    a: Number,
    b: Number,
    c: Number,
    dtype: DTypeLike_ = NoInput(0),
) -> SolveResult:
    """
    Solve :math:`ax^2 + bx + c = 0` with the textbook formula, as a reference for comparison.

    Parameters
    ----------
    a, b, c: float
        The coefficient values.
    dtype: str, numpy.dtype or type, optional
        The IEEE-754 format, *"float64"* or *"float32"*. If not given uses ``defaults.dtype``.

    Returns
    -------
    tuple
        ``(state, x1, x2)`` classified with the same states as
        :class:`~quadroots.QuadraticSolver`.

    Notes
    -----
    The roots are :math:`x = (-b \\mp \\sqrt{b^2 - 4ac}) / 2a` evaluated directly. This overflows
    when :math:`b^2` or :math:`4ac` do, loses accuracy to cancellation in one of the two roots,
    and returns the roots in formula order, which is descending when *a* is negative.
    """
    fmt = get_float_format(_drb(defaults.dtype, dtype))
    two, four = fmt.cast(2.0), fmt.cast(4.0)
    with np.errstate(all="ignore"):
        a, b, c = fmt.cast(a), fmt.cast(b), fmt.cast(c)
        if fmt.is_invalid(a) or fmt.is_invalid(b) or fmt.is_invalid(c):
            return SolverState.INVALID_INPUT, fmt.nan, fmt.nan
        if a == 0:
            if b == 0:
                if c == 0:
                    return SolverState.ALL_REAL, fmt.inf, -fmt.inf
                return SolverState.NO_ROOT, fmt.nan, fmt.nan
            return _finalize((SolverState.ONE_REAL, -c / b, fmt.nan), fmt)

        delta = b * b - four * a * c
        if delta < 0:
            return SolverState.NO_ROOT, fmt.nan, fmt.nan
        if delta == 0:
            return _finalize((SolverState.ONE_REAL, -b / (two * a), fmt.nan), fmt)
        x1 = (-b - np.sqrt(delta)) / (two * a)
        x2 = (-b + np.sqrt(delta)) / (two * a)
        return _finalize((SolverState.TWO_REAL, x1, x2), fmt)
