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
from quadroots.enums.parameters import SolverState, describe
from quadroots.floats.formats import get_float_format
from quadroots.solver.cases import solve_coefficients

if TYPE_CHECKING:
    from quadroots.typing import (  # pragma: no cover
        Coefficients,
        DTypeLike_,
        FloatFormat,
        FloatScalar,
        Number,
        SolveResult,
    )


class QuadraticSolver:
    """
    Solve the quadratic equation, :math:`ax^2 + bx + c = 0`, for its real roots.

    Parameters
    ----------
    a: float
        The *a* coefficient value.
    b: float
        The *b* coefficient value.
    c: float
        The *c* coefficient value.
    dtype: str, numpy.dtype or type, optional
        The IEEE-754 format in which the equation is stored and solved, *"float64"* or
        *"float32"*. If not given uses ``defaults.dtype``.

    Notes
    -----
    No validation of the coefficient values is performed at construction. NaN or infinite
    coefficients are reported by :meth:`solve` as ``SolverState.INVALID_INPUT``.

    The equation is classified exactly by which coefficients are zero, and each case is solved
    by separating the power of two exponent of every coefficient from its mantissa. Roots are
    only re-scaled to their true magnitude at the end, in two steps, so an intermediate value
    never leaves the representable range when the roots themselves are representable. In the
    general case the discriminant is evaluated with Kahan's compensated algorithm using an
    error-free product, and the roots are formed without subtracting near equal quantities.

    A solver instance is mutable and not safe for concurrent use: callers sharing one across
    threads must serialise calls to :meth:`solve` and :meth:`reset`.

    Examples
    --------
    .. ipython:: python

       from quadroots import QuadraticSolver

       solver = QuadraticSolver(1.0, 1.0, -1.0)
       solver.solve()
    """

    _a: FloatScalar
    _b: FloatScalar
    _c: FloatScalar
    _x1: FloatScalar
    _x2: FloatScalar
    _state: SolverState

    def __init__(
        self,
        a: Number,
        b: Number,
        c: Number,
        dtype: DTypeLike_ = NoInput(0),
    ) -> None:
        self._fmt: FloatFormat = get_float_format(_drb(defaults.dtype, dtype))
        self.reset(a, b, c)

    def __repr__(self) -> str:
        return f"<qr.QuadraticSolver:{self._fmt.name}:{self._state.name} at {hex(id(self))}>"

    @property
    def dtype(self) -> str:
        """The name of the dtype in which the equation is solved."""
        return self._fmt.name

    @property
    def state(self) -> SolverState:
        """The :class:`~quadroots.enums.SolverState` of the most recent solve."""
        return self._state

    @property
    def roots(self) -> tuple[FloatScalar, FloatScalar]:
        """The root slots *(x1, x2)* of the most recent solve."""
        return self._x1, self._x2

    @property
    def coefficients(self) -> Coefficients:
        """The coefficients *(a, b, c)* cast to ``dtype``."""
        return self._a, self._b, self._c

    def reset(self, a: Number, b: Number, c: Number) -> None:
        """
        Replace the coefficients of the equation and clear the result.

        Parameters
        ----------
        a, b, c: float
            The new coefficient values.

        Returns
        -------
        None
        """
        with np.errstate(over="ignore"):
            self._a, self._b, self._c = self._fmt.cast(a), self._fmt.cast(b), self._fmt.cast(c)
        self._state = SolverState.UNCERTAIN
        self._x1 = self._fmt.cast(0.0)
        self._x2 = self._fmt.cast(0.0)

    def solve(self) -> SolveResult:
        """
        Solve the equation and return the state with both root slots.

        Returns
        -------
        tuple
            ``(state, x1, x2)``. The meaning of the root slots depends on the state:

            - ``ALL_REAL``: *(+inf, -inf)*.
            - ``ONE_REAL``: *x1* is the root and *x2* is NaN.
            - ``TWO_REAL``: both roots, ordered *x1 <= x2*.
            - any other state: no usable root values.

        Notes
        -----
        Solving does not modify the coefficients, so repeated calls give identical results.
        """
        self._state, self._x1, self._x2 = solve_coefficients(self._a, self._b, self._c, self._fmt)
        return self._state, self._x1, self._x2

    def describe(self) -> str:
        """Return the label of the current state, see :func:`~quadroots.enums.describe`."""
        return describe(self._state)


def solve_quadratic(
    a: Number,
    b: Number,
    c: Number,
    dtype: DTypeLike_ = NoInput(0),
) -> SolveResult:
    """
    Solve :math:`ax^2 + bx + c = 0` in a single call.

    Parameters
    ----------
    a, b, c: float
        The coefficient values.
    dtype: str, numpy.dtype or type, optional
        The IEEE-754 format, *"float64"* or *"float32"*. If not given uses ``defaults.dtype``.

    Returns
    -------
    tuple
        ``(state, x1, x2)``, see :meth:`QuadraticSolver.solve`.
    """
    return QuadraticSolver(a, b, c, dtype=dtype).solve()
