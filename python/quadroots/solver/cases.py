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

from quadroots.enums.parameters import SolverState
from quadroots.floats.eft import kahan_discriminant
from quadroots.floats.formats import keep_exponent, low_high_sort, scale2, sign

if TYPE_CHECKING:
    from quadroots.floats.formats import FloatFormat
    from quadroots.typing import FloatScalar, SolveResult  # pragma: no cover

# Each path below receives coefficients already cast to the dtype of ``fmt`` and returns the
# tentative (state, x1, x2) triple. Over/underflow is only detected afterwards by `_finalize`.


def _invalid_input(fmt: FloatFormat) -> SolveResult:
    return SolverState.INVALID_INPUT, fmt.nan, fmt.nan


def _all_real(fmt: FloatFormat) -> SolveResult:
    return SolverState.ALL_REAL, fmt.inf, -fmt.inf


def _no_root(fmt: FloatFormat) -> SolveResult:
    return SolverState.NO_ROOT, fmt.nan, fmt.nan


def _one_real(x: FloatScalar, fmt: FloatFormat) -> SolveResult:
    return SolverState.ONE_REAL, fmt.cast(x), fmt.nan


def _two_real(x1: FloatScalar, x2: FloatScalar, fmt: FloatFormat) -> SolveResult:
    return SolverState.TWO_REAL, fmt.cast(x1), fmt.cast(x2)


def _solve_linear(b: FloatScalar, c: FloatScalar, fmt: FloatFormat) -> SolveResult:
    """Solve ``b*x + c = 0``, the degenerate equation when ``a`` is zero."""
    if b == 0:
        if c == 0:
            return _all_real(fmt)
        return _no_root(fmt)
    if c == 0:
        return _one_real(fmt.cast(0.0), fmt)
    return _one_real(-c / b, fmt)


def _sqrt_minus_c_div_a(a: FloatScalar, c: FloatScalar, fmt: FloatFormat) -> SolveResult:
    """
    Return the pair :math:`\\pm\\sqrt{-c/a}` for ``a`` and ``c`` of opposite sign.

    The exponent difference of ``c`` and ``a`` is split into an even part, halved to give the
    exponent of the root, and a parity bit folded back into the mantissa of ``c``. The square root
    is therefore only ever taken on a value of order one.
    """
    a2, ea = fmt.frexp(a)
    c2, ec = fmt.frexp(c)
    ecp = ec - ea
    m = (ecp & ~1) >> 1
    c3 = fmt.ldexp(c2, ecp & 1)
    s = np.sqrt(-c3 / a2)
    m1, m2 = keep_exponent(m, fmt)
    x2 = scale2(s, m1, m2, fmt)
    return _two_real(-x2, x2, fmt)


def _solve_axx_plus_c(a: FloatScalar, c: FloatScalar, fmt: FloatFormat) -> SolveResult:
    """Solve ``a*x**2 + c = 0``."""
    if c == 0:
        # the double root at zero is reported once
        return _one_real(fmt.cast(0.0), fmt)
    if sign(a) == sign(c):
        return _no_root(fmt)
    return _sqrt_minus_c_div_a(a, c, fmt)


def _solve_axx_plus_bx(a: FloatScalar, b: FloatScalar, fmt: FloatFormat) -> SolveResult:
    """
    Solve ``a*x**2 + b*x = 0``, with roots zero and ``-b/a``.

    The nonzero root is negative exactly when ``a`` and ``b`` share a sign, so placing it in the
    first slot in that case, and in the second otherwise, keeps the pair in ascending order.
    """
    if sign(a) == sign(b):
        return _two_real(-b / a, fmt.cast(0.0), fmt)
    return _two_real(fmt.cast(0.0), -b / a, fmt)


def _solve_complete(
    a: FloatScalar, b: FloatScalar, c: FloatScalar, fmt: FloatFormat
) -> SolveResult:
    """
    Solve ``a*x**2 + b*x + c = 0`` with all coefficients nonzero.

    Substituting :math:`x = 2^k y` with :math:`k = e_b - e_a` scales the equation to
    :math:`a_2 y^2 + b_2 y + c' = 0` where :math:`a_2, b_2` are unit range mantissas and
    :math:`c' = c_2 2^{e_c + e_a - 2 e_b}`. Inside the safe exponent band the discriminant of the
    scaled equation is formed directly. Below it the constant term is negligible in the
    discriminant and the roots are :math:`-b/a` and :math:`c / (a x_1)`. Above it the linear term
    is negligible and the roots are :math:`\\pm\\sqrt{-c/a}`.
    """
    two = fmt.cast(2.0)
    a2, ea = fmt.frexp(a)
    b2, eb = fmt.frexp(b)
    c2, ec = fmt.frexp(c)
    k = eb - ea
    ecp = ec + ea - 2 * eb
    k1, k2 = keep_exponent(k, fmt)

    if fmt.e_min <= ecp < fmt.e_max:
        cp = fmt.ldexp(c2, ecp)
        delta = kahan_discriminant(a2, b2, cp, fmt)
        if delta < 0:
            return _no_root(fmt)
        if delta > 0:
            # b2 and sign(b) * sqrt(delta) never cancel; the sign is cast so t stays in dtype
            t = b2 + fmt.cast(sign(b)) * np.sqrt(delta)
            y1 = scale2(-(two * cp) / t, k1, k2, fmt)
            y2 = scale2(-t / (two * a2), k1, k2, fmt)
            return _two_real(*low_high_sort(y1, y2), fmt)
        return _one_real(scale2(-b2 / (two * a2), k1, k2, fmt), fmt)

    dm = ecp & ~1
    c3 = fmt.ldexp(c2, ecp & 1)
    if ecp < fmt.e_min:
        y1 = -b2 / a2
        y2 = c3 / (a2 * y1)
        dm1, dm2 = keep_exponent(dm + k, fmt)
        y1 = scale2(y1, k1, k2, fmt)
        y2 = scale2(y2, dm1, dm2, fmt)
        return _two_real(*low_high_sort(y1, y2), fmt)

    if sign(a) == sign(c):
        return _no_root(fmt)
    dm1, dm2 = keep_exponent((dm >> 1) + k, fmt)
    s = scale2(np.sqrt(np.abs(c3 / a2)), dm1, dm2, fmt)
    return _two_real(-s, s, fmt)


def _dispatch(a: FloatScalar, b: FloatScalar, c: FloatScalar, fmt: FloatFormat) -> SolveResult:
    if fmt.is_invalid(a) or fmt.is_invalid(b) or fmt.is_invalid(c):
        return _invalid_input(fmt)
    if a == 0:
        return _solve_linear(b, c, fmt)
    if b == 0:
        return _solve_axx_plus_c(a, c, fmt)
    if c == 0:
        return _solve_axx_plus_bx(a, b, fmt)
    return _solve_complete(a, b, c, fmt)


def _finalize(result: SolveResult, fmt: FloatFormat) -> SolveResult:
    """Downgrade a root carrying state to ``OVER_UNDER_FLOW`` if any of its roots is not finite."""
    state, x1, x2 = result
    if (state == SolverState.TWO_REAL and (fmt.is_invalid(x1) or fmt.is_invalid(x2))) or (
        state == SolverState.ONE_REAL and fmt.is_invalid(x1)
    ):
        return SolverState.OVER_UNDER_FLOW, x1, x2
    return result


def solve_coefficients(
    a: FloatScalar, b: FloatScalar, c: FloatScalar, fmt: FloatFormat
) -> SolveResult:
    """
    Classify and solve ``a*x**2 + b*x + c = 0`` in the floating-point format ``fmt``.

    Parameters
    ----------
    a, b, c: float
        The coefficients. Cast to the dtype of ``fmt`` before any arithmetic.
    fmt: FloatFormat
        The floating-point format in which every intermediate is computed.

    Returns
    -------
    tuple
        ``(state, x1, x2)`` as documented on :class:`~quadroots.enums.SolverState`.
    """
    with np.errstate(all="ignore"):
        a, b, c = fmt.cast(a), fmt.cast(b), fmt.cast(c)
        return _finalize(_dispatch(a, b, c, fmt), fmt)
