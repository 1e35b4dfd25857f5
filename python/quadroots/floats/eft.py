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

if TYPE_CHECKING:
    from quadroots.floats.formats import FloatFormat
    from quadroots.typing import FloatScalar  # pragma: no cover


def veltkamp_split(x: FloatScalar, fmt: FloatFormat) -> tuple[FloatScalar, FloatScalar]:
    """
    Split ``x`` exactly into a high and a low part, ``x == xhigh + xlow``.

    Parameters
    ----------
    x: float32 or float64
        The value to split. Must be small enough that ``split_factor * x`` does not overflow.
    fmt: FloatFormat
        The floating-point format of ``x``.

    Returns
    -------
    tuple
        ``(xhigh, xlow)`` where ``xhigh`` carries only the upper half of the significand bits and
        ``xlow`` the remainder. Products of two halves are exact in the format.
    """
    x = fmt.cast(x)
    gamma = fmt.split_factor * x
    delta = x - gamma
    xhigh = gamma + delta
    xlow = x - xhigh
    return xhigh, xlow


def exact_mult(
    x: FloatScalar, y: FloatScalar, pxy: FloatScalar, fmt: FloatFormat
) -> FloatScalar:
    """
    Return the rounding error of a product, i.e. ``e`` such that ``x * y == pxy + e`` exactly.

    Parameters
    ----------
    x, y: float32 or float64
        The multiplicands.
    pxy: float32 or float64
        The rounded product ``x * y`` as computed in the format.
    fmt: FloatFormat
        The floating-point format of the arguments.

    Returns
    -------
    float32 or float64

    Notes
    -----
    This is Dekker's error-free product. The partial products of the split halves are accumulated
    against ``-pxy`` from the largest to the smallest so that each sum is exact.
    """
    xhi, xlo = veltkamp_split(x, fmt)
    yhi, ylo = veltkamp_split(y, fmt)
    t1 = -fmt.cast(pxy) + xhi * yhi
    t2 = t1 + xhi * ylo
    t3 = t2 + xlo * yhi
    return t3 + xlo * ylo


def kahan_discriminant(
    a: FloatScalar, b: FloatScalar, c: FloatScalar, fmt: FloatFormat
) -> FloatScalar:
    """
    Evaluate :math:`b^2 - 4ac` with compensation for catastrophic cancellation.

    Parameters
    ----------
    a, b, c: float32 or float64
        Coefficients, already rescaled so that neither :math:`b^2` nor :math:`4ac` overflow.
    fmt: FloatFormat
        The floating-point format of the coefficients.

    Returns
    -------
    float32 or float64

    Notes
    -----
    With :math:`p = b^2` and :math:`q = 4ac` the naive difference is accepted whenever
    :math:`3|p - q| \\ge p + q`. Otherwise the rounding errors of both products are recovered with
    :func:`exact_mult` and added back, which preserves the sign of the discriminant when
    :math:`b^2 \\approx 4ac`.

    Examples
    --------
    .. ipython:: python

       from quadroots.floats import get_float_format, kahan_discriminant

       kahan_discriminant(94906265.625, 189812534.0, 94906268.375, get_float_format("float64"))
    """
    a, b, c = fmt.cast(a), fmt.cast(b), fmt.cast(c)
    three, four = fmt.cast(3.0), fmt.cast(4.0)
    p = b * b
    q = four * a * c
    d = p - q
    if three * np.abs(d) >= p + q:
        return d
    dp = exact_mult(b, b, p, fmt)
    dq = exact_mult(four * a, c, q, fmt)
    return d + (dp - dq)
