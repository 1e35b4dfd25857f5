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

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

from quadroots.errors import TE_UNSUPPORTED_DTYPE

if TYPE_CHECKING:
    from quadroots.typing import DTypeLike, FloatScalar  # pragma: no cover


@dataclass(frozen=True)
class FloatFormat:
    """
    Description of an IEEE-754 binary floating-point format used by the solver.

    Parameters
    ----------
    dtype: numpy.dtype
        The numpy floating dtype. Only *float32* and *float64* are supported.

    Notes
    -----
    All bit widths are read from :class:`numpy.finfo` so the solving algorithm is written once
    and is parametrised by this object rather than duplicated per precision.

    The exponent range ``[m_min, m_max]`` is the range of unbiased exponents of normal numbers,
    i.e. *[-1022, 1023]* for *float64* and *[-126, 127]* for *float32*.
    """

    dtype: np.dtype  # type: ignore[type-arg]
    n_bit_f: int = field(init=False)
    n_bit_e: int = field(init=False)

    def __post_init__(self) -> None:
        info = np.finfo(self.dtype)
        object.__setattr__(self, "n_bit_f", int(info.nmant))
        object.__setattr__(self, "n_bit_e", int(info.nexp))

    @property
    def name(self) -> str:
        return self.dtype.name

    @property
    def m_max(self) -> int:
        """Largest unbiased exponent of a normal number."""
        return (1 << (self.n_bit_e - 1)) - 1

    @property
    def m_min(self) -> int:
        """Smallest unbiased exponent of a normal number."""
        return 1 - self.m_max

    @property
    def e_min(self) -> int:
        """Lower bound of the exponent band where the rescaled discriminant is safe to form."""
        return self.m_min + 2 * self.n_bit_f - 4

    @property
    def e_max(self) -> int:
        """Upper bound (exclusive) of the exponent band where the rescaled discriminant is safe."""
        return self.m_max - 2 - (self.n_bit_f >> 1)

    @property
    def split_factor(self) -> FloatScalar:
        """Veltkamp constant, :math:`2^{s} + 1` with :math:`s = \\lfloor f/2 \\rfloor + 1`."""
        return self.cast((1 << ((self.n_bit_f >> 1) + 1)) + 1)

    @property
    def inf(self) -> FloatScalar:
        return self.dtype.type(np.inf)

    @property
    def nan(self) -> FloatScalar:
        return self.dtype.type(np.nan)

    def cast(self, x: float | FloatScalar) -> FloatScalar:
        """Convert a value to a scalar of this format's dtype."""
        return self.dtype.type(x)

    def frexp(self, x: FloatScalar) -> tuple[FloatScalar, int]:
        """
        Decompose ``x`` as ``mantissa * 2**exponent`` with ``0.5 <= |mantissa| < 1``.

        Subnormal inputs are normalised, so the returned exponent may be below ``m_min``.
        """
        mantissa, exponent = np.frexp(x)
        return self.dtype.type(mantissa), int(exponent)

    def ldexp(self, x: FloatScalar, m: int) -> FloatScalar:
        """Return ``x * 2**m`` rounded once to this format."""
        return self.dtype.type(np.ldexp(x, m))

    def is_invalid(self, x: FloatScalar) -> bool:
        """Whether ``x`` is NaN or infinite."""
        return not bool(np.isfinite(x))


_FLOAT_FORMATS: dict[str, FloatFormat] = {
    "float64": FloatFormat(np.dtype(np.float64)),
    "float32": FloatFormat(np.dtype(np.float32)),
}


def get_float_format(dtype: DTypeLike | FloatFormat) -> FloatFormat:
    """
    Return the :class:`FloatFormat` for a dtype given by name, :class:`numpy.dtype` or scalar type.

    Parameters
    ----------
    dtype: str, numpy.dtype, type or FloatFormat
        For example *"float64"*, *np.float32* or *np.dtype("float64")*.

    Returns
    -------
    FloatFormat

    Raises
    ------
    TypeError
        If the dtype is not *float32* or *float64*.
    """
    if isinstance(dtype, FloatFormat):
        return dtype
    try:
        name = np.dtype(dtype).name
    except TypeError:
        raise TypeError(TE_UNSUPPORTED_DTYPE.format(list(_FLOAT_FORMATS), dtype)) from None
    try:
        return _FLOAT_FORMATS[name]
    except KeyError:
        raise TypeError(TE_UNSUPPORTED_DTYPE.format(list(_FLOAT_FORMATS), name)) from None


def sign(x: FloatScalar) -> int:
    """Return -1 for negative ``x`` and +1 otherwise. Zero, of either sign, is positive."""
    return -1 if x < 0 else 1


def keep_exponent(m: int, fmt: FloatFormat) -> tuple[int, int]:
    """
    Split a power of two exponent into a representable part and a carried remainder.

    Parameters
    ----------
    m: int
        The desired exponent.
    fmt: FloatFormat
        The format whose normal exponent range bounds the primary part.

    Returns
    -------
    tuple of int
        ``(m1, m2)`` with ``m1 + m2 == m`` and ``m_min <= m1 <= m_max``. ``m2`` is zero whenever
        ``m`` is itself in range.

    Examples
    --------
    .. ipython:: python

       from quadroots.floats import get_float_format, keep_exponent

       keep_exponent(1100, get_float_format("float64"))
    """
    if fmt.m_min <= m <= fmt.m_max:
        return m, 0
    if m < fmt.m_min:
        return fmt.m_min, m - fmt.m_min
    return fmt.m_max, m - fmt.m_max


def scale2(x: FloatScalar, m1: int, m2: int, fmt: FloatFormat) -> FloatScalar:
    """Apply the carried remainder ``2**m2`` and then the primary ``2**m1`` to ``x``."""
    return fmt.ldexp(fmt.ldexp(x, m2), m1)


def low_high_sort(y1: FloatScalar, y2: FloatScalar) -> tuple[FloatScalar, FloatScalar]:
    if y1 < y2:
        return y1, y2
    return y2, y1
