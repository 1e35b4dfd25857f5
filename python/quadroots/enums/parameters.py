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

from enum import Enum
from typing import Any

import numpy as np

UNKNOWN_STATE_LABEL = "UNKNOWN_ERROR"


class SolverState(Enum):
    """
    Enumerable type for the outcome of solving a quadratic equation.

    Notes
    -----
    - ``UNCERTAIN``: the equation has not been solved since construction or reset.
    - ``INVALID_INPUT``: a coefficient is NaN or infinite. Both roots are NaN.
    - ``ALL_REAL``: every real number is a root, only for *a = b = c = 0*. Roots are
      *(+inf, -inf)*.
    - ``NO_ROOT``: no real root exists. Both roots are NaN.
    - ``ONE_REAL``: exactly one finite real root in *x1*, *x2* is NaN.
    - ``TWO_REAL``: two finite real roots with *x1 <= x2*.
    - ``OVER_UNDER_FLOW``: a root exists but its magnitude is not representable.

    Only ``ALL_REAL``, ``ONE_REAL`` and ``TWO_REAL`` carry usable root values.
    """

    UNCERTAIN = 0
    INVALID_INPUT = 1
    ALL_REAL = 2
    NO_ROOT = 3
    ONE_REAL = 4
    TWO_REAL = 5
    OVER_UNDER_FLOW = 6

    def __str__(self) -> str:
        return self.name

    @property
    def has_roots(self) -> bool:
        """Whether the state carries usable root values."""
        return self in (SolverState.ALL_REAL, SolverState.ONE_REAL, SolverState.TWO_REAL)


def describe(state: SolverState | int | Any) -> str:
    """
    Return the stable, human readable label of a solver state.

    Parameters
    ----------
    state: SolverState or int
        A member of :class:`SolverState` or its integer value.

    Returns
    -------
    str
        The enumeration name, or *"UNKNOWN_ERROR"* for any other value.

    Examples
    --------
    .. ipython:: python

       from quadroots.enums import SolverState, describe

       describe(SolverState.TWO_REAL)
       describe(99)
    """
    if isinstance(state, SolverState):
        return state.name
    if isinstance(state, bool) or not isinstance(state, int | np.integer):
        return UNKNOWN_STATE_LABEL
    try:
        return SolverState(int(state)).name
    except ValueError:
        return UNKNOWN_STATE_LABEL
