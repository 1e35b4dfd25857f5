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


__docformat__ = "restructuredtext"

# Let users know if they're missing any of our hard dependencies
_hard_dependencies = ("pandas", "matplotlib", "numpy")

for _dependency in _hard_dependencies:
    try:
        __import__(_dependency)
    except ImportError as _e:  # pragma: no cover
        raise ImportError(f"`quadroots` requires installation of {_dependency}: {_e}")

from quadroots.default import Defaults, NoInput

defaults = Defaults()

from contextlib import ContextDecorator

from quadroots.errors import VE_CONTEXT_ARGS


class default_context(ContextDecorator):
    """
    Context manager to temporarily set options in the `with` statement context.

    You need to invoke as ``default_context(pat, val, [(pat, val), ...])``.

    Examples
    --------
    >>> with default_context("dtype", "float32"):
    ...     pass
    """

    def __init__(self, *args) -> None:
        if len(args) % 2 != 0 or len(args) < 2:
            raise ValueError(VE_CONTEXT_ARGS)

        self.ops = list(zip(args[::2], args[1::2]))

    def __enter__(self) -> None:
        self.undo = [(pat, getattr(defaults, pat, None)) for pat, _ in self.ops]

        for pat, val in self.ops:
            setattr(defaults, pat, val)

    def __exit__(self, *args) -> None:
        if self.undo:
            for pat, val in self.undo:
                setattr(defaults, pat, val)


from quadroots.enums import SolverState, describe

from quadroots.floats import (
    FloatFormat,
    exact_mult,
    get_float_format,
    kahan_discriminant,
    keep_exponent,
    veltkamp_split,
)

from quadroots.solver import QuadraticSolver, solve_quadratic

from quadroots.naive import naive_solve

from quadroots.compare import (
    compare,
    comparison_table,
    format_equation,
    is_same_result,
    plot_residuals,
    relative_residual,
)

__version__ = "1.0.0"

# module level doc-string
__doc__ = """
QuadRoots - Reliable real roots of quadratic equations in IEEE-754 arithmetic
============================================================================

**quadroots** is a Python package solving :math:`ax^2 + bx + c = 0` for float32 and float64
coefficients across the full dynamic range of the format. It classifies every equation exactly,
separates magnitude from mantissa to avoid spurious overflow and underflow, and evaluates the
discriminant with an error-free product to avoid catastrophic cancellation.
"""

__all__ = [
    # defaults
    "defaults",
    "default_context",
    "NoInput",
    # enums
    "SolverState",
    "describe",
    # floats
    "FloatFormat",
    "get_float_format",
    "keep_exponent",
    "veltkamp_split",
    "exact_mult",
    "kahan_discriminant",
    # solver
    "QuadraticSolver",
    "solve_quadratic",
    "naive_solve",
    # compare
    "compare",
    "comparison_table",
    "format_equation",
    "is_same_result",
    "relative_residual",
    "plot_residuals",
]
