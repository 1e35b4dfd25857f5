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


from quadroots.solver.cases import solve_coefficients
from quadroots.solver.solver import QuadraticSolver, solve_quadratic

__all__ = [
    "QuadraticSolver",
    "solve_quadratic",
    "solve_coefficients",
]
