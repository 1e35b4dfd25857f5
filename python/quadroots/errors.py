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


# Arg Parsing

TE_UNSUPPORTED_DTYPE = (
    "`dtype` must be one of the supported IEEE-754 binary formats: {0}.\nGot: '{1}'."
)

VE_CONTEXT_ARGS = "Need to invoke as default_context(pat, val, [(pat, val), ...])."

# Comparison

VE_CASE_NEEDS_THREE_COEFFICIENTS = (
    "Each equation in `cases` must be given as three coefficients (a, b, c).\nGot: {0}."
)

VE_EMPTY_SWEEP = "`cs` must contain at least one constant term to plot residuals."
