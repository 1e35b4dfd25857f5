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


from quadroots.floats.eft import exact_mult, kahan_discriminant, veltkamp_split
from quadroots.floats.formats import (
    FloatFormat,
    get_float_format,
    keep_exponent,
    low_high_sort,
    scale2,
    sign,
)

__all__ = [
    "FloatFormat",
    "get_float_format",
    "keep_exponent",
    "scale2",
    "sign",
    "low_high_sort",
    "veltkamp_split",
    "exact_mult",
    "kahan_discriminant",
]
