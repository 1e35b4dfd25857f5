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

from copy import deepcopy
from typing import TYPE_CHECKING

import matplotlib.pyplot as plt

from quadroots.enums.generics import NoInput, _drb

PlotOutput = tuple[plt.Figure, plt.Axes, list[plt.Line2D]]  # type: ignore[name-defined]

if TYPE_CHECKING:
    from quadroots.typing import (  # pragma: no cover
        Any,
    )

DEFAULTS = dict(
    # Solver
    dtype="float64",
    # Comparison
    display_precision={
        "float64": 15,
        "float32": 7,
    },
    headers={
        "equation": "Equation",
        "dtype": "Type",
        "state": "State",
        "x1": "x_1",
        "x2": "x_2",
        "naive_state": "Naive State",
        "naive_x1": "Naive x_1",
        "naive_x2": "Naive x_2",
        "same": "Same",
    },
)


class Defaults:
    """
    The *defaults* object used by initialising objects. Values are printed below:

    .. ipython:: python

       from quadroots import defaults
       print(defaults.print())

    """

    _instance = None

    dtype: str
    display_precision: dict[str, int]
    headers: dict[str, str]

    def __new__(cls) -> Defaults:
        if cls._instance is None:
            # Singleton pattern creates only one instance: TODO (low) might not be thread safe
            cls._instance = super(Defaults, cls).__new__(cls)  # noqa: UP008

            for k, v in DEFAULTS.items():
                setattr(cls._instance, k, deepcopy(v))

        return cls._instance

    def reset_defaults(self) -> None:
        """
        Revert defaults back to their initialisation status.

        Examples
        --------
        .. ipython:: python

           from quadroots import defaults
           defaults.reset_defaults()
        """
        attrs = [
            v
            for v in dir(self)
            if "__" not in v and not callable(getattr(self, v)) and v != "_instance"
        ]
        for attr in attrs:
            delattr(self, attr)

        for k, v in DEFAULTS.items():
            setattr(self, k, deepcopy(v))

    def print(self) -> str:
        """
        Return a string representation of the current values in the defaults object.
        """

        def _t_n(v: str) -> str:  # teb-newline
            return f"\t{v}\n"

        _: str = f"""\
Solver:\n
{"".join([_t_n(f"{attribute}: {getattr(self, attribute)}") for attribute in ["dtype"]])}
Comparison:\n
{
            "".join(
                [
                    _t_n(f"{attribute}: {getattr(self, attribute)}")
                    for attribute in [
                        "display_precision",
                        "headers",
                    ]
                ]
            )
        }
"""  # noqa: W291
        return _


def plot(
    x: list[list[Any]],
    y: list[list[Any]],
    labels: list[str] | NoInput = NoInput(0),
    logy: bool = False,
) -> PlotOutput:
    labels = _drb([], labels)
    fig, ax = plt.subplots(1, 1)
    lines = []
    for _x, _y in zip(x, y, strict=True):
        (line,) = ax.plot(_x, _y)
        lines.append(line)
    if not isinstance(labels, NoInput) and len(labels) == len(lines):
        ax.legend(lines, labels)

    if logy:
        ax.set_yscale("symlog", linthresh=1e-17)
    ax.grid(True)
    return fig, ax, lines


__all__ = ["Defaults"]
