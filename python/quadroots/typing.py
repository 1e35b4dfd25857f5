# This module is reserved only for typing purposes.
# It avoids all circular import by performing a TYPE_CHECKING check on any component.

from collections.abc import Iterable as Iterable
from collections.abc import Sequence as Sequence
from typing import Any as Any
from typing import TypeAlias

import numpy as np

from quadroots.enums.generics import NoInput as NoInput
from quadroots.enums.parameters import SolverState as SolverState
from quadroots.floats.formats import FloatFormat as FloatFormat

FloatScalar: TypeAlias = "np.float32 | np.float64"
Number: TypeAlias = "float | int | np.floating[Any]"
DTypeLike: TypeAlias = "str | np.dtype[Any] | type[np.floating[Any]]"

SolveResult: TypeAlias = "tuple[SolverState, FloatScalar, FloatScalar]"
Coefficients: TypeAlias = "tuple[FloatScalar, FloatScalar, FloatScalar]"
DTypeLike_: TypeAlias = "DTypeLike | FloatFormat | NoInput"
