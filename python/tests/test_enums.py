import numpy as np
import pytest
from quadroots.enums import SolverState, describe


@pytest.mark.parametrize(
    ("state", "expected"),
    [
        (SolverState.UNCERTAIN, "UNCERTAIN"),
        (SolverState.INVALID_INPUT, "INVALID_INPUT"),
        (SolverState.ALL_REAL, "ALL_REAL"),
        (SolverState.NO_ROOT, "NO_ROOT"),
        (SolverState.ONE_REAL, "ONE_REAL"),
        (SolverState.TWO_REAL, "TWO_REAL"),
        (SolverState.OVER_UNDER_FLOW, "OVER_UNDER_FLOW"),
    ],
)
def test_describe_members(state, expected) -> None:
    assert describe(state) == expected
    assert describe(state.value) == expected
    assert str(state) == expected


@pytest.mark.parametrize("value", [7, -1, 99, np.int64(12), True, "TWO_REAL", 5.0, None])
def test_describe_unknown(value) -> None:
    assert describe(value) == "UNKNOWN_ERROR"


def test_describe_numpy_integer() -> None:
    assert describe(np.int32(5)) == "TWO_REAL"


def test_state_order_matches_values() -> None:
    assert [s.value for s in SolverState] == list(range(7))


def test_has_roots() -> None:
    carrying = {s for s in SolverState if s.has_roots}
    assert carrying == {SolverState.ALL_REAL, SolverState.ONE_REAL, SolverState.TWO_REAL}
