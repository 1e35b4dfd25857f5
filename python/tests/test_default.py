import pytest
from quadroots import QuadraticSolver, __version__, default_context, defaults


def test_version() -> None:
    assert __version__ == "1.0.0"


def test_context_raises() -> None:
    with pytest.raises(ValueError, match="Need to invoke as "):
        default_context("only 1 arg")


def test_context_sets_and_restores_dtype() -> None:
    with default_context("dtype", "float32"):
        assert defaults.dtype == "float32"
        assert QuadraticSolver(1.0, 0.0, -9.0).dtype == "float32"
    assert defaults.dtype == "float64"
    assert QuadraticSolver(1.0, 0.0, -9.0).dtype == "float64"


def test_context_as_decorator() -> None:
    @default_context("dtype", "float32")
    def f():
        return QuadraticSolver(1.0, 2.0, 3.0).dtype

    assert f() == "float32"
    assert defaults.dtype == "float64"


def test_reset_defaults() -> None:
    defaults.dtype = "float32"
    defaults.headers["state"] = "Outcome"
    assert defaults.dtype == "float32"
    assert defaults.headers["state"] == "Outcome"

    defaults.reset_defaults()
    assert defaults.dtype == "float64"
    assert defaults.headers["state"] == "State"


def test_defaults_singleton() -> None:
    from quadroots.default import Defaults

    other = Defaults()
    assert id(other) == id(defaults)


def test_defaults_print() -> None:
    result = defaults.print()
    assert "dtype: float64" in result
    assert "display_precision" in result
