import math
from fractions import Fraction

import numpy as np
import pytest
from quadroots.floats import (
    FloatFormat,
    exact_mult,
    get_float_format,
    kahan_discriminant,
    keep_exponent,
    low_high_sort,
    scale2,
    sign,
    veltkamp_split,
)


@pytest.fixture()
def f64():
    return get_float_format("float64")


@pytest.fixture()
def f32():
    return get_float_format("float32")


@pytest.mark.parametrize(
    ("dtype", "n_bit_f", "n_bit_e", "m_min", "m_max", "e_min", "e_max", "split"),
    [
        ("float64", 52, 11, -1022, 1023, -922, 995, 134217729.0),
        ("float32", 23, 8, -126, 127, -84, 114, 4097.0),
    ],
)
def test_float_format_constants(dtype, n_bit_f, n_bit_e, m_min, m_max, e_min, e_max, split):
    fmt = get_float_format(dtype)
    assert fmt.n_bit_f == n_bit_f
    assert fmt.n_bit_e == n_bit_e
    assert fmt.m_min == m_min
    assert fmt.m_max == m_max
    assert fmt.e_min == e_min
    assert fmt.e_max == e_max
    assert fmt.split_factor == split
    assert fmt.split_factor.dtype == np.dtype(dtype)
    assert fmt.name == dtype


@pytest.mark.parametrize("dtype", ["float64", np.float64, np.dtype("float64"), float])
def test_get_float_format_aliases(dtype):
    assert get_float_format(dtype) is get_float_format("float64")


def test_get_float_format_passthrough(f32):
    assert get_float_format(f32) is f32


@pytest.mark.parametrize("dtype", ["float16", np.int64, "complex128", "not_a_dtype"])
def test_get_float_format_raises(dtype):
    with pytest.raises(TypeError, match="`dtype` must be one of"):
        get_float_format(dtype)


def test_constructors(f32):
    assert np.isnan(f32.nan) and f32.nan.dtype == np.float32
    assert np.isposinf(f32.inf) and f32.inf.dtype == np.float32
    assert f32.cast(0.1) == np.float32(0.1)


@pytest.mark.parametrize("x", [np.nan, np.inf, -np.inf])
def test_is_invalid(f64, x):
    assert f64.is_invalid(f64.cast(x))


@pytest.mark.parametrize("x", [0.0, -0.0, 5e-324, 1.7976931348623157e308, -1.0])
def test_is_valid(f64, x):
    assert not f64.is_invalid(f64.cast(x))


def test_frexp_subnormal(f64):
    mantissa, exponent = f64.frexp(f64.cast(5e-324))
    assert mantissa == 0.5
    assert exponent == -1073


def test_frexp_keeps_sign(f32):
    mantissa, exponent = f32.frexp(f32.cast(-33.0))
    assert mantissa == np.float32(-0.515625)
    assert exponent == 6
    assert mantissa.dtype == np.float32


@pytest.mark.parametrize(
    ("x", "expected"),
    [(-2.0, -1), (-5e-324, -1), (0.0, 1), (-0.0, 1), (3.0, 1)],
)
def test_sign_treats_zero_as_positive(x, expected):
    assert sign(np.float64(x)) == expected


@pytest.mark.parametrize(
    ("m", "expected"),
    [
        (0, (0, 0)),
        (5, (5, 0)),
        (-1022, (-1022, 0)),
        (1023, (1023, 0)),
        (1024, (1023, 1)),
        (1100, (1023, 77)),
        (-1023, (-1022, -1)),
        (-1100, (-1022, -78)),
    ],
)
def test_keep_exponent_f64(f64, m, expected):
    result = keep_exponent(m, f64)
    assert result == expected
    assert sum(result) == m


def test_keep_exponent_f32(f32):
    assert keep_exponent(200, f32) == (127, 73)
    assert keep_exponent(-200, f32) == (-126, -74)


def test_scale2_past_overflow_boundary(f64):
    result = scale2(f64.cast(0.75), 1023, 1, f64)
    assert result == math.ldexp(0.75, 1024)
    assert np.isfinite(result)


def test_scale2_into_subnormal(f64):
    result = scale2(f64.cast(0.5), -1022, -50, f64)
    assert result == math.ldexp(0.5, -1072)
    assert result > 0


def test_low_high_sort():
    assert low_high_sort(3.0, -1.0) == (-1.0, 3.0)
    assert low_high_sort(-1.0, 3.0) == (-1.0, 3.0)
    assert low_high_sort(2.0, 2.0) == (2.0, 2.0)


@pytest.mark.parametrize("x", [1.0 / 3.0, -2.0 / 7.0, 0.1, 123456789.123, 1e-300])
def test_veltkamp_split_f64(f64, x):
    hi, lo = veltkamp_split(f64.cast(x), f64)
    assert Fraction(float(hi)) + Fraction(float(lo)) == Fraction(x)
    assert (math.frexp(float(hi))[0] * 2**27).is_integer()
    assert (math.frexp(float(lo))[0] * 2**27).is_integer()


@pytest.mark.parametrize("x", [1.0 / 3.0, -2.0 / 7.0, 0.1, 12345.678])
def test_veltkamp_split_f32(f32, x):
    x = f32.cast(x)
    hi, lo = veltkamp_split(x, f32)
    assert hi.dtype == np.float32 and lo.dtype == np.float32
    assert Fraction(float(hi)) + Fraction(float(lo)) == Fraction(float(x))
    assert (math.frexp(float(hi))[0] * 2**13).is_integer()


@pytest.mark.parametrize(
    ("x", "y"),
    [
        (1.0 / 3.0, 3.0 / 7.0),
        (0.1, 0.7),
        (123456.789, 9.87654321e-3),
        (-1.0 / 3.0, 1.0 / 3.0),
        (189812534.0, 189812534.0),
    ],
)
@pytest.mark.parametrize("dtype", ["float64", "float32"])
def test_exact_mult_is_error_free(dtype, x, y):
    fmt = get_float_format(dtype)
    x, y = fmt.cast(x), fmt.cast(y)
    p = x * y
    e = exact_mult(x, y, p, fmt)
    assert Fraction(float(x)) * Fraction(float(y)) == Fraction(float(p)) + Fraction(float(e))


def test_kahan_discriminant_recovers_cancelled_value(f64):
    # b**2 - 4ac == 7.5625 exactly, yet both products round to the same double
    a, b, c = 94906265.625, 189812534.0, 94906268.375
    assert b * b - 4 * a * c == 0.0
    result = kahan_discriminant(a, b, c, f64)
    assert result == 7.5625


def test_kahan_discriminant_cheap_path(f64):
    assert kahan_discriminant(1.0, 5.0, 1.0, f64) == 21.0
    assert kahan_discriminant(2.0, 8.0, 10.0, f64) == -16.0


def test_kahan_discriminant_f32_dtype(f32):
    result = kahan_discriminant(0.75, -0.515625, 0.087890625, f32)
    assert result.dtype == np.float32
    assert result == np.float32(0.002197265625)


def test_float_format_is_hashable(f64):
    assert {f64: 1}[FloatFormat(np.dtype("float64"))] == 1
