import math

import pytest

from drills.tempconv import (
    ABSOLUTE_ZERO_C,
    ABSOLUTE_ZERO_F,
    ABSOLUTE_ZERO_K,
    BOILING_C,
    BOILING_F,
    BOILING_K,
    FREEZING_C,
    FREEZING_F,
    FREEZING_K,
    Celsius,
    Fahrenheit,
    Kelvin,
    c_to_f,
    c_to_k,
    f_to_c,
    f_to_k,
    format_g,
    k_to_c,
    k_to_f,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (-13.333333333333334, "-13.333333333333334"),
        (46.4, "46.4"),
        (0.0, "0"),
        (-0.0, "-0"),
        (100.0, "100"),
        (123456.0, "123456"),
        (1e6, "1e+06"),
        (1234567.0, "1.234567e+06"),
        (0.0001, "0.0001"),
        (0.00001, "1e-05"),
        (0.5, "0.5"),
        (-273.15, "-273.15"),
        (1.5e-10, "1.5e-10"),
        (2e21, "2e+21"),
        (float("nan"), "NaN"),
        (float("inf"), "Inf"),
        (float("-inf"), "-Inf"),
    ],
)
def test_format_g(value, expected):
    assert format_g(value) == expected


@pytest.mark.parametrize(
    "value, fahrenheit, celsius",
    [
        (8, "-13.333333333333334°C", "46.4°F"),
        (16, "-8.88888888888889°C", "60.8°F"),
        (32, "0°C", "89.6°F"),
    ],
)
def test_cf_table(value, fahrenheit, celsius):
    assert str(f_to_c(Fahrenheit(value))) == fahrenheit
    assert str(c_to_f(Celsius(value))) == celsius


def test_str_units():
    assert str(Celsius(8)) == "8°C"
    assert str(Fahrenheit(32)) == "32°F"
    assert str(Kelvin(0)) == "0°K"
    assert str(Kelvin(273.15)) == "273.15°K"


def test_c_to_f():
    result = c_to_f(Celsius(100))
    assert isinstance(result, Fahrenheit)
    assert result == 212.0
    assert c_to_f(Celsius(0)) == 32.0


def test_f_to_c():
    result = f_to_c(Fahrenheit(212))
    assert isinstance(result, Celsius)
    assert result == 100.0
    assert f_to_c(Fahrenheit(32)) == 0.0


def test_c_to_k():
    result = c_to_k(Celsius(0))
    assert isinstance(result, Kelvin)
    assert result == 273.15


def test_k_to_c():
    result = k_to_c(Kelvin(273.15))
    assert isinstance(result, Celsius)
    assert result == 0.0


def test_k_to_f():
    result = k_to_f(Kelvin(273.15))
    assert isinstance(result, Fahrenheit)
    assert result == 32.0
    assert k_to_f(Kelvin(373.15)) == pytest.approx(212.0)


def test_f_to_k():
    result = f_to_k(Fahrenheit(32))
    assert isinstance(result, Kelvin)
    assert result == 273.15
    assert f_to_k(Fahrenheit(212)) == pytest.approx(373.15)


@pytest.mark.parametrize("value", [0.0, 0.25, 0.8312325142909469, -40.0, 1000.0])
def test_round_trips(value):
    assert f_to_c(c_to_f(value)) == pytest.approx(value, abs=1e-9)
    assert k_to_c(c_to_k(value)) == pytest.approx(value, abs=1e-9)
    assert f_to_k(k_to_f(value)) == pytest.approx(value, abs=1e-9)


def test_minus_forty_is_shared():
    assert c_to_f(-40) == -40.0
    assert f_to_c(-40) == -40.0


def test_constants_agree():
    assert c_to_k(ABSOLUTE_ZERO_C) == pytest.approx(ABSOLUTE_ZERO_K)
    assert c_to_f(ABSOLUTE_ZERO_C) == pytest.approx(ABSOLUTE_ZERO_F)
    assert c_to_k(FREEZING_C) == pytest.approx(FREEZING_K)
    assert c_to_f(FREEZING_C) == pytest.approx(FREEZING_F)
    assert c_to_k(BOILING_C) == pytest.approx(BOILING_K)
    assert c_to_f(BOILING_C) == pytest.approx(BOILING_F)
    assert str(ABSOLUTE_ZERO_C) == "-273.15°C"


def test_conversions_accept_plain_floats():
    assert math.isclose(c_to_f(37.0), 98.6)