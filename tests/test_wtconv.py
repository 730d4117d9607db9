import pytest

from drills.wtconv import Kg, Lb, kg_to_lb, lb_to_kg


def test_str():
    assert str(Kg(8)) == "8.00 Kg"
    assert str(Lb(8)) == "8.00 lb."
    assert str(Kg(0.5)) == "0.50 Kg"


@pytest.mark.parametrize(
    "value, pounds, kilograms",
    [
        (8, "17.64 lb.", "3.63 Kg"),
        (16, "35.28 lb.", "7.26 Kg"),
        (32, "70.56 lb.", "14.51 Kg"),
    ],
)
def test_table(value, pounds, kilograms):
    assert str(kg_to_lb(Kg(value))) == pounds
    assert str(lb_to_kg(Lb(value))) == kilograms


def test_kg_to_lb():
    result = kg_to_lb(Kg(1))
    assert isinstance(result, Lb)
    assert result == 2.205


def test_lb_to_kg():
    result = lb_to_kg(Lb(2.205))
    assert isinstance(result, Kg)
    assert result == 1.0


@pytest.mark.parametrize("value", [0.0, 0.3, 1.0, 99.9])
def test_round_trip(value):
    assert lb_to_kg(kg_to_lb(value)) == pytest.approx(value)