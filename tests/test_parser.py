import pytest

from computor.equation import Component
from computor.parser import (
    component_from_terms,
    is_variable,
    parse_equation,
    parse_term,
    variable_power,
)
from computor.textutil import FormatError, NumberTooLargeError


@pytest.mark.parametrize(
    "text, expected",
    [("X", True), ("X^", True), ("X^2", True), ("X^a", False), ("Y", False), ("", False), (None, False), ("X2", False)],
)
def test_is_variable(text, expected):
    assert is_variable(text) is expected


def test_variable_power():
    assert variable_power("X") == 1
    assert variable_power("X^3") == 3
    assert variable_power("X^") == 0
    assert variable_power("5") is None
    assert variable_power("2.5") is None


def test_variable_power_bad_variable():
    with pytest.raises(FormatError):
        variable_power("Xa")


def test_component_from_terms_number_and_variable():
    assert component_from_terms("3", "X^2", -1) == Component(2, -3.0)
    assert component_from_terms("X", "4", 1) == Component(1, 4.0)


def test_component_from_terms_rejects_unknown_factor():
    with pytest.raises(FormatError):
        component_from_terms("5", "Y", 1)


def test_parse_term_empty():
    assert parse_term("", 1, 1) is None


def test_parse_term_applies_side_and_sign():
    assert parse_term("2 * X^1", -1, -1) == Component(1, 2.0)


def test_subject_example():
    equation = parse_equation("5 * X^0 + 4 * X^1 - 9.3 * X^2 = 1 * X^0")
    assert equation.coefficients() == pytest.approx((4.0, 4.0, -9.3))
    assert equation.degree() == 2


def test_merged_terms():
    equation = parse_equation("5 * X^0 + 4 * X^1 = 4 * X^0")
    assert equation.components == [Component(0, 1.0), Component(1, 4.0)]


def test_natural_form_cancels_square():
    equation = parse_equation("5 + 4 * X + X^2 = X^2")
    assert equation.coefficients()[2] == 0
    assert equation.degree() == 1


def test_leading_minus():
    assert parse_equation("-5 = 0").coefficients()[0] == -5.0


def test_minus_after_equals():
    assert parse_equation("5 = -3").coefficients()[0] == 8.0


def test_empty_right_side_allowed():
    equation = parse_equation("5 =")
    assert equation.coefficients()[0] == 5.0
    assert equation.degree() == 0


@pytest.mark.parametrize(
    "text",
    ["5 + 4", "= 5", "5 = 3 = 2", "5 + + 3 = 0", "5 * Y = 0", "5 = 3 +", "X2 = 0"],
)
def test_bad_forms(text):
    with pytest.raises(FormatError):
        parse_equation(text)


def test_number_too_large():
    with pytest.raises(NumberTooLargeError):
        parse_equation("12345678901 = 0")