"""Test evaluate, calculate and format_value."""
import math

import pytest

from arithmetic_cli.common.errors import DivisionByZeroError, UnknownOperationError
from arithmetic_cli.common.operations import CalculationRequest, Operation
from arithmetic_cli.evaluator import calculate, evaluate, format_value

OPERANDS = [
    (2.5, 3.7),
    (10.0, 4.0),
    (-3.0, 7.5),
    (0.1, 0.2),
    (1e300, 1e300),
    (-0.0, 5.0),
]


@pytest.mark.parametrize("operation,a,b,expected", [
    ("add", 2.5, 3.7, 6.2),
    ("sub", 10.0, 4.0, 6.0),
    ("mul", 3.14, 2.0, 6.28),
    ("div", 10.0, 2.0, 5.0),
    ("sub", 4.0, 10.0, -6.0),
    ("div", 1.0, 4.0, 0.25),
])
def test_evaluate_valid(operation, a, b, expected):
    """evaluate returns the expected value."""
    assert evaluate(operation, a, b) == expected


@pytest.mark.parametrize("aliases", [
    ("add", "ADD", "Add", "+", Operation.ADD),
    ("sub", "SUB", "Sub", "-", Operation.SUB),
    ("mul", "MUL", "Mul", "*", Operation.MUL),
    ("div", "DIV", "Div", "/", Operation.DIV),
])
@pytest.mark.parametrize("a,b", OPERANDS)
def test_alias_equivalence(aliases, a, b):
    """All aliases of an operation give the same value."""
    values = {evaluate(alias, a, b) for alias in aliases}
    assert len(values) == 1


@pytest.mark.parametrize("a,b", OPERANDS)
def test_add_and_mul_commutative(a, b):
    """Addition and multiplication do not depend on operand order."""
    assert evaluate("add", a, b) == a + b == evaluate("add", b, a)
    assert evaluate("mul", a, b) == a * b == evaluate("mul", b, a)


def test_sub_not_commutative():
    """Subtraction is a - b."""
    assert evaluate("sub", 10.0, 4.0) == 6.0
    assert evaluate("sub", 4.0, 10.0) == -6.0


@pytest.mark.parametrize("divisor", [0.0, -0.0, 0])
def test_division_by_zero(divisor):
    """Dividing by exact zero, signed or not, raises DivisionByZeroError."""
    with pytest.raises(DivisionByZeroError, match="Division by zero"):
        evaluate("div", 10.0, divisor)


def test_division_by_near_zero():
    """Only exact zero is rejected; tiny divisors are divided normally."""
    tiny = 0.1 + 0.2 - 0.3
    assert tiny != 0.0
    assert evaluate("/", 1.0, tiny) == 1.0 / tiny


def test_division_by_zero_is_zero_division_error():
    """DivisionByZeroError can be caught as ZeroDivisionError."""
    with pytest.raises(ZeroDivisionError):
        evaluate(Operation.DIV, 1.0, 0.0)


def test_evaluate_unknown_operation():
    """An operation outside the alias table raises an explicit error."""
    with pytest.raises(UnknownOperationError):
        evaluate("pow", 2.0, 3.0)


def test_calculate_success():
    """calculate stores the value on success."""
    result = calculate(CalculationRequest(operation="add", first=2.5, second=3.7))
    assert result.ok
    assert result.value == 6.2
    assert result.request.operation is Operation.ADD


def test_calculate_division_by_zero():
    """calculate stores the error message on failure."""
    result = calculate(CalculationRequest(operation="div", first=10.0, second=0.0))
    assert not result.ok
    assert result.value is None
    assert result.error == "Division by zero"


@pytest.mark.parametrize("value,expected", [
    (5.0, "5"),
    (6.2, "6.2"),
    (6.28, "6.28"),
    (-6.0, "-6"),
    (0.0, "0"),
    (-0.0, "-0"),
    (0.1 + 0.2, "0.30000000000000004"),
    (1e21, "1000000000000000000000"),
    (1e-07, "0.0000001"),
    (-2.5e-5, "-0.000025"),
    (math.inf, "inf"),
    (-math.inf, "-inf"),
    (math.nan, "NaN"),
    (3, "3"),
])
def test_format_value(value, expected):
    """format_value renders floats without exponent or trailing '.0'."""
    assert format_value(value) == expected
