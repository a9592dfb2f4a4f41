"""Evaluate a single arithmetic operation on two operands."""
from decimal import Decimal
import math
from typing import Union

from arithmetic_cli.common.errors import CalculatorError, DivisionByZeroError
from arithmetic_cli.common.logger import logger
from arithmetic_cli.common.operations import CalculationRequest, CalculationResult, Operation


def evaluate(operation: Union[Operation, str], a: float, b: float) -> float:
    """
    Apply an operation to two operands.

    The operation may be an ``Operation`` member or any accepted alias ("add", "ADD", "+", ...).
    Division fails only when the divisor is exactly zero (``0.0`` or ``-0.0``); no tolerance is applied.

    :param operation: Operation or alias
    :param float a: First operand
    :param float b: Second operand

    :return: Computed value
    :rtype: float
    :raises UnknownOperationError: If the operation is not a known alias
    :raises DivisionByZeroError: If dividing by zero
    """
    op = Operation.from_alias(operation)
    logger.debug(f"Evaluating {a!r} {op.symbol} {b!r}")

    if op is Operation.DIV and b == 0.0:
        raise DivisionByZeroError()

    return op.function(a, b)


def calculate(request: CalculationRequest) -> CalculationResult:
    """
    Evaluate a resolved request, capturing calculation errors in the result.

    :param CalculationRequest request: Resolved operation and operands

    :return: Result holding either the value or the error message
    :rtype: CalculationResult
    """
    try:
        value = evaluate(request.operation, request.first, request.second)
    except CalculatorError as exc:
        logger.info(f"🧮❌ Calculation failed for {request.operation.value}: {exc}")
        return CalculationResult(request=request, error=str(exc))

    logger.info(f"🧮✅ Calculation {request.operation.value} succeeded: {value!r}")
    return CalculationResult(request=request, value=value)


def format_value(value: float) -> str:
    """
    Render a float the way the result line prints it.

    Uses the shortest decimal that round-trips, without exponent notation,
    and drops the fractional part of integral values.

    Examples:
        - 5.0 -> "5"
        - 6.2 -> "6.2"
        - 1e21 -> "1000000000000000000000"
        - 1e-07 -> "0.0000001"
        - -0.0 -> "-0"

    :param float value: Value to render

    :return: Text rendering
    :rtype: str
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    return format(Decimal(repr(value)), "f")
