"""Exceptions raised while resolving arguments and evaluating operations."""


class CalculatorError(Exception):
    """Base class for every failure reported to the user."""


class UsageError(CalculatorError):
    """A required value was given neither positionally nor through a flag."""


class MissingOperationError(UsageError):
    """Neither a positional argument nor --operation names the operation."""

    def __init__(self) -> None:
        super().__init__("Operation argument missing")


class MissingOperandError(UsageError):
    """
    An operand is given neither positionally nor through its flag.

    :param str name: Which operand is missing, "first" or "second"
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"missing operand ({name})")


class UnknownOperationError(CalculatorError, ValueError):
    """The token is not one of the accepted operation aliases."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"Unknown operation: {token!r}")


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """The divisor of a division is exactly zero."""

    def __init__(self) -> None:
        super().__init__("Division by zero")
