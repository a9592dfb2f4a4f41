"""Supported operations, their aliases, and the pydantic models exchanged between resolver and evaluator."""
from enum import Enum
import operator
from typing import Callable, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from arithmetic_cli.common.errors import UnknownOperationError


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn = Callable[[float, float], float]


class Operation(str, Enum):
    """Canonical form of the four supported arithmetic operations."""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"
    DIV = "div"

    @property
    def symbol(self) -> str:
        return SYMBOLS[self]

    @property
    def function(self) -> OperatorFn:
        return FUNCTIONS[self]

    @classmethod
    def from_alias(cls, token: str) -> "Operation":
        """
        Resolve any accepted spelling of an operation to its canonical member.

        Matching is case-insensitive: "Add", "ADD", "add" and "+" all give ``Operation.ADD``.

        :param str token: Operation name or symbol as typed by the user

        :return: Canonical operation
        :rtype: Operation
        :raises UnknownOperationError: If the token is not a known alias
        """
        if isinstance(token, cls):
            return token
        try:
            return ALIASES[token.lower()]
        except (KeyError, AttributeError):
            raise UnknownOperationError(str(token)) from None


SYMBOLS: Dict[Operation, str] = {
    Operation.ADD: "+",
    Operation.SUB: "-",
    Operation.MUL: "*",
    Operation.DIV: "/",
}

# Division by zero is checked by the evaluator before operator.truediv is reached
FUNCTIONS: Dict[Operation, OperatorFn] = {
    Operation.ADD: operator.add,
    Operation.SUB: operator.sub,
    Operation.MUL: operator.mul,
    Operation.DIV: operator.truediv,
}

# Lowercase alias -> operation. Both the argument parser and the evaluator read this table.
ALIASES: Dict[str, Operation] = {
    **{op.value: op for op in Operation},
    **{symbol: op for op, symbol in SYMBOLS.items()},
}


def accepted_aliases() -> str:
    """Human-readable list of the accepted operation values, for help and error text."""
    words = [op.value.capitalize() for op in Operation]
    return ", ".join(words + list(SYMBOLS.values()))


class _OperationField(BaseModel):
    @field_validator("operation", mode="before", check_fields=False)
    @classmethod
    def operation_from_alias(cls, v):
        """Accept any alias wherever an operation is expected."""
        if v is None:
            return v
        return Operation.from_alias(v)


class ArgumentSources(_OperationField):
    """Values read from a single input source (positional arguments or flags); any may be absent."""

    operation: Optional[Operation] = Field(default=None, description="Operation given by this source")
    first: Optional[float] = Field(default=None, description="First operand given by this source")
    second: Optional[float] = Field(default=None, description="Second operand given by this source")


class CalculationRequest(_OperationField):
    """A fully resolved calculation, ready for the evaluator."""

    model_config = ConfigDict(frozen=True)

    operation: Operation = Field(..., description="Canonical operation")
    first: float = Field(..., description="First operand")
    second: float = Field(..., description="Second operand")


class CalculationResult(BaseModel):
    """Outcome of evaluating a request: either a value or an error message."""

    model_config = ConfigDict(frozen=True)

    request: CalculationRequest = Field(..., description="The evaluated request")
    value: Optional[float] = Field(default=None, description="Computed value on success")
    error: Optional[str] = Field(default=None, description="Failure reason")

    @model_validator(mode="after")
    def exactly_one_outcome(self) -> "CalculationResult":
        """Ensure a result carries either a value or an error, never both or neither."""
        if (self.value is None) == (self.error is None):
            raise ValueError("A result needs exactly one of 'value' or 'error'")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None
