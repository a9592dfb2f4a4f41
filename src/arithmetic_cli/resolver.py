"""Read the operation and operands from positional arguments and flags."""
import argparse
import re
from typing import Optional, Sequence, Tuple, Union

from arithmetic_cli import __version__
from arithmetic_cli.common.errors import MissingOperandError, MissingOperationError, UnknownOperationError
from arithmetic_cli.common.logger import logger
from arithmetic_cli.common.operations import (
    ArgumentSources,
    CalculationRequest,
    Operation,
    accepted_aliases,
)

PROG = "arithmetic-cli"

# Decimal float literal, optionally signed, with optional exponent; or inf/infinity/nan
OPERAND_PATTERN = re.compile(
    r"[+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def _is_number(token: str) -> bool:
    """
    Determine if a token is a valid operand.

    :param str token: Token string

    :return: True if the whole token is a float literal, else False
    :rtype: bool
    """
    return OPERAND_PATTERN.fullmatch(token) is not None


def parse_operand(token: str) -> float:
    """
    argparse ``type`` hook parsing an operand as a 64-bit float.

    Stricter than ``float()``: underscores and surrounding whitespace are rejected.

    :param str token: Raw command-line token

    :return: Operand value
    :rtype: float
    :raises argparse.ArgumentTypeError: If the token is not a float literal
    """
    if not _is_number(token):
        raise argparse.ArgumentTypeError(f"invalid float value: {token!r}")
    return float(token)


class CalculatorArgumentParser(argparse.ArgumentParser):
    """
    Argument parser that reads every negative number as a value, never as an option.

    argparse only recognizes ``-5`` and ``-2.5`` as negative numbers; ``-1e5``,
    ``-1E-3`` and ``-inf`` would otherwise be taken for unknown flags.
    """

    def _parse_optional(self, arg_string):
        if arg_string.startswith("-") and _is_number(arg_string):
            return None
        return super()._parse_optional(arg_string)


def parse_operation(token: str) -> Operation:
    """
    argparse ``type`` hook validating an operation token against the alias table.

    :param str token: Raw command-line token

    :return: Canonical operation
    :rtype: Operation
    :raises argparse.ArgumentTypeError: If the token is not an accepted alias
    """
    try:
        return Operation.from_alias(token)
    except UnknownOperationError:
        raise argparse.ArgumentTypeError(
            f"invalid choice: {token!r} (choose from {accepted_aliases()}, case-insensitive)"
        ) from None


def build_parser() -> argparse.ArgumentParser:
    """
    Build the command-line parser.

    Each logical field (operation, first operand, second operand) can be given
    positionally or through its flag; both are optional at parse time and merged afterwards.

    :return: Configured parser
    :rtype: argparse.ArgumentParser
    """
    parser = CalculatorArgumentParser(
        prog=PROG,
        description="Performs basic arithmetic operations",
        epilog=f"Operations: {accepted_aliases()} (case-insensitive). "
        "Positional values take precedence over flags.",
    )

    parser.add_argument(
        "operation",
        nargs="?",
        type=parse_operation,
        metavar="OPERATION",
        help="The arithmetic operation to perform",
    )
    parser.add_argument("first", nargs="?", type=parse_operand, metavar="OPERAND1", help="The first operand")
    parser.add_argument("second", nargs="?", type=parse_operand, metavar="OPERAND2", help="The second operand")

    parser.add_argument(
        "-o",
        "--operation",
        dest="operation_flag",
        type=parse_operation,
        metavar="OPERATION",
        help="The arithmetic operation to perform",
    )
    parser.add_argument("-f", "--first", dest="first_flag", type=parse_operand, metavar="OPERAND1", help="The first operand")
    parser.add_argument("-s", "--second", dest="second_flag", type=parse_operand, metavar="OPERAND2", help="The second operand")

    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log resolution and evaluation steps to stderr (-vv for debug output)",
    )
    parser.add_argument("--version", action="version", version=f"{PROG} {__version__}")

    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse the command line, allowing positionals and flags in any order."""
    return build_parser().parse_intermixed_args(argv)


def split_sources(namespace: argparse.Namespace) -> Tuple[ArgumentSources, ArgumentSources]:
    """
    Separate parsed values by the source they came from.

    :param argparse.Namespace namespace: Result of ``parse_args``

    :return: Tuple of (positional, flags)
    :rtype: Tuple[ArgumentSources, ArgumentSources]
    """
    positional = ArgumentSources(
        operation=namespace.operation,
        first=namespace.first,
        second=namespace.second,
    )
    flags = ArgumentSources(
        operation=namespace.operation_flag,
        first=namespace.first_flag,
        second=namespace.second_flag,
    )
    return positional, flags


def _pick(field: str, positional: ArgumentSources, flags: ArgumentSources) -> Optional[Union[Operation, float]]:
    """
    Pick one field, preferring the positional value over the flag value.

    :param str field: Field name ("operation", "first" or "second")
    :param ArgumentSources positional: Values given positionally
    :param ArgumentSources flags: Values given through flags

    :return: The chosen value, or None when neither source gives it
    :rtype: Optional[Union[Operation, float]]
    """
    value = getattr(positional, field)
    if value is not None:
        logger.debug(f"{field}: using positional value {value!r}")
        return value
    value = getattr(flags, field)
    if value is not None:
        logger.debug(f"{field}: using flag value {value!r}")
    return value


def merge_sources(positional: ArgumentSources, flags: ArgumentSources) -> CalculationRequest:
    """
    Merge both sources into a request, field by field.

    For each field independently the positional value wins and the flag value is the fallback.

    :param ArgumentSources positional: Values given positionally
    :param ArgumentSources flags: Values given through flags

    :return: Resolved request
    :rtype: CalculationRequest
    :raises MissingOperationError: If no source gives the operation
    :raises MissingOperandError: If no source gives one of the operands
    """
    operation = _pick("operation", positional, flags)
    if operation is None:
        raise MissingOperationError()

    first = _pick("first", positional, flags)
    if first is None:
        raise MissingOperandError("first")

    second = _pick("second", positional, flags)
    if second is None:
        raise MissingOperandError("second")

    return CalculationRequest(operation=operation, first=first, second=second)


def resolve(argv: Optional[Sequence[str]] = None) -> CalculationRequest:
    """
    Parse the command line and resolve it into a request.

    Malformed input (unknown operation, non-numeric operand) makes argparse print
    its usage message and exit with status 2.

    :param argv: Command-line tokens, without the program name; ``sys.argv[1:]`` when omitted

    :return: Resolved request
    :rtype: CalculationRequest
    :raises MissingOperationError: If no source gives the operation
    :raises MissingOperandError: If no source gives one of the operands
    """
    return merge_sources(*split_sources(parse_args(argv)))
