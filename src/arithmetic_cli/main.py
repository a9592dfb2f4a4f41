"""
Command-line entry point.

This script:
- Resolves the operation and operands from positional arguments and flags
- Evaluates the operation
- Prints "Result: <value>" to stdout, or "Error: <reason>" to stderr

Every error path ends with a non-zero exit status.
"""
import sys
from typing import Optional, Sequence

from arithmetic_cli.common.errors import UsageError
from arithmetic_cli.common.logger import configure_logging, logger
from arithmetic_cli.evaluator import calculate, format_value
from arithmetic_cli.resolver import merge_sources, parse_args, split_sources

EXIT_OK = 0
EXIT_FAILURE = 1
# Same status argparse uses for malformed arguments
EXIT_USAGE = 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run one calculation.

    :param argv: Command-line tokens, without the program name; ``sys.argv[1:]`` when omitted

    :return: Process exit status
    :rtype: int
    """
    namespace = parse_args(argv)
    configure_logging(namespace.verbose)

    try:
        request = merge_sources(*split_sources(namespace))
    except UsageError as exc:
        logger.info(f"⌨️❌ Arguments incomplete: {exc}")
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    result = calculate(request)
    if not result.ok:
        print(f"Error: {result.error}", file=sys.stderr)
        return EXIT_FAILURE

    print(f"Result: {format_value(result.value)}")
    return EXIT_OK


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
