"""Package logger shared by the resolver, the evaluator and the entry point."""
import logging

LOGGER_NAME = "arithmetic_cli"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(LOGGER_NAME)
logger.addHandler(logging.NullHandler())


def verbosity_to_level(verbosity: int) -> int:
    """
    Map the number of ``-v`` flags to a logging level.

    :param int verbosity: Count of ``-v`` flags given on the command line

    :return: Logging level
    :rtype: int
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0) -> logging.Logger:
    """
    Attach a single stderr handler to the package logger.

    Calling this again replaces the previous handler instead of stacking a new one.

    :param int verbosity: Count of ``-v`` flags given on the command line

    :return: The configured package logger
    :rtype: logging.Logger
    """
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(verbosity_to_level(verbosity))
    return logger
