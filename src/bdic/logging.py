import logging
import sys

FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logger(level=logging.WARNING):
    """
    Sets up the `bdic` logger with the specified logging level.
    Logs go to stderr so they never mix with the rendered entry.
    """
    logger = logging.getLogger("bdic")
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(FORMAT))
        logger.addHandler(handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger
