# logging_utils.py
import logging
from typing import Optional

PACKAGE_LOGGER = "cookbook_builder"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """
    Attach console (and optional file) handlers to the cookbook_builder logger.

    The root logger is left alone so an embedding application keeps its own
    configuration. Calling this again replaces the handlers it installed
    earlier instead of stacking duplicates.
    """
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    package_logger.addHandler(stream_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    # records are already written by our own handlers
    package_logger.propagate = False
    return package_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
