"""
Centralized logging configuration for the picker and its terminal stack.
"""

import logging

NOISY_LIBRARIES = [
    "InquirerPy",
    "prompt_toolkit",
    "asyncio",
]

PACKAGE_LOGGER = "pair_picker"


class NullHandler(logging.Handler):
    """Handler that discards all log records."""

    def emit(self, record):
        pass


def setup_logging(verbose: bool = False) -> None:
    """
    Configure package logging and silence third-party prompt libraries.

    Args:
        verbose: If True, show pair_picker debug logs on stderr.
    """
    for logger_name in NOISY_LIBRARIES:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.CRITICAL)
        logger.propagate = False
        logger.handlers = [NullHandler()]

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if verbose and not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        package_logger.addHandler(handler)
