# SPDX-License-Identifier: MIT

import logging

from rich.logging import RichHandler

LOG_FORMAT = "%(name)s - %(message)s"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """
    Route plangrid's log records through rich.

    Args:
        verbose: Log debug records (layout default substitutions, lane
            overflow, reflow) instead of warnings only

    Returns:
        The package logger
    """
    package_logger = logging.getLogger("plangrid")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    # Repeated calls only adjust the level
    if not any(isinstance(handler, RichHandler) for handler in package_logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)

    return package_logger
