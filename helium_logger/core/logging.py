"""
Diagnostic channel configuration for helium_logger.

The package reports its own problems (a broken token scanner, suspicious
templates) through loguru, never through the logger it implements.
"""

import sys

from loguru import logger

_DIAGNOSTIC_FORMAT = (
    "<green>{time:HH:mm:ss}</green> | <level>{level:7}</level> | "
    "{name}:{function}:{line} - <level>{message}</level>"
)


def init_logger(log_level: str = "WARNING") -> int:
    """
    Initialize process-level diagnostic output.

    Parameters
    ----------
    log_level : str, optional
        Loguru log level string, by default ``"WARNING"``.

    Returns
    -------
    int
        Loguru handler id of the stderr handler.
    """
    logger.remove()
    handler_id = logger.add(
        sys.stderr,
        colorize=True,
        format=_DIAGNOSTIC_FORMAT,
        level=log_level,
        diagnose=False,
    )
    logger.success(f'Diagnostics initialized with LOG_LEVEL = "{log_level}".')
    return handler_id
