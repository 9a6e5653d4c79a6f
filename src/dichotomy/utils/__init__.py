"""
Utilities.
"""

from .intervals import normalize_interval, default_tol, check_tol, n_iterations
from .loggers import get_logger, LOGGER_NAME

__all__ = [
    "normalize_interval",
    "default_tol",
    "check_tol",
    "n_iterations",
    "get_logger",
    "LOGGER_NAME",
]
