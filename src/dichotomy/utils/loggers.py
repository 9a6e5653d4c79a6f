"""
Logging configuration.

The solvers obtain their logger through `get_logger`. Without any flags the library
logger is returned as-is, so applications stay in charge of handlers and levels;
passing `verbose=True` to a solver (or calling `get_logger` directly) opts into a
basic configuration that prints the solver's progress.
"""
from typing import Optional
import logging

# name of the library-wide logger used by the solvers.
LOGGER_NAME = "dichotomy"


def get_logger(
    name: str = LOGGER_NAME,
    verbose: bool = False,
    debug: bool = False,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Get a logging.Logger instance, configuring it if requested.

    Args:
        name: name for the Logger instance.
        verbose: (optional) whether or not the logger should print verbosely (ie. at the INFO level).
            Defaults to False.
        debug: (optional) whether or not the logger should print in debug mode (ie. at the DEBUG level).
            Defaults to False.
        log_file: (optional) path to a file where the log should be stored. The log is printed to stderr when 'None'.
    Returns:
         Instance of logging.Logger. Its configuration is left untouched when none of
         'verbose', 'debug' or 'log_file' are given.
    """
    logger = logging.getLogger(name)

    if not (verbose or debug or log_file):
        return logger

    level = logging.WARNING
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO

    logging.basicConfig(level=level, filename=log_file)
    logger.setLevel(level)

    return logger
