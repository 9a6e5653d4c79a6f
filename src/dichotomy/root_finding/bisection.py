"""
Bisection method for computing roots of scalar functions.
"""
from typing import Callable, Tuple, Dict, Any, Optional, Union
import logging

import numpy as np

from dichotomy.utils.intervals import normalize_interval, check_tol, n_iterations
from dichotomy.utils.loggers import get_logger, LOGGER_NAME

# constants

SHRINKAGE = 0.5


class InvalidBracketError(ValueError):
    """The objective does not strictly change sign over the bracket."""


# root-finders


def bisection(
    f: Callable,
    a: Any,
    b: Optional[Any] = None,
    *,
    tol: Optional[float] = None,
    return_status: bool = False,
    verbose: bool = False,
    logger: Optional[logging.Logger] = None,
) -> Union[Any, Tuple[Any, Dict[str, Any]]]:
    """Find a root of `f(x) = 0` on `a < x < b` by bisection.

    The bracket is halved a fixed number of times, :math:`\\lceil \\log_2(|b - a| / tol) \\rceil`,
    so the cost of a call is known in advance and there is no early exit.
    The method requires `f(a) * f(b) < 0`; an end-point at which `f` is exactly zero
    does not count as a sign change.

    Example:
        >>> bisection(np.sin, (2, 4))
        3.141592653589793

    :param f: a continuous scalar function.
    :param a: the left end-point of the bracket or a two-element sequence holding
        both end-points. The end-points may be given in either order.
    :param b: (optional) the second end-point of the bracket.
    :param tol: (optional) the width of the final bracket. Defaults to the machine
        epsilon of the end-points' floating-point type.
    :param return_status: (optional) whether or not to return an exit status
        along with the root.
    :param verbose: (optional) whether or not to report the result at the INFO level
        through the library logger.
    :param logger: (optional) logger to use instead of the library logger.
    :returns: the approximate root or, if 'return_status' is set, the root and
        a dictionary with the exit status.
    """
    logger = logger or get_logger(LOGGER_NAME, verbose=verbose)

    a, b = normalize_interval(a, b)
    tol = check_tol(tol, a, b)

    sa = np.sign(f(a))
    sb = np.sign(f(b))

    # negated so that NaN signs are rejected too.
    if not sa * sb < 0:
        raise InvalidBracketError(
            f"f(a) and f(b) must have strictly opposite signs, got f({a}) ~ {sa} and f({b}) ~ {sb}."
        )

    # orient the bracket so that f(a) < 0 < f(b).
    if sa > 0:
        a, b = b, a

    max_iters = n_iterations(a, b, tol, SHRINKAGE)
    logger.debug(f"Bisection on ({a}, {b}) with tol={tol}: {max_iters} iterations.")

    for _ in range(max_iters):
        c = a / 2 + b / 2

        if f(c) < 0:
            a = c
        else:
            b = c

    root = a / 2 + b / 2
    logger.info(f"Bisection terminated at x={root}.")

    if return_status:
        exit_status = {
            "success": True,
            "n_iters": max_iters,
            "n_evals": max_iters + 2,
            "bracket": (a, b),
        }
        return root, exit_status

    return root


dichotomy = bisection
