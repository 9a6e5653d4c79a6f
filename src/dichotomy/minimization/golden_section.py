"""
Golden-section search for minimizing unimodal scalar functions.
"""
from typing import Callable, Tuple, Dict, Any, Optional, Union
import logging

import numpy as np

from dichotomy.utils.intervals import normalize_interval, check_tol, n_iterations
from dichotomy.utils.loggers import get_logger, LOGGER_NAME

# constants

# complement of the inverse golden ratio and the per-iteration shrinkage factor.
R = float((3 - np.sqrt(5)) / 2)
S = 1 - R


# minimizers


def goldensection(
    f: Callable,
    a: Any,
    b: Optional[Any] = None,
    *,
    tol: Optional[float] = None,
    return_status: bool = False,
    verbose: bool = False,
    logger: Optional[logging.Logger] = None,
) -> Union[Any, Tuple[Any, Dict[str, Any]]]:
    """Find the minimizer of `f(x)` on `a < x < b` by golden-section search.

    Probe points divide the bracket in the golden ratio, which lets one probe be
    re-used by the next iteration; after the first step each iteration costs a single
    evaluation of `f`. The bracket contracts by a factor of `S` per iteration and the
    number of iterations is fixed at :math:`\\lceil \\log_S(tol / |b - a|) \\rceil`.

    `f` is assumed to be unimodal on the bracket. This is not checked; the
    result is meaningless for functions with several local minima.

    Example:
        >>> goldensection(lambda x: (x - 2) ** 2, (-4, 4))
        2.0

    :param f: a unimodal scalar function.
    :param a: the left end-point of the bracket or a two-element sequence holding
        both end-points. The end-points may be given in either order.
    :param b: (optional) the second end-point of the bracket.
    :param tol: (optional) the width of the final bracket. Defaults to the machine
        epsilon of the end-points' floating-point type.
    :param return_status: (optional) whether or not to return an exit status
        along with the minimizer.
    :param verbose: (optional) whether or not to report the result at the INFO level
        through the library logger.
    :param logger: (optional) logger to use instead of the library logger.
    :returns: the approximate minimizer or, if 'return_status' is set, the minimizer
        and a dictionary with the exit status.
    """
    logger = logger or get_logger(LOGGER_NAME, verbose=verbose)

    a, b = normalize_interval(a, b)
    tol = check_tol(tol, a, b)

    alpha = S * a + R * b
    f_alpha = f(alpha)

    max_iters = n_iterations(a, b, tol, S)
    logger.debug(
        f"Golden-section search on ({a}, {b}) with tol={tol}: {max_iters} iterations."
    )

    for _ in range(max_iters):
        beta = S * b + R * a
        f_beta = f(beta)

        if f_alpha < f_beta:
            # the minimizer lies between 'a' and 'beta'; 'alpha' stays the inner probe.
            b = a
            a = beta
        else:
            a = alpha
            alpha = beta
            f_alpha = f_beta

    logger.info(f"Golden-section search terminated at x={alpha}.")

    if return_status:
        exit_status = {
            "success": True,
            "n_iters": max_iters,
            "n_evals": max_iters + 1,
            "bracket": (a, b),
        }
        return alpha, exit_status

    return alpha
