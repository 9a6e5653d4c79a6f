"""
`dichotomy`: bracketing methods for scalar functions.

There are two solvers:
    1. `dichotomy.bisection`     - finds a root of `f(x) = 0` on an interval where `f` changes sign.
                                   It is also exported as `dichotomy.dichotomy`.
    2. `dichotomy.goldensection` - finds the minimizer of a unimodal function on an interval.
"""

from dichotomy.root_finding import bisection, dichotomy, InvalidBracketError
from dichotomy.minimization import goldensection
from dichotomy.utils import get_logger

__all__ = [
    "bisection",
    "dichotomy",
    "goldensection",
    "InvalidBracketError",
    "get_logger",
]
