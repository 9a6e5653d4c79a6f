"""
Helpers shared by the bracketing methods: interval normalization, default
tolerances and analytic iteration counts.
"""
from typing import Any, Optional, Sequence, Tuple

import numpy as np


def normalize_interval(a: Any, b: Optional[Any] = None) -> Tuple[Any, Any]:
    """Put a bracket into ascending order.

    Args:
        a: the left end-point of the bracket or, when 'b' is 'None', a two-element
            sequence containing both end-points in any order.
        b: (optional) the second end-point of the bracket.

    Returns:
        (lo, hi), the end-points of the bracket in ascending order.
    """
    if b is None:
        interval: Sequence = tuple(a)
        if len(interval) != 2:
            raise ValueError(
                f"An interval must have exactly two end-points, got {len(interval)}."
            )
        a, b = interval

    elif np.ndim(a) != 0:
        raise TypeError(
            f"Got both an interval {a} and a second end-point {b}; pass the tolerance as 'tol='."
        )

    lo, hi = min(a, b), max(a, b)

    # only floating-point end-points can be infinite or NaN; exact types such as
    # 'fractions.Fraction' are always finite.
    if not (_is_finite(lo) and _is_finite(hi)):
        raise ValueError(f"Interval end-points must be finite, got ({lo}, {hi}).")

    return lo, hi


def _is_finite(x: Any) -> bool:
    if isinstance(x, (float, np.floating)):
        return bool(np.isfinite(x))
    return True


def default_tol(a: Any, b: Any) -> float:
    """Machine epsilon for the floating-point type of the end-points.

    Integer end-points (and plain Python numbers) are promoted to 'float64'.
    """
    dtype = np.result_type(np.asarray(a), np.asarray(b))
    if not np.issubdtype(dtype, np.floating):
        dtype = np.dtype(np.float64)

    return float(np.finfo(dtype).eps)


def check_tol(tol: Optional[float], a: Any, b: Any) -> float:
    if tol is None:
        return default_tol(a, b)

    # 'not tol > 0' also catches NaN.
    if not tol > 0:
        raise ValueError(f"Tolerance must be positive, got {tol}.")

    return tol


def n_iterations(a: Any, b: Any, tol: Any, shrinkage: float) -> int:
    """Number of iterations needed to shrink a bracket below a given tolerance.

    Each iteration multiplies the width of the bracket by 'shrinkage', so the
    bracket is no wider than 'tol' after :math:`\\lceil \\log_s(tol / |b - a|) \\rceil`
    steps.

    The width is never formed directly: the count is computed from the half-width
    :math:`b/2 - a/2` in log-space, so brackets such as `(-1e308, 1e308)` whose width
    overflows still get a finite count.

    Args:
        a: one end-point of the bracket.
        b: the other end-point of the bracket.
        tol: the target width.
        shrinkage: the factor, in (0, 1), by which the bracket contracts at each step.

    Returns:
        The iteration count. This is zero for brackets which are already narrower
        than 'tol', including degenerate brackets of width zero.
    """
    # 'float' first so that exact types (eg. 'Fraction') reach the float-only ufuncs.
    half_width, tol = abs(float(b / 2 - a / 2)), abs(float(tol))
    if half_width <= tol / 2:
        return 0

    # log2(width) = log2(half_width) + 1; base-2 logs keep the count exact for bisection.
    log_ratio = np.log2(half_width) + 1 - np.log2(tol)
    return max(0, int(np.ceil(log_ratio / np.log2(1.0 / shrinkage))))
