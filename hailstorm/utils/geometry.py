"""
Tolerance-based numeric helpers shared by the geometric primitives.

All comparisons in the sweep go through these functions so that a single
epsilon absorbs floating-point noise consistently across points, lines,
segments and the active order.
"""

EPSILON = 1e-9


def approx_eq(a: float, b: float, eps: float = EPSILON) -> bool:
    """
    Test if two values are equal within a tolerance.

    Args:
        a: First value
        b: Second value
        eps: Absolute tolerance (default: EPSILON)

    Returns:
        True if |a - b| < eps

    Example:
        >>> approx_eq(0.1 + 0.2, 0.3)
        True
    """
    return abs(a - b) < eps


def approx_cmp(a: float, b: float, eps: float = EPSILON) -> int:
    """
    Three-way comparison with a tolerance band around equality.

    Args:
        a: First value
        b: Second value
        eps: Absolute tolerance (default: EPSILON)

    Returns:
        -1 if a < b, 0 if a and b are within eps, 1 if a > b

    Example:
        >>> approx_cmp(1.0, 2.0)
        -1
        >>> approx_cmp(1.0, 1.0 + 1e-12)
        0
    """
    if approx_eq(a, b, eps):
        return 0
    return -1 if a < b else 1


def sign(value: float, eps: float = EPSILON) -> int:
    """Sign of a value, treating anything within eps of zero as zero."""
    return approx_cmp(value, 0.0, eps)


def in_range(value: float, low: float, high: float, eps: float = EPSILON) -> bool:
    """Inclusive range check widened by eps on both ends."""
    return low - eps <= value <= high + eps


def scaled_eps(eps: float, *values: float) -> float:
    """
    Widen a tolerance to the magnitude of the values being compared.

    Coordinates around 1e14 carry rounding noise far above an absolute
    epsilon; scaling by the largest magnitude keeps the tolerance relative
    there while leaving it at eps for values below 1.

    Example:
        >>> scaled_eps(1e-9, 0.5, -0.25)
        1e-09
    """
    return eps * max([1.0] + [abs(v) for v in values])
