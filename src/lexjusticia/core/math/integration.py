"""
Integration — Composite Simpson's Rule

    integral_a^b f(x) dx ~= (h/3) * [f(x_0) + 4 f(x_1) + 2 f(x_2) + ... + 4 f(x_{n-1}) + f(x_n)]
    h = (b - a) / n, n even
"""

from typing import Callable, Final

DEFAULT_SEGMENTS: Final[int] = 100


def simpson_integrate(
    func: Callable[[float], float],
    a: float,
    b: float,
    segments: int = DEFAULT_SEGMENTS,
) -> float:
    """
    Composite Simpson's rule over ``segments`` equal sub-intervals.

    Args:
        func: Integrand
        a: Lower limit
        b: Upper limit (b < a yields the negated integral)
        segments: Number of sub-intervals, positive and even

    Returns:
        Approximate integral; exactly 0.0 when a == b

    Raises:
        ValueError: If segments is not a positive even integer

    Examples:
        >>> simpson_integrate(lambda x: x * x, 0.0, 3.0, segments=2)
        9.0
    """
    if segments <= 0 or segments % 2 != 0:
        raise ValueError(f"segments must be a positive even integer, got {segments}")

    if a == b:
        return 0.0

    h = (b - a) / segments
    total = 0.0
    for i in range(segments + 1):
        y = func(a + i * h)
        if i == 0 or i == segments:
            total += y
        elif i % 2 == 1:
            total += 4 * y
        else:
            total += 2 * y

    return (h / 3) * total
