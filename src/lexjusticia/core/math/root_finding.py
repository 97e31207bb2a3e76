"""
Root Finding — Bounded Bisection with an Explicit Convergence Tag

Thresholds of the mechanism are zeros of the virtual-value functions. Both
functions are treated as non-increasing over the sample range, so a positive
value means the root lies to the right of the evaluated point.

CRITICAL INVARIANTS:
1. The root never leaves [low, high] (the initial bracket).
2. At most ``max_iterations`` function evaluations.
3. Non-convergence is NOT an error: the midpoint of the final bracket is
   returned with status BEST_EFFORT and a log line is emitted.

LIMITATION:
    For a non-monotone function the returned root is whichever zero (or
    bracket midpoint) the bisection walk lands on. It is not corrected.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Final

logger = logging.getLogger(__name__)

DEFAULT_ROOT_TOLERANCE: Final[float] = 0.1
DEFAULT_MAX_ITERATIONS: Final[int] = 100


class RootStatus(str, Enum):
    """How a root was obtained."""

    CONVERGED = "CONVERGED"
    BEST_EFFORT = "BEST_EFFORT"


@dataclass(frozen=True)
class RootResult:
    """Result of a bisection search."""

    root: float
    status: RootStatus
    iterations: int  # function evaluations performed
    residual: float  # |f| at the last midpoint

    @property
    def converged(self) -> bool:
        return self.status is RootStatus.CONVERGED


def bisect_root(
    func: Callable[[float], float],
    low: float,
    high: float,
    tolerance: float = DEFAULT_ROOT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
    label: str = "root",
) -> RootResult:
    """
    Bisection for a zero of a non-increasing function on [low, high].

    At every step f is evaluated at the midpoint; |f(mid)| < tolerance accepts it.
    Otherwise f(mid) > 0 moves the lower bound up, f(mid) <= 0 moves the
    upper bound down.

    Args:
        func: Function of one score
        low: Lower end of the bracket
        high: Upper end of the bracket
        tolerance: Acceptance threshold on |f|
        max_iterations: Evaluation budget
        label: Name used in the non-convergence log line

    Returns:
        RootResult (CONVERGED or BEST_EFFORT)

    Raises:
        ValueError: If tolerance <= 0 or max_iterations < 1
    """
    if tolerance <= 0:
        raise ValueError(f"tolerance must be positive, got {tolerance}")
    if max_iterations < 1:
        raise ValueError(f"max_iterations must be >= 1, got {max_iterations}")

    residual = float("inf")
    for i in range(max_iterations):
        mid = (low + high) / 2
        value = func(mid)
        residual = abs(value)

        if residual < tolerance:
            return RootResult(
                root=mid,
                status=RootStatus.CONVERGED,
                iterations=i + 1,
                residual=residual,
            )

        if value > 0:
            low = mid
        else:
            high = mid

    root = (low + high) / 2
    logger.info(
        "%s bisection did not converge in %d iterations, "
        "returning bracket midpoint %.6f (last |f|=%.6f, tolerance=%.6f)",
        label,
        max_iterations,
        root,
        residual,
        tolerance,
    )
    return RootResult(
        root=root,
        status=RootStatus.BEST_EFFORT,
        iterations=max_iterations,
        residual=residual,
    )
