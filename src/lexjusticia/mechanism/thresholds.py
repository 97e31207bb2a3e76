"""
Threshold Solver — Zeros of the Virtual Value Functions

    upper root p_1: phi_u(p_1) = 0   -> MARTYR minimum
    lower root p_2: phi_l(p_2) = 0   -> SOVEREIGN maximum

Both roots are searched by bisection over [distribution.minimum,
distribution.maximum]. The solver assumes each function is monotone over
that range; see core.math.root_finding for the non-monotone limitation.

Roots may cross (p_1 < p_2) for unusual distributions. The boundaries are
then returned unchanged with roots_crossed=True and a warning is logged.
"""

import logging

from lexjusticia.config import DEFAULT_ADVERSE_SELECTION_PARAM, DEFAULT_CRISIS_COST_PARAM
from lexjusticia.core.domain.boundaries import TierBoundaries
from lexjusticia.core.domain.distribution import ScoreDistribution
from lexjusticia.core.math.root_finding import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_ROOT_TOLERANCE,
    RootResult,
    bisect_root,
)
from lexjusticia.mechanism.virtual_value import lower_virtual_value, upper_virtual_value

logger = logging.getLogger(__name__)


def find_upper_virtual_root(
    distribution: ScoreDistribution,
    adverse_selection_param: float = DEFAULT_ADVERSE_SELECTION_PARAM,
    tolerance: float = DEFAULT_ROOT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> RootResult:
    """Score where phi_u crosses zero (MARTYR entry threshold)."""
    return bisect_root(
        lambda s: upper_virtual_value(s, distribution, adverse_selection_param).virtual_value,
        distribution.minimum,
        distribution.maximum,
        tolerance=tolerance,
        max_iterations=max_iterations,
        label="upper virtual value",
    )


def find_lower_virtual_root(
    distribution: ScoreDistribution,
    crisis_cost_param: float = DEFAULT_CRISIS_COST_PARAM,
    tolerance: float = DEFAULT_ROOT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> RootResult:
    """Score where phi_l crosses zero (SOVEREIGN ceiling)."""
    return bisect_root(
        lambda s: lower_virtual_value(s, distribution, crisis_cost_param).virtual_value,
        distribution.minimum,
        distribution.maximum,
        tolerance=tolerance,
        max_iterations=max_iterations,
        label="lower virtual value",
    )


def compute_optimal_tier_boundaries(
    distribution: ScoreDistribution,
    adverse_selection_param: float = DEFAULT_ADVERSE_SELECTION_PARAM,
    crisis_cost_param: float = DEFAULT_CRISIS_COST_PARAM,
    tolerance: float = DEFAULT_ROOT_TOLERANCE,
    max_iterations: int = DEFAULT_MAX_ITERATIONS,
) -> TierBoundaries:
    """
    Tier boundaries of the optimal allocation rule.

    Returns:
        TierBoundaries with
        - martyr_minimum = max(minimum, upper root)
        - sovereign_maximum = min(maximum, lower root)
        - no_trade_gap_width = max(0, upper root - lower root)
    """
    upper = find_upper_virtual_root(
        distribution, adverse_selection_param, tolerance, max_iterations
    )
    lower = find_lower_virtual_root(
        distribution, crisis_cost_param, tolerance, max_iterations
    )

    boundaries = TierBoundaries(
        martyr_minimum=max(distribution.minimum, upper.root),
        sovereign_maximum=min(distribution.maximum, lower.root),
        no_trade_gap_width=max(0.0, upper.root - lower.root),
        upper_virtual_root=upper.root,
        lower_virtual_root=lower.root,
        upper_root_status=upper.status,
        lower_root_status=lower.status,
    )

    if boundaries.roots_crossed:
        logger.warning(
            "tier roots crossed: martyr_minimum=%.6f < sovereign_maximum=%.6f; "
            "overlapping scores resolve to MARTYR",
            boundaries.martyr_minimum,
            boundaries.sovereign_maximum,
        )

    return boundaries
