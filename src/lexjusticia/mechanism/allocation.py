"""
Optimal allocation rule.

    x*(s) = MARTYR     if s >= martyr_minimum
            SOVEREIGN  if s <= sovereign_maximum
            REJECT     otherwise (no-trade gap)

Ties go to MARTYR first, then SOVEREIGN; both comparisons are inclusive.
"""

from lexjusticia.core.domain.boundaries import TierBoundaries
from lexjusticia.core.domain.tier import TierAllocation


def allocate_optimal_tier(score: float, boundaries: TierBoundaries) -> TierAllocation:
    """Classify ``score`` against ``boundaries``."""
    if score >= boundaries.martyr_minimum:
        return TierAllocation.MARTYR
    if score <= boundaries.sovereign_maximum:
        return TierAllocation.SOVEREIGN
    return TierAllocation.REJECT
