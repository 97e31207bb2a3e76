"""
Tier — Provider Tiers and Allocation Outcomes

Three mutually exclusive commitment tiers:
- MARTYR: high commitment, keeps quoting through crises (top tier)
- CITIZEN: fair-weather provider (mid tier)
- SOVEREIGN: opportunistic provider (bottom tier)

Allocation additionally knows REJECT: the score sits in the no-trade gap.
REJECT is a gating decision, not a tier.
"""

from enum import Enum
from typing import Optional


class ProviderTier(str, Enum):
    """Commitment tier of a liquidity provider."""

    MARTYR = "MARTYR"
    CITIZEN = "CITIZEN"
    SOVEREIGN = "SOVEREIGN"


class TierAllocation(str, Enum):
    """Outcome of the optimal allocation rule for one score."""

    MARTYR = "MARTYR"
    SOVEREIGN = "SOVEREIGN"
    REJECT = "REJECT"

    @property
    def tier(self) -> Optional[ProviderTier]:
        """Tier admitted by this outcome, None for REJECT."""
        match self:
            case TierAllocation.MARTYR:
                return ProviderTier.MARTYR
            case TierAllocation.SOVEREIGN:
                return ProviderTier.SOVEREIGN
            case TierAllocation.REJECT:
                return None

    @property
    def admitted(self) -> bool:
        return self is not TierAllocation.REJECT
