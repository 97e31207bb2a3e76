"""
ProviderAssessment — Per-Provider Output of One Keeper Cycle
"""

from pydantic import BaseModel, Field

from lexjusticia.core.domain.boundaries import TierBoundaries
from lexjusticia.core.domain.tier import TierAllocation


class ProviderAssessment(BaseModel):
    """Allocation and incentive-compatible reward for one score."""

    score: float = Field(..., description="Assessed performance score")
    allocation: TierAllocation = Field(..., description="MARTYR / SOVEREIGN / REJECT")
    cumulative_reward: float = Field(..., ge=0, description="R(score), abstract units")
    marginal_reward: float = Field(..., ge=0, description="dR/dscore = phi_u(score)")
    within_observed_range: bool = Field(
        ..., description="False when the score is an extrapolation"
    )
    boundaries: TierBoundaries = Field(..., description="Boundaries used for allocation")

    model_config = {"frozen": True}
