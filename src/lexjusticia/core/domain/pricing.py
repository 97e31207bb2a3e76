"""
CrisisSpreadBreakdown — Decomposed Crisis Spread

All spread figures are basis points of the base price. Components are
reported individually for observability; note that the total is computed
on the sqrt(base_price) dollar scale, so it is not the plain sum of the
component figures.

CappedCrisisSpread wraps a breakdown with the tier it was capped for.
"""

from typing import Final

from pydantic import BaseModel, Field, computed_field, model_validator

from lexjusticia.core.domain.tier import ProviderTier

# Normal-market spread assumed for every breakdown
BASE_SPREAD_BPS: Final[float] = 10.0


class CrisisSpreadBreakdown(BaseModel):
    """Uncapped crisis spread decomposition."""

    base_spread_bps: float = Field(BASE_SPREAD_BPS, ge=0, description="Assumed normal spread")
    monopoly_component_bps: float = Field(..., ge=0, description="Information-advantage profit")
    adverse_selection_component_bps: float = Field(
        ..., ge=0, description="Uncertainty cost"
    )
    total_spread_bps: float = Field(..., ge=0, description="Uncapped total spread")
    volatility_multiplier: float = Field(..., ge=0, description="current / normal volatility")

    model_config = {"frozen": True}


class CappedCrisisSpread(BaseModel):
    """Crisis spread after the tier cap has been applied."""

    tier: ProviderTier = Field(..., description="Tier the cap was applied for")
    breakdown: CrisisSpreadBreakdown = Field(..., description="Uncapped decomposition")
    capped_total_spread_bps: float = Field(..., ge=0, description="min(total, tier cap)")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_cap_not_above_total(self) -> "CappedCrisisSpread":
        if self.capped_total_spread_bps > self.breakdown.total_spread_bps:
            raise ValueError(
                f"capped_total_spread_bps ({self.capped_total_spread_bps}) exceeds "
                f"total_spread_bps ({self.breakdown.total_spread_bps})"
            )
        return self

    @computed_field
    @property
    def cap_binding(self) -> bool:
        """True when the tier cap lowered the spread."""
        return self.capped_total_spread_bps < self.breakdown.total_spread_bps

    @property
    def effective_spread_bps(self) -> float:
        return self.capped_total_spread_bps
