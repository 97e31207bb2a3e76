"""
TierBoundaries — Thresholds of the Optimal Allocation Rule

Derived once per ScoreDistribution:
    martyr_minimum    = max(distribution.minimum, upper_root)
    sovereign_maximum = min(distribution.maximum, lower_root)
    no_trade_gap_width = max(0, upper_root - lower_root)

The mechanism intends martyr_minimum >= sovereign_maximum, but the
construction does not enforce it. For some distributions the roots cross;
the boundaries are kept as computed and ``roots_crossed`` reports it.
"""

from pydantic import BaseModel, Field, computed_field

from lexjusticia.core.math.root_finding import RootStatus


class TierBoundaries(BaseModel):
    """Tier thresholds plus the raw roots they were derived from."""

    martyr_minimum: float = Field(..., description="MARTYR entry threshold")
    sovereign_maximum: float = Field(..., description="SOVEREIGN ceiling")
    no_trade_gap_width: float = Field(..., ge=0, description="max(0, upper - lower root)")
    upper_virtual_root: float = Field(..., description="Zero of phi_u")
    lower_virtual_root: float = Field(..., description="Zero of phi_l")
    upper_root_status: RootStatus = Field(..., description="How the upper root was found")
    lower_root_status: RootStatus = Field(..., description="How the lower root was found")

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def roots_crossed(self) -> bool:
        """True when martyr_minimum < sovereign_maximum (inconsistent tiers)."""
        return self.martyr_minimum < self.sovereign_maximum

    @property
    def converged(self) -> bool:
        """Both roots met the bisection tolerance."""
        return (
            self.upper_root_status is RootStatus.CONVERGED
            and self.lower_root_status is RootStatus.CONVERGED
        )
