"""
Market conditions and crisis state.

MarketSnapshot carries figures already measured by the external price and
volatility feed; the engine only classifies them.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class CrisisType(str, Enum):
    """Kind of market stress that activated crisis mode."""

    VOLATILITY_SPIKE = "VOLATILITY_SPIKE"
    LIQUIDITY_DRAIN = "LIQUIDITY_DRAIN"
    VOLUME_SURGE = "VOLUME_SURGE"
    SPREAD_WIDENING = "SPREAD_WIDENING"


class MarketSnapshot(BaseModel):
    """Pre-computed market figures for one polling tick."""

    ts_utc_ms: int = Field(..., ge=0, description="Snapshot timestamp (UTC, milliseconds)")
    volatility_bps: float = Field(..., ge=0, description="Realized volatility (bps)")
    avg_spread_bps: float = Field(..., ge=0, description="Average quoted spread (bps)")
    total_liquidity_usd: float = Field(..., ge=0, description="Resting liquidity (USD)")
    baseline_liquidity_usd: float = Field(
        ..., ge=0, description="Normal-market resting liquidity (USD)"
    )
    volume_24h_usd: float = Field(..., ge=0, description="Trailing 24h volume (USD)")
    baseline_volume_24h_usd: float = Field(
        ..., ge=0, description="Normal-market 24h volume (USD)"
    )

    model_config = {"frozen": True}


class CrisisState(BaseModel):
    """Crisis classification of a MarketSnapshot."""

    active: bool = Field(..., description="Crisis mode active")
    crisis_type: Optional[CrisisType] = Field(None, description="Trigger (nullable)")
    triggered_at_ms: Optional[int] = Field(
        None, ge=0, description="Snapshot timestamp that triggered the crisis (nullable)"
    )
    volatility_bps: float = Field(..., ge=0)
    avg_spread_bps: float = Field(..., ge=0)
    liquidity_remaining_frac: float = Field(
        ..., ge=0, description="total / baseline liquidity"
    )
    volume_multiple: float = Field(..., ge=0, description="volume / baseline volume")

    model_config = {"frozen": True}
