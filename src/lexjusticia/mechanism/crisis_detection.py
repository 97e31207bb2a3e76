"""
Crisis Detection — Classifying a Market Snapshot

Consumes figures already measured by the external feed and decides whether
crisis pricing applies. Checks run in a fixed order; the first match wins:

1. VOLATILITY_SPIKE: volatility_bps >= volatility_threshold_bps (3000)
2. LIQUIDITY_DRAIN:  total / baseline liquidity < liquidity_drain_fraction (0.5)
3. SPREAD_WIDENING:  avg_spread_bps >= spread_widening_threshold_bps (200)
4. VOLUME_SURGE:     volume / baseline volume >= volume_surge_multiple (3.0)

A zero baseline disables the corresponding ratio check (ratio reported as 1).
"""

import logging

from lexjusticia.config import MechanismConfig
from lexjusticia.core.domain.market import CrisisState, CrisisType, MarketSnapshot
from lexjusticia.core.math.numerical_safeguards import safe_divide

logger = logging.getLogger(__name__)


def detect_crisis(
    snapshot: MarketSnapshot,
    config: MechanismConfig | None = None,
) -> CrisisState:
    """
    Crisis state for one polling tick.

    Args:
        snapshot: Pre-computed market figures
        config: Thresholds (default MechanismConfig())

    Returns:
        CrisisState; crisis_type and triggered_at_ms are None when inactive
    """
    cfg = config or MechanismConfig()

    liquidity_frac = safe_divide(
        snapshot.total_liquidity_usd, snapshot.baseline_liquidity_usd, fallback=1.0
    )
    volume_multiple = safe_divide(
        snapshot.volume_24h_usd, snapshot.baseline_volume_24h_usd, fallback=1.0
    )

    crisis_type: CrisisType | None = None
    if snapshot.volatility_bps >= cfg.volatility_threshold_bps:
        crisis_type = CrisisType.VOLATILITY_SPIKE
    elif liquidity_frac < cfg.liquidity_drain_fraction:
        crisis_type = CrisisType.LIQUIDITY_DRAIN
    elif snapshot.avg_spread_bps >= cfg.spread_widening_threshold_bps:
        crisis_type = CrisisType.SPREAD_WIDENING
    elif volume_multiple >= cfg.volume_surge_multiple:
        crisis_type = CrisisType.VOLUME_SURGE

    active = crisis_type is not None
    if active:
        logger.info(
            "crisis detected: type=%s volatility_bps=%.1f spread_bps=%.1f "
            "liquidity_frac=%.3f volume_multiple=%.3f",
            crisis_type.value,
            snapshot.volatility_bps,
            snapshot.avg_spread_bps,
            liquidity_frac,
            volume_multiple,
        )

    return CrisisState(
        active=active,
        crisis_type=crisis_type,
        triggered_at_ms=snapshot.ts_utc_ms if active else None,
        volatility_bps=snapshot.volatility_bps,
        avg_spread_bps=snapshot.avg_spread_bps,
        liquidity_remaining_frac=liquidity_frac,
        volume_multiple=volume_multiple,
    )
