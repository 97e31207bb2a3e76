"""
Crisis Spread — Myersonian Decomposition of the Bid/Ask Spread

FORMULAS:
    vol_mult   = current_vol / normal_vol
    monopoly   = 2 * sqrt(current_vol) * sqrt(2/pi) * sqrt(max(0, -ln(1 - lambda + LOG_EPS)))
    adverse    = vol_mult * adverse_selection_param * (1 - lambda) * risk_aversion
    total_usd  = (monopoly + adverse) * sqrt(base_price)
    total_bps  = total_usd / base_price * 10000

    monopoly_bps = monopoly * 10000 / base_price
    adverse_bps  = adverse * 10000 / base_price

The monopoly term grows as the information advantage lambda approaches 1;
LOG_EPS keeps the log argument positive at lambda = 1.

Tier caps are applied afterwards as a plain minimum, never a rescale:
MARTYR 40 bps, CITIZEN 100 bps, SOVEREIGN uncapped.
"""

import math
from typing import Final

from lexjusticia.config import (
    CITIZEN_MAX_SPREAD_BPS,
    DEFAULT_ADVERSE_SELECTION_PARAM,
    DEFAULT_NORMAL_VOLATILITY,
    MARTYR_MAX_SPREAD_BPS,
)
from lexjusticia.core.domain.pricing import CappedCrisisSpread, CrisisSpreadBreakdown
from lexjusticia.core.domain.tier import ProviderTier
from lexjusticia.core.math.numerical_safeguards import (
    LOG_EPS,
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

BPS_PER_UNIT: Final[float] = 10000.0

_SQRT_2_OVER_PI = math.sqrt(2.0 / math.pi)


def calculate_optimal_crisis_spread(
    base_price: float,
    current_volatility: float,
    normal_volatility: float,
    information_advantage: float,
    risk_aversion: float,
    adverse_selection_param: float = DEFAULT_ADVERSE_SELECTION_PARAM,
) -> CrisisSpreadBreakdown:
    """
    Crisis spread for a provider, uncapped.

    Args:
        base_price: Reference price of the base asset (> 0)
        current_volatility: Realized crisis volatility (e.g. 0.30)
        normal_volatility: Normal-market volatility; 0 is replaced by
            DEFAULT_NORMAL_VOLATILITY
        information_advantage: lambda in [0, 1]
        risk_aversion: Risk-aversion multiplier (0.5 MARTYR .. 2.0 SOVEREIGN
            by convention)
        adverse_selection_param: Weight of the adverse-selection term

    Returns:
        CrisisSpreadBreakdown in basis points

    Raises:
        ValueError: On a non-positive price, negative volatility or risk
            aversion, or lambda outside [0, 1]
    """
    validate_positive(base_price, "base_price")
    validate_non_negative(current_volatility, "current_volatility")
    validate_non_negative(normal_volatility, "normal_volatility")
    validate_in_range(information_advantage, "information_advantage", 0.0, 1.0)
    validate_non_negative(risk_aversion, "risk_aversion")
    validate_non_negative(adverse_selection_param, "adverse_selection_param")

    if normal_volatility == 0:
        normal_volatility = DEFAULT_NORMAL_VOLATILITY

    volatility_multiplier = current_volatility / normal_volatility

    monopoly = (
        2
        * math.sqrt(current_volatility)
        * _SQRT_2_OVER_PI
        * math.sqrt(max(0.0, -math.log(1 - information_advantage + LOG_EPS)))
    )
    adverse_selection = (
        volatility_multiplier
        * adverse_selection_param
        * (1 - information_advantage)
        * risk_aversion
    )

    total_spread_usd = (monopoly + adverse_selection) * math.sqrt(base_price)

    return CrisisSpreadBreakdown(
        monopoly_component_bps=monopoly * BPS_PER_UNIT / base_price,
        adverse_selection_component_bps=adverse_selection * BPS_PER_UNIT / base_price,
        total_spread_bps=total_spread_usd / base_price * BPS_PER_UNIT,
        volatility_multiplier=volatility_multiplier,
    )


def spread_cap_bps(
    tier: ProviderTier,
    martyr_cap_bps: float = MARTYR_MAX_SPREAD_BPS,
    citizen_cap_bps: float = CITIZEN_MAX_SPREAD_BPS,
) -> float:
    """
    Maximum crisis spread a tier may charge; math.inf when uncapped.

    Raises:
        ValueError: If ``tier`` is not a ProviderTier (e.g. an allocation
            outcome such as REJECT)
    """
    match tier:
        case ProviderTier.MARTYR:
            return martyr_cap_bps
        case ProviderTier.CITIZEN:
            return citizen_cap_bps
        case ProviderTier.SOVEREIGN:
            return math.inf
        case _:
            raise ValueError(f"no spread cap for {tier!r}")


def apply_spread_constraint(
    spread_bps: float,
    tier: ProviderTier,
    martyr_cap_bps: float = MARTYR_MAX_SPREAD_BPS,
    citizen_cap_bps: float = CITIZEN_MAX_SPREAD_BPS,
) -> float:
    """min(spread, tier cap)."""
    return min(spread_bps, spread_cap_bps(tier, martyr_cap_bps, citizen_cap_bps))


def constrain_crisis_spread(
    breakdown: CrisisSpreadBreakdown,
    tier: ProviderTier,
    martyr_cap_bps: float = MARTYR_MAX_SPREAD_BPS,
    citizen_cap_bps: float = CITIZEN_MAX_SPREAD_BPS,
) -> CappedCrisisSpread:
    """Tier-capped result wrapping the uncapped ``breakdown``."""
    capped = apply_spread_constraint(
        breakdown.total_spread_bps, tier, martyr_cap_bps, citizen_cap_bps
    )
    return CappedCrisisSpread(breakdown=breakdown, tier=tier, capped_total_spread_bps=capped)
