"""
MechanismConfig — Tunable Parameters of the Mechanism

All defaults are the protocol values. ``MechanismConfig.from_env()`` lets a
deployment override them through ``LEXJ_*`` environment variables, e.g.

    LEXJ_VOLATILITY_THRESHOLD_BPS=2500
    LEXJ_MARTYR_MAX_SPREAD_BPS=35

Epsilon guards are NOT configurable; they live in
core.math.numerical_safeguards.
"""

import os
from dataclasses import dataclass, fields
from typing import Final, Mapping, Optional

from lexjusticia.core.math.integration import DEFAULT_SEGMENTS
from lexjusticia.core.math.numerical_safeguards import (
    validate_in_range,
    validate_non_negative,
    validate_positive,
)
from lexjusticia.core.math.root_finding import DEFAULT_MAX_ITERATIONS, DEFAULT_ROOT_TOLERANCE

ENV_PREFIX: Final[str] = "LEXJ_"

# Virtual values
DEFAULT_ADVERSE_SELECTION_PARAM: Final[float] = 0.05  # alpha
DEFAULT_CRISIS_COST_PARAM: Final[float] = 0.1  # beta

# Crisis spread caps (bps)
MARTYR_MAX_SPREAD_BPS: Final[float] = 40.0
CITIZEN_MAX_SPREAD_BPS: Final[float] = 100.0

# Crisis pricing
DEFAULT_NORMAL_VOLATILITY: Final[float] = 0.01  # substituted for a zero normal volatility

# Slashing and credibility
DEFAULT_MAX_SLASH_FRACTION: Final[float] = 0.5
DEFAULT_BELIEF_UPDATE_WEIGHT: Final[float] = 0.7

# Crisis detection
DEFAULT_VOLATILITY_THRESHOLD_BPS: Final[float] = 3000.0  # 30%
DEFAULT_SPREAD_WIDENING_THRESHOLD_BPS: Final[float] = 200.0
DEFAULT_LIQUIDITY_DRAIN_FRACTION: Final[float] = 0.5
DEFAULT_VOLUME_SURGE_MULTIPLE: Final[float] = 3.0


@dataclass(frozen=True)
class MechanismConfig:
    """Mechanism parameters for one deployment."""

    # Virtual values
    adverse_selection_param: float = DEFAULT_ADVERSE_SELECTION_PARAM
    crisis_cost_param: float = DEFAULT_CRISIS_COST_PARAM

    # Threshold solver
    root_tolerance: float = DEFAULT_ROOT_TOLERANCE
    root_max_iterations: int = DEFAULT_MAX_ITERATIONS

    # Reward integrator
    reward_segments: int = DEFAULT_SEGMENTS

    # Crisis spread
    spread_adverse_selection_param: float = DEFAULT_ADVERSE_SELECTION_PARAM
    martyr_max_spread_bps: float = MARTYR_MAX_SPREAD_BPS
    citizen_max_spread_bps: float = CITIZEN_MAX_SPREAD_BPS

    # Slashing / credibility
    max_slash_fraction: float = DEFAULT_MAX_SLASH_FRACTION
    belief_update_weight: float = DEFAULT_BELIEF_UPDATE_WEIGHT

    # Crisis detection
    volatility_threshold_bps: float = DEFAULT_VOLATILITY_THRESHOLD_BPS
    spread_widening_threshold_bps: float = DEFAULT_SPREAD_WIDENING_THRESHOLD_BPS
    liquidity_drain_fraction: float = DEFAULT_LIQUIDITY_DRAIN_FRACTION
    volume_surge_multiple: float = DEFAULT_VOLUME_SURGE_MULTIPLE

    def __post_init__(self) -> None:
        validate_non_negative(self.adverse_selection_param, "adverse_selection_param")
        validate_non_negative(self.crisis_cost_param, "crisis_cost_param")
        validate_positive(self.root_tolerance, "root_tolerance")
        if self.root_max_iterations < 1:
            raise ValueError(
                f"root_max_iterations must be >= 1, got {self.root_max_iterations}"
            )
        if self.reward_segments <= 0 or self.reward_segments % 2 != 0:
            raise ValueError(
                f"reward_segments must be a positive even integer, got {self.reward_segments}"
            )
        validate_non_negative(
            self.spread_adverse_selection_param, "spread_adverse_selection_param"
        )
        validate_non_negative(self.martyr_max_spread_bps, "martyr_max_spread_bps")
        validate_non_negative(self.citizen_max_spread_bps, "citizen_max_spread_bps")
        validate_in_range(self.max_slash_fraction, "max_slash_fraction", 0.0, 1.0)
        validate_in_range(self.belief_update_weight, "belief_update_weight", 0.0, 1.0)
        validate_positive(self.volatility_threshold_bps, "volatility_threshold_bps")
        validate_positive(self.spread_widening_threshold_bps, "spread_widening_threshold_bps")
        validate_in_range(
            self.liquidity_drain_fraction, "liquidity_drain_fraction", 0.0, 1.0
        )
        validate_positive(self.volume_surge_multiple, "volume_surge_multiple")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MechanismConfig":
        """
        Build a config from ``LEXJ_<FIELD_NAME>`` variables.

        Unset variables keep their defaults.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            ValueError: If a variable cannot be parsed or fails validation
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, float | int] = {}

        for f in fields(cls):
            var = ENV_PREFIX + f.name.upper()
            raw = env.get(var)
            if raw is None or raw.strip() == "":
                continue
            try:
                overrides[f.name] = int(raw) if f.type in (int, "int") else float(raw)
            except ValueError as e:
                raise ValueError(f"{var} must be numeric, got {raw!r}") from e

        return cls(**overrides)
