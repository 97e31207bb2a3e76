"""
Slashing — Recovering Over-Claimed Virtual Value

    overclaimed = max(0, phi_u(claimed) - phi_u(actual))
    slash       = min(overclaimed, max_slash_fraction)

The provider is charged the virtual value it extracted by over-claiming,
not its whole stake. The result is a fraction; the settlement layer
multiplies it by the actual staked amount.
"""

import logging

from lexjusticia.config import DEFAULT_ADVERSE_SELECTION_PARAM, DEFAULT_MAX_SLASH_FRACTION
from lexjusticia.core.domain.distribution import ScoreDistribution
from lexjusticia.core.domain.verification import SlashResult
from lexjusticia.core.math.numerical_safeguards import validate_in_range
from lexjusticia.mechanism.virtual_value import upper_virtual_value

logger = logging.getLogger(__name__)

NO_SLASH_JUSTIFICATION = "No slashing: provider was conservative or honest"


def calculate_slashing_amount(
    claimed_score: float,
    actual_score: float,
    distribution: ScoreDistribution,
    max_slash_fraction: float = DEFAULT_MAX_SLASH_FRACTION,
    adverse_selection_param: float = DEFAULT_ADVERSE_SELECTION_PARAM,
) -> SlashResult:
    """
    Slash for a provider whose verified score differs from its claim.

    Args:
        claimed_score: Score the provider committed to
        actual_score: Score established by proof verification
        distribution: Historical score distribution
        max_slash_fraction: Cap as a fraction of stake (default 0.5)
        adverse_selection_param: alpha passed to phi_u

    Returns:
        SlashResult with slash_fraction in [0, max_slash_fraction]

    Raises:
        ValueError: If max_slash_fraction is outside [0, 1]
    """
    validate_in_range(max_slash_fraction, "max_slash_fraction", 0.0, 1.0)

    claimed_value = upper_virtual_value(
        claimed_score, distribution, adverse_selection_param
    ).virtual_value
    actual_value = upper_virtual_value(
        actual_score, distribution, adverse_selection_param
    ).virtual_value

    overclaimed = max(0.0, claimed_value - actual_value)
    slash = min(overclaimed, max_slash_fraction)

    if overclaimed <= 0:
        justification = NO_SLASH_JUSTIFICATION
    else:
        justification = (
            f"Overclaimed virtual value: {overclaimed:.2f}, slashing {slash:.2f}"
        )
        logger.info(
            "slash: claimed=%.4f actual=%.4f overclaimed=%.4f fraction=%.4f",
            claimed_score,
            actual_score,
            overclaimed,
            slash,
        )

    return SlashResult(
        slash_fraction=slash,
        overclaimed_value=overclaimed,
        claimed_virtual_value=claimed_value,
        actual_virtual_value=actual_value,
        justification=justification,
    )
