"""
Incentive-Compatible Rewards

    R(sigma) = integral_{min}^{min(sigma, max)} phi_u(x) dx
    dR/dsigma = phi_u(sigma)

The marginal reward is the integrand itself, not a numerical derivative:
the slope of the reward schedule equals the upper virtual value at every
score, which makes truthful reporting optimal. Since phi_u >= 0, R is
non-decreasing in sigma. Above the sample maximum R is flat.
"""

from lexjusticia.config import DEFAULT_ADVERSE_SELECTION_PARAM
from lexjusticia.core.domain.distribution import ScoreDistribution
from lexjusticia.core.math.integration import DEFAULT_SEGMENTS, simpson_integrate
from lexjusticia.mechanism.virtual_value import upper_virtual_value


def calculate_ic_reward(
    score: float,
    distribution: ScoreDistribution,
    number_of_segments: int = DEFAULT_SEGMENTS,
    adverse_selection_param: float = DEFAULT_ADVERSE_SELECTION_PARAM,
) -> float:
    """
    Cumulative IC reward R(score), abstract units.

    Args:
        score: Provider score
        distribution: Historical score distribution
        number_of_segments: Simpson sub-intervals (positive, even)
        adverse_selection_param: alpha passed to phi_u

    Returns:
        R(score) >= 0; 0.0 for any score below the distribution minimum

    Raises:
        ValueError: If number_of_segments is not a positive even integer
    """
    if score < distribution.minimum:
        return 0.0

    reward = simpson_integrate(
        lambda x: upper_virtual_value(x, distribution, adverse_selection_param).virtual_value,
        distribution.minimum,
        min(score, distribution.maximum),
        segments=number_of_segments,
    )
    return max(0.0, reward)


def calculate_marginal_ic_reward(
    score: float,
    distribution: ScoreDistribution,
    adverse_selection_param: float = DEFAULT_ADVERSE_SELECTION_PARAM,
) -> float:
    """Marginal reward dR/dscore = phi_u(score)."""
    return upper_virtual_value(score, distribution, adverse_selection_param).virtual_value
