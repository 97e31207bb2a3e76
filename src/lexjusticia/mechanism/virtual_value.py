"""
Virtual Value Functions — Myersonian Score Transformation

Upper (profit side, MARTYR tier and rewards):
    rent_u(s)    = (1 - F(s)) / (f(s) + RENT_EPS)
    penalty_u(s) = alpha * (|s - mean| / sigma) * rent_u(s)
    phi_u(s)     = max(0, s - rent_u(s) - penalty_u(s))

Lower (cost side, crisis/SOVEREIGN thresholding):
    rent_l(s) = F(s) / (f(s) + RENT_EPS)
    cost(s)   = beta * (|s - mean| / sigma) * rent_l(s)
    phi_l(s)  = cost(s) - s - rent_l(s)          (not clamped)

sigma is floored at DEVIATION_SCALE_EPS so a zero-variance distribution
never divides by zero. Any sigma above the floor is used as-is.
"""

from lexjusticia.config import DEFAULT_ADVERSE_SELECTION_PARAM, DEFAULT_CRISIS_COST_PARAM
from lexjusticia.core.domain.distribution import ScoreDistribution
from lexjusticia.core.domain.virtual_value import LowerVirtualValue, UpperVirtualValue
from lexjusticia.core.math.numerical_safeguards import (
    DEVIATION_SCALE_EPS,
    RENT_EPS,
    denom_safe_unsigned,
)


def _standardized_deviation(score: float, distribution: ScoreDistribution) -> float:
    """|s - mean| / sigma with sigma floored at DEVIATION_SCALE_EPS."""
    sigma = denom_safe_unsigned(distribution.stddev, DEVIATION_SCALE_EPS)
    return abs(score - distribution.mean) / sigma


def upper_virtual_value(
    score: float,
    distribution: ScoreDistribution,
    adverse_selection_param: float = DEFAULT_ADVERSE_SELECTION_PARAM,
) -> UpperVirtualValue:
    """
    Profit-side virtual value phi_u(score).

    Args:
        score: Provider score (any real; outside the sample range is an
            extrapolation)
        distribution: Historical score distribution
        adverse_selection_param: alpha, weight of the deviation penalty

    Returns:
        UpperVirtualValue with virtual_value >= 0
    """
    cdf = distribution.cdf(score)
    pdf = distribution.pdf(score)

    information_rent = (1 - cdf) / (pdf + RENT_EPS)
    penalty = (
        adverse_selection_param
        * _standardized_deviation(score, distribution)
        * information_rent
    )

    return UpperVirtualValue(
        score=score,
        information_rent=information_rent,
        adverse_selection_penalty=penalty,
        virtual_value=max(0.0, score - information_rent - penalty),
    )


def lower_virtual_value(
    score: float,
    distribution: ScoreDistribution,
    crisis_cost_param: float = DEFAULT_CRISIS_COST_PARAM,
) -> LowerVirtualValue:
    """
    Cost-side virtual value phi_l(score). May be negative.

    Args:
        score: Provider score
        distribution: Historical score distribution
        crisis_cost_param: beta, weight of the crisis cost term
    """
    cdf = distribution.cdf(score)
    pdf = distribution.pdf(score)

    information_rent = cdf / (pdf + RENT_EPS)
    crisis_cost = (
        crisis_cost_param
        * _standardized_deviation(score, distribution)
        * information_rent
    )

    return LowerVirtualValue(
        score=score,
        information_rent=information_rent,
        crisis_cost=crisis_cost,
        virtual_value=crisis_cost - score - information_rent,
    )
