"""
Estimators — Empirical CDF, Gaussian KDE and Hazard Rate

Small-sample estimators for bounded percentage-like scores (0-100). They are
tuned for a provider's historical record (tens of samples), not for general
statistics.

FORMULAS:
    F(s) = #{x_i <= s} / n
    h    = n^(-1/5) * sigma + BANDWIDTH_EPS          (Scott's rule)
    f(s) = (1/n) * sum_i K((s - x_i) / h) / (h * sqrt(2*pi)),  K(u) = exp(-u^2 / 2)
    haz(s) = f(s) / (1 - F(s))

FALLBACKS:
    - empty sample set: F = 0, f = EMPTY_PDF_DENSITY
    - survival < SURVIVAL_FLOOR: haz = HAZARD_CEILING
"""

import math
from typing import Optional, Sequence

from lexjusticia.core.math.numerical_safeguards import (
    BANDWIDTH_EPS,
    EMPTY_PDF_DENSITY,
    HAZARD_CEILING,
    SURVIVAL_FLOOR,
)

_SQRT_2PI = math.sqrt(2.0 * math.pi)


# =============================================================================
# MOMENTS
# =============================================================================


def sample_mean(samples: Sequence[float]) -> float:
    """Arithmetic mean. Raises ValueError on an empty sequence."""
    if not samples:
        raise ValueError("mean of an empty sample set is undefined")
    return sum(samples) / len(samples)


def sample_stddev(samples: Sequence[float]) -> float:
    """
    Population standard deviation (variance divided by n, not n - 1).

    A single sample has stddev 0.
    """
    mean = sample_mean(samples)
    variance = sum((x - mean) ** 2 for x in samples) / len(samples)
    return math.sqrt(variance)


def scott_bandwidth(samples: Sequence[float]) -> float:
    """
    Scott's rule bandwidth with the protocol epsilon added.

    h = n^(-1/5) * sigma + BANDWIDTH_EPS
    """
    n = len(samples)
    return math.pow(n, -0.2) * sample_stddev(samples) + BANDWIDTH_EPS


# =============================================================================
# DISTRIBUTION FUNCTIONS
# =============================================================================


def empirical_cdf(samples: Sequence[float], point: float) -> float:
    """
    Fraction of samples <= point.

    Args:
        samples: Historical scores
        point: Query score

    Returns:
        F(point) in [0, 1]; 0.0 for an empty sample set

    Examples:
        >>> empirical_cdf([1.0, 2.0, 3.0, 4.0], 2.0)
        0.5
        >>> empirical_cdf([], 2.0)
        0.0
    """
    count = sum(1 for x in samples if x <= point)
    return count / (len(samples) or 1)


def estimate_pdf(
    samples: Sequence[float],
    point: float,
    bandwidth: Optional[float] = None,
) -> float:
    """
    Gaussian kernel density estimate at ``point``.

    Args:
        samples: Historical scores
        point: Query score
        bandwidth: Kernel bandwidth; None or a non-positive value selects
            Scott's rule (scott_bandwidth)

    Returns:
        f(point) > 0 for a non-empty sample set; EMPTY_PDF_DENSITY otherwise
    """
    if not samples:
        return EMPTY_PDF_DENSITY

    n = len(samples)
    h = bandwidth if bandwidth and bandwidth > 0 else scott_bandwidth(samples)

    density = 0.0
    for score in samples:
        u = (point - score) / h
        density += math.exp(-0.5 * u * u) / (h * _SQRT_2PI)

    return density / n


def hazard_rate(samples: Sequence[float], point: float) -> float:
    """
    Hazard rate f(s) / (1 - F(s)).

    Near the top of the sample range survival vanishes; below SURVIVAL_FLOOR
    the rate is reported as HAZARD_CEILING (near-certain exceedance).
    """
    pdf = estimate_pdf(samples, point)
    survival = 1.0 - empirical_cdf(samples, point)

    if survival < SURVIVAL_FLOOR:
        return HAZARD_CEILING

    return pdf / survival
