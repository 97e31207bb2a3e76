"""
Numerical Safeguards — Guarded Math Primitives for the Mechanism

Every formula of the engine (information rent, kernel bandwidth, hazard rate,
crisis log term) divides by a quantity estimated from a handful of samples.
This module holds the protocol epsilon constants and the primitives used to
apply them.

CRITICAL INVARIANTS:
1. The epsilon constants below are protocol constants. They bound the
   worst-case information rent near the edges of the score distribution and
   must stay numerically identical across implementations.
2. Division by zero never happens (a fallback or an epsilon floor is used).
3. NaN/Inf never propagate out of safe_divide.
4. All operations are deterministic and pure.
"""

import math
from typing import Final

# =============================================================================
# PROTOCOL EPSILON CONSTANTS
# =============================================================================

# Added to the kernel density in both information-rent terms:
# rent = (1 - F) / (f + RENT_EPS)
RENT_EPS: Final[float] = 0.0001

# Added to Scott's bandwidth so a zero-variance sample never yields h = 0
BANDWIDTH_EPS: Final[float] = 0.001

# Added inside the crisis log term: -ln(1 - lambda + LOG_EPS)
LOG_EPS: Final[float] = 0.001

# Density reported for an empty sample set
EMPTY_PDF_DENSITY: Final[float] = 0.001

# Survival below this floor is treated as near-certain exceedance
SURVIVAL_FLOOR: Final[float] = 0.001

# Hazard rate reported once survival drops under SURVIVAL_FLOOR
HAZARD_CEILING: Final[float] = 1000.0

# Floor for the stddev used to scale deviation from the mean
# (only active for zero-variance distributions)
DEVIATION_SCALE_EPS: Final[float] = 0.001

# Tolerances for is_close
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# SAFE DIVISION
# =============================================================================


def denom_safe_unsigned(value: float, eps: float) -> float:
    """
    Unsigned denominator with an epsilon floor.

    denom_safe_unsigned(x, eps) = max(abs(x), eps)

    Args:
        value: Raw denominator (any sign)
        eps: Minimum absolute value (positive)

    Returns:
        Safe denominator >= eps

    Examples:
        >>> denom_safe_unsigned(4.55, 0.001)
        4.55
        >>> denom_safe_unsigned(0.0, 0.001)
        0.001
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    return max(abs(value), eps)


def safe_divide(
    numerator: float,
    denominator: float,
    fallback: float = 0.0,
) -> float:
    """
    Division that returns ``fallback`` instead of failing.

    A zero denominator, or any NaN/Inf in the inputs or the result,
    yields ``fallback``.

    Args:
        numerator: Numerator
        denominator: Denominator
        fallback: Value returned when the quotient is undefined

    Returns:
        numerator / denominator, or fallback

    Examples:
        >>> safe_divide(3.0, 4.0)
        0.75
        >>> safe_divide(3.0, 0.0, fallback=0.0)
        0.0
    """
    if not (is_valid_float(numerator) and is_valid_float(denominator)):
        return fallback

    if denominator == 0.0:
        return fallback

    return sanitize_float(numerator / denominator, fallback=fallback)


# =============================================================================
# NaN/Inf SANITIZATION
# =============================================================================


def is_valid_float(value: float) -> bool:
    """True if value is finite (not NaN, not Inf)."""
    return math.isfinite(value)


def sanitize_float(value: float, fallback: float = 0.0) -> float:
    """
    Replace NaN/Inf with ``fallback``.

    Examples:
        >>> sanitize_float(10.0)
        10.0
        >>> sanitize_float(float('nan'))
        0.0
    """
    if is_valid_float(value):
        return value
    return fallback


# =============================================================================
# COMPARISONS
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Float comparison with relative and absolute tolerance.

    abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# =============================================================================
# PARAMETER VALIDATION
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Raises:
        ValueError: If value <= 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")


def validate_non_negative(value: float, name: str) -> None:
    """
    Raises:
        ValueError: If value < 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def validate_in_range(
    value: float,
    name: str,
    min_value: float | None = None,
    max_value: float | None = None,
) -> None:
    """
    Raises:
        ValueError: If value is outside [min_value, max_value] or NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if min_value is not None and value < min_value:
        raise ValueError(f"{name} must be >= {min_value}, got {value}")

    if max_value is not None and value > max_value:
        raise ValueError(f"{name} must be <= {max_value}, got {value}")
