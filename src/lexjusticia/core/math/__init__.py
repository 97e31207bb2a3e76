"""
Core math modules for the mechanism engine.

Guarded numerical primitives, small-sample estimators, bounded root finding
and quadrature.
"""

# Numerical Safeguards
from lexjusticia.core.math.numerical_safeguards import (
    # Protocol epsilon constants
    BANDWIDTH_EPS,
    DEVIATION_SCALE_EPS,
    EMPTY_PDF_DENSITY,
    HAZARD_CEILING,
    LOG_EPS,
    RENT_EPS,
    SURVIVAL_FLOOR,
    # Safe division
    denom_safe_unsigned,
    safe_divide,
    # NaN/Inf sanitization
    is_valid_float,
    sanitize_float,
    # Utilities
    is_close,
    # Validation
    validate_in_range,
    validate_non_negative,
    validate_positive,
)

# Estimators
from lexjusticia.core.math.estimators import (
    empirical_cdf,
    estimate_pdf,
    hazard_rate,
    sample_mean,
    sample_stddev,
    scott_bandwidth,
)

# Root finding
from lexjusticia.core.math.root_finding import (
    DEFAULT_MAX_ITERATIONS,
    DEFAULT_ROOT_TOLERANCE,
    RootResult,
    RootStatus,
    bisect_root,
)

# Integration
from lexjusticia.core.math.integration import (
    DEFAULT_SEGMENTS,
    simpson_integrate,
)

__all__ = [
    # Numerical Safeguards: constants
    "BANDWIDTH_EPS",
    "DEVIATION_SCALE_EPS",
    "EMPTY_PDF_DENSITY",
    "HAZARD_CEILING",
    "LOG_EPS",
    "RENT_EPS",
    "SURVIVAL_FLOOR",
    # Numerical Safeguards: functions
    "denom_safe_unsigned",
    "safe_divide",
    "is_valid_float",
    "sanitize_float",
    "is_close",
    "validate_in_range",
    "validate_non_negative",
    "validate_positive",
    # Estimators
    "empirical_cdf",
    "estimate_pdf",
    "hazard_rate",
    "sample_mean",
    "sample_stddev",
    "scott_bandwidth",
    # Root finding
    "DEFAULT_MAX_ITERATIONS",
    "DEFAULT_ROOT_TOLERANCE",
    "RootResult",
    "RootStatus",
    "bisect_root",
    # Integration
    "DEFAULT_SEGMENTS",
    "simpson_integrate",
]
