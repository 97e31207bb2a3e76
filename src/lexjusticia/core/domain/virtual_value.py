"""
Virtual value results.

Two separate variants instead of one shape with conditionally meaningful
fields: the profit side is clamped at zero, the cost side is not.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UpperVirtualValue:
    """Profit-side virtual value phi_u(s), used for the MARTYR tier and rewards."""

    score: float
    information_rent: float  # (1 - F) / (f + eps)
    adverse_selection_penalty: float
    virtual_value: float  # max(0, s - rent - penalty)


@dataclass(frozen=True)
class LowerVirtualValue:
    """Cost-side virtual value phi_l(s), used for crisis/SOVEREIGN thresholding."""

    score: float
    information_rent: float  # F / (f + eps)
    crisis_cost: float
    virtual_value: float  # cost - s - rent, may be negative
