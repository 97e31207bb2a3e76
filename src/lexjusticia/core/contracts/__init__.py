"""
Contract Validation Module

JSON Schema contracts for every value the engine hands to external layers.
"""

from .validators import (
    CappedCrisisSpreadValidator,
    ContractValidator,
    CrisisSpreadValidator,
    CrisisStateValidator,
    ProviderAssessmentValidator,
    SchemaLoader,
    SlashResultValidator,
    TierBoundariesValidator,
    validate_capped_crisis_spread,
    validate_crisis_spread,
    validate_crisis_state,
    validate_provider_assessment,
    validate_slash_result,
    validate_tier_boundaries,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "TierBoundariesValidator",
    "ProviderAssessmentValidator",
    "CrisisSpreadValidator",
    "CappedCrisisSpreadValidator",
    "SlashResultValidator",
    "CrisisStateValidator",
    # Functions
    "validate_tier_boundaries",
    "validate_provider_assessment",
    "validate_crisis_spread",
    "validate_capped_crisis_spread",
    "validate_slash_result",
    "validate_crisis_state",
]
