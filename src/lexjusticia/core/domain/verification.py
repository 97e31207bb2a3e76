"""
Verification outcomes and penalties.

The engine never sees a compliance proof itself, only its outcome as reported
by the external verifier, and never touches token amounts: a slash is a
fraction of stake applied by the settlement layer.
"""

from typing import Optional

from pydantic import BaseModel, Field, model_validator


class ProofOutcome(BaseModel):
    """
    Outcome of an external compliance-proof verification.

    ``confidence`` (0-1) is the verifier's probability that the proof is
    valid and is used when reported; otherwise ``verified`` is coerced to
    1.0 / 0.0. The two must agree: a rejected proof cannot carry a confidence
    above 0.5, an accepted one cannot carry a confidence below 0.5.
    """

    verified: bool = Field(..., description="Proof accepted by the verifier")
    confidence: Optional[float] = Field(
        None, ge=0, le=1, description="Verifier confidence (nullable, 0-1)"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_confidence_matches_verdict(self) -> "ProofOutcome":
        if self.confidence is None:
            return self
        if not self.verified and self.confidence > 0.5:
            raise ValueError(
                f"rejected proof cannot have confidence {self.confidence} > 0.5"
            )
        if self.verified and self.confidence < 0.5:
            raise ValueError(
                f"accepted proof cannot have confidence {self.confidence} < 0.5"
            )
        return self

    def as_score(self) -> float:
        if self.confidence is not None:
            return self.confidence
        return 1.0 if self.verified else 0.0


class SlashResult(BaseModel):
    """Slash fraction of stake and its justification."""

    slash_fraction: float = Field(..., ge=0, le=1, description="Fraction of stake to slash")
    overclaimed_value: float = Field(
        ..., ge=0, description="phi_u(claimed) - phi_u(actual), floored at 0"
    )
    claimed_virtual_value: float = Field(..., ge=0, description="phi_u(claimed score)")
    actual_virtual_value: float = Field(..., ge=0, description="phi_u(verified score)")
    justification: str = Field(..., min_length=1, description="Human-readable reason")

    model_config = {"frozen": True}

    @property
    def slashed(self) -> bool:
        return self.slash_fraction > 0
