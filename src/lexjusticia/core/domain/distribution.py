"""
ScoreDistribution — Immutable Snapshot of a Provider's Score History

Built once per scoring epoch from a non-empty sequence of historical scores
and never mutated; an updated history means a new snapshot. Sample order is
preserved so KDE sums are reproducible.

Scores are conventionally 0-100 but the range is not enforced. Queries
outside [minimum, maximum] are extrapolations with reduced confidence.
"""

from typing import Iterable

from pydantic import BaseModel, Field, model_validator

from lexjusticia.core.math.estimators import (
    empirical_cdf,
    estimate_pdf,
    hazard_rate,
    sample_mean,
    sample_stddev,
)
from lexjusticia.core.math.numerical_safeguards import is_close, is_valid_float


class ScoreDistribution(BaseModel):
    """
    Statistical summary of historical scores.

    Use ScoreDistribution.from_scores(); direct construction is validated so
    that mean/stddev/minimum/maximum always describe ``samples``.
    """

    samples: tuple[float, ...] = Field(
        ..., min_length=1, description="Historical scores in original order"
    )
    mean: float = Field(..., description="Arithmetic mean of samples")
    stddev: float = Field(..., ge=0, description="Population standard deviation")
    minimum: float = Field(..., description="Smallest sample")
    maximum: float = Field(..., description="Largest sample")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_statistics_match_samples(self) -> "ScoreDistribution":
        """Statistics must be recomputable from the sample set."""
        if not all(is_valid_float(x) for x in self.samples):
            raise ValueError("samples must be finite floats")
        if self.minimum != min(self.samples) or self.maximum != max(self.samples):
            raise ValueError("minimum/maximum do not match samples")
        if not is_close(self.mean, sample_mean(self.samples), abs_tol=1e-9):
            raise ValueError("mean does not match samples")
        if not is_close(self.stddev, sample_stddev(self.samples), abs_tol=1e-9):
            raise ValueError("stddev does not match samples")
        return self

    @classmethod
    def from_scores(cls, scores: Iterable[float]) -> "ScoreDistribution":
        """
        Build a distribution from historical scores.

        Raises:
            ValueError: If ``scores`` is empty
        """
        samples = tuple(float(s) for s in scores)
        if not samples:
            raise ValueError("cannot build a ScoreDistribution from an empty sample set")

        return cls(
            samples=samples,
            mean=sample_mean(samples),
            stddev=sample_stddev(samples),
            minimum=min(samples),
            maximum=max(samples),
        )

    @property
    def size(self) -> int:
        return len(self.samples)

    @property
    def is_degenerate(self) -> bool:
        """All samples identical (zero variance)."""
        return self.stddev == 0.0

    def cdf(self, point: float) -> float:
        return empirical_cdf(self.samples, point)

    def pdf(self, point: float) -> float:
        return estimate_pdf(self.samples, point)

    def hazard(self, point: float) -> float:
        return hazard_rate(self.samples, point)

    def contains(self, score: float) -> bool:
        """Whether ``score`` lies inside the observed range."""
        return self.minimum <= score <= self.maximum
