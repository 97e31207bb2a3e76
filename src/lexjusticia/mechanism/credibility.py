"""
Credibility update from verified proofs.

    posterior = w * proof_outcome + (1 - w) * prior,  w = 0.7 by default

A linear blend; nothing is retained between calls, the caller supplies the
prior every time.
"""

from typing import Union

from lexjusticia.config import DEFAULT_BELIEF_UPDATE_WEIGHT
from lexjusticia.core.domain.verification import ProofOutcome
from lexjusticia.core.math.numerical_safeguards import validate_in_range


def update_credibility(
    prior: float,
    proof_outcome: Union[float, bool, ProofOutcome],
    belief_update_weight: float = DEFAULT_BELIEF_UPDATE_WEIGHT,
) -> float:
    """
    Blend the prior credibility with a proof outcome.

    Args:
        prior: Current credibility of the provider
        proof_outcome: Verifier confidence (0-1), a boolean verdict, or a
            ProofOutcome
        belief_update_weight: Weight of the proof, in [0, 1]

    Returns:
        Posterior credibility

    Raises:
        ValueError: If belief_update_weight is outside [0, 1]

    Examples:
        >>> round(update_credibility(0.5, 1.0), 10)
        0.85
        >>> round(update_credibility(0.5, False), 10)
        0.15
    """
    validate_in_range(belief_update_weight, "belief_update_weight", 0.0, 1.0)

    if isinstance(proof_outcome, ProofOutcome):
        outcome = proof_outcome.as_score()
    else:
        outcome = float(proof_outcome)

    return belief_update_weight * outcome + (1 - belief_update_weight) * prior
