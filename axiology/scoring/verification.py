"""Pass-through of externally produced verification results."""

from axiology.objectives import Objective
from axiology.scoring.measure import objective_kind
from axiology.types import ProofArtifact


def verify_value(objective: Objective, proof: ProofArtifact) -> bool:
    """
    Report whether an external proof artifact verifies an objective.

    No proof search happens here: the artifact's ``verified`` flag is
    passed through, and a missing flag counts as unverified. Other fields
    (prover, details) are opaque.

    Args:
        objective: Objective the proof is about
        proof: Read-only proof record from a verification tool

    Returns:
        True if the proof reports successful verification
    """
    objective_kind(objective)
    return bool(proof.get("verified", False))
