"""Pareto dominance and frontier extraction over candidate states."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np
import structlog

from axiology.config import ScoringConfig, get_config
from axiology.objectives import Objective
from axiology.scoring.score import score
from axiology.types import CandidateSet, State

logger = structlog.get_logger()


@dataclass
class FrontierResult:
    """
    Non-dominated candidates of a candidate set, with the comparisons behind them.

    Attributes:
        frontier_indices: Positions of the undominated candidates, ascending
        dominance_matrix: (n, n) booleans; row i marks the candidates i beats
        score_matrix: (n, k) normalized scores, one column per objective
        epsilon: Per-objective slack the comparisons were made with
    """

    frontier_indices: list[int]
    dominance_matrix: np.ndarray
    score_matrix: np.ndarray
    epsilon: float = 0.0


def dominates(
    a: State,
    b: State,
    objectives: Sequence[Objective],
    config: ScoringConfig | None = None,
) -> bool:
    """
    Check if candidate B Pareto-dominates candidate A.

    B dominates A if:
    1. B scores at least as well as A on EVERY objective
    2. B scores strictly better than A on at least ONE objective

    A state never dominates an identical copy of itself. The scan stops
    at the first objective on which B is worse.

    Args:
        a: Candidate that may be dominated
        b: Candidate that may dominate
        objectives: Objectives to compare on

    Returns:
        True if B dominates A
    """
    config = config or get_config()
    strictly_better = False

    for objective in objectives:
        score_a = score(objective, a, config)
        score_b = score(objective, b, config)

        if score_b < score_a:
            return False
        if score_b > score_a:
            strictly_better = True

    return strictly_better


def _row_dominates(winner: np.ndarray, loser: np.ndarray, epsilon: float) -> bool:
    # No objective may fall more than epsilon short
    if not np.all(winner >= loser - epsilon):
        return False
    # And some objective must clear the loser by more than epsilon
    return bool(np.any(winner > loser + epsilon))


def _as_candidates(candidates: CandidateSet | State) -> list[State]:
    # A lone state is a one-element candidate set
    if isinstance(candidates, Mapping):
        return [candidates]
    return list(candidates)


def compute_score_matrix(
    candidates: CandidateSet | State,
    objectives: Sequence[Objective],
    config: ScoringConfig | None = None,
) -> np.ndarray:
    """
    Score every candidate on every objective.

    Returns:
        Array of shape (n_candidates, n_objectives)
    """
    config = config or get_config()
    candidates = _as_candidates(candidates)
    objectives = list(objectives)
    scores = np.zeros((len(candidates), len(objectives)), dtype=float)
    for i, candidate in enumerate(candidates):
        for k, objective in enumerate(objectives):
            scores[i, k] = score(objective, candidate, config)
    return scores


def analyze_frontier(
    candidates: CandidateSet | State,
    objectives: Sequence[Objective],
    epsilon: float = 0.0,
    config: ScoringConfig | None = None,
) -> FrontierResult:
    """
    Compute the (ε-)Pareto frontier with its full dominance structure.

    A candidate is on the frontier if no other candidate dominates it.
    Candidates are told apart by position, so duplicates tie and are
    all retained.

    Args:
        candidates: Candidate states, or a single state
        objectives: Objectives to compare on
        epsilon: Tolerance per objective; 0.0 gives plain Pareto dominance

    Returns:
        FrontierResult with frontier indices, dominance and score matrices

    Raises:
        ValueError: If epsilon is negative
    """
    if epsilon < 0:
        raise ValueError("epsilon must be >= 0")

    candidates = _as_candidates(candidates)
    n_candidates = len(candidates)

    score_matrix = compute_score_matrix(candidates, objectives, config)

    dominance = np.zeros((n_candidates, n_candidates), dtype=bool)
    for i in range(n_candidates):
        for j in range(n_candidates):
            if i != j:
                dominance[i, j] = _row_dominates(score_matrix[i], score_matrix[j], epsilon)

    # Frontier = candidates not dominated by anyone
    is_dominated = np.any(dominance, axis=0)
    frontier_indices = [int(i) for i in np.where(~is_dominated)[0]]

    logger.debug(
        "pareto_frontier_computed",
        n_candidates=n_candidates,
        n_objectives=score_matrix.shape[1],
        frontier_size=len(frontier_indices),
        epsilon=epsilon,
    )

    return FrontierResult(
        frontier_indices=frontier_indices,
        dominance_matrix=dominance,
        score_matrix=score_matrix,
        epsilon=epsilon,
    )


def pareto_frontier(
    candidates: CandidateSet | State,
    objectives: Sequence[Objective],
    config: ScoringConfig | None = None,
) -> list[State]:
    """
    Extract the Pareto-optimal candidates.

    Args:
        candidates: Candidate states, or a single state
        objectives: Objectives to optimize

    Returns:
        Non-dominated candidates in their original order
    """
    candidates = _as_candidates(candidates)
    # Nothing to compare against, so no state needs scoring
    if len(candidates) <= 1:
        return candidates

    result = analyze_frontier(candidates, objectives, config=config)
    return [candidates[i] for i in result.frontier_indices]


def dominating_candidates(result: FrontierResult, index: int) -> list[int]:
    """
    Get indices of the candidates that dominate the given candidate.

    Returns:
        Candidate indices, empty if index is out of range
    """
    if not 0 <= index < len(result.dominance_matrix):
        return []
    return [int(i) for i in np.where(result.dominance_matrix[:, index])[0]]


def dominated_candidates(result: FrontierResult, index: int) -> list[int]:
    """
    Get indices of the candidates the given candidate dominates.

    Returns:
        Candidate indices, empty if index is out of range
    """
    if not 0 <= index < len(result.dominance_matrix):
        return []
    return [int(i) for i in np.where(result.dominance_matrix[index, :])[0]]
