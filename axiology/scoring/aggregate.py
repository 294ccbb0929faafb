"""Weighted aggregation of objective scores into one figure of merit."""

from collections.abc import Sequence

import numpy as np
import structlog

from axiology.config import ScoringConfig, get_config
from axiology.objectives import Objective
from axiology.scoring.score import score
from axiology.types import CandidateSet, State

logger = structlog.get_logger()


def weighted_score(
    objectives: Sequence[Objective],
    state: State,
    config: ScoringConfig | None = None,
) -> float:
    """
    Compute the weighted mean of objective scores.

    Zero-weight objectives are still scored, so missing fields surface,
    but they do not move the result.

    Args:
        objectives: Objectives to evaluate
        state: Read-only state mapping

    Returns:
        Weighted score in [0, 1]; 0.0 for no objectives or all-zero weights
    """
    config = config or get_config()
    objectives = list(objectives)

    scores = [score(objective, state, config) for objective in objectives]
    total_weight = sum(objective.weight for objective in objectives)

    if total_weight == 0.0:
        return 0.0

    weighted_sum = sum(s * objective.weight for s, objective in zip(scores, objectives))
    # Guard against float drift past 1.0
    return min(1.0, weighted_sum / total_weight)


def normalize_scores(scores: Sequence[float] | np.ndarray) -> np.ndarray:
    """
    Min-max rescale raw scores to [0, 1].

    Args:
        scores: Raw scores

    Returns:
        Normalized scores; all ones when every score is equal
    """
    values = np.asarray(scores, dtype=float)
    if values.size == 0:
        return values

    min_score = values.min()
    max_score = values.max()
    if max_score == min_score:
        return np.ones_like(values)

    return (values - min_score) / (max_score - min_score)


def rank_candidates(
    candidates: CandidateSet,
    objectives: Sequence[Objective],
    config: ScoringConfig | None = None,
) -> list[tuple[int, float]]:
    """
    Rank candidates by weighted score.

    Returns:
        (candidate index, weighted score) pairs, best first; ties keep input order
    """
    config = config or get_config()
    ranked = [
        (index, weighted_score(objectives, candidate, config))
        for index, candidate in enumerate(candidates)
    ]
    # sorted() is stable, so equal scores keep input order
    ranked = sorted(ranked, key=lambda item: item[1], reverse=True)

    logger.debug(
        "candidates_ranked",
        n_candidates=len(ranked),
        best_index=ranked[0][0] if ranked else None,
    )

    return ranked
