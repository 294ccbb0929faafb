"""
Scoring module for objective satisfaction, normalized scores and Pareto analysis.

Scores place every objective kind on a common [0, 1] scale so they can be
aggregated into one figure of merit or compared for Pareto dominance.
"""

from axiology.scoring.aggregate import normalize_scores, rank_candidates, weighted_score
from axiology.scoring.pareto import (
    FrontierResult,
    analyze_frontier,
    compute_score_matrix,
    dominated_candidates,
    dominates,
    dominating_candidates,
    pareto_frontier,
)
from axiology.scoring.satisfaction import satisfies
from axiology.scoring.score import objective_value, score
from axiology.scoring.verification import verify_value

__all__ = [
    "FrontierResult",
    "analyze_frontier",
    "compute_score_matrix",
    "dominated_candidates",
    "dominates",
    "dominating_candidates",
    "normalize_scores",
    "objective_value",
    "pareto_frontier",
    "rank_candidates",
    "satisfies",
    "score",
    "verify_value",
    "weighted_score",
]
