"""
Axiology - value theory for machine learning systems.

Callers describe competing objectives (fairness, welfare, profit, efficiency,
safety), score candidate system states against them on a common [0, 1] scale,
aggregate the scores and extract the Pareto frontier of a candidate set.
"""

from axiology.errors import (
    AxiologyError,
    InvalidObjective,
    MissingField,
    UnknownMetric,
    UnknownObjective,
)
from axiology.log import configure_logging
from axiology.objectives import Efficiency, Fairness, Objective, Profit, Safety, Welfare
from axiology.scoring import (
    dominates,
    objective_value,
    pareto_frontier,
    satisfies,
    score,
    verify_value,
    weighted_score,
)
from axiology.types import EfficiencyMetric, FairnessMetric, ObjectiveKind, WelfareMetric

__version__ = "0.1.0"

__all__ = [
    "AxiologyError",
    "Efficiency",
    "EfficiencyMetric",
    "Fairness",
    "FairnessMetric",
    "InvalidObjective",
    "MissingField",
    "Objective",
    "ObjectiveKind",
    "Profit",
    "Safety",
    "UnknownMetric",
    "UnknownObjective",
    "Welfare",
    "WelfareMetric",
    "configure_logging",
    "dominates",
    "objective_value",
    "pareto_frontier",
    "satisfies",
    "score",
    "verify_value",
    "weighted_score",
]
