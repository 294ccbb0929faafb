"""State field access and metric-provider calls shared by the checker and scorer."""

from typing import Any

from axiology.config import ScoringConfig
from axiology.errors import MissingField, UnknownObjective
from axiology.metrics import disparity, welfare_aggregate
from axiology.objectives import Fairness, Objective, Welfare
from axiology.types import LABELLED_METRICS, FairnessMetric, ObjectiveKind, State, StateKeys


def objective_kind(objective: object) -> ObjectiveKind:
    """Return the discriminant of an objective, rejecting anything else."""
    if not isinstance(objective, Objective):
        raise UnknownObjective(objective)
    return objective.kind


def require_field(state: State, key: str, context: str) -> Any:
    """Read a required state field; absent and None both count as missing."""
    value = state.get(key)
    if value is None:
        raise MissingField(key, context)
    return value


def require_number(state: State, key: str, context: str) -> float:
    return float(require_field(state, key, context))


def safety_holds(state: State) -> bool:
    """Both safety flags, each assumed true when absent or None."""
    for key in (StateKeys.IS_SAFE, StateKeys.INVARIANT_HOLDS):
        flag = state.get(key)
        if flag is not None and not flag:
            return False
    return True


def fairness_measure(objective: Fairness, state: State, config: ScoringConfig) -> float:
    """
    Compute the disparity (or ratio, for disparate_impact) an objective asks for.

    Protected group labels are read from ``protected``, falling back to
    ``protected_attributes``.
    """
    metric = objective.metric
    context = f"{metric.value} fairness"
    predictions = require_field(state, StateKeys.PREDICTIONS, context)

    if metric == FairnessMetric.INDIVIDUAL_FAIRNESS:
        similarity = require_field(state, StateKeys.SIMILARITY_MATRIX, context)
        return disparity(
            metric,
            predictions,
            similarity_matrix=similarity,
            similarity_threshold=config.similarity_threshold,
        )

    protected = state.get(StateKeys.PROTECTED)
    if protected is None:
        protected = state.get(StateKeys.PROTECTED_ATTRIBUTES)
    if protected is None:
        raise MissingField(StateKeys.PROTECTED, context)

    labels = None
    if metric in LABELLED_METRICS:
        labels = require_field(state, StateKeys.LABELS, context)

    return disparity(metric, predictions, protected, labels)


def welfare_measure(objective: Welfare, state: State) -> float:
    """Welfare aggregate of the state's utilities; an empty population has welfare 0.0."""
    utilities = require_field(state, StateKeys.UTILITIES, f"{objective.metric.value} welfare")
    if len(utilities) == 0:
        return 0.0
    return welfare_aggregate(objective.metric, utilities)
