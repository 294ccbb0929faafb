"""Pass/fail checks of a state against an objective's threshold or target."""

from axiology.config import ScoringConfig, get_config
from axiology.errors import UnknownMetric, UnknownObjective
from axiology.objectives import Efficiency, Fairness, Objective, Profit, Welfare
from axiology.scoring.measure import (
    fairness_measure,
    objective_kind,
    require_field,
    require_number,
    safety_holds,
    welfare_measure,
)
from axiology.types import EfficiencyMetric, FairnessMetric, ObjectiveKind, State, StateKeys


def satisfies(objective: Objective, state: State, config: ScoringConfig | None = None) -> bool:
    """
    Check whether a state meets an objective's hard threshold or target.

    Args:
        objective: Objective to check
        state: Read-only state mapping
        config: Scoring policy (defaults to the process-wide config)

    Returns:
        True if the state satisfies the objective

    Raises:
        MissingField: If a state key required by the objective is absent
    """
    config = config or get_config()

    match objective_kind(objective):
        case ObjectiveKind.FAIRNESS:
            return _fairness_satisfied(objective, state, config)
        case ObjectiveKind.WELFARE:
            return _welfare_satisfied(objective, state)
        case ObjectiveKind.PROFIT:
            return _profit_satisfied(objective, state, config)
        case ObjectiveKind.EFFICIENCY:
            return _efficiency_satisfied(objective, state)
        case ObjectiveKind.SAFETY:
            return safety_holds(state)

    raise UnknownObjective(objective)


def _fairness_satisfied(objective: Fairness, state: State, config: ScoringConfig) -> bool:
    measure = fairness_measure(objective, state, config)
    if objective.metric == FairnessMetric.DISPARATE_IMPACT:
        # 80% rule, independent of the objective's own threshold
        return measure >= config.disparate_impact_floor
    return measure <= objective.threshold


def _welfare_satisfied(objective: Welfare, state: State) -> bool:
    min_welfare = state.get(StateKeys.MIN_WELFARE)
    if min_welfare is None:
        min_welfare = 0.0
    return welfare_measure(objective, state) >= float(min_welfare)


def _profit_satisfied(objective: Profit, state: State, config: ScoringConfig) -> bool:
    profit = require_number(state, StateKeys.PROFIT, "profit target")
    if profit < objective.target:
        return False
    return all(satisfies(constraint, state, config) for constraint in objective.constraints)


def _efficiency_satisfied(objective: Efficiency, state: State) -> bool:
    context = f"{objective.metric.value} efficiency"
    match objective.metric:
        case EfficiencyMetric.COMPUTATION_TIME:
            return require_number(state, StateKeys.COMPUTATION_TIME, context) <= objective.target
        case EfficiencyMetric.PARETO:
            return bool(require_field(state, StateKeys.IS_PARETO_EFFICIENT, context))
        case EfficiencyMetric.KALDOR_HICKS:
            return require_number(state, StateKeys.NET_GAIN, context) >= objective.target

    raise UnknownMetric(objective.metric, [m.value for m in EfficiencyMetric])
