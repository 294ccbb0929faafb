"""
Normalized objective scores.

Every objective kind maps a state onto [0, 1], where 1.0 fully satisfies
the objective and 0.0 fully fails it. Disparity-style fairness metrics are
rescaled against the objective's own tolerance; ratio-style metrics are
already oriented "higher is better" and use a fixed unit scale.
"""

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
from axiology.types import (
    DISPARITY_METRICS,
    EfficiencyMetric,
    FairnessMetric,
    ObjectiveKind,
    State,
    StateKeys,
    WelfareMetric,
)


def _clamp(value: float) -> float:
    return min(1.0, max(0.0, float(value)))


def _target_ratio(value: float, target: float) -> float:
    """Share of the target reached; a zero target passes any non-negative value."""
    if value >= target:
        return 1.0
    if target <= 0.0:
        return 0.0
    return _clamp(value / target)


def score(objective: Objective, state: State, config: ScoringConfig | None = None) -> float:
    """
    Compute a normalized score for how well a state satisfies an objective.

    Args:
        objective: Objective to score
        state: Read-only state mapping
        config: Scoring policy (defaults to the process-wide config)

    Returns:
        Score in [0, 1] where 1.0 is optimal

    Raises:
        MissingField: If a state key required by the objective is absent
    """
    config = config or get_config()

    match objective_kind(objective):
        case ObjectiveKind.FAIRNESS:
            return _fairness_score(objective, state, config)
        case ObjectiveKind.WELFARE:
            return _welfare_score(objective, state, config)
        case ObjectiveKind.PROFIT:
            return _profit_score(objective, state)
        case ObjectiveKind.EFFICIENCY:
            return _efficiency_score(objective, state)
        case ObjectiveKind.SAFETY:
            return 1.0 if safety_holds(state) else 0.0

    raise UnknownObjective(objective)


def _fairness_score(objective: Fairness, state: State, config: ScoringConfig) -> float:
    measure = fairness_measure(objective, state, config)

    if objective.metric in DISPARITY_METRICS:
        if objective.threshold == 0.0:
            return 1.0 if measure <= 0.0 else 0.0
        return _clamp(1.0 - measure / objective.threshold)

    match objective.metric:
        case FairnessMetric.DISPARATE_IMPACT:
            return _clamp(measure)
        case FairnessMetric.INDIVIDUAL_FAIRNESS:
            return _clamp(1.0 - measure)

    raise UnknownMetric(objective.metric, [m.value for m in FairnessMetric])


def _welfare_score(objective: Welfare, state: State, config: ScoringConfig) -> float:
    utilities = require_field(state, StateKeys.UTILITIES, f"{objective.metric.value} welfare")
    n_individuals = len(utilities)
    if n_individuals == 0:
        return 0.0

    welfare = welfare_measure(objective, state)

    match objective.metric:
        case WelfareMetric.UTILITARIAN:
            # Assumes per-individual utility <= 1
            return _clamp(welfare / n_individuals)
        case WelfareMetric.RAWLSIAN:
            return _clamp(welfare)
        case WelfareMetric.EGALITARIAN:
            # welfare is -variance: 0 scores 1.0, -scale or worse scores 0.0
            return _clamp(1.0 + welfare / config.egalitarian_variance_scale)

    raise UnknownMetric(objective.metric, [m.value for m in WelfareMetric])


def _profit_score(objective: Profit, state: State) -> float:
    profit = require_number(state, StateKeys.PROFIT, "profit target")
    return _target_ratio(profit, objective.target)


def _efficiency_score(objective: Efficiency, state: State) -> float:
    context = f"{objective.metric.value} efficiency"

    match objective.metric:
        case EfficiencyMetric.COMPUTATION_TIME:
            time = require_number(state, StateKeys.COMPUTATION_TIME, context)
            if time <= 0.0:
                return 1.0
            # Lower time scores higher
            return _clamp(objective.target / time)
        case EfficiencyMetric.PARETO:
            return 1.0 if require_field(state, StateKeys.IS_PARETO_EFFICIENT, context) else 0.0
        case EfficiencyMetric.KALDOR_HICKS:
            net_gain = require_number(state, StateKeys.NET_GAIN, context)
            return _target_ratio(net_gain, objective.target)

    raise UnknownMetric(objective.metric, [m.value for m in EfficiencyMetric])


def objective_value(
    objective: Objective, state: State, config: ScoringConfig | None = None
) -> float:
    """
    Compute the raw, unnormalized quantity an objective asks to maximize.

    Minimization objectives are negated (computation time becomes ``-time``)
    and disparities are turned into ``1 - disparity``, so larger is always
    better. Unlike score(), the result is not clamped or rescaled.

    Raises:
        MissingField: If a state key required by the objective is absent
    """
    config = config or get_config()

    match objective_kind(objective):
        case ObjectiveKind.FAIRNESS:
            measure = fairness_measure(objective, state, config)
            if objective.metric == FairnessMetric.DISPARATE_IMPACT:
                return measure
            return 1.0 - measure
        case ObjectiveKind.WELFARE:
            return welfare_measure(objective, state)
        case ObjectiveKind.PROFIT:
            return require_number(state, StateKeys.PROFIT, "profit target")
        case ObjectiveKind.EFFICIENCY:
            context = f"{objective.metric.value} efficiency"
            if objective.metric == EfficiencyMetric.COMPUTATION_TIME:
                return -require_number(state, StateKeys.COMPUTATION_TIME, context)
            if objective.metric == EfficiencyMetric.PARETO:
                return 1.0 if require_field(state, StateKeys.IS_PARETO_EFFICIENT, context) else 0.0
            return require_number(state, StateKeys.NET_GAIN, context)
        case ObjectiveKind.SAFETY:
            return 1.0 if safety_holds(state) else 0.0

    raise UnknownObjective(objective)
