"""Tests for objective construction and validation."""

import pytest
from pydantic import ValidationError

from axiology.errors import InvalidObjective
from axiology.objectives import Efficiency, Fairness, Objective, Profit, Safety, Welfare
from axiology.types import EfficiencyMetric, FairnessMetric, ObjectiveKind, WelfareMetric


class TestDefaults:
    """Tests for named-parameter constructors with defaults."""

    def test_fairness_defaults(self) -> None:
        fairness = Fairness()

        assert fairness.metric is FairnessMetric.DEMOGRAPHIC_PARITY
        assert fairness.threshold == 0.05
        assert fairness.weight == 1.0
        assert fairness.protected_attributes == ()
        assert fairness.kind is ObjectiveKind.FAIRNESS

    def test_metric_accepts_string_value(self) -> None:
        """String discriminants are coerced to their enum member."""
        assert Welfare(metric="rawlsian").metric is WelfareMetric.RAWLSIAN
        assert Efficiency(metric="computation_time").metric is EfficiencyMetric.COMPUTATION_TIME

    def test_protected_attributes_list_becomes_tuple(self) -> None:
        fairness = Fairness(protected_attributes=["gender", "race"])

        assert fairness.protected_attributes == ("gender", "race")

    def test_profit_accepts_nested_objectives(self) -> None:
        """Constraints keep their concrete variant, including nested profits."""
        inner = Profit(target=10.0, constraints=[Safety(invariant="no leakage")])
        outer = Profit(target=100.0, constraints=[Fairness(), inner])

        assert isinstance(outer.constraints[0], Fairness)
        assert outer.constraints[1] is inner
        assert isinstance(outer.constraints[1].constraints[0], Safety)

    def test_shared_constraint_is_not_a_cycle(self) -> None:
        """The same instance in sibling positions is a forest, not a cycle."""
        safety = Safety(invariant="no harm")
        profit = Profit(constraints=[safety, safety])

        assert len(profit.constraints) == 2


class TestValidation:
    """Tests for construction-time rejection of invalid parameters."""

    @pytest.mark.parametrize(
        "factory",
        [
            pytest.param(lambda: Fairness(weight=-0.1), id="fairness_weight"),
            pytest.param(lambda: Welfare(weight=-1.0), id="welfare_weight"),
            pytest.param(lambda: Profit(weight=-1.0), id="profit_weight"),
            pytest.param(lambda: Efficiency(weight=-1.0), id="efficiency_weight"),
            pytest.param(lambda: Safety(invariant="x", weight=-1.0), id="safety_weight"),
        ],
    )
    def test_negative_weight_rejected(self, factory) -> None:
        with pytest.raises(InvalidObjective, match="weight"):
            factory()

    @pytest.mark.parametrize("threshold", [-0.01, 1.01])
    def test_fairness_threshold_outside_unit_interval(self, threshold: float) -> None:
        with pytest.raises(InvalidObjective, match="threshold"):
            Fairness(threshold=threshold)

    def test_negative_targets_rejected(self) -> None:
        with pytest.raises(InvalidObjective, match="target"):
            Profit(target=-5.0)
        with pytest.raises(InvalidObjective, match="target"):
            Efficiency(metric="computation_time", target=-0.1)

    def test_unknown_metric_rejected_at_construction(self) -> None:
        with pytest.raises(InvalidObjective, match="metric"):
            Fairness(metric="statistical_parity")
        with pytest.raises(InvalidObjective, match="metric"):
            Welfare(metric="nash")
        with pytest.raises(InvalidObjective, match="metric"):
            Efficiency(metric="throughput")

    @pytest.mark.parametrize("invariant", ["", "   "])
    def test_empty_safety_invariant_rejected(self, invariant: str) -> None:
        with pytest.raises(InvalidObjective, match="invariant cannot be empty"):
            Safety(invariant=invariant)

    def test_missing_safety_invariant_rejected(self) -> None:
        with pytest.raises(InvalidObjective, match="invariant"):
            Safety()

    def test_non_finite_weight_rejected(self) -> None:
        with pytest.raises(InvalidObjective):
            Welfare(weight=float("nan"))
        with pytest.raises(InvalidObjective):
            Profit(target=float("inf"))

    def test_unknown_parameter_rejected(self) -> None:
        with pytest.raises(InvalidObjective, match="tolerance"):
            Welfare(tolerance=0.1)

    def test_constraints_must_be_objectives(self) -> None:
        with pytest.raises(InvalidObjective, match="constraints must contain objectives"):
            Profit(constraints=[{"metric": "demographic_parity"}])

    def test_all_violations_reported(self) -> None:
        """One error lists every broken constraint."""
        with pytest.raises(InvalidObjective) as exc_info:
            Fairness(threshold=2.0, weight=-1.0)

        assert exc_info.value.objective == "Fairness"
        assert len(exc_info.value.violations) == 2

    def test_invalid_objective_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            Welfare(weight=-1.0)

    def test_base_objective_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Objective()

    def test_cyclic_constraints_rejected(self) -> None:
        """A profit smuggled into its own constraint tree is rejected on validation."""
        profit = Profit(target=1.0)
        # Bypass immutability to build a self-referential tree
        object.__setattr__(profit, "constraints", (profit,))

        with pytest.raises(InvalidObjective, match="cycle"):
            Profit(constraints=[profit])


class TestImmutability:
    """Objectives are value objects."""

    def test_assignment_rejected(self) -> None:
        fairness = Fairness()

        with pytest.raises(ValidationError):
            fairness.threshold = 0.5

        assert fairness.threshold == 0.05

    def test_equal_parameters_compare_equal(self) -> None:
        assert Welfare(metric="rawlsian", weight=0.5) == Welfare(metric="rawlsian", weight=0.5)

    def test_describe(self) -> None:
        assert Fairness(threshold=0.1).describe() == "Fairness(demographic_parity, threshold=0.1)"
        assert Safety(invariant="No harmful actions").describe() == 'Safety("No harmful actions")'
