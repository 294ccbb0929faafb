"""
Objective registry: the closed set of value kinds Axiology can check and score.

Each objective is an immutable pydantic model. Parameters are validated at
construction time and any violation is reported as a single InvalidObjective
listing every broken constraint, so a partially valid objective never escapes.
Operations dispatch on the class-level ``kind`` discriminant.

Example::

    fairness = Fairness(metric="demographic_parity", threshold=0.05, weight=0.4)
    profit = Profit(target=1_000_000.0, constraints=(fairness, Safety(invariant="no harm")))
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from axiology.errors import InvalidObjective
from axiology.types import EfficiencyMetric, FairnessMetric, ObjectiveKind, WelfareMetric


def _format_violations(exc: ValidationError) -> list[str]:
    violations = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        message = error["msg"].removeprefix("Value error, ")
        violations.append(f"{location}: {message}" if location else message)
    return violations


class Objective(BaseModel):
    """Base type for all objectives; carries the aggregation weight."""

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    kind: ClassVar[ObjectiveKind]

    weight: float = Field(default=1.0, ge=0.0, description="Weight in multi-objective aggregation")

    def __init__(self, **data: Any) -> None:
        if type(self) is Objective:
            raise TypeError("Objective is abstract; construct one of its variants")
        try:
            super().__init__(**data)
        except ValidationError as exc:
            raise InvalidObjective(type(self).__name__, _format_violations(exc)) from exc

    def describe(self) -> str:
        """Short human-readable form."""
        return f"{type(self).__name__}()"


class Fairness(Objective):
    """
    Fairness constraint over model predictions.

    ``threshold`` is the maximum tolerable disparity. It is ignored by
    ``disparate_impact``, which always applies the configured ratio floor.
    ``protected_attributes`` documents which attributes are protected; the
    group labels themselves are read from the state.
    """

    kind: ClassVar[ObjectiveKind] = ObjectiveKind.FAIRNESS

    metric: FairnessMetric = FairnessMetric.DEMOGRAPHIC_PARITY
    protected_attributes: tuple[str, ...] = ()
    threshold: float = Field(default=0.05, ge=0.0, le=1.0)

    def describe(self) -> str:
        return f"Fairness({self.metric.value}, threshold={self.threshold})"


class Welfare(Objective):
    """Social welfare function over per-individual utilities."""

    kind: ClassVar[ObjectiveKind] = ObjectiveKind.WELFARE

    metric: WelfareMetric = WelfareMetric.UTILITARIAN

    def describe(self) -> str:
        return f"Welfare({self.metric.value})"


class Profit(Objective):
    """
    Profit target gated by nested objectives.

    ``constraints`` holds already constructed objectives of any kind,
    including other Profits. They are hard gates for satisfaction and do
    not contribute to the profit score.
    """

    kind: ClassVar[ObjectiveKind] = ObjectiveKind.PROFIT

    target: float = Field(default=0.0, ge=0.0)
    constraints: tuple[Objective, ...] = ()

    @field_validator("constraints", mode="before")
    @classmethod
    def _require_objectives(cls, value):
        if isinstance(value, (list, tuple)):
            for item in value:
                if not isinstance(item, Objective):
                    raise ValueError(
                        f"constraints must contain objectives, got {type(item).__name__}"
                    )
        return value

    @model_validator(mode="after")
    def _check_acyclic(self) -> Profit:
        _ensure_acyclic(self, frozenset())
        return self

    def describe(self) -> str:
        return f"Profit(target={self.target}, constraints={len(self.constraints)})"


class Efficiency(Objective):
    """Economic (pareto, kaldor_hicks) or computational efficiency."""

    kind: ClassVar[ObjectiveKind] = ObjectiveKind.EFFICIENCY

    metric: EfficiencyMetric = EfficiencyMetric.PARETO
    target: float = Field(default=1.0, ge=0.0)

    def describe(self) -> str:
        return f"Efficiency({self.metric.value}, target={self.target})"


class Safety(Objective):
    """Safety invariant, described by a non-empty label."""

    kind: ClassVar[ObjectiveKind] = ObjectiveKind.SAFETY

    invariant: str
    critical: bool = True

    @field_validator("invariant")
    @classmethod
    def _require_invariant(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Safety invariant cannot be empty")
        return value

    def describe(self) -> str:
        return f'Safety("{self.invariant}")'


def _ensure_acyclic(objective: Objective, ancestors: frozenset[int]) -> None:
    """Reject constraint trees in which an objective is nested inside itself."""
    if id(objective) in ancestors:
        raise ValueError(f"constraints form a cycle through {objective.describe()}")
    if isinstance(objective, Profit):
        path = ancestors | {id(objective)}
        for constraint in objective.constraints:
            _ensure_acyclic(constraint, path)
