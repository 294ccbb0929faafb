"""Error taxonomy for objective construction and scoring."""

from __future__ import annotations


class AxiologyError(Exception):
    """Base class for all Axiology errors."""


class InvalidObjective(AxiologyError, ValueError):
    """An objective was constructed with parameters that violate its constraints."""

    def __init__(self, objective: str, violations: list[str]):
        self.objective = objective
        self.violations = list(violations)
        super().__init__(f"Invalid {objective}: " + "; ".join(self.violations))


class MissingField(AxiologyError, KeyError):
    """A state or proof record lacks a key required by the selected metric."""

    def __init__(self, field: str, context: str):
        self.field = field
        self.context = context
        super().__init__(field)

    def __str__(self) -> str:
        return f"State must contain '{self.field}' for {self.context}"


class UnknownMetric(AxiologyError, ValueError):
    """A metric discriminant fell outside its closed enumeration."""

    def __init__(self, metric: object, allowed: list[str]):
        self.metric = metric
        self.allowed = list(allowed)
        super().__init__(f"Unknown metric {metric!r}. Must be one of {self.allowed}")


class UnknownObjective(AxiologyError, TypeError):
    """An operation received something that is not an Axiology objective."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Unknown objective type: {type(value).__name__}")
