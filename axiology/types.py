"""
Cross-module type definitions for Axiology.

This module centralizes enums, type aliases, state keys and TypedDicts
used across multiple Axiology modules. It has zero axiology imports
to avoid circular dependency risk.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, NotRequired, TypeAlias, TypedDict

State: TypeAlias = Mapping[str, Any]  # field name -> value, owned by the caller
CandidateSet: TypeAlias = Sequence[State]


class ObjectiveKind(str, Enum):
    """Objective variant discriminator."""

    FAIRNESS = "fairness"
    WELFARE = "welfare"
    PROFIT = "profit"
    EFFICIENCY = "efficiency"
    SAFETY = "safety"


class FairnessMetric(str, Enum):
    """Group and individual fairness measures."""

    DEMOGRAPHIC_PARITY = "demographic_parity"
    EQUALIZED_ODDS = "equalized_odds"
    EQUAL_OPPORTUNITY = "equal_opportunity"
    DISPARATE_IMPACT = "disparate_impact"
    INDIVIDUAL_FAIRNESS = "individual_fairness"


class WelfareMetric(str, Enum):
    """Social welfare functions."""

    UTILITARIAN = "utilitarian"
    RAWLSIAN = "rawlsian"
    EGALITARIAN = "egalitarian"


class EfficiencyMetric(str, Enum):
    """Economic and computational efficiency measures."""

    PARETO = "pareto"
    KALDOR_HICKS = "kaldor_hicks"
    COMPUTATION_TIME = "computation_time"


# Disparity-style metrics: lower is better, rescaled against the objective threshold
DISPARITY_METRICS = frozenset(
    {
        FairnessMetric.DEMOGRAPHIC_PARITY,
        FairnessMetric.EQUALIZED_ODDS,
        FairnessMetric.EQUAL_OPPORTUNITY,
    }
)
LABELLED_METRICS = frozenset({FairnessMetric.EQUALIZED_ODDS, FairnessMetric.EQUAL_OPPORTUNITY})


class StateKeys:
    """Field names read from a state mapping."""

    PREDICTIONS = "predictions"
    PROTECTED = "protected"
    PROTECTED_ATTRIBUTES = "protected_attributes"  # fallback for PROTECTED
    LABELS = "labels"
    SIMILARITY_MATRIX = "similarity_matrix"
    UTILITIES = "utilities"
    MIN_WELFARE = "min_welfare"
    PROFIT = "profit"
    COMPUTATION_TIME = "computation_time"
    IS_PARETO_EFFICIENT = "is_pareto_efficient"
    NET_GAIN = "net_gain"
    IS_SAFE = "is_safe"
    INVARIANT_HOLDS = "invariant_holds"


class ProofArtifact(TypedDict):
    """Externally produced verification record consumed by verify_value()."""

    verified: bool
    prover: NotRequired[str]
    details: NotRequired[str]
