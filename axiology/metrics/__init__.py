"""
Metric providers: pure functions from raw state arrays to a disparity,
ratio or welfare number.

The dispatchers select a provider by metric discriminant. Providers
reject malformed input (length mismatches) with ValueError.
"""

from collections.abc import Sequence

from axiology.errors import UnknownMetric
from axiology.metrics.fairness import (
    DEFAULT_SIMILARITY_THRESHOLD,
    demographic_parity,
    disparate_impact,
    equal_opportunity,
    equalized_odds,
    individual_fairness,
)
from axiology.metrics.welfare import egalitarian_welfare, rawlsian_welfare, utilitarian_welfare
from axiology.types import FairnessMetric, WelfareMetric


def disparity(
    metric: FairnessMetric,
    predictions: Sequence,
    protected: Sequence | None = None,
    labels: Sequence | None = None,
    similarity_matrix: Sequence | None = None,
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> float:
    """
    Compute the fairness measure selected by ``metric``.

    Returns a disparity (lower is better) for every metric except
    ``disparate_impact``, which returns a ratio (higher is better).

    Raises:
        ValueError: If an input the metric needs is None or lengths mismatch
        UnknownMetric: If metric is not a FairnessMetric
    """
    try:
        metric = FairnessMetric(metric)
    except ValueError:
        raise UnknownMetric(metric, [m.value for m in FairnessMetric]) from None

    if metric == FairnessMetric.INDIVIDUAL_FAIRNESS:
        if similarity_matrix is None:
            raise ValueError("individual_fairness requires a similarity matrix")
        return individual_fairness(predictions, similarity_matrix, similarity_threshold)

    if protected is None:
        raise ValueError(f"{metric.value} requires protected group labels")

    match metric:
        case FairnessMetric.DEMOGRAPHIC_PARITY:
            return demographic_parity(predictions, protected)
        case FairnessMetric.DISPARATE_IMPACT:
            return disparate_impact(predictions, protected)
        case FairnessMetric.EQUALIZED_ODDS | FairnessMetric.EQUAL_OPPORTUNITY:
            if labels is None:
                raise ValueError(f"{metric.value} requires true labels")
            if metric == FairnessMetric.EQUALIZED_ODDS:
                return equalized_odds(predictions, labels, protected)
            return equal_opportunity(predictions, labels, protected)

    raise UnknownMetric(metric, [m.value for m in FairnessMetric])


def welfare_aggregate(metric: WelfareMetric, utilities: Sequence[float]) -> float:
    """Compute the social welfare selected by ``metric``."""
    try:
        metric = WelfareMetric(metric)
    except ValueError:
        raise UnknownMetric(metric, [m.value for m in WelfareMetric]) from None

    match metric:
        case WelfareMetric.UTILITARIAN:
            return utilitarian_welfare(utilities)
        case WelfareMetric.RAWLSIAN:
            return rawlsian_welfare(utilities)
        case WelfareMetric.EGALITARIAN:
            return egalitarian_welfare(utilities)

    raise UnknownMetric(metric, [m.value for m in WelfareMetric])


__all__ = [
    "DEFAULT_SIMILARITY_THRESHOLD",
    "demographic_parity",
    "disparate_impact",
    "disparity",
    "egalitarian_welfare",
    "equal_opportunity",
    "equalized_odds",
    "individual_fairness",
    "rawlsian_welfare",
    "utilitarian_welfare",
    "welfare_aggregate",
]
