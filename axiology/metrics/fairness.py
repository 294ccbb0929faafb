"""Fairness metric providers over prediction, label and group arrays."""

from collections.abc import Sequence

import numpy as np

DEFAULT_SIMILARITY_THRESHOLD = 0.8


def _check_lengths(*arrays: np.ndarray) -> None:
    lengths = {len(array) for array in arrays}
    if len(lengths) > 1:
        raise ValueError(f"Lengths must match, got {sorted(lengths)}")


def _positive_rates(predictions: np.ndarray, groups: np.ndarray) -> np.ndarray:
    """Mean prediction per group, in order of first appearance."""
    _, first_index = np.unique(groups, return_index=True)
    ordered = groups[np.sort(first_index)]
    return np.array([predictions[groups == group].mean() for group in ordered])


def _true_positive_rate(predictions: np.ndarray, labels: np.ndarray) -> float:
    positives = labels == 1
    if not positives.any():
        return 0.0
    return float(np.mean(predictions[positives] == 1))


def _false_positive_rate(predictions: np.ndarray, labels: np.ndarray) -> float:
    negatives = labels == 0
    if not negatives.any():
        return 0.0
    return float(np.mean(predictions[negatives] == 1))


def demographic_parity(predictions: Sequence, protected: Sequence) -> float:
    """
    Compute demographic parity disparity.

    Demographic parity holds when every group receives positive predictions
    at the same rate.

    Args:
        predictions: Binary predictions (0 or 1) or probabilities
        protected: Group label per prediction

    Returns:
        Largest gap in positive rate between groups (0 = parity, 1 = maximum)
    """
    preds = np.asarray(predictions, dtype=float)
    groups = np.asarray(protected)
    _check_lengths(preds, groups)

    if len(np.unique(groups)) < 2:
        return 0.0

    rates = _positive_rates(preds, groups)
    return float(rates.max() - rates.min())


def equalized_odds(predictions: Sequence, labels: Sequence, protected: Sequence) -> float:
    """
    Compute equalized odds disparity.

    Equalized odds requires equal true positive and false positive rates
    across groups.

    Args:
        predictions: Binary predictions
        labels: True labels
        protected: Group label per prediction

    Returns:
        The larger of the TPR gap and the FPR gap between groups
    """
    preds = np.asarray(predictions)
    truth = np.asarray(labels)
    groups = np.asarray(protected)
    _check_lengths(preds, truth, groups)

    unique_groups = np.unique(groups)
    if len(unique_groups) < 2:
        return 0.0

    tprs = []
    fprs = []
    for group in unique_groups:
        mask = groups == group
        tprs.append(_true_positive_rate(preds[mask], truth[mask]))
        fprs.append(_false_positive_rate(preds[mask], truth[mask]))

    return max(max(tprs) - min(tprs), max(fprs) - min(fprs))


def equal_opportunity(predictions: Sequence, labels: Sequence, protected: Sequence) -> float:
    """Compute the true positive rate gap between groups."""
    preds = np.asarray(predictions)
    truth = np.asarray(labels)
    groups = np.asarray(protected)
    _check_lengths(preds, truth, groups)

    unique_groups = np.unique(groups)
    if len(unique_groups) < 2:
        return 0.0

    tprs = [_true_positive_rate(preds[groups == g], truth[groups == g]) for g in unique_groups]
    return max(tprs) - min(tprs)


def disparate_impact(predictions: Sequence, protected: Sequence) -> float:
    """
    Compute the disparate impact ratio.

    Ratio of the lowest group positive rate to the highest. The 80% rule
    asks for a ratio of at least 0.8.

    Returns:
        Ratio in [0, 1] (1.0 = no adverse impact)
    """
    preds = np.asarray(predictions, dtype=float)
    groups = np.asarray(protected)
    _check_lengths(preds, groups)

    if len(np.unique(groups)) < 2:
        return 1.0

    rates = _positive_rates(preds, groups)
    max_rate = rates.max()
    if max_rate <= 0.0:
        return 1.0
    return float(rates.min() / max_rate)


def individual_fairness(
    predictions: Sequence,
    similarity_matrix: Sequence[Sequence[float]] | np.ndarray,
    similarity_threshold: float = DEFAULT_SIMILARITY_THRESHOLD,
) -> float:
    """
    Compute individual fairness disparity.

    Similar individuals should receive similar predictions.

    Args:
        predictions: Predictions per individual
        similarity_matrix: Pairwise similarity, shape (n, n)
        similarity_threshold: Pairs strictly above this count as similar

    Returns:
        Mean absolute prediction difference over similar pairs (0.0 if none)
    """
    preds = np.asarray(predictions, dtype=float)
    similarity = np.asarray(similarity_matrix, dtype=float)
    n = len(preds)
    if similarity.shape != (n, n):
        raise ValueError(f"Similarity matrix must be {n}x{n}, got {similarity.shape}")

    # Upper triangle only: each unordered pair once, no self-pairs
    rows, cols = np.triu_indices(n, k=1)
    similar = similarity[rows, cols] > similarity_threshold
    if not similar.any():
        return 0.0

    diffs = np.abs(preds[rows[similar]] - preds[cols[similar]])
    return float(diffs.mean())
