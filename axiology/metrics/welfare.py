"""
Social welfare functions.

Each function aggregates individual utilities into one measure of
collective well-being:

- utilitarian: total utility, the greatest good for the greatest number
- rawlsian: utility of the worst-off individual (maximin)
- egalitarian: negative spread of utilities, 0 at perfect equality
"""

from collections.abc import Sequence

import numpy as np


def utilitarian_welfare(utilities: Sequence[float]) -> float:
    """Sum of individual utilities (0.0 for an empty population)."""
    values = np.asarray(utilities, dtype=float)
    if values.size == 0:
        return 0.0
    return float(values.sum())


def rawlsian_welfare(utilities: Sequence[float]) -> float:
    """
    Minimum individual utility.

    Raises:
        ValueError: If utilities is empty
    """
    values = np.asarray(utilities, dtype=float)
    if values.size == 0:
        raise ValueError("Cannot compute Rawlsian welfare for an empty utility vector")
    return float(values.min())


def egalitarian_welfare(utilities: Sequence[float]) -> float:
    """
    Negative population variance of utilities.

    Always <= 0; a single individual (or none) has no inequality.
    """
    values = np.asarray(utilities, dtype=float)
    if values.size < 2:
        return 0.0
    return -float(np.var(values))
