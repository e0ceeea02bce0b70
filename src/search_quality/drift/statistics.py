"""Window statistics over score sequences."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def population_variance(values: Sequence[float]) -> float:
    """Mean of squared deviations (ddof=0)."""
    if len(values) == 0:
        return 0.0
    return float(np.var(values))


def linear_slope(values: Sequence[float]) -> float:
    """Ordinary least-squares slope of value against index 0..n-1."""
    n = len(values)
    if n < 2:
        return 0.0

    y = np.asarray(values, dtype=float)
    x = np.arange(n, dtype=float)
    sum_x = n * (n - 1) / 2
    sum_y = float(y.sum())
    sum_xy = float(np.dot(x, y))
    sum_x2 = float(np.dot(x, x))

    return (n * sum_xy - sum_x * sum_y) / (n * sum_x2 - sum_x * sum_x)
