"""Descriptive statistics over score lists."""

from typing import List, Sequence, TypeVar

import numpy as np

T = TypeVar("T")


class Statistics:
    """Statistical helpers backed by numpy."""

    @staticmethod
    def mean(values: Sequence[float]) -> float:
        """Arithmetic mean, 0.0 for an empty sequence."""
        if len(values) == 0:
            return 0.0
        return float(np.mean(np.asarray(values, dtype=float)))

    @staticmethod
    def population_std(values: Sequence[float]) -> float:
        """Population standard deviation (divides by n, not n-1)."""
        if len(values) == 0:
            return 0.0
        return float(np.std(np.asarray(values, dtype=float), ddof=0))

    @staticmethod
    def weighted_mean(values: Sequence[float], weights: Sequence[float]) -> float:
        """Weighted arithmetic mean.

        Raises:
            ZeroDivisionError: If the weights sum to zero.
        """
        total_weight = float(np.sum(np.asarray(weights, dtype=float)))
        if total_weight == 0:
            raise ZeroDivisionError("weights sum to zero")
        weighted = np.dot(np.asarray(values, dtype=float), np.asarray(weights, dtype=float))
        return float(weighted) / total_weight

    @staticmethod
    def thirds(values: List[T]) -> List[List[T]]:
        """Split a list into early/middle/late thirds (remainder goes late)."""
        third = len(values) // 3
        return [values[:third], values[third : third * 2], values[third * 2 :]]
