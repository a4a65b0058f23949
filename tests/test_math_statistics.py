"""Tests for math/statistics.py."""

import pytest

from manuscript_insight.math import Statistics


class TestMean:
    def test_empty_is_zero(self):
        assert Statistics.mean([]) == 0.0

    def test_mean(self):
        assert Statistics.mean([1, 2, 3, 4]) == pytest.approx(2.5)


class TestPopulationStd:
    def test_empty_is_zero(self):
        assert Statistics.population_std([]) == 0.0

    def test_divides_by_n(self):
        # mean 5, squared deviations sum to 32 over 8 values
        values = [2, 4, 4, 4, 5, 5, 7, 9]
        assert Statistics.population_std(values) == pytest.approx(2.0)


class TestWeightedMean:
    def test_weighted(self):
        assert Statistics.weighted_mean([100, 50], [1.0, 3.0]) == pytest.approx(62.5)

    def test_zero_weights_raise(self):
        with pytest.raises(ZeroDivisionError):
            Statistics.weighted_mean([10, 20], [0, 0])


class TestThirds:
    def test_remainder_goes_late(self):
        early, middle, late = Statistics.thirds([1, 2, 3, 4, 5, 6, 7])
        assert early == [1, 2]
        assert middle == [3, 4]
        assert late == [5, 6, 7]

    def test_short_list_is_all_late(self):
        assert Statistics.thirds([1, 2]) == [[], [], [1, 2]]
