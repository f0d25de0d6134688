"""Tests for the wait-time statistics."""

import numpy as np
import pytest

from bank_queue.analysis import (
    MODE_FREQUENCY_LIMIT,
    max_wait,
    mean,
    median,
    mode,
    std_dev,
    summarize,
)


class TestEmptyLedger:

    def test_all_statistics_are_zero(self):
        stats = summarize([])
        assert stats.count == 0
        assert stats.mean == 0.0
        assert stats.median == 0.0
        assert stats.mode == 0
        assert stats.std_dev == 0.0
        assert stats.max_wait == 0


class TestStatistics:

    def test_mean_and_std_dev(self):
        data = sorted([2, 4, 4, 4, 5, 5, 7, 9])
        assert mean(data) == 5.0
        assert std_dev(data) == pytest.approx(2.0)

    def test_median_even_and_odd(self):
        assert median([1, 2, 3, 4]) == 2.5
        assert median([1, 3, 8]) == 3.0
        assert median([6]) == 6.0

    def test_mode_tie_goes_to_smallest(self):
        assert mode([1, 1, 2, 2]) == 1
        assert mode([0, 3, 3, 5, 5, 5]) == 5

    def test_mode_beyond_frequency_limit(self):
        big = MODE_FREQUENCY_LIMIT * 2
        assert mode([5, big, big]) == big
        assert mode([big, big, big + 1, big + 1]) == big

    def test_mode_rejects_negative(self):
        with pytest.raises(ValueError):
            mode([-1, 2])

    def test_max_wait(self):
        assert max_wait([0, 1, 7]) == 7

    def test_order_does_not_matter_once_sorted(self, rng):
        data = rng.integers(0, 20, size=101)
        shuffled = rng.permutation(data)
        assert median(np.sort(data)) == median(np.sort(shuffled))
        assert max_wait(np.sort(data)) == max_wait(np.sort(shuffled))
        assert mode(data) == mode(shuffled)

    def test_summarize_matches_numpy(self, rng):
        data = np.sort(rng.integers(0, 30, size=500))
        stats = summarize(data)
        assert stats.mean == pytest.approx(np.mean(data))
        assert stats.median == pytest.approx(np.median(data))
        assert stats.std_dev == pytest.approx(np.std(data))
        assert stats.max_wait == data.max()
        assert stats.to_dict()['count'] == 500
