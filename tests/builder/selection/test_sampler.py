"""
Unit tests for the sampler.

Uniformity checks run enough trials that a biased shuffle falls well
outside the tolerance band while a correct one stays inside it.
"""

import random
from collections import Counter

import pytest

from trivia_toolkit.builder.selection import sample, shuffle_in_place, stratified_sample


class TestShuffleInPlace:
    """Tests for the Fisher-Yates shuffle."""

    def test_shuffle_is_permutation(self, rng):
        items = list(range(20))

        shuffle_in_place(items, rng)

        assert sorted(items) == list(range(20))

    def test_shuffle_is_reproducible_for_seed(self):
        a, b = list(range(10)), list(range(10))

        shuffle_in_place(a, random.Random(5))
        shuffle_in_place(b, random.Random(5))

        assert a == b

    def test_every_permutation_of_three_equally_likely(self):
        rng = random.Random(42)
        trials = 6000
        counts = Counter()
        for _ in range(trials):
            items = ["a", "b", "c"]
            shuffle_in_place(items, rng)
            counts[tuple(items)] += 1

        assert len(counts) == 6
        expected = trials / 6
        for count in counts.values():
            assert abs(count - expected) < expected * 0.15


class TestSample:
    """Tests for plain sampling."""

    def test_sample_does_not_modify_pool(self, rng):
        pool = list(range(10))

        sample(pool, 4, rng)

        assert pool == list(range(10))

    def test_sample_when_quantity_exceeds_pool_then_whole_pool(self, rng):
        assert sorted(sample([1, 2, 3], 10, rng)) == [1, 2, 3]

    def test_sample_returns_distinct_items(self, rng):
        picked = sample(list(range(50)), 20, rng)
        assert len(set(picked)) == 20

    def test_sample_when_negative_then_raises(self, rng):
        with pytest.raises(ValueError):
            sample([1], -1, rng)

    def test_each_element_selected_with_equal_frequency(self):
        rng = random.Random(2024)
        pool = list(range(10))
        trials = 5000
        counts = Counter()
        for _ in range(trials):
            counts.update(sample(pool, 3, rng))

        expected = trials * 3 / len(pool)
        for element in pool:
            assert abs(counts[element] - expected) < expected * 0.1


class TestStratifiedSample:
    """Tests for stratified sampling."""

    def test_stratified_respects_quotas(self, rng):
        partitions = {"mc": list(range(10)), "tf": list(range(100, 110))}

        picked = stratified_sample(partitions, {"mc": 3, "tf": 2}, rng)

        assert len([p for p in picked if p < 100]) == 3
        assert len([p for p in picked if p >= 100]) == 2

    def test_stratified_when_quota_exceeds_partition_then_whole_partition(self, rng):
        picked = stratified_sample({"mc": [1, 2]}, {"mc": 5}, rng)
        assert sorted(picked) == [1, 2]

    def test_stratified_when_negative_quota_then_raises(self, rng):
        with pytest.raises(ValueError, match="non-negative"):
            stratified_sample({"mc": [1]}, {"mc": -1}, rng)

    def test_stratified_interleaves_partitions(self):
        rng = random.Random(7)
        partitions = {"mc": ["m1", "m2"], "tf": ["t1", "t2"]}
        first_positions = Counter()
        for _ in range(2000):
            picked = stratified_sample(partitions, {"mc": 2, "tf": 2}, rng)
            first_positions[picked[0][0]] += 1

        assert 800 < first_positions["m"] < 1200
