"""
Tests for the ordering utilities.

This module tests:
- less and has_measure
- identity and rotate
- RandomRotate determinism, offset range and stream consumption
"""

import random
from collections import Counter

import pytest

from openrg.config import config
from openrg.separation.ordering import (
    RandomRotate,
    identity,
    has_measure,
    less,
    make_random_rotate,
    rotate,
)


# =============================================================================
# Test comparators
# =============================================================================

class TestComparators:
    """Tests for less and has_measure."""

    def test_less_is_strict(self):
        """Test that less is a strict ordering."""
        assert less(1, 2)
        assert not less(2, 2)
        assert not less(3, 2)

    def test_less_on_tuples(self):
        """Test that less works on any comparable measure."""
        assert less((1, 5), (2, 0))
        assert not less((2, 0), (2, 0))

    def test_has_measure(self):
        """Test the optional-measure presence test."""
        assert not has_measure(None)
        assert has_measure(0.5)
        assert has_measure(0)
        assert has_measure(0.0)


# =============================================================================
# Test rotate
# =============================================================================

class TestRotate:
    """Tests for identity and rotate."""

    def test_identity_returns_same_object(self):
        """Test that identity does not copy."""
        cands = [1, 2, 3]
        assert identity(cands) is cands

    def test_rotate_left(self):
        """Test a basic left rotation."""
        assert rotate([0, 1, 2, 3, 4], 2) == [2, 3, 4, 0, 1]

    def test_rotate_zero_and_full(self):
        """Test that offsets 0 and len leave the order unchanged."""
        assert rotate([0, 1, 2], 0) == [0, 1, 2]
        assert rotate([0, 1, 2], 3) == [0, 1, 2]

    def test_rotate_modulo(self):
        """Test that large offsets wrap around."""
        assert rotate([0, 1, 2], 4) == [1, 2, 0]

    def test_rotate_empty(self):
        """Test rotating an empty sequence."""
        assert rotate([], 0) == []
        assert rotate([], 5) == []

    def test_rotate_generator(self):
        """Test that lazy iterables are materialised."""
        assert rotate((i for i in range(4)), 1) == [1, 2, 3, 0]

    def test_rotate_does_not_mutate(self):
        """Test that the input list is left untouched."""
        cands = [0, 1, 2]
        rotate(cands, 1)
        assert cands == [0, 1, 2]


# =============================================================================
# Test RandomRotate
# =============================================================================

class TestRandomRotate:
    """Tests for RandomRotate."""

    def test_fixed_seed_is_reproducible(self):
        """Test that a fixed seed gives the same scan orders."""
        first = RandomRotate(random.Random(123))
        second = RandomRotate(random.Random(123))
        cands = ['a', 'b', 'c', 'd', 'e']

        for _ in range(20):
            assert first(cands) == second(cands)
            assert first.last_offset == second.last_offset

    def test_offsets_follow_generator_stream(self):
        """Test that each call consumes the owned generator in order."""
        reference = random.Random(3)
        expected = [reference.randint(0, 5) for _ in range(10)]

        shuffle = RandomRotate(random.Random(3))
        offsets = []
        for _ in range(10):
            shuffle(list(range(5)))
            offsets.append(shuffle.last_offset)

        assert offsets == expected

    def test_result_matches_offset(self):
        """Test that the output is the rotation by the drawn offset."""
        shuffle = RandomRotate(random.Random(99))
        cands = list(range(5))
        for _ in range(10):
            result = shuffle(cands)
            assert result == rotate(cands, shuffle.last_offset)

    def test_offset_range_inclusive(self):
        """Test that offsets cover [0, len] including len."""
        shuffle = RandomRotate(random.Random(0))
        seen = set()
        for _ in range(500):
            shuffle([0, 1, 2, 3, 4])
            seen.add(shuffle.last_offset)
        assert seen == {0, 1, 2, 3, 4, 5}

    def test_empty_sequence(self):
        """Test that an empty sequence gives offset 0 and no candidates."""
        shuffle = RandomRotate(random.Random(1))
        assert shuffle([]) == []
        assert shuffle.last_offset == 0

    @pytest.mark.slow
    def test_offsets_uniform_over_seeds(self):
        """Test that the drawn offset is uniform across seeds."""
        counts = Counter()
        trials = 6000
        for seed in range(trials):
            shuffle = RandomRotate(random.Random(seed))
            shuffle([0, 1, 2, 3, 4])
            counts[shuffle.last_offset] += 1

        for offset in range(6):
            assert abs(counts[offset] / trials - 1 / 6) < 0.03

    def test_every_candidate_can_start(self):
        """Test that every candidate appears as the starting point."""
        starts = set()
        shuffle = RandomRotate(random.Random(5))
        for _ in range(200):
            starts.add(shuffle(['a', 'b', 'c', 'd', 'e'])[0])
        assert starts == {'a', 'b', 'c', 'd', 'e'}

    def test_make_random_rotate_uses_config_seed(self, monkeypatch):
        """Test that the default generator is seeded from the config."""
        monkeypatch.setattr(config, "seed", 11)
        first = make_random_rotate()
        second = make_random_rotate()
        cands = list(range(8))
        assert [first(cands) for _ in range(5)] == [second(cands) for _ in range(5)]

    def test_make_random_rotate_keeps_given_rng(self):
        """Test that a supplied generator is owned as-is."""
        rng = random.Random(2)
        assert make_random_rotate(rng).rng is rng
