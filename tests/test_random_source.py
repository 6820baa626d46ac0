"""Tests for the random source helpers."""

import random

import pytest

from roomgen.errors import ConfigurationError
from roomgen.random_source import rand_range, resolve_rng


class TestRandRange:
    def test_draws_from_half_open_range(self):
        rng = random.Random(0)
        draws = {rand_range(rng, 5, 3) for _ in range(200)}
        assert draws == {5, 6, 7}

    def test_single_value_span(self):
        assert rand_range(random.Random(0), 9, 1) == 9

    @pytest.mark.parametrize("span", [0, -4])
    def test_empty_range_raises(self, span):
        with pytest.raises(ConfigurationError):
            rand_range(random.Random(0), 3, span)

    def test_same_seed_same_draws(self):
        first, second = random.Random(21), random.Random(21)
        assert [rand_range(first, 0, 100) for _ in range(10)] == [
            rand_range(second, 0, 100) for _ in range(10)
        ]


class TestResolveRng:
    def test_defaults_to_module_random(self):
        assert resolve_rng(None) is random

    def test_passes_through_given_source(self):
        rng = random.Random(1)
        assert resolve_rng(rng) is rng
