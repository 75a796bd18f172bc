"""Tests for preset inputs and random input generation."""

import random

import pytest

from streakviz import constants
from streakviz.generator import generate_trace
from streakviz.samples import PRESET_EXAMPLES, generate_random_data
from streakviz.validation import validate_input


class TestPresets:
    def test_three_presets(self):
        assert [p.data for p in PRESET_EXAMPLES] == [
            (100, 4, 200, 1, 3, 2),
            (0, 3, 7, 2, 5, 8, 4, 6, 0, 1),
            (1, 2, 0, 1),
        ]

    def test_labels_show_the_data(self):
        for preset in PRESET_EXAMPLES:
            assert ",".join(str(n) for n in preset.data) in preset.label

    @pytest.mark.parametrize("index, expected", [(0, 4), (1, 9), (2, 3)])
    def test_preset_results(self, index, expected):
        assert generate_trace(PRESET_EXAMPLES[index].data).longest_streak == expected


class TestRandomData:
    @pytest.mark.parametrize("seed", range(25))
    def test_within_bounds(self, seed):
        data = generate_random_data(random.Random(seed))

        assert constants.RANDOM_MIN_LENGTH <= len(data) <= constants.RANDOM_MAX_LENGTH
        assert all(
            constants.RANDOM_MIN_VALUE <= n <= constants.RANDOM_MAX_VALUE for n in data
        )

    @pytest.mark.parametrize("seed", range(25))
    def test_passes_validation(self, seed):
        data = generate_random_data(random.Random(seed))

        result = validate_input(",".join(str(n) for n in data))

        assert result.valid
        assert result.data == data

    @pytest.mark.parametrize("seed", range(25))
    def test_contains_a_run(self, seed):
        data = generate_random_data(random.Random(seed))

        assert generate_trace(data).longest_streak >= 2

    def test_seeded_generation_is_reproducible(self):
        assert generate_random_data(random.Random(7)) == generate_random_data(
            random.Random(7)
        )

    def test_unseeded_generation_works(self):
        assert len(generate_random_data()) >= constants.RANDOM_MIN_LENGTH
