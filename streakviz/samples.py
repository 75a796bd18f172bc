"""Preset inputs and random input generation."""

from __future__ import annotations

import random
from dataclasses import dataclass

from . import constants


@dataclass(frozen=True)
class DataSample:
    label: str
    data: tuple[int, ...]


PRESET_EXAMPLES: tuple[DataSample, ...] = (
    DataSample(label="Example 1: [100,4,200,1,3,2]", data=(100, 4, 200, 1, 3, 2)),
    DataSample(
        label="Example 2: [0,3,7,2,5,8,4,6,0,1]",
        data=(0, 3, 7, 2, 5, 8, 4, 6, 0, 1),
    ),
    DataSample(label="Example 3: [1,2,0,1]", data=(1, 2, 0, 1)),
)


def generate_random_data(rng: random.Random | None = None) -> list[int]:
    """Random input that tends to contain consecutive runs.

    Length is 5-20 and values lie in [-50, 50]. One to three runs of 2-6
    consecutive values are planted, the rest is filled with uniform values and
    the whole array is shuffled. Pass a seeded ``random.Random`` for
    reproducible output.
    """
    rng = rng or random.Random()
    length = rng.randint(constants.RANDOM_MIN_LENGTH, constants.RANDOM_MAX_LENGTH)
    numbers: list[int] = []

    for _ in range(rng.randint(1, 3)):
        start = rng.randint(constants.RANDOM_MIN_VALUE, constants.RANDOM_MAX_VALUE - 6)
        run_length = rng.randint(2, 6)
        for offset in range(run_length):
            if len(numbers) >= length:
                break
            numbers.append(start + offset)

    while len(numbers) < length:
        numbers.append(
            rng.randint(constants.RANDOM_MIN_VALUE, constants.RANDOM_MAX_VALUE)
        )

    rng.shuffle(numbers)
    return numbers
