"""Replay controller: a cursor over an immutable trace."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from . import constants
from .step_types import StepRecord
from .trace_types import AlgorithmTrace

logger = logging.getLogger(__name__)


class PlayState(Enum):
    STOPPED = "stopped"
    PLAYING = "playing"
    PAUSED = "paused"


@dataclass(frozen=True)
class PlayerConfig:
    """Groups playback configuration."""

    speed: float = constants.DEFAULT_PLAY_SPEED
    base_interval: float = 1.0  # seconds between steps at speed 1


class Player:
    """Step through a trace: next/previous/seek, play/pause, speed.

    The player never runs a timer itself; whoever drives auto-play calls
    ``tick()`` every ``interval`` seconds.
    """

    def __init__(
        self, trace: AlgorithmTrace | None = None, config: PlayerConfig = PlayerConfig()
    ):
        if config.speed <= 0:
            raise ValueError(f"Play speed must be positive, got {config.speed}")
        self._config = config
        self._speed = config.speed
        self._trace = trace if trace is not None else AlgorithmTrace()
        self._cursor = 0
        self._state = PlayState.STOPPED

    @property
    def trace(self) -> AlgorithmTrace:
        return self._trace

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def play_state(self) -> PlayState:
        return self._state

    @property
    def speed(self) -> float:
        return self._speed

    @property
    def interval(self) -> float:
        """Seconds between auto-play steps at the current speed."""
        return self._config.base_interval / self._speed

    @property
    def last_index(self) -> int:
        return max(len(self._trace.steps) - 1, 0)

    @property
    def is_at_end(self) -> bool:
        return self._cursor >= self.last_index

    @property
    def current(self) -> StepRecord | None:
        if not self._trace.steps:
            return None
        return self._trace.steps[self._cursor]

    def load(self, trace: AlgorithmTrace) -> None:
        """Replace the trace; playback restarts from the first step."""
        self._trace = trace
        self._cursor = 0
        self._state = PlayState.STOPPED
        logger.debug("Loaded trace with %d steps", len(trace.steps))

    def next(self) -> None:
        if self.is_at_end:
            if self._state == PlayState.PLAYING:
                self._state = PlayState.PAUSED
            return
        self._cursor += 1

    def previous(self) -> None:
        self._cursor = max(self._cursor - 1, 0)

    def seek(self, index: int) -> None:
        self._cursor = min(max(index, 0), self.last_index)

    def play_pause(self) -> None:
        if self._state == PlayState.PLAYING:
            self._state = PlayState.PAUSED
            return
        if self.is_at_end:
            self._cursor = 0
        self._state = PlayState.PLAYING

    def reset(self) -> None:
        self._cursor = 0
        self._state = PlayState.STOPPED

    def set_speed(self, speed: float) -> None:
        if speed <= 0:
            raise ValueError(f"Play speed must be positive, got {speed}")
        self._speed = speed

    def tick(self) -> bool:
        """Advance one step if playing. Returns whether playback continues."""
        if self._state != PlayState.PLAYING:
            return False
        self.next()
        return self._state == PlayState.PLAYING
