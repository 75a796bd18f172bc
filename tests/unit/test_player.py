"""Tests for the Player replay controller."""

import pytest

from streakviz.generator import generate_trace
from streakviz.player import Player, PlayerConfig, PlayState
from streakviz.trace_types import AlgorithmTrace

# [5] replays in 9 steps: create, add, init longest, for, check start,
# init current, loop exit, update longest, return.
SINGLE = generate_trace([5])


@pytest.fixture
def player():
    return Player(SINGLE)


class TestInitialState:
    def test_starts_stopped_at_first_step(self, player):
        assert player.cursor == 0
        assert player.play_state == PlayState.STOPPED
        assert player.current is SINGLE.steps[0]
        assert player.last_index == 8

    def test_default_speed(self, player):
        assert player.speed == 1.0
        assert player.interval == 1.0

    def test_empty_player_has_no_current_step(self):
        empty = Player()

        assert empty.current is None
        assert empty.last_index == 0
        assert empty.is_at_end

    def test_non_positive_config_speed_raises(self):
        with pytest.raises(ValueError, match="positive"):
            Player(SINGLE, PlayerConfig(speed=0))


class TestNavigation:
    def test_next_advances(self, player):
        player.next()
        player.next()

        assert player.cursor == 2
        assert player.current.base_id == "init_longest_streak"

    def test_next_stops_at_last_step(self, player):
        for _ in range(20):
            player.next()

        assert player.cursor == 8
        assert player.is_at_end
        assert player.current.base_id == "return_result"

    def test_previous_stops_at_first_step(self, player):
        player.next()
        player.previous()
        player.previous()

        assert player.cursor == 0

    @pytest.mark.parametrize("index, expected", [(-5, 0), (0, 0), (4, 4), (999, 8)])
    def test_seek_clamps(self, player, index, expected):
        player.seek(index)

        assert player.cursor == expected

    def test_reset(self, player):
        player.seek(6)
        player.play_pause()

        player.reset()

        assert player.cursor == 0
        assert player.play_state == PlayState.STOPPED

    def test_load_restarts_on_new_trace(self, player):
        player.seek(7)
        player.play_pause()
        other = generate_trace([1, 2])

        player.load(other)

        assert player.trace is other
        assert player.cursor == 0
        assert player.play_state == PlayState.STOPPED
        assert player.last_index == len(other) - 1


class TestPlayback:
    def test_play_pause_toggles(self, player):
        player.play_pause()
        assert player.play_state == PlayState.PLAYING

        player.play_pause()
        assert player.play_state == PlayState.PAUSED

    def test_play_from_end_restarts(self, player):
        player.seek(8)

        player.play_pause()

        assert player.cursor == 0
        assert player.play_state == PlayState.PLAYING

    def test_tick_advances_while_playing(self, player):
        player.play_pause()

        assert player.tick()
        assert player.cursor == 1

    def test_tick_is_noop_when_not_playing(self, player):
        assert not player.tick()
        assert player.cursor == 0

    def test_reaching_end_pauses(self, player):
        player.play_pause()
        ticks = 0
        while player.tick():
            ticks += 1

        assert player.cursor == 8
        assert player.play_state == PlayState.PAUSED
        assert ticks == 8

    def test_next_at_end_while_playing_pauses(self, player):
        player.seek(8)
        player.play_pause()
        player.seek(8)

        player.next()

        assert player.play_state == PlayState.PAUSED


class TestSpeed:
    def test_set_speed_scales_interval(self, player):
        player.set_speed(2.0)

        assert player.speed == 2.0
        assert player.interval == 0.5

    def test_base_interval_from_config(self):
        player = Player(SINGLE, PlayerConfig(speed=0.5, base_interval=0.2))

        assert player.interval == pytest.approx(0.4)

    @pytest.mark.parametrize("speed", [0, -1.5])
    def test_non_positive_speed_raises(self, player, speed):
        with pytest.raises(ValueError, match="positive"):
            player.set_speed(speed)
        assert player.speed == 1.0

    def test_empty_trace_object(self):
        player = Player(AlgorithmTrace())

        player.next()
        player.play_pause()

        assert player.cursor == 0
        assert not player.tick()
