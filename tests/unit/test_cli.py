"""Tests for the streakviz command line."""

import json

from streakviz import constants
from streakviz.cli import _play, main
from streakviz.generator import generate_trace
from streakviz.player import Player, PlayerConfig, PlayState
from streakviz.settings import SettingsStore


class TestMain:
    def test_default_prints_preset_trace(self, capsys):
        assert main(["--no-code"]) == 0

        out = capsys.readouterr().out
        assert "[create_hashset_0]" in out
        assert "[return_result_35]" in out
        assert "  longest streak  : 4" in out
        assert "  sequence        : [1, 2, 3, 4]" in out

    def test_explicit_input(self, capsys):
        assert main(["1 2 0 1", "--no-code"]) == 0

        assert "  longest streak  : 3" in capsys.readouterr().out

    def test_invalid_input_exits_with_error(self, capsys):
        assert main(["1,abc"]) == 2

        captured = capsys.readouterr()
        assert captured.err.startswith("error: ")
        assert captured.out == ""

    def test_json_output(self, capsys):
        assert main(["--preset", "3", "--json"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert payload["nums"] == [1, 2, 0, 1]
        assert payload["longestStreak"] == 3

    def test_single_step(self, capsys):
        assert main(["[5]", "--step", "1", "--language", "python"]) == 0

        out = capsys.readouterr().out
        assert "[add_to_hashset_1]" in out
        assert "[create_hashset_0]" not in out
        assert ">   3 |" in out

    def test_step_out_of_range_is_clamped(self, capsys):
        assert main(["[5]", "--step", "99", "--no-code"]) == 0

        assert "[return_result_8]" in capsys.readouterr().out

    def test_random_with_seed_is_reproducible(self, capsys):
        main(["--random", "--seed", "3", "--json"])
        first = capsys.readouterr().out
        main(["--random", "--seed", "3", "--json"])

        assert capsys.readouterr().out == first

    def test_stats(self, capsys):
        assert main(["[1,1,2]", "--no-code", "--stats"]) == 0

        out = capsys.readouterr().out
        assert "Trace Statistics" in out
        assert "1 duplicates skipped" in out

    def test_check_mapping(self, capsys):
        assert main(["--check-mapping"]) == 0

        assert "Line mapping OK" in capsys.readouterr().out


class TestSettingsFlag:
    def test_choices_are_remembered(self, tmp_path, capsys):
        path = tmp_path / "settings.json"

        main(
            ["[5]", "--json", "--settings", str(path), "-l", "golang", "--speed", "2"]
        )

        settings = SettingsStore(path).load_settings()
        assert settings.language == "golang"
        assert settings.play_speed == 2.0

    def test_stored_language_is_used(self, tmp_path, capsys):
        path = tmp_path / "settings.json"
        SettingsStore(path).save_settings(language="golang")

        main(["[5]", "--step", "8", "--settings", str(path)])

        assert ">  25 |     return longestStreak" in capsys.readouterr().out

    def test_no_settings_file_without_flag(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("HOME", str(tmp_path))

        main(["[5]", "--json"])

        assert not (tmp_path / constants.DEFAULT_SETTINGS_FILENAME).exists()


class TestPlay:
    def test_plays_every_step_then_pauses(self, capsys):
        trace = generate_trace([5])
        player = Player(trace, PlayerConfig(speed=2.0))
        waits = []

        _play(player, "javascript", show_code=False, sleep=waits.append)

        out = capsys.readouterr().out
        assert out.count("[") >= len(trace)
        assert "[return_result_8]" in out
        assert player.play_state == PlayState.PAUSED
        assert waits == [0.5] * len(trace)

    def test_interrupt_pauses(self, capsys):
        player = Player(generate_trace([5]))

        def interrupt(_seconds):
            raise KeyboardInterrupt

        _play(player, "javascript", show_code=False, sleep=interrupt)

        assert player.cursor == 0
        assert player.play_state == PlayState.PAUSED
