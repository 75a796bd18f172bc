"""Command-line front end: print, auto-play or export a trace."""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from typing import Callable, Sequence

from . import constants
from .api import render_step_text, trace_to_json
from .generator import generate_trace
from .line_mapping import validate_line_mapping
from .parser import check_sources
from .player import Player, PlayerConfig
from .samples import PRESET_EXAMPLES, generate_random_data
from .settings import SettingsStore, UserSettings
from .validation import validate_input

logger = logging.getLogger(__name__)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="streakviz",
        description="Step-by-step trace of the longest consecutive sequence algorithm",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Integer array, e.g. '[100,4,200,1,3,2]' or '1 2 3'",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--preset",
        "-p",
        type=int,
        choices=range(1, len(PRESET_EXAMPLES) + 1),
        help="Use a built-in example instead of INPUT",
    )
    source.add_argument(
        "--random", "-r", action="store_true", help="Use a random input array"
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for --random")
    parser.add_argument(
        "--language",
        "-l",
        choices=constants.SUPPORTED_LANGUAGES,
        default=None,
        help=f"Code language to highlight (default: {constants.DEFAULT_LANGUAGE})",
    )
    parser.add_argument(
        "--step", "-s", type=int, default=None, help="Print only this step index"
    )
    parser.add_argument(
        "--play", action="store_true", help="Auto-play the trace step by step"
    )
    parser.add_argument(
        "--speed",
        type=float,
        choices=constants.PLAY_SPEEDS,
        default=None,
        help=f"Auto-play speed (default: {constants.DEFAULT_PLAY_SPEED})",
    )
    parser.add_argument("--json", action="store_true", help="Print the trace as JSON")
    parser.add_argument(
        "--no-code", action="store_true", help="Omit the source listing"
    )
    parser.add_argument(
        "--stats", action="store_true", help="Print trace statistics at the end"
    )
    parser.add_argument(
        "--check-mapping",
        action="store_true",
        help="Validate the line mapping table and reference sources, then exit",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="Settings cache file; remembers language and speed between runs",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable info logging"
    )
    return parser


def _check_mapping() -> int:
    result = validate_line_mapping()
    failures = list(result.errors)
    for language, check in check_sources().items():
        if not check.ok:
            failures.append(
                f"{language} source has syntax errors at lines {check.error_lines}"
            )
    if failures:
        for failure in failures:
            print(f"  ✗ {failure}")
        return 1
    print("Line mapping OK")
    return 0


def _resolve_settings(args: argparse.Namespace) -> UserSettings:
    """Command-line choices win over stored settings; stored ones over defaults."""
    store = SettingsStore(args.settings) if args.settings else None
    stored = store.load_settings() if store is not None else UserSettings()
    settings = UserSettings(
        language=args.language or stored.language,
        play_speed=args.speed or stored.play_speed,
    )
    if store is not None:
        store.save_settings(**settings.model_dump())
    return settings


def _input_text(args: argparse.Namespace) -> str:
    if args.preset is not None:
        return ",".join(str(n) for n in PRESET_EXAMPLES[args.preset - 1].data)
    if args.random:
        rng = random.Random(args.seed)
        return ",".join(str(n) for n in generate_random_data(rng))
    if args.input is not None:
        return args.input
    return ",".join(str(n) for n in PRESET_EXAMPLES[0].data)


def _print_header(title: str) -> None:
    print(f"═══ {title} ═══")


def _play(
    player: Player,
    language: str,
    show_code: bool,
    sleep: Callable[[float], None] = time.sleep,
) -> None:
    """Drive auto-play: render, wait one interval, tick until paused."""
    player.play_pause()
    previous = None
    try:
        while True:
            step = player.current
            print(render_step_text(step, language, previous, show_code))
            print()
            previous = step
            sleep(player.interval)
            if not player.tick():
                break
    except KeyboardInterrupt:
        player.play_pause()
        logger.info("Playback interrupted at step %d", player.cursor)


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_arg_parser().parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    if args.check_mapping:
        return _check_mapping()

    settings = _resolve_settings(args)

    result = validate_input(_input_text(args))
    if not result.valid:
        print(f"error: {result.error}", file=sys.stderr)
        return 2

    trace = generate_trace(result.data)

    if args.json:
        print(trace_to_json(trace))
        return 0

    player = Player(trace, PlayerConfig(speed=settings.play_speed))
    show_code = not args.no_code

    if args.step is not None:
        player.seek(args.step)
        previous = trace.steps[player.cursor - 1] if player.cursor > 0 else None
        print(render_step_text(player.current, settings.language, previous, show_code))
    elif args.play:
        _play(player, settings.language, show_code)
    else:
        previous = None
        for step in trace.steps:
            print(render_step_text(step, settings.language, previous, show_code))
            print()
            previous = step

    _print_header("Result")
    print(f"  longest streak  : {trace.longest_streak}")
    print(f"  sequence        : {list(trace.longest_sequence)}")
    if args.stats:
        print(trace.stats.report())
    return 0


if __name__ == "__main__":
    sys.exit(main())
