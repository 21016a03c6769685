"""Command line entry point for the racing car game.

Usage:
    racingcar --names "pobi,woni,jun" --rounds 5
    racingcar --names "pobi,crew" --rounds 10 --simulations 1000
    racingcar            # prompts for names and rounds
"""

import argparse
import logging
import sys
from collections.abc import Callable

from pydantic import ValidationError
from rich.logging import RichHandler

from racingcar.analysis import MonteCarloRunner
from racingcar.config import RaceSettings, load_settings, parse_names
from racingcar.exceptions import RacingCarError
from racingcar.models import Cars, CarStatus, TryCount
from racingcar.output import ConsoleOutput, Exporter
from racingcar.simulation import RaceRecord, RacingCarService

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, markup=False)],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Race named cars for a number of rounds")
    parser.add_argument(
        "--names",
        help="Car names separated by the name delimiter (default: prompt)",
    )
    parser.add_argument(
        "--rounds",
        "-r",
        type=int,
        help="Number of rounds to race (default: prompt)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for reproducible games",
    )
    parser.add_argument(
        "--threshold",
        type=int,
        help="Minimum draw that lets a car move (default: 4)",
    )
    parser.add_argument(
        "--simulations",
        "-n",
        type=int,
        help="Play this many games and print win statistics instead",
    )
    parser.add_argument(
        "--export",
        metavar="DIR",
        help="Export results to CSV/JSON in this directory",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def prompt_names(settings: RaceSettings, read: Callable[[str], str] | None = None) -> list[str]:
    """Ask until a valid set of names is entered."""
    read = read or input
    while True:
        raw = read(f"Enter car names separated by '{settings.name_delimiter}': ")
        names = parse_names(raw, settings.name_delimiter)
        try:
            Cars(names)
        except RacingCarError as e:
            print(f"[ERROR] {e}")
            continue
        return names


def prompt_try_count(read: Callable[[str], str] | None = None) -> TryCount:
    """Ask until a valid round count is entered."""
    read = read or input
    while True:
        raw = read("How many rounds? ")
        try:
            return TryCount(int(raw))
        except ValueError:
            print(f"[ERROR] Try count must be a number, got {raw!r}.")
        except RacingCarError as e:
            print(f"[ERROR] {e}")


def play(
    names: list[str],
    try_count: TryCount,
    settings: RaceSettings,
    export_dir: str | None = None,
) -> RaceRecord:
    """Play and print one game."""
    service = RacingCarService()
    service.create_cars(names)
    record = RaceRecord()

    def on_round(round_number: int, statuses: list[CarStatus]) -> None:
        record.record_round(round_number, statuses)
        ConsoleOutput.print_round(statuses)

    ConsoleOutput.print_race_header()
    service.run(try_count, settings.make_strategy(), on_round=on_round)
    record.finish(service)
    ConsoleOutput.print_winners(record.winners)

    if export_dir:
        files = Exporter(output_dir=export_dir).export_all(record)
        for fmt, path in files.items():
            print(f"  {fmt}: {path}")

    return record


def simulate(
    names: list[str],
    try_count: TryCount,
    settings: RaceSettings,
    num_simulations: int,
    export_dir: str | None = None,
) -> None:
    """Play many games and print aggregated statistics."""
    runner = MonteCarloRunner(names=names, try_count=try_count, settings=settings)
    results = runner.run(num_simulations=num_simulations)
    ConsoleOutput.print_monte_carlo_summary(results)

    if export_dir:
        path = Exporter(output_dir=export_dir).export_statistics_json(results)
        print(f"  statistics_json: {path}")


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    overrides = {}
    if args.seed is not None:
        overrides["seed"] = args.seed
    if args.threshold is not None:
        overrides["move_threshold"] = args.threshold
    try:
        settings = load_settings(**overrides)
    except ValidationError as e:
        print(f"[ERROR] Invalid settings: {e}", file=sys.stderr)
        return 2
    logger.debug("Settings: %s", settings)

    try:
        if args.names is not None:
            names = parse_names(args.names, settings.name_delimiter)
            Cars(names)
        else:
            names = prompt_names(settings)

        if args.rounds is not None:
            try_count = TryCount(args.rounds)
        else:
            try_count = prompt_try_count()

        if args.simulations is not None:
            simulate(names, try_count, settings, args.simulations, args.export)
        else:
            play(names, try_count, settings, args.export)
    except RacingCarError as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
