#!/usr/bin/env python3
"""Quick race example using the library API directly.

Plays one seeded game round by round, then a short Monte Carlo run over the
same field.

Usage:
    python examples/quick_race.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from racingcar.analysis import MonteCarloRunner
from racingcar.config import RaceSettings
from racingcar.models import TryCount
from racingcar.output import ConsoleOutput
from racingcar.simulation import RaceRecord, RacingCarService


def main():
    names = ["pobi", "woni", "jun", "crong"]
    try_count = TryCount(5)
    settings = RaceSettings(seed=42)

    print("Single race")
    print("=" * 40)

    service = RacingCarService()
    service.create_cars(names)
    record = RaceRecord()

    strategy = settings.make_strategy()
    for round_number in try_count.rounds():
        service.move_cars(strategy)
        statuses = service.get_car_statuses()
        record.record_round(round_number, statuses)
        ConsoleOutput.print_round(statuses)

    record.finish(service)
    ConsoleOutput.print_winners(record.winners)

    runner = MonteCarloRunner(names=names, try_count=try_count, settings=settings)
    results = runner.run(num_simulations=500)
    ConsoleOutput.print_monte_carlo_summary(results)

    return 0


if __name__ == "__main__":
    sys.exit(main())
