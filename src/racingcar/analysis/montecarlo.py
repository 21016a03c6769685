"""Monte Carlo simulation runner and statistics."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np

from racingcar.config import RaceSettings
from racingcar.exceptions import InvalidSimulationCountError
from racingcar.models import Cars, CarStatus, TryCount
from racingcar.simulation.service import RacingCarService

logger = logging.getLogger(__name__)


@dataclass
class CarStatistics:
    """Aggregated statistics for a car across simulations."""

    name: str
    wins: int = 0
    sole_wins: int = 0
    avg_position: float = 0.0
    best_position: int = 0
    worst_position: int = 0
    positions: list[int] = field(default_factory=list)

    @property
    def win_rate(self) -> float:
        """Win percentage, counting shared wins."""
        return self.wins / len(self.positions) * 100 if self.positions else 0

    @property
    def sole_win_rate(self) -> float:
        """Percentage of games won outright."""
        return self.sole_wins / len(self.positions) * 100 if self.positions else 0


@dataclass
class SimulationResults:
    """Results from Monte Carlo simulation."""

    num_simulations: int
    try_count: int
    car_stats: dict[str, CarStatistics]
    final_statuses: list[list[CarStatus]]
    winners: list[list[str]]

    def get_win_probabilities(self) -> dict[str, float]:
        """Get win probability for each car, highest first."""
        return {
            name: stats.win_rate
            for name, stats in sorted(
                self.car_stats.items(),
                key=lambda x: x[1].wins,
                reverse=True,
            )
        }


class MonteCarloRunner:
    """Runs many independent games over the same field of cars."""

    def __init__(
        self,
        names: Sequence[str],
        try_count: TryCount,
        settings: RaceSettings | None = None,
        seed: int | None = None,
    ):
        """Initialize Monte Carlo runner.

        Args:
            names: Car names in entry order
            try_count: Rounds per game
            settings: Move threshold and dice configuration
            seed: Random seed for reproducibility

        Raises:
            InvalidNameError: If any name breaks the naming rules
            DuplicateNameError: If any name appears more than once
        """
        # Fail fast on bad names rather than on the first game
        Cars(names)
        self.names = list(names)
        self.try_count = try_count
        self.settings = settings or RaceSettings()
        if seed is None:
            seed = self.settings.seed
        self.base_seed = seed if seed is not None else int(np.random.default_rng().integers(0, 2**31))

    def _run_single_simulation(self, seed: int) -> tuple[list[CarStatus], list[CarStatus]]:
        service = RacingCarService()
        service.create_cars(self.names)
        strategy = self.settings.make_strategy(rng=np.random.default_rng(seed))
        service.run(self.try_count, strategy)
        return service.get_car_statuses(), service.get_winners()

    def run(self, num_simulations: int = 1000) -> SimulationResults:
        """Run Monte Carlo simulations sequentially.

        Args:
            num_simulations: Number of games to play

        Returns:
            SimulationResults with aggregated statistics

        Raises:
            InvalidSimulationCountError: If num_simulations is below 1
        """
        if num_simulations < 1:
            raise InvalidSimulationCountError()

        all_statuses: list[list[CarStatus]] = []
        all_winners: list[list[str]] = []

        for i in range(num_simulations):
            statuses, winners = self._run_single_simulation(self.base_seed + i)
            all_statuses.append(statuses)
            all_winners.append([w.name for w in winners])

        logger.debug(
            "Finished %d simulations of %d rounds (seed %d)",
            num_simulations, self.try_count.value, self.base_seed,
        )

        return SimulationResults(
            num_simulations=num_simulations,
            try_count=self.try_count.value,
            car_stats=self._aggregate_statistics(all_statuses, all_winners),
            final_statuses=all_statuses,
            winners=all_winners,
        )

    def _aggregate_statistics(
        self,
        statuses: list[list[CarStatus]],
        winners: list[list[str]],
    ) -> dict[str, CarStatistics]:
        """Aggregate statistics from all simulations."""
        stats = {name: CarStatistics(name=name) for name in self.names}

        for sim_statuses, sim_winners in zip(statuses, winners):
            for status in sim_statuses:
                stats[status.name].positions.append(status.position)
            for name in sim_winners:
                stats[name].wins += 1
            if len(sim_winners) == 1:
                stats[sim_winners[0]].sole_wins += 1

        for car_stat in stats.values():
            if car_stat.positions:
                car_stat.avg_position = float(np.mean(car_stat.positions))
                car_stat.best_position = max(car_stat.positions)
                car_stat.worst_position = min(car_stat.positions)

        return stats
