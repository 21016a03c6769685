"""Race orchestration."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from racingcar.exceptions import CarsNotCreatedError
from racingcar.models import Cars, CarStatus, TryCount
from racingcar.simulation.strategy import MoveStrategy

logger = logging.getLogger(__name__)

RoundCallback = Callable[[int, list[CarStatus]], None]


@dataclass
class RaceRecord:
    """Round-by-round history of one game, captured by the caller."""

    round_numbers: list[int] = field(default_factory=list)
    rounds: list[list[CarStatus]] = field(default_factory=list)
    final_statuses: list[CarStatus] = field(default_factory=list)
    winners: list[CarStatus] = field(default_factory=list)

    def record_round(self, round_number: int, statuses: list[CarStatus]) -> None:
        """Round callback for RacingCarService.run."""
        self.round_numbers.append(round_number)
        self.rounds.append(statuses)

    def finish(self, service: "RacingCarService") -> None:
        self.final_statuses = service.get_car_statuses()
        self.winners = service.get_winners()


class RacingCarService:
    """Registers the cars of one game and drives its rounds."""

    def __init__(self, cars: Cars | None = None):
        """Initialize the service.

        Args:
            cars: Cars to race with; if omitted, call create_cars first
        """
        self._cars = cars

    @property
    def cars(self) -> Cars:
        if self._cars is None:
            raise CarsNotCreatedError()
        return self._cars

    def create_cars(self, names: Sequence[str]) -> Cars:
        """Register the cars for this game.

        The collection is only replaced once every name has been validated,
        so a failed call leaves the service as it was.

        Args:
            names: Raw car names in entry order

        Returns:
            The registered cars

        Raises:
            InvalidNameError: If any name breaks the naming rules
            DuplicateNameError: If any name appears more than once
        """
        cars = Cars(names)
        self._cars = cars
        logger.debug("Registered %d cars: %s", len(cars), ", ".join(names))
        return cars

    def move_cars(self, strategy: MoveStrategy) -> None:
        """Run a single round."""
        self.cars.move_all(strategy)

    def run(
        self,
        try_count: TryCount,
        strategy: MoveStrategy,
        on_round: RoundCallback | None = None,
    ) -> None:
        """Run every round of the game.

        Args:
            try_count: Number of rounds
            strategy: Move decision source, queried once per car per round
            on_round: Optional hook called after each round with the
                round number and the statuses at that point
        """
        cars = self.cars
        for round_number in try_count.rounds():
            cars.move_all(strategy)
            logger.debug("Round %d/%d done", round_number, try_count.value)
            if on_round is not None:
                on_round(round_number, cars.statuses())

    def get_car_statuses(self) -> list[CarStatus]:
        return self.cars.statuses()

    def get_winners(self) -> list[CarStatus]:
        winners = [car.get_status() for car in self.cars.winners()]
        logger.debug("Winners: %s", ", ".join(w.name for w in winners))
        return winners
