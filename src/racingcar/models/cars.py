"""Ordered collection of uniquely named cars."""

from collections import Counter
from collections.abc import Iterator, Sequence
from typing import TYPE_CHECKING

from racingcar.exceptions import DuplicateNameError
from racingcar.models.car import Car, CarStatus
from racingcar.models.name import Name

if TYPE_CHECKING:
    from racingcar.simulation.strategy import MoveStrategy


class Cars:
    """The cars taking part in one game, in entry order."""

    def __init__(self, names: Sequence[str]):
        """Validate names and build one car per name.

        Args:
            names: Raw car names in entry order

        Raises:
            InvalidNameError: If any name breaks the naming rules
            DuplicateNameError: If any two names are equal once trimmed
        """
        validated = [Name(name) for name in names]
        # Names differing only in surrounding whitespace count as the same car
        counts = Counter(name.value.strip() for name in validated)
        duplicates = [value for value, count in counts.items() if count > 1]
        if duplicates:
            raise DuplicateNameError(duplicates)

        self._cars: tuple[Car, ...] = tuple(Car(name.value) for name in validated)

    def move_all(self, strategy: "MoveStrategy") -> None:
        """Offer every car one move, asking the strategy afresh for each."""
        for car in self._cars:
            if strategy.is_movable():
                car.move()

    def winners(self) -> list[Car]:
        """Cars sharing the furthest position, in entry order."""
        if not self._cars:
            return []

        furthest = max(car.position for car in self._cars)
        return [car for car in self._cars if car.is_same_position(furthest)]

    def statuses(self) -> list[CarStatus]:
        return [car.get_status() for car in self._cars]

    def __iter__(self) -> Iterator[Car]:
        return iter(self._cars)

    def __len__(self) -> int:
        return len(self._cars)
