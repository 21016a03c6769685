"""Car model and status snapshot."""

from dataclasses import dataclass

from racingcar.models.name import Name
from racingcar.models.position import Position


@dataclass(frozen=True)
class CarStatus:
    """Read-only snapshot of a car for reporting."""

    name: str
    position: int


class Car:
    """A named car that advances one step each time it moves."""

    def __init__(self, name: str, position: int = 0):
        """Create a car.

        Args:
            name: Raw display name (validated by Name)
            position: Starting position, 0 for a new game

        Raises:
            InvalidNameError: If the name is blank or too long
            InvalidPositionError: If the position is negative
        """
        self._name = Name(name)
        self._position = Position(position)

    @property
    def name(self) -> Name:
        return self._name

    @property
    def position(self) -> Position:
        return self._position

    def move(self) -> None:
        """Advance one step. Whether to move at all is the caller's decision."""
        self._position.forward()

    def get_status(self) -> CarStatus:
        return CarStatus(name=self._name.value, position=self._position.value)

    def is_same_position(self, position: Position) -> bool:
        """Compare against another position by value."""
        return self._position == position

    def __repr__(self) -> str:
        return f"Car(name={self._name.value!r}, position={self._position.value})"
