"""Domain models for the racing car game."""

from .car import Car, CarStatus
from .cars import Cars
from .name import MAX_NAME_LENGTH, MIN_NAME_LENGTH, Name
from .position import Position
from .try_count import TryCount

__all__ = [
    "Car",
    "CarStatus",
    "Cars",
    "MAX_NAME_LENGTH",
    "MIN_NAME_LENGTH",
    "Name",
    "Position",
    "TryCount",
]
