"""Racing car game: named cars race for a number of rounds."""

from racingcar.exceptions import (
    CarsNotCreatedError,
    DuplicateNameError,
    ErrorMessage,
    InvalidNameError,
    InvalidPositionError,
    InvalidSimulationCountError,
    InvalidTryCountError,
    RacingCarError,
    StrategyExhaustedError,
)
from racingcar.models import Car, Cars, CarStatus, Name, Position, TryCount
from racingcar.simulation import (
    FixedMoveStrategy,
    MoveStrategy,
    RaceRecord,
    RacingCarService,
    RandomMoveStrategy,
    ScriptedMoveStrategy,
)

__version__ = "0.1.0"

__all__ = [
    "Car",
    "CarStatus",
    "Cars",
    "CarsNotCreatedError",
    "DuplicateNameError",
    "ErrorMessage",
    "FixedMoveStrategy",
    "InvalidNameError",
    "InvalidPositionError",
    "InvalidSimulationCountError",
    "InvalidTryCountError",
    "MoveStrategy",
    "Name",
    "Position",
    "RaceRecord",
    "RacingCarError",
    "RacingCarService",
    "RandomMoveStrategy",
    "ScriptedMoveStrategy",
    "StrategyExhaustedError",
    "TryCount",
]
