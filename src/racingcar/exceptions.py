"""Errors raised by the racing car game."""

from enum import Enum


class ErrorMessage(str, Enum):
    """User-facing messages for each validation rule."""

    BLANK_CAR_NAME = "Car name must not be blank."
    OUT_OF_CAR_NAME_LENGTH = "Car name must be between 1 and 5 characters."
    DUPLICATE_CAR_NAME = "Car names must not be duplicated."
    ILLEGAL_POSITION = "Car position must not be negative."
    ILLEGAL_TRY_COUNT = "Try count must not be negative."
    ILLEGAL_SIMULATION_COUNT = "Simulation count must be at least 1."
    CARS_NOT_CREATED = "Cars must be created before the race starts."
    STRATEGY_EXHAUSTED = "Move strategy has no decisions left."


class RacingCarError(Exception):
    """Base class for racing car game errors.

    Not a ValueError subclass: pydantic re-raises it from validators unwrapped.
    """

    def __init__(self, message: ErrorMessage):
        super().__init__(message.value)
        self.error_message = message


class InvalidNameError(RacingCarError):
    """Car name is blank or has an invalid length."""


class DuplicateNameError(RacingCarError):
    """Two or more cars share the same name."""

    def __init__(self, duplicates: list[str]):
        super().__init__(ErrorMessage.DUPLICATE_CAR_NAME)
        self.duplicates = duplicates


class InvalidPositionError(RacingCarError):
    """Starting position is negative."""


class InvalidTryCountError(RacingCarError):
    """Round count is negative."""


class InvalidSimulationCountError(RacingCarError):
    """Monte Carlo run asked for fewer than one game."""

    def __init__(self) -> None:
        super().__init__(ErrorMessage.ILLEGAL_SIMULATION_COUNT)


class CarsNotCreatedError(RacingCarError):
    """Race operation attempted before any cars were registered."""

    def __init__(self) -> None:
        super().__init__(ErrorMessage.CARS_NOT_CREATED)


class StrategyExhaustedError(RacingCarError):
    """A scripted move strategy was asked for more decisions than it holds."""

    def __init__(self) -> None:
        super().__init__(ErrorMessage.STRATEGY_EXHAUSTED)
