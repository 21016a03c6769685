"""Car position (odometer) model."""

from functools import total_ordering

from pydantic import BaseModel, Field, field_validator

from racingcar.exceptions import ErrorMessage, InvalidPositionError


@total_ordering
class Position(BaseModel):
    """Cumulative forward progress of a car.

    Equality and ordering compare the numeric value, never object identity,
    so two cars that travelled equally far are at the same position.
    """

    value: int = Field(default=0, strict=True, description="Steps travelled so far")

    def __init__(self, value: int = 0, **data):
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def check_value(cls, value: int) -> int:
        if value < 0:
            raise InvalidPositionError(ErrorMessage.ILLEGAL_POSITION)
        return value

    def forward(self) -> None:
        """Advance by exactly one step."""
        self.value += 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.value == other.value

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.value < other.value
