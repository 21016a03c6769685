"""Round count model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from racingcar.exceptions import ErrorMessage, InvalidTryCountError


class TryCount(BaseModel):
    """Number of rounds to simulate. Zero means no rounds run."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(..., strict=True, description="Number of rounds")

    def __init__(self, value: int, **data):
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def check_value(cls, value: int) -> int:
        if value < 0:
            raise InvalidTryCountError(ErrorMessage.ILLEGAL_TRY_COUNT)
        return value

    def rounds(self) -> range:
        """1-based round numbers, in order."""
        return range(1, self.value + 1)
