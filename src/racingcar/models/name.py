"""Car name model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from racingcar.exceptions import ErrorMessage, InvalidNameError

MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 5


class Name(BaseModel):
    """Display name of a car (1-5 characters, not blank)."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(..., description="Name as entered by the player")

    def __init__(self, value: str, **data):
        super().__init__(value=value, **data)

    @field_validator("value")
    @classmethod
    def check_value(cls, value: str) -> str:
        if not value.strip():
            raise InvalidNameError(ErrorMessage.BLANK_CAR_NAME)
        if not MIN_NAME_LENGTH <= len(value) <= MAX_NAME_LENGTH:
            raise InvalidNameError(ErrorMessage.OUT_OF_CAR_NAME_LENGTH)
        return value

    def __str__(self) -> str:
        return self.value
