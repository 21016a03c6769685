"""Game settings loaded from RACINGCAR_* environment variables."""

import numpy as np
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from racingcar.simulation.strategy import (
    DEFAULT_DICE_FACES,
    DEFAULT_MOVE_THRESHOLD,
    RandomMoveStrategy,
)


class RaceSettings(BaseSettings):
    """Tunable parameters of a game."""

    model_config = SettingsConfigDict(
        env_prefix="RACINGCAR_",
        case_sensitive=False,
    )

    move_threshold: int = Field(
        default=DEFAULT_MOVE_THRESHOLD,
        ge=0,
        description="Minimum draw that lets a car move",
    )
    dice_faces: int = Field(
        default=DEFAULT_DICE_FACES,
        ge=1,
        description="Draws are taken uniformly from [0, dice_faces)",
    )
    name_delimiter: str = Field(
        default=",",
        min_length=1,
        description="Separator between car names in raw input",
    )
    seed: int | None = Field(
        default=None,
        description="Random seed for reproducible games",
    )

    @model_validator(mode="after")
    def check_threshold(self) -> "RaceSettings":
        if self.move_threshold > self.dice_faces:
            raise ValueError("move_threshold must not exceed dice_faces")
        return self

    def make_rng(self) -> np.random.Generator:
        return np.random.default_rng(self.seed)

    def make_strategy(self, rng: np.random.Generator | None = None) -> RandomMoveStrategy:
        return RandomMoveStrategy(
            threshold=self.move_threshold,
            faces=self.dice_faces,
            rng=rng if rng is not None else self.make_rng(),
        )


def load_settings(env_file: str | None = None, **overrides) -> RaceSettings:
    """Load settings from the environment.

    Args:
        env_file: Optional .env file to read as well
        **overrides: Values that take precedence over the environment

    Returns:
        Validated RaceSettings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return RaceSettings(_env_file=env_file, **overrides)  # type: ignore[call-arg]
    return RaceSettings(**overrides)


def parse_names(raw: str, delimiter: str = ",") -> list[str]:
    """Split raw player input into car names.

    Names are not trimmed: "pobi, crew" yields " crew".
    """
    return raw.split(delimiter)
