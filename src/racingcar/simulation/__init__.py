"""Round loop and move decisions."""

from .service import RaceRecord, RacingCarService
from .strategy import (
    FixedMoveStrategy,
    MoveStrategy,
    RandomMoveStrategy,
    ScriptedMoveStrategy,
)

__all__ = [
    "FixedMoveStrategy",
    "MoveStrategy",
    "RaceRecord",
    "RacingCarService",
    "RandomMoveStrategy",
    "ScriptedMoveStrategy",
]
