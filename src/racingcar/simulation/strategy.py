"""Move decision strategies."""

from collections.abc import Iterable
from typing import Protocol, runtime_checkable

import numpy as np

from racingcar.exceptions import StrategyExhaustedError

DEFAULT_MOVE_THRESHOLD = 4
DEFAULT_DICE_FACES = 10


@runtime_checkable
class MoveStrategy(Protocol):
    """Decides, once per car per round, whether that car moves."""

    def is_movable(self) -> bool:
        ...


class RandomMoveStrategy:
    """Moves when a random draw reaches a fixed threshold.

    With the defaults a draw in 0-9 moves the car on 4 or more.
    """

    def __init__(
        self,
        threshold: int = DEFAULT_MOVE_THRESHOLD,
        faces: int = DEFAULT_DICE_FACES,
        rng: np.random.Generator | None = None,
    ):
        """Initialize the strategy.

        Args:
            threshold: Minimum draw that lets the car move
            faces: Draws are taken uniformly from [0, faces)
            rng: Random number generator
        """
        self.threshold = threshold
        self.faces = faces
        self.rng = rng if rng is not None else np.random.default_rng()

    def draw(self) -> int:
        return int(self.rng.integers(0, self.faces))

    def is_movable(self) -> bool:
        return self.draw() >= self.threshold


class FixedMoveStrategy:
    """Always gives the same answer."""

    def __init__(self, movable: bool):
        self.movable = movable

    def is_movable(self) -> bool:
        return self.movable


class ScriptedMoveStrategy:
    """Replays a fixed sequence of decisions in call order."""

    def __init__(self, decisions: Iterable[bool]):
        self._decisions = iter(list(decisions))

    def is_movable(self) -> bool:
        try:
            return next(self._decisions)
        except StopIteration:
            raise StrategyExhaustedError() from None
