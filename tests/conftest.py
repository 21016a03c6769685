"""Shared fixtures for racing car tests."""

import pytest

from racingcar.models import Cars


class CountingStrategy:
    """Fixed answer that records how often it was asked."""

    def __init__(self, movable: bool = True):
        self.movable = movable
        self.calls = 0

    def is_movable(self) -> bool:
        self.calls += 1
        return self.movable


@pytest.fixture
def counting_strategy() -> CountingStrategy:
    return CountingStrategy()


@pytest.fixture
def three_cars() -> Cars:
    return Cars(["pobi", "woni", "jun"])


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for key in ("MOVE_THRESHOLD", "DICE_FACES", "NAME_DELIMITER", "SEED"):
        monkeypatch.delenv(f"RACINGCAR_{key}", raising=False)
