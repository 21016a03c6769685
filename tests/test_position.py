"""Tests for the position odometer."""

import pytest
from pydantic import ValidationError

from racingcar.exceptions import ErrorMessage, InvalidPositionError
from racingcar.models import Position


def test_defaults_to_zero() -> None:
    assert Position().value == 0


@pytest.mark.parametrize("value", [-1, -2, -100])
def test_negative_position_rejected(value: int) -> None:
    with pytest.raises(InvalidPositionError) as exc_info:
        Position(value)
    assert str(exc_info.value) == ErrorMessage.ILLEGAL_POSITION.value


@pytest.mark.parametrize("steps", [0, 1, 5, 20])
def test_forward_adds_one_per_call(steps: int) -> None:
    position = Position(3)
    for _ in range(steps):
        assert position.forward() is None
    assert position.value == 3 + steps


def test_equality_is_by_value() -> None:
    a = Position(2)
    b = Position(2)
    assert a is not b
    assert a == b
    b.forward()
    assert a != b


def test_ordering_is_by_value() -> None:
    assert Position(1) < Position(2)
    assert Position(3) >= Position(3)
    assert max([Position(1), Position(4), Position(2)]) == Position(4)


def test_not_equal_to_plain_int() -> None:
    assert Position(1) != 1


@pytest.mark.parametrize("value", ["1", False, 1.0])
def test_non_integer_position_rejected(value) -> None:
    with pytest.raises(ValidationError):
        Position(value)
