from __future__ import annotations

import pytest

from pong.constants import BOUND, PADDLE_HEIGHT, WALL_THICKNESS
from pong.paddle import Paddle


def _paddle(speed: float = 500.0) -> Paddle:
    return Paddle(0, -490.0, 0.0, WALL_THICKNESS, PADDLE_HEIGHT, speed=speed)


def test_bound_keeps_paddle_off_the_walls() -> None:
    assert BOUND == 195.0


def test_move_up_and_down() -> None:
    paddle = _paddle()
    paddle.move_speed(1, 0.1)
    assert paddle.position.y == pytest.approx(50.0)
    paddle.move_speed(-1, 0.2)
    assert paddle.position.y == pytest.approx(-50.0)
    paddle.move_speed(0, 0.2)
    assert paddle.position.y == pytest.approx(-50.0)


@pytest.mark.parametrize("speed", [100.0, 500.0, 1e6])
@pytest.mark.parametrize("direction", [-1, 1])
def test_position_is_clamped(speed: float, direction: int) -> None:
    paddle = _paddle(speed)
    for _ in range(500):
        paddle.move_speed(direction, 0.2)
        assert -BOUND <= paddle.position.y <= BOUND
    assert paddle.position.y == pytest.approx(direction * BOUND)


def test_team_is_read_only() -> None:
    paddle = _paddle()
    with pytest.raises(AttributeError):
        paddle.team = 1  # type: ignore[misc]


def test_unknown_team_is_rejected() -> None:
    with pytest.raises(ValueError):
        Paddle(2, 0.0, 0.0, WALL_THICKNESS, PADDLE_HEIGHT)
