from __future__ import annotations

import pytest

from pong.collision import Collision, collide


def test_apart_rectangles_do_not_collide() -> None:
    assert collide((0, 0), (10, 10), (100, 0), (10, 10)) is None


def test_touching_edges_do_not_collide() -> None:
    assert collide((0, 0), (10, 10), (10, 0), (10, 10)) is None
    assert collide((0, 0), (10, 10), (0, 10), (10, 10)) is None


@pytest.mark.parametrize(
    ("ball_pos", "target_pos", "target_size", "expected"),
    [
        # ball coming in from the left of a right-hand paddle
        ((465, 0), (490, 0), (10, 100), Collision.LEFT),
        # ball coming in from the right of a left-hand paddle
        ((-465, 0), (-490, 0), (10, 100), Collision.RIGHT),
        # ball poking out above the top wall
        ((0, 275), (0, 250), (1000, 10), Collision.TOP),
        # ball pushing into the top wall from below
        ((0, 225), (0, 250), (1000, 10), Collision.BOTTOM),
    ],
)
def test_face_struck(ball_pos, target_pos, target_size, expected) -> None:
    assert collide(ball_pos, (50, 50), target_pos, target_size) is expected


def test_smaller_penetration_wins() -> None:
    # x overlap is 2, y overlap is 1
    assert collide((0, 0), (10, 10), (8, 9), (10, 10)) is Collision.BOTTOM
    # x overlap is 1, y overlap is 2
    assert collide((0, 0), (10, 10), (9, 8), (10, 10)) is Collision.LEFT


def test_exact_tie_prefers_horizontal_face() -> None:
    assert collide((0, 0), (10, 10), (8, 8), (10, 10)) is Collision.LEFT
    assert collide((0, 0), (10, 10), (-8, -8), (10, 10)) is Collision.RIGHT


def test_fully_contained_reports_inside() -> None:
    assert collide((0, 0), (4, 4), (0, 0), (10, 10)) is Collision.INSIDE
