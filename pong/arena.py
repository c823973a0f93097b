"""
Static colliders bounding the playing field.
"""

from dataclasses import dataclass
from enum import Enum

from .constants import DIM, WALL_THICKNESS


class ColliderKind(Enum):
    PADDLE = "paddle"
    WALL = "wall"
    # Goals behind the left and right paddles
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Collider:
    """
    A rectangle the ball can run into.

    :ivar kind (ColliderKind): How the ball reacts to an overlap.
    :ivar position (tuple[float, float]): Centre of the rectangle.
    :ivar size (tuple[float, float]): Full width and height.
    """

    kind: ColliderKind
    position: tuple
    size: tuple


def build_boundaries(dim=DIM, thickness=WALL_THICKNESS):
    """Goals on the left and right, walls on the bottom and top."""
    goal_size = (thickness, dim + thickness)
    wall_size = (dim * 2, thickness)
    return [
        Collider(ColliderKind.LEFT, (-dim, 0.0), goal_size),
        Collider(ColliderKind.RIGHT, (dim, 0.0), goal_size),
        Collider(ColliderKind.WALL, (0.0, -dim / 2), wall_size),
        Collider(ColliderKind.WALL, (0.0, dim / 2), wall_size),
    ]
