"""
Axis-aligned rectangle overlap test.

Rectangles are given by their centre and full size. ``collide`` reports the
face of ``b`` that ``a`` pushed through, picking the axis with the smallest
penetration. When both axes penetrate equally the horizontal result wins.
"""

import math
from enum import Enum


class Collision(Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    INSIDE = "inside"


def _axis(a_min, a_max, b_min, b_max, low, high):
    # a sticks out past b's low edge
    if a_min < b_min < a_max < b_max:
        return low, b_min - a_max
    # a sticks out past b's high edge
    if b_min < a_min < b_max < a_max:
        return high, a_min - b_max
    return Collision.INSIDE, -math.inf


def collide(a_pos, a_size, b_pos, b_size):
    """Return the Collision of ``a`` against ``b``, or None when apart."""
    a_min_x, a_max_x = a_pos[0] - a_size[0] / 2.0, a_pos[0] + a_size[0] / 2.0
    a_min_y, a_max_y = a_pos[1] - a_size[1] / 2.0, a_pos[1] + a_size[1] / 2.0
    b_min_x, b_max_x = b_pos[0] - b_size[0] / 2.0, b_pos[0] + b_size[0] / 2.0
    b_min_y, b_max_y = b_pos[1] - b_size[1] / 2.0, b_pos[1] + b_size[1] / 2.0

    overlapping = (
        a_min_x < b_max_x and a_max_x > b_min_x
        and a_min_y < b_max_y and a_max_y > b_min_y
    )
    if not overlapping:
        return None

    x_collision, x_depth = _axis(a_min_x, a_max_x, b_min_x, b_max_x,
                                 Collision.LEFT, Collision.RIGHT)
    y_collision, y_depth = _axis(a_min_y, a_max_y, b_min_y, b_max_y,
                                 Collision.BOTTOM, Collision.TOP)

    if abs(y_depth) < abs(x_depth):
        return y_collision
    return x_collision
