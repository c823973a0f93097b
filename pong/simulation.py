"""
Per-frame Pong simulation.

A tick runs its stages in a fixed order: pause toggle, movement, collision
resolution, scoring. Everything the stages touch lives on ``Simulation`` and
is handed to each stage explicitly. Goals are reported as ``ScoreEvent``s on
``Simulation.events`` during collision resolution and drained by the scoring
stage before the tick ends.
"""

import logging
from dataclasses import dataclass, field

from .arena import ColliderKind, build_boundaries
from .ball import Ball
from .collision import Collision, collide
from .constants import (
    BALL_SIZE,
    BOUNCE_BIAS,
    DEFLECTION,
    MAX_DELTA,
    PADDLE_HEIGHT,
    PADDLE_X,
    SERVE_SPEED,
    WALL_THICKNESS,
)
from .paddle import Paddle
from .score import ScoreBoard, ScoreEvent

logger = logging.getLogger(__name__)


class InvariantError(AssertionError):
    """The simulation was built or mutated into an impossible state."""


def axis(up, down) -> int:
    """Collapse a pair of held keys into -1, 0 or +1."""
    return int(bool(up)) - int(bool(down))


@dataclass(frozen=True)
class InputFrame:
    """
    Input sampled once per tick.

    :ivar left (int): Direction of the left paddle, +1 up, -1 down.
    :ivar right (int): Direction of the right paddle.
    :ivar toggle_pause (bool): The pause key was released this tick.
    """

    left: int = 0
    right: int = 0
    toggle_pause: bool = False


@dataclass
class Simulation:
    paddles: list
    ball: Ball
    colliders: list = field(default_factory=build_boundaries)
    score: ScoreBoard = field(default_factory=ScoreBoard)
    paused: bool = False
    # Filled by resolve_collisions, emptied by apply_scores
    events: list = field(default_factory=list)

    def __post_init__(self):
        if self.ball is None:
            raise InvariantError("simulation has no ball")
        teams = sorted(paddle.team for paddle in self.paddles)
        if teams != [0, 1]:
            raise InvariantError(f"expected one paddle per team, got teams {teams}")

    @classmethod
    def create(cls):
        paddles = [
            Paddle(team, x, 0.0, WALL_THICKNESS, PADDLE_HEIGHT)
            for team, x in enumerate((-PADDLE_X, PADDLE_X))
        ]
        ball = Ball(0.0, 0.0, BALL_SIZE, BALL_SIZE, *SERVE_SPEED)
        return cls(paddles, ball)

    def paddle(self, team):
        """Paddle playing for ``team``; asking for any other team is a programming error."""
        for paddle in self.paddles:
            if paddle.team == team:
                return paddle
        raise InvariantError(f"no paddle for team {team}")

    def tick(self, frame: InputFrame, dt: float) -> str:
        """Advance one frame and return the score text to display."""
        toggle_pause(self, frame)
        # Long frames (window drag, first frame) would let the ball skip colliders
        delta = min(MAX_DELTA, dt)
        move_paddles(self, frame, delta)
        move_ball(self, delta)
        resolve_collisions(self)
        return apply_scores(self)


# ---------- Stages ----------
def toggle_pause(sim, frame):
    if frame.toggle_pause:
        sim.paused = not sim.paused
        logger.info("Game %s", "paused" if sim.paused else "resumed")


def move_paddles(sim, frame, dt: float):
    if sim.paused:
        return
    for paddle in sim.paddles:
        direction = frame.left if paddle.team == 0 else frame.right
        paddle.move_speed(direction, dt)


def move_ball(sim, dt: float):
    if sim.paused:
        return
    sim.ball.advance(dt)


def _bounce_off_wall(velocity, collision):
    # Only reflect while still heading into the wall, otherwise a ball that
    # overlaps for two frames would flip straight back
    if collision is Collision.TOP:
        reflect_y = velocity.y < 0
    elif collision is Collision.BOTTOM:
        reflect_y = velocity.y > 0
    else:
        reflect_y = False

    if reflect_y:
        velocity.y = -velocity.y + BOUNCE_BIAS
        logger.debug("Wall bounce (%s), vy=%.1f", collision.value, velocity.y)


def _bounce_off_paddle(ball, paddle_position, collision):
    velocity = ball.velocity
    if collision is Collision.LEFT:
        reflect_x = velocity.x > 0
    elif collision is Collision.RIGHT:
        reflect_x = velocity.x < 0
    else:
        reflect_x = False

    if reflect_x:
        velocity.x = -velocity.x + BOUNCE_BIAS
        logger.debug("Paddle bounce (%s), vx=%.1f", collision.value, velocity.x)

    # Angle depends on where the ball struck the paddle, on every overlapping frame
    velocity.y = (ball.position.y - paddle_position[1]) * DEFLECTION


def resolve_collisions(sim):
    """
    Test the ball against the paddles and then every static collider.

    Every overlap is handled, not only the first one. Returns the score
    events queued so far this tick.
    """
    ball = sim.ball
    targets = [(ColliderKind.PADDLE, p.position, p.size) for p in sim.paddles]
    targets += [(c.kind, c.position, c.size) for c in sim.colliders]

    for kind, position, size in targets:
        collision = collide(ball.position, ball.size, position, size)
        if collision is None:
            continue
        if kind is ColliderKind.WALL:
            _bounce_off_wall(ball.velocity, collision)
        elif kind is ColliderKind.PADDLE:
            _bounce_off_paddle(ball, position, collision)
        elif kind is ColliderKind.LEFT:
            sim.events.append(ScoreEvent.LEFT)
        elif kind is ColliderKind.RIGHT:
            sim.events.append(ScoreEvent.RIGHT)
    return sim.events


def apply_scores(sim) -> str:
    events, sim.events = sim.events, []
    serve_x, serve_y = SERVE_SPEED
    for event in events:
        sim.score.record(event)
        # Serve away from the side that just conceded
        if event is ScoreEvent.LEFT:
            sim.ball.reset((serve_x, serve_y))
        else:
            sim.ball.reset((-serve_x, serve_y))
    return str(sim.score)
