import pygame

from .constants import BOUND, PADDLE_SPEED


class Paddle:
    def __init__(self, team, x, y, width, height, speed=PADDLE_SPEED):
        # team 0 plays on the left, team 1 on the right
        if team not in (0, 1):
            raise ValueError(f"paddle team must be 0 or 1, got {team!r}")
        self._team = team
        self.position = pygame.Vector2(x, y)
        self.size = pygame.Vector2(width, height)
        # Speeds are in world units per second
        self.speed = speed

    @property
    def team(self):
        return self._team

    def move_speed(self, direction: int, dt: float):
        # direction: +1 up, -1 down, 0 stay
        self.position.y += dt * self.speed * direction
        self.position.y = max(-BOUND, min(self.position.y, BOUND))

    def rect(self, project):
        # project maps a world centre and size to a screen pygame.Rect
        return project(self.position, self.size)

    def __repr__(self):
        return f"Paddle(team={self.team}, position={tuple(self.position)})"
