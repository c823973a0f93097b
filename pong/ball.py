import pygame


class Ball:
    def __init__(self, x, y, width, height, vx=0.0, vy=0.0):
        self.position = pygame.Vector2(x, y)
        self.size = pygame.Vector2(width, height)
        # Velocity in world units per second
        self.velocity = pygame.Vector2(vx, vy)

    def advance(self, dt: float):
        self.position += self.velocity * dt

    def reset(self, velocity):
        # Back to the centre spot, serving with the given velocity
        self.position = pygame.Vector2(0, 0)
        self.velocity = pygame.Vector2(velocity)

    def rect(self, project):
        return project(self.position, self.size)

    def __repr__(self):
        return (f"Ball(position={tuple(self.position)}, "
                f"velocity={tuple(self.velocity)})")
