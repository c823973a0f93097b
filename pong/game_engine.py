import logging
from dataclasses import replace

import pygame

from .constants import (
    BALL_COLOR,
    CLEAR_COLOR,
    DIM,
    FONT_SIZE,
    PADDLE_COLOR,
    TEXT_COLOR,
)
from .simulation import InputFrame, Simulation, axis

logger = logging.getLogger(__name__)

WHITE = (255, 255, 255)

# ----------------- Key bindings -----------------
LEFT_UP, LEFT_DOWN = pygame.K_w, pygame.K_s
RIGHT_UP, RIGHT_DOWN = pygame.K_UP, pygame.K_DOWN
PAUSE_KEY = pygame.K_p


# ----------------- Game Engine -----------------
class GameEngine:
    def __init__(self, width, height, sim=None):
        self.width = width
        self.height = height
        self.sim = sim if sim is not None else Simulation.create()
        self.score_text = str(self.sim.score)

        # World units to pixels; the arena is twice as wide as it is tall,
        # so it sits in a band across the middle of the window
        self.scale = width / (2 * DIM)

        # Input state for the next tick
        self._frame = InputFrame()

        # UI, created on first render once pygame.font is up
        self.font = None

        self.request_quit = False

    # ---------- Input ----------
    def handle_input(self, events, keys):
        """
        ``events`` is this frame's pygame event list, ``keys`` anything
        indexable by key code (normally ``pygame.key.get_pressed()``).
        """
        toggle_pause = False
        for event in events:
            if event.type == pygame.QUIT or (
                event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
            ):
                self.request_quit = True
                logger.info("Quit requested")
            # Released, not pressed: holding P only counts once
            elif event.type == pygame.KEYUP and event.key == PAUSE_KEY:
                toggle_pause = True

        self._frame = InputFrame(
            left=axis(keys[LEFT_UP], keys[LEFT_DOWN]),
            right=axis(keys[RIGHT_UP], keys[RIGHT_DOWN]),
            toggle_pause=toggle_pause,
        )

    # ---------- Update ----------
    def update(self, dt: float):
        self.score_text = self.sim.tick(self._frame, dt)
        # The pause edge is consumed; held directions stay until the next poll
        self._frame = replace(self._frame, toggle_pause=False)

    # ---------- Render ----------
    def project(self, position, size):
        """Screen rectangle for a world-space centre and size."""
        w = size[0] * self.scale
        h = size[1] * self.scale
        cx = self.width / 2 + position[0] * self.scale
        cy = self.height / 2 - position[1] * self.scale
        return pygame.Rect(round(cx - w / 2), round(cy - h / 2), round(w), round(h))

    def render(self, screen):
        if self.font is None:
            self.font = pygame.font.SysFont("Arial", FONT_SIZE)

        screen.fill(CLEAR_COLOR)

        # Field
        for collider in self.sim.colliders:
            pygame.draw.rect(screen, WHITE, self.project(collider.position, collider.size))

        # Entities
        for paddle in self.sim.paddles:
            pygame.draw.rect(screen, PADDLE_COLOR, paddle.rect(self.project))
        pygame.draw.rect(screen, BALL_COLOR, self.sim.ball.rect(self.project))

        # HUD
        text = self.font.render(self.score_text, True, TEXT_COLOR)
        screen.blit(text, text.get_rect(midtop=(self.width // 2, 5)))
