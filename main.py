import logging

import pygame

from pong.constants import FPS, TITLE, WINDOW_SIZE
from pong.game_engine import GameEngine

logger = logging.getLogger(__name__)

# Screen dimensions
WIDTH, HEIGHT = WINDOW_SIZE


def main():
    logging.basicConfig(level=logging.INFO)

    # Initialize pygame/Start application
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)

    # Clock
    clock = pygame.time.Clock()

    # Game loop
    engine = GameEngine(WIDTH, HEIGHT)
    logger.info("Starting %s", TITLE)

    running = True
    while running:
        dt = clock.tick(FPS) / 1000.0  # seconds since last frame
        events = pygame.event.get()

        # Window close
        for event in events:
            if event.type == pygame.QUIT:
                running = False

        # Handle input & update game state
        engine.handle_input(events, pygame.key.get_pressed())
        engine.update(dt)

        # Render
        engine.render(screen)
        pygame.display.flip()

        if engine.request_quit:
            running = False

    pygame.quit()


if __name__ == "__main__":
    main()
