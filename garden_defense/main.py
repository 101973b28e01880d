#!/usr/bin/env python3
"""
Garden Defense - Main Entry Point

Plant defenders on the lawn, collect falling sun, and hold off five
escalating waves of attackers.

Usage:
    garden-defense

Controls:
    1-5: Select defender (peashooter, twinpea, sunflower, cherry, wallnut)
    0: Select shovel
    Click: Collect sun / place or remove on a tile
    Enter/S: Start (or send the next wave)
    Space/P: Pause
    M: Mute
    R: Reset
    Escape: Quit
"""
import logging

import pygame

from garden_defense.gameplay.config import get_settings
from garden_defense.gameplay.game import Game
from garden_defense.ui.renderer import Renderer, SCREEN_WIDTH, SCREEN_HEIGHT
from garden_defense.ui.input_handler import InputHandler

logger = logging.getLogger(__name__)


def main():
    """Main entry point."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Garden Defense - Starting...")

    game = Game(settings)

    pygame.init()
    pygame.display.set_caption("Garden Defense")
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    clock = pygame.time.Clock()

    renderer = Renderer(game, screen)
    input_handler = InputHandler(game, renderer)

    should_quit = False
    while not should_quit:
        dt = clock.tick(settings.fps) / 1000.0

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                should_quit = True
            elif event.type == pygame.KEYDOWN:
                should_quit = input_handler.handle_key(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                input_handler.handle_click(event.pos)

        input_handler.handle_events(game.update(dt))
        renderer.tick_ui(dt)
        renderer.render()

    pygame.quit()
    logger.info("Garden Defense stopped.")


if __name__ == "__main__":
    main()
