"""
Input Handler - Translates mouse and key presses to gameplay commands.
This is a THIN ADAPTER - no game logic here.
"""
from typing import List

import pygame

from garden_defense.gameplay.constants import TILE_W, TILE_H
from garden_defense.gameplay.events import (
    GameEvent, PlacementRejectedEvent, WaveStartedEvent,
)
from garden_defense.gameplay.game import Game
from garden_defense.ui.renderer import Renderer, CARD_ORDER


# Number keys pick seed cards; 0 picks the shovel
CARD_KEYS = {
    pygame.K_1: 0,
    pygame.K_2: 1,
    pygame.K_3: 2,
    pygame.K_4: 3,
    pygame.K_5: 4,
}


class InputHandler:
    """
    Handles mouse and keyboard input and translates to game commands.

    The input handler:
    - Reads clicks and key presses
    - Updates renderer state (selected card, flash messages)
    - Calls game methods to modify game state
    """

    def __init__(self, game: Game, renderer: Renderer):
        self.game = game
        self.renderer = renderer

    def handle_key(self, key: int) -> bool:
        """
        Handle a single key press.
        Returns True if the game should quit.
        """
        if key == pygame.K_ESCAPE:
            return True

        if key == pygame.K_r:
            self.game.reset()
            self.renderer.flash("Reset - press Enter to start", seconds=2.0)
        elif key in (pygame.K_RETURN, pygame.K_s):
            self.game.start()
        elif key in (pygame.K_SPACE, pygame.K_p):
            self.game.toggle_pause()
        elif key == pygame.K_m:
            self.game.set_muted(not self.game.muted)
        elif key == pygame.K_0:
            self.renderer.selected = None
        elif key in CARD_KEYS:
            self.renderer.selected = CARD_ORDER[CARD_KEYS[key]]

        return False

    def handle_click(self, pos) -> None:
        """Collect a sun if one is under the cursor, otherwise act on the tile."""
        x, y = pos
        if self.game.collect_at(x, y):
            return

        row, col = int(y // TILE_H), int(x // TILE_W)
        if not self.game.world.grid.in_bounds(row, col):
            return

        if self.renderer.selected is None:
            self.game.remove(row, col)
        else:
            self.game.place(self.renderer.selected, row, col)

    def handle_events(self, events: List[GameEvent]) -> None:
        """React to gameplay events with UI feedback."""
        for event in events:
            if isinstance(event, PlacementRejectedEvent):
                self.renderer.flash(event.reason)
            elif isinstance(event, WaveStartedEvent):
                self.renderer.flash(f"Wave {event.wave} incoming!")
