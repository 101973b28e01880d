"""
Renderer - Reads a gameplay snapshot and draws it with pygame.
This is a THIN ADAPTER - no game logic here.
"""
from typing import Optional

import pygame

from garden_defense.gameplay.constants import COLS, ROWS, TILE_W, TILE_H, FIELD_WIDTH, FIELD_HEIGHT
from garden_defense.gameplay.definitions import DefenderKind, DEFENDER_TYPES
from garden_defense.gameplay.game import Game, Snapshot


# Visual constants
HUD_HEIGHT = 48
SCREEN_WIDTH = FIELD_WIDTH
SCREEN_HEIGHT = FIELD_HEIGHT + HUD_HEIGHT

# Colors
COLOR_BG = (10, 26, 40)
COLOR_TILE = (38, 92, 58)
COLOR_TILE_ALT = (44, 104, 66)
COLOR_STEM = (46, 204, 113)
COLOR_HP_BACK = (11, 26, 40)
COLOR_HP_PLANT = (89, 210, 254)
COLOR_HP_ZOMBIE = (255, 209, 102)
COLOR_PEA = (155, 231, 255)
COLOR_SUN = (255, 209, 102)
COLOR_SUN_CORE = (255, 243, 176)
COLOR_BLAST = (255, 220, 120)
COLOR_HUD = (220, 220, 220)
COLOR_SELECTED = (255, 255, 255)

PLANT_COLORS = {
    DefenderKind.PEASHOOTER.value: (110, 231, 183),
    DefenderKind.TWINPEA.value: (90, 210, 160),
    DefenderKind.SUNFLOWER.value: (255, 183, 3),
    DefenderKind.CHERRY.value: (255, 77, 109),
    DefenderKind.WALLNUT.value: (176, 136, 87),
}

# Keyboard shortcuts shown on the seed cards
CARD_ORDER = [
    DefenderKind.PEASHOOTER,
    DefenderKind.TWINPEA,
    DefenderKind.SUNFLOWER,
    DefenderKind.CHERRY,
    DefenderKind.WALLNUT,
]


class Renderer:
    """
    Draws the lawn, entities and HUD.

    UI-only state lives here: the selected card and the flash message.
    """

    def __init__(self, game: Game, screen: pygame.Surface):
        self.game = game
        self.screen = screen
        self.font = pygame.font.Font(None, 26)
        self.big_font = pygame.font.Font(None, 56)

        self.selected: Optional[DefenderKind] = DefenderKind.PEASHOOTER  # None = shovel
        self.message: str = "Click Start (Enter) to begin"
        self.message_timer: float = 0.0

    def flash(self, text: str, seconds: float = 0.9) -> None:
        self.message = text
        self.message_timer = seconds

    def tick_ui(self, dt: float) -> None:
        if self.message_timer > 0:
            self.message_timer -= dt

    # =========================================================================
    # DRAWING
    # =========================================================================

    def render(self) -> None:
        snap = self.game.snapshot()
        self.screen.fill(COLOR_BG)

        self._draw_lawn()
        for defender in snap.defenders:
            self._draw_defender(defender)
        for pickup in snap.pickups:
            self._draw_pickup(pickup)
        for pea in snap.projectiles:
            pygame.draw.circle(self.screen, COLOR_PEA, (int(pea['x']), int(pea['y'])), 6)
        for attacker in snap.attackers:
            self._draw_attacker(attacker)
        for blast in snap.explosions:
            center = (int(blast['x']), int(blast['y']))
            pygame.draw.circle(self.screen, COLOR_BLAST, center, int(blast['radius']), 4)

        self._draw_hud(snap)
        self._draw_overlay(snap)
        pygame.display.flip()

    def _draw_lawn(self) -> None:
        for row in range(ROWS):
            for col in range(COLS):
                color = COLOR_TILE if (row + col) % 2 == 0 else COLOR_TILE_ALT
                pygame.draw.rect(self.screen, color, (col * TILE_W, row * TILE_H, TILE_W, TILE_H))

    def _draw_defender(self, defender: dict) -> None:
        x = defender['col'] * TILE_W + 10
        y = defender['row'] * TILE_H + 10
        pygame.draw.rect(self.screen, COLOR_STEM, (x + 20, y + TILE_H - 40, 10, 30))
        body = pygame.Rect(x + 25, y + 25, 50, 50)
        pygame.draw.rect(self.screen, PLANT_COLORS[defender['kind']], body, border_radius=12)

        pygame.draw.rect(self.screen, COLOR_HP_BACK, (x + 12, y + 8, 70, 6))
        pygame.draw.rect(self.screen, COLOR_HP_PLANT, (x + 12, y + 8, int(70 * defender['hp_ratio']), 6))

    def _draw_attacker(self, attacker: dict) -> None:
        x, y = int(attacker['x']), int(attacker['y'])
        pygame.draw.rect(self.screen, attacker['color'], (x - 28, y - 28, 56, 56), border_radius=12)
        pygame.draw.circle(self.screen, COLOR_BG, (x - 10, y - 6), 4)
        pygame.draw.circle(self.screen, COLOR_BG, (x + 10, y - 6), 4)

        ratio = max(0.0, attacker['hp'] / attacker['max_hp'])
        pygame.draw.rect(self.screen, COLOR_HP_BACK, (x - 24, y - 34, 48, 5))
        pygame.draw.rect(self.screen, COLOR_HP_ZOMBIE, (x - 24, y - 34, int(48 * ratio), 5))

    def _draw_pickup(self, pickup: dict) -> None:
        center = (int(pickup['x']), int(pickup['y']))
        pygame.draw.circle(self.screen, COLOR_SUN, center, int(pickup['radius']))
        pygame.draw.circle(self.screen, COLOR_SUN_CORE, center, int(pickup['radius']) // 2)

    def _draw_hud(self, snap: Snapshot) -> None:
        top = FIELD_HEIGHT + 12
        wave = min(snap.wave, snap.waves_total)
        status = f"Sun: {snap.balance}    Wave {wave} / {snap.waves_total}"
        if snap.muted:
            status += "    [muted]"
        self.screen.blit(self.font.render(status, True, COLOR_HUD), (10, top))

        x = 380
        for i, kind in enumerate(CARD_ORDER, start=1):
            label = f"{i}:{kind.value}({DEFENDER_TYPES[kind].cost})"
            color = COLOR_SELECTED if kind == self.selected else COLOR_HUD
            surface = self.font.render(label, True, color)
            self.screen.blit(surface, (x, top))
            x += surface.get_width() + 12

    def _draw_overlay(self, snap: Snapshot) -> None:
        if snap.won:
            text = "You Win! Press R to play again"
        elif snap.lost:
            text = "Game Over. Press R"
        elif snap.paused:
            text = "Paused"
        elif self.message_timer > 0 or not snap.running:
            text = self.message
        else:
            return

        surface = self.big_font.render(text, True, COLOR_SELECTED)
        rect = surface.get_rect(center=(FIELD_WIDTH // 2, FIELD_HEIGHT // 2))
        self.screen.blit(surface, rect)
