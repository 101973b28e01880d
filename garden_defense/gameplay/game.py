"""
Main Game class - the session that drives the simulation.
NO UI DEPENDENCIES.

This is the module a host talks to. It can be fully tested
without any UI framework.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple, Union

from .config import GameSettings, get_settings
from .definitions import DefenderKind
from .errors import (
    AlreadyInProgress, GameplayError, InsufficientResource, OccupiedCell, OutOfBounds,
    UnknownDefender,
)
from .events import (
    GameEvent, GamePhase, PhaseChangedEvent, PlacementRejectedEvent,
    SunCollectedEvent, WaveStartedEvent,
)
from .simulation import tick
from .world import World, place_defender, remove_defender

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """
    Read-only view of the world for renderers.
    Entities are plain dicts so the UI can't reach back into live state.
    """
    phase: GamePhase
    balance: int
    wave: int
    waves_total: int
    in_wave: bool
    muted: bool
    defenders: Tuple[dict, ...]
    attackers: Tuple[dict, ...]
    projectiles: Tuple[dict, ...]
    pickups: Tuple[dict, ...]
    explosions: Tuple[dict, ...]

    @property
    def running(self) -> bool:
        return self.phase == GamePhase.RUNNING

    @property
    def paused(self) -> bool:
        return self.phase == GamePhase.PAUSED

    @property
    def won(self) -> bool:
        return self.phase == GamePhase.WON

    @property
    def lost(self) -> bool:
        return self.phase == GamePhase.LOST


class Game:
    """
    The game session.

    It exposes state through snapshot() and accepts commands as method
    calls. Rejected commands are no-ops that emit an event.

    Usage:
        game = Game()
        game.place(DefenderKind.PEASHOOTER, row=2, col=0)
        game.start()
        while not game.phase.is_terminal:
            events = game.update(dt)
            # UI reads game.snapshot() and renders
    """

    def __init__(self, settings: Optional[GameSettings] = None, rng: Optional[random.Random] = None):
        self.settings = settings if settings is not None else get_settings()
        if rng is None:
            rng = random.Random(self.settings.seed)
        self.world = World(
            starting_balance=self.settings.starting_balance,
            waves_total=self.settings.waves_total,
            rng=rng,
        )
        self.muted: bool = False

    # =========================================================================
    # STATE
    # =========================================================================

    @property
    def phase(self) -> GamePhase:
        return self.world.phase

    @property
    def balance(self) -> int:
        return self.world.balance

    @property
    def wave(self) -> int:
        return self.world.wave

    def add_listener(self, listener: Callable[[GameEvent], None]) -> None:
        """Call listener synchronously for every event as it happens."""
        self.world.add_listener(listener)

    # =========================================================================
    # BUILDING COMMANDS
    # =========================================================================

    def can_place(self, row: int, col: int) -> bool:
        return not self.phase.is_terminal and self.world.grid.can_place(row, col)

    def place(self, kind: Union[DefenderKind, str], row: int, col: int) -> bool:
        """
        Buy a defender for the given tile.
        Returns False (and emits PlacementRejectedEvent) if it can't go there.
        """
        if self.phase.is_terminal:
            return False
        try:
            place_defender(self.world, kind, row, col)
        except GameplayError as exc:
            logger.info(f"Placement rejected: {exc}")
            self.world.emit(PlacementRejectedEvent(row, col, _rejection_reason(exc)))
            return False
        return True

    def remove(self, row: int, col: int) -> bool:
        """Shovel a tile. Returns True if something was removed."""
        if self.phase.is_terminal:
            return False
        return remove_defender(self.world, row, col) is not None

    def collect_at(self, x: float, y: float) -> bool:
        """Try to pick up a sun drop at pixel (x, y)."""
        if self.phase.is_terminal:
            return False
        pickup = self.world.economy.collect_at(self.world.pickups, x, y)
        if pickup is None:
            return False
        self.world.emit(SunCollectedEvent(pickup.amount, self.balance))
        return True

    # =========================================================================
    # GAME FLOW COMMANDS
    # =========================================================================

    def start(self) -> None:
        """Run the simulation and send in the current wave if none is active."""
        if self.phase.is_terminal:
            return
        if self.phase != GamePhase.RUNNING:
            self._set_phase(GamePhase.RUNNING)
        if not self.world.in_wave:
            self._start_wave()

    def pause(self) -> None:
        if self.phase == GamePhase.RUNNING:
            self._set_phase(GamePhase.PAUSED)

    def resume(self) -> None:
        if self.phase == GamePhase.PAUSED:
            self._set_phase(GamePhase.RUNNING)

    def toggle_pause(self) -> None:
        if self.phase == GamePhase.RUNNING:
            self.pause()
        else:
            self.resume()

    def reset(self) -> None:
        """Drop every pending callback and start over from an empty lawn."""
        self.world.clear()
        logger.info("Game reset")

    def set_muted(self, muted: bool) -> None:
        """Audio is not ours; just remember the flag for whoever plays sound."""
        self.muted = muted

    # =========================================================================
    # UPDATE LOOP
    # =========================================================================

    def update(self, dt: float) -> List[GameEvent]:
        """
        Update game state by dt seconds.
        Returns the events that occurred since the last call.
        """
        if self.phase == GamePhase.RUNNING and dt > 0:
            remaining = dt
            while remaining > 1e-9 and self.phase == GamePhase.RUNNING:
                step = min(remaining, self.settings.max_step)
                self._step(step)
                remaining -= step
        return self.world.drain_events()

    def _step(self, dt: float) -> None:
        tick(self.world, dt)
        if (self.settings.auto_next_wave
                and self.phase == GamePhase.RUNNING
                and not self.world.in_wave):
            self._start_wave()

    def _start_wave(self) -> None:
        try:
            plans = self.world.spawner.start_wave()
        except AlreadyInProgress as exc:
            logger.debug(f"Ignored wave start: {exc}")
            return
        self.world.emit(WaveStartedEvent(self.wave, len(plans)))

    def _set_phase(self, new_phase: GamePhase) -> None:
        old_phase = self.phase
        self.world.phase = new_phase
        self.world.emit(PhaseChangedEvent(old_phase, new_phase))
        logger.info(f"Game {old_phase.name.lower()} -> {new_phase.name.lower()}")

    # =========================================================================
    # STATE QUERIES (for UI to read)
    # =========================================================================

    def snapshot(self) -> Snapshot:
        world = self.world
        return Snapshot(
            phase=world.phase,
            balance=world.balance,
            wave=world.wave,
            waves_total=world.spawner.waves_total,
            in_wave=world.in_wave,
            muted=self.muted,
            defenders=tuple(
                {
                    'kind': d.kind.value,
                    'row': d.row,
                    'col': d.col,
                    'hp': d.hp,
                    'hp_ratio': d.hp_ratio,
                    'armed': d.arm_timer is not None,
                }
                for d in world.grid.iter_defenders()
            ),
            attackers=tuple(
                {
                    'kind': a.kind.value,
                    'lane': a.lane,
                    'x': a.x,
                    'y': a.y,
                    'hp': a.hp,
                    'max_hp': a.max_hp,
                    'color': a.atype.color,
                }
                for a in world.attackers
            ),
            projectiles=tuple({'lane': p.lane, 'x': p.x, 'y': p.y} for p in world.projectiles),
            pickups=tuple(
                {'x': p.x, 'y': p.y, 'radius': p.radius, 'life': p.life}
                for p in world.pickups
            ),
            explosions=tuple(
                {'x': e.x, 'y': e.y, 'radius': e.radius, 'max_radius': e.max_radius}
                for e in world.explosions
            ),
        )

    # =========================================================================
    # CONVENIENCE METHODS FOR TESTING
    # =========================================================================

    def simulate(self, seconds: float, dt: float = 0.05) -> List[GameEvent]:
        """
        Run the game for a number of seconds.
        Returns all events that occurred.
        """
        all_events = []
        elapsed = 0.0
        while elapsed < seconds and self.phase == GamePhase.RUNNING:
            all_events.extend(self.update(dt))
            elapsed += dt
        return all_events


def _rejection_reason(exc: GameplayError) -> str:
    if isinstance(exc, InsufficientResource):
        return "Not enough sun"
    if isinstance(exc, OccupiedCell):
        return "Tile occupied"
    if isinstance(exc, OutOfBounds):
        return "Off the lawn"
    if isinstance(exc, UnknownDefender):
        return "Unknown defender"
    return str(exc)
