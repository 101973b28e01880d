"""
World state aggregate plus placement and blast resolution.
NO UI DEPENDENCIES.
"""
import logging
import random
from typing import Callable, List, Optional, Union

from .constants import ROWS, COLS, STARTING_BALANCE, WAVES_TOTAL
from .definitions import BehaviorClass, DefenderKind, DEFENDER_TYPES
from .economy import Economy
from .entities import Attacker, Defender, Explosion, Pickup, Projectile, cell_center
from .events import (
    GameEvent, GamePhase, PhaseChangedEvent, AttackerSpawnedEvent, AttackerKilledEvent,
    DefenderDestroyedEvent, ExplosionTriggeredEvent, PlantPlacedEvent,
)
from .errors import UnknownDefender
from .grid import Grid
from .scheduler import Scheduler
from .spawner import Spawner

logger = logging.getLogger(__name__)

ARM_TAG = "arm"


class World:
    """
    Everything the simulation mutates, in one place.

    Only the tick functions and the placement helpers below write to it.
    """

    def __init__(
        self,
        starting_balance: int = STARTING_BALANCE,
        waves_total: int = WAVES_TOTAL,
        rng: Optional[random.Random] = None,
        rows: int = ROWS,
        cols: int = COLS,
    ):
        self.rng = rng if rng is not None else random.Random()
        self.scheduler = Scheduler()
        self.grid = Grid(rows, cols)
        self.economy = Economy(starting_balance, self.rng)
        self.spawner = Spawner(self.scheduler, self.rng, rows, waves_total, self.add_attacker)

        self.attackers: List[Attacker] = []
        self.projectiles: List[Projectile] = []
        self.pickups: List[Pickup] = []
        self.explosions: List[Explosion] = []

        self.phase = GamePhase.IDLE

        self._events: List[GameEvent] = []
        self._listeners: List[Callable[[GameEvent], None]] = []

    # =========================================================================
    # EVENTS
    # =========================================================================

    def emit(self, event: GameEvent) -> None:
        self._events.append(event)
        for listener in self._listeners:
            listener(event)

    def drain_events(self) -> List[GameEvent]:
        events, self._events = self._events, []
        return events

    def add_listener(self, listener: Callable[[GameEvent], None]) -> None:
        self._listeners.append(listener)

    # =========================================================================
    # QUERIES
    # =========================================================================

    @property
    def balance(self) -> int:
        return self.economy.balance

    @property
    def wave(self) -> int:
        return self.spawner.wave

    @property
    def in_wave(self) -> bool:
        return self.spawner.in_progress

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal

    # =========================================================================
    # MUTATION
    # =========================================================================

    def add_attacker(self, attacker: Attacker) -> None:
        self.attackers.append(attacker)
        self.emit(AttackerSpawnedEvent(attacker.kind, attacker.lane, attacker.boost))

    def kill_attacker(self, attacker: Attacker) -> None:
        self.attackers.remove(attacker)
        self.emit(AttackerKilledEvent(attacker.kind, attacker.lane))

    def clear(self) -> None:
        """Cancel all pending callbacks and return to a fresh lawn."""
        self.scheduler.cancel_all()
        self.spawner.reset()
        self.economy.reset()
        self.grid = Grid(self.grid.rows, self.grid.cols)
        self.attackers = []
        self.projectiles = []
        self.pickups = []
        self.explosions = []

        old_phase = self.phase
        self.phase = GamePhase.IDLE
        if old_phase != GamePhase.IDLE:
            self.emit(PhaseChangedEvent(old_phase, GamePhase.IDLE))


# =============================================================================
# PLACEMENT
# =============================================================================

def place_defender(world: World, kind: Union[DefenderKind, str], row: int, col: int) -> Defender:
    """
    Buy and place a defender.

    Raises UnknownDefender for a bad kind, InvalidCell if the tile can't
    take it and InsufficientResource if the balance is short; in every
    case nothing changes.
    """
    try:
        dtype = DEFENDER_TYPES[DefenderKind(kind)]
    except ValueError:
        raise UnknownDefender(kind) from None
    world.grid.check_placeable(row, col)
    world.economy.spend(dtype.cost)

    defender = Defender(dtype, row, col)
    world.grid.place_defender(defender)

    if dtype.behavior == BehaviorClass.BOMB:
        defender.arm_timer = world.scheduler.schedule(
            dtype.arm_delay, lambda: detonate(world, defender), tag=ARM_TAG
        )

    world.emit(PlantPlacedEvent(dtype.kind, row, col, world.balance))
    logger.debug(f"Placed {defender!r}, balance {world.balance}")
    return defender


def remove_defender(world: World, row: int, col: int) -> Optional[Defender]:
    """Shovel a tile. No refund; empty tiles are left alone."""
    defender = world.grid.remove_defender(row, col)
    if defender is not None:
        defender.disarm()
    return defender


def destroy_defender(world: World, defender: Defender) -> None:
    """Remove a defender that was eaten."""
    if world.grid.get_defender(defender.row, defender.col) is defender:
        world.grid.remove_defender(defender.row, defender.col)
    defender.disarm()
    world.emit(DefenderDestroyedEvent(defender.kind, defender.row, defender.col))


def detonate(world: World, bomb: Defender) -> None:
    """Arm timer callback: blow up and clear the bomb's tile."""
    bomb.arm_timer = None
    x, y = cell_center(bomb.row, bomb.col)
    make_explosion(world, x, y, bomb.dtype.blast_radius, bomb.dtype.blast_damage)
    if world.grid.get_defender(bomb.row, bomb.col) is bomb:
        world.grid.remove_defender(bomb.row, bomb.col)


def make_explosion(world: World, x: float, y: float, radius: float, damage: float) -> int:
    """
    Hit every attacker within radius of (x, y) once, right now.
    Returns the number of attackers hit.
    """
    world.explosions.append(Explosion(x, y, max_radius=radius))

    hit = 0
    for attacker in list(world.attackers):
        dx = attacker.x - x
        dy = attacker.y - y
        if dx * dx + dy * dy <= radius * radius:
            attacker.take_damage(damage)
            hit += 1
            if not attacker.is_alive:
                world.kill_attacker(attacker)

    world.emit(ExplosionTriggeredEvent(x, y, radius, hit))
    logger.debug(f"Explosion at ({x:.0f}, {y:.0f}) hit {hit} attackers")
    return hit
