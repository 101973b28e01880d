"""
Gameplay events for UI and audio collaborators to react to.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from enum import Enum, auto

from .definitions import AttackerKind, DefenderKind


class GamePhase(Enum):
    """Current phase of the session."""
    IDLE = auto()      # Building before the first Start
    RUNNING = auto()   # Simulation advancing
    PAUSED = auto()    # Frozen, world untouched
    WON = auto()       # Survived every wave
    LOST = auto()      # An attacker reached the house

    @property
    def is_terminal(self) -> bool:
        return self in (GamePhase.WON, GamePhase.LOST)


@dataclass
class GameEvent:
    """An event that occurred during gameplay (for UI to react to)."""
    pass


@dataclass
class PhaseChangedEvent(GameEvent):
    old_phase: GamePhase
    new_phase: GamePhase


@dataclass
class ShotFiredEvent(GameEvent):
    row: int
    col: int
    volley: int


@dataclass
class HitLandedEvent(GameEvent):
    lane: int
    x: float
    damage: float


@dataclass
class SunCollectedEvent(GameEvent):
    amount: int
    balance: int
    from_defender: bool = False


@dataclass
class SunDroppedEvent(GameEvent):
    x: float
    rest_y: float


@dataclass
class PlantPlacedEvent(GameEvent):
    kind: DefenderKind
    row: int
    col: int
    balance: int


@dataclass
class PlacementRejectedEvent(GameEvent):
    """A placement was refused. reason is a short user-facing message."""
    row: int
    col: int
    reason: str


@dataclass
class DefenderDestroyedEvent(GameEvent):
    kind: DefenderKind
    row: int
    col: int


@dataclass
class ExplosionTriggeredEvent(GameEvent):
    x: float
    y: float
    radius: float
    attackers_hit: int


@dataclass
class AttackerSpawnedEvent(GameEvent):
    kind: AttackerKind
    lane: int
    boost: float


@dataclass
class AttackerKilledEvent(GameEvent):
    kind: AttackerKind
    lane: int


@dataclass
class WaveStartedEvent(GameEvent):
    wave: int
    attacker_count: int


@dataclass
class WaveClearedEvent(GameEvent):
    wave: int


@dataclass
class GameWonEvent(GameEvent):
    waves_survived: int


@dataclass
class GameLostEvent(GameEvent):
    lane: int
    wave: int
