"""
Defender, attacker and pickup definitions.
NO UI DEPENDENCIES.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Dict, Tuple


class BehaviorClass(Enum):
    """What a defender does on each tick."""
    ATTACK = auto()    # fires projectiles down its lane
    SUPPORT = auto()   # generates sun
    BOMB = auto()      # detonates after its arm delay
    BLOCK = auto()     # just soaks up damage


class DefenderKind(Enum):
    """All defenders that can be placed."""
    PEASHOOTER = "peashooter"
    TWINPEA = "twinpea"
    SUNFLOWER = "sunflower"
    CHERRY = "cherry"
    WALLNUT = "wallnut"


class AttackerKind(Enum):
    """All attackers a wave can contain."""
    SHAMBLING = "shambling"
    FAST = "fast"
    ARMORED = "armored"
    TANK = "tank"


@dataclass(frozen=True)
class DefenderType:
    """Static stats for one defender kind."""
    kind: DefenderKind
    cost: int
    max_hp: float
    behavior: BehaviorClass
    fire_interval: float = 0.0    # seconds between shots (ATTACK)
    volley: int = 1               # projectiles per shot (ATTACK)
    sun_interval: float = 0.0     # seconds between payouts (SUPPORT)
    arm_delay: float = 0.0        # seconds until detonation (BOMB)
    blast_radius: float = 0.0
    blast_damage: float = 0.0


@dataclass(frozen=True)
class AttackerType:
    """Static stats for one attacker kind, before wave scaling."""
    kind: AttackerKind
    speed: float         # px per second
    hp: float
    damage: float        # defender hp removed per feed
    feed_interval: float
    color: Tuple[int, int, int]


@dataclass(frozen=True)
class PickupParams:
    """Aerial sun drop parameters."""
    amount: int
    radius: float
    collect_slack: float
    fall_min: float
    fall_max: float
    fall_speed: float
    lifetime: float
    sky_cooldown: Tuple[float, float]


DEFENDER_TYPES: Dict[DefenderKind, DefenderType] = {
    DefenderKind.PEASHOOTER: DefenderType(
        kind=DefenderKind.PEASHOOTER, cost=100, max_hp=5,
        behavior=BehaviorClass.ATTACK, fire_interval=1.4, volley=1
    ),
    DefenderKind.TWINPEA: DefenderType(
        kind=DefenderKind.TWINPEA, cost=175, max_hp=6,
        behavior=BehaviorClass.ATTACK, fire_interval=1.2, volley=2
    ),
    DefenderKind.SUNFLOWER: DefenderType(
        kind=DefenderKind.SUNFLOWER, cost=50, max_hp=4,
        behavior=BehaviorClass.SUPPORT, sun_interval=9.0
    ),
    DefenderKind.CHERRY: DefenderType(
        kind=DefenderKind.CHERRY, cost=150, max_hp=1,
        behavior=BehaviorClass.BOMB, arm_delay=1.0,
        blast_radius=120, blast_damage=999
    ),
    DefenderKind.WALLNUT: DefenderType(
        kind=DefenderKind.WALLNUT, cost=50, max_hp=20,
        behavior=BehaviorClass.BLOCK
    ),
}


ATTACKER_TYPES: Dict[AttackerKind, AttackerType] = {
    AttackerKind.SHAMBLING: AttackerType(
        kind=AttackerKind.SHAMBLING, speed=40.0, hp=6, damage=0.25,
        feed_interval=0.5, color=(255, 107, 107)
    ),
    AttackerKind.FAST: AttackerType(
        kind=AttackerKind.FAST, speed=65.0, hp=4, damage=0.25,
        feed_interval=0.45, color=(255, 159, 110)
    ),
    AttackerKind.ARMORED: AttackerType(
        kind=AttackerKind.ARMORED, speed=34.0, hp=11, damage=0.25,
        feed_interval=0.52, color=(226, 85, 85)
    ),
    AttackerKind.TANK: AttackerType(
        kind=AttackerKind.TANK, speed=28.0, hp=18, damage=0.35,
        feed_interval=0.52, color=(217, 74, 74)
    ),
}


SUN_PICKUP = PickupParams(
    amount=25,
    radius=18,
    collect_slack=8,
    fall_min=220,
    fall_max=440,
    fall_speed=60.0,
    lifetime=12.0,
    sky_cooldown=(7.0, 11.0),
)
