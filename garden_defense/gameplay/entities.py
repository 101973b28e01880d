"""
Live entities: Defender, Attacker, Projectile, Pickup, Explosion.
NO UI DEPENDENCIES.
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from .definitions import (
    AttackerKind, AttackerType, BehaviorClass, DefenderKind, DefenderType,
    PickupParams, ATTACKER_TYPES,
)
from .scheduler import ScheduledCall
from .constants import (
    TILE_W, TILE_H, ATTACKER_SPAWN_X, ATTACKER_FEED_OFFSET, ATTACKER_HIT_OFFSET,
    HP_SCALE_PER_BOOST, SPEED_SCALE_PER_BOOST, PROJECTILE_SPEED,
    PROJECTILE_DAMAGE, EXPLOSION_START_RADIUS, EXPLOSION_GROWTH, EXPLOSION_DURATION,
)


def lane_center_y(row: int) -> float:
    """Vertical pixel center of a lane."""
    return row * TILE_H + TILE_H / 2


def cell_center(row: int, col: int) -> Tuple[float, float]:
    """Pixel center (x, y) of a grid cell."""
    return (col * TILE_W + TILE_W / 2, lane_center_y(row))


class Defender:
    """
    A placed defender. Owned by the grid cell it sits in.
    """

    def __init__(self, dtype: DefenderType, row: int, col: int):
        self.dtype = dtype
        self.row = row
        self.col = col
        self.hp: float = dtype.max_hp
        self.fire_cooldown: float = 0.0
        self.sun_cooldown: float = 0.0
        self.arm_timer: Optional[ScheduledCall] = None  # BOMB only

    @property
    def kind(self) -> DefenderKind:
        return self.dtype.kind

    @property
    def behavior(self) -> BehaviorClass:
        return self.dtype.behavior

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def hp_ratio(self) -> float:
        return max(0.0, self.hp / self.dtype.max_hp)

    @property
    def left_x(self) -> float:
        """Left pixel edge of this defender's tile."""
        return self.col * TILE_W

    def take_damage(self, amount: float) -> None:
        self.hp -= amount

    def disarm(self) -> None:
        """Cancel a pending detonation, if any."""
        if self.arm_timer is not None:
            self.arm_timer.cancel()
            self.arm_timer = None

    def __repr__(self) -> str:
        return f"Defender({self.kind.value}, r={self.row}, c={self.col}, hp={self.hp})"


class Attacker:
    """
    An attacker walking left along one lane.

    boost is fixed at spawn and scales health and speed only.
    """

    def __init__(self, atype: AttackerType, lane: int, boost: float = 1.0, x: float = ATTACKER_SPAWN_X):
        self.atype = atype
        self.lane = lane
        self.boost = boost
        self.x: float = x
        self.y: float = lane_center_y(lane)
        self.hp: float = atype.hp * (1 + HP_SCALE_PER_BOOST * (boost - 1))
        self.max_hp: float = self.hp
        self.speed: float = atype.speed * (1 + SPEED_SCALE_PER_BOOST * (boost - 1))
        self.feed_timer: float = 0.0

    @classmethod
    def spawn(cls, kind: AttackerKind, lane: int, boost: float = 1.0) -> 'Attacker':
        return cls(ATTACKER_TYPES[kind], lane, boost)

    @property
    def kind(self) -> AttackerKind:
        return self.atype.kind

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    @property
    def front_col(self) -> int:
        """Column of the cell this attacker would be eating."""
        return int((self.x - ATTACKER_FEED_OFFSET) // TILE_W)

    def reached(self, x: float) -> bool:
        """True once this attacker's leading edge is left of x."""
        return self.x - ATTACKER_HIT_OFFSET < x

    def take_damage(self, amount: float) -> None:
        self.hp -= amount

    def advance(self, dt: float) -> None:
        self.x -= self.speed * dt

    def feed(self, defender: Defender, dt: float) -> bool:
        """
        Accumulate feeding time against defender.
        Returns True if a bite landed this call.
        """
        self.feed_timer += dt
        if self.feed_timer > self.atype.feed_interval:
            defender.take_damage(self.atype.damage)
            self.feed_timer = 0.0
            return True
        return False

    def __repr__(self) -> str:
        return f"Attacker({self.kind.value}, lane={self.lane}, x={self.x:.1f}, hp={self.hp:.2f})"


@dataclass
class Projectile:
    """A pea travelling right along its lane."""
    lane: int
    x: float
    y: float
    velocity: float = PROJECTILE_SPEED
    damage: float = PROJECTILE_DAMAGE

    def advance(self, dt: float) -> None:
        self.x += self.velocity * dt


@dataclass
class Pickup:
    """A sun drop falling to rest_y, then idling until collected or expired."""
    x: float
    y: float
    rest_y: float
    amount: int
    radius: float
    life: float
    fall_speed: float
    collect_slack: float = 0.0

    @classmethod
    def from_params(cls, params: PickupParams, x: float, rest_y: float) -> 'Pickup':
        return cls(
            x=x,
            y=-20.0,
            rest_y=rest_y,
            amount=params.amount,
            radius=params.radius,
            life=params.lifetime,
            fall_speed=params.fall_speed,
            collect_slack=params.collect_slack,
        )

    @property
    def expired(self) -> bool:
        return self.life <= 0

    @property
    def resting(self) -> bool:
        return self.y >= self.rest_y

    def update(self, dt: float) -> None:
        self.life -= dt
        if self.y < self.rest_y:
            self.y = min(self.rest_y, self.y + self.fall_speed * dt)

    def contains(self, px: float, py: float) -> bool:
        """Circular hit-test, with a little slack for clumsy clicks."""
        dx = self.x - px
        dy = self.y - py
        reach = self.radius + self.collect_slack
        return dx * dx + dy * dy <= reach * reach


@dataclass
class Explosion:
    """
    Expanding blast ring. Damage was already dealt when it was created;
    this only tracks the visual.
    """
    x: float
    y: float
    max_radius: float
    radius: float = EXPLOSION_START_RADIUS
    elapsed: float = 0.0
    duration: float = EXPLOSION_DURATION

    @property
    def finished(self) -> bool:
        return self.elapsed > self.duration

    def update(self, dt: float) -> None:
        self.elapsed += dt
        self.radius = min(self.max_radius, self.radius + EXPLOSION_GROWTH * dt)
