"""
Wave spawner: composition, scaling and spawn scheduling.
NO UI DEPENDENCIES.
"""
import logging
import random
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from .definitions import AttackerKind
from .entities import Attacker
from .errors import AlreadyInProgress
from .scheduler import Scheduler, ScheduledCall
from .constants import (
    WAVE_BASE_COUNT, WAVE_COUNT_PER_WAVE, SPAWN_BASE_DELAY, SPAWN_INTERVAL,
    SPAWN_JITTER, BOOST_BLOCK_SIZE, BOOST_PER_WAVE,
)

logger = logging.getLogger(__name__)

SPAWN_TAG = "spawn"


def wave_size(wave: int) -> int:
    """Number of attackers in a wave."""
    return WAVE_BASE_COUNT + wave * WAVE_COUNT_PER_WAVE


def attacker_pool(wave: int) -> Sequence[AttackerKind]:
    """Kinds that may appear in a wave. Later waves add tougher kinds."""
    if wave >= 4:
        return (AttackerKind.FAST, AttackerKind.ARMORED, AttackerKind.TANK, AttackerKind.SHAMBLING)
    if wave >= 3:
        return (AttackerKind.FAST, AttackerKind.ARMORED, AttackerKind.SHAMBLING)
    if wave >= 2:
        return (AttackerKind.FAST, AttackerKind.SHAMBLING)
    return (AttackerKind.SHAMBLING,)


def boost_for(index: int, wave: int) -> float:
    """Scaling multiplier: +1 per block of five spawns, +0.3 per wave."""
    return 1 + index // BOOST_BLOCK_SIZE + (wave - 1) * BOOST_PER_WAVE


def spawn_delay(index: int, jitter: float) -> float:
    """Seconds after wave start; jitter is a fraction in [0, 1)."""
    return SPAWN_BASE_DELAY + index * SPAWN_INTERVAL + jitter * SPAWN_JITTER


@dataclass(frozen=True)
class SpawnPlan:
    """One scheduled attacker."""
    index: int
    lane: int
    kind: AttackerKind
    boost: float
    delay: float


class Spawner:
    """
    Owns the wave counter and the current wave's spawn schedule.

    on_spawn receives each Attacker as its scheduled time arrives.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        rng: random.Random,
        lanes: int,
        waves_total: int,
        on_spawn: Callable[[Attacker], None],
    ):
        self.scheduler = scheduler
        self.lanes = lanes
        self.waves_total = waves_total
        self._rng = rng
        self._on_spawn = on_spawn

        self.wave: int = 1
        self.in_progress: bool = False
        self._spawns: List[ScheduledCall] = []

    @property
    def pending(self) -> int:
        """Spawns scheduled for this wave that have not fired yet."""
        return sum(1 for call in self._spawns if call.pending)

    @property
    def all_spawned(self) -> bool:
        return self.pending == 0

    @property
    def finished(self) -> bool:
        """True once every wave has been cleared."""
        return self.wave > self.waves_total

    def plan_wave(self, wave: int) -> List[SpawnPlan]:
        """Roll lanes, kinds and timings for a wave."""
        pool = attacker_pool(wave)
        plans = []
        for i in range(wave_size(wave)):
            delay = spawn_delay(i, self._rng.random())
            lane = self._rng.randrange(self.lanes)
            kind = self._rng.choice(pool)
            plans.append(SpawnPlan(i, lane, kind, boost_for(i, wave), delay))
        return plans

    def start_wave(self) -> List[SpawnPlan]:
        """
        Schedule every spawn of the current wave.
        Raises AlreadyInProgress if the previous wave is still going.
        """
        if self.in_progress:
            raise AlreadyInProgress(self.wave)

        plans = self.plan_wave(self.wave)
        self.in_progress = True
        self._spawns = [
            self.scheduler.schedule(plan.delay, self._make_spawn(plan), tag=SPAWN_TAG)
            for plan in plans
        ]
        logger.info(f"Wave {self.wave} started with {len(plans)} attackers")
        return plans

    def check_wave_clear(self, live_attackers: int) -> Optional[int]:
        """
        Close the current wave if it has fully spawned and been wiped out.
        Returns the number of the wave that was cleared, or None.
        """
        if not self.in_progress or live_attackers > 0 or not self.all_spawned:
            return None

        cleared = self.wave
        self.in_progress = False
        self._spawns = []
        self.wave += 1
        logger.info(f"Wave {cleared} cleared")
        return cleared

    def reset(self) -> None:
        for call in self._spawns:
            call.cancel()
        self._spawns = []
        self.wave = 1
        self.in_progress = False

    def _make_spawn(self, plan: SpawnPlan) -> Callable[[], None]:
        def spawn() -> None:
            attacker = Attacker.spawn(plan.kind, plan.lane, plan.boost)
            logger.debug(f"Spawned {attacker!r} (boost {plan.boost:.2f})")
            self._on_spawn(attacker)
        return spawn
