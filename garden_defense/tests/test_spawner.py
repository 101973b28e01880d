"""
Tests for wave composition and the spawner.
"""
import random

import pytest
from garden_defense.gameplay.spawner import (
    Spawner, wave_size, attacker_pool, boost_for, spawn_delay, SPAWN_TAG,
)
from garden_defense.gameplay.scheduler import Scheduler
from garden_defense.gameplay.definitions import AttackerKind
from garden_defense.gameplay.errors import AlreadyInProgress
from garden_defense.gameplay.constants import ATTACKER_SPAWN_X


def make_spawner(waves_total=5, seed=1):
    scheduler = Scheduler()
    spawned = []
    spawner = Spawner(scheduler, random.Random(seed), lanes=5, waves_total=waves_total, on_spawn=spawned.append)
    return spawner, scheduler, spawned


class TestWaveCurve:
    """Tests for the pure wave functions."""

    def test_wave_size_grows(self):
        """Each wave has two more attackers than the last."""
        assert wave_size(1) == 7
        assert wave_size(2) == 9
        assert wave_size(5) == 15

    def test_pool_widens(self):
        """Tougher kinds join the pool in later waves."""
        assert set(attacker_pool(1)) == {AttackerKind.SHAMBLING}
        assert set(attacker_pool(2)) == {AttackerKind.SHAMBLING, AttackerKind.FAST}
        assert AttackerKind.ARMORED in attacker_pool(3)
        assert AttackerKind.TANK not in attacker_pool(3)
        assert set(attacker_pool(4)) == set(AttackerKind)

    def test_boost_blocks_of_five(self):
        """Boost steps up every five spawns and with each wave."""
        assert boost_for(0, 1) == 1
        assert boost_for(4, 1) == 1
        assert boost_for(5, 1) == 2
        assert boost_for(10, 1) == 3
        assert boost_for(0, 2) == pytest.approx(1.3)
        assert boost_for(7, 3) == pytest.approx(2.6)

    def test_spawn_delay(self):
        """Delays grow linearly with index plus bounded jitter."""
        assert spawn_delay(0, 0.0) == pytest.approx(0.6)
        assert spawn_delay(2, 0.0) == pytest.approx(1.5)
        assert spawn_delay(2, 1.0) == pytest.approx(2.1)


class TestSpawner:
    """Tests for Spawner class."""

    def test_start_wave_schedules_spawns(self):
        """Starting a wave schedules one spawn per attacker."""
        spawner, scheduler, spawned = make_spawner()

        plans = spawner.start_wave()

        assert len(plans) == 7
        assert spawner.in_progress
        assert spawner.pending == 7
        assert scheduler.pending_count(SPAWN_TAG) == 7
        assert spawned == []

    def test_plans_respect_wave_rules(self):
        """Planned lanes, kinds, boosts and delays follow the wave curve."""
        spawner, _, _ = make_spawner(seed=42)
        plans = spawner.plan_wave(3)

        assert len(plans) == wave_size(3)
        for plan in plans:
            assert 0 <= plan.lane < 5
            assert plan.kind in attacker_pool(3)
            assert plan.boost == pytest.approx(boost_for(plan.index, 3))
            assert 0.6 + 0.45 * plan.index <= plan.delay < 0.6 + 0.45 * plan.index + 0.6

    def test_cannot_start_twice(self):
        """A second start while a wave is active raises AlreadyInProgress."""
        spawner, scheduler, _ = make_spawner()
        spawner.start_wave()

        with pytest.raises(AlreadyInProgress):
            spawner.start_wave()

        assert scheduler.pending_count(SPAWN_TAG) == 7

    def test_spawns_fire_over_time(self):
        """Scheduled spawns reach on_spawn as simulation time passes."""
        spawner, scheduler, spawned = make_spawner()
        spawner.start_wave()

        scheduler.advance(0.5)
        assert spawned == []

        scheduler.advance(4.0)
        assert len(spawned) == 7
        assert spawner.all_spawned
        for attacker in spawned:
            assert attacker.kind == AttackerKind.SHAMBLING
            assert attacker.x == ATTACKER_SPAWN_X

    def test_wave_clear_needs_all_spawns(self):
        """A wave doesn't clear while spawns are still pending."""
        spawner, scheduler, _ = make_spawner()
        spawner.start_wave()

        assert spawner.check_wave_clear(0) is None
        assert spawner.wave == 1

    def test_wave_clear_needs_no_live_attackers(self):
        """A fully spawned wave doesn't clear while attackers live."""
        spawner, scheduler, _ = make_spawner()
        spawner.start_wave()
        scheduler.advance(10.0)

        assert spawner.check_wave_clear(2) is None
        assert spawner.in_progress

    def test_wave_clear_advances(self):
        """Clearing a wave bumps the wave number and ends the wave."""
        spawner, scheduler, _ = make_spawner()
        spawner.start_wave()
        scheduler.advance(10.0)

        assert spawner.check_wave_clear(0) == 1
        assert spawner.wave == 2
        assert not spawner.in_progress

        # Nothing to clear until the next wave starts
        assert spawner.check_wave_clear(0) is None
        assert spawner.wave == 2

    def test_finished_after_last_wave(self):
        """finished flips once the wave number passes the total."""
        spawner, scheduler, _ = make_spawner(waves_total=1)
        spawner.start_wave()
        scheduler.advance(10.0)
        assert not spawner.finished

        spawner.check_wave_clear(0)
        assert spawner.finished

    def test_reset_cancels_spawns(self):
        """Reset cancels outstanding spawns and rewinds to wave 1."""
        spawner, scheduler, spawned = make_spawner()
        spawner.wave = 3
        spawner.start_wave()

        spawner.reset()
        scheduler.advance(20.0)

        assert spawned == []
        assert spawner.wave == 1
        assert not spawner.in_progress
        assert spawner.pending == 0
