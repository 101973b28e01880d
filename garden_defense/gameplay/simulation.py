"""
The per-tick simulation step.
NO UI DEPENDENCIES.

tick() runs its phases in a fixed order. A pea fired this tick does not
hit until the projectile phase, and an attacker reaching the house ends
the tick on the spot.
"""
import logging

from .constants import FIELD_WIDTH, BOUNDARY_X, PROJECTILE_MUZZLE_X, VOLLEY_SPREAD
from .definitions import BehaviorClass
from .entities import Defender, Projectile, lane_center_y
from .events import (
    GamePhase, PhaseChangedEvent, ShotFiredEvent, HitLandedEvent,
    SunCollectedEvent, SunDroppedEvent, WaveClearedEvent, GameWonEvent, GameLostEvent,
)
from .world import World, destroy_defender

logger = logging.getLogger(__name__)


def tick(world: World, dt: float) -> None:
    """Advance a running world by dt seconds."""
    if world.phase != GamePhase.RUNNING:
        return

    world.scheduler.advance(dt)
    _update_sky(world, dt)
    _update_defenders(world, dt)
    _update_pickups(world, dt)
    _update_explosions(world, dt)
    _update_projectiles(world, dt)
    if not _update_attackers(world, dt):
        return
    _check_wave_clear(world)


def _update_sky(world: World, dt: float) -> None:
    pickup = world.economy.update_sky(dt)
    if pickup is not None:
        world.pickups.append(pickup)
        world.emit(SunDroppedEvent(pickup.x, pickup.rest_y))


def _update_defenders(world: World, dt: float) -> None:
    for defender in list(world.grid.iter_defenders()):
        behavior = defender.behavior
        if behavior == BehaviorClass.ATTACK:
            defender.fire_cooldown += dt
            if defender.fire_cooldown > defender.dtype.fire_interval and _enemy_ahead(world, defender):
                shoot(world, defender)
                defender.fire_cooldown = 0.0
        elif behavior == BehaviorClass.SUPPORT:
            if world.economy.pay_support(defender, dt):
                world.emit(SunCollectedEvent(world.economy.params.amount, world.balance, from_defender=True))
        elif behavior in (BehaviorClass.BLOCK, BehaviorClass.BOMB):
            # Blocks just stand there; bombs go off on their arm timer.
            pass


def _enemy_ahead(world: World, defender: Defender) -> bool:
    return any(
        attacker.lane == defender.row and attacker.x > defender.left_x
        for attacker in world.attackers
    )


def shoot(world: World, defender: Defender) -> None:
    """Fire one volley, spread vertically around the lane center."""
    volley = max(1, defender.dtype.volley)
    base_x = defender.left_x + PROJECTILE_MUZZLE_X
    y = lane_center_y(defender.row)
    for i in range(volley):
        offset = (i - (volley - 1) / 2) * VOLLEY_SPREAD
        world.projectiles.append(Projectile(lane=defender.row, x=base_x, y=y + offset))
    world.emit(ShotFiredEvent(defender.row, defender.col, volley))


def _update_pickups(world: World, dt: float) -> None:
    for pickup in list(world.pickups):
        pickup.update(dt)
        if pickup.expired:
            world.pickups.remove(pickup)


def _update_explosions(world: World, dt: float) -> None:
    for explosion in list(world.explosions):
        explosion.update(dt)
        if explosion.finished:
            world.explosions.remove(explosion)


def _update_projectiles(world: World, dt: float) -> None:
    for projectile in list(world.projectiles):
        projectile.advance(dt)
        # First lane match in list order, not the nearest attacker.
        target = next(
            (a for a in world.attackers if a.lane == projectile.lane and a.reached(projectile.x)),
            None
        )
        if target is not None:
            target.take_damage(projectile.damage)
            world.projectiles.remove(projectile)
            world.emit(HitLandedEvent(projectile.lane, projectile.x, projectile.damage))
        elif projectile.x > FIELD_WIDTH:
            world.projectiles.remove(projectile)


def _update_attackers(world: World, dt: float) -> bool:
    """
    Move or feed every attacker and cull the dead.
    Returns False if an attacker broke through and the game ended.
    """
    for attacker in list(world.attackers):
        col = attacker.front_col
        defender = world.grid.get_defender(attacker.lane, col)
        if defender is not None:
            if attacker.feed(defender, dt) and not defender.is_alive:
                destroy_defender(world, defender)
        else:
            attacker.advance(dt)

        if not attacker.is_alive:
            world.kill_attacker(attacker)
            continue
        if attacker.x < BOUNDARY_X:
            _lose(world, attacker.lane)
            return False
    return True


def _check_wave_clear(world: World) -> None:
    cleared = world.spawner.check_wave_clear(len(world.attackers))
    if cleared is None:
        return

    world.emit(WaveClearedEvent(cleared))
    if world.spawner.finished:
        _win(world)


def _win(world: World) -> None:
    old_phase = world.phase
    world.phase = GamePhase.WON
    world.emit(PhaseChangedEvent(old_phase, world.phase))
    world.emit(GameWonEvent(world.spawner.waves_total))
    logger.info(f"All {world.spawner.waves_total} waves survived")


def _lose(world: World, lane: int) -> None:
    old_phase = world.phase
    world.phase = GamePhase.LOST
    world.emit(PhaseChangedEvent(old_phase, world.phase))
    world.emit(GameLostEvent(lane, world.wave))
    logger.info(f"Attacker broke through lane {lane} during wave {world.wave}")
