"""
Sun economy: balance, passive income, aerial drops and spending.
NO UI DEPENDENCIES.
"""
import logging
import random
from typing import List, Optional

from .definitions import PickupParams, SUN_PICKUP
from .entities import Defender, Pickup
from .errors import InsufficientResource
from .constants import FIELD_WIDTH

logger = logging.getLogger(__name__)


class Economy:
    """
    Tracks the sun balance.

    spend() is the only way sun leaves the balance, and it refuses
    rather than going negative.
    """

    def __init__(self, starting_balance: int, rng: random.Random, params: PickupParams = SUN_PICKUP):
        self.starting_balance = starting_balance
        self.params = params
        self._rng = rng
        self.balance: int = starting_balance
        self.sky_timer: float = 0.0
        self.next_drop: float = self._draw_drop_delay()

    def reset(self) -> None:
        self.balance = self.starting_balance
        self.sky_timer = 0.0
        self.next_drop = self._draw_drop_delay()

    # =========================================================================
    # BALANCE
    # =========================================================================

    def can_afford(self, cost: int) -> bool:
        return self.balance >= cost

    def spend(self, cost: int) -> None:
        """Debit cost, or raise InsufficientResource and leave balance alone."""
        if not self.can_afford(cost):
            raise InsufficientResource(cost, self.balance)
        self.balance -= cost

    def credit(self, amount: int) -> int:
        self.balance += amount
        return self.balance

    # =========================================================================
    # INCOME
    # =========================================================================

    def pay_support(self, defender: Defender, dt: float) -> bool:
        """
        Advance a support defender's payout timer.
        Pays at most one interval's worth per call; the timer resets
        rather than carrying the overshoot.
        """
        defender.sun_cooldown += dt
        if defender.sun_cooldown > defender.dtype.sun_interval:
            self.credit(self.params.amount)
            defender.sun_cooldown = 0.0
            logger.debug(f"{defender.kind.value} at ({defender.row}, {defender.col}) produced sun")
            return True
        return False

    def update_sky(self, dt: float) -> Optional[Pickup]:
        """Returns a freshly dropped pickup once the drop timer runs out."""
        self.sky_timer += dt
        if self.sky_timer <= self.next_drop:
            return None

        self.sky_timer = 0.0
        self.next_drop = self._draw_drop_delay()
        return self._make_sky_pickup()

    def collect_at(self, pickups: List[Pickup], x: float, y: float) -> Optional[Pickup]:
        """
        Collect the most recently dropped pickup under (x, y).
        Removes it from pickups and credits its amount.
        """
        for i in range(len(pickups) - 1, -1, -1):
            pickup = pickups[i]
            if pickup.contains(x, y):
                del pickups[i]
                self.credit(pickup.amount)
                return pickup
        return None

    def _draw_drop_delay(self) -> float:
        low, high = self.params.sky_cooldown
        return self._rng.uniform(low, high)

    def _make_sky_pickup(self) -> Pickup:
        margin = 20
        x = self._rng.uniform(margin, FIELD_WIDTH - margin)
        rest_y = self._rng.uniform(self.params.fall_min, self.params.fall_max)
        return Pickup.from_params(self.params, x, rest_y)
