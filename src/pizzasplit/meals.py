"""
meals.py — One participant's ledger within a group order

A Meals ledger holds what a participant chose, what they handed over and the
tip they want to give. calculate_change() compares the two sides; a
participant who paid too little is a normal outcome at the end of a group
order, so it is returned as an Underpaid value instead of raised.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable, Iterator, Optional, Union
import logging

from .meal import Meal
from .money import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Underpaid:
    """The participant still owes this amount."""
    missing: Money

    def __str__(self) -> str:
        return f"Underpaid by {self.missing}"


ChangeResult = Union[Money, Underpaid]


class Meals:
    """
    Ledger of a single participant.

    INVARIANTS:
    1. owner_id never changes after construction
    2. meals are keyed by their id; at most one meal per id
    3. paid and tip start at zero and are set independently

    set_paid() and set_tip() OVERWRITE the previous value. Calling
    set_paid() twice records the second amount, it does not add them up.
    """

    def __init__(self, owner_id: Hashable):
        self._owner_id = owner_id
        self._meals: dict[int, Meal] = {}
        self._ready = False
        self._paid = Money.zero()
        self._tip = Money.zero()

    @property
    def owner_id(self) -> Hashable:
        return self._owner_id

    @property
    def paid(self) -> Money:
        return self._paid

    @property
    def tip(self) -> Money:
        return self._tip

    @property
    def ready(self) -> bool:
        """Whether the participant has finished choosing."""
        return self._ready

    def mark_ready(self, ready: bool = True) -> None:
        self._ready = ready

    # -------------------------------------------------------------------------
    # Meals
    # -------------------------------------------------------------------------

    def add_meal(self, meal: Meal) -> Meal:
        """Store the meal under its id (replacing one with the same id) and return it."""
        self._meals[meal.id] = meal
        return meal

    def get_meal(self, meal_id: int) -> Optional[Meal]:
        return self._meals.get(meal_id)

    def remove_meal_by_id(self, meal_id: int) -> Optional[Meal]:
        """Remove and return the meal, or None if there is no meal with that id."""
        return self._meals.pop(meal_id, None)

    def __len__(self) -> int:
        return len(self._meals)

    def __contains__(self, meal_id: object) -> bool:
        return meal_id in self._meals

    def __iter__(self) -> Iterator[Meal]:
        return iter(list(self._meals.values()))

    # -------------------------------------------------------------------------
    # Payment
    # -------------------------------------------------------------------------

    def set_paid(self, paid: Money) -> None:
        self._paid = paid

    def set_tip(self, tip: Money) -> None:
        self._tip = tip

    def calculate_total_price(self) -> Money:
        return sum((meal.price for meal in self._meals.values()), Money.zero())

    def calculate_owed(self) -> Money:
        """Total price plus tip."""
        return self.calculate_total_price() + self._tip

    def calculate_change(self) -> ChangeResult:
        """
        Change to hand back, or Underpaid with the missing amount.

        Returns:
            Money: paid - (total price + tip), possibly zero
            Underpaid: if paid < total price + tip
        """
        owed = self.calculate_owed()
        if self._paid < owed:
            missing = owed - self._paid
            logger.debug("participant %r underpaid by %s", self._owner_id, missing)
            return Underpaid(missing)
        return self._paid - owed

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Meals):
            return NotImplemented
        return (
            self._owner_id == other._owner_id
            and self._meals == other._meals
            and self._ready == other._ready
            and self._paid == other._paid
            and self._tip == other._tip
        )

    def __repr__(self) -> str:
        return (
            f"Meals(owner={self._owner_id!r}, meals={len(self._meals)}, "
            f"paid={self._paid}, tip={self._tip}, ready={self._ready})"
        )
