"""
order.py — The group order aggregate and bill reconciliation

================================================================================
RECONCILIATION
================================================================================

Every participant's ledger is asked for its change. Participants who paid at
least what they owe contribute change, the others contribute a missing
amount and end up in paid_less. Three outcomes follow:

    total_underpaid == 0               -> Money (change for the group)
    total_change > total_underpaid     -> EnoughInTotal
    otherwise                          -> UnderpaidInTotal

EnoughInTotal means the money on the table covers the bill, but the people in
paid_less owe the ones who overpaid. UnderpaidInTotal means the group itself
is short and more money has to be collected. Both name paid_less, because
the resolution depends on who still has to pay, not on a signed total.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Iterator, Optional, Union
import logging

from .config import Settings
from .errors import InvalidStatusTransition, ParticipantNotInOrder
from .meal import Meal, MealBuilder, MealFactory
from .meals import Meals, Underpaid
from .money import Money

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    """Linear lifecycle label: OPEN -> ORDERING -> ORDERED -> DELIVERED."""
    OPEN = "Open"
    ORDERING = "Ordering"
    ORDERED = "Ordered"
    DELIVERED = "Delivered"

    def next_status(self) -> Optional[OrderStatus]:
        members = list(OrderStatus)
        index = members.index(self)
        return members[index + 1] if index + 1 < len(members) else None


def _participant_sort_key(participant_id) -> tuple:
    # integer ids in numeric order, anything else by its text
    if isinstance(participant_id, int):
        return (0, participant_id, "")
    return (1, 0, str(participant_id))


def _format_participants(participant_ids: frozenset) -> str:
    return ", ".join(str(p) for p in sorted(participant_ids, key=_participant_sort_key))


@dataclass(frozen=True)
class EnoughInTotal:
    """The group has enough money, but paid_less still owe the others."""
    change: Money
    paid_less: frozenset

    def __str__(self) -> str:
        return (
            f"Enough money in total ({self.change} change), "
            f"but these participants still owe the group: {_format_participants(self.paid_less)}"
        )


@dataclass(frozen=True)
class UnderpaidInTotal:
    """The group as a whole is short by underpaid."""
    underpaid: Money
    paid_less: frozenset

    def __str__(self) -> str:
        return (
            f"The group is short by {self.underpaid}; "
            f"underpaid by: {_format_participants(self.paid_less)}"
        )


TotalChangeResult = Union[Money, EnoughInTotal, UnderpaidInTotal]


class Order:
    """
    A shared order, created by a manager, with one ledger per participant.

    INVARIANTS:
    1. Only explicitly added participants have a ledger; operations on any
       other id raise ParticipantNotInOrder
    2. All meals are created by the order's single MealFactory, so meal ids
       are unique across all participants
    3. Totals can be queried at any time, in any status
    """

    def __init__(self, manager_id: Hashable, settings: Optional[Settings] = None):
        self.settings = settings or Settings()
        self._manager_id = manager_id
        self._ledgers: dict[Hashable, Meals] = {}
        self._meal_factory = MealFactory(
            base=self.settings.meal_id_base,
            special_id_base=self.settings.special_id_base,
        )
        self._status = OrderStatus.OPEN
        self._ordered_at: Optional[str] = None

    @property
    def manager_id(self) -> Hashable:
        return self._manager_id

    # -------------------------------------------------------------------------
    # Participants
    # -------------------------------------------------------------------------

    def add_participant(self, participant_id: Hashable) -> Meals:
        """
        Create an empty ledger for the participant and return it.

        Adding a participant twice returns the existing ledger untouched.
        """
        ledger = self._ledgers.get(participant_id)
        if ledger is None:
            ledger = Meals(participant_id)
            self._ledgers[participant_id] = ledger
            logger.debug("participant %r joined order of %r", participant_id, self._manager_id)
        return ledger

    def get_participant(self, participant_id: Hashable) -> Meals:
        try:
            return self._ledgers[participant_id]
        except KeyError:
            raise ParticipantNotInOrder(participant_id) from None

    @property
    def participants(self) -> tuple:
        return tuple(self._ledgers)

    def ledgers(self) -> Iterator[Meals]:
        return iter(list(self._ledgers.values()))

    def __contains__(self, participant_id: object) -> bool:
        return participant_id in self._ledgers

    def __len__(self) -> int:
        return len(self._ledgers)

    def add_meal_for_participant(
        self,
        participant_id: Hashable,
        code: str,
        variety: str,
        price: Money,
    ) -> Meal:
        """
        Create a meal through the order's factory and add it to the participant's ledger.

        Raises:
            ParticipantNotInOrder: if the participant was never added
        """
        ledger = self.get_participant(participant_id)
        meal = self._meal_factory.create(code, variety, price)
        return ledger.add_meal(meal)

    def meal_builder(self) -> MealBuilder:
        """A builder whose meals draw their ids from this order's factory."""
        return MealBuilder(self._meal_factory)

    # -------------------------------------------------------------------------
    # Totals
    # -------------------------------------------------------------------------

    def calculate_total_price(self) -> Money:
        total = sum((ledger.calculate_total_price() for ledger in self._ledgers.values()), Money.zero())
        logger.debug("total price=%s over %d participants", total, len(self._ledgers))
        return total

    def calculate_total_tip(self) -> Money:
        return sum((ledger.tip for ledger in self._ledgers.values()), Money.zero())

    def calculate_total_change(self) -> TotalChangeResult:
        """
        Reconcile what was paid against what is owed, for the whole group.

        Returns:
            Money: everybody covered their own share; the summed change
            EnoughInTotal: change minus shortfall is left over, paid_less
                must settle with the others
            UnderpaidInTotal: shortfall minus change is missing from the
                group; paid_less names who paid too little
        """
        total_change = Money.zero()
        total_underpaid = Money.zero()
        paid_less = set()

        for participant_id, ledger in self._ledgers.items():
            result = ledger.calculate_change()
            if isinstance(result, Underpaid):
                total_underpaid = total_underpaid + result.missing
                paid_less.add(participant_id)
            else:
                total_change = total_change + result

        if total_underpaid.is_zero():
            logger.debug("all participants paid enough, total change=%s", total_change)
            return total_change

        if total_change > total_underpaid:
            outcome = EnoughInTotal(total_change - total_underpaid, frozenset(paid_less))
        else:
            outcome = UnderpaidInTotal(total_underpaid - total_change, frozenset(paid_less))
        logger.info("reconciliation of order of %r: %s", self._manager_id, outcome)
        return outcome

    # -------------------------------------------------------------------------
    # Status
    # -------------------------------------------------------------------------

    @property
    def status(self) -> OrderStatus:
        return self._status

    @property
    def ordered_at(self) -> Optional[str]:
        return self._ordered_at

    @property
    def status_label(self) -> str:
        if self._status is OrderStatus.ORDERED:
            return f"{self._status.value}({self._ordered_at})"
        return self._status.value

    def _advance(self, target: OrderStatus) -> None:
        if self._status.next_status() is not target:
            raise InvalidStatusTransition(
                f"Cannot go from {self._status.value} to {target.value}"
            )
        logger.info("order of %r: %s -> %s", self._manager_id, self._status.value, target.value)
        self._status = target

    def start_ordering(self) -> None:
        self._advance(OrderStatus.ORDERING)

    def mark_ordered(self, at: str) -> None:
        """at is a free-form time label, e.g. "12:15"."""
        self._advance(OrderStatus.ORDERED)
        self._ordered_at = at

    def mark_delivered(self) -> None:
        self._advance(OrderStatus.DELIVERED)

    def __repr__(self) -> str:
        return (
            f"Order(manager={self._manager_id!r}, participants={len(self._ledgers)}, "
            f"status={self.status_label})"
        )
