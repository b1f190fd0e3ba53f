"""
pizzasplit — Billing engine for shared group orders

Several people order together (one pizza service, one bill). pizzasplit keeps
one ledger per participant and answers: what does the order cost, how much tip
was given, and who gets change or still has to pay.

================================================================================
QUICK START
================================================================================

    from pizzasplit import Money, Order, EnoughInTotal, UnderpaidInTotal

    order = Order(manager_id="anna")
    order.add_participant("anna")
    order.add_participant("ben")

    order.add_meal_for_participant("anna", "03", "large", Money.of(7, 50))
    order.add_meal_for_participant("ben", "12", "small", Money.of(5, 20))

    order.get_participant("anna").set_paid(Money.of(10))
    order.get_participant("ben").set_paid(Money.of(5))

    result = order.calculate_total_change()
    if isinstance(result, EnoughInTotal):
        # the table has enough, but result.paid_less owe the others
        ...
    elif isinstance(result, UnderpaidInTotal):
        # collect result.underpaid more
        ...
    else:
        # result is the change for the group
        ...

All amounts are exact integer cents. Nothing here is thread-safe: use one
Order per group order and serialize access to it.

================================================================================
"""

from .config import Settings, configure_logging
from .errors import (
    ArithmeticUnderflow,
    CountMismatch,
    InvalidAmount,
    InvalidStatusTransition,
    NegativePriceBuilt,
    NotFound,
    ParticipantNotInOrder,
    PizzaSplitError,
)
from .ids import IdProvider
from .meal import Meal, MealBuilder, MealFactory, Special
from .meals import ChangeResult, Meals, Underpaid
from .money import Money
from .order import (
    EnoughInTotal,
    Order,
    OrderStatus,
    TotalChangeResult,
    UnderpaidInTotal,
)
from .participants import Participant, ParticipantDirectory

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Money
    "Money",
    # Line items
    "Special",
    "Meal",
    "MealFactory",
    "MealBuilder",
    "IdProvider",
    # Ledgers
    "Meals",
    "Underpaid",
    "ChangeResult",
    "Order",
    "OrderStatus",
    "EnoughInTotal",
    "UnderpaidInTotal",
    "TotalChangeResult",
    "Participant",
    "ParticipantDirectory",
    # Config
    "Settings",
    "configure_logging",
    # Errors
    "PizzaSplitError",
    "ArithmeticUnderflow",
    "InvalidAmount",
    "NotFound",
    "ParticipantNotInOrder",
    "CountMismatch",
    "NegativePriceBuilt",
    "InvalidStatusTransition",
]
