"""
errors.py — Exception hierarchy for pizzasplit

Only contract violations and invalid input are exceptions. The expected
outcomes of bill reconciliation (someone underpaid, the group is short) are
returned as values, see meals.Underpaid and order.EnoughInTotal /
order.UnderpaidInTotal.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Hashable

if TYPE_CHECKING:
    from .money import Money


class PizzaSplitError(Exception):
    """Base class for every error raised by pizzasplit."""


class ArithmeticUnderflow(PizzaSplitError, ArithmeticError):
    """Money subtraction would have produced a negative amount."""

    def __init__(self, minuend: Money, subtrahend: Money):
        self.minuend = minuend
        self.subtrahend = subtrahend
        super().__init__(f"Cannot subtract {subtrahend} from {minuend}: result would be negative")


class InvalidAmount(PizzaSplitError, ValueError):
    """User-entered amount could not be parsed into Money."""


class NotFound(PizzaSplitError, KeyError):
    """No entry with the given id."""

    def __init__(self, kind: str, entry_id: int):
        self.kind = kind
        self.entry_id = entry_id
        super().__init__(f"{kind} {entry_id} not found")

    def __str__(self) -> str:
        return self.args[0]


class ParticipantNotInOrder(PizzaSplitError, KeyError):
    """The participant was never added to the order."""

    def __init__(self, participant_id: Hashable):
        self.participant_id = participant_id
        super().__init__(f"Participant {participant_id!r} is not part of this order")

    def __str__(self) -> str:
        return self.args[0]


class CountMismatch(PizzaSplitError, ValueError):
    """
    Parallel lists of special descriptions and prices differ in length.

    extra_count is how many entries one side has in excess;
    on_description_side tells which side that is.
    """

    def __init__(self, extra_count: int, on_description_side: bool):
        self.extra_count = extra_count
        self.on_description_side = on_description_side
        side = "descriptions" if on_description_side else "prices"
        super().__init__(f"{extra_count} more {side} than matching entries on the other side")


class NegativePriceBuilt(PizzaSplitError, ValueError):
    """Subtracting from a meal under construction would make its price negative."""

    def __init__(self, amount: Money):
        self.amount = amount
        super().__init__(f"Price would be negative by {amount}")


class InvalidStatusTransition(PizzaSplitError, ValueError):
    """Order status can only move forward one step at a time."""
