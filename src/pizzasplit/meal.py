"""
meal.py — Line items of a group order

A Meal is one priced entry from the menu ("03", "large", 5,50€) plus any
number of Specials (extra cheese, no onions). Meal ids come from a
MealFactory, special ids from a generator owned by the meal itself, so both
are unique within their owner and never change after creation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Sequence
import logging

from .errors import CountMismatch, NegativePriceBuilt, NotFound
from .ids import IdProvider
from .money import Money

logger = logging.getLogger(__name__)


@dataclass
class Special:
    """An add-on to a meal. The description may be edited, the id may not."""
    _id: int
    description: str

    @property
    def id(self) -> int:
        return self._id


@dataclass
class Meal:
    """
    A menu entry chosen by a participant.

    code is the number on the menu, variety the size or kind ("large",
    "rice noodles"). Equality compares everything except the internal
    special-id generator.
    """
    _id: int
    code: str
    variety: str
    price: Money
    _specials: dict[int, Special] = field(default_factory=dict)
    _special_ids: IdProvider = field(default_factory=IdProvider, compare=False, repr=False)

    @property
    def id(self) -> int:
        return self._id

    @property
    def specials(self) -> Mapping[int, Special]:
        """Read-only view, keyed by special id."""
        return MappingProxyType(self._specials)

    def add_special(self, description: str) -> Special:
        """
        Attach a new special and return it.

        The returned object is the stored one: changing its description
        changes the meal's special.
        """
        special = Special(self._special_ids.next(), description)
        self._specials[special.id] = special
        return special

    def get_special(self, special_id: int) -> Optional[Special]:
        return self._specials.get(special_id)

    def remove_special(self, special_id: int) -> Special:
        """
        Remove a special by id and return it.

        Raises:
            NotFound: if the meal has no special with that id
        """
        try:
            return self._specials.pop(special_id)
        except KeyError:
            raise NotFound("Special", special_id) from None


class MealFactory:
    """Creates meals with ids that are unique for the lifetime of the factory."""

    def __init__(self, base: int = 0, special_id_base: int = 0):
        self._ids = IdProvider(base)
        self._special_id_base = special_id_base

    def create(self, code: str, variety: str, price: Money) -> Meal:
        meal = Meal(
            self._ids.next(),
            code,
            variety,
            price,
            _special_ids=IdProvider(self._special_id_base),
        )
        logger.debug("created meal id=%s code=%s variety=%s price=%s", meal.id, code, variety, price)
        return meal


class MealBuilder:
    """
    Incremental construction of a meal, e.g. while someone types in a menu.

    Prices accumulate: set_price() sets the base, add_price() and
    subtract_price() adjust the running total. Mistakes are reported as
    exceptions the caller can show to the user and recover from; a failed
    call leaves the builder unchanged.

    USAGE:
        meal = (
            MealBuilder(factory)
            .set_code("03")
            .set_variety("large")
            .set_price(Money.of(5, 50))
            .add_special_with_price("cheese crust", Money.of(1))
            .build()
        )
    """

    def __init__(self, factory: MealFactory):
        self._factory = factory
        self._code: Optional[str] = None
        self._variety = ""
        self._price = Money.zero()
        self._special_descriptions: list[str] = []

    @property
    def current_price(self) -> Money:
        return self._price

    def set_code(self, code: str) -> MealBuilder:
        self._code = code
        return self

    def set_variety(self, variety: str) -> MealBuilder:
        self._variety = variety
        return self

    def set_price(self, price: Money) -> MealBuilder:
        self._price = price
        return self

    def add_price(self, amount: Money) -> MealBuilder:
        self._check_price(amount)
        self._price = self._price + amount
        return self

    def subtract_price(self, amount: Money) -> MealBuilder:
        """
        Raises:
            NegativePriceBuilt: carrying by how much the price would go
                below zero
        """
        self._check_price(amount)
        if amount > self._price:
            raise NegativePriceBuilt(amount - self._price)
        self._price = self._price - amount
        return self

    def add_special(self, description: str) -> MealBuilder:
        self._special_descriptions.append(description)
        return self

    def add_special_with_price(self, description: str, price: Money) -> MealBuilder:
        # price first: a rejected price must not leave the description behind
        return self.add_price(price).add_special(description)

    def add_specials(self, descriptions: Sequence[str], prices: Sequence[Money]) -> MealBuilder:
        """
        Attach specials from two parallel lists, all or nothing.

        Raises:
            CountMismatch: if the lists differ in length
            TypeError: if a price is not Money
        """
        extra = len(descriptions) - len(prices)
        if extra != 0:
            raise CountMismatch(abs(extra), on_description_side=extra > 0)
        for price in prices:
            self._check_price(price)
        total = sum(prices, Money.zero())
        self._price = self._price + total
        self._special_descriptions.extend(descriptions)
        return self

    @staticmethod
    def _check_price(price: object) -> None:
        if not isinstance(price, Money):
            raise TypeError(f"Prices must be Money, not {type(price).__name__}")

    def build(self) -> Meal:
        if self._code is None:
            raise ValueError("A meal needs a code before it can be built")
        meal = self._factory.create(self._code, self._variety, self._price)
        for description in self._special_descriptions:
            meal.add_special(description)
        return meal
