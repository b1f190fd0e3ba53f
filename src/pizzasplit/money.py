"""
money.py — Exact-cent monetary value for group order billing

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   A single non-negative int of cents. Never floating point.

2. NON-NEGATIVE
   A Money value is never below zero. A subtraction that would go below zero
   is a programming error and raises ArithmeticUnderflow; it is never
   clamped. Code that needs "how much is missing" compares first and
   subtracts the other way round (see Meals.calculate_change).

3. TYPE SAFETY
   Operations with float/int raise TypeError. Multiplication accepts only
   non-negative int quantities.

4. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance.

5. CARRYING CONSTRUCTOR
   Money.of(1, 205) == Money.of(3, 5). The constructor does not validate the
   sub-unit part; user input goes through Money.parse(), which does.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass
import re

from .errors import ArithmeticUnderflow, InvalidAmount

CENTS_PER_UNIT = 100
DEFAULT_SYMBOL = "€"

_AMOUNT_PATTERN = re.compile(r"^\s*(\d+)(?:[.,](\d{1,2}))?\s*(?:€|EUR)?\s*$")


@dataclass(frozen=True, slots=True, order=False)
class Money:
    """
    Exact amount of money in cents.

    INVARIANTS:
    1. _cents is always an int >= 0
    2. a - b raises ArithmeticUnderflow when b > a
    3. a * n is exact for any int n >= 0

    USAGE:
        price = Money.of(5, 50)
        total = price * 2 + Money.of(1, 20)   # 12,20€

    SERIALIZATION:
        Across the application boundary Money travels as integer cents,
        see to_dict() / from_dict(). Never as float.
    """
    _cents: int

    def __post_init__(self) -> None:
        if not isinstance(self._cents, int) or isinstance(self._cents, bool):
            raise TypeError(f"Money requires int cents, got {type(self._cents).__name__}")
        if self._cents < 0:
            raise ValueError(f"Money cannot be negative, got {self._cents} cents")

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def of(cls, units: int, subunits: int = 0) -> Money:
        """
        Build from whole units and cents.

        subunits is not limited to 0-99: it simply carries into units,
        so Money.of(1, 205) == Money.of(3, 5).
        """
        if units < 0 or subunits < 0:
            raise ValueError(f"Money.of() takes non-negative parts, got ({units}, {subunits})")
        return cls(units * CENTS_PER_UNIT + subunits)

    @classmethod
    def of_cents(cls, cents: int) -> Money:
        return cls(cents)

    @classmethod
    def zero(cls) -> Money:
        """Zero. Useful as start value for sum()."""
        return cls(0)

    @classmethod
    def parse(cls, text: str) -> Money:
        """
        Parse a user-entered amount such as "5", "5,50", "5.5" or "12,30€".

        Unlike of(), this rejects a sub-unit part with more than two digits,
        so "1,205" is an error rather than 3,05€. One fractional digit means
        tenths ("5,5" is 5,50€).

        Raises:
            InvalidAmount: if the text is not a non-negative amount with at
                most two fractional digits
        """
        match = _AMOUNT_PATTERN.match(text)
        if match is None:
            raise InvalidAmount(f"Not a valid amount: {text!r}")
        units, fraction = match.groups()
        subunits = int(fraction.ljust(2, "0")) if fraction else 0
        return cls.of(int(units), subunits)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def __add__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        return Money(self._cents + other._cents)

    def __radd__(self, other: object) -> Money:
        # sum() starts from int 0
        if isinstance(other, int) and not isinstance(other, bool) and other == 0:
            return self
        return NotImplemented

    def __sub__(self, other: Money) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        if other._cents > self._cents:
            raise ArithmeticUnderflow(self, other)
        return Money(self._cents - other._cents)

    def __mul__(self, factor: int) -> Money:
        """
        Multiply by a quantity.

        Only non-negative int is accepted; there is nothing to round.
        """
        if not isinstance(factor, int) or isinstance(factor, bool):
            raise TypeError(
                f"Money can only be multiplied by int quantities, not {type(factor).__name__}"
            )
        if factor < 0:
            raise ValueError(f"Quantity must be non-negative, got {factor}")
        return Money(self._cents * factor)

    def __rmul__(self, factor: int) -> Money:
        return self.__mul__(factor)

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Money):
            return self._cents == other._cents
        return NotImplemented

    def __lt__(self, other: Money) -> bool:
        self._check_money(other)
        return self._cents < other._cents

    def __le__(self, other: Money) -> bool:
        self._check_money(other)
        return self._cents <= other._cents

    def __gt__(self, other: Money) -> bool:
        self._check_money(other)
        return self._cents > other._cents

    def __ge__(self, other: Money) -> bool:
        self._check_money(other)
        return self._cents >= other._cents

    @staticmethod
    def _check_money(other: object) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Cannot compare Money with {type(other).__name__}")

    def __hash__(self) -> int:
        return hash(self._cents)

    def __bool__(self) -> bool:
        return self._cents != 0

    # -------------------------------------------------------------------------
    # Properties and output
    # -------------------------------------------------------------------------

    @property
    def total_cents(self) -> int:
        return self._cents

    @property
    def units(self) -> int:
        """Whole currency units (euros)."""
        return self._cents // CENTS_PER_UNIT

    @property
    def subunits(self) -> int:
        """Cents below one unit, 0-99."""
        return self._cents % CENTS_PER_UNIT

    def is_zero(self) -> bool:
        return self._cents == 0

    def format(self, symbol: str = DEFAULT_SYMBOL) -> str:
        return f"{self.units},{self.subunits:02d}{symbol}"

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Money({self.units},{self.subunits:02d})"

    # -------------------------------------------------------------------------
    # Boundary representation
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Format: {"cents": int}. Never float."""
        return {"cents": self._cents}

    @classmethod
    def from_dict(cls, data: dict) -> Money:
        return cls.of_cents(data["cents"])
