"""
config.py — Settings for orders and scripts

Settings is a plain policy object, like everything else here passed in
explicitly. from_env() is the only place that reads the environment.
"""

from __future__ import annotations
from dataclasses import dataclass
import logging
import os

from .money import DEFAULT_SYMBOL

ENV_PREFIX = "PIZZASPLIT_"


@dataclass(frozen=True)
class Settings:
    # First meal id handed out by an order's factory
    meal_id_base: int = 0

    # First special id within each meal
    special_id_base: int = 0

    # Used when rendering amounts for people
    currency_symbol: str = DEFAULT_SYMBOL

    def __post_init__(self) -> None:
        if self.meal_id_base < 0 or self.special_id_base < 0:
            raise ValueError("Id bases must be non-negative")

    @classmethod
    def from_env(cls, environ: dict | None = None) -> Settings:
        """
        Read PIZZASPLIT_MEAL_ID_BASE, PIZZASPLIT_SPECIAL_ID_BASE and
        PIZZASPLIT_CURRENCY_SYMBOL; anything unset keeps its default.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            meal_id_base=_int_from_env(env, "MEAL_ID_BASE", defaults.meal_id_base),
            special_id_base=_int_from_env(env, "SPECIAL_ID_BASE", defaults.special_id_base),
            currency_symbol=env.get(ENV_PREFIX + "CURRENCY_SYMBOL", defaults.currency_symbol),
        )

    def to_dict(self) -> dict:
        return {
            "meal_id_base": self.meal_id_base,
            "special_id_base": self.special_id_base,
            "currency_symbol": self.currency_symbol,
        }


def _int_from_env(env, name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None


def configure_logging(level: int | str = logging.INFO) -> None:
    """Basic console logging for scripts. The library itself never configures handlers."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
