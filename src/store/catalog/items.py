"""Item variants: fixed price, price by weight, and the taxable wrapper."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from store.catalog.protocol import Priceable
from store.core.config import DEFAULT_TAX_RATE, load_settings
from store.core.errors import ConfigurationError
from store.domain import ValueObject, require_cents, require_name, require_non_negative


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (not banker's rounding)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def compute_tax(price: int, rate: float = DEFAULT_TAX_RATE) -> int:
    return round_half_away(price * rate)


@dataclass(frozen=True)
class Item(ValueObject):
    """Priced per unit: Item("Beans", 499) is a $4.99 can of beans."""

    name: str
    unit_price: int

    def _validate(self) -> None:
        require_name(self.name)
        require_cents(self.unit_price, "unit_price")

    def price(self) -> int:
        return self.unit_price

    @classmethod
    def from_priceable(cls, other: Priceable) -> Item:
        """Snapshot another item's name and current price into a fixed-price Item."""
        return cls(other.name, other.price())


@dataclass(frozen=True)
class WeightedItem(ValueObject):
    """Priced by weight. price() truncates toward zero: 500 x 1.999 = 999, not 1000."""

    name: str
    price_per_unit_weight: int
    weight: float

    def _validate(self) -> None:
        require_name(self.name)
        require_cents(self.price_per_unit_weight, "price_per_unit_weight")
        require_non_negative(self.weight, "weight")

    def price(self) -> int:
        return int(self.price_per_unit_weight * self.weight)


@dataclass(frozen=True)
class TaxedItem(ValueObject):
    """
    Taxable capability attached to any Priceable by composition.
    name and price() delegate to the wrapped item; tax() is derived from price().
    """

    item: Priceable
    rate: float = DEFAULT_TAX_RATE

    def _validate(self) -> None:
        if not isinstance(self.item, Priceable):
            raise ConfigurationError(f"TaxedItem wraps a Priceable, got {type(self.item).__name__}")
        require_non_negative(self.rate, "rate")

    @property
    def name(self) -> str:
        return self.item.name

    def price(self) -> int:
        return self.item.price()

    def tax(self) -> int:
        return compute_tax(self.price(), self.rate)


def taxable(item: Priceable, rate: Optional[float] = None) -> TaxedItem:
    """Wrap item as taxable. Without an explicit rate, the configured STORE_TAX_RATE (default 0.10) applies."""
    if rate is None:
        rate = load_settings().tax_rate
    return TaxedItem(item, rate)
