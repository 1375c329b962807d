"""Pricing scheme implementations: plain sum and the four discount rules."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Sequence

from store.catalog.protocol import Priceable
from store.core.errors import ConfigurationError
from store.domain import ValueObject, require_cents, require_fraction


def plain_sum(items: Sequence[Priceable]) -> int:
    return sum(item.price() for item in items)


def discounted(price: int, discount: float) -> int:
    """Price after a fractional discount, truncated toward zero."""
    return int(price * (1 - discount))


@dataclass(frozen=True)
class PlainSum(ValueObject):
    """No discount: sum of price() over all items."""

    def apply(self, items: Sequence[Priceable]) -> int:
        return plain_sum(items)


@dataclass(frozen=True)
class TwoForOnePricing(ValueObject):
    """
    Buy three, pay for two, for one item name.

    Charges every complete group of three matching items as two, leftovers
    individually, all at single_price (not each item's own price()).
    Only matching items are priced: other items contribute nothing, so
    combine with other schemes outside this one if the whole basket matters.
    """

    item_name: str
    single_price: int

    def _validate(self) -> None:
        require_cents(self.single_price, "single_price")

    def apply(self, items: Sequence[Priceable]) -> int:
        count = sum(1 for item in items if item.name == self.item_name)
        groups, remainder = divmod(count, 3)
        return (groups * 2 + remainder) * self.single_price


@dataclass(frozen=True)
class GroupedPricing(ValueObject):
    """
    Bundle discount: when the scanned items named in items_required number
    exactly len(items_required), each of them gets discount_percent off.
    Any other count falls back to the undiscounted sum of the whole list.
    """

    items_required: tuple[str, ...] = field(default_factory=tuple)
    discount_percent: float = 0.0

    def __post_init__(self) -> None:
        # a bare str would be split into letters by tuple()
        if isinstance(self.items_required, str):
            raise ConfigurationError(
                f"items_required must be a list of item names, got the string {self.items_required!r}"
            )
        # accept any iterable of names; store as tuple so the scheme stays hashable
        object.__setattr__(self, "items_required", tuple(self.items_required))
        super().__post_init__()

    def _validate(self) -> None:
        for name in self.items_required:
            if not isinstance(name, str):
                raise ConfigurationError(f"items_required holds item names, got {name!r}")
        require_fraction(self.discount_percent, "discount_percent")

    def apply(self, items: Sequence[Priceable]) -> int:
        required = set(self.items_required)
        grouped = [item for item in items if item.name in required]
        if len(grouped) != len(self.items_required):
            return plain_sum(items)
        rest = [item for item in items if item.name not in required]
        return sum(discounted(item.price(), self.discount_percent) for item in grouped) + plain_sum(rest)


@dataclass(frozen=True)
class Coupon(ValueObject):
    """Fractional discount on the first item named item_name; later matches pay full price."""

    item_name: str
    discount: float

    def _validate(self) -> None:
        require_fraction(self.discount, "discount")

    def apply(self, items: Sequence[Priceable]) -> int:
        total = 0
        applied = False
        for item in items:
            if not applied and item.name == self.item_name:
                total += discounted(item.price(), self.discount)
                applied = True
            else:
                total += item.price()
        return total


@dataclass(frozen=True)
class RainCheck(ValueObject):
    """Flat discounted_price for the first item named item_name; later matches pay full price."""

    item_name: str
    discounted_price: int

    def _validate(self) -> None:
        require_cents(self.discounted_price, "discounted_price")

    def apply(self, items: Sequence[Priceable]) -> int:
        total = 0
        applied = False
        for item in items:
            if not applied and item.name == self.item_name:
                total += self.discounted_price
                applied = True
            else:
                total += item.price()
        return total
