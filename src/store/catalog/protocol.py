"""Catalog protocols: what every sellable item exposes (no implementation here)."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class Priceable(Protocol):
    """Sellable item: immutable name and a price in integer minor units (cents)."""

    @property
    def name(self) -> str:
        ...

    def price(self) -> int:
        ...


@runtime_checkable
class Taxable(Priceable, Protocol):
    """Priceable that also carries a derived tax amount in minor units."""

    def tax(self) -> int:
        ...
