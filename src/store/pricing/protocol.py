"""Pricing scheme protocol: one call prices the whole scanned list."""
from typing import Protocol, Sequence, runtime_checkable

from store.catalog.protocol import Priceable


@runtime_checkable
class PricingScheme(Protocol):
    """
    Discount or promotion rule over the full item list.
    Rules may count across items, so apply() always sees every scanned item.
    Implementations hold no state between calls.
    """

    def apply(self, items: Sequence[Priceable]) -> int:
        ...
