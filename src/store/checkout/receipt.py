"""Receipt — ordered, append-only record of the items scanned in one transaction."""
from __future__ import annotations

from typing import Iterator, List, Tuple

from store.catalog.protocol import Priceable
from store.core.errors import ReceiptFinalizedError

SEPARATOR = "------------------"


def format_cents(cents: int, symbol: str = "$") -> str:
    """499 -> "$4.99". Integer arithmetic only."""
    sign = "-" if cents < 0 else ""
    whole, part = divmod(abs(cents), 100)
    return f"{sign}{symbol}{whole}.{part:02d}"


class Receipt:
    """
    Items in scan order. Mutable while it is a Register's current receipt;
    finalize() freezes it when the Register hands it out.
    """

    def __init__(self) -> None:
        self._items: List[Priceable] = []
        self._finalized = False

    def add(self, item: Priceable) -> None:
        if self._finalized:
            raise ReceiptFinalizedError(len(self._items))
        self._items.append(item)

    def items(self) -> Tuple[Priceable, ...]:
        """Snapshot of the scanned items; changing it does not touch the receipt."""
        return tuple(self._items)

    def total(self) -> int:
        """Raw total: sum of price() with no discounts."""
        return sum(item.price() for item in self._items)

    def output(self, currency_symbol: str = "$") -> str:
        lines = ["Receipt:"]
        for item in self._items:
            lines.append(f"{item.name}: {format_cents(item.price(), currency_symbol)}")
        lines.append(SEPARATOR)
        lines.append(f"TOTAL: {format_cents(self.total(), currency_symbol)}")
        return "\n".join(lines)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def finalize(self) -> None:
        self._finalized = True

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Priceable]:
        return iter(self.items())

    def __repr__(self) -> str:
        state = "finalized" if self._finalized else "open"
        return f"Receipt({len(self._items)} items, {state})"
