"""Register — owns the current Receipt; scan, subtotal and total (finalize)."""
from __future__ import annotations

from typing import Optional

import structlog

from store.catalog.protocol import Priceable
from store.checkout.receipt import Receipt
from store.domain import Entity
from store.pricing.protocol import PricingScheme

logger = structlog.get_logger(__name__)


class Register(Entity):
    """
    Point-of-sale register. Always holds exactly one current Receipt.

    The pricing scheme is fixed for the register's life; without one,
    subtotal() is the plain sum of prices. total() hands the current
    receipt to the caller (finalized) and starts a new empty one.

    Not thread-safe: callers sharing a register must serialize scan/total.
    """

    def __init__(self, pricing_scheme: Optional[PricingScheme] = None, *, id: Optional[str] = None) -> None:
        super().__init__(id)
        self._pricing_scheme = pricing_scheme
        self._receipt = Receipt()
        self._receipt_count = 0

    @property
    def pricing_scheme(self) -> Optional[PricingScheme]:
        return self._pricing_scheme

    @property
    def receipt_count(self) -> int:
        """Number of receipts finalized by total()."""
        return self._receipt_count

    def scan(self, item: Priceable) -> None:
        self._receipt.add(item)
        logger.debug("scanned", register=self.id, item=item.name, price=item.price())

    def subtotal(self) -> int:
        """Discount-aware total of the current receipt. Read-only."""
        if self._pricing_scheme is None:
            return self._receipt.total()
        return self._pricing_scheme.apply(self._receipt.items())

    def total(self) -> Receipt:
        """Finalize and return the current receipt; later scans go to a fresh one."""
        receipt, self._receipt = self._receipt, Receipt()
        receipt.finalize()
        self._receipt_count += 1
        logger.debug("receipt_finalized", register=self.id, items=len(receipt), receipt_count=self._receipt_count)
        return receipt
