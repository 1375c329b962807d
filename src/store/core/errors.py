"""Store errors: one base type; configuration and lifecycle failures derive from it."""


class StoreError(Exception):
    """Base class for all store exceptions."""

    def __init__(self, message: str, /) -> None:
        self.message = message
        super().__init__(self.message)


class ConfigurationError(StoreError):
    """Invalid construction parameters or settings (negative price, unknown scheme kind, ...)."""


class ReceiptFinalizedError(StoreError):
    """Raised when an item is added to a receipt that was already returned by Register.total()."""

    def __init__(self, receipt_size: int) -> None:
        self.receipt_size = receipt_size
        super().__init__(f"Receipt with {receipt_size} item(s) is finalized; no further items can be added")
