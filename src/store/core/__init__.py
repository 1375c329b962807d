"""Core: settings loaded from env and the store error types."""
from store.core.config import DEFAULT_TAX_RATE, Config, StoreSettings, load_settings
from store.core.errors import ConfigurationError, ReceiptFinalizedError, StoreError

__all__ = [
    "Config",
    "StoreSettings",
    "load_settings",
    "DEFAULT_TAX_RATE",
    "StoreError",
    "ConfigurationError",
    "ReceiptFinalizedError",
]
