"""Store settings: env loader (prefix + defaults) and the frozen settings object."""
from __future__ import annotations

import math
import os
from dataclasses import dataclass
from typing import Any

from store.core.errors import ConfigurationError

DEFAULT_TAX_RATE = 0.10


class Config:
    """
    Env loader. Call Config.load_from_env(prefix=...) and pass the result
    to a settings dataclass: StoreSettings(**Config.load_from_env("STORE_")).
    """

    @classmethod
    def load_from_env(cls, prefix: str = "STORE_", **defaults: Any) -> dict[str, Any]:
        """Load from os.environ with prefix and defaults. Keys are lowercased, prefix stripped."""
        result = dict(defaults)
        for key, value in os.environ.items():
            if key.startswith(prefix):
                name = key[len(prefix):].lower()
                result[name] = value
        return result


@dataclass(frozen=True)
class StoreSettings:
    tax_rate: float = DEFAULT_TAX_RATE
    currency_symbol: str = "$"

    def __post_init__(self) -> None:
        if not math.isfinite(self.tax_rate) or self.tax_rate < 0:
            raise ConfigurationError(f"tax_rate must be a finite number >= 0, got {self.tax_rate!r}")


def load_settings(prefix: str = "STORE_") -> StoreSettings:
    """Build StoreSettings from env vars (STORE_TAX_RATE, STORE_CURRENCY_SYMBOL). Unknown keys are ignored."""
    raw = Config.load_from_env(prefix, tax_rate=DEFAULT_TAX_RATE, currency_symbol="$")
    try:
        tax_rate = float(raw["tax_rate"])
    except ValueError as e:
        raise ConfigurationError(f"{prefix}TAX_RATE is not a number: {raw['tax_rate']!r}") from e
    return StoreSettings(tax_rate=tax_rate, currency_symbol=str(raw["currency_symbol"]))
