"""
Store — point-of-sale pricing engine.
Items are scanned into a Register; a PricingScheme prices the Receipt; total() finalizes it.
"""
from store.catalog import Item, Priceable, Taxable, TaxedItem, WeightedItem, taxable
from store.checkout import Receipt, Register
from store.core import ConfigurationError, StoreError, StoreSettings, load_settings
from store.pricing import (
    Coupon,
    GroupedPricing,
    PlainSum,
    PricingScheme,
    RainCheck,
    TwoForOnePricing,
    scheme_from_config,
)

__version__ = "0.1.0"

__all__ = [
    "Priceable",
    "Taxable",
    "Item",
    "WeightedItem",
    "TaxedItem",
    "taxable",
    "Receipt",
    "Register",
    "PricingScheme",
    "PlainSum",
    "TwoForOnePricing",
    "GroupedPricing",
    "Coupon",
    "RainCheck",
    "scheme_from_config",
    "StoreError",
    "ConfigurationError",
    "StoreSettings",
    "load_settings",
]
