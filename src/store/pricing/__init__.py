"""Pricing schemes: protocol, discount rules and the kind-tag factory."""
from store.pricing.factory import SCHEMES, scheme_from_config, scheme_kind
from store.pricing.protocol import PricingScheme
from store.pricing.schemes import Coupon, GroupedPricing, PlainSum, RainCheck, TwoForOnePricing

__all__ = [
    "PricingScheme",
    "PlainSum",
    "TwoForOnePricing",
    "GroupedPricing",
    "Coupon",
    "RainCheck",
    "SCHEMES",
    "scheme_from_config",
    "scheme_kind",
]
