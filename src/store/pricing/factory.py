"""Closed set of pricing scheme kinds: build by tag, look up the tag of an instance."""
from __future__ import annotations

from typing import Any

import structlog

from store.core.errors import ConfigurationError
from store.pricing.protocol import PricingScheme
from store.pricing.schemes import Coupon, GroupedPricing, PlainSum, RainCheck, TwoForOnePricing

logger = structlog.get_logger(__name__)

SCHEMES: dict[str, type] = {
    "none": PlainSum,
    "two_for_one": TwoForOnePricing,
    "grouped": GroupedPricing,
    "coupon": Coupon,
    "rain_check": RainCheck,
}


def scheme_from_config(kind: str, **params: Any) -> PricingScheme:
    """Build a scheme from its kind tag and keyword parameters (field names of the scheme class)."""
    try:
        scheme_cls = SCHEMES[kind]
    except KeyError:
        raise ConfigurationError(
            f"Unknown pricing scheme {kind!r}; expected one of {', '.join(sorted(SCHEMES))}"
        ) from None
    try:
        scheme = scheme_cls(**params)
    except TypeError as e:
        raise ConfigurationError(f"Bad parameters for {kind!r}: {e}") from e
    logger.debug("pricing_scheme_built", kind=kind, scheme=repr(scheme))
    return scheme


def scheme_kind(scheme: PricingScheme) -> str:
    for kind, scheme_cls in SCHEMES.items():
        if type(scheme) is scheme_cls:
            return kind
    raise ConfigurationError(f"{type(scheme).__name__} is not a known pricing scheme")
