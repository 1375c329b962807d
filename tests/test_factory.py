import pytest
from structlog.testing import capture_logs

from store.core import ConfigurationError
from store.pricing import (
    SCHEMES,
    Coupon,
    GroupedPricing,
    PlainSum,
    RainCheck,
    TwoForOnePricing,
    scheme_from_config,
    scheme_kind,
)


def test_build_each_kind():
    assert scheme_from_config("none") == PlainSum()
    assert scheme_from_config("two_for_one", item_name="Soap", single_price=100) == TwoForOnePricing("Soap", 100)
    assert scheme_from_config("grouped", items_required=["A", "B"], discount_percent=0.2) == GroupedPricing(
        ("A", "B"), 0.2
    )
    assert scheme_from_config("coupon", item_name="Milk", discount=0.15) == Coupon("Milk", 0.15)
    assert scheme_from_config("rain_check", item_name="Eggs", discounted_price=250) == RainCheck("Eggs", 250)


def test_unknown_kind():
    with pytest.raises(ConfigurationError, match="Unknown pricing scheme"):
        scheme_from_config("bogo")


def test_missing_parameters():
    with pytest.raises(ConfigurationError, match="coupon"):
        scheme_from_config("coupon", item_name="Milk")


def test_invalid_parameter_value():
    with pytest.raises(ConfigurationError):
        scheme_from_config("rain_check", item_name="Eggs", discounted_price=-5)


@pytest.mark.parametrize("kind", sorted(SCHEMES))
def test_scheme_kind_round_trips_tag(kind):
    params = {
        "none": {},
        "two_for_one": {"item_name": "Soap", "single_price": 100},
        "grouped": {"items_required": ["A"], "discount_percent": 0.1},
        "coupon": {"item_name": "Milk", "discount": 0.1},
        "rain_check": {"item_name": "Eggs", "discounted_price": 1},
    }[kind]

    assert scheme_kind(scheme_from_config(kind, **params)) == kind


def test_scheme_kind_rejects_foreign_scheme():
    class Custom:
        def apply(self, items):
            return 0

    with pytest.raises(ConfigurationError):
        scheme_kind(Custom())


def test_build_logs_kind():
    with capture_logs() as logs:
        scheme_from_config("coupon", item_name="Milk", discount=0.15)

    assert logs == [
        {
            "event": "pricing_scheme_built",
            "log_level": "debug",
            "kind": "coupon",
            "scheme": repr(Coupon("Milk", 0.15)),
        }
    ]
