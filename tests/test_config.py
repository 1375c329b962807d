from dataclasses import FrozenInstanceError

import pytest

from store.core import DEFAULT_TAX_RATE, Config, ConfigurationError, StoreSettings, load_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("STORE_TAX_RATE", raising=False)
    monkeypatch.delenv("STORE_CURRENCY_SYMBOL", raising=False)


def test_load_from_env_strips_prefix(monkeypatch):
    monkeypatch.setenv("POS_LANE", "3")

    loaded = Config.load_from_env("POS_", lane="1", mode="test")

    assert loaded["lane"] == "3"
    assert loaded["mode"] == "test"


def test_default_settings():
    settings = load_settings()

    assert settings == StoreSettings()
    assert settings.tax_rate == DEFAULT_TAX_RATE
    assert settings.currency_symbol == "$"


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("STORE_TAX_RATE", "0.08")
    monkeypatch.setenv("STORE_CURRENCY_SYMBOL", "EUR ")

    settings = load_settings()

    assert settings.tax_rate == 0.08
    assert settings.currency_symbol == "EUR "


def test_bad_tax_rate(monkeypatch):
    monkeypatch.setenv("STORE_TAX_RATE", "ten")

    with pytest.raises(ConfigurationError, match="STORE_TAX_RATE"):
        load_settings()


def test_negative_tax_rate():
    with pytest.raises(ConfigurationError):
        StoreSettings(tax_rate=-0.1)


def test_settings_are_frozen():
    with pytest.raises(FrozenInstanceError):
        StoreSettings().tax_rate = 0.2


@pytest.mark.parametrize("raw", ["nan", "inf", "-inf"])
def test_non_finite_tax_rate_from_env(monkeypatch, raw):
    monkeypatch.setenv("STORE_TAX_RATE", raw)

    with pytest.raises(ConfigurationError, match="finite"):
        load_settings()
