from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.core.config import Settings


def make_settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_defaults():
    cfg = make_settings(TAX_RATE="0.0825", DISCOUNT_PERCENTAGE="0")
    assert cfg.API_V1_STR == "/api/v1"
    assert cfg.TAX_RATE == Decimal("0.0825")
    assert cfg.DISCOUNT_PERCENTAGE == Decimal("0")


@pytest.mark.parametrize("value", ["1", "1.5", "-0.01", "NaN"])
def test_rates_must_be_fractions(value):
    with pytest.raises(ValidationError):
        make_settings(TAX_RATE=value)
    with pytest.raises(ValidationError):
        make_settings(DISCOUNT_PERCENTAGE=value)


def test_cors_origins_accept_csv_and_json():
    cfg = make_settings(CORS_ORIGINS="https://a.example.com, https://b.example.com")
    assert cfg.CORS_ORIGINS == ["https://a.example.com", "https://b.example.com"]

    cfg = make_settings(CORS_ORIGINS='["https://c.example.com"]')
    assert cfg.CORS_ORIGINS == ["https://c.example.com"]


def test_admin_user_id_is_trimmed():
    assert make_settings(ADMIN_USER_ID="  user_admin \n").ADMIN_USER_ID == "user_admin"


def test_unused_currency_setting_is_ignored():
    assert not hasattr(make_settings(DEFAULT_CURRENCY="EUR"), "DEFAULT_CURRENCY")
