# tests/test_formatters.py
from datetime import datetime
from decimal import Decimal
import pytz
from storefront.config import Config
from storefront.utils.formatters import format_currency, format_date, format_datetime


def test_format_currency():
    assert format_currency(Decimal('1299000')) == 'Rp 1.299.000'
    assert format_currency(450000) == 'Rp 450.000'
    assert format_currency(Decimal('98000.40')) == 'Rp 98.000'
    assert format_currency(None) == 'Rp 0'


def test_format_date_uses_configured_timezone(monkeypatch):
    monkeypatch.setattr(Config, 'TIMEZONE', 'Asia/Jakarta')
    moment = datetime(2023, 12, 31, 20, 0, tzinfo=pytz.utc)

    assert format_date(moment) == '01 January 2024'
    assert format_datetime(moment) == '2024-01-01 03:00:00'


def test_naive_datetimes_are_treated_as_utc(monkeypatch):
    monkeypatch.setattr(Config, 'TIMEZONE', 'UTC')

    assert format_date(datetime(2024, 3, 5, 23, 59)) == '05 March 2024'
