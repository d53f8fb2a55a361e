# storefront/utils/formatters.py
from datetime import datetime
import pytz
from decimal import Decimal
from typing import Union
from ..config import Config

MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

def format_currency(amount: Union[Decimal, float, int, None]) -> str:
    """Rupiah amount without decimals, dot as thousands separator"""
    value = Decimal(str(amount or 0)).quantize(Decimal("1"))
    grouped = f"{abs(value):,.0f}".replace(",", ".")
    sign = "-" if value < 0 else ""
    return f"{sign}Rp {grouped}"

def format_date(dt: datetime) -> str:
    """Day, month name and year in the configured timezone"""
    local_time = _localize(dt)
    return f"{local_time.day:02d} {MONTHS[local_time.month - 1]} {local_time.year}"

def format_datetime(dt: datetime) -> str:
    return _localize(dt).strftime("%Y-%m-%d %H:%M:%S")

def _localize(dt: datetime) -> datetime:
    tz = pytz.timezone(Config.TIMEZONE)
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt.astimezone(tz)
