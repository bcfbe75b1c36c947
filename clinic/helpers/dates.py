from __future__ import annotations

import datetime as dt
from typing import Optional
from zoneinfo import ZoneInfo

from django.utils import timezone

DEFAULT_FORMAT = '%Y-%m-%d %H:%M:%S'


def current_utc() -> dt.datetime:
    return timezone.now().astimezone(dt.timezone.utc)


def to_local(value: dt.datetime, tz_name: str) -> dt.datetime:
    """Convert an aware (or naive UTC) datetime into ``tz_name``."""
    if timezone.is_naive(value):
        value = timezone.make_aware(value, dt.timezone.utc)
    return value.astimezone(ZoneInfo(tz_name))


def to_utc(value: dt.datetime, tz_name: str) -> dt.datetime:
    """Interpret a naive datetime as wall time in ``tz_name`` and return UTC."""
    if timezone.is_naive(value):
        value = timezone.make_aware(value, ZoneInfo(tz_name))
    return value.astimezone(dt.timezone.utc)


def format_datetime(value: dt.datetime, fmt: Optional[str] = None) -> str:
    return value.strftime(fmt or DEFAULT_FORMAT)


def calculate_age(birth_date: dt.date, today: Optional[dt.date] = None) -> int:
    today = today or timezone.localdate()
    age = today.year - birth_date.year
    # birthday not reached yet this year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def is_weekend(value: dt.date) -> bool:
    return value.weekday() >= 5


def is_business_hour(value: dt.datetime, start_hour: int = 9, end_hour: int = 17) -> bool:
    return start_hour <= value.hour < end_hour
