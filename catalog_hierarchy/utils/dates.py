# catalog_hierarchy/utils/dates.py
from datetime import datetime
from typing import Optional
import pytz
from ..config import Config


def now() -> datetime:
    """Current time in the configured timezone"""
    return datetime.now(pytz.timezone(Config.TIMEZONE))


def to_aware(dt: datetime) -> datetime:
    """Naive datetimes are read as UTC"""
    if dt.tzinfo is None:
        return pytz.utc.localize(dt)
    return dt


def is_within_window(start: Optional[datetime], end: Optional[datetime],
                     moment: Optional[datetime] = None) -> bool:
    """Inclusive window check; an absent bound is unbounded on that side"""
    moment = to_aware(moment) if moment is not None else now()
    if start is not None and moment < to_aware(start):
        return False
    if end is not None and moment > to_aware(end):
        return False
    return True


def format_datetime(dt: datetime) -> str:
    """Format a datetime in the configured timezone for log output"""
    local_tz = pytz.timezone(Config.TIMEZONE)
    return to_aware(dt).astimezone(local_tz).strftime("%Y-%m-%d %H:%M:%S")
