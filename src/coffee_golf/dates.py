"""Calendar-date helpers. All dates are local calendar dates, never UTC."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import structlog

from .models import TournamentStatus

LOGGER = structlog.get_logger(__name__)


def get_zone(timezone_name: str) -> ZoneInfo:
    """Return a ZoneInfo instance, defaulting to UTC on failure."""
    try:
        return ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError):
        LOGGER.warning("dates.unknown_timezone", timezone=timezone_name)
        return ZoneInfo("UTC")


def today_local(timezone_name: Optional[str] = None) -> date:
    """Today's date in the named zone, or on the host clock when no zone is given."""
    if timezone_name:
        return datetime.now(tz=get_zone(timezone_name)).date()
    return date.today()


def local_date_str(value: Optional[date] = None) -> str:
    """Format a date as YYYY-MM-DD, defaulting to today."""
    value = value or date.today()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def within_window(played: date, start: date, end: date) -> bool:
    return start <= played <= end


def tournament_status(start: date, end: date, today: Optional[date] = None) -> TournamentStatus:
    today = today or date.today()
    if today > end:
        return TournamentStatus.FINAL
    if today >= start:
        return TournamentStatus.LIVE
    return TournamentStatus.UPCOMING
