"""Shared date and time parsing utilities.

Show records carry dates as US locale strings ("2/10/2026") and times as
12-hour strings ("08:00 PM"). Everything here works on local calendar fields;
aware datetimes keep their tzinfo and are shifted by wall-clock days.
"""

import re
from datetime import date, datetime, time, timedelta
from typing import Optional, Tuple, Union

DateLike = Union[date, datetime]

_US_DATE_RE = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})$", re.ASCII)
_ISO_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)
_SHOW_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})\s*(AM|PM)$", re.ASCII | re.IGNORECASE)


def _build_date(year: int, month: int, day: int) -> Optional[date]:
    # date() rejects Feb 30 and friends instead of rolling into the next month
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_show_date(text) -> Optional[date]:
    """Parse "M/D/YYYY" into a date, or None.

    Wrong segment counts, non-numeric segments and dates that do not exist
    in the given year ("2/30/2026") all give None.
    """
    if not isinstance(text, str):
        return None
    match = _US_DATE_RE.match(text.strip())
    if not match:
        return None
    month, day, year = (int(g) for g in match.groups())
    return _build_date(year, month, day)


def parse_date_text(text) -> Optional[date]:
    """Parse either "M/D/YYYY" or ISO "YYYY-MM-DD"; anything else is None.

    This is the one date parser used for ordering matched shows, so the
    scraper's US dates and ISO dates from fixtures compare on equal terms.
    """
    parsed = parse_show_date(text)
    if parsed is not None or not isinstance(text, str):
        return parsed
    match = _ISO_DATE_RE.match(text.strip())
    if not match:
        return None
    year, month, day = (int(g) for g in match.groups())
    return _build_date(year, month, day)


def parse_show_time_or_none(text) -> Optional[int]:
    """Minutes since midnight for "H:MM AM" / "HH:MM PM", or None if unparseable."""
    if not isinstance(text, str):
        return None
    match = _SHOW_TIME_RE.match(text.strip())
    if not match:
        return None

    hours = int(match.group(1))
    minutes = int(match.group(2))
    period = match.group(3).upper()
    if not 1 <= hours <= 12 or minutes > 59:
        return None

    # 12-hour → 24-hour: 12 AM is midnight, 12 PM stays noon
    if period == "AM" and hours == 12:
        hours = 0
    elif period == "PM" and hours != 12:
        hours += 12

    return hours * 60 + minutes


def parse_show_time(text) -> int:
    """Minutes since midnight (0-1439); unparseable times count as 0 (midnight)."""
    minutes = parse_show_time_or_none(text)
    return 0 if minutes is None else minutes


def has_known_time(text) -> bool:
    """False when a show's time string can't be parsed (sorted as midnight)."""
    return parse_show_time_or_none(text) is not None


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    raise TypeError(f"expected a date or datetime, got {type(value).__name__}")


def get_week_start(value: DateLike) -> datetime:
    """Monday at 00:00:00 of the week containing value (Sunday ends a week)."""
    midnight = _as_datetime(value).replace(hour=0, minute=0, second=0, microsecond=0)
    return midnight - timedelta(days=midnight.weekday())


def get_week_end(value: DateLike) -> datetime:
    """Sunday at 23:59:59.999 of the week containing value."""
    sunday = get_week_start(value) + timedelta(days=6)
    return sunday.replace(hour=23, minute=59, second=59, microsecond=999000)


def to_iso_date_string(value: DateLike) -> str:
    """Format as "YYYY-MM-DD" using local calendar fields, never UTC."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def format_show_datetime(value: datetime) -> Tuple[str, str]:
    """Render a datetime the way the scraper stores it: ("2/10/2026", "08:00 PM").

    This is the scraper's side of the show date/time contract; the parsers
    above read these strings back.
    """
    hour12 = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    return (
        f"{value.month}/{value.day}/{value.year}",
        f"{hour12:02d}:{value.minute:02d} {period}",
    )
