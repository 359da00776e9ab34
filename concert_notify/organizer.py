"""Weekly show organizer.

Turns a flat list of shows into a Monday-to-Sunday week for calendar display.

- Every day is always present, with an empty tuple when nothing is on.
- Day labels come from position (Mon..Sun), not from re-deriving weekdays.
- Shows are matched to days by ISO date string and ordered by start time.
- Shows with unparseable dates or dates outside the week are dropped and
  counted in WeekSchedule.dropped.
"""

import logging
from datetime import datetime, timedelta
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .date_utils import (
    DateLike,
    get_week_end,
    get_week_start,
    parse_show_date,
    parse_show_time,
    to_iso_date_string,
)
from .models import DaySchedule, DropReport, Show, WeekSchedule, copy_show

logger = logging.getLogger("concert-notify.organizer")

DAY_LABELS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def _bucket_shows(shows: List[Any], day_dates: List[str]) -> Tuple[Dict[str, List[Show]], DropReport]:
    """Assign show copies to ISO day keys, counting what gets dropped."""
    buckets: Dict[str, List[Show]] = {iso: [] for iso in day_dates}
    unparseable = 0
    outside = 0

    for show in shows:
        show_date = parse_show_date(show.get("date")) if isinstance(show, Mapping) else None
        if show_date is None:
            unparseable += 1
            continue
        bucket = buckets.get(to_iso_date_string(show_date))
        if bucket is None:
            outside += 1
            continue
        bucket.append(copy_show(show))

    return buckets, DropReport(unparseable_date=unparseable, outside_week=outside)


def organize_shows_by_week(shows: List[Any], reference_date: DateLike) -> WeekSchedule:
    """Organize shows into the week containing reference_date.

    The input list and its show records are left untouched; the schedule
    holds copies.
    """
    if not isinstance(shows, (list, tuple)):
        raise TypeError(f"shows must be a list, got {type(shows).__name__}")

    week_start = get_week_start(reference_date)
    week_end = get_week_end(reference_date)
    day_dates = [to_iso_date_string(week_start + timedelta(days=i)) for i in range(7)]

    buckets, dropped = _bucket_shows(shows, day_dates)
    if dropped.total:
        logger.debug(
            f"Week of {day_dates[0]}: dropped {dropped.unparseable_date} show(s) with bad dates, "
            f"{dropped.outside_week} outside the week"
        )

    days = tuple(
        DaySchedule(
            label=label,
            date=iso,
            # sorted() is stable, so equal or unknown times keep input order
            shows=tuple(sorted(buckets[iso], key=lambda s: parse_show_time(s.get("time")))),
        )
        for label, iso in zip(DAY_LABELS, day_dates)
    )

    return WeekSchedule(
        week_start_date=week_start,
        week_end_date=week_end,
        days=days,
        dropped=dropped,
    )


def get_current_week_shows(shows: List[Any], now: Optional[datetime] = None) -> WeekSchedule:
    """Shows for this week. Pass `now` for reproducible results."""
    return organize_shows_by_week(shows, now or datetime.now())


def get_week_shows_by_offset(shows: List[Any], week_offset: int, now: Optional[datetime] = None) -> WeekSchedule:
    """Shows for the week `week_offset` weeks from now (0 = this week, -1 = last week)."""
    reference = (now or datetime.now()) + timedelta(days=7 * week_offset)
    return organize_shows_by_week(shows, reference)
