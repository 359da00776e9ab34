"""Data models for weekly show schedules."""

import copy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Tuple

# A show record as supplied by the scraper:
# {"artists": [...], "venue": "...", "date": "M/D/YYYY", "time": "HH:MM AM", "url": optional}
Show = Dict[str, Any]


class ShowValidationError(ValueError):
    """Raised by strict validation when a show record is malformed."""


class ShowsUnavailableError(RuntimeError):
    """Raised when no source could supply show data."""


def copy_show(show: Mapping[str, Any]) -> Show:
    """Independent copy of a show record, nested artist list included."""
    return copy.deepcopy(dict(show))


@dataclass(frozen=True)
class DropReport:
    """How many shows were left out of a week, and why."""
    unparseable_date: int = 0
    outside_week: int = 0

    @property
    def total(self) -> int:
        return self.unparseable_date + self.outside_week


@dataclass(frozen=True)
class DaySchedule:
    """One calendar day of a week: "Mon".."Sun", ISO date, time-ordered shows."""
    label: str
    date: str
    shows: Tuple[Show, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {"label": self.label, "date": self.date, "shows": [copy_show(s) for s in self.shows]}


@dataclass(frozen=True)
class WeekSchedule:
    """Seven Monday-first days between week_start_date and week_end_date."""
    week_start_date: datetime
    week_end_date: datetime
    days: Tuple[DaySchedule, ...]
    dropped: DropReport = field(default_factory=DropReport)

    @property
    def show_count(self) -> int:
        return sum(len(day.shows) for day in self.days)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form (datetimes as ISO 8601 strings)."""
        return {
            "weekStartDate": self.week_start_date.isoformat(timespec="milliseconds"),
            "weekEndDate": self.week_end_date.isoformat(timespec="milliseconds"),
            "days": [day.to_dict() for day in self.days],
            "dropped": {
                "unparseableDate": self.dropped.unparseable_date,
                "outsideWeek": self.dropped.outside_week,
            },
        }

    def all_shows(self) -> List[Show]:
        return [show for day in self.days for show in day.shows]
