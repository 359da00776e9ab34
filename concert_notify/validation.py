"""Show record validation.

Scraped data is noisy: one bad row must never sink a whole batch, so the
default is to drop invalid records and log how many went. Strict mode is for
callers (tests, fixture checks) that want the first bad record reported.
"""

import logging
from typing import Any, List, Mapping

from .config import UNKNOWN_VENUE
from .models import Show, ShowValidationError, copy_show

logger = logging.getLogger("concert-notify.validation")

SHOW_FIELDS = ("artists", "venue", "date", "time")


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


def validate_show(show: Any) -> List[str]:
    """Return a list of problems with a show record (empty when valid)."""
    if not isinstance(show, Mapping):
        return ["show must be an object"]

    errors = []
    artists = show.get("artists")
    if not isinstance(artists, (list, tuple)):
        errors.append("artists must be an array")
    elif not artists:
        errors.append("artists cannot be empty")
    elif not all(isinstance(a, str) for a in artists):
        errors.append("all artists must be strings")

    for name in ("venue", "date", "time"):
        if _is_blank(show.get(name)):
            errors.append(f"{name} must be a non-empty string")

    return errors


def validate_shows(shows: Any, strict: bool = False) -> List[Any]:
    """Keep the valid shows.

    Raises TypeError if `shows` isn't a list, and ShowValidationError on the
    first invalid record when strict.
    """
    if not isinstance(shows, (list, tuple)):
        raise TypeError(f"shows must be a list, got {type(shows).__name__}")

    valid = []
    for i, show in enumerate(shows):
        errors = validate_show(show)
        if not errors:
            valid.append(show)
        elif strict:
            raise ShowValidationError(f"Invalid show at index {i}: {', '.join(errors)}")

    dropped = len(shows) - len(valid)
    if dropped:
        logger.info(f"Dropped {dropped} invalid show record(s), kept {len(valid)}")
    return valid


def clean_scraped_shows(raw_shows: List[Mapping[str, Any]]) -> List[Show]:
    """Reduce raw scraper rows to show records.

    Rows need at least one artist and a real venue; the scraper writes
    "Unknown Venue" when the venue element is missing.
    """
    cleaned = []
    for row in raw_shows:
        if not isinstance(row, Mapping):
            continue
        if not row.get("artists"):
            continue
        venue = row.get("venue")
        if not venue or venue == UNKNOWN_VENUE:
            continue
        show = {name: row.get(name) for name in SHOW_FIELDS}
        if row.get("url"):
            show["url"] = row["url"]
        cleaned.append(copy_show(show))
    return cleaned
