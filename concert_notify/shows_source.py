"""Show data loader.

The scraper writes data/shows.json; the remote copy of its output is the
fallback. Older remote snapshots wrapped each show as {"name": {...}} (or
{"name": {"name": {...}}}), which is unwrapped here.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, Optional, Union

import requests

from .config import SHOWS_LOCAL_PATH, SHOWS_REMOTE_TIMEOUT, SHOWS_REMOTE_URL
from .models import ShowsUnavailableError
from .validation import clean_scraped_shows, validate_shows

logger = logging.getLogger("concert-notify.shows")


def load_shows(
    local_path: Optional[Union[str, Path]] = None,
    remote_url: Optional[str] = None,
) -> List[Any]:
    """Load show records, local file first, then the remote URL.

    Scraper rows without artists or with the "Unknown Venue" placeholder
    are cleaned out, then invalid records are dropped. Raises ShowsUnavailableError if neither
    source yields a list of shows.
    """
    path = Path(local_path) if local_path is not None else SHOWS_LOCAL_PATH
    url = remote_url if remote_url is not None else SHOWS_REMOTE_URL

    shows = _load_from_local_file(path)
    if shows is None:
        shows = _load_from_remote(url)
    if shows is None:
        raise ShowsUnavailableError("Failed to load shows from any source")

    valid = validate_shows(clean_scraped_shows(shows))
    logger.info(f"Shows loaded: {len(valid)}")
    return valid


def _load_from_local_file(path: Path) -> Optional[List[Any]]:
    if not path.exists():
        logger.debug(f"Local shows file not found: {path}")
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            shows = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.error(f"Failed to load local shows file {path}: {e}")
        return None

    if not isinstance(shows, list):
        logger.warning(f"Local shows file has invalid format: {path}")
        return None

    logger.info(f"Loaded {len(shows)} show(s) from {path}")
    return shows


def _load_from_remote(url: str) -> Optional[List[Any]]:
    if not url:
        return None

    logger.info(f"Fetching shows from remote: {url}")
    try:
        response = requests.get(url, timeout=SHOWS_REMOTE_TIMEOUT)
        response.raise_for_status()
        shows = response.json()
    except requests.exceptions.RequestException as e:
        logger.error(f"Failed to fetch remote shows: {e}")
        return None
    except ValueError as e:
        logger.error(f"Remote shows response is not JSON: {e}")
        return None

    if not isinstance(shows, list):
        logger.warning("Remote shows payload is not a list")
        return None

    return unwrap_legacy_shows(shows)


def _nested_show(item: Any) -> Any:
    return item.get("name") if isinstance(item, dict) else None


def unwrap_legacy_shows(shows: List[Any]) -> List[Any]:
    """Undo the {"name": show} wrapping of old snapshots, one or two levels deep."""
    if not shows:
        return shows

    first = _nested_show(shows[0])
    if isinstance(first, dict) and "artists" in first:
        logger.debug("Converting legacy nested format")
        return [_nested_show(s) for s in shows]

    inner = _nested_show(first)
    if isinstance(inner, dict) and "artists" in inner:
        logger.debug("Converting double-nested legacy format")
        return [_nested_show(_nested_show(s)) for s in shows]

    return shows
