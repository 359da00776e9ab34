#!/usr/bin/env python3
"""Concert Notify — Main Runner

Loads scraped shows and a listener's artists, keeps the shows featuring those
artists, and prints them as a Monday-to-Sunday week.

Usage:
    python -m concert_notify.main --artists artists.json
    python -m concert_notify.main --artists artists.json --week-offset 1
    python -m concert_notify.main --artists artists.json --json

The artists file is either a list of {"name": ...} objects or an object with
"topArtists" and/or "likedArtists" lists.
"""

import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional

from .config import LOG_LEVEL, LOGGER_NAME
from .date_utils import has_known_time, to_iso_date_string
from .matcher import build_artist_name_set, find_matching_shows, merge_artists
from .models import ShowsUnavailableError, WeekSchedule
from .organizer import get_week_shows_by_offset
from .shows_source import load_shows

logger = logging.getLogger(LOGGER_NAME)


def load_artists(path: Path) -> List[Any]:
    """Read the listener's artists, merging top and liked artists if both are given."""
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if isinstance(data, dict):
        return merge_artists(data.get("topArtists") or [], data.get("likedArtists") or [])
    if isinstance(data, list):
        return merge_artists(data)
    raise ValueError(f"Artists file must hold a list or an object: {path}")


def format_show_line(show: dict) -> str:
    """'ARTIST, ARTIST — VENUE (TIME)'; unknown times show as 'time TBA'."""
    time_str = show.get("time") if has_known_time(show.get("time")) else "time TBA"
    return f"{', '.join(show.get('artists', []))} — {show.get('venue', '')} ({time_str})"


def print_week(week: WeekSchedule) -> None:
    """Print a text summary of the week."""
    print(f"\n{'='*60}")
    print(
        f"WEEK OF {to_iso_date_string(week.week_start_date)}"
        f" TO {to_iso_date_string(week.week_end_date)}"
    )
    print(f"{'='*60}")

    for day in week.days:
        print(f"\n━━━ {day.label.upper()} {day.date} ━━━")
        if not day.shows:
            print("  (no shows)")
        for show in day.shows:
            print(f"  {format_show_line(show)}")

    print(f"\n{'='*60}\n")


def run(
    artists_path: Path,
    shows_path: Optional[Path] = None,
    remote_url: Optional[str] = None,
    week_offset: int = 0,
    as_json: bool = False,
    now: Optional[datetime] = None,
) -> int:
    """Main execution: load → match → organize → print. Returns an exit code.

    Pass `now` to pin the week instead of using the current time.
    """
    try:
        artists = load_artists(artists_path)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load artists from {artists_path}: {e}")
        return 1

    try:
        shows = load_shows(shows_path, remote_url)
    except ShowsUnavailableError as e:
        logger.error(str(e))
        return 1

    name_set = build_artist_name_set(artists)
    logger.info(f"{len(artists)} artist(s) in profile, {len(shows)} show(s) loaded")

    matches = find_matching_shows(name_set, shows)
    logger.info(f"{len(matches)} show(s) match the profile")

    week = get_week_shows_by_offset(matches, week_offset, now=now)
    logger.info(f"{week.show_count} matching show(s) this week, {week.dropped.total} outside it or undated")

    if as_json:
        print(json.dumps(week.to_dict(), indent=2))
    else:
        print_week(week)
    return 0


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Weekly shows for the artists you listen to.")
    parser.add_argument("--artists", type=Path, required=True, help="JSON file of the listener's artists")
    parser.add_argument("--shows", type=Path, default=None, help="Scraped shows JSON (default: SHOWS_LOCAL_PATH)")
    parser.add_argument("--remote-url", default=None, help="Fallback URL for shows JSON")
    parser.add_argument("--week-offset", type=int, default=0, help="0 = this week, 1 = next, -1 = last")
    parser.add_argument("--json", action="store_true", help="Print the week as JSON")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    return run(
        artists_path=args.artists,
        shows_path=args.shows,
        remote_url=args.remote_url,
        week_offset=args.week_offset,
        as_json=args.json,
    )


if __name__ == "__main__":
    sys.exit(main())
