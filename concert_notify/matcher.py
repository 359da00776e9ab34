"""Artist name matching.

Matches show lineups against a listener's artists (top artists and liked-song
artists). Names from the two sides are spelled independently, so comparison
goes through a lossy normalization that is only ever used for equality checks;
output keeps the original spelling.
"""

import logging
import re
from typing import Any, Iterable, List, Mapping, Optional, Set

from .date_utils import parse_date_text
from .models import Show, copy_show

logger = logging.getLogger("concert-notify.matcher")

_WHITESPACE_RE = re.compile(r"\s+")
_LEADING_THE_RE = re.compile(r"^the\s+", re.IGNORECASE)
_AMPERSAND_RE = re.compile(r"\s+&\s+")
_CURLY_APOSTROPHES = str.maketrans({"‘": "'", "’": "'"})


def normalize_artist_name(name) -> str:
    """Normalize an artist name for comparison.

    Lowercase, trim, collapse whitespace, drop a leading "the ",
    " & " → " and ", curly apostrophes → straight. Non-strings give "".
    """
    if not isinstance(name, str):
        return ""
    text = name.lower().strip()
    text = _WHITESPACE_RE.sub(" ", text)
    text = _LEADING_THE_RE.sub("", text)
    text = _AMPERSAND_RE.sub(" and ", text)
    text = text.translate(_CURLY_APOSTROPHES)
    return text.strip()


def artist_names_match(a, b) -> bool:
    return normalize_artist_name(a) == normalize_artist_name(b)


def _artist_name(artist: Any) -> Optional[str]:
    if isinstance(artist, Mapping):
        return artist.get("name")
    return None


def build_artist_name_set(artists: Iterable[Any]) -> Set[str]:
    """Set of normalized names; entries without a usable name are skipped."""
    names: Set[str] = set()
    for artist in artists:
        normalized = normalize_artist_name(_artist_name(artist))
        if normalized:
            names.add(normalized)
    return names


def merge_artists(*sources: Iterable[Any]) -> List[Mapping[str, Any]]:
    """Combine artist lists, keeping the first record for each normalized name.

    Used to fold top artists and liked-song artists into one profile.
    """
    merged = []
    seen: Set[str] = set()
    for source in sources:
        for artist in source or ():
            normalized = normalize_artist_name(_artist_name(artist))
            if not normalized or normalized in seen:
                continue
            seen.add(normalized)
            merged.append(artist)
    return merged


def _lineup(show: Any) -> Optional[list]:
    """The show's artist list, or None if the record is malformed."""
    if not isinstance(show, Mapping):
        return None
    artists = show.get("artists")
    if not isinstance(artists, (list, tuple)):
        return None
    return list(artists)


def _date_sort_key(show: Show):
    # Undated shows sort after dated ones; sorted() keeps input order for ties
    parsed = parse_date_text(show.get("date"))
    return (parsed is None, parsed.toordinal() if parsed else 0)


def find_matching_shows(user_artist_names: Set[str], shows: List[Any]) -> List[Show]:
    """Shows with at least one lineup artist in the user's name set, oldest first.

    Malformed records (not a mapping, or no artist list) are skipped.
    Returned shows are copies.
    """
    if not isinstance(shows, (list, tuple)):
        raise TypeError(f"shows must be a list, got {type(shows).__name__}")

    matches = []
    malformed = 0
    for show in shows:
        lineup = _lineup(show)
        if lineup is None:
            malformed += 1
            continue
        if any(normalize_artist_name(artist) in user_artist_names for artist in lineup):
            matches.append(copy_show(show))

    if malformed:
        logger.debug(f"Skipped {malformed} malformed show record(s)")

    matches.sort(key=_date_sort_key)
    return matches
