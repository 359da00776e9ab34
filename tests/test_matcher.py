import copy

import pytest

from concert_notify.matcher import (
    artist_names_match,
    build_artist_name_set,
    find_matching_shows,
    merge_artists,
    normalize_artist_name,
)


def test_normalize_lowercases_and_trims():
    assert normalize_artist_name("RADIOHEAD") == "radiohead"
    assert normalize_artist_name("  Radiohead  ") == "radiohead"


def test_normalize_collapses_whitespace():
    assert normalize_artist_name("The   Black   Keys") == "black keys"
    assert normalize_artist_name("Black\tKeys\n") == "black keys"


def test_normalize_strips_leading_the():
    assert normalize_artist_name("The National") == "national"
    assert normalize_artist_name("THE STROKES") == normalize_artist_name("Strokes") == "strokes"
    assert normalize_artist_name("Theo Parrish") == "theo parrish"
    assert normalize_artist_name("Bring Me The Horizon") == "bring me the horizon"


def test_normalize_ampersand():
    assert normalize_artist_name("Simon & Garfunkel") == "simon and garfunkel"
    assert normalize_artist_name("Simon  &  Garfunkel") == "simon and garfunkel"
    assert normalize_artist_name("AT&T") == "at&t"


def test_normalize_apostrophes():
    assert normalize_artist_name("Guns N' Roses") == "guns n' roses"
    assert normalize_artist_name("Guns N’ Roses") == "guns n' roses"
    assert normalize_artist_name("‘Til Tuesday") == "'til tuesday"


@pytest.mark.parametrize("value", [None, 123, ["Radiohead"], {"name": "Radiohead"}])
def test_normalize_non_string(value):
    assert normalize_artist_name(value) == ""


def test_artist_names_match():
    assert artist_names_match("Radiohead", "Radiohead")
    assert artist_names_match("RADIOHEAD", "radiohead")
    assert artist_names_match("The National", "National")
    assert not artist_names_match("Radiohead", "Coldplay")


def test_build_artist_name_set_collapses_and_skips():
    names = build_artist_name_set([
        {"name": "The National"},
        {"name": "National"},
        {"name": "Big Thief", "genres": ["indie folk"]},
        {"url": "https://open.spotify.com/artist/x"},
        {"name": ""},
        {"name": None},
        None,
    ])
    assert names == {"national", "big thief"}


def test_merge_artists_keeps_first_record():
    top = [{"name": "The National", "source": "top"}, {"name": "Big Thief"}]
    liked = [{"name": "national", "source": "liked"}, {"name": "Wednesday"}, {"nope": True}]
    merged = merge_artists(top, liked)
    assert [a["name"] for a in merged] == ["The National", "Big Thief", "Wednesday"]
    assert merged[0]["source"] == "top"


def test_merge_artists_tolerates_missing_source():
    assert merge_artists(None, [{"name": "Big Thief"}]) == [{"name": "Big Thief"}]


def test_no_matches():
    names = build_artist_name_set([{"name": "Artist A"}])
    shows = [{"artists": ["Artist C"], "venue": "Venue", "date": "2025-01-01", "time": "8pm"}]
    assert find_matching_shows(names, shows) == []


def test_finds_match_case_insensitively():
    names = build_artist_name_set([{"name": "Radiohead"}])
    shows = [{"artists": ["RADIOHEAD"], "venue": "MSG", "date": "2025-06-01", "time": "8pm"}]
    result = find_matching_shows(names, shows)
    assert len(result) == 1
    assert result[0]["artists"] == ["RADIOHEAD"]


def test_matches_any_artist_on_the_bill():
    names = build_artist_name_set([{"name": "Opener Band"}])
    shows = [{"artists": ["Headliner", "Opener Band"], "venue": "Venue", "date": "2025-04-01", "time": "7pm"}]
    assert len(find_matching_shows(names, shows)) == 1


def test_matches_the_prefix_variant():
    names = build_artist_name_set([{"name": "The National"}])
    shows = [{"artists": ["National"], "venue": "Brooklyn Steel", "date": "2025-03-15", "time": "7pm"}]
    assert len(find_matching_shows(names, shows)) == 1


def test_sorts_by_date_ascending():
    names = build_artist_name_set([{"name": "Artist"}])
    shows = [
        {"artists": ["Artist"], "venue": "V1", "date": "2025-12-01", "time": "8pm"},
        {"artists": ["Artist"], "venue": "V2", "date": "2025-01-15", "time": "8pm"},
        {"artists": ["Artist"], "venue": "V3", "date": "2025-06-01", "time": "8pm"},
    ]
    assert [s["venue"] for s in find_matching_shows(names, shows)] == ["V2", "V3", "V1"]


def test_sorts_us_and_iso_dates_together():
    names = build_artist_name_set([{"name": "Artist"}])
    shows = [
        {"artists": ["Artist"], "venue": "Later", "date": "3/1/2026", "time": "08:00 PM"},
        {"artists": ["Artist"], "venue": "Earlier", "date": "2026-02-10", "time": "08:00 PM"},
        {"artists": ["Artist"], "venue": "Middle", "date": "2/20/2026", "time": "08:00 PM"},
    ]
    assert [s["venue"] for s in find_matching_shows(names, shows)] == ["Earlier", "Middle", "Later"]


def test_undated_matches_sort_last_in_input_order():
    names = build_artist_name_set([{"name": "Artist"}])
    shows = [
        {"artists": ["Artist"], "venue": "Bad1", "date": "Unknown", "time": "Unknown"},
        {"artists": ["Artist"], "venue": "Dated", "date": "2/10/2026", "time": "08:00 PM"},
        {"artists": ["Artist"], "venue": "Bad2", "date": None, "time": "08:00 PM"},
    ]
    assert [s["venue"] for s in find_matching_shows(names, shows)] == ["Dated", "Bad1", "Bad2"]


def test_equal_dates_keep_input_order():
    names = build_artist_name_set([{"name": "Artist"}])
    shows = [
        {"artists": ["Artist"], "venue": f"V{i}", "date": "2/10/2026", "time": "08:00 PM"}
        for i in range(5)
    ]
    assert [s["venue"] for s in find_matching_shows(names, shows)] == ["V0", "V1", "V2", "V3", "V4"]


def test_skips_malformed_shows():
    names = build_artist_name_set([{"name": "Artist"}])
    shows = [
        None,
        {"artists": None},
        {"artists": "Artist"},
        "Artist",
        {"artists": [None, 42, ""]},
        {"artists": ["Artist"], "venue": "Valid", "date": "2025-01-01", "time": "8pm"},
    ]
    result = find_matching_shows(names, shows)
    assert len(result) == 1
    assert result[0]["venue"] == "Valid"


def test_rejects_non_list_input():
    with pytest.raises(TypeError):
        find_matching_shows({"artist"}, None)
    with pytest.raises(TypeError):
        find_matching_shows({"artist"}, {"artists": ["Artist"]})


def test_returns_copies_and_leaves_input_alone():
    names = build_artist_name_set([{"name": "Artist"}])
    shows = [
        {"artists": ["Artist"], "venue": "V1", "date": "3/1/2026", "time": "08:00 PM"},
        {"artists": ["Artist"], "venue": "V2", "date": "2/1/2026", "time": "08:00 PM"},
    ]
    before = copy.deepcopy(shows)
    result = find_matching_shows(names, shows)
    result[0]["venue"] = "Changed"
    result[0]["artists"].append("Someone Else")
    assert shows == before
    assert result[0] is not shows[1]
