"""Configuration for Concert Notify."""

import os
from pathlib import Path

# ---------------------------------------------------------------------------
# Show data sources
# The scraper writes data/shows.json; the remote URL is the fallback when
# the local file is missing or unreadable.
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).parent.parent

SHOWS_LOCAL_PATH = Path(
    os.environ.get("SHOWS_LOCAL_PATH", str(PROJECT_ROOT / "data" / "shows.json"))
)
SHOWS_REMOTE_URL = os.environ.get(
    "SHOWS_REMOTE_URL",
    "https://raw.githubusercontent.com/wjdeacon21/scrapedShows/main/data/shows_recent.json",
)
SHOWS_REMOTE_TIMEOUT = float(os.environ.get("SHOWS_REMOTE_TIMEOUT", "10"))

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
LOGGER_NAME = "concert-notify"

# Placeholder the scraper writes when a row has no venue element
UNKNOWN_VENUE = "Unknown Venue"
