from datetime import datetime

import pytest


@pytest.fixture
def sample_shows():
    return [
        {"artists": ["Band A"], "venue": "Venue 1", "date": "2/10/2026", "time": "08:00 PM"},
        {"artists": ["Band B"], "venue": "Venue 2", "date": "2/10/2026", "time": "07:00 PM"},
        {"artists": ["Band C"], "venue": "Venue 3", "date": "2/12/2026", "time": "12:00 AM"},
        {"artists": ["Band D"], "venue": "Venue 4", "date": "2/15/2026", "time": "09:00 PM"},
    ]


@pytest.fixture
def wednesday():
    return datetime(2026, 2, 11, 12, 0)
