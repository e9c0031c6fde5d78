import pytest
from datetime import datetime, timezone


def utc_date(iso_date: str) -> datetime:
    """Return midnight UTC of a YYYY-MM-DD date."""
    return datetime.strptime(iso_date, '%Y-%m-%d').replace(tzinfo=timezone.utc)


@pytest.fixture
def iso_instant():
    """Return a factory turning YYYY-MM-DD strings into UTC instants."""
    return utc_date
