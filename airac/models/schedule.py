"""
Schedules of AIRAC effective dates.

An AiracSchedule is a run of consecutive cycles, similar to the
"Schedule of AIRAC effective dates" tables published by ICAO, and can be
exported as records, a pandas DataFrame or a CSV file.
"""

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Iterator, List, Union

import pandas as pd

from .airac import Airac, to_utc

logger = logging.getLogger(__name__)

SCHEDULE_COLUMNS = ['identifier', 'year', 'ordinal', 'effective', 'expires']


def cycles_in_year(year: int) -> List[Airac]:
    """
    Get all cycles effective in a given year.

    Args:
        year: Calendar year

    Returns:
        The 13 (or occasionally 14) cycles of that year, in order
    """
    return list(AiracSchedule.for_years(year, year))


class AiracSchedule:
    """
    Consecutive AIRAC cycles from ``start`` through ``end`` inclusive.

    The schedule is empty when ``end`` precedes ``start``.
    """

    def __init__(self, start: Airac, end: Airac):
        self.start = start
        self.end = end

    @classmethod
    def for_years(cls, first_year: int, last_year: int) -> 'AiracSchedule':
        """Schedule of all cycles effective between first_year and last_year inclusive."""
        start = Airac.from_instant(datetime(first_year, 1, 1, tzinfo=timezone.utc))
        if start.year < first_year:
            start = start.next()
        end = Airac.from_instant(datetime(last_year, 12, 31, 23, 59, 59, tzinfo=timezone.utc))
        return cls(start, end)

    @classmethod
    def between(cls, start: datetime, end: datetime) -> 'AiracSchedule':
        """Schedule of all cycles becoming effective within [start, end]."""
        first = Airac.from_instant(start)
        if first.effective < to_utc(start):
            first = first.next()
        return cls(first, Airac.from_instant(end))

    @classmethod
    def count(cls, start: Airac, n: int) -> 'AiracSchedule':
        """Schedule of n cycles starting with start."""
        return cls(start, start + (n - 1))

    def __iter__(self) -> Iterator[Airac]:
        airac = self.start
        while airac <= self.end:
            yield airac
            airac = airac.next()

    def __len__(self) -> int:
        return max(0, self.end - self.start + 1)

    def __contains__(self, airac: Airac) -> bool:
        return self.start <= airac <= self.end

    def __repr__(self) -> str:
        return f"AiracSchedule({self.start}, {self.end}, {len(self)} cycles)"

    def to_records(self) -> List[Dict[str, Any]]:
        """Cycles as dictionaries, dates formatted as YYYY-MM-DD."""
        return [
            {
                'identifier': airac.identifier,
                'year': airac.year,
                'ordinal': airac.ordinal,
                'effective': airac.effective.date().isoformat(),
                'expires': airac.expires.date().isoformat(),
            }
            for airac in self
        ]

    def to_dataframe(self) -> pd.DataFrame:
        """Cycles as a pandas DataFrame with one row per cycle."""
        return pd.DataFrame(self.to_records(), columns=SCHEDULE_COLUMNS)

    def to_csv(self, path: Union[str, Path]) -> None:
        """Write the schedule to a CSV file."""
        df = self.to_dataframe()
        df.to_csv(path, index=False)
        logger.info(f"Wrote {len(df)} AIRAC cycles to {path}")
