"""
AIRAC date calculation utilities.

This module provides date-oriented helpers on top of the Airac cycle type.
Dates are accepted as ISO-8601 strings (typically YYYY-MM-DD) or datetime
objects and returned as formatted date strings. Naive datetimes are taken
as UTC.
"""

import logging
from datetime import datetime
from typing import Optional, List, Union

from dateutil import parser as date_parser

from ..config import DATE_FORMAT
from ..models.airac import Airac, to_utc
from ..models.schedule import AiracSchedule

logger = logging.getLogger(__name__)

DateLike = Union[str, datetime]


class AIRACDateCalculator:
    """
    Utility for calculating AIRAC dates based on the 28-day cycle.

    AIRAC dates follow a predictable pattern:
    - 28-day cycle
    - Always fall on Thursdays
    - Aligned on the ICAO schedule that includes 29 January 1998
    """

    def __init__(self, date_format: str = DATE_FORMAT):
        """
        Initialize the AIRAC date calculator.

        Args:
            date_format: strftime format of the returned dates (defaults to YYYY-MM-DD)
        """
        self.date_format = date_format

    def _parse_date(self, date: DateLike) -> datetime:
        """Parse a date string, or pass a datetime through, as a UTC datetime."""
        if isinstance(date, datetime):
            return to_utc(date)
        try:
            return to_utc(date_parser.isoparse(date))
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid date format: {date}. Expected YYYY-MM-DD") from e

    def _format(self, airac: Airac) -> str:
        return airac.effective.strftime(self.date_format)

    def current_airac(self, from_date: DateLike) -> Airac:
        """Get the AIRAC cycle effective at a given date."""
        return Airac.from_instant(self._parse_date(from_date))

    def current_airac_date(self, from_date: DateLike) -> str:
        """
        Get the current effective AIRAC date (the most recent AIRAC date not in the future).

        Args:
            from_date: Date to calculate from. Can be string (YYYY-MM-DD) or datetime

        Returns:
            Current effective AIRAC date; an AIRAC date is its own current date
        """
        return self._format(self.current_airac(from_date))

    def next_airac_date(self, from_date: DateLike) -> str:
        """
        Get the next AIRAC date from a given date.

        Args:
            from_date: Date to calculate from. Can be string (YYYY-MM-DD) or datetime

        Returns:
            Effective date of the cycle following the current one
        """
        return self._format(self.current_airac(from_date).next())

    def previous_airac_date(self, from_date: DateLike) -> str:
        """
        Get the previous AIRAC date from a given date.

        Args:
            from_date: Date to calculate from. Can be string (YYYY-MM-DD) or datetime

        Returns:
            Effective date of the cycle preceding the current one
        """
        return self._format(self.current_airac(from_date).previous())

    def is_airac_date(self, date: DateLike) -> bool:
        """
        Check if a given date is an AIRAC date.

        Args:
            date: Date to check. Can be string (YYYY-MM-DD) or datetime

        Returns:
            True if the date is the effective instant of a cycle, False otherwise
        """
        instant = self._parse_date(date)
        return Airac.from_instant(instant).effective == instant

    def identifier_for_date(self, date: DateLike) -> str:
        """Get the YYOO identifier of the cycle effective at a given date."""
        return self.current_airac(date).identifier

    def get_airac_dates_range(self, start_date: DateLike,
                              end_date: Optional[DateLike] = None,
                              count: Optional[int] = None) -> List[str]:
        """
        Get a range of AIRAC dates.

        Args:
            start_date: Starting date. Can be string (YYYY-MM-DD) or datetime
            end_date: Ending date (inclusive). Can be string (YYYY-MM-DD) or datetime
            count: Number of dates to return (alternative to end_date)

        Returns:
            List of AIRAC dates, starting with start_date if it is an AIRAC date,
            otherwise with the next one

        Raises:
            ValueError: If both end_date and count are provided, or neither is provided
        """
        if (end_date is None and count is None) or (end_date is not None and count is not None):
            raise ValueError("Either end_date or count must be provided, but not both")

        start = self._parse_date(start_date)
        if count is not None:
            first = AiracSchedule.between(start, start).start
            schedule = AiracSchedule.count(first, count)
        else:
            schedule = AiracSchedule.between(start, self._parse_date(end_date))

        logger.debug(f"AIRAC dates range {schedule!r}")
        return [self._format(airac) for airac in schedule]

    def days_until_next_airac(self, from_date: DateLike) -> int:
        """
        Calculate the number of days until the next AIRAC date.

        Args:
            from_date: Date to calculate from. Can be string (YYYY-MM-DD) or datetime

        Returns:
            Number of whole days until the next AIRAC date
        """
        instant = self._parse_date(from_date)
        return (Airac.from_instant(instant).next().effective - instant).days

    def days_since_current_airac(self, from_date: DateLike) -> int:
        """
        Calculate the number of days since the current AIRAC date.

        Args:
            from_date: Date to calculate from. Can be string (YYYY-MM-DD) or datetime

        Returns:
            Number of whole days since the current cycle became effective (0 on an AIRAC date)
        """
        instant = self._parse_date(from_date)
        return (instant - Airac.from_instant(instant).effective).days


# Convenience functions for common operations
def is_airac_date(date: DateLike) -> bool:
    """
    Check if a date is an AIRAC date.

    Args:
        date: Date to check

    Returns:
        True if the date is an AIRAC date
    """
    return AIRACDateCalculator().is_airac_date(date)


def get_next_airac_date(from_date: DateLike) -> str:
    """
    Get the next AIRAC date.

    Args:
        from_date: Date to calculate from

    Returns:
        Next AIRAC date in YYYY-MM-DD format
    """
    return AIRACDateCalculator().next_airac_date(from_date)
