"""
AIRAC cycle value type.

Regular, planned Aeronautical Information Publications (AIP) as defined by
ICAO become effective at fixed dates, following a schedule of 28-day cycles
(ICAO DOC 8126, 6th edition, paragraph 2.6.2 b). Each cycle is identified by
a 4-digit "YYOO" identifier: the last two digits of the year and the 1-based
ordinal of the cycle within that year.

All calculations use UTC. A cycle is considered effective from its effective
date at 00:00:00 UTC until 27 days later at 23:59:59 UTC.
"""

import logging
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Union

from .exceptions import InvalidIdentifierError, NoSuchCycleError

logger = logging.getLogger(__name__)

# Length of one AIRAC cycle (exactly 2,419,200 seconds)
CYCLE_DURATION = timedelta(days=28)

# Fictive epoch on the 28-day grid that includes 29 January 1998.
# Keeps serials non-negative from 1901 onwards.
EPOCH = datetime(1901, 1, 10, tzinfo=timezone.utc)

# Two-digit years at or above this pivot decode to 19YY, below to 20YY
CENTURY_PIVOT = 64

_IDENTIFIER_PATTERN = re.compile(r'[0-9]{4}')


def to_utc(instant: datetime) -> datetime:
    """Normalize an instant to an aware UTC datetime. Naive values are taken as UTC."""
    if instant is None:
        raise TypeError("instant must not be None")
    if not isinstance(instant, datetime):
        raise TypeError(f"instant must be a datetime, got {type(instant).__name__}")
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


@dataclass(frozen=True, order=True)
class Airac:
    """
    An AIRAC cycle.

    The only stored attribute is ``serial``, the number of cycles between the
    epoch and this cycle. Equality, ordering and hashing are all derived from
    it. Instances should be obtained through ``from_instant`` or
    ``from_identifier`` rather than built from a serial directly.

    Instants earlier than the epoch yield negative serials. Results are
    plausible for years between 1800 and 2200; identifiers only cover
    1964 to 2063.
    """

    serial: int

    @classmethod
    def from_instant(cls, instant: datetime) -> 'Airac':
        """
        Get the cycle that is effective at a given instant.

        Args:
            instant: Point in time; naive datetimes are interpreted as UTC

        Returns:
            The cycle whose window [effective, next effective) contains instant
        """
        # timedelta // timedelta floors, so instants before the epoch map to negative serials
        return cls((to_utc(instant) - EPOCH) // CYCLE_DURATION)

    @classmethod
    def from_identifier(cls, identifier: str) -> 'Airac':
        """
        Get the cycle represented by a "YYOO" identifier.

        Identifiers "6401" to "9913" decode to the years 1964 to 1999,
        identifiers "0001" to "6313" to the years 2000 to 2063.

        Args:
            identifier: Four ASCII digits

        Returns:
            The cycle with that identifier

        Raises:
            TypeError: If identifier is not a string
            InvalidIdentifierError: If identifier is not exactly four ASCII digits
            NoSuchCycleError: If the decoded year has no cycle with that ordinal
        """
        if not isinstance(identifier, str):
            raise TypeError(f"identifier must be a str, got {type(identifier).__name__}")
        if not _IDENTIFIER_PATTERN.fullmatch(identifier):
            raise InvalidIdentifierError(identifier)

        yy = int(identifier[:2])
        ordinal = int(identifier[2:])
        year = (1900 if yy >= CENTURY_PIVOT else 2000) + yy

        last_of_previous_year = cls.from_instant(datetime(year - 1, 12, 31, 23, 59, 59, tzinfo=timezone.utc))
        airac = cls(last_of_previous_year.serial + ordinal)

        if airac.year != year:
            logger.debug(f"Rejecting {identifier}: cycle {ordinal} of {year} falls in {airac.year}")
            raise NoSuchCycleError(identifier, year, ordinal)

        return airac

    @property
    def effective(self) -> datetime:
        """Instant (00:00:00 UTC) at which this cycle becomes effective."""
        return EPOCH + CYCLE_DURATION * self.serial

    @property
    def expires(self) -> datetime:
        """Last second during which this cycle is effective."""
        return self.next().effective - timedelta(seconds=1)

    @property
    def year(self) -> int:
        """UTC calendar year of the effective date."""
        return self.effective.year

    @property
    def ordinal(self) -> int:
        """1-based index of this cycle within its year."""
        return (self.effective.timetuple().tm_yday - 1) // 28 + 1

    @property
    def identifier(self) -> str:
        """Short "YYOO" representation."""
        return f"{self.year % 100:02d}{self.ordinal:02d}"

    def long_form(self) -> str:
        """
        Verbose representation, e.g.
        "1209 (effective: 2012-08-23; expires: 2012-09-19)".
        """
        return (f"{self.identifier} (effective: {self.effective.date().isoformat()}; "
                f"expires: {self.expires.date().isoformat()})")

    def next(self) -> 'Airac':
        """Successor cycle."""
        return Airac(self.serial + 1)

    def previous(self) -> 'Airac':
        """Predecessor cycle."""
        return Airac(self.serial - 1)

    def contains(self, instant: datetime) -> bool:
        """Check if this cycle is effective at instant."""
        return self.effective <= to_utc(instant) < self.next().effective

    def __add__(self, cycles: int) -> 'Airac':
        if not isinstance(cycles, int):
            return NotImplemented
        return Airac(self.serial + cycles)

    def __sub__(self, other: Union['Airac', int]) -> Union['Airac', int]:
        if isinstance(other, Airac):
            return self.serial - other.serial
        if isinstance(other, int):
            return Airac(self.serial - other)
        return NotImplemented

    def __str__(self) -> str:
        return self.identifier

    def __repr__(self) -> str:
        return f"Airac('{self.identifier}', effective={self.effective.date().isoformat()})"


def cycle_from_instant(instant: datetime) -> Airac:
    """Get the cycle effective at instant. See ``Airac.from_instant``."""
    return Airac.from_instant(instant)


def cycle_from_identifier(identifier: str) -> Airac:
    """Get the cycle for a "YYOO" identifier. See ``Airac.from_identifier``."""
    return Airac.from_identifier(identifier)
