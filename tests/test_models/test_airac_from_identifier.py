"""
Tests for decoding AIRAC identifiers.
"""

import pytest
from datetime import datetime, timezone

from airac.models import (
    Airac,
    AiracError,
    AiracSchedule,
    InvalidIdentifierError,
    NoSuchCycleError,
    cycle_from_identifier,
)


# (identifier, effective date, year, ordinal)
VALID_IDENTIFIERS = [
    ('2014', '2020-12-31', 2020, 14),
    ('1511', '2015-10-15', 2015, 11),
    ('1501', '2015-01-08', 2015, 1),
    ('6401', '1964-01-16', 1964, 1),
    ('6301', '2063-01-04', 2063, 1),
    ('6313', '2063-12-06', 2063, 13),
    ('9913', '1999-12-30', 1999, 13),
    ('9802', '1998-01-29', 1998, 2),
]


class TestAiracFromIdentifier:
    """Test cases for Airac.from_identifier."""

    @pytest.mark.parametrize('identifier,effective,year,ordinal', VALID_IDENTIFIERS)
    def test_valid_identifiers(self, iso_instant, identifier, effective, year, ordinal):
        """Test decoding of valid identifiers."""
        airac = Airac.from_identifier(identifier)
        assert airac.effective == iso_instant(effective)
        assert airac.year == year
        assert airac.ordinal == ordinal
        assert airac.identifier == identifier

    @pytest.mark.parametrize('identifier', ['1514', '9999', '1500', '6314', '2015'])
    def test_no_such_cycle(self, identifier):
        """Test identifiers whose ordinal does not exist in their year."""
        with pytest.raises(NoSuchCycleError) as exc_info:
            Airac.from_identifier(identifier)
        assert exc_info.value.identifier == identifier
        assert exc_info.value.ordinal == int(identifier[2:])

    def test_no_such_cycle_details(self):
        """Test the context carried by NoSuchCycleError."""
        with pytest.raises(NoSuchCycleError, match="year 2015 has no cycle 14") as exc_info:
            Airac.from_identifier('1514')
        assert exc_info.value.year == 2015
        assert '1514' in str(exc_info.value)

    @pytest.mark.parametrize('identifier', ['nope', '', '1a01', '10-1', '+101', ' 101', '101', '16051', '１６０５'])
    def test_invalid_format(self, identifier):
        """Test identifiers that are not exactly four ASCII digits."""
        with pytest.raises(InvalidIdentifierError, match="illegal AIRAC identifier"):
            Airac.from_identifier(identifier)

    def test_errors_are_value_errors(self):
        """Test that decoding errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            Airac.from_identifier('nope')
        with pytest.raises(AiracError):
            Airac.from_identifier('1514')

    def test_none_identifier(self):
        """Test that a missing identifier fails fast."""
        with pytest.raises(TypeError):
            Airac.from_identifier(None)

    def test_century_window(self):
        """Test the 1964-2063 window of two digit years."""
        assert Airac.from_identifier('6401').year == 1964
        assert Airac.from_identifier('6313').year == 2063
        assert Airac.from_identifier('0001').year == 2000

    def test_matches_instant_lookup(self):
        """Test that identifier and instant lookups agree."""
        left = Airac.from_identifier('1605')
        right = Airac.from_instant(datetime(2016, 5, 4, 8, 20, tzinfo=timezone.utc))
        assert left == right
        assert hash(left) == hash(right)
        assert left.next() == right.next()
        assert hash(left.next()) == hash(right.next())

    def test_module_function(self):
        """Test the cycle_from_identifier function."""
        assert cycle_from_identifier('2014') == Airac.from_identifier('2014')

    def test_identifier_round_trip(self):
        """Test that every cycle between 1964 and 2063 decodes from its own identifier."""
        for airac in AiracSchedule.for_years(1964, 2063):
            assert Airac.from_identifier(airac.identifier) == airac

    def test_cycles_per_year(self):
        """Test that only 1976, 1998, 2020 and 2043 have a 14th cycle."""
        fourteen_cycle_years = {1976, 1998, 2020, 2043}
        for year in range(1964, 2064):
            yy = year % 100
            valid = 0
            for ordinal in range(1, 16):
                try:
                    Airac.from_identifier(f"{yy:02d}{ordinal:02d}")
                    valid += 1
                except NoSuchCycleError:
                    pass
            expected = 14 if year in fourteen_cycle_years else 13
            assert valid == expected, f"{year} has {valid} cycles"
