"""
AIRAC (Aeronautical Information Regulation And Control) cycle calculations.

This package computes identifiers and effective dates of the 28-day AIRAC
cycles defined by ICAO.

The main public API includes:
- Airac: AIRAC cycle value type
- cycle_from_instant / cycle_from_identifier: cycle lookup
- AiracSchedule: runs of consecutive cycles with tabular export
- AIRACDateCalculator: date string helpers built on Airac
"""

from .models import (
    Airac,
    AiracSchedule,
    AiracError,
    InvalidIdentifierError,
    NoSuchCycleError,
    cycle_from_instant,
    cycle_from_identifier,
    cycles_in_year,
)
from .utils.airac_date_calculator import AIRACDateCalculator


__version__ = '0.1.0'
__all__ = [
    'Airac',
    'AiracSchedule',
    'AiracError',
    'InvalidIdentifierError',
    'NoSuchCycleError',
    'cycle_from_instant',
    'cycle_from_identifier',
    'cycles_in_year',
    'AIRACDateCalculator',
]
