"""
Data models for the airac library.

This package contains the AIRAC cycle value type, schedules of
consecutive cycles and the exceptions raised when decoding identifiers.
"""

from .airac import Airac, cycle_from_instant, cycle_from_identifier, CYCLE_DURATION, EPOCH
from .exceptions import AiracError, InvalidIdentifierError, NoSuchCycleError
from .schedule import AiracSchedule, cycles_in_year

__all__ = [
    # Core model
    'Airac',
    'cycle_from_instant',
    'cycle_from_identifier',
    'CYCLE_DURATION',
    'EPOCH',

    # Schedules
    'AiracSchedule',
    'cycles_in_year',

    # Exceptions
    'AiracError',
    'InvalidIdentifierError',
    'NoSuchCycleError',
]
