"""
Exceptions raised when decoding AIRAC identifiers.
"""

from typing import Optional


class AiracError(ValueError):
    """Base exception for AIRAC identifier errors."""

    def __init__(self, message: str, identifier: Optional[str] = None):
        """
        Initialize the error.

        Args:
            message: Error message
            identifier: The identifier that could not be decoded
        """
        super().__init__(message)
        self.identifier = identifier


class InvalidIdentifierError(AiracError):
    """Raised when an identifier is not exactly four ASCII digits."""

    def __init__(self, identifier: str):
        super().__init__(f"illegal AIRAC identifier: {identifier!r}", identifier)


class NoSuchCycleError(AiracError):
    """Raised when a well-formed identifier names an ordinal its year does not have."""

    def __init__(self, identifier: str, year: int, ordinal: int):
        super().__init__(f"year {year} has no cycle {ordinal:02d}", identifier)
        self.year = year
        self.ordinal = ordinal

    def __str__(self) -> str:
        return f"{super().__str__()} (identifier: {self.identifier})"
