"""Custom exceptions."""


class KoyomiError(Exception):
    """Base exception for koyomi."""


class InvalidMonthError(KoyomiError, ValueError):
    """Raised when a year/month pair does not name a calendar month."""

    def __init__(self, year: int, month: int) -> None:
        super().__init__(f"Invalid month: {year}-{month:02d}")
        self.year = year
        self.month = month


class CalendarDecompositionError(KoyomiError):
    """Raised when year, month, day or weekday cannot be read from a date."""


class ConfigError(KoyomiError):
    """Raised when a configuration value is invalid."""
