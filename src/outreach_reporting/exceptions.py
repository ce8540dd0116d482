"""
Custom exceptions for outreach reporting.

Degraded entry data (unparseable dates or ages, unknown labels) never
raises; these exceptions cover caller errors and the Entry Store boundary.
"""


class ReportingError(Exception):
    """
    Base exception for all reporting-related errors.

    All other reporting exceptions inherit from this class,
    allowing for broad exception catching when needed.
    """

    pass


class InvalidWindowError(ReportingError, ValueError):
    """Raised when a reporting window is not a positive whole number of days."""

    def __init__(self, window_days: object):
        self.window_days = window_days
        super().__init__(
            f"window_days must be a positive integer, got {window_days!r}"
        )


class EntryValidationError(ReportingError):
    """
    Raised when a stored row cannot be turned into an Entry.

    Attributes:
        field: The field name that failed validation (optional)
        value: The invalid value (optional)
        message: Detailed error message
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: object | None = None,
    ):
        self.field = field
        self.value = value
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with field and value context."""
        if self.field and self.value is not None:
            return f"{self.message} (field='{self.field}', value={self.value!r})"
        elif self.field:
            return f"{self.message} (field='{self.field}')"
        return self.message
