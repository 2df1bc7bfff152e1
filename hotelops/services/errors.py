"""Errors raised by the reporting core."""


class ReportError(Exception):
    """Base class for errors that originate in report generation itself."""


class InvalidRangeError(ReportError, ValueError):
    """The requested start date falls after the end date."""

    def __init__(self, start_date, end_date) -> None:
        self.start_date = start_date
        self.end_date = end_date
        super().__init__(f"start_date ({start_date}) must not be after end_date ({end_date})")


class ContractViolationError(ReportError, TypeError):
    """A data source returned None where it promised a sequence."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Occupancy data source returned None from {operation}(); expected a list")
