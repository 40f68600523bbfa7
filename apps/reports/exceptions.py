"""Errors raised while building reports."""


class ReportsServiceError(Exception):
    """Base exception for reports."""
    pass


class InvalidSnapshotError(ReportsServiceError):
    """Raised when a report snapshot cannot be built."""
    pass


class ChartRenderError(ReportsServiceError):
    """Raised when a radar chart cannot be rendered."""
    pass


class ReportSessionNotFoundError(ReportsServiceError):
    """Raised when the session is not available for reporting."""
    pass
