"""Domain-specific exceptions for report services."""

from ..exceptions import (
    ReportsServiceError,
    InvalidSnapshotError,
    ChartRenderError,
    ReportSessionNotFoundError,
)

__all__ = [
    'ReportsServiceError',
    'InvalidSnapshotError',
    'ChartRenderError',
    'ReportSessionNotFoundError',
]
