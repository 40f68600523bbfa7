"""Services for session reports."""

from .exceptions import (
    ReportsServiceError,
    InvalidSnapshotError,
    ChartRenderError,
    ReportSessionNotFoundError,
)
from .report_generation import (
    report_filename,
    load_session_summaries,
    render_sample_charts,
    generate_session_report,
    get_session_summary,
)

__all__ = [
    # Exceptions
    'ReportsServiceError',
    'InvalidSnapshotError',
    'ChartRenderError',
    'ReportSessionNotFoundError',
    # Services
    'report_filename',
    'load_session_summaries',
    'render_sample_charts',
    'generate_session_report',
    'get_session_summary',
]
