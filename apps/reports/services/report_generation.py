"""Session report generation."""

import logging
import re
from datetime import date
from typing import Mapping, Optional
from uuid import UUID

from django.conf import settings
from django.utils import timezone

from ..aggregation import SampleSummary, summarize_sample, build_session_summary
from ..charts import render_radar_chart
from ..domain import SessionSnapshot
from ..pdf import CuppingReportFormatter
from ..repositories import CuppingReportRepository, DjangoReportRepository
from .exceptions import ChartRenderError

logger = logging.getLogger(__name__)


def report_filename(session_name: str, on: date) -> str:
    """`<name>_report_<YYYY-MM-DD>.pdf` with non-alphanumerics as underscores."""
    stem = re.sub(r'[^a-z0-9]', '_', session_name, flags=re.IGNORECASE).lower()
    return f'{stem}_report_{on:%Y-%m-%d}.pdf'


def load_session_summaries(
    *,
    session_id: UUID,
    repository: CuppingReportRepository
) -> tuple[SessionSnapshot, list[SampleSummary]]:
    """
    The session snapshot and one summary per sample, in table order.

    Raises:
        ReportSessionNotFoundError: If the repository has no such session
    """
    session = repository.get_session(session_id)
    summaries = [
        summarize_sample(sample, repository.get_scores_for_sample(session.session_id, sample.sample_id))
        for sample in session.samples
    ]
    return session, summaries


def render_sample_charts(summaries) -> dict:
    """
    Radar chart PNGs keyed by sample id.

    Samples whose chart cannot be rendered map to None.
    """
    charts = {}
    for summary in summaries:
        if not summary.has_evaluations:
            continue
        try:
            charts[summary.sample.sample_id] = render_radar_chart(
                summary.category_averages, title=summary.sample.name
            )
        except ChartRenderError as e:
            logger.warning("Chart for sample %s unavailable: %s", summary.sample.sample_id, e)
            charts[summary.sample.sample_id] = None
    return charts


def generate_session_report(
    *,
    session_id: UUID,
    organization=None,
    repository: Optional[CuppingReportRepository] = None,
    charts: Optional[Mapping[str, Optional[bytes]]] = None
) -> tuple[str, bytes]:
    """
    Build the PDF report of a session.

    Args:
        session_id: Session UUID
        organization: Tenant whose data is read (default repository only)
        repository: Report repository; defaults to the database
        charts: Pre-rendered chart images keyed by sample id; rendered
            here when omitted and charts are enabled

    Returns:
        (filename, pdf_bytes)

    Raises:
        ReportSessionNotFoundError: If the session isn't available
    """
    if repository is None:
        repository = DjangoReportRepository(organization)

    session, summaries = load_session_summaries(session_id=session_id, repository=repository)

    include_charts = settings.CUPPING_REPORT_INCLUDE_CHARTS
    if charts is None and include_charts:
        charts = render_sample_charts(summaries)

    now = timezone.localtime()
    formatter = CuppingReportFormatter(
        page_size=settings.CUPPING_REPORT_PAGE_SIZE,
        include_charts=include_charts or bool(charts),
        include_private_notes=settings.CUPPING_REPORT_INCLUDE_PRIVATE_NOTES,
        generated_at=now,
    )
    pdf_bytes = formatter.render(session, summaries, charts)
    filename = report_filename(session.name, now.date())

    logger.info(
        "Generated report %s for session %s (%d samples, %d bytes)",
        filename,
        session.session_id,
        len(summaries),
        len(pdf_bytes),
    )
    return filename, pdf_bytes


def get_session_summary(
    *,
    session_id: UUID,
    organization=None,
    repository: Optional[CuppingReportRepository] = None,
    include_private_notes: bool = False
) -> dict:
    """JSON-friendly aggregates of a session's samples."""
    if repository is None:
        repository = DjangoReportRepository(organization)

    session, summaries = load_session_summaries(session_id=session_id, repository=repository)
    return build_session_summary(session, summaries, include_private_notes=include_private_notes)
