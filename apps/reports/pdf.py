"""
PDF layout of session reports with reportlab platypus.

The formatter works on snapshots and summaries only. Pagination is left
to platypus; each sample starts on a new page and every page carries a
footer with its number.
"""

import io
import logging
from datetime import datetime
from typing import Iterable, Mapping, Optional
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_RIGHT
from reportlab.lib.pagesizes import A4, LETTER
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.platypus import (
    SimpleDocTemplate,
    Paragraph,
    Spacer,
    Table,
    TableStyle,
    PageBreak,
    Image,
    KeepTogether,
)

from .aggregation import SampleSummary
from .domain import SessionSnapshot

logger = logging.getLogger(__name__)

PAGE_SIZES = {
    'A4': A4,
    'LETTER': LETTER,
}

NO_EVALUATIONS_TEXT = "No evaluations have been submitted for this sample."
CHART_PLACEHOLDER_TEXT = "Chart unavailable"

MARGIN = 20 * mm
CHART_MAX_WIDTH = 110 * mm
HEADER_COLOR = colors.HexColor('#6F4E37')
STRIPE_COLOR = colors.HexColor('#F8F5F2')
GRID_COLOR = colors.HexColor('#C8C8C8')


def _text(value) -> str:
    return escape(str(value))


def _datetime(value: Optional[datetime]) -> str:
    return value.strftime('%B %d, %Y %H:%M') if value else ''


class CuppingReportFormatter:
    """
    Lays out a session report.

    Args:
        page_size: 'A4' or 'LETTER'
        include_charts: Add a radar chart section per sample
        include_private_notes: Print evaluators' private notes
        generated_at: Timestamp printed in the header and footer
    """

    def __init__(
        self,
        *,
        page_size: str = 'A4',
        include_charts: bool = True,
        include_private_notes: bool = True,
        generated_at: Optional[datetime] = None
    ):
        try:
            self.page_size = PAGE_SIZES[page_size.upper()]
        except KeyError:
            raise ValueError(f"Unsupported page size {page_size!r}, use one of {', '.join(PAGE_SIZES)}")
        self.include_charts = include_charts
        self.include_private_notes = include_private_notes
        self.generated_at = generated_at or datetime.now()
        self.styles = self._build_styles()

    def _build_styles(self):
        styles = getSampleStyleSheet()
        styles.add(ParagraphStyle(
            'ReportTitle', parent=styles['Title'], fontSize=20, spaceAfter=4 * mm,
        ))
        styles.add(ParagraphStyle(
            'GeneratedOn', parent=styles['Normal'], fontSize=9, alignment=TA_RIGHT,
            textColor=colors.grey,
        ))
        styles.add(ParagraphStyle(
            'KeyValue', parent=styles['Normal'], fontSize=10, leading=14,
        ))
        styles.add(ParagraphStyle(
            'Placeholder', parent=styles['Italic'], textColor=colors.grey,
        ))
        return styles

    # -- building blocks ---------------------------------------------------

    def _paragraph(self, text: str, style: str = 'Normal') -> Paragraph:
        return Paragraph(text, self.styles[style])

    def _key_value(self, key: str, value) -> Paragraph:
        return self._paragraph(f'<b>{_text(key)}:</b> {_text(value)}', 'KeyValue')

    def _table(self, headers: list, rows: list, col_widths: Optional[list] = None) -> Table:
        table = Table([headers] + rows, colWidths=col_widths, repeatRows=1)
        style = [
            ('BACKGROUND', (0, 0), (-1, 0), HEADER_COLOR),
            ('TEXTCOLOR', (0, 0), (-1, 0), colors.white),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
            ('FONTSIZE', (0, 0), (-1, -1), 9),
            ('GRID', (0, 0), (-1, -1), 0.5, GRID_COLOR),
            ('VALIGN', (0, 0), (-1, -1), 'MIDDLE'),
        ]
        for index in range(1, len(rows) + 1, 2):
            style.append(('BACKGROUND', (0, index), (-1, index), STRIPE_COLOR))
        table.setStyle(TableStyle(style))
        return table

    # -- sections ------------------------------------------------------------

    def _header(self, session: SessionSnapshot) -> list:
        story = [
            self._paragraph('Coffee Cupping Report', 'ReportTitle'),
            self._paragraph(f'Generated on {self.generated_at.strftime("%B %d, %Y")}', 'GeneratedOn'),
            Spacer(1, 6 * mm),
            self._paragraph(_text(session.name), 'Heading1'),
        ]
        if session.description:
            story.append(self._paragraph(_text(session.description)))

        story += [
            Spacer(1, 4 * mm),
            self._paragraph('Session Details', 'Heading2'),
            self._key_value('Status', session.status),
        ]
        if session.created_by_name:
            story.append(self._key_value('Created by', session.created_by_name))
        story += [
            self._key_value('Participants', len(session.participants)),
            self._key_value('Samples', len(session.samples)),
        ]
        if session.started_at:
            story.append(self._key_value('Started', _datetime(session.started_at)))
        if session.completed_at:
            story.append(self._key_value('Completed', _datetime(session.completed_at)))
        if session.location:
            story.append(self._key_value('Location', session.location))
        return story

    def _participants(self, session: SessionSnapshot) -> list:
        story = [Spacer(1, 4 * mm), self._paragraph('Participants', 'Heading2')]
        if not session.participants:
            story.append(self._paragraph('No participants.', 'Placeholder'))
        for index, participant in enumerate(session.participants, start=1):
            role = participant.role.replace('_', ' ').title()
            story.append(self._paragraph(f'{index}. {_text(participant.name)} ({_text(role)})'))
        return story

    def _sample_information(self, summary: SampleSummary) -> list:
        sample = summary.sample
        story = [
            self._paragraph(f'Sample {sample.position}: {_text(sample.name)}', 'Heading1'),
            self._paragraph('Sample Information', 'Heading2'),
            self._key_value('Name', sample.name),
        ]
        story += [self._key_value(label, value) for label, value in sample.details()]
        return story

    def _scoring_summary(self, summary: SampleSummary) -> list:
        story = [
            Spacer(1, 4 * mm),
            self._paragraph('Scoring Summary', 'Heading2'),
            self._key_value('Average Score', f'{summary.average_total}/100'),
            self._key_value('SCAA Grade', summary.grade),
            self._key_value('Number of Evaluations', summary.evaluation_count),
            Spacer(1, 4 * mm),
            self._paragraph('Individual Evaluations', 'Heading2'),
        ]
        for evaluation in summary.evaluations:
            line = f'<b>{_text(evaluation.evaluator_name)}:</b> {evaluation.total}/100 ({_text(evaluation.grade)})'
            if not evaluation.is_complete:
                line += ' <i>incomplete</i>'
            story.append(self._paragraph(line))
        return story

    def _category_table(self, summary: SampleSummary) -> list:
        rows = [
            [label, '-' if average is None else f'{average}/10', rating or '-']
            for _, label, average, rating in summary.category_rows()
        ]
        return [
            Spacer(1, 4 * mm),
            self._paragraph('SCAA Category Breakdown', 'Heading2'),
            self._table(['Category', 'Average Score', 'Rating'], rows, [60 * mm, 45 * mm, 45 * mm]),
        ]

    def _flavor_table(self, summary: SampleSummary) -> list:
        if not summary.flavors:
            return []
        rows = [
            [flavor.name, flavor.category.title(), str(flavor.intensity)]
            for flavor in summary.flavors
        ]
        return [
            Spacer(1, 4 * mm),
            self._paragraph('Flavor Profile Analysis', 'Heading2'),
            self._table(['Flavor Descriptor', 'Category', 'Intensity'], rows, [60 * mm, 45 * mm, 45 * mm]),
        ]

    def _chart(self, summary: SampleSummary, image_bytes: Optional[bytes]) -> list:
        if not self.include_charts:
            return []

        heading = self._paragraph('Category Profile', 'Heading2')
        placeholder = self._paragraph(CHART_PLACEHOLDER_TEXT, 'Placeholder')

        if not image_bytes:
            return [Spacer(1, 4 * mm), heading, placeholder]

        try:
            reader = ImageReader(io.BytesIO(image_bytes))
            # decode every row now; a truncated stream would otherwise fail inside build
            reader.getRGBData()
            width, height = reader.getSize()
        except Exception as e:
            # undecodable chart images must not abort the report
            logger.warning(
                "Chart image for sample %s could not be decoded: %s",
                summary.sample.sample_id,
                e,
            )
            return [Spacer(1, 4 * mm), heading, placeholder]

        scale = min(1.0, CHART_MAX_WIDTH / width)
        image = Image(io.BytesIO(image_bytes), width=width * scale, height=height * scale)
        return [Spacer(1, 4 * mm), KeepTogether([heading, image])]

    def _notes(self, summary: SampleSummary) -> list:
        notes = [
            note for note in summary.notes
            if note.notes or (self.include_private_notes and note.private_notes)
        ]
        if not notes:
            return []

        story = [Spacer(1, 4 * mm), self._paragraph('Cupping Notes', 'Heading2')]
        for note in notes:
            heading = _text(note.evaluator_name)
            if note.created_at:
                heading += f' ({note.created_at.strftime("%b %d, %Y")})'
            story.append(self._paragraph(f'<b>{heading}:</b>'))
            if note.notes:
                story.append(self._paragraph(f'Notes: {_text(note.notes)}'))
            if self.include_private_notes and note.private_notes:
                story.append(self._paragraph(f'Private Notes: {_text(note.private_notes)}'))
        return story

    def _sample_section(self, summary: SampleSummary, image_bytes: Optional[bytes]) -> list:
        story = self._sample_information(summary)

        if not summary.has_evaluations:
            story += [Spacer(1, 4 * mm), self._paragraph(NO_EVALUATIONS_TEXT, 'Placeholder')]
            return story

        story += self._scoring_summary(summary)
        story += self._category_table(summary)
        story += self._flavor_table(summary)
        story += self._chart(summary, image_bytes)
        story += self._notes(summary)
        return story

    # -- document ------------------------------------------------------------

    def build_story(
        self,
        session: SessionSnapshot,
        summaries: Iterable[SampleSummary],
        charts: Optional[Mapping[str, Optional[bytes]]] = None
    ) -> list:
        """
        Flowables of the whole report.

        Args:
            session: Session snapshot
            summaries: One summary per sample, in table order
            charts: PNG bytes keyed by sample id
        """
        charts = charts or {}
        story = self._header(session) + self._participants(session)

        for summary in summaries:
            story.append(PageBreak())
            story += self._sample_section(summary, charts.get(summary.sample.sample_id))

        return story

    def _draw_footer(self, canvas, doc):
        canvas.saveState()
        canvas.setFont('Helvetica', 8)
        canvas.setFillColor(colors.grey)
        canvas.drawString(
            MARGIN, 10 * mm,
            f'Generated by CuppingLab - {self.generated_at.strftime("%B %d, %Y %H:%M")}',
        )
        canvas.drawRightString(self.page_size[0] - MARGIN, 10 * mm, f'Page {canvas.getPageNumber()}')
        canvas.restoreState()

    def render(
        self,
        session: SessionSnapshot,
        summaries: Iterable[SampleSummary],
        charts: Optional[Mapping[str, Optional[bytes]]] = None
    ) -> bytes:
        """Render the report and return the PDF bytes."""
        buffer = io.BytesIO()
        document = SimpleDocTemplate(
            buffer,
            pagesize=self.page_size,
            leftMargin=MARGIN,
            rightMargin=MARGIN,
            topMargin=MARGIN,
            bottomMargin=MARGIN,
            title=f'{session.name} - Cupping Report',
            author='CuppingLab',
        )
        document.build(
            self.build_story(session, summaries, charts),
            onFirstPage=self._draw_footer,
            onLaterPages=self._draw_footer,
        )
        return buffer.getvalue()
