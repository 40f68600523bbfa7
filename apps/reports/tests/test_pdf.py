"""Tests for the PDF report formatter."""

from datetime import datetime

import pytest
from reportlab.platypus import Image, PageBreak, Paragraph

from apps.reports.aggregation import summarize_sample
from apps.reports.charts import render_radar_chart
from apps.reports.pdf import (
    CuppingReportFormatter,
    NO_EVALUATIONS_TEXT,
    CHART_PLACEHOLDER_TEXT,
)
from .factories import make_record, flavor

GENERATED_AT = datetime(2024, 5, 2, 8, 0)


class PageRecordingFormatter(CuppingReportFormatter):
    """Remembers the page number of every footer drawn."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.pages = []

    def _draw_footer(self, canvas, doc):
        self.pages.append(canvas.getPageNumber())
        super()._draw_footer(canvas, doc)


def _texts(story):
    """Paragraph texts, including those nested in KeepTogether groups."""
    texts = []
    for flowable in story:
        if isinstance(flowable, Paragraph):
            texts.append(flowable.text)
        texts.extend(_texts(getattr(flowable, '_content', [])))
    return texts


def _images(story):
    images = []
    for flowable in story:
        if isinstance(flowable, Image):
            images.append(flowable)
        images.extend(_images(getattr(flowable, '_content', [])))
    return images


@pytest.fixture
def summaries(washed_snapshot, natural_snapshot):
    return [
        summarize_sample(washed_snapshot, [
            make_record('ada', value='8.00', flavors=[flavor('Fruity', 3)], notes='Jasmine',
                        private_notes='Check roast'),
            make_record('carl', value='8.50', flavors=[flavor('Fruity', 5)]),
        ]),
        summarize_sample(natural_snapshot, []),
    ]


@pytest.fixture
def formatter():
    return CuppingReportFormatter(generated_at=GENERATED_AT)


class TestBuildStory:

    def test_session_header(self, formatter, session_snapshot, summaries):
        texts = _texts(formatter.build_story(session_snapshot, summaries))

        assert 'Coffee Cupping Report' in texts
        assert 'Generated on May 02, 2024' in texts
        assert '<b>Location:</b> Lab 1' in texts
        assert '2. Carl Cupper (Judge)' in texts

    def test_page_break_per_sample(self, formatter, session_snapshot, summaries):
        story = formatter.build_story(session_snapshot, summaries)

        assert sum(isinstance(flowable, PageBreak) for flowable in story) == 2

    def test_sample_with_scores(self, formatter, session_snapshot, summaries):
        texts = _texts(formatter.build_story(session_snapshot, summaries))

        assert '<b>Average Score:</b> 82.50/100' in texts
        assert '<b>SCAA Grade:</b> Very Good' in texts
        assert 'Notes: Jasmine' in texts
        assert 'Private Notes: Check roast' in texts

    def test_sample_without_scores(self, formatter, session_snapshot, summaries):
        texts = _texts(formatter.build_story(session_snapshot, summaries))

        assert texts.count(NO_EVALUATIONS_TEXT) == 1

    def test_private_notes_can_be_left_out(self, session_snapshot, summaries):
        formatter = CuppingReportFormatter(include_private_notes=False, generated_at=GENERATED_AT)

        texts = _texts(formatter.build_story(session_snapshot, summaries))

        assert 'Private Notes: Check roast' not in texts
        assert 'Notes: Jasmine' in texts

    def test_chart_image(self, formatter, session_snapshot, summaries):
        chart = render_radar_chart(summaries[0].category_averages)

        story = formatter.build_story(session_snapshot, summaries, charts={'sample-1': chart})

        assert len(_images(story)) == 1
        assert CHART_PLACEHOLDER_TEXT not in _texts(story)

    def test_undecodable_chart_becomes_placeholder(self, formatter, session_snapshot, summaries):
        story = formatter.build_story(session_snapshot, summaries, charts={'sample-1': b'not an image'})

        texts = _texts(story)
        assert CHART_PLACEHOLDER_TEXT in texts
        assert 'Notes: Jasmine' in texts
        assert _images(story) == []

    def test_missing_chart_becomes_placeholder(self, formatter, session_snapshot, summaries):
        texts = _texts(formatter.build_story(session_snapshot, summaries, charts={'sample-1': None}))

        assert texts.count(CHART_PLACEHOLDER_TEXT) == 1

    def test_charts_disabled(self, session_snapshot, summaries):
        formatter = CuppingReportFormatter(include_charts=False, generated_at=GENERATED_AT)

        texts = _texts(formatter.build_story(session_snapshot, summaries))

        assert 'Category Profile' not in texts
        assert CHART_PLACEHOLDER_TEXT not in texts

    def test_markup_in_user_text_is_escaped(self, formatter, session_snapshot, washed_snapshot):
        summary = summarize_sample(washed_snapshot, [make_record('ada', notes='<b>sour</b> & sharp')])

        texts = _texts(formatter.build_story(session_snapshot, [summary]))

        assert 'Notes: &lt;b&gt;sour&lt;/b&gt; &amp; sharp' in texts


class TestRender:

    def test_pdf_bytes(self, formatter, session_snapshot, summaries):
        pdf = formatter.render(session_snapshot, summaries, charts={'sample-1': b'garbage'})

        assert pdf.startswith(b'%PDF')

    def test_truncated_chart_renders_placeholder(self, formatter, session_snapshot, summaries):
        truncated = render_radar_chart(summaries[0].category_averages)[:200]
        charts = {'sample-1': truncated}

        pdf = formatter.render(session_snapshot, summaries, charts=charts)

        assert pdf.startswith(b'%PDF')
        story = formatter.build_story(session_snapshot, summaries, charts=charts)
        assert CHART_PLACEHOLDER_TEXT in _texts(story)
        assert _images(story) == []

    def test_letter_page_size(self, session_snapshot, summaries):
        formatter = CuppingReportFormatter(page_size='letter', generated_at=GENERATED_AT)

        assert formatter.render(session_snapshot, summaries).startswith(b'%PDF')

    def test_long_notes_paginate(self, session_snapshot, washed_snapshot):
        formatter = PageRecordingFormatter(generated_at=GENERATED_AT)
        summary = summarize_sample(washed_snapshot, [
            make_record(f'judge{index}', notes='Stone fruit and cocoa. ' * 40)
            for index in range(12)
        ])

        formatter.render(session_snapshot, [summary])

        assert len(formatter.pages) > 2
        assert formatter.pages == list(range(1, len(formatter.pages) + 1))

    def test_unknown_page_size(self):
        with pytest.raises(ValueError):
            CuppingReportFormatter(page_size='A3')
