"""Radar charts of category averages, rendered to PNG with matplotlib."""

import io
import logging
from decimal import Decimal
from typing import Mapping, Optional

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from apps.scoring.scaa import SCAA_CATEGORIES, CATEGORY_LABELS, MAX_CATEGORY_SCORE
from .exceptions import ChartRenderError

logger = logging.getLogger(__name__)

CHART_DPI = 150
CHART_SIZE_INCHES = (5, 5)
LINE_COLOR = '#8B5A2B'


def render_radar_chart(category_averages: Mapping[str, Optional[Decimal]], title: str = '') -> bytes:
    """
    Render category averages as a radar chart.

    Categories without an average are drawn at 0.

    Returns:
        PNG image bytes

    Raises:
        ChartRenderError: If no category has a value or matplotlib fails
    """
    if not any(category_averages.get(category) is not None for category in SCAA_CATEGORIES):
        raise ChartRenderError("No category averages to plot")

    labels = [CATEGORY_LABELS[category] for category in SCAA_CATEGORIES]
    values = [float(category_averages.get(category) or 0) for category in SCAA_CATEGORIES]

    angles = np.linspace(0, 2 * np.pi, len(labels), endpoint=False).tolist()
    # close the polygon
    values += values[:1]
    angles += angles[:1]

    fig = plt.figure(figsize=CHART_SIZE_INCHES)
    try:
        ax = fig.add_subplot(111, polar=True)
        ax.set_theta_offset(np.pi / 2)
        ax.set_theta_direction(-1)
        ax.plot(angles, values, color=LINE_COLOR, linewidth=2)
        ax.fill(angles, values, color=LINE_COLOR, alpha=0.25)
        ax.set_xticks(angles[:-1])
        ax.set_xticklabels(labels, fontsize=8)
        ax.set_ylim(0, float(MAX_CATEGORY_SCORE))
        ax.set_yticks([2, 4, 6, 8, 10])
        ax.set_yticklabels(['2', '4', '6', '8', '10'], fontsize=7, color='grey')
        if title:
            ax.set_title(title, fontsize=11, fontweight='bold', pad=20)

        buffer = io.BytesIO()
        fig.savefig(buffer, format='png', dpi=CHART_DPI, bbox_inches='tight')
    except (ValueError, RuntimeError) as e:
        logger.warning("Radar chart rendering failed for %r: %s", title, e)
        raise ChartRenderError(f"Could not render radar chart: {e}") from e
    finally:
        plt.close(fig)

    return buffer.getvalue()
