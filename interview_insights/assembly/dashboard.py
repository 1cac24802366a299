"""
Dashboard assembler: runs both section assemblers over one payload.

The two sections are independent; neither reads the other's output.
"""

from __future__ import annotations

import logging

from interview_insights.assembly.qa_analysis import assemble_qa_analysis
from interview_insights.assembly.training import assemble_training
from interview_insights.assembly.views import DashboardView, TrainingView
from interview_insights.config import DisplayConfig
from interview_insights.models.payload import AnalysisPayload

logger = logging.getLogger(__name__)


def build_dashboard(
    payload: AnalysisPayload,
    display: DisplayConfig | None = None,
) -> DashboardView:
    """Assemble the QA analysis and training sections for ``payload``.

    Args:
        payload: Validated analysis payload.
        display: Presentation limits; defaults to ``DisplayConfig()``.

    Returns:
        DashboardView holding both sections.
    """
    display = display or DisplayConfig()

    qa_view = assemble_qa_analysis(
        payload.qa_analysis,
        payload.insights,
        preview_chars=display.answer_preview_chars,
    )
    training_view = assemble_training(
        strengths=payload.strength_areas,
        gaps=payload.performance_gaps,
        recommendations=payload.recommendations,
        overall_rating=payload.overall_rating,
    )

    logger.info(
        "Dashboard assembled: %d QA items, %d insights, training=%s",
        len(qa_view.items),
        len(qa_view.insights),
        "shown" if isinstance(training_view, TrainingView) else "suppressed",
    )
    return DashboardView(qa_analysis=qa_view, training=training_view)
