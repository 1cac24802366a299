"""
Score taxonomy for interview analysis.

Two dimensions describe every classified score:
  - ``ScoreTier``    — the qualitative band a 0–100 score falls into.
  - ``AnalysisKind`` — what the score measures (question vs. answer).

``BadgeColor`` is the colour category attached to each tier.  The renderer
maps it to concrete styles; business thresholds never leave this package.

This module has NO imports from any other ``interview_insights`` package.
"""

from enum import StrEnum


class ScoreTier(StrEnum):
    """Ordered score band, best first."""

    EXCELLENT = "excellent"
    """85–100: fully aligned with the job description / fully answered."""

    GOOD = "good"
    """70–84: covers most of what matters, some detail missing."""

    FAIR = "fair"
    """50–69: partially relevant; important aspects missing."""

    POOR = "poor"
    """Below 50: little connection to what was needed."""


class AnalysisKind(StrEnum):
    """Which score an explanation is being produced for."""

    QUESTION_RELEVANCE = "question_relevance"
    """How relevant a recruiter question is to the job description."""

    ANSWER_QUALITY = "answer_quality"
    """How well a candidate answer addresses the recruiter's question."""


class BadgeColor(StrEnum):
    """Colour category for a score badge."""

    GREEN = "green"
    LIME = "lime"
    YELLOW = "yellow"
    ORANGE = "orange"
