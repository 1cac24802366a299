"""
Training taxonomy for recruiter coaching output.

The upstream analysis emits these values as loose strings.  Each enum here
is closed and carries an explicit ``UNKNOWN`` member so that an unexpected
value degrades to a defined display instead of failing validation:

  - ``RecommendationPriority`` — urgency of a training recommendation.
  - ``GapSeverity``            — how far a metric sits below its target.
  - ``FollowUpImportance``     — weight of a missed follow-up question.
  - ``FollowUpType``           — what kind of probing was missed.
  - ``OverallRating``          — single summary of recruiter performance.

``DisplayVariant`` is the presentation vocabulary shared by every badge the
training assembler emits.

Usage example::

    from interview_insights.taxonomy.training_taxonomy import RecommendationPriority

    priority = RecommendationPriority.parse("urgent")   # -> UNKNOWN

This module has NO imports from any other ``interview_insights`` package.
"""

from __future__ import annotations

from enum import StrEnum


class _ParseableEnum(StrEnum):
    """StrEnum whose ``parse()`` maps unrecognized input to ``UNKNOWN``."""

    @classmethod
    def parse(cls, value: object):
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        return cls["UNKNOWN"]


class RecommendationPriority(_ParseableEnum):
    """Urgency of a training recommendation."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class GapSeverity(_ParseableEnum):
    """Severity of a performance gap."""

    CRITICAL = "critical"
    MODERATE = "moderate"
    MINOR = "minor"
    UNKNOWN = "unknown"


class FollowUpImportance(_ParseableEnum):
    """Importance of a missed follow-up opportunity."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    UNKNOWN = "unknown"


class FollowUpType(_ParseableEnum):
    """Category of follow-up question the recruiter did not ask."""

    TECHNICAL_DEPTH = "technical_depth"
    """Dig into how deep the candidate's technical knowledge goes."""

    BEHAVIORAL = "behavioral"
    """STAR-style question about a past situation."""

    CLARIFICATION = "clarification"
    """Resolve an ambiguous or incomplete statement."""

    PROJECT_DETAILS = "project_details"
    """Ask for specifics about a project the candidate mentioned."""

    QUANTIFICATION = "quantification"
    """Ask for numbers: scale, impact, timelines."""

    TEAM_COLLABORATION = "team_collaboration"
    """Ask how the candidate worked with others."""

    UNKNOWN = "unknown"
    """Missing or unrecognized type; rendered without a label."""


class OverallRating(_ParseableEnum):
    """Single summary rating of the recruiter's interview."""

    EXCELLENT = "excellent"
    GOOD = "good"
    NEEDS_IMPROVEMENT = "needs_improvement"
    POOR = "poor"
    UNKNOWN = "unknown"


class DisplayVariant(StrEnum):
    """Badge / accent variant understood by the rendering layer."""

    DESTRUCTIVE = "destructive"
    EMPHASIZED = "emphasized"
    PRIMARY = "primary"
    NEUTRAL = "neutral"
    MUTED = "muted"
    INFO = "info"
