"""
Presentation tree node types.

Every node is a frozen dataclass of plain data: strings, numbers, enums
(``StrEnum`` values serialize as their string) and tuples of child nodes.
``to_dict()`` turns any node into JSON-ready dicts and lists.

Row identity
------------
Each row carries a ``key`` derived only from its position in the input,
so re-rendering the same payload yields the same keys::

    qa-item-<i>           answer-<i>-<j>         insight-<k>
    strength-<i>          performance-gap-<i>
    recommendation-<i>    followup-<i>-<j>
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Optional, Union

from interview_insights.scoring.tiers import ScoreBadge
from interview_insights.taxonomy.training_taxonomy import (
    DisplayVariant,
    FollowUpImportance,
    FollowUpType,
    GapSeverity,
    OverallRating,
    RecommendationPriority,
)


class _ViewNode:
    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class EmptyState(_ViewNode):
    """Marker for a section with nothing to show.

    Distinct from an empty list so a renderer can tell "no data" apart from
    "not loaded yet".
    """

    key:    str
    title:  str
    detail: str = ""


# ── QA analysis ───────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ExplainedScore(_ViewNode):
    """A classified score plus its tooltip text.

    Attributes:
        badge:             Tier, colour and labels for the score.
        explanation_title: Tooltip heading for this kind of score.
        explanation:       Authored reasoning or the synthesized template.
        is_authored:       True when ``explanation`` came from the payload.
    """

    badge:             ScoreBadge
    explanation_title: str
    explanation:       str
    is_authored:       bool


@dataclass(frozen=True)
class AnswerView(_ViewNode):
    key:               str
    index:             int
    text:              str
    preview:           str
    is_truncated:      bool
    timestamp:         str
    match:             ExplainedScore
    match_score:       Optional[float] = None
    match_level:       Optional[str] = None
    match_explanation: Optional[str] = None
    sentiment:         Optional[str] = None


@dataclass(frozen=True)
class QAItemView(_ViewNode):
    key:       str
    index:     int
    question:  str
    timestamp: str
    relevance: ExplainedScore
    answers:   tuple[AnswerView, ...]


@dataclass(frozen=True)
class InsightView(_ViewNode):
    key:   str
    index: int
    text:  str


@dataclass(frozen=True)
class QAAnalysisView(_ViewNode):
    """The question & answer analysis section.

    Exactly one of ``items`` (non-empty) or ``empty_state`` is populated.
    ``insights`` is independent and may be empty either way.
    """

    title:          str
    items:          tuple[QAItemView, ...]
    insights_title: str
    insights:       tuple[InsightView, ...]
    empty_state:    Optional[EmptyState] = None

    @property
    def is_empty(self) -> bool:
        return self.empty_state is not None


# ── Training recommendations ──────────────────────────────────────────────────


@dataclass(frozen=True)
class RatingBadge(_ViewNode):
    rating:  OverallRating
    label:   str
    variant: DisplayVariant


@dataclass(frozen=True)
class StrengthView(_ViewNode):
    key:   str
    index: int
    text:  str


@dataclass(frozen=True)
class GapView(_ViewNode):
    key:              str
    index:            int
    metric:           str
    current_score:    Union[int, float]
    target_score:     Union[int, float]
    gap:              Union[int, float]
    severity:         GapSeverity
    severity_label:   str
    severity_variant: DisplayVariant
    explanation:      str


@dataclass(frozen=True)
class SuggestedQuestionView(_ViewNode):
    number: int
    text:   str


@dataclass(frozen=True)
class FollowUpView(_ViewNode):
    key:                str
    index:              int
    after_node:         str
    importance:         FollowUpImportance
    importance_label:   str
    importance_variant: DisplayVariant
    follow_up_type:     FollowUpType
    type_label:         str
    reasoning:          str
    specific_context:   Optional[str]
    answer_excerpt:     Optional[str]
    questions_heading:  str
    questions:          tuple[SuggestedQuestionView, ...]


@dataclass(frozen=True)
class RecommendationView(_ViewNode):
    key:                       str
    index:                     int
    area:                      str
    priority:                  RecommendationPriority
    priority_label:            str
    priority_variant:          DisplayVariant
    accent:                    DisplayVariant
    issue:                     str
    recommendation:            str
    expected_improvement:      str
    resources:                 tuple[str, ...]
    missed_follow_ups_heading: Optional[str]
    missed_follow_ups:         tuple[FollowUpView, ...]


@dataclass(frozen=True)
class TrainingView(_ViewNode):
    """The recruiter training & development section."""

    title:                   str
    rating_badge:            Optional[RatingBadge]
    strengths_heading:       str
    strengths:               tuple[StrengthView, ...]
    gaps_heading:            str
    gaps_intro:              str
    gaps:                    tuple[GapView, ...]
    recommendations_heading: str
    recommendations:         tuple[RecommendationView, ...]


# ── Dashboard ─────────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class DashboardView(_ViewNode):
    qa_analysis: QAAnalysisView
    training:    Union[TrainingView, EmptyState]
