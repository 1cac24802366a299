"""
Recruiter training models: performance gaps, recommendations and the missed
follow-up questions attached to them.

Enumerated string fields (priority, severity, importance, follow-up type)
are resolved to closed enums from ``taxonomy.training_taxonomy`` at
validation time.  Unrecognized values become ``UNKNOWN`` rather than
raising, so one odd value from the upstream analysis never hides the rest
of the report.  The upstream wording of priority, severity and importance is
kept alongside in a ``*_text`` field so badges can show it verbatim.

``PerformanceGap.gap`` is taken as given.  It is expected to equal
``target_score - current_score`` but is never recomputed or checked.

Suggested questions
-------------------
Older payloads carry a single ``suggestedQuestion``; newer ones add a
``suggestedQuestions`` list.  ``MissedFollowUp.questions`` folds the two into
one ``SuggestedQuestions`` value: the list when it is non-empty, otherwise
the legacy single question.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import BaseModel, field_validator, model_validator

from interview_insights.models.analysis import INBOUND_MODEL_CONFIG
from interview_insights.taxonomy.training_taxonomy import (
    FollowUpImportance,
    FollowUpType,
    GapSeverity,
    RecommendationPriority,
)


@dataclass(frozen=True)
class SuggestedQuestions:
    """One-or-many suggested questions, always exposed as a tuple.

    Attributes:
        items:   Questions in display order.
        is_list: ``True`` when taken from ``suggestedQuestions``; ``False``
                 when it is the legacy single ``suggestedQuestion``.
    """

    items: tuple[str, ...]
    is_list: bool

    @classmethod
    def from_fields(
        cls,
        single: Optional[str],
        many: Optional[list[str]],
    ) -> "SuggestedQuestions":
        if many:
            return cls(items=tuple(many), is_list=True)
        if single:
            return cls(items=(single,), is_list=False)
        return cls(items=(), is_list=False)


def _none_to_empty_list(v: Any) -> Any:
    return [] if v is None else v


def _none_to_empty_str(v: Any) -> Any:
    return "" if v is None else v


def _keep_raw_text(data: Any, source: str, target: str, target_alias: str) -> Any:
    """Copy the string under ``source`` to ``target`` before enum parsing.

    Badges show the upstream wording even when the enum resolves to
    ``UNKNOWN``.  An explicitly supplied ``target`` is left alone.
    """
    if not isinstance(data, Mapping) or data.get(target) or data.get(target_alias):
        return data
    raw = data.get(source)
    return {**data, target: raw.strip() if isinstance(raw, str) else ""}


class PerformanceGap(BaseModel):
    """A recruiter metric that sits below its target.

    Attributes:
        metric: Metric display name, e.g. ``"JD Relevance Score"``.
        current_score: Current value (0–100 scale).
        target_score: Target value (0–100 scale).
        gap: Points below target, passed through as supplied.
        severity: Gap severity.
        severity_text: ``severity`` exactly as supplied, for display.
    """

    model_config = INBOUND_MODEL_CONFIG

    metric: str
    current_score: Union[int, float]
    target_score: Union[int, float]
    gap: Union[int, float]
    severity: GapSeverity = GapSeverity.UNKNOWN
    severity_text: str = ""

    @model_validator(mode="before")
    @classmethod
    def keep_severity_text(cls, data: Any) -> Any:
        return _keep_raw_text(data, "severity", "severity_text", "severityText")

    @field_validator("severity", mode="before")
    @classmethod
    def parse_severity(cls, v: Any) -> GapSeverity:
        return GapSeverity.parse(v)


class MissedFollowUp(BaseModel):
    """A follow-up question the recruiter could have asked but did not.

    Every field is optional; ``null`` strings read as empty.

    Attributes:
        after_node: Identifier of the transcript node the miss follows.
        suggested_question: Legacy single suggested question.
        suggested_questions: Preferred list of suggested questions.
        importance: How much the miss matters.
        importance_text: ``importance`` exactly as supplied, for display.
        reasoning: Why the follow-up would have mattered.
        specific_context: What the candidate said that warranted probing.
        answer_excerpt: Quote from the candidate's answer.
        follow_up_type: Kind of probing that was missed.
    """

    model_config = INBOUND_MODEL_CONFIG

    after_node: str = ""
    suggested_question: str = ""
    suggested_questions: list[str] = []
    importance: FollowUpImportance = FollowUpImportance.UNKNOWN
    importance_text: str = ""
    reasoning: str = ""
    specific_context: Optional[str] = None
    answer_excerpt: Optional[str] = None
    follow_up_type: FollowUpType = FollowUpType.UNKNOWN

    @model_validator(mode="before")
    @classmethod
    def keep_importance_text(cls, data: Any) -> Any:
        return _keep_raw_text(data, "importance", "importance_text", "importanceText")

    @field_validator("after_node", "suggested_question", "reasoning", mode="before")
    @classmethod
    def default_text(cls, v: Any) -> Any:
        return _none_to_empty_str(v)

    @field_validator("suggested_questions", mode="before")
    @classmethod
    def default_questions(cls, v: Any) -> Any:
        return _none_to_empty_list(v)

    @field_validator("importance", mode="before")
    @classmethod
    def parse_importance(cls, v: Any) -> FollowUpImportance:
        return FollowUpImportance.parse(v)

    @field_validator("follow_up_type", mode="before")
    @classmethod
    def parse_follow_up_type(cls, v: Any) -> FollowUpType:
        return FollowUpType.parse(v)

    @property
    def questions(self) -> SuggestedQuestions:
        return SuggestedQuestions.from_fields(
            self.suggested_question, self.suggested_questions
        )


class TrainingRecommendation(BaseModel):
    """A prioritized coaching recommendation for the recruiter.

    Only ``area`` is required; ``null`` text and list fields read as empty.

    Attributes:
        area: Skill area the recommendation targets.
        priority: Urgency of the recommendation.
        priority_text: ``priority`` exactly as supplied, for display.
        issue: What went wrong.
        recommendation: What to do about it.
        resources: Training resources, in display order.
        expected_improvement: Outcome to expect once applied.
        missed_follow_ups: Concrete missed opportunities backing the issue.
    """

    model_config = INBOUND_MODEL_CONFIG

    area: str
    priority: RecommendationPriority = RecommendationPriority.UNKNOWN
    priority_text: str = ""
    issue: str = ""
    recommendation: str = ""
    resources: list[str] = []
    expected_improvement: str = ""
    missed_follow_ups: list[MissedFollowUp] = []

    @model_validator(mode="before")
    @classmethod
    def keep_priority_text(cls, data: Any) -> Any:
        return _keep_raw_text(data, "priority", "priority_text", "priorityText")

    @field_validator("priority", mode="before")
    @classmethod
    def parse_priority(cls, v: Any) -> RecommendationPriority:
        return RecommendationPriority.parse(v)

    @field_validator("issue", "recommendation", "expected_improvement", mode="before")
    @classmethod
    def default_text(cls, v: Any) -> Any:
        return _none_to_empty_str(v)

    @field_validator("resources", "missed_follow_ups", mode="before")
    @classmethod
    def default_lists(cls, v: Any) -> Any:
        return _none_to_empty_list(v)
