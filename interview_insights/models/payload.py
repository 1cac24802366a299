"""
Top-level analysis payload as delivered by the upstream analysis process.

This is the validation boundary: a payload that parses here is well-typed
for every assembler.  Missing required identity or score fields
(``question``, ``text``, timestamps, ``relevance``, ``jdMatch``) surface as
``pydantic.ValidationError``; everything optional has a default.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, field_validator

from interview_insights.models.analysis import (
    INBOUND_MODEL_CONFIG,
    Insight,
    QAItem,
    parse_insight,
)
from interview_insights.models.training import PerformanceGap, TrainingRecommendation
from interview_insights.taxonomy.training_taxonomy import OverallRating


class AnalysisPayload(BaseModel):
    """Complete analysis output for one interview.

    Attributes:
        qa_analysis: Question/answer groups in transcript order.
        insights: Free-form insights, resolved into tagged variants.
        recommendations: Training recommendations in priority order.
        performance_gaps: Metrics below target.
        strength_areas: Short descriptions of what went well.
        overall_rating: Summary rating; ``None`` when not supplied.
    """

    model_config = INBOUND_MODEL_CONFIG

    qa_analysis: list[QAItem] = []
    insights: list[Any] = []
    recommendations: list[TrainingRecommendation] = []
    performance_gaps: list[PerformanceGap] = []
    strength_areas: list[str] = []
    overall_rating: Optional[OverallRating] = None

    @field_validator(
        "qa_analysis",
        "insights",
        "recommendations",
        "performance_gaps",
        "strength_areas",
        mode="before",
    )
    @classmethod
    def default_lists(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("insights", mode="after")
    @classmethod
    def resolve_insights(cls, v: list[Any]) -> list[Insight]:
        return [parse_insight(raw) for raw in v]

    @field_validator("overall_rating", mode="before")
    @classmethod
    def parse_rating(cls, v: Any) -> Optional[OverallRating]:
        if v is None or v == "":
            return None
        return OverallRating.parse(v)
