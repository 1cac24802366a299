"""
Training recommendation assembler: strengths, gaps, recommendations and an
overall rating -> TrainingView (or EmptyState).

Suppression rule
----------------
The section is suppressed (``TRAINING_EMPTY_STATE``) when there are neither
recommendations nor strengths.  Gaps alone never make the section visible.

Display tables
--------------
    priority   critical -> destructive   high   -> emphasized
               medium   -> neutral       low    -> muted
               unknown  -> same as medium
    rating     excellent -> "Excellent Performance" / primary
               good      -> "Good Performance"      / neutral
               needs_improvement -> "Needs Improvement" / muted
               poor      -> "Requires Attention"    / destructive
               absent or unknown -> no badge
    severity   critical -> destructive, moderate -> primary, else neutral
    importance high -> destructive, medium -> primary, else neutral

Gap explanations
----------------
``metric`` is lower-cased and checked against ``GAP_EXPLANATION_RULES`` in
order; the first keyword contained in the metric picks the template.  No
match falls back to a generic sentence quoting the gap size.  ``gap`` is
quoted as supplied, never recomputed from the scores.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Optional, Union

from interview_insights.assembly.views import (
    EmptyState,
    FollowUpView,
    GapView,
    RatingBadge,
    RecommendationView,
    StrengthView,
    SuggestedQuestionView,
    TrainingView,
)
from interview_insights.models.training import (
    MissedFollowUp,
    PerformanceGap,
    TrainingRecommendation,
)
from interview_insights.taxonomy.training_taxonomy import (
    DisplayVariant,
    FollowUpImportance,
    FollowUpType,
    GapSeverity,
    OverallRating,
    RecommendationPriority,
)

TRAINING_SECTION_TITLE = "Recruiter Training & Development"
STRENGTHS_HEADING = "Areas of Strength"
GAPS_HEADING = "Performance Gaps"
GAPS_INTRO = (
    "These metrics show areas where your interview performance can be "
    "improved. Scores are out of 100, and gaps show how many points below "
    "the target you currently are."
)
RECOMMENDATIONS_HEADING = "Action Plan & Recommendations"
QUESTION_LIST_HEADING = "Suggested Follow-up Questions:"
SINGLE_QUESTION_HEADING = "Suggested Question:"

TRAINING_EMPTY_STATE = EmptyState(
    key="training-recommendations-empty",
    title="No training recommendations available.",
)

_PRIORITY_VARIANTS: dict[RecommendationPriority, DisplayVariant] = {
    RecommendationPriority.CRITICAL: DisplayVariant.DESTRUCTIVE,
    RecommendationPriority.HIGH:     DisplayVariant.EMPHASIZED,
    RecommendationPriority.MEDIUM:   DisplayVariant.NEUTRAL,
    RecommendationPriority.LOW:      DisplayVariant.MUTED,
}

_PRIORITY_ACCENTS: dict[RecommendationPriority, DisplayVariant] = {
    RecommendationPriority.CRITICAL: DisplayVariant.DESTRUCTIVE,
    RecommendationPriority.HIGH:     DisplayVariant.EMPHASIZED,
}

_RATING_BADGES: dict[OverallRating, tuple[str, DisplayVariant]] = {
    OverallRating.EXCELLENT:         ("Excellent Performance", DisplayVariant.PRIMARY),
    OverallRating.GOOD:              ("Good Performance",      DisplayVariant.NEUTRAL),
    OverallRating.NEEDS_IMPROVEMENT: ("Needs Improvement",     DisplayVariant.MUTED),
    OverallRating.POOR:              ("Requires Attention",    DisplayVariant.DESTRUCTIVE),
}

_SEVERITY_VARIANTS: dict[GapSeverity, DisplayVariant] = {
    GapSeverity.CRITICAL: DisplayVariant.DESTRUCTIVE,
    GapSeverity.MODERATE: DisplayVariant.PRIMARY,
}

_IMPORTANCE_VARIANTS: dict[FollowUpImportance, DisplayVariant] = {
    FollowUpImportance.HIGH:   DisplayVariant.DESTRUCTIVE,
    FollowUpImportance.MEDIUM: DisplayVariant.PRIMARY,
}

FOLLOW_UP_TYPE_LABELS: dict[FollowUpType, str] = {
    FollowUpType.TECHNICAL_DEPTH:    "Technical Depth",
    FollowUpType.BEHAVIORAL:         "Behavioral/STAR",
    FollowUpType.CLARIFICATION:      "Clarification",
    FollowUpType.PROJECT_DETAILS:    "Project Details",
    FollowUpType.QUANTIFICATION:     "Quantification",
    FollowUpType.TEAM_COLLABORATION: "Team Collaboration",
}


# ── Gap explanations ──────────────────────────────────────────────────────────


def _fmt_points(value: Union[int, float]) -> str:
    """Render a score without a trailing ".0" for whole numbers."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _jd_relevance_gap(gap: PerformanceGap) -> str:
    return (
        f"Your questions currently align {_fmt_points(gap.current_score)}% with "
        f"the job description. Aim for {_fmt_points(gap.target_score)}% by asking "
        "more questions that directly assess the specific skills, experience, "
        "and qualifications listed in the job posting."
    )


def _follow_up_gap(gap: PerformanceGap) -> str:
    return (
        "You're missing opportunities to dig deeper into candidate responses. "
        f"Increase your follow-up rate by {_fmt_points(gap.gap)} points through "
        "probing questions when candidates mention projects, experiences, or skills."
    )


def _depth_gap(gap: PerformanceGap) -> str:
    return (
        "Your questions need more depth to properly assess candidates. Move from "
        "surface-level questions to ones that reveal true competency, "
        "problem-solving ability, and real-world application of skills."
    )


def _behavioral_gap(gap: PerformanceGap) -> str:
    return (
        "Include more behavioral questions using the STAR method (Situation, "
        "Task, Action, Result) to understand how candidates have handled real "
        "situations in the past."
    )


def _generic_gap(gap: PerformanceGap) -> str:
    return (
        f"This area needs improvement. Work to close the {_fmt_points(gap.gap)}-point "
        "gap through focused practice and training."
    )


# Evaluated in order; first keyword found in the lower-cased metric wins.
GAP_EXPLANATION_RULES: tuple[tuple[str, Callable[[PerformanceGap], str]], ...] = (
    ("jd relevance", _jd_relevance_gap),
    ("follow-up",    _follow_up_gap),
    ("depth",        _depth_gap),
    ("behavioral",   _behavioral_gap),
)


def explain_gap(gap: PerformanceGap) -> str:
    """Return the "What this means" sentence for one performance gap."""
    metric = gap.metric.lower()
    for keyword, template in GAP_EXPLANATION_RULES:
        if keyword in metric:
            return template(gap)
    return _generic_gap(gap)


# ── Display lookups ───────────────────────────────────────────────────────────


def priority_variant(priority: Union[RecommendationPriority, str]) -> DisplayVariant:
    """Badge variant for a priority; unknown values use the medium mapping."""
    parsed = RecommendationPriority.parse(priority)
    return _PRIORITY_VARIANTS.get(parsed, _PRIORITY_VARIANTS[RecommendationPriority.MEDIUM])


def rating_badge(rating: Union[OverallRating, str, None]) -> Optional[RatingBadge]:
    """Summary badge for ``rating``, or None when absent / unrecognized."""
    if rating is None:
        return None
    parsed = OverallRating.parse(rating)
    entry = _RATING_BADGES.get(parsed)
    if entry is None:
        return None
    label, variant = entry
    return RatingBadge(rating=parsed, label=label, variant=variant)


def follow_up_type_label(follow_up_type: Union[FollowUpType, str, None]) -> str:
    return FOLLOW_UP_TYPE_LABELS.get(FollowUpType.parse(follow_up_type), "")


# ── Row builders ──────────────────────────────────────────────────────────────


def _build_gap(gap: PerformanceGap, index: int) -> GapView:
    return GapView(
        key=f"performance-gap-{index}",
        index=index,
        metric=gap.metric,
        current_score=gap.current_score,
        target_score=gap.target_score,
        gap=gap.gap,
        severity=gap.severity,
        severity_label=gap.severity_text or gap.severity.value,
        severity_variant=_SEVERITY_VARIANTS.get(gap.severity, DisplayVariant.NEUTRAL),
        explanation=explain_gap(gap),
    )


def _build_follow_up(
    follow_up: MissedFollowUp,
    rec_index: int,
    index: int,
) -> FollowUpView:
    questions = follow_up.questions
    importance = follow_up.importance
    return FollowUpView(
        key=f"followup-{rec_index}-{index}",
        index=index,
        after_node=follow_up.after_node,
        importance=importance,
        importance_label=(follow_up.importance_text or importance.value).upper(),
        importance_variant=_IMPORTANCE_VARIANTS.get(importance, DisplayVariant.NEUTRAL),
        follow_up_type=follow_up.follow_up_type,
        type_label=follow_up_type_label(follow_up.follow_up_type),
        reasoning=follow_up.reasoning,
        specific_context=follow_up.specific_context,
        answer_excerpt=follow_up.answer_excerpt,
        questions_heading=(
            QUESTION_LIST_HEADING if questions.is_list else SINGLE_QUESTION_HEADING
        ),
        questions=tuple(
            SuggestedQuestionView(number=n, text=text)
            for n, text in enumerate(questions.items, start=1)
        ),
    )


def _build_recommendation(rec: TrainingRecommendation, index: int) -> RecommendationView:
    follow_ups = tuple(
        _build_follow_up(fu, index, f_idx)
        for f_idx, fu in enumerate(rec.missed_follow_ups)
    )
    heading = (
        f"Specific Missed Opportunities ({len(follow_ups)})" if follow_ups else None
    )
    return RecommendationView(
        key=f"recommendation-{index}",
        index=index,
        area=rec.area,
        priority=rec.priority,
        priority_label=(rec.priority_text or rec.priority.value).upper(),
        priority_variant=priority_variant(rec.priority),
        accent=_PRIORITY_ACCENTS.get(rec.priority, DisplayVariant.INFO),
        issue=rec.issue,
        recommendation=rec.recommendation,
        expected_improvement=rec.expected_improvement,
        resources=tuple(rec.resources),
        missed_follow_ups_heading=heading,
        missed_follow_ups=follow_ups,
    )


def assemble_training(
    strengths:       Sequence[str],
    gaps:            Sequence[PerformanceGap],
    recommendations: Sequence[TrainingRecommendation],
    overall_rating:  Union[OverallRating, str, None] = None,
) -> Union[TrainingView, EmptyState]:
    """Build the recruiter training section.

    Args:
        strengths:       Strength descriptions, in display order.
        gaps:            Performance gaps, in display order.
        recommendations: Training recommendations, in display order.
        overall_rating:  Summary rating; None or unrecognized hides the badge.

    Returns:
        TrainingView, or ``TRAINING_EMPTY_STATE`` when there are neither
        strengths nor recommendations.
    """
    if not recommendations and not strengths:
        return TRAINING_EMPTY_STATE

    return TrainingView(
        title=TRAINING_SECTION_TITLE,
        rating_badge=rating_badge(overall_rating),
        strengths_heading=STRENGTHS_HEADING,
        strengths=tuple(
            StrengthView(key=f"strength-{idx}", index=idx, text=text)
            for idx, text in enumerate(strengths)
        ),
        gaps_heading=GAPS_HEADING,
        gaps_intro=GAPS_INTRO,
        gaps=tuple(_build_gap(gap, idx) for idx, gap in enumerate(gaps)),
        recommendations_heading=RECOMMENDATIONS_HEADING,
        recommendations=tuple(
            _build_recommendation(rec, idx) for idx, rec in enumerate(recommendations)
        ),
    )
