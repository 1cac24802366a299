"""
Tests for interview_insights/assembly/training.py.

What we test
------------
assemble_training():
  - Suppressed only when there are neither strengths nor recommendations.
  - Rating badge labels and variants; absent / unknown rating hides the badge.
  - Priority variants and accents, including the unknown-priority fallback.
  - Gap explanation template selection by metric keyword, first match wins.
  - Follow-up question numbering and headings for list vs legacy form.
  - Row keys are positional.
"""

from __future__ import annotations

import pytest

from interview_insights.assembly.training import (
    QUESTION_LIST_HEADING,
    SINGLE_QUESTION_HEADING,
    TRAINING_EMPTY_STATE,
    assemble_training,
    explain_gap,
    follow_up_type_label,
    priority_variant,
    rating_badge,
)
from interview_insights.assembly.views import TrainingView
from interview_insights.models.training import PerformanceGap, TrainingRecommendation
from interview_insights.taxonomy.training_taxonomy import (
    DisplayVariant,
    FollowUpType,
    OverallRating,
    RecommendationPriority,
)


def _gap(metric: str, current=50, target=80, gap=30, severity="minor") -> PerformanceGap:
    return PerformanceGap(
        metric=metric,
        current_score=current,
        target_score=target,
        gap=gap,
        severity=severity,
    )


def _rec(area: str, priority: str = "medium") -> TrainingRecommendation:
    return TrainingRecommendation(area=area, priority=priority)


# ── Suppression ───────────────────────────────────────────────────────────────


class TestSuppression:
    def test_nothing_is_suppressed(self):
        assert assemble_training([], [], []) == TRAINING_EMPTY_STATE

    def test_gaps_alone_are_suppressed(self, sample_gap):
        assert assemble_training([], [sample_gap], [], "good") == TRAINING_EMPTY_STATE

    def test_strengths_only_is_shown(self):
        view = assemble_training(["Active listening"], [], [])
        assert isinstance(view, TrainingView)
        assert [s.text for s in view.strengths] == ["Active listening"]
        assert view.recommendations == ()
        assert view.gaps == ()

    def test_recommendations_only_is_shown(self, sample_recommendation):
        view = assemble_training([], [], [sample_recommendation])
        assert isinstance(view, TrainingView)
        assert view.strengths == ()


# ── Rating badge ──────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "rating, label, variant",
    [
        ("excellent",         "Excellent Performance", DisplayVariant.PRIMARY),
        ("good",              "Good Performance",      DisplayVariant.NEUTRAL),
        ("needs_improvement", "Needs Improvement",     DisplayVariant.MUTED),
        ("poor",              "Requires Attention",    DisplayVariant.DESTRUCTIVE),
    ],
)
def test_rating_badge(rating, label, variant):
    badge = rating_badge(rating)
    assert badge.label == label
    assert badge.variant is variant
    assert badge.rating is OverallRating(rating)


@pytest.mark.parametrize("rating", [None, "stellar", OverallRating.UNKNOWN])
def test_rating_badge_hidden(rating):
    assert rating_badge(rating) is None


def test_view_carries_rating_badge():
    view = assemble_training(["x"], [], [], OverallRating.POOR)
    assert view.rating_badge.label == "Requires Attention"


def test_view_without_rating_has_no_badge():
    assert assemble_training(["x"], [], []).rating_badge is None


# ── Priority ──────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "priority, variant",
    [
        ("critical", DisplayVariant.DESTRUCTIVE),
        ("high",     DisplayVariant.EMPHASIZED),
        ("medium",   DisplayVariant.NEUTRAL),
        ("low",      DisplayVariant.MUTED),
        ("urgent",   DisplayVariant.NEUTRAL),
    ],
)
def test_priority_variant(priority, variant):
    assert priority_variant(priority) is variant


def test_recommendation_priority_fields():
    recs = [_rec("a", "critical"), _rec("b", "high"), _rec("c", "low"), _rec("d", "urgent")]
    view = assemble_training([], [], recs)
    assert [r.accent for r in view.recommendations] == [
        DisplayVariant.DESTRUCTIVE,
        DisplayVariant.EMPHASIZED,
        DisplayVariant.INFO,
        DisplayVariant.INFO,
    ]
    assert [r.priority_label for r in view.recommendations] == [
        "CRITICAL", "HIGH", "LOW", "URGENT",
    ]
    assert view.recommendations[3].priority is RecommendationPriority.UNKNOWN


# ── Gap explanations ──────────────────────────────────────────────────────────


class TestExplainGap:
    def test_jd_relevance_quotes_current_and_target(self, sample_gap):
        text = explain_gap(sample_gap)
        assert text.startswith("Your questions currently align 62% with the job description.")
        assert "Aim for 80%" in text

    def test_follow_up_quotes_gap(self):
        text = explain_gap(_gap("Follow-up Rate", gap=25))
        assert "Increase your follow-up rate by 25 points" in text

    def test_depth(self):
        assert explain_gap(_gap("Question Depth")).startswith(
            "Your questions need more depth"
        )

    def test_behavioral(self):
        assert "STAR method" in explain_gap(_gap("Behavioral Coverage"))

    def test_generic_quotes_gap(self):
        assert explain_gap(_gap("Unrelated Metric", gap=12)) == (
            "This area needs improvement. Work to close the 12-point gap "
            "through focused practice and training."
        )

    def test_match_is_case_insensitive(self):
        assert explain_gap(_gap("QUESTION DEPTH")) == explain_gap(_gap("question depth"))

    def test_first_rule_wins(self):
        text = explain_gap(_gap("JD Relevance depth"))
        assert text.startswith("Your questions currently align")

    def test_gap_quoted_as_supplied(self):
        text = explain_gap(_gap("Unrelated Metric", current=40, target=80, gap=5))
        assert "5-point gap" in text

    def test_whole_float_rendered_without_decimal(self):
        assert "by 10 points" in explain_gap(_gap("Follow-up Rate", gap=10.0))


def test_gap_rows(sample_gap):
    view = assemble_training(["x"], [sample_gap, _gap("Question Depth", severity="critical")], [])
    assert [g.key for g in view.gaps] == ["performance-gap-0", "performance-gap-1"]
    assert view.gaps[0].severity_variant is DisplayVariant.PRIMARY
    assert view.gaps[1].severity_variant is DisplayVariant.DESTRUCTIVE
    assert view.gaps[0].gap == 18


# ── Follow-ups ────────────────────────────────────────────────────────────────


class TestFollowUps:
    def test_list_form_numbered(self, sample_recommendation):
        rec = assemble_training([], [], [sample_recommendation]).recommendations[0]
        first = rec.missed_follow_ups[0]
        assert first.questions_heading == QUESTION_LIST_HEADING
        assert [(q.number, q.text) for q in first.questions] == [
            (1, "How many events per day did the pipeline handle?"),
            (2, "What was the end-to-end latency?"),
        ]

    def test_legacy_form(self, sample_recommendation):
        rec = assemble_training([], [], [sample_recommendation]).recommendations[0]
        second = rec.missed_follow_ups[1]
        assert second.questions_heading == SINGLE_QUESTION_HEADING
        assert [(q.number, q.text) for q in second.questions] == [
            (1, "Who else worked on the migration?"),
        ]

    def test_labels_and_variants(self, sample_recommendation):
        rec = assemble_training([], [], [sample_recommendation]).recommendations[0]
        first, second = rec.missed_follow_ups
        assert first.importance_label == "HIGH"
        assert first.importance_variant is DisplayVariant.DESTRUCTIVE
        assert first.type_label == "Quantification"
        assert second.importance_variant is DisplayVariant.NEUTRAL
        assert second.type_label == ""

    def test_heading_counts_follow_ups(self, sample_recommendation):
        rec = assemble_training([], [], [sample_recommendation]).recommendations[0]
        assert rec.missed_follow_ups_heading == "Specific Missed Opportunities (2)"

    def test_no_follow_ups_no_heading(self):
        rec = assemble_training([], [], [_rec("Rapport")]).recommendations[0]
        assert rec.missed_follow_ups == ()
        assert rec.missed_follow_ups_heading is None

    def test_keys(self, sample_recommendation):
        view = assemble_training([], [], [_rec("first"), sample_recommendation])
        assert [r.key for r in view.recommendations] == [
            "recommendation-0", "recommendation-1",
        ]
        assert [f.key for f in view.recommendations[1].missed_follow_ups] == [
            "followup-1-0", "followup-1-1",
        ]


@pytest.mark.parametrize(
    "follow_up_type, label",
    [
        (FollowUpType.TECHNICAL_DEPTH,    "Technical Depth"),
        (FollowUpType.BEHAVIORAL,         "Behavioral/STAR"),
        (FollowUpType.TEAM_COLLABORATION, "Team Collaboration"),
        ("pair_programming",              ""),
        (None,                            ""),
    ],
)
def test_follow_up_type_label(follow_up_type, label):
    assert follow_up_type_label(follow_up_type) == label


def test_strength_keys():
    view = assemble_training(["a", "b"], [], [])
    assert [s.key for s in view.strengths] == ["strength-0", "strength-1"]


def test_unrecognized_values_keep_upstream_wording():
    gap = _gap("Question Depth", severity="Severe")
    rec = TrainingRecommendation.model_validate(
        {
            "area": "Probing",
            "priority": "Urgent",
            "missedFollowUps": [{"importance": "essential", "suggestedQuestion": "Why?"}],
        }
    )
    view = assemble_training([], [gap], [rec])

    assert view.gaps[0].severity_label == "Severe"
    assert view.gaps[0].severity_variant is DisplayVariant.NEUTRAL
    assert view.recommendations[0].priority_label == "URGENT"
    assert view.recommendations[0].priority_variant is DisplayVariant.NEUTRAL
    follow_up = view.recommendations[0].missed_follow_ups[0]
    assert follow_up.importance_label == "ESSENTIAL"
    assert follow_up.importance_variant is DisplayVariant.NEUTRAL


def test_missing_priority_label_falls_back_to_enum():
    rec = assemble_training([], [], [_rec("Rapport", None)]).recommendations[0]
    assert rec.priority_label == "UNKNOWN"
