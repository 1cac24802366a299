"""
Tests for interview_insights/scoring/tiers.py.

What we test
------------
classify():
  - Every score in [0, 100] maps to exactly one tier.
  - Band edges 50, 70, 85 are inclusive on the lower side.
  - Out-of-range scores land in the boundary tiers.

badge_color() / badge_label() / score_badge():
  - One colour and one emoji label per tier.
  - Label embeds the numeric score.
  - Prefix is applied to display_label only.
"""

from __future__ import annotations

import pytest

from interview_insights.scoring.tiers import (
    ScoreBadge,
    badge_color,
    badge_label,
    classify,
    score_badge,
)
from interview_insights.taxonomy.score_taxonomy import BadgeColor, ScoreTier


# ── classify ──────────────────────────────────────────────────────────────────

class TestClassify:
    def test_every_score_maps_to_one_tier(self):
        for score in range(0, 101):
            assert classify(score) in set(ScoreTier)

    def test_bands_partition_range(self):
        counts = {tier: 0 for tier in ScoreTier}
        for score in range(0, 101):
            counts[classify(score)] += 1
        assert counts[ScoreTier.POOR] == 50       # 0..49
        assert counts[ScoreTier.FAIR] == 20       # 50..69
        assert counts[ScoreTier.GOOD] == 15       # 70..84
        assert counts[ScoreTier.EXCELLENT] == 16  # 85..100

    @pytest.mark.parametrize(
        "score, expected",
        [
            (49, ScoreTier.POOR),
            (50, ScoreTier.FAIR),
            (69, ScoreTier.FAIR),
            (70, ScoreTier.GOOD),
            (84, ScoreTier.GOOD),
            (85, ScoreTier.EXCELLENT),
            (100, ScoreTier.EXCELLENT),
            (0, ScoreTier.POOR),
        ],
    )
    def test_boundaries(self, score, expected):
        assert classify(score) == expected

    def test_above_range_is_excellent(self):
        assert classify(150) == ScoreTier.EXCELLENT

    def test_below_range_is_poor(self):
        assert classify(-20) == ScoreTier.POOR


# ── badges ────────────────────────────────────────────────────────────────────

class TestBadges:
    def test_each_tier_has_distinct_color(self):
        colors = {badge_color(tier) for tier in ScoreTier}
        assert len(colors) == len(list(ScoreTier))

    def test_excellent_is_green(self):
        assert badge_color(ScoreTier.EXCELLENT) == BadgeColor.GREEN

    def test_poor_is_orange(self):
        assert badge_color(ScoreTier.POOR) == BadgeColor.ORANGE

    @pytest.mark.parametrize(
        "score, expected",
        [
            (92, "✅ Excellent Match (92%)"),
            (74, "🟡 Good Match (74%)"),
            (55, "🟠 Fair Match (55%)"),
            (31, "🔴 Poor Match (31%)"),
        ],
    )
    def test_badge_label(self, score, expected):
        assert badge_label(score) == expected

    def test_score_badge_without_prefix(self):
        badge = score_badge(70)
        assert isinstance(badge, ScoreBadge)
        assert badge.tier == ScoreTier.GOOD
        assert badge.color == BadgeColor.LIME
        assert badge.display_label == badge.label == "🟡 Good Match (70%)"

    def test_score_badge_with_prefix(self):
        badge = score_badge(85, "JD Relevance")
        assert badge.label == "✅ Excellent Match (85%)"
        assert badge.display_label == "JD Relevance: ✅ Excellent Match (85%)"
