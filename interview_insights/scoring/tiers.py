"""
Score tier classification.

Tier bands (lower edge inclusive)
---------------------------------
    excellent : score >= 85
    good      : score >= 70
    fair      : score >= 50
    poor      : everything else

Comparisons are evaluated in that order, so every integer maps to exactly
one tier.  Scores above 100 stay "excellent" and negative scores stay
"poor"; there is no error path.

Badges
------
Each tier has one colour category and one emoji-prefixed label::

    excellent -> green   "✅ Excellent Match (92%)"
    good      -> lime    "🟡 Good Match (74%)"
    fair      -> yellow  "🟠 Fair Match (55%)"
    poor      -> orange  "🔴 Poor Match (31%)"
"""

from __future__ import annotations

from dataclasses import dataclass

from interview_insights.taxonomy.score_taxonomy import BadgeColor, ScoreTier

# Checked top to bottom; first threshold the score reaches wins.
_TIER_THRESHOLDS: tuple[tuple[int, ScoreTier], ...] = (
    (85, ScoreTier.EXCELLENT),
    (70, ScoreTier.GOOD),
    (50, ScoreTier.FAIR),
)

_TIER_COLORS: dict[ScoreTier, BadgeColor] = {
    ScoreTier.EXCELLENT: BadgeColor.GREEN,
    ScoreTier.GOOD:      BadgeColor.LIME,
    ScoreTier.FAIR:      BadgeColor.YELLOW,
    ScoreTier.POOR:      BadgeColor.ORANGE,
}

_TIER_LABELS: dict[ScoreTier, str] = {
    ScoreTier.EXCELLENT: "✅ Excellent Match",
    ScoreTier.GOOD:      "🟡 Good Match",
    ScoreTier.FAIR:      "🟠 Fair Match",
    ScoreTier.POOR:      "🔴 Poor Match",
}


@dataclass(frozen=True)
class ScoreBadge:
    """Everything a renderer needs to draw one score badge.

    Attributes:
        score:         The classified score, unchanged.
        tier:          ScoreTier the score falls into.
        color:         Colour category for the tier.
        label:         Tier label with the score, e.g. "✅ Excellent Match (92%)".
        display_label: ``label`` behind an optional prefix,
                       e.g. "JD Relevance: ✅ Excellent Match (92%)".
    """

    score:         int
    tier:          ScoreTier
    color:         BadgeColor
    label:         str
    display_label: str


def classify(score: int) -> ScoreTier:
    """Return the ScoreTier for ``score``."""
    for threshold, tier in _TIER_THRESHOLDS:
        if score >= threshold:
            return tier
    return ScoreTier.POOR


def badge_color(tier: ScoreTier) -> BadgeColor:
    return _TIER_COLORS[tier]


def badge_label(score: int) -> str:
    """Return the emoji + tier label for ``score``, e.g. "🟠 Fair Match (55%)"."""
    return f"{_TIER_LABELS[classify(score)]} ({score}%)"


def score_badge(score: int, prefix: str = "") -> ScoreBadge:
    """Classify ``score`` and bundle its badge strings.

    Args:
        score:  0–100 score to classify.
        prefix: Optional caption placed before the label, e.g. "JD Relevance".

    Returns:
        ScoreBadge for ``score``.
    """
    tier  = classify(score)
    label = badge_label(score)
    return ScoreBadge(
        score=score,
        tier=tier,
        color=badge_color(tier),
        label=label,
        display_label=f"{prefix}: {label}" if prefix else label,
    )
