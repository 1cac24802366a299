"""
Explanation resolver: the "Why N%?" text shown next to every score badge.

Author-supplied reasoning always wins.  When the upstream analysis did not
supply any, the text is picked from a fixed table of four templates per
analysis kind, one per ScoreTier.  The same (kind, score) always yields the
same non-empty string.
"""

from __future__ import annotations

from typing import Optional

from interview_insights.scoring.tiers import classify
from interview_insights.taxonomy.score_taxonomy import AnalysisKind, ScoreTier

# Tooltip heading shown above the explanation text.
EXPLANATION_TITLES: dict[AnalysisKind, str] = {
    AnalysisKind.QUESTION_RELEVANCE: "Question Relevance to Job Description",
    AnalysisKind.ANSWER_QUALITY:     "How Well Did They Answer the Question?",
}

# Each template is prefixed with "Why {score}%? " at resolution time.
_TEMPLATES: dict[AnalysisKind, dict[ScoreTier, str]] = {
    AnalysisKind.QUESTION_RELEVANCE: {
        ScoreTier.EXCELLENT: (
            "This question fully aligns with the job description, targeting "
            "critical competencies and core responsibilities. It effectively "
            "evaluates the candidate's ability to perform key functions of the role."
        ),
        ScoreTier.GOOD: (
            "This question covers most job requirements but could be more "
            "specific in certain areas. It addresses important skills mentioned "
            "in the JD but may lack some depth or miss minor details."
        ),
        ScoreTier.FAIR: (
            "This question is partially relevant, touching on some job "
            "requirements but missing important aspects. Consider focusing more "
            "directly on the specific technical skills or key responsibilities "
            "outlined in the JD."
        ),
        ScoreTier.POOR: (
            "This question has minimal connection to the job description. It "
            "doesn't effectively assess the candidate's fit for the role's core "
            "functions and required competencies. Align questions more closely "
            "with JD requirements."
        ),
    },
    AnalysisKind.ANSWER_QUALITY: {
        ScoreTier.EXCELLENT: (
            "The candidate's answer comprehensively and directly addresses the "
            "recruiter's question. The response demonstrates clear understanding, "
            "provides relevant examples, and covers all key points asked."
        ),
        ScoreTier.GOOD: (
            "The answer covers the main points of the question with good clarity. "
            "The candidate understood the question and provided relevant "
            "information, though some details could be more specific."
        ),
        ScoreTier.FAIR: (
            "The answer partially addresses the question but misses some "
            "important aspects or lacks clarity. The candidate understood the "
            "general intent but didn't fully address all parts of the question."
        ),
        ScoreTier.POOR: (
            "The answer does not properly address the recruiter's question. The "
            "candidate either misunderstood the question or provided information "
            "unrelated to what was asked."
        ),
    },
}


def explain(
    kind:      AnalysisKind,
    score:     int,
    reasoning: Optional[str] = None,
) -> str:
    """Resolve the explanation text for one score.

    Args:
        kind:      What the score measures.
        score:     0–100 score being explained.
        reasoning: Author-supplied justification; returned unchanged when
                   non-empty.

    Returns:
        Non-empty explanation string.
    """
    if reasoning:
        return reasoning
    return f"Why {score}%? {_TEMPLATES[kind][classify(score)]}"
