"""
Shared pytest fixtures for the Interview Insights test suite.

Provides:
  - Raw camelCase payload dicts, as the upstream analysis emits them.
  - Validated model instances built from those dicts.
"""

from __future__ import annotations

import pytest

from interview_insights.models.analysis import QAItem
from interview_insights.models.payload import AnalysisPayload
from interview_insights.models.training import PerformanceGap, TrainingRecommendation


# ── Raw payload fragments ─────────────────────────────────────────────────────

@pytest.fixture
def raw_qa_item() -> dict:
    """One question with two answers, camelCase keys, plus an unknown key."""
    return {
        "question": "Walk me through the data pipeline you built at your last job.",
        "timestamp": "00:02:15",
        "relevance": 88,
        "answers": [
            {
                "text": "I designed an Airflow pipeline that ingested clickstream data.",
                "timestamp": "00:02:40",
                "jdMatch": 76,
                "matchScore": 0.76,
                "sentiment": "positive",
            },
            {
                "text": "We also moved the warehouse to BigQuery. " * 10,
                "timestamp": "00:03:30",
                "jdMatch": 45,
                "reasoning": "The candidate drifted into an unrelated migration story.",
            },
        ],
        "speakerConfidence": 0.93,
    }


@pytest.fixture
def raw_recommendation() -> dict:
    """A high-priority recommendation with one list-form and one legacy follow-up."""
    return {
        "area": "Follow-up Questioning",
        "priority": "high",
        "issue": "Candidate mentions of scale were not followed up.",
        "recommendation": "Ask for numbers whenever a candidate describes impact.",
        "resources": ["Probing Techniques 101", "STAR Interview Guide"],
        "expectedImprovement": "+15 points on follow-up rate",
        "missedFollowUps": [
            {
                "afterNode": "answer-0-0",
                "suggestedQuestion": "How big was the dataset?",
                "suggestedQuestions": [
                    "How many events per day did the pipeline handle?",
                    "What was the end-to-end latency?",
                ],
                "importance": "high",
                "reasoning": "Scale claims were left unverified.",
                "specificContext": "Candidate said the pipeline was 'large'.",
                "answerExcerpt": "ingested clickstream data",
                "followUpType": "quantification",
            },
            {
                "afterNode": "answer-0-1",
                "suggestedQuestion": "Who else worked on the migration?",
                "importance": "low",
                "reasoning": "Team dynamics were not explored.",
                "followUpType": "pair_programming",
            },
        ],
    }


@pytest.fixture
def raw_gap() -> dict:
    return {
        "metric": "JD Relevance Score",
        "currentScore": 62,
        "targetScore": 80,
        "gap": 18,
        "severity": "moderate",
    }


@pytest.fixture
def raw_payload(raw_qa_item: dict, raw_recommendation: dict, raw_gap: dict) -> dict:
    """A complete payload covering both dashboard sections."""
    return {
        "qaAnalysis": [raw_qa_item],
        "insights": [
            "Candidate communicates clearly.",
            {"description": "Strong ownership of past projects."},
            {"foo": 1},
            42,
        ],
        "recommendations": [raw_recommendation],
        "performanceGaps": [raw_gap],
        "strengthAreas": ["Warm rapport building"],
        "overallRating": "good",
    }


# ── Validated models ──────────────────────────────────────────────────────────

@pytest.fixture
def sample_qa_item(raw_qa_item: dict) -> QAItem:
    return QAItem.model_validate(raw_qa_item)


@pytest.fixture
def sample_recommendation(raw_recommendation: dict) -> TrainingRecommendation:
    return TrainingRecommendation.model_validate(raw_recommendation)


@pytest.fixture
def sample_gap(raw_gap: dict) -> PerformanceGap:
    return PerformanceGap.model_validate(raw_gap)


@pytest.fixture
def sample_payload(raw_payload: dict) -> AnalysisPayload:
    return AnalysisPayload.model_validate(raw_payload)
