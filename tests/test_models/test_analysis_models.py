"""Tests for QAItem / Answer models and insight variant parsing."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from interview_insights.models.analysis import (
    Answer,
    OpaqueInsight,
    QAItem,
    StructuredInsight,
    TextInsight,
    parse_insight,
)


class TestQAItem:
    def test_valid_construction_from_camel_case(self, sample_qa_item):
        item = sample_qa_item
        assert item.relevance == 88
        assert item.reasoning is None
        assert len(item.answers) == 2
        assert item.answers[0].jd_match == 76
        assert item.answers[0].match_score == pytest.approx(0.76)
        assert item.answers[0].sentiment == "positive"

    def test_answer_order_preserved(self, sample_qa_item):
        assert [a.timestamp for a in sample_qa_item.answers] == ["00:02:40", "00:03:30"]

    def test_unknown_keys_ignored(self, raw_qa_item):
        item = QAItem.model_validate(raw_qa_item)
        assert not hasattr(item, "speakerConfidence")

    def test_snake_case_accepted(self):
        answer = Answer(text="yes", timestamp="00:00:01", jd_match=50)
        assert answer.jd_match == 50

    def test_missing_relevance_raises(self, raw_qa_item):
        del raw_qa_item["relevance"]
        with pytest.raises(ValidationError, match="relevance"):
            QAItem.model_validate(raw_qa_item)

    def test_missing_jd_match_raises(self, raw_qa_item):
        del raw_qa_item["answers"][0]["jdMatch"]
        with pytest.raises(ValidationError, match="jdMatch"):
            QAItem.model_validate(raw_qa_item)

    def test_non_numeric_relevance_raises(self, raw_qa_item):
        raw_qa_item["relevance"] = "very relevant"
        with pytest.raises(ValidationError):
            QAItem.model_validate(raw_qa_item)

    def test_frozen(self, sample_qa_item):
        with pytest.raises(ValidationError):
            sample_qa_item.relevance = 10

    def test_answers_default_empty(self):
        item = QAItem(question="Any questions for us?", timestamp="00:30:00", relevance=40)
        assert item.answers == []


class TestParseInsight:
    def test_string_is_text(self):
        assert parse_insight("hello") == TextInsight("hello")

    def test_mapping_is_structured(self):
        assert parse_insight({"description": "x"}) == StructuredInsight({"description": "x"})

    def test_list_is_structured(self):
        assert parse_insight(["a", "b"]) == StructuredInsight(["a", "b"])

    @pytest.mark.parametrize("raw", [42, 3.5, True, None])
    def test_scalars_are_opaque(self, raw):
        assert isinstance(parse_insight(raw), OpaqueInsight)

    def test_idempotent(self):
        resolved = parse_insight({"text": "y"})
        assert parse_insight(resolved) is resolved
