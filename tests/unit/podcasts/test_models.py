"""Tests for podcast data models."""

import re

import pytest
from pydantic import ValidationError

from slugcast.podcasts.models import (
    AgentResult,
    GenerationResult,
    PersistOutcome,
    PodcastRecord,
    ResultStatus,
    utc_timestamp,
)


def test_utc_timestamp_format():
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z", utc_timestamp())


class TestPodcastRecord:
    """Tests for PodcastRecord model."""

    def test_created_at_defaults_to_now(self):
        record = PodcastRecord(topic="ai", slug="ai-guide", url="https://x.dev/ai-guide")
        assert record.created_at.endswith("Z")

    def test_extra_columns_ignored(self):
        record = PodcastRecord.model_validate(
            {"id": 4, "topic": "ai", "slug": "s", "url": "u", "created_at": "2024-01-01"}
        )
        assert record.topic == "ai"

    def test_missing_column_rejected(self):
        with pytest.raises(ValidationError):
            PodcastRecord.model_validate({"topic": "ai", "slug": "s"})

    def test_frozen(self):
        record = PodcastRecord(topic="ai", slug="s", url="u")
        with pytest.raises(ValidationError):
            record.topic = "other"  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("created_at", "expected"),
        [
            ("2024-05-02T10:00:00.000Z", "5/2/2024"),
            ("2023-12-25T23:59:59.999Z", "12/25/2023"),
            ("2024-01-09", "1/9/2024"),
            ("yesterday", "yesterday"),
        ],
    )
    def test_display_date(self, created_at, expected):
        record = PodcastRecord(topic="ai", slug="s", url="u", created_at=created_at)
        assert record.display_date == expected


class TestAgentResult:
    def test_str_is_text(self):
        assert str(AgentResult(status=ResultStatus.OK, text="hello")) == "hello"

    @pytest.mark.parametrize(
        ("status", "succeeded"),
        [
            (ResultStatus.OK, True),
            (ResultStatus.EMPTY, True),
            (ResultStatus.MISSING_CREDENTIALS, False),
            (ResultStatus.ERROR, False),
        ],
    )
    def test_succeeded(self, status, succeeded):
        assert AgentResult(status=status, text="").succeeded is succeeded

    def test_generation_result_serializes_enums_as_values(self):
        result = GenerationResult(
            status=ResultStatus.OK,
            text="ready",
            query="ai",
            slug="ai-guide",
            url="https://x.dev/ai-guide",
            slug_source="llm",
            persist=PersistOutcome.PERSISTED,
        )

        data = result.model_dump(mode="json")

        assert data["status"] == "ok"
        assert data["persist"] == "persisted"
        assert data["slug_source"] == "llm"
