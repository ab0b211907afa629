"""Data models for podcast records and agent results.

This module defines Pydantic models for:
- Podcast records (rows of the ``podcasts`` table)
- Agent results (descriptive text plus a status, never an exception)
- Generation results (announcement plus slug, URL and persistence outcome)
"""

from datetime import datetime, timezone
from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


def utc_timestamp() -> str:
    """Current time as an ISO-8601 string with millisecond precision."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


class PodcastRecord(BaseModel):
    """A generated podcast, as stored in the ``podcasts`` table.

    Records are written once and never updated.

    Example:
        >>> record = PodcastRecord(
        ...     topic="space exploration",
        ...     slug="space-exploration-guide",
        ...     url="https://example.dev/space-exploration-guide",
        ... )
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    topic: str = Field(..., description="Original user query, unescaped")
    slug: str = Field(..., description="Slug derived from the topic")
    url: str = Field(..., description="Base URL joined with the slug")
    created_at: str = Field(default_factory=utc_timestamp, description="ISO-8601 insert time")

    @property
    def display_date(self) -> str:
        """Creation date as M/D/YYYY, or the raw value if it cannot be parsed."""
        try:
            created = datetime.fromisoformat(self.created_at.replace("Z", "+00:00"))
        except ValueError:
            return self.created_at
        return f"{created.month}/{created.day}/{created.year}"


class ResultStatus(str, Enum):
    """How an agent operation ended."""

    OK = "ok"
    EMPTY = "empty"
    MISSING_CREDENTIALS = "missing_credentials"
    ERROR = "error"


class PersistOutcome(str, Enum):
    """What happened to the best-effort save after a podcast was generated."""

    PERSISTED = "persisted"
    SKIPPED_NO_CREDENTIALS = "skipped_no_credentials"
    FAILED_SILENTLY = "failed_silently"


class AgentResult(BaseModel):
    """Outcome of an agent operation.

    Operations never raise for collaborator failures; they describe the
    failure in ``text`` and flag it in ``status``.
    """

    status: ResultStatus
    text: str
    error: str | None = Field(None, description="Underlying failure, for logs")

    @property
    def succeeded(self) -> bool:
        return self.status in (ResultStatus.OK, ResultStatus.EMPTY)

    def __str__(self) -> str:
        return self.text


class GenerationResult(AgentResult):
    """Result of generating a podcast announcement."""

    query: str
    slug: str
    url: str
    slug_source: Literal["llm", "derived"] = "derived"
    persist: PersistOutcome = PersistOutcome.SKIPPED_NO_CREDENTIALS
