"""Podcast generation, listing, search and recommendation."""

from .announcer import PodcastAnnouncer
from .library import PodcastLibrary
from .models import (
    AgentResult,
    GenerationResult,
    PersistOutcome,
    PodcastRecord,
    ResultStatus,
)
from .recommender import PodcastRecommender, keyword_match

__all__ = [
    "AgentResult",
    "GenerationResult",
    "PersistOutcome",
    "PodcastAnnouncer",
    "PodcastLibrary",
    "PodcastRecord",
    "PodcastRecommender",
    "ResultStatus",
    "keyword_match",
]
