"""Preference-based podcast recommendations.

Asks the inference service to pick from the stored podcasts. If the model
is unreachable or answers in an unknown shape, falls back to matching the
preference's words against topics.
"""

import logging

from slugcast.providers import InferenceClient
from slugcast.utils.errors import ProviderError, StoreError, StoreResponseError

from .formatter import (
    DATABASE_ERROR,
    NO_PODCASTS_FOR_RECOMMENDATION,
    format_ai_recommendation,
    format_catalog,
    format_keyword_match,
    format_no_match,
)
from .library import PodcastLibrary
from .models import AgentResult, PodcastRecord, ResultStatus
from .prompts import RECOMMENDATION_PROMPT

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50


def keyword_match(preference: str, records: list[PodcastRecord]) -> PodcastRecord | None:
    """First record whose topic contains any word of the preference.

    Matching is a case-insensitive substring test, in the order given.
    """
    keywords = preference.lower().split()
    for record in records:
        topic = record.topic.lower()
        if any(keyword in topic for keyword in keywords):
            return record
    return None


class PodcastRecommender:
    """Recommends stored podcasts for a free-text preference."""

    def __init__(
        self,
        library: PodcastLibrary,
        inference: InferenceClient | None,
        history_limit: int = DEFAULT_HISTORY_LIMIT,
    ) -> None:
        """Initialize the recommender.

        Args:
            library: Source of stored podcasts
            inference: Model service; None goes straight to keyword matching
            history_limit: How many recent podcasts the model may choose from
        """
        self.library = library
        self.inference = inference
        self.history_limit = history_limit

    async def recommend(self, preference: str) -> AgentResult:
        try:
            records = await self.library.recent(self.history_limit)
        except StoreResponseError as e:
            return AgentResult(status=ResultStatus.ERROR, text=DATABASE_ERROR, error=str(e))
        except StoreError as e:
            return AgentResult(
                status=ResultStatus.ERROR,
                text=f"Error getting recommendations: {e}",
                error=str(e),
            )

        if not records:
            return AgentResult(status=ResultStatus.EMPTY, text=NO_PODCASTS_FOR_RECOMMENDATION)

        if self.inference is not None:
            try:
                answer = await self.inference.infer(
                    [
                        {"role": "system", "content": RECOMMENDATION_PROMPT.system_prompt or ""},
                        {
                            "role": "user",
                            "content": RECOMMENDATION_PROMPT.render(
                                preference=preference, catalog=format_catalog(records)
                            ),
                        },
                    ]
                )
                return AgentResult(status=ResultStatus.OK, text=format_ai_recommendation(answer))
            except ProviderError as e:
                logger.info(f"AI recommendation failed, using keyword match: {e}")

        match = keyword_match(preference, records)
        if match is None:
            return AgentResult(status=ResultStatus.EMPTY, text=format_no_match(preference))
        return AgentResult(status=ResultStatus.OK, text=format_keyword_match(match, preference))
