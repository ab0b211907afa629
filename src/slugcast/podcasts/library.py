"""Reading and writing podcast records.

The ``podcasts`` table is append-only: records are inserted after a podcast
is generated and read back by listing, search and recommendation.
"""

import logging

from pydantic import ValidationError

from slugcast.store import QueryStore
from slugcast.utils.errors import StoreError, StoreResponseError

from .formatter import (
    DATABASE_ERROR,
    NO_PODCASTS_YET,
    format_listing,
    format_no_search_results,
    format_search_results,
)
from .models import AgentResult, PersistOutcome, PodcastRecord, ResultStatus

logger = logging.getLogger(__name__)

INSERT_SQL = "INSERT INTO podcasts (topic, slug, url, created_at) VALUES (?, ?, ?, ?)"
RECENT_SQL = "SELECT topic, slug, url, created_at FROM podcasts ORDER BY created_at DESC LIMIT ?"
SEARCH_SQL = (
    "SELECT topic, slug, url, created_at FROM podcasts "
    "WHERE topic LIKE ? ORDER BY created_at DESC"
)

DEFAULT_LIST_LIMIT = 10


class PodcastLibrary:
    """Podcast records kept in a QueryStore.

    Example:
        >>> library = PodcastLibrary(D1Store(api))
        >>> result = await library.list_podcasts(limit=5)
        >>> print(result)
    """

    def __init__(self, store: QueryStore) -> None:
        self.store = store

    async def save(self, record: PodcastRecord) -> PersistOutcome:
        """Insert a record without ever raising.

        Returns:
            PERSISTED on success, FAILED_SILENTLY otherwise
        """
        try:
            await self.store.query(
                INSERT_SQL, [record.topic, record.slug, record.url, record.created_at]
            )
        except StoreError as e:
            logger.debug(f"Podcast '{record.slug}' was not saved: {e}")
            return PersistOutcome.FAILED_SILENTLY

        logger.debug(f"Saved podcast '{record.slug}'")
        return PersistOutcome.PERSISTED

    async def recent(self, limit: int = DEFAULT_LIST_LIMIT) -> list[PodcastRecord]:
        """Most recent records first.

        Raises:
            StoreError: If the store cannot be reached
            StoreResponseError: If the response or a row is malformed
        """
        rows = await self.store.query(RECENT_SQL, [limit])
        return self._to_records(rows)

    async def matching(self, term: str) -> list[PodcastRecord]:
        """Records whose topic contains ``term``, most recent first.

        Case sensitivity is whatever the store's LIKE does.
        """
        rows = await self.store.query(SEARCH_SQL, [f"%{term}%"])
        return self._to_records(rows)

    async def list_podcasts(self, limit: int = DEFAULT_LIST_LIMIT) -> AgentResult:
        """Describe the most recent podcasts."""
        try:
            records = await self.recent(limit)
        except StoreResponseError as e:
            return AgentResult(status=ResultStatus.ERROR, text=DATABASE_ERROR, error=str(e))
        except StoreError as e:
            return AgentResult(
                status=ResultStatus.ERROR, text=f"Error querying database: {e}", error=str(e)
            )

        if not records:
            return AgentResult(status=ResultStatus.EMPTY, text=NO_PODCASTS_YET)
        return AgentResult(status=ResultStatus.OK, text=format_listing(records))

    async def search(self, term: str) -> AgentResult:
        """Describe the podcasts whose topic contains ``term``."""
        try:
            records = await self.matching(term)
        except StoreResponseError as e:
            return AgentResult(status=ResultStatus.ERROR, text=DATABASE_ERROR, error=str(e))
        except StoreError as e:
            return AgentResult(
                status=ResultStatus.ERROR, text=f"Error searching database: {e}", error=str(e)
            )

        if not records:
            return AgentResult(status=ResultStatus.EMPTY, text=format_no_search_results(term))
        return AgentResult(status=ResultStatus.OK, text=format_search_results(term, records))

    @staticmethod
    def _to_records(rows: list[dict]) -> list[PodcastRecord]:
        try:
            return [PodcastRecord.model_validate(row) for row in rows]
        except ValidationError as e:
            raise StoreResponseError(f"Malformed podcast row: {e}") from e
