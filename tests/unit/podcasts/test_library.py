"""Tests for PodcastLibrary."""

import pytest

from slugcast.podcasts.formatter import DATABASE_ERROR, NO_PODCASTS_YET
from slugcast.podcasts.library import INSERT_SQL, RECENT_SQL, SEARCH_SQL, PodcastLibrary
from slugcast.podcasts.models import PersistOutcome, PodcastRecord, ResultStatus
from slugcast.utils.errors import StoreError, StoreResponseError


@pytest.fixture
def record() -> PodcastRecord:
    return PodcastRecord(
        topic="O'Brien's \"best\" shoes",
        slug="obriens-best-shoes-guide",
        url="https://x.dev/obriens-best-shoes-guide",
        created_at="2024-05-03T08:00:00.000Z",
    )


class TestSave:
    """Saving never raises."""

    @pytest.mark.asyncio
    async def test_save_binds_values(self, make_store, record):
        store = make_store()

        outcome = await PodcastLibrary(store).save(record)

        assert outcome == PersistOutcome.PERSISTED
        assert store.calls == [
            (
                INSERT_SQL,
                [
                    "O'Brien's \"best\" shoes",
                    "obriens-best-shoes-guide",
                    "https://x.dev/obriens-best-shoes-guide",
                    "2024-05-03T08:00:00.000Z",
                ],
            )
        ]

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error", [StoreError("connection refused"), StoreResponseError("no such table")]
    )
    async def test_save_failure_is_silent(self, make_store, record, error):
        outcome = await PodcastLibrary(make_store(error=error)).save(record)
        assert outcome == PersistOutcome.FAILED_SILENTLY


class TestListPodcasts:
    @pytest.mark.asyncio
    async def test_lists_in_store_order(self, make_store, sample_rows):
        store = make_store(rows=sample_rows)

        result = await PodcastLibrary(store).list_podcasts(limit=5)

        assert result.status == ResultStatus.OK
        assert result.text.startswith("Found 2 previously generated podcast(s):")
        assert result.text.index('"ai"') < result.text.index('"cooking"')
        assert store.calls == [(RECENT_SQL, [5])]

    @pytest.mark.asyncio
    async def test_empty(self, make_store):
        result = await PodcastLibrary(make_store()).list_podcasts()

        assert result.status == ResultStatus.EMPTY
        assert result.text == NO_PODCASTS_YET

    @pytest.mark.asyncio
    async def test_unsuccessful_response(self, make_store):
        store = make_store(error=StoreResponseError("D1 query unsuccessful"))

        result = await PodcastLibrary(store).list_podcasts()

        assert result.status == ResultStatus.ERROR
        assert result.text == DATABASE_ERROR

    @pytest.mark.asyncio
    async def test_unreachable_store(self, make_store):
        result = await PodcastLibrary(make_store(error=StoreError("timed out"))).list_podcasts()

        assert result.status == ResultStatus.ERROR
        assert result.text == "Error querying database: timed out"

    @pytest.mark.asyncio
    async def test_malformed_row(self, make_store):
        store = make_store(rows=[{"topic": "ai"}])

        result = await PodcastLibrary(store).list_podcasts()

        assert result.text == DATABASE_ERROR


class TestSearch:
    @pytest.mark.asyncio
    async def test_term_is_bound_as_parameter(self, make_store, sample_rows):
        store = make_store(rows=sample_rows[1:])

        result = await PodcastLibrary(store).search("cook'; DROP TABLE podcasts;--")

        assert store.calls == [(SEARCH_SQL, ["%cook'; DROP TABLE podcasts;--%"])]
        assert result.status == ResultStatus.OK

    @pytest.mark.asyncio
    async def test_results(self, make_store, sample_rows):
        result = await PodcastLibrary(make_store(rows=sample_rows[1:])).search("cook")
        assert result.text.startswith('Found 1 podcast(s) matching "cook":')

    @pytest.mark.asyncio
    async def test_no_results(self, make_store):
        result = await PodcastLibrary(make_store()).search("jazz")

        assert result.status == ResultStatus.EMPTY
        assert result.text == 'No podcasts found matching "jazz". Try a different search term.'

    @pytest.mark.asyncio
    async def test_unreachable_store(self, make_store):
        result = await PodcastLibrary(make_store(error=StoreError("timed out"))).search("ai")
        assert result.text == "Error searching database: timed out"

    @pytest.mark.asyncio
    async def test_unsuccessful_response(self, make_store):
        result = await PodcastLibrary(make_store(error=StoreResponseError("x"))).search("ai")
        assert result.text == DATABASE_ERROR
