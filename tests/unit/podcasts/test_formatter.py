"""Tests for user-facing podcast text."""

from slugcast.podcasts.formatter import (
    format_catalog,
    format_fallback_announcement,
    format_keyword_match,
    format_listing,
    format_no_match,
    format_no_search_results,
    format_search_results,
)
from slugcast.podcasts.models import PodcastRecord

AI = PodcastRecord(
    topic="ai", slug="ai-guide", url="https://x.dev/ai-guide", created_at="2024-05-02T10:00:00.000Z"
)
COOKING = PodcastRecord(
    topic="cooking",
    slug="cooking-stories",
    url="https://x.dev/cooking-stories",
    created_at="2024-05-01T09:30:00.000Z",
)


class TestListings:
    def test_listing(self):
        text = format_listing([AI, COOKING])

        assert text.startswith("Found 2 previously generated podcast(s):\n\n")
        assert (
            '1. "ai"\n'
            "   📅 Generated: 5/2/2024\n"
            "   🔗 URL: https://x.dev/ai-guide\n"
            "   📝 Slug: ai-guide\n\n"
        ) in text
        assert text.index('1. "ai"') < text.index('2. "cooking"')

    def test_search_results(self):
        text = format_search_results("cook", [COOKING])
        assert text.startswith('Found 1 podcast(s) matching "cook":\n\n1. "cooking"')

    def test_no_search_results(self):
        assert format_no_search_results("xyz") == (
            'No podcasts found matching "xyz". Try a different search term.'
        )


class TestRecommendationText:
    def test_catalog_one_line_per_podcast(self):
        lines = format_catalog([AI, COOKING]).splitlines()

        assert lines == [
            '1. Topic: "ai" | URL: https://x.dev/ai-guide | Created: 5/2/2024',
            '2. Topic: "cooking" | URL: https://x.dev/cooking-stories | Created: 5/1/2024',
        ]

    def test_keyword_match(self):
        text = format_keyword_match(AI, "something about ai")

        assert text.startswith("🎯 Found a matching podcast!")
        assert "🔗 Listen here: https://x.dev/ai-guide" in text
        assert text.endswith("This podcast matches your preference for: something about ai")

    def test_no_match(self):
        assert format_no_match("jazz").startswith('😔 No podcasts found matching "jazz".')


def test_fallback_announcement():
    assert format_fallback_announcement("shoes", "https://x.dev/shoes-guide") == (
        "Great! Your podcast about shoes has been generated and is ready to listen! "
        "Check it out at https://x.dev/shoes-guide"
    )
