"""User-facing text for podcast listings, searches and recommendations."""

from .models import PodcastRecord

CREDENTIALS_REQUIRED = (
    "Error: Cloudflare credentials are required to access the database. "
    "Please provide all three secrets."
)
CREDENTIALS_REQUIRED_WITH_AI = (
    "Error: Cloudflare credentials are required to access the database and AI. "
    "Please provide all three secrets."
)
DATABASE_ERROR = (
    "Error retrieving podcasts from database. Make sure your credentials are correct."
)
NO_PODCASTS_YET = (
    "No podcasts found in the database yet. Generate your first podcast to get started!"
)
NO_PODCASTS_FOR_RECOMMENDATION = (
    "No podcasts found in the database yet. "
    "Generate some podcasts first to get recommendations!"
)


def format_record(index: int, record: PodcastRecord) -> str:
    return (
        f'{index}. "{record.topic}"\n'
        f"   📅 Generated: {record.display_date}\n"
        f"   🔗 URL: {record.url}\n"
        f"   📝 Slug: {record.slug}\n\n"
    )


def format_listing(records: list[PodcastRecord]) -> str:
    """Numbered listing of recent podcasts."""
    output = f"Found {len(records)} previously generated podcast(s):\n\n"
    return output + "".join(format_record(i, r) for i, r in enumerate(records, start=1))


def format_search_results(term: str, records: list[PodcastRecord]) -> str:
    """Numbered listing of podcasts whose topic matched ``term``."""
    output = f'Found {len(records)} podcast(s) matching "{term}":\n\n'
    return output + "".join(format_record(i, r) for i, r in enumerate(records, start=1))


def format_no_search_results(term: str) -> str:
    return f'No podcasts found matching "{term}". Try a different search term.'


def format_catalog(records: list[PodcastRecord]) -> str:
    """One line per podcast, as handed to the recommendation model."""
    return "\n".join(
        f'{i}. Topic: "{r.topic}" | URL: {r.url} | Created: {r.display_date}'
        for i, r in enumerate(records, start=1)
    )


def format_ai_recommendation(text: str) -> str:
    return f"🤖 AI Podcast Recommendation:\n\n{text}"


def format_keyword_match(record: PodcastRecord, preference: str) -> str:
    return (
        f"🎯 Found a matching podcast!\n\n"
        f'"{record.topic}"\n'
        f"📅 Generated: {record.display_date}\n"
        f"🔗 Listen here: {record.url}\n\n"
        f"This podcast matches your preference for: {preference}"
    )


def format_no_match(preference: str) -> str:
    return (
        f'😔 No podcasts found matching "{preference}". '
        f"Try generating some podcasts with topics you're interested in first!"
    )


def format_fallback_announcement(query: str, url: str) -> str:
    """Announcement used when the completion service is unavailable."""
    return (
        f"Great! Your podcast about {query} has been generated and is ready to listen! "
        f"Check it out at {url}"
    )
