"""Podcast generation: slug, URL, announcement and best-effort save."""

import logging
from typing import Literal

from slugcast.providers import TextCompleter
from slugcast.slug import SlugComposer, clean_slug, compose_url, is_usable_slug
from slugcast.utils.errors import ProviderError

from .formatter import format_fallback_announcement
from .library import PodcastLibrary
from .models import GenerationResult, PersistOutcome, PodcastRecord, ResultStatus
from .prompts import ANNOUNCEMENT_PROMPT, SLUG_PROMPT

logger = logging.getLogger(__name__)


class PodcastAnnouncer:
    """Turns a topic into a podcast URL and an announcement.

    Handles:
    - Slug choice (model suggestion, re-sanitized, with local fallback)
    - URL composition against the configured base
    - Announcement text from the completion service
    - Saving the record when a library is available

    Example:
        >>> announcer = PodcastAnnouncer(completer=ClaudeCompleter(), composer=SlugComposer())
        >>> result = await announcer.generate("space exploration")
        >>> print(result.text)
    """

    def __init__(
        self,
        completer: TextCompleter | None,
        composer: SlugComposer | None = None,
        library: PodcastLibrary | None = None,
        use_llm_slug: bool = True,
    ) -> None:
        """Initialize the announcer.

        Args:
            completer: Completion service; None uses local fallbacks only
            composer: Slug composer (defaults to a random-descriptor composer)
            library: Where to save generated podcasts; None skips saving
            use_llm_slug: Ask the completion service for a slug first
        """
        self.completer = completer
        self.composer = composer or SlugComposer()
        self.library = library
        self.use_llm_slug = use_llm_slug

    async def choose_slug(self, query: str) -> tuple[str, Literal["llm", "derived"]]:
        """Pick a slug for ``query``.

        Model output is never trusted as a slug: it is cleaned, and an empty
        or malformed result falls back to local derivation.
        """
        if self.use_llm_slug and self.completer is not None:
            try:
                raw = await self.completer.complete(SLUG_PROMPT.render(topic=query))
            except ProviderError as e:
                logger.info(f"Slug suggestion failed, deriving locally: {e}")
            else:
                candidate = clean_slug(raw)
                if is_usable_slug(candidate):
                    return candidate, "llm"
                logger.info(f"Discarding unusable slug suggestion: {raw[:80]!r}")

        return self.composer.derive_slug(query), "derived"

    async def announce(self, query: str, url: str) -> str:
        """Ask the completion service for an announcement.

        Raises:
            ProviderError: If no completion service is configured or it fails
        """
        if self.completer is None:
            raise ProviderError("No completion service configured", provider="none")
        return await self.completer.complete(ANNOUNCEMENT_PROMPT.render(query=query, url=url))

    async def generate(self, query: str, base_url: str | None = None) -> GenerationResult:
        """Generate a podcast URL and announcement for ``query``.

        A failing completion service yields a plain announcement instead of
        an error. Saving never affects the announcement.
        """
        slug, slug_source = await self.choose_slug(query)
        url = compose_url(base_url, slug)
        logger.debug(f"Podcast URL for {query!r}: {url} ({slug_source} slug)")

        status = ResultStatus.OK
        error = None
        try:
            text = await self.announce(query, url)
        except ProviderError as e:
            logger.info(f"Announcement failed, using plain text: {e}")
            text = format_fallback_announcement(query, url)
            status = ResultStatus.ERROR
            error = str(e)

        persist = PersistOutcome.SKIPPED_NO_CREDENTIALS
        if self.library is not None:
            persist = await self.library.save(PodcastRecord(topic=query, slug=slug, url=url))

        return GenerationResult(
            status=status,
            text=text,
            error=error,
            query=query,
            slug=slug,
            url=url,
            slug_source=slug_source,
            persist=persist,
        )
