"""Entry point tying slugs, model providers and the podcast store together.

Every operation returns text describing its outcome. Missing credentials and
failing services are reported in that text rather than raised.
"""

import logging
from collections.abc import Callable

import httpx

from slugcast.cloudflare import CloudflareAPI
from slugcast.config.schema import CloudflareCredentials, GlobalConfig
from slugcast.podcasts import (
    AgentResult,
    GenerationResult,
    PersistOutcome,
    PodcastAnnouncer,
    PodcastLibrary,
    PodcastRecommender,
    ResultStatus,
)
from slugcast.podcasts.formatter import (
    CREDENTIALS_REQUIRED,
    CREDENTIALS_REQUIRED_WITH_AI,
    DATABASE_ERROR,
)
from slugcast.providers import ClaudeCompleter, InferenceClient, TextCompleter, WorkersAIClient
from slugcast.slug import SlugComposer, compose_url
from slugcast.store import D1Store, QueryStore
from slugcast.utils.api_keys import APIKeyError
from slugcast.utils.errors import ConfigError

logger = logging.getLogger(__name__)

StoreFactory = Callable[[CloudflareCredentials], QueryStore]
InferenceFactory = Callable[[CloudflareCredentials], InferenceClient]


def _invalid_credentials(error: ConfigError) -> AgentResult:
    logger.warning(f"Cloudflare credentials rejected: {error}")
    return AgentResult(status=ResultStatus.ERROR, text=DATABASE_ERROR, error=str(error))


class PodcastAgent:
    """Podcast slug agent.

    Collaborators are built from configuration unless injected, which is how
    tests substitute stubs for the network services.

    Example:
        >>> agent = PodcastAgent(config)
        >>> result = await agent.generate("space exploration", credentials=creds)
        >>> print(result)
    """

    def __init__(
        self,
        config: GlobalConfig | None = None,
        completer: TextCompleter | None = None,
        store_factory: StoreFactory | None = None,
        inference_factory: InferenceFactory | None = None,
        composer: SlugComposer | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the agent.

        Args:
            config: Global configuration (defaults to built-in defaults)
            completer: Text-completion service (defaults to the configured provider)
            store_factory: Builds the podcast store from complete credentials
            inference_factory: Builds the recommendation model client
            composer: Slug composer (defaults to the configured descriptor mode)
            transport: httpx transport for Cloudflare calls
        """
        self.config = config or GlobalConfig()
        self.completer = completer
        self.store_factory = store_factory or self._default_store
        self.inference_factory = inference_factory or self._default_inference
        self.composer = composer or SlugComposer(
            descriptor_mode=self.config.slug.descriptor_mode
        )
        self.transport = transport

    def slug(self, query: str) -> str:
        """Derive a slug locally, without any model call."""
        return self.composer.derive_slug(query)

    def url(self, query: str, base_url: str | None = None) -> str:
        """Derive a slug locally and join it onto the base URL."""
        return compose_url(base_url or self.config.base_url, self.slug(query))

    async def generate(
        self,
        query: str,
        base_url: str | None = None,
        credentials: CloudflareCredentials | None = None,
    ) -> GenerationResult:
        """Generate a podcast announcement, saving the record if possible."""
        credentials = credentials or CloudflareCredentials()

        library = None
        rejected = False
        if credentials.is_complete:
            try:
                library = PodcastLibrary(self.store_factory(credentials))
            except ConfigError as e:
                logger.warning(f"Podcast will not be saved: {e}")
                rejected = True

        announcer = PodcastAnnouncer(
            completer=self._completer(credentials),
            composer=self.composer,
            library=library,
            use_llm_slug=self.config.slug.use_llm,
        )
        result = await announcer.generate(query, base_url or self.config.base_url)
        if rejected:
            result = result.model_copy(update={"persist": PersistOutcome.FAILED_SILENTLY})
        logger.info(f"Generated {result.url} (save: {result.persist.value})")
        return result

    async def list_podcasts(
        self,
        limit: int | None = None,
        credentials: CloudflareCredentials | None = None,
    ) -> AgentResult:
        """Describe recently generated podcasts."""
        credentials = credentials or CloudflareCredentials()
        if not credentials.is_complete:
            return AgentResult(status=ResultStatus.MISSING_CREDENTIALS, text=CREDENTIALS_REQUIRED)

        try:
            library = PodcastLibrary(self.store_factory(credentials))
        except ConfigError as e:
            return _invalid_credentials(e)
        return await library.list_podcasts(limit or self.config.list_limit)

    async def search(
        self,
        term: str,
        credentials: CloudflareCredentials | None = None,
    ) -> AgentResult:
        """Describe podcasts whose topic contains ``term``."""
        credentials = credentials or CloudflareCredentials()
        if not credentials.is_complete:
            return AgentResult(status=ResultStatus.MISSING_CREDENTIALS, text=CREDENTIALS_REQUIRED)

        try:
            library = PodcastLibrary(self.store_factory(credentials))
        except ConfigError as e:
            return _invalid_credentials(e)
        return await library.search(term)

    async def recommend(
        self,
        preference: str,
        credentials: CloudflareCredentials | None = None,
    ) -> AgentResult:
        """Recommend a stored podcast for a free-text preference."""
        credentials = credentials or CloudflareCredentials()
        if not credentials.is_complete:
            return AgentResult(
                status=ResultStatus.MISSING_CREDENTIALS, text=CREDENTIALS_REQUIRED_WITH_AI
            )

        try:
            recommender = PodcastRecommender(
                library=PodcastLibrary(self.store_factory(credentials)),
                inference=self.inference_factory(credentials),
                history_limit=self.config.recommendation.history_limit,
            )
        except ConfigError as e:
            return _invalid_credentials(e)
        return await recommender.recommend(preference)

    def _cloudflare(self, credentials: CloudflareCredentials) -> CloudflareAPI:
        return CloudflareAPI(
            credentials,
            api_base=self.config.store.api_base,
            timeout=self.config.store.timeout_seconds,
            transport=self.transport,
        )

    def _default_store(self, credentials: CloudflareCredentials) -> QueryStore:
        return D1Store(self._cloudflare(credentials))

    def _default_inference(self, credentials: CloudflareCredentials) -> InferenceClient:
        return WorkersAIClient(self._cloudflare(credentials), model=self.config.recommendation.model)

    def _completer(self, credentials: CloudflareCredentials) -> TextCompleter | None:
        """The injected completer, or one built for the configured provider.

        Returns None when the provider cannot be set up; generation then
        falls back to local slugs and a plain announcement.
        """
        if self.completer is not None:
            return self.completer

        settings = self.config.completion
        if settings.provider == "workers-ai":
            if credentials.account_id is None or credentials.api_token is None:
                logger.info("Workers AI completion needs a Cloudflare account id and API token")
                return None
            try:
                return WorkersAIClient(
                    self._cloudflare(credentials), model=settings.workers_ai_model
                )
            except ConfigError as e:
                logger.info(f"Workers AI completion unavailable: {e}")
                return None

        try:
            return ClaudeCompleter(
                api_key=settings.anthropic_api_key,
                model=settings.claude_model,
                max_tokens=settings.max_tokens,
                temperature=settings.temperature,
            )
        except APIKeyError as e:
            logger.info(f"Claude completion unavailable: {e}")
            return None
