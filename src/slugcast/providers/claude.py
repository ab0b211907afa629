"""Claude (Anthropic) text-completion provider."""

import logging

from anthropic import AsyncAnthropic
from anthropic.types import Message

from slugcast.utils.api_keys import get_validated_api_key, validate_api_key
from slugcast.utils.errors import ProviderError

from .base import TextCompleter

logger = logging.getLogger(__name__)


class ClaudeCompleter(TextCompleter):
    """Text completion using the Anthropic Messages API."""

    provider_name = "claude"

    MODEL = "claude-sonnet-4-5"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_tokens: int = 400,
        temperature: float = 0.7,
    ) -> None:
        """Initialize the Claude completer.

        Args:
            api_key: Anthropic API key (defaults to ANTHROPIC_API_KEY env var)
            model: Claude model name
            max_tokens: Response token limit
            temperature: Sampling temperature

        Raises:
            APIKeyError: If the key is missing or malformed
        """
        if api_key:
            self.api_key = validate_api_key(api_key, "claude", "ANTHROPIC_API_KEY")
        else:
            self.api_key = get_validated_api_key("ANTHROPIC_API_KEY", "claude")

        self.model = model or self.MODEL
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.client = AsyncAnthropic(api_key=self.api_key)

    async def complete(self, prompt: str, system: str | None = None) -> str:
        request_params: dict = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            request_params["system"] = system

        try:
            response: Message = await self.client.messages.create(**request_params)
        except Exception as e:
            status_code = getattr(e, "status_code", None)
            raise ProviderError(
                f"Claude API error: {e}", provider=self.provider_name, status_code=status_code
            ) from e

        text = "".join(block.text for block in response.content if hasattr(block, "text"))
        if not text.strip():
            raise ProviderError("Empty response from Claude", provider=self.provider_name)

        logger.debug(
            f"Claude usage: {response.usage.input_tokens} in / {response.usage.output_tokens} out"
        )
        return text
