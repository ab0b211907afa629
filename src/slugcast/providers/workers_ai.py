"""Cloudflare Workers AI provider."""

import logging

import httpx

from slugcast.cloudflare import CloudflareAPI
from slugcast.utils.errors import ProviderError

from .base import ChatMessage, InferenceClient, TextCompleter

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "@cf/meta/llama-3.1-8b-instruct"


class WorkersAIClient(TextCompleter, InferenceClient):
    """Chat completions through ``/ai/run/{model}``.

    Serves both as the recommendation inference service and, when
    configured, as the text-completion provider.
    """

    provider_name = "workers-ai"

    def __init__(self, api: CloudflareAPI, model: str = DEFAULT_MODEL) -> None:
        self.api = api
        self.model = model

    async def infer(self, messages: list[ChatMessage]) -> str:
        try:
            body = await self.api.post(f"ai/run/{self.model}", {"messages": messages})
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            status_code = getattr(getattr(e, "response", None), "status_code", None)
            raise ProviderError(
                f"Workers AI request failed: {e}",
                provider=self.provider_name,
                status_code=status_code,
            ) from e

        result = body.get("result")
        if not body.get("success") or not isinstance(result, dict):
            raise ProviderError(
                f"Workers AI returned no result: {body.get('errors', [])}",
                provider=self.provider_name,
            )

        response = result.get("response")
        if not isinstance(response, str) or not response.strip():
            raise ProviderError("Workers AI returned an empty response", provider=self.provider_name)

        logger.debug(f"Workers AI ({self.model}) returned {len(response)} characters")
        return response

    async def complete(self, prompt: str, system: str | None = None) -> str:
        messages: list[ChatMessage] = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})
        return await self.infer(messages)
