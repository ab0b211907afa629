"""Capability interfaces for the model services slugcast talks to."""

from abc import ABC, abstractmethod
from typing import TypedDict


class ChatMessage(TypedDict):
    role: str
    content: str


class TextCompleter(ABC):
    """Turns a prompt into free-form text.

    Output is untrusted: callers must not assume it is well-formed.
    """

    provider_name: str = "unknown"

    @abstractmethod
    async def complete(self, prompt: str, system: str | None = None) -> str:
        """Complete a prompt.

        Args:
            prompt: Fully rendered user prompt
            system: Optional system prompt

        Returns:
            Model output text

        Raises:
            ProviderError: If the call fails or the response has no text
        """


class InferenceClient(ABC):
    """Runs a chat model over a role-tagged message list."""

    @abstractmethod
    async def infer(self, messages: list[ChatMessage]) -> str:
        """Return the model's reply text.

        Raises:
            ProviderError: If the call fails or the response shape is unknown
        """
