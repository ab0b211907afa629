"""Model providers for text completion and inference.

Concrete implementations of TextCompleter and InferenceClient for the
services slugcast can use (Claude, Workers AI).
"""

from .base import ChatMessage, InferenceClient, TextCompleter
from .claude import ClaudeCompleter
from .workers_ai import WorkersAIClient

__all__ = [
    "ChatMessage",
    "ClaudeCompleter",
    "InferenceClient",
    "TextCompleter",
    "WorkersAIClient",
]
