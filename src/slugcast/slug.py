"""URL slug derivation and URL composition.

Turns free-form podcast topics into short, URL-safe path segments and joins
them onto the redirect endpoint that serves generated episodes.

Example:
    >>> composer = SlugComposer(descriptor_mode="stable")
    >>> slug = composer.derive_slug("Artificial intelligence in healthcare")
    >>> compose_url("https://x.dev/", "ai-guide")
    'https://x.dev/ai-guide'
"""

import hashlib
import random
import re
from typing import Literal

DEFAULT_BASE_URL = "https://rickrollworker.lizziepika.workers.dev"

DESCRIPTORS: tuple[str, ...] = (
    "deep-dive",
    "explained",
    "guide",
    "insights",
    "stories",
    "journey",
    "exploration",
    "breakdown",
)

MAX_SLUG_LENGTH = 50
MIN_WORD_LENGTH = 3
MAX_WORDS = 3

# What a model response object turns into when it is stringified instead of read
MALFORMED_SLUG = "objectpromise"

DescriptorMode = Literal["random", "stable"]

_DISALLOWED_CHARS = re.compile(r"[^\w\s-]", re.ASCII)
_SEPARATOR_RUNS = re.compile(r"[\s_-]+", re.ASCII)


def _utf16_length(word: str) -> int:
    """Length in UTF-16 code units, so astral characters count twice."""
    return len(word.encode("utf-16-le")) // 2


def _sanitize(text: str) -> str:
    """Drop non-slug characters, collapse separators, trim hyphens."""
    text = _DISALLOWED_CHARS.sub("", text)
    text = _SEPARATOR_RUNS.sub("-", text)
    return text.strip("-")


def clean_slug(text: str, max_length: int = MAX_SLUG_LENGTH) -> str:
    """Sanitize untrusted text (usually model output) into a slug.

    Args:
        text: Raw candidate slug
        max_length: Maximum slug length

    Returns:
        Cleaned slug, possibly empty
    """
    cleaned = _sanitize(text.strip().lower())
    return cleaned[:max_length].rstrip("-")


def is_usable_slug(slug: str) -> bool:
    """Whether a cleaned model slug can be used as-is."""
    return bool(slug) and slug.replace("-", "") != MALFORMED_SLUG


def compose_url(base: str | None, slug: str) -> str:
    """Join a slug onto a base URL.

    Exactly one trailing slash is removed from ``base``. A missing or empty
    base falls back to DEFAULT_BASE_URL. The base is not validated.
    """
    if not base:
        base = DEFAULT_BASE_URL
    if base.endswith("/"):
        base = base[:-1]
    return f"{base}/{slug}"


class SlugComposer:
    """Derives slugs from topics.

    Every slug ends with a descriptor word. In ``random`` mode the descriptor
    is drawn from ``rng`` on each call, so the same topic can produce
    different slugs. In ``stable`` mode it is picked from a digest of the
    normalized topic and repeated calls agree.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        descriptor_mode: DescriptorMode = "random",
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.descriptor_mode = descriptor_mode

    def pick_descriptor(self, text: str) -> str:
        if self.descriptor_mode == "stable":
            normalized = " ".join(text.lower().split())
            digest = hashlib.sha256(normalized.encode("utf-8")).digest()
            return DESCRIPTORS[int.from_bytes(digest[:8], "big") % len(DESCRIPTORS)]
        return self.rng.choice(DESCRIPTORS)

    def derive_slug(self, text: str) -> str:
        """Derive a slug of at most MAX_SLUG_LENGTH characters.

        The first three words longer than two UTF-16 code units form the prefix,
        followed by a descriptor. The prefix is shortened before the
        descriptor is attached, so the descriptor always survives.

        Args:
            text: Free-form topic

        Returns:
            Non-empty slug matching ``[a-z0-9]+(-[a-z0-9]+)*``
        """
        words = [word for word in text.lower().split() if _utf16_length(word) >= MIN_WORD_LENGTH]
        descriptor = self.pick_descriptor(text)

        prefix = _sanitize("-".join(words[:MAX_WORDS]))
        prefix = prefix[: MAX_SLUG_LENGTH - len(descriptor) - 1].rstrip("-")

        if not prefix:
            return descriptor
        return f"{prefix}-{descriptor}"


_default_composer = SlugComposer()


def derive_slug(text: str) -> str:
    """Derive a slug using the process-wide random descriptor source."""
    return _default_composer.derive_slug(text)
