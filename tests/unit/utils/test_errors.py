"""Tests for the exception hierarchy and HTTP error descriptions."""

import pytest

from slugcast.utils.errors import (
    ConfigError,
    CredentialsMissingError,
    ProviderError,
    SlugcastError,
    StoreError,
    StoreResponseError,
    classify_http_error,
)


class TestExceptions:
    def test_hierarchy(self) -> None:
        assert issubclass(CredentialsMissingError, ConfigError)
        assert issubclass(ConfigError, SlugcastError)
        assert issubclass(StoreResponseError, StoreError)
        assert issubclass(ProviderError, SlugcastError)

    def test_provider_error_fields(self) -> None:
        error = ProviderError("boom", provider="claude", status_code=429)
        assert str(error) == "boom"
        assert error.provider == "claude"
        assert error.status_code == 429

    def test_store_error_status_optional(self) -> None:
        assert StoreError("down").status_code is None


class TestClassifyHttpError:
    @pytest.mark.parametrize(
        ("status", "prefix"),
        [
            (429, "Rate limit exceeded"),
            (500, "Server error (HTTP 500)"),
            (503, "Server error (HTTP 503)"),
            (408, "Request timeout"),
            (401, "Authentication failed (HTTP 401)"),
            (403, "Authentication failed (HTTP 403)"),
            (404, "Invalid request (HTTP 404)"),
            (302, "HTTP error 302"),
        ],
    )
    def test_descriptions(self, status: int, prefix: str) -> None:
        message = classify_http_error(status, "details")
        assert message.startswith(prefix)
        assert message.endswith("details")
