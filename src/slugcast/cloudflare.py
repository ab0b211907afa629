"""Thin async client for the Cloudflare REST API.

Both the D1 query endpoint and Workers AI live under
``{api_base}/accounts/{account_id}/`` and answer with the same envelope::

    {"success": bool, "errors": [...], "result": ...}

The client returns that envelope as-is; interpreting ``success`` and the
shape of ``result`` is left to the caller.
"""

import logging
from typing import Any

import httpx

from slugcast.config.schema import CloudflareCredentials
from slugcast.utils.api_keys import APIKeyError, validate_api_key
from slugcast.utils.errors import (
    CredentialsMissingError,
    InvalidCredentialsError,
    classify_http_error,
)

logger = logging.getLogger(__name__)

DEFAULT_API_BASE = "https://api.cloudflare.com/client/v4"


class CloudflareAPI:
    """Posts JSON to account-scoped Cloudflare endpoints.

    Example:
        >>> api = CloudflareAPI(credentials)
        >>> body = await api.post("ai/run/@cf/meta/llama-3.1-8b-instruct", {"messages": []})
    """

    def __init__(
        self,
        credentials: CloudflareCredentials,
        api_base: str = DEFAULT_API_BASE,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            credentials: Cloudflare secrets; account id and API token are required
            api_base: REST API root
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests pass ``httpx.MockTransport``)

        Raises:
            CredentialsMissingError: If account id or API token is missing
            InvalidCredentialsError: If the API token is malformed
        """
        if credentials.account_id is None or credentials.api_token is None:
            raise CredentialsMissingError("Cloudflare account id and API token are required")

        try:
            self.api_token = validate_api_key(
                credentials.api_token.get_secret_value(), "cloudflare", "CLOUDFLARE_API_TOKEN"
            )
        except APIKeyError as e:
            raise InvalidCredentialsError(str(e)) from e

        self.credentials = credentials
        self.api_base = api_base.rstrip("/")
        self.timeout = timeout
        self.transport = transport

    def account_url(self, path: str) -> str:
        account_id = self.credentials.account_id.get_secret_value()  # type: ignore[union-attr]
        return f"{self.api_base}/accounts/{account_id}/{path.lstrip('/')}"

    async def post(self, path: str, payload: dict[str, Any]) -> dict[str, Any]:
        """POST a JSON payload and return the decoded response envelope.

        Error statuses that still carry a JSON envelope are returned so the
        caller can read ``success`` and ``errors``.

        Raises:
            httpx.HTTPError: On transport failures or non-JSON error responses
            httpx.InvalidURL: If the account id or API base cannot form a URL
            ValueError: If a successful response is not a JSON object
        """
        headers = {"Authorization": f"Bearer {self.api_token}"}

        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            response = await client.post(self.account_url(path), json=payload, headers=headers)

        try:
            body = response.json()
        except ValueError:
            body = None

        if not isinstance(body, dict):
            response.raise_for_status()
            raise ValueError(f"Expected a JSON object from Cloudflare, got: {response.text[:200]}")

        if response.is_error:
            logger.warning(classify_http_error(response.status_code, str(body.get("errors", ""))))

        return body
