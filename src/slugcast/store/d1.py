"""Cloudflare D1 store."""

import logging
from typing import Any

import httpx

from slugcast.cloudflare import CloudflareAPI
from slugcast.utils.errors import CredentialsMissingError, StoreError, StoreResponseError

from .base import QueryStore, Row

logger = logging.getLogger(__name__)


class D1Store(QueryStore):
    """Runs SQL against a D1 database through the REST query endpoint."""

    def __init__(self, api: CloudflareAPI) -> None:
        """Initialize the store.

        Raises:
            CredentialsMissingError: If the API credentials lack a database id
        """
        database_id = api.credentials.database_id
        if database_id is None or not database_id.get_secret_value().strip():
            raise CredentialsMissingError("Cloudflare D1 database id is required")

        self.api = api
        self._path = f"d1/database/{database_id.get_secret_value()}/query"

    async def query(self, sql: str, params: list[Any] | None = None) -> list[Row]:
        logger.debug(f"D1 query: {sql} ({len(params or [])} params)")

        try:
            body = await self.api.post(self._path, {"sql": sql, "params": params or []})
        except httpx.HTTPStatusError as e:
            raise StoreError(f"D1 request failed: {e}", status_code=e.response.status_code) from e
        except (httpx.HTTPError, httpx.InvalidURL, ValueError) as e:
            raise StoreError(f"D1 request failed: {e}") from e

        return self._extract_rows(body)

    @staticmethod
    def _extract_rows(body: dict[str, Any]) -> list[Row]:
        """Pull ``result[0].results`` out of the response envelope."""
        if not body.get("success"):
            raise StoreResponseError(f"D1 query unsuccessful: {body.get('errors', [])}")

        result = body.get("result")
        if not isinstance(result, list) or not result or not isinstance(result[0], dict):
            raise StoreResponseError("D1 response has no result set")

        rows = result[0].get("results")
        if not isinstance(rows, list):
            raise StoreResponseError("D1 result set has no rows list")

        return rows
