"""Interface of the SQL-over-HTTP store holding podcast records."""

from abc import ABC, abstractmethod
from typing import Any

Row = dict[str, Any]


class QueryStore(ABC):
    """Executes one parameterized statement per call. No transactions."""

    @abstractmethod
    async def query(self, sql: str, params: list[Any] | None = None) -> list[Row]:
        """Run ``sql`` with positional ``?`` parameters and return the rows.

        Raises:
            StoreError: If the store cannot be reached
            StoreResponseError: If the store answers without a result set
        """
