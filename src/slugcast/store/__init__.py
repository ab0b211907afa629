"""Storage of podcast records."""

from .base import QueryStore, Row
from .d1 import D1Store

__all__ = ["D1Store", "QueryStore", "Row"]
