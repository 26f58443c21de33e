"""Abstract remote storage client.

The thin transport the Remote Store talks to: table CRUD plus a
row-change subscription. Implementations raise ``StorageError`` for any
transport or API failure so callers handle one exception type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Awaitable, Callable

PayloadCallback = Callable[[dict[str, Any]], None]
Unsubscribe = Callable[[], Awaitable[None]]


class StorageError(Exception):
    """The remote store could not be reached or rejected the request."""


class StorageClient(ABC):

    @abstractmethod
    async def select(self, table: str, order_by: str, descending: bool = True) -> list[dict]:
        """Return every row of *table* sorted by *order_by*."""

    @abstractmethod
    async def insert(self, table: str, row: dict[str, Any]) -> None:
        """Insert a new row."""

    @abstractmethod
    async def upsert(self, table: str, row: dict[str, Any]) -> None:
        """Insert or replace a row by primary key."""

    @abstractmethod
    async def update(self, table: str, values: dict[str, Any], match: dict[str, Any]) -> None:
        """Apply *values* to rows matching every key/value in *match*."""

    @abstractmethod
    async def delete(self, table: str, match: dict[str, Any]) -> None:
        """Delete rows matching every key/value in *match*."""

    @abstractmethod
    async def subscribe(self, channel: str, table: str, callback: PayloadCallback) -> Unsubscribe:
        """Open a change channel on *table*; returns a callable that closes it."""
