"""StorageClient backed by the Supabase async client."""

from __future__ import annotations

import logging
from typing import Any

import httpx
from postgrest.exceptions import APIError
from supabase import AsyncClient, acreate_client

from combostore.infrastructure.persistence.storage_client import (
    PayloadCallback,
    StorageClient,
    StorageError,
    Unsubscribe,
)

logger = logging.getLogger(__name__)


class SupabaseStorageClient(StorageClient):

    def __init__(self, client: AsyncClient) -> None:
        self._client = client

    @classmethod
    async def connect(cls, url: str, key: str) -> SupabaseStorageClient:
        try:
            client = await acreate_client(url, key)
        except (httpx.HTTPError, ValueError) as exc:
            raise StorageError(f"Failed to create Supabase client: {exc}") from exc
        logger.info("Connected to Supabase at %s", url)
        return cls(client)

    async def select(self, table: str, order_by: str, descending: bool = True) -> list[dict]:
        query = self._client.table(table).select("*").order(order_by, desc=descending)
        response = await self._execute(query, f"select from {table}")
        return list(response.data or [])

    async def insert(self, table: str, row: dict[str, Any]) -> None:
        await self._execute(self._client.table(table).insert(row), f"insert into {table}")

    async def upsert(self, table: str, row: dict[str, Any]) -> None:
        await self._execute(self._client.table(table).upsert(row), f"upsert into {table}")

    async def update(self, table: str, values: dict[str, Any], match: dict[str, Any]) -> None:
        query = self._client.table(table).update(values).match(match)
        await self._execute(query, f"update {table}")

    async def delete(self, table: str, match: dict[str, Any]) -> None:
        query = self._client.table(table).delete().match(match)
        await self._execute(query, f"delete from {table}")

    async def subscribe(self, channel: str, table: str, callback: PayloadCallback) -> Unsubscribe:
        realtime_channel = self._client.channel(channel)
        realtime_channel.on_postgres_changes(
            "*", schema="public", table=table, callback=callback
        )
        try:
            await realtime_channel.subscribe()
        except Exception as exc:
            # realtime surfaces websocket failures with several unrelated types
            raise StorageError(f"Failed to subscribe to {table}: {exc}") from exc
        logger.info("Subscribed to %s changes on %s", table, channel)

        async def unsubscribe() -> None:
            await self._client.remove_channel(realtime_channel)
            logger.info("Closed channel %s", channel)

        return unsubscribe

    # --- Helpers --------------------------------------------------------------

    @staticmethod
    async def _execute(query, action: str):
        try:
            return await query.execute()
        except APIError as exc:
            raise StorageError(f"Supabase rejected {action}: {exc.message}") from exc
        except httpx.HTTPError as exc:
            raise StorageError(f"Supabase unreachable during {action}: {exc}") from exc
