"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows which backend is in
use. The choice is made once, from configuration; everything else talks
to the PersistenceGateway interface.
"""

from __future__ import annotations

import logging

from combostore.application.storefront import Storefront
from combostore.domain.repository.persistence_gateway import PersistenceGateway
from combostore.infrastructure.config import Settings, get_settings
from combostore.infrastructure.persistence.local_store import LocalStore
from combostore.infrastructure.persistence.remote_store import RemoteStore
from combostore.infrastructure.persistence.storage_client import StorageError
from combostore.infrastructure.persistence.supabase_client import SupabaseStorageClient

logger = logging.getLogger(__name__)


async def persistence_gateway(settings: Settings | None = None) -> PersistenceGateway:
    settings = settings or get_settings()
    if settings.remote_configured:
        try:
            client = await SupabaseStorageClient.connect(
                settings.supabase_url, settings.supabase_key  # type: ignore[arg-type]
            )
        except StorageError as exc:
            logger.error("Remote store unavailable, using local store: %s", exc)
        else:
            return RemoteStore(client)
    logger.info("Using local store in %s", settings.data_dir)
    return LocalStore(settings.data_dir)


async def storefront(settings: Settings | None = None) -> Storefront:
    """Build and load a storefront on the configured backend."""
    front = Storefront(await persistence_gateway(settings))
    await front.load()
    return front
