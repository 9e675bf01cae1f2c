"""One-shot store population at startup."""

import asyncio
import logging

from formflow.application.interfaces import SeedLoader
from formflow.domain.entities import StoreSnapshot

from .domain_store import DomainStore

logger = logging.getLogger(__name__)


async def bootstrap_store(
    store: DomainStore,
    loader: SeedLoader,
    delay_seconds: float = 0.0,
) -> StoreSnapshot:
    """Wait out the startup delay, then load the seed into ``store``.

    The store reports ``is_loaded == False`` until this completes. Raises
    SeedLoadError if the seed cannot be read; the store is left untouched.
    """
    if store.is_loaded:
        logger.warning("Store already loaded — bootstrap replaces its content")
    if delay_seconds > 0:
        logger.debug("Simulating startup load for %.2fs", delay_seconds)
        await asyncio.sleep(delay_seconds)
    seed = loader.load()
    return store.load(seed)
