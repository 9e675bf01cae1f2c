"""Unit tests for bootstrap_store."""

import asyncio

import pytest

from formflow.application.interfaces import SeedLoader
from formflow.application.schemas import SeedData
from formflow.application.services import DomainStore, bootstrap_store
from formflow.domain.exceptions import SeedLoadError


class FakeSeedLoader(SeedLoader):
    """Returns a fixed seed, or raises when asked to."""

    def __init__(self, seed: SeedData | None = None, error: Exception | None = None):
        self.seed = seed or SeedData()
        self.error = error
        self.calls = 0

    def load(self) -> SeedData:
        self.calls += 1
        if self.error:
            raise self.error
        return self.seed


@pytest.mark.asyncio
async def test_store_is_not_loaded_until_bootstrap_finishes():
    store = DomainStore()
    loader = FakeSeedLoader(SeedData.model_validate({
        "clients": [{
            "id": "client-1",
            "name": "Alice",
            "email": "a@x.com",
            "created_at": "2025-02-15T08:30:00Z",
            "updated_at": "2025-04-10T14:45:00Z",
        }],
    }))

    task = asyncio.create_task(bootstrap_store(store, loader, delay_seconds=0.05))
    await asyncio.sleep(0)
    assert store.is_loaded is False

    snapshot = await task

    assert snapshot.loaded is True
    assert store.is_loaded is True
    assert snapshot.stats.total_clients == 1
    assert loader.calls == 1


@pytest.mark.asyncio
async def test_loader_failure_leaves_store_untouched():
    store = DomainStore()
    loader = FakeSeedLoader(error=SeedLoadError("seed.yaml", "boom"))

    with pytest.raises(SeedLoadError):
        await bootstrap_store(store, loader)

    assert store.is_loaded is False
    assert store.snapshot().clients == ()
