"""Unit tests for the StoreBroadcaster."""

import asyncio
from contextlib import aclosing

import pytest

from formflow.application.services import DomainStore, StoreBroadcaster
from formflow.domain.entities import StoreChange


async def _collect(broadcaster: StoreBroadcaster, limit: int | None = None) -> list[StoreChange]:
    received = []
    async with aclosing(broadcaster.subscribe()) as changes:
        async for change in changes:
            received.append(change)
            if limit is not None and len(received) == limit:
                break
    return received


@pytest.mark.asyncio
async def test_subscribers_receive_store_changes():
    store = DomainStore()
    broadcaster = StoreBroadcaster()
    broadcaster.attach(store)

    first = asyncio.create_task(_collect(broadcaster, limit=2))
    second = asyncio.create_task(_collect(broadcaster, limit=2))
    await asyncio.sleep(0)
    assert broadcaster.subscriber_count == 2

    client = store.add_client({"name": "Acme", "email": "a@acme.com"})
    store.delete_client(client.id)

    for task in (first, second):
        changes = await asyncio.wait_for(task, timeout=1)
        assert [c.operation for c in changes] == ["client.added", "client.deleted"]
        assert changes[1].snapshot.stats.total_clients == 0

    assert broadcaster.subscriber_count == 0


@pytest.mark.asyncio
async def test_shutdown_ends_subscriptions_and_detaches():
    store = DomainStore()
    broadcaster = StoreBroadcaster()
    broadcaster.attach(store)

    task = asyncio.create_task(_collect(broadcaster))
    await asyncio.sleep(0)
    store.add_form({"title": "Survey"})

    await broadcaster.shutdown()
    changes = await asyncio.wait_for(task, timeout=1)

    assert [c.operation for c in changes] == ["form.added"]
    assert broadcaster.subscriber_count == 0

    received = []
    store.subscribe(received.append)
    store.add_form({"title": "After"})
    assert len(received) == 1


@pytest.mark.asyncio
async def test_slow_subscriber_is_disconnected():
    store = DomainStore()
    broadcaster = StoreBroadcaster(queue_size=2)
    broadcaster.attach(store)

    task = asyncio.create_task(_collect(broadcaster))
    await asyncio.sleep(0)

    for i in range(3):
        store.add_client({"name": f"C{i}", "email": "c@x.com"})

    assert broadcaster.subscriber_count == 0
    changes = await asyncio.wait_for(task, timeout=1)
    assert [c.operation for c in changes] == ["client.added"]
