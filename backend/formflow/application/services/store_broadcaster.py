"""Store broadcaster — in-process fan-out of store changes to async consumers."""

import asyncio
import logging
from collections.abc import AsyncGenerator, Callable

from formflow.domain.entities import StoreChange

from .domain_store import DomainStore

logger = logging.getLogger(__name__)


class StoreBroadcaster:
    """Relays every ``StoreChange`` of a store to any number of subscribers.

    Each subscriber gets its own bounded asyncio.Queue; a subscriber that
    falls behind far enough to fill its queue is disconnected. All calls must
    come from the thread running the event loop.
    """

    def __init__(self, queue_size: int = 100) -> None:
        self._queue_size = queue_size
        self._queues: list[asyncio.Queue[StoreChange | None]] = []
        self._detach: Callable[[], None] | None = None

    def attach(self, store: DomainStore) -> None:
        """Start relaying ``store`` changes. Replaces any previous store."""
        self.detach()
        self._detach = store.subscribe(self.publish)

    def detach(self) -> None:
        if self._detach is not None:
            self._detach()
            self._detach = None

    async def subscribe(self) -> AsyncGenerator[StoreChange, None]:
        """Yield store changes until the broadcaster shuts down.

        The generator unsubscribes automatically when the consumer stops.
        """
        queue: asyncio.Queue[StoreChange | None] = asyncio.Queue(maxsize=self._queue_size)
        self._queues.append(queue)
        try:
            while True:
                change = await queue.get()
                if change is None:
                    break
                yield change
        finally:
            if queue in self._queues:
                self._queues.remove(queue)

    def publish(self, change: StoreChange) -> None:
        """Push ``change`` to every subscriber queue."""
        dead_queues: list[asyncio.Queue[StoreChange | None]] = []

        for queue in self._queues:
            try:
                queue.put_nowait(change)
            except asyncio.QueueFull:
                dead_queues.append(queue)
                logger.warning("Store subscriber queue full — disconnecting")

        for q in dead_queues:
            self._queues.remove(q)
            _close(q)

    async def shutdown(self) -> None:
        """Stop relaying and disconnect all subscribers."""
        self.detach()
        for queue in self._queues:
            _close(queue)
        self._queues.clear()

    @property
    def subscriber_count(self) -> int:
        return len(self._queues)


def _close(queue: asyncio.Queue[StoreChange | None]) -> None:
    """Deliver the end-of-stream marker, dropping the oldest change if needed."""
    if queue.full():
        queue.get_nowait()
    queue.put_nowait(None)
