"""Candidate Notifier — in-process pub/sub feeding the candidateUnavailable subscription.

Invariants:
    - publish() never blocks and never raises; a full subscriber queue drops the event
    - Each subscriber receives events in publish order (per-queue FIFO)
    - A subscriber is registered on entering subscribe() and removed on exit,
      including when the consuming task is cancelled
    - No persistence: events published with no subscribers are discarded

Design Decisions:
    - asyncio.Queue per subscriber, confined to the event loop (single uvicorn worker)
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator, AsyncIterator

from teachteam.config import get_settings
from teachteam.core.notifications import CandidateUnavailableEvent

logger = logging.getLogger(__name__)


class CandidateNotifier:
    """Fan-out of CandidateUnavailableEvent to all live subscribers."""

    def __init__(self, queue_size: int = 100):
        self._queue_size = queue_size
        self._subscribers: set[asyncio.Queue] = set()

    @property
    def subscriber_count(self) -> int:
        return len(self._subscribers)

    def publish(self, event: CandidateUnavailableEvent) -> int:
        """Deliver event to every subscriber. Returns how many received it."""
        delivered = 0
        for queue in list(self._subscribers):
            try:
                queue.put_nowait(event)
                delivered += 1
            except asyncio.QueueFull:
                logger.warning(
                    "Notification dropped for slow subscriber",
                    extra={"candidate_id": event.candidate_id},
                )
        logger.info(
            f"Candidate unavailable notification published to {delivered} subscriber(s)",
            extra={"candidate_id": event.candidate_id},
        )
        return delivered

    @asynccontextmanager
    async def subscribe(self) -> AsyncGenerator[AsyncIterator[CandidateUnavailableEvent], None]:
        """Register a subscriber; yields an async iterator over its events."""
        queue: asyncio.Queue = asyncio.Queue(maxsize=self._queue_size)
        self._subscribers.add(queue)

        async def _events() -> AsyncIterator[CandidateUnavailableEvent]:
            while True:
                yield await queue.get()

        try:
            yield _events()
        finally:
            self._subscribers.discard(queue)


@lru_cache
def get_notifier() -> CandidateNotifier:
    return CandidateNotifier(queue_size=get_settings().notifier_queue_size)
