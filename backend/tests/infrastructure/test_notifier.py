"""Candidate Notifier — in-process fan-out behind the candidateUnavailable subscription.

Tests:
    - Every live subscriber receives each event, in publish order
    - Publishing with no subscribers is a no-op
    - A full subscriber queue drops the event instead of blocking
    - Leaving subscribe() unregisters the subscriber
"""

import asyncio
from datetime import datetime, timezone

from teachteam.core.notifications import CandidateUnavailableEvent
from teachteam.infrastructure.notifier import CandidateNotifier


def _event(reason: str = "Unavailable") -> CandidateUnavailableEvent:
    return CandidateUnavailableEvent(
        candidate_id="c1", candidate_name="Ann", candidate_email="ann@example.com",
        reason=reason, timestamp=datetime.now(timezone.utc),
    )


async def test_all_subscribers_receive_events_in_order():
    notifier = CandidateNotifier()
    async with notifier.subscribe() as first, notifier.subscribe() as second:
        assert notifier.subscriber_count == 2
        assert notifier.publish(_event("one")) == 2
        notifier.publish(_event("two"))

        for events in (first, second):
            received = [await asyncio.wait_for(events.__anext__(), 1) for _ in range(2)]
            assert [e.reason for e in received] == ["one", "two"]


async def test_publish_without_subscribers_delivers_nothing():
    assert CandidateNotifier().publish(_event()) == 0


async def test_full_queue_drops_event():
    notifier = CandidateNotifier(queue_size=1)
    async with notifier.subscribe() as events:
        assert notifier.publish(_event("kept")) == 1
        assert notifier.publish(_event("dropped")) == 0
        received = await asyncio.wait_for(events.__anext__(), 1)
        assert received.reason == "kept"


async def test_subscriber_removed_on_exit():
    notifier = CandidateNotifier()
    async with notifier.subscribe():
        assert notifier.subscriber_count == 1
    assert notifier.subscriber_count == 0
