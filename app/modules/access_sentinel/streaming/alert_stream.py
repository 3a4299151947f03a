"""Live alert stream: buffer, read state, subscribers and the synthetic feed"""

import asyncio
import contextlib
import itertools
import threading
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable

from app.modules.access_sentinel.domain.entities import Alert
from app.modules.access_sentinel.domain.enums import AlertSource, AlertType, ConnectionStatus
from app.modules.access_sentinel.repositories.reference_registry import ReferenceRegistry
from app.modules.access_sentinel.streaming.alert_buffer import AlertBuffer
from app.modules.access_sentinel.streaming.severity import SeverityClassifier
from app.modules.access_sentinel.streaming.synthetic_feed import SyntheticAlertSource
from app.modules.access_sentinel.utils import ALERT_BUFFER_CAPACITY, DateTimeService, get_logger

logger = get_logger()

AlertCallback = Callable[[Alert], None]
UnreadCallback = Callable[[int], None]

TEST_ALERT_RISK = {
    AlertType.FRAUD: 95.0,
    AlertType.SUSPICIOUS: 70.0,
    AlertType.INFO: 20.0,
}


@dataclass(eq=False)
class Subscription:
    """Handle returned by subscribe/watch_unread"""

    id: int
    callback: Callable = field(repr=False)
    _processor: "AlertStreamProcessor" = field(repr=False)

    def unsubscribe(self) -> None:
        self._processor.unsubscribe(self)

    @property
    def active(self) -> bool:
        return self._processor.is_subscribed(self)


class AlertStreamProcessor:
    """Single sequencer for the alert buffer

    Every mutation runs under one re-entrant lock, so the synthetic feed, the
    periodic recompute and request handlers may call in from any thread.
    Subscribers are invoked synchronously, under the lock, in ingestion order.
    """

    def __init__(
        self,
        registry: ReferenceRegistry,
        capacity: int = ALERT_BUFFER_CAPACITY,
        feed: SyntheticAlertSource | None = None,
        clock: Callable[[], datetime] = DateTimeService.utc_now,
    ):
        self.registry = registry
        self.feed = feed
        self.clock = clock

        self._buffer = AlertBuffer(capacity)
        self._lock = threading.RLock()
        self._subscribers: dict[int, Subscription] = {}
        self._unread_watchers: dict[int, Subscription] = {}
        self._ids = itertools.count(1)
        self._test_ids = itertools.count(1)

        self._status = ConnectionStatus.DISCONNECTED
        self._queue: asyncio.Queue[Alert] | None = None
        self._tasks: list[asyncio.Task] = []

    @property
    def status(self) -> ConnectionStatus:
        return self._status

    @property
    def alerts(self) -> list[Alert]:
        with self._lock:
            return self._buffer.alerts

    @property
    def unread_count(self) -> int:
        with self._lock:
            return self._buffer.unread_count

    @property
    def capacity(self) -> int:
        return self._buffer.capacity

    async def start(self) -> None:
        """Open the session: start the dispatcher and, when configured, the feed"""
        if self._status != ConnectionStatus.DISCONNECTED:
            return
        self._set_status(ConnectionStatus.CONNECTING)

        self._queue = asyncio.Queue()
        self._tasks.append(asyncio.create_task(self._dispatch(), name="alert-dispatcher"))
        if self.feed is not None:
            self._tasks.append(
                asyncio.create_task(self.feed.run(self.publish), name="synthetic-alert-feed")
            )

        self._set_status(ConnectionStatus.CONNECTED)

    async def stop(self) -> None:
        """Cancel owned tasks; alerts still queued are dropped"""
        tasks, self._tasks = self._tasks, []
        for task in tasks:
            task.cancel()
        for task in tasks:
            with contextlib.suppress(asyncio.CancelledError):
                await task

        if self._queue is not None and not self._queue.empty():
            logger.debug(f"Dropping {self._queue.qsize()} queued alerts on shutdown")
        self._queue = None
        self._set_status(ConnectionStatus.DISCONNECTED)

    async def publish(self, alert: Alert) -> None:
        """Enqueue an alert for the dispatcher task"""
        if self._queue is None:
            raise RuntimeError("Alert stream is not started")
        await self._queue.put(alert)

    async def drain(self) -> None:
        """Wait until every published alert has been ingested"""
        if self._queue is not None:
            await self._queue.join()

    def ingest(self, alert: Alert) -> None:
        """Buffer the alert and deliver it to subscribers"""
        with self._lock:
            before = self._buffer.unread_count
            evicted = self._buffer.ingest(alert)
            if evicted:
                logger.debug(f"Evicted {len(evicted)} alerts beyond capacity {self.capacity}")

            for subscription in list(self._subscribers.values()):
                # a callback may unsubscribe a later subscriber mid fan-out
                if subscription.id in self._subscribers:
                    self._deliver(subscription, alert)
            self._notify_unread(before)

    def mark_as_read(self, alert_id: str) -> bool:
        with self._lock:
            before = self._buffer.unread_count
            changed = self._buffer.mark_as_read(alert_id)
            self._notify_unread(before)
            return changed

    def mark_all_as_read(self) -> int:
        with self._lock:
            before = self._buffer.unread_count
            changed = self._buffer.mark_all_as_read()
            self._notify_unread(before)
            return changed

    def clear(self) -> None:
        with self._lock:
            before = self._buffer.unread_count
            self._buffer.clear()
            self._notify_unread(before)

    def get(self, alert_id: str) -> Alert | None:
        with self._lock:
            return self._buffer.get(alert_id)

    def subscribe(self, callback: AlertCallback) -> Subscription:
        """Call ``callback(alert)`` for every ingested alert

        Callbacks run synchronously on the ingesting thread. The periodic
        recompute ingests from a worker thread, so callbacks must be
        thread-safe and hand off to the event loop themselves when needed.
        """
        with self._lock:
            subscription = Subscription(next(self._ids), callback, self)
            self._subscribers[subscription.id] = subscription
            return subscription

    def watch_unread(self, callback: UnreadCallback) -> Subscription:
        """Call ``callback(unread_count)`` whenever the count changes

        Same threading rules as :meth:`subscribe`.
        """
        with self._lock:
            subscription = Subscription(next(self._ids), callback, self)
            self._unread_watchers[subscription.id] = subscription
            return subscription

    def unsubscribe(self, subscription: Subscription) -> None:
        with self._lock:
            self._subscribers.pop(subscription.id, None)
            self._unread_watchers.pop(subscription.id, None)

    def is_subscribed(self, subscription: Subscription) -> bool:
        with self._lock:
            return (
                subscription.id in self._subscribers
                or subscription.id in self._unread_watchers
            )

    def trigger_test_alert(self, alert_type: AlertType = AlertType.FRAUD) -> Alert:
        """Ingest a fixed alert of the given type, for end-to-end checks"""
        staff_name = self.registry.identities[0].name if self.registry.identities else "Unknown"
        locations = self.registry.locations
        origin = locations[0].name if locations else "ICU"
        destination = locations[1].name if len(locations) > 1 else "Pharmacy"

        alert = SeverityClassifier.compose(
            alert_id=f"WS-TEST-{next(self._test_ids):04d}",
            alert_type=alert_type,
            staff_name=staff_name,
            from_location=origin,
            to_location=destination,
            risk_score=TEST_ALERT_RISK[alert_type],
            timestamp=self.clock(),
            source=AlertSource.TEST,
            message=f"Test alert for {staff_name}",
        )
        self.ingest(alert)
        return alert

    async def _dispatch(self) -> None:
        queue = self._queue
        while True:
            alert = await queue.get()
            try:
                self.ingest(alert)
            finally:
                queue.task_done()

    def _deliver(self, subscription: Subscription, alert: Alert) -> None:
        try:
            subscription.callback(alert)
        except Exception:
            logger.exception(f"Alert subscriber {subscription.id} failed on {alert.id}")

    def _notify_unread(self, before: int) -> None:
        count = self._buffer.unread_count
        if count == before:
            return
        for subscription in list(self._unread_watchers.values()):
            if subscription.id not in self._unread_watchers:
                continue
            try:
                subscription.callback(count)
            except Exception:
                logger.exception(f"Unread watcher {subscription.id} failed")

    def _set_status(self, status: ConnectionStatus) -> None:
        logger.info(f"Alert stream {self._status.value} -> {status.value}")
        self._status = status
