"""
InMemoryTransport — in-process pub/sub over asyncio queues.

Each subscriber gets its own queue; a publish fans out to every queue
registered on the topic at that moment. Publishing to a topic nobody
created creates it, the way an auto-creating broker does.

Use for headless wiring (notebooks, CI, scripts) and tests. Failures can
be injected with ``fail_next`` (open-time / call-time) and ``fail_stream``
(item-time).
"""

from __future__ import annotations

import asyncio
import logging
import uuid
from collections import defaultdict
from typing import AsyncIterator, Literal

from dav.core.errors import TransportError
from dav.core.params import BasicParams

from .config import DavConfig

logger = logging.getLogger(__name__)

TOPIC_NAMESPACE = uuid.UUID("6f1c2f4e-3b1a-5d6e-9a7b-2c4d8e0f1a3b")

Operation = Literal["create_topic", "send_params", "params_stream"]

_CLOSED = object()


def generate_topic_id(entity_id: str) -> str:
    """Deterministic topic id for an entity id."""
    return uuid.uuid5(TOPIC_NAMESPACE, entity_id).hex


class InMemoryTransport:
    """Transport implementation backed by per-subscriber asyncio queues."""

    def __init__(self) -> None:
        self._topics: set[str] = set()
        self._subscribers: dict[str, list[asyncio.Queue]] = defaultdict(list)
        self._history: dict[str, list[BasicParams]] = defaultdict(list)
        self._failures: dict[str, BaseException] = {}
        self._lock = asyncio.Lock()
        self._closed = False

    def generate_topic_id(self, entity_id: str) -> str:
        return generate_topic_id(entity_id)

    # ---- Transport ----

    async def create_topic(self, topic_id: str, config: DavConfig) -> None:
        self._raise_injected("create_topic")
        self._check_open()
        async with self._lock:
            self._topics.add(topic_id)
        logger.info("Topic created: %s", config.topic_key(topic_id))

    async def send_params(
        self,
        topic_id: str,
        params: BasicParams,
        config: DavConfig,
    ) -> None:
        self._raise_injected("send_params")
        self._check_open()
        async with self._lock:
            self._topics.add(topic_id)
            self._history[topic_id].append(params)
            queues = list(self._subscribers[topic_id])
        for queue in queues:
            queue.put_nowait(params)
        logger.debug(
            "Published %s to %s (%d subscribers)",
            params.params_type, config.topic_key(topic_id), len(queues),
        )

    async def params_stream(
        self,
        topic_id: str,
        config: DavConfig,
    ) -> AsyncIterator[BasicParams]:
        self._raise_injected("params_stream")
        self._check_open()
        queue: asyncio.Queue = asyncio.Queue()
        async with self._lock:
            self._topics.add(topic_id)
            self._subscribers[topic_id].append(queue)
        logger.debug("Subscribed to %s", config.topic_key(topic_id))
        return _Subscription(self, topic_id, queue)

    def _unsubscribe(self, topic_id: str, queue: asyncio.Queue) -> None:
        subscribers = self._subscribers.get(topic_id, [])
        if queue in subscribers:
            subscribers.remove(queue)

    # ---- Inspection / fault injection ----

    @property
    def topics(self) -> set[str]:
        return set(self._topics)

    def published(self, topic_id: str) -> list[BasicParams]:
        """Every record published to ``topic_id`` so far, in order."""
        return list(self._history.get(topic_id, []))

    def subscriber_count(self, topic_id: str) -> int:
        return len(self._subscribers.get(topic_id, []))

    def fail_next(self, operation: Operation, error: BaseException) -> None:
        """Make the next call of ``operation`` raise ``error``."""
        self._failures[operation] = error

    def fail_stream(self, topic_id: str, error: BaseException) -> None:
        """Deliver ``error`` to every current subscriber of ``topic_id``."""
        for queue in self._subscribers.get(topic_id, []):
            queue.put_nowait(error)

    def close(self) -> None:
        """End every open stream. Later calls raise TransportError."""
        self._closed = True
        for queues in self._subscribers.values():
            for queue in queues:
                queue.put_nowait(_CLOSED)

    def _raise_injected(self, operation: Operation) -> None:
        error = self._failures.pop(operation, None)
        if error is not None:
            raise error

    def _check_open(self) -> None:
        if self._closed:
            raise TransportError("Transport is closed")


class _Subscription:
    """
    One subscriber's view of a topic.

    The queue is released on ``aclose()``, on close of the transport, and
    on the first error, whether or not iteration ever started.
    """

    def __init__(self, transport: InMemoryTransport, topic_id: str, queue: asyncio.Queue):
        self._transport = transport
        self._topic_id = topic_id
        self._queue = queue
        self._done = False

    def __aiter__(self) -> _Subscription:
        return self

    async def __anext__(self) -> BasicParams:
        if self._done:
            raise StopAsyncIteration
        try:
            item = await self._queue.get()
        except BaseException:
            self._release()
            raise
        if item is _CLOSED:
            self._release()
            raise StopAsyncIteration
        if isinstance(item, BaseException):
            self._release()
            raise item
        return item

    async def aclose(self) -> None:
        self._release()

    def _release(self) -> None:
        self._done = True
        self._transport._unsubscribe(self._topic_id, self._queue)
