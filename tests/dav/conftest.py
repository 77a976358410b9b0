"""
Shared test fixtures for the DAV SDK tests.

Provides a recording mock transport, stream helpers, and sample params.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Iterable, Optional

import pytest

from dav.core.enums import PriceType
from dav.core.params import BasicParams, BidParams, MessageParams, NeedParams, Price
from dav.infra.config import DavConfig

SELF_ID = "SELF_ID"
TOPIC_ID = "TOPIC_ID"
NEED_ID = "NEED_ID"


class KafkaError(Exception):
    """Stand-in for a broker-side failure."""

    def __str__(self) -> str:
        return "Kafka error"


# ============ Stream helpers ============

async def stream_of(items: Iterable[BasicParams]) -> AsyncIterator[BasicParams]:
    for item in items:
        yield item


async def failing_stream(
    error: BaseException,
    items: Iterable[BasicParams] = (),
) -> AsyncIterator[BasicParams]:
    for item in items:
        yield item
    raise error


async def collect(stream: AsyncIterator[Any]) -> list[Any]:
    return [item async for item in stream]


# ============ Mock Transport ============

class MockTransport:
    """Records every call in order; errors are configured per operation."""

    def __init__(self, topic_id: str = TOPIC_ID):
        self.topic_id = topic_id
        self.calls: list[tuple[str, tuple[Any, ...]]] = []
        self.create_topic_error: Optional[BaseException] = None
        self.send_params_error: Optional[BaseException] = None
        self.params_stream_error: Optional[BaseException] = None
        self.stream_items: list[BasicParams] = []
        self.stream_error: Optional[BaseException] = None

    def generate_topic_id(self, entity_id: str) -> str:
        self.calls.append(("generate_topic_id", (entity_id,)))
        return self.topic_id

    async def create_topic(self, topic_id: str, config: DavConfig) -> None:
        self.calls.append(("create_topic", (topic_id, config)))
        if self.create_topic_error is not None:
            raise self.create_topic_error

    async def send_params(self, topic_id: str, params: BasicParams, config: DavConfig) -> None:
        self.calls.append(("send_params", (topic_id, params, config)))
        if self.send_params_error is not None:
            raise self.send_params_error

    async def params_stream(self, topic_id: str, config: DavConfig) -> AsyncIterator[BasicParams]:
        self.calls.append(("params_stream", (topic_id, config)))
        if self.params_stream_error is not None:
            raise self.params_stream_error
        if self.stream_error is not None:
            return failing_stream(self.stream_error, self.stream_items)
        return stream_of(self.stream_items)

    def calls_to(self, name: str) -> list[tuple[Any, ...]]:
        return [args for op, args in self.calls if op == name]

    @property
    def operations(self) -> list[str]:
        return [op for op, _ in self.calls]


# ============ Fixtures ============

@pytest.fixture
def config() -> DavConfig:
    return DavConfig()


@pytest.fixture
def need_params() -> NeedParams:
    return NeedParams(id=NEED_ID)


@pytest.fixture
def bid_params() -> BidParams:
    return BidParams(id="bidSource", price=Price(value="3", type=PriceType.FLAT))


@pytest.fixture
def message_params() -> list[MessageParams]:
    return [MessageParams(sender_id=f"SOURCE_ID_{i}") for i in (1, 2, 3)]


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()
