"""
Module-boundary Protocol definitions — the contract between Need and the wire.

Need only ever talks to a Transport. Any implementation that satisfies the
Protocol can be injected, including test doubles.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, AsyncIterator, Protocol, runtime_checkable

from .params import BasicParams

if TYPE_CHECKING:
    from dav.infra.config import DavConfig


@runtime_checkable
class Transport(Protocol):
    """
    Pub/sub transport keyed by topic id.

    Delivery is at-least-once capable and FIFO per topic. Nothing is
    guaranteed across topics.
    """

    def generate_topic_id(self, entity_id: str) -> str:
        """Derive a topic id from an entity id. Pure and deterministic, no I/O."""
        ...

    async def create_topic(self, topic_id: str, config: DavConfig) -> None:
        """Create a topic. Raises on any infrastructure failure."""
        ...

    async def send_params(
        self,
        topic_id: str,
        params: BasicParams,
        config: DavConfig,
    ) -> None:
        """Publish a params record to a topic."""
        ...

    async def params_stream(
        self,
        topic_id: str,
        config: DavConfig,
    ) -> AsyncIterator[BasicParams]:
        """
        Subscribe to a topic.

        Awaiting this may itself fail (subscribe failure). The returned
        iterator yields records in arrival order and may raise after zero
        or more records, which ends the stream.
        """
        ...
