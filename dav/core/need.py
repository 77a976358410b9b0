"""
Need — the request-side agent entity.

A Need owns a topic keyed by ``need_params.id``. Bidders announce their
offers there, and other agents deliver messages to it. Every operation is a
short-lived interaction with the injected Transport; the Need itself holds
no state beyond its constructor fields.

Usage::

    need = Need("drone_42", NeedParams(id="need_1"), config, transport)
    bid = await need.create_bid(BidParams(price=Price(value="3")))

    async for bid in await need.bids():
        ...
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, AsyncIterator, Callable, Generic, TypeVar

from .errors import TopicCreationError, ValidationError
from .models import Bid, Message
from .params import BasicParams, BidParams, MessageParams, NeedParams
from .protocols import Transport

if TYPE_CHECKING:
    from dav.infra.config import DavConfig

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=BasicParams)
T = TypeVar("T")


class EntityStream(Generic[P, T]):
    """
    Async iterator of value entities built from a transport params stream.

    Records of other kinds share the topic; they belong to the other stream
    and are skipped. The first error ends the stream. Closing it closes the
    transport stream it wraps, whether or not iteration ever started::

        async with await need.bids() as bids:
            async for bid in bids:
                ...
    """

    def __init__(
        self,
        stream: AsyncIterator[BasicParams],
        params_cls: type[P],
        factory: Callable[[P], T],
        topic_id: str,
    ):
        self._stream = stream
        self._params_cls = params_cls
        self._factory = factory
        self._topic_id = topic_id
        self._done = False

    def __aiter__(self) -> EntityStream[P, T]:
        return self

    async def __anext__(self) -> T:
        if self._done:
            raise StopAsyncIteration
        while True:
            try:
                params = await self._stream.__anext__()
            except StopAsyncIteration:
                self._done = True
                raise
            except BaseException:
                await self.aclose()
                raise
            if isinstance(params, self._params_cls):
                return self._factory(params)
            logger.debug("Skipping %s record on %s", type(params).__name__, self._topic_id)

    async def aclose(self) -> None:
        self._done = True
        aclose = getattr(self._stream, "aclose", None)
        if aclose is not None:
            await aclose()

    async def __aenter__(self) -> EntityStream[P, T]:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


class Need:
    """A request-side agent session bound to one NeedParams."""

    def __init__(
        self,
        self_id: str,
        need_params: NeedParams,
        config: DavConfig,
        transport: Transport,
    ):
        self.self_id = self_id
        self.need_params = need_params
        self.config = config
        self._transport = transport

    @property
    def topic_id(self) -> str:
        """The need's own channel."""
        return self.need_params.id

    async def create_bid(self, bid_params: BidParams) -> Bid:
        """
        Open a reply topic for a bid and announce the bid on the need's topic.

        Raises:
            TopicCreationError: the transport could not create the reply topic.
                Nothing is published in that case.
            Exception: whatever the transport raised while publishing, unchanged.
        """
        topic_id = self._transport.generate_topic_id(bid_params.id)
        try:
            await self._transport.create_topic(topic_id, self.config)
        except Exception as e:
            logger.warning("Topic %s for bid %s not created: %s", topic_id, bid_params.id, e)
            raise TopicCreationError(e) from e

        await self._transport.send_params(self.topic_id, bid_params, self.config)
        logger.debug("Bid %s announced on %s (reply topic %s)", bid_params.id, self.topic_id, topic_id)
        return Bid(topic_id, bid_params, self.config)

    async def bids(self) -> EntityStream[BidParams, Bid]:
        """Subscribe to the bids delivered to this need's topic."""
        stream = await self._transport.params_stream(self.topic_id, self.config)
        return EntityStream(
            stream, BidParams, lambda params: Bid(self.self_id, params, self.config), self.topic_id,
        )

    async def send_message(self, message_params: MessageParams) -> None:
        """
        Deliver a message to the need's topic.

        ``message_params`` is published as given; it is not copied or
        re-tagged. ``self_id`` is the sender, so a ``sender_id`` naming
        another agent is rejected. Leave it unset or set it to ``self_id``.

        Raises:
            ValidationError: the need's topic is the sender's own channel, or
                ``message_params.sender_id`` is not ``self_id``.
        """
        if self.topic_id == self.self_id:
            raise ValidationError("You cannot send message to your own channel")
        sender_id = message_params.sender_id
        if sender_id is not None and sender_id != self.self_id:
            raise ValidationError(
                f"Message sender {sender_id!r} does not match agent {self.self_id!r}"
            )

        await self._transport.send_params(self.topic_id, message_params, self.config)
        logger.debug("Message from %s delivered to %s", self.self_id, self.topic_id)

    async def messages(self) -> EntityStream[MessageParams, Message]:
        """Subscribe to the messages delivered to this need's topic."""
        stream = await self._transport.params_stream(self.topic_id, self.config)
        return EntityStream(
            stream, MessageParams,
            lambda params: Message(self.self_id, params, self.config), self.topic_id,
        )

    def __repr__(self) -> str:
        return f"Need(self_id={self.self_id!r}, need_id={self.need_params.id!r})"
