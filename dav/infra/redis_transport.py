"""
RedisTransport — topics as Redis streams.

Each topic is one stream at ``<topic_prefix><topic_id>``; created topics
are also registered in the ``<topic_prefix>topics`` set. Subscribers read
with blocking XREAD starting after the last record present when they
subscribed, so they only see new records.

Dependencies:
    pip install redis[hiredis]>=5.0.0
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Optional

import redis.asyncio as redis
from redis.exceptions import RedisError

from dav.core.errors import CodecError, TransportError
from dav.core.params import BasicParams

from .codec import decode_params, encode_params
from .config import DavConfig
from .memory_transport import generate_topic_id

logger = logging.getLogger(__name__)

_PARAMS_FIELD = "params"


class RedisTransport:
    """
    Transport implementation on redis-py's asyncio client.

    Args:
        redis_url: Redis connection URL, e.g. redis://localhost:6379/0
        client: An already-built ``redis.asyncio.Redis``. Takes precedence
            over ``redis_url``.
        read_count: Max records fetched per XREAD.
        max_connections: Connection pool size.

    Example:
        transport = RedisTransport("redis://localhost:6379/0")
        need = Need(self_id, need_params, config, transport)
        ...
        await transport.close()
    """

    def __init__(
        self,
        redis_url: str = "redis://localhost:6379/0",
        client: Optional[Any] = None,
        read_count: int = 100,
        max_connections: int = 10,
    ):
        self._redis_url = redis_url
        self._client = client
        self._read_count = read_count
        self._max_connections = max_connections

    @classmethod
    def from_config(cls, config: DavConfig) -> RedisTransport:
        return cls(redis_url=config.redis_url)

    def _get_client(self) -> Any:
        if self._client is None:
            self._client = redis.from_url(
                self._redis_url,
                encoding="utf-8",
                decode_responses=True,
                max_connections=self._max_connections,
            )
            logger.info("Redis client created: %s", self._mask_url(self._redis_url))
        return self._client

    def _mask_url(self, url: str) -> str:
        # redis://:password@host -> redis://:***@host
        if "@" in url:
            prefix, host = url.rsplit("@", 1)
            scheme_and_auth = prefix.rsplit(":", 1)
            if len(scheme_and_auth) == 2 and not scheme_and_auth[1].startswith("//"):
                return f"{scheme_and_auth[0]}:***@{host}"
        return url

    def generate_topic_id(self, entity_id: str) -> str:
        return generate_topic_id(entity_id)

    async def create_topic(self, topic_id: str, config: DavConfig) -> None:
        try:
            await self._get_client().sadd(config.topic_key("topics"), topic_id)
        except RedisError as e:
            raise TransportError(f"Redis create_topic failed for {topic_id}: {e}") from e
        logger.info("Topic created: %s", config.topic_key(topic_id))

    async def send_params(
        self,
        topic_id: str,
        params: BasicParams,
        config: DavConfig,
    ) -> None:
        key = config.topic_key(topic_id)
        try:
            entry_id = await self._get_client().xadd(key, {_PARAMS_FIELD: encode_params(params)})
        except RedisError as e:
            raise TransportError(f"Redis publish to {key} failed: {e}") from e
        logger.debug("Published %s to %s (%s)", params.params_type, key, entry_id)

    async def params_stream(
        self,
        topic_id: str,
        config: DavConfig,
    ) -> AsyncIterator[BasicParams]:
        key = config.topic_key(topic_id)
        try:
            latest = await self._get_client().xrevrange(key, count=1)
        except RedisError as e:
            raise TransportError(f"Redis subscribe to {key} failed: {e}") from e
        last_id = latest[0][0] if latest else "0-0"
        logger.debug("Subscribed to %s after %s", key, last_id)
        return self._read(key, last_id, config.stream_block_ms)

    async def _read(self, key: str, last_id: str, block_ms: int) -> AsyncIterator[BasicParams]:
        client = self._get_client()
        while True:
            try:
                response = await client.xread({key: last_id}, count=self._read_count, block=block_ms)
            except RedisError as e:
                raise TransportError(f"Redis read from {key} failed: {e}") from e

            if isinstance(response, dict):  # RESP3: {key: [[(id, fields), ...]]}
                response = [(k, v[0]) for k, v in response.items()]
            for _stream, entries in response or []:
                for entry_id, fields in entries:
                    last_id = entry_id
                    raw = fields.get(_PARAMS_FIELD)
                    if raw is None:
                        raise CodecError(f"Entry {entry_id} on {key} has no params field")
                    yield decode_params(raw)

    async def close(self) -> None:
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("Redis client closed")
