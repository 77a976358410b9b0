"""
Configuration management using pydantic-settings.

All DAV settings are loaded from environment variables with the DAV_
prefix. The config is frozen: it is passed by value to every transport call
and embedded in every Bid and Message.
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from dav.core.enums import BlockchainType


class DavConfig(BaseSettings):
    """
    DAV SDK configuration.

    Environment variables are prefixed with DAV_, e.g.:
    - DAV_TRANSPORT=redis
    - DAV_REDIS_URL=redis://localhost:6379/0
    - DAV_BLOCKCHAIN_TYPE=ropsten
    """

    model_config = SettingsConfigDict(env_prefix="DAV_", frozen=True)

    # Transport
    transport: Literal["memory", "redis"] = "memory"
    redis_url: str = "redis://localhost:6379/0"
    topic_prefix: str = "dav:"
    stream_block_ms: int = Field(default=5000, ge=0)
    kafka_seed_urls: tuple[str, ...] = ("localhost:9092",)
    kafka_session_timeout: int = 30000  # ms

    # Network
    api_seed_urls: tuple[str, ...] = ("http://localhost",)
    eth_node_url: str = "http://localhost:8545"
    blockchain_type: BlockchainType = BlockchainType.LOCAL

    # Logging
    log_level: str = "INFO"

    def topic_key(self, topic_id: str) -> str:
        """Return the broker key of a topic."""
        return f"{self.topic_prefix}{topic_id}"
