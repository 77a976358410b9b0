"""Transport selection from configuration."""

from __future__ import annotations

import logging

from dav.core.errors import ConfigError
from dav.core.protocols import Transport

from .config import DavConfig
from .memory_transport import InMemoryTransport
from .redis_transport import RedisTransport

logger = logging.getLogger(__name__)


def create_transport(config: DavConfig) -> Transport:
    """Build the transport named by ``config.transport``."""
    if config.transport == "memory":
        transport: Transport = InMemoryTransport()
    elif config.transport == "redis":
        transport = RedisTransport.from_config(config)
    else:
        raise ConfigError(f"Unknown transport: {config.transport}")
    logger.info("Using %s transport", config.transport)
    return transport
