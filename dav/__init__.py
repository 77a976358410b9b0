"""
DAV SDK — request/offer messaging for a marketplace of autonomous agents.

Public API surface. Import everything you need from here::

    from dav import Need, NeedParams, BidParams, Price, DavConfig, create_transport

Extension points (implement these Protocols to customize):

- ``Transport`` — plug in your own pub/sub backend
"""

# -- Core orchestration --
from dav.core.need import EntityStream, Need

# -- Params and value entities --
from dav.core.enums import BlockchainType, ContractTypes, PriceType
from dav.core.models import Bid, Message
from dav.core.params import (
    BasicParams,
    BidParams,
    MessageParams,
    NeedParams,
    Price,
)

# -- Errors --
from dav.core.errors import (
    CodecError,
    ConfigError,
    DavError,
    TopicCreationError,
    TransportError,
    ValidationError,
)

# -- Protocols (contracts for extension) --
from dav.core.protocols import Transport

# -- Configuration and default implementations --
from dav.infra.config import DavConfig
from dav.infra.factory import create_transport
from dav.infra.memory_transport import InMemoryTransport
from dav.infra.redis_transport import RedisTransport
from dav.log import setup_logging

__version__ = "0.1.0"

__all__ = [
    # Core
    "Need",
    "EntityStream",
    # Params / entities
    "BasicParams",
    "NeedParams",
    "BidParams",
    "MessageParams",
    "Price",
    "PriceType",
    "BlockchainType",
    "ContractTypes",
    "Bid",
    "Message",
    # Errors
    "DavError",
    "ValidationError",
    "TopicCreationError",
    "TransportError",
    "CodecError",
    "ConfigError",
    # Protocols
    "Transport",
    # Config / implementations
    "DavConfig",
    "create_transport",
    "InMemoryTransport",
    "RedisTransport",
    "setup_logging",
]
