"""Core protocol layer — Need orchestration, params, value entities, errors."""

from .enums import BlockchainType, ContractTypes, PriceType
from .errors import (
    DavError,
    ValidationError,
    TopicCreationError,
    TransportError,
    CodecError,
    ConfigError,
)
from .models import Bid, Message
from .need import EntityStream, Need
from .params import (
    BasicParams,
    BidParams,
    MessageParams,
    NeedParams,
    Price,
    generate_id,
    params_class,
)
from .protocols import Transport

__all__ = [
    "BlockchainType", "ContractTypes", "PriceType",
    "DavError", "ValidationError", "TopicCreationError",
    "TransportError", "CodecError", "ConfigError",
    "Bid", "Message", "Need", "EntityStream",
    "BasicParams", "BidParams", "MessageParams", "NeedParams", "Price",
    "generate_id", "params_class",
    "Transport",
]
