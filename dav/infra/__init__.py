from .codec import decode_params, encode_params
from .config import DavConfig
from .factory import create_transport
from .memory_transport import InMemoryTransport, generate_topic_id
from .redis_transport import RedisTransport

__all__ = [
    "DavConfig", "InMemoryTransport", "RedisTransport",
    "create_transport", "decode_params", "encode_params", "generate_topic_id",
]
