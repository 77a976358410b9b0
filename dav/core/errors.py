"""
Unified exception hierarchy for the DAV SDK.

All exceptions inherit from DavError. The Need orchestration adds context
only when topic creation fails; every other transport failure reaches the
caller unchanged.
"""

from __future__ import annotations


class DavError(Exception):
    """Base exception for all DAV SDK errors."""
    pass


class ValidationError(DavError):
    """A call was rejected before any transport operation was issued."""
    pass


class TopicCreationError(DavError):
    """The transport failed to create a topic for a new bid."""

    def __init__(self, cause: BaseException):
        super().__init__(f"Fail to create a topic: {cause}")
        self.cause = cause


class TransportError(DavError):
    """Publish or subscribe failure inside a transport (broker unreachable, etc.)."""
    pass


class CodecError(DavError):
    """A wire record could not be decoded into params."""
    pass


class ConfigError(DavError):
    """Configuration error (unknown transport, invalid value, etc.)."""
    pass
