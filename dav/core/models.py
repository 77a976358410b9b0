"""
Value entities produced by a Need.

A Bid or Message binds a params record to the topic it was (or will be)
exchanged over, together with the configuration it was created under.
Both are immutable and compare by value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .params import BidParams, MessageParams

if TYPE_CHECKING:
    from dav.infra.config import DavConfig


@dataclass(frozen=True)
class Bid:
    """An offer anchored to a topic."""
    topic_id: str
    bid_params: BidParams
    config: DavConfig


@dataclass(frozen=True)
class Message:
    """A point-to-point record anchored to the recipient's topic."""
    topic_id: str
    message_params: MessageParams
    config: DavConfig

    # Equality only: payload is an arbitrary dict.
    __hash__ = None  # type: ignore[assignment]

    @property
    def sender_id(self) -> str | None:
        return self.message_params.sender_id
