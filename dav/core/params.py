"""
Params — the inert records published to and streamed from topics.

Every params class is a frozen pydantic model tagged with a ``params_type``.
Concrete subclasses register themselves so the wire codec can turn a tagged
record back into the right class.
"""

from __future__ import annotations

import uuid
from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import PriceType


def generate_id(prefix: str = "") -> str:
    """Generate a unique ID with optional prefix."""
    uid = uuid.uuid4().hex[:12]
    return f"{prefix}_{uid}" if prefix else uid


_PARAMS_TYPES: dict[str, type[BasicParams]] = {}


class Price(BaseModel):
    """Amount and pricing model of an offered service."""

    model_config = ConfigDict(frozen=True)

    value: str
    type: PriceType = PriceType.FLAT
    description: Optional[str] = None


class BasicParams(BaseModel):
    """Base class of every params record carried by the transport."""

    model_config = ConfigDict(frozen=True)

    params_type: ClassVar[str] = ""

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        if cls.params_type:
            _PARAMS_TYPES[cls.params_type] = cls


def params_class(params_type: str) -> type[BasicParams] | None:
    """Look up the params class registered under ``params_type``."""
    return _PARAMS_TYPES.get(params_type)


class NeedParams(BasicParams):
    """Identifies a request. ``id`` doubles as the key of the need's own topic."""

    params_type: ClassVar[str] = "need"

    id: str = Field(default_factory=lambda: generate_id("need"))
    location: Optional[dict[str, float]] = None
    description: Optional[str] = None


class BidParams(BasicParams):
    """An offer made in response to a need."""

    params_type: ClassVar[str] = "bid"

    id: str = Field(default_factory=lambda: generate_id("bid"))
    price: Price
    eta: Optional[int] = None  # seconds
    description: Optional[str] = None


class MessageParams(BasicParams):
    """A free-form point-to-point record."""

    params_type: ClassVar[str] = "message"

    sender_id: Optional[str] = None
    payload: dict[str, Any] = Field(default_factory=dict)
