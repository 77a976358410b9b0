"""
Wire codec — params records to JSON and back.

Records travel as ``{"type": <params_type>, "params": {...}}`` so a reader
can rebuild the right params class without knowing the topic's contents.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from dav.core.errors import CodecError
from dav.core.params import BasicParams, params_class


def encode_params(params: BasicParams) -> str:
    """Serialize a params record to its JSON wire form."""
    if not params.params_type:
        raise CodecError(f"{type(params).__name__} has no params_type")
    return json.dumps(
        {"type": params.params_type, "params": params.model_dump(mode="json")},
        ensure_ascii=False,
    )


def decode_params(raw: str | bytes) -> BasicParams:
    """Rebuild a params record from its JSON wire form."""
    try:
        data: Any = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise CodecError(f"Malformed params record: {e}") from e

    if not isinstance(data, dict) or "type" not in data:
        raise CodecError("Params record has no type tag")

    cls = params_class(data["type"])
    if cls is None:
        raise CodecError(f"Unknown params type: {data['type']}")

    try:
        return cls.model_validate(data.get("params") or {})
    except PydanticValidationError as e:
        raise CodecError(f"Invalid {data['type']} params: {e}") from e
