"""Process-wide logging setup for agents built on the SDK."""

from __future__ import annotations

import logging
from typing import Optional

from dav.infra.config import DavConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(config: Optional[DavConfig] = None) -> None:
    """Configure root logging at ``config.log_level``."""
    config = config or DavConfig()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )
