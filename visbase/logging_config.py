"""Logging setup for applications embedding visbase.

The library itself only creates module loggers; call ``configure_logging``
from the producer or visualiser entry point.
"""

from __future__ import annotations

import logging

from visbase.config import settings

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    resolved = getattr(logging, (level or settings.visbase_log_level).upper(), logging.INFO)
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("visbase").setLevel(resolved)
