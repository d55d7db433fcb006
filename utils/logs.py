# Logging setup shared by the CLI and anything else that runs the store.

from __future__ import annotations
import logging
from typing import Optional

from utils.config import CONFIG

_configured = False


def configure_logging(level: Optional[str] = None) -> None:
    """Install the CONFIG log format once; every call (re)applies the level."""
    global _configured
    if not _configured:
        # No-op if the root logger already has handlers (e.g. under pytest)
        logging.basicConfig(format=CONFIG["logging"]["format"])
        _configured = True
    logging.getLogger().setLevel((level or CONFIG["logging"]["level"]).upper())
