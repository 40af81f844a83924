from __future__ import annotations

import logging

from .config import LoggingSettings


def configure_logging(settings: LoggingSettings, *, verbose: bool = False) -> None:
    """Apply LoggingSettings to the root logger; ``verbose`` forces DEBUG."""
    level = logging.DEBUG if verbose else getattr(logging, settings.level)
    logging.basicConfig(level=level, format=settings.format, force=True)


__all__ = ["configure_logging"]
