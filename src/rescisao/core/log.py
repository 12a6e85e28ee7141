"""Logging setup driven by AppSettings.log_level."""

from __future__ import annotations

import logging

from rescisao.core.config import AppSettings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: AppSettings | None = None) -> None:
    """Configure the root logger once for scripts and host applications."""
    if settings is None:
        settings = AppSettings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("rescisao").setLevel(level)
