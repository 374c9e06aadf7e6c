"""Logging setup for the CLI and scripts: one stderr handler, installed once."""

from __future__ import annotations

import logging

from siteid.config import load_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | int | None = None) -> None:
    """
    Install a stderr handler on the root logger unless the host application
    already configured logging. Always applies the requested level (default:
    SITEID_LOG_LEVEL) to the `siteid` logger.
    """
    lvl = level if level is not None else load_settings().log_level
    if isinstance(lvl, str):
        lvl = logging.getLevelName(lvl.upper())
        if not isinstance(lvl, int):
            lvl = logging.WARNING

    if not logging.getLogger().handlers:
        logging.basicConfig(level=lvl, format=LOG_FORMAT)
    logging.getLogger("siteid").setLevel(lvl)


__all__ = ["LOG_FORMAT", "configure_logging"]
