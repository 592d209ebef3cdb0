"""Logging setup shared by the server and the webhook routers."""

from __future__ import annotations

import logging

# Parent of normalizer.server, normalizer.webhooks, ...
ROOT_LOGGER = "normalizer"

logger = logging.getLogger(f"{ROOT_LOGGER}.server")


def configure_logging(level: str = "INFO") -> None:
    """Install a timestamped root handler once and set the project log level.

    `level` comes from `Settings.log_level`; unknown names fall back to INFO.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.getLogger(ROOT_LOGGER).setLevel(numeric_level)

    if logging.getLogger().handlers:
        return
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    # Per-request access lines are noise next to the webhook summaries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
