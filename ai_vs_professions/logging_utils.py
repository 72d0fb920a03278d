"""Logging helpers for the web service."""

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

_CONFIGURED = False


def setup_logging(log_path: Path | None = None) -> None:
    """Configure root logging once from `LOG_LEVEL` (and optional `LOG_FILE`)."""
    global _CONFIGURED
    if _CONFIGURED:
        return

    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s")

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if log_path is None and os.environ.get("LOG_FILE"):
        log_path = Path(os.environ["LOG_FILE"])
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                log_path,
                maxBytes=5 * 1024 * 1024,
                backupCount=3,
                encoding="utf-8",
            )
        )

    root = logging.getLogger()
    root.setLevel(level)
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    # Request-level chatter from the HTTP stack stays at WARNING.
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _CONFIGURED = True
