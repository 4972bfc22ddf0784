from __future__ import annotations

import logging
import sys

from notetagger.config import settings


def setup_logging(level: str | None = None) -> None:
    """Configure root logging once for the service."""

    resolved = getattr(logging, (level or settings.log_level).upper(), logging.INFO)
    logging.basicConfig(
        level=resolved,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout
    )

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING if not settings.debug else logging.INFO)
    logging.getLogger("notetagger").setLevel(logging.DEBUG if settings.debug else resolved)

    logging.info("Logging configured", extra={"level": logging.getLevelName(resolved)})


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger instance."""
    return logging.getLogger(name)
