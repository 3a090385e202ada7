from __future__ import annotations

import logging

from app.core.settings import Settings

# SDK loggers that are chatty at INFO (one line per outbound request).
_NOISY_LOGGERS = ("httpx", "httpcore", "google_genai")


def configure_logging(settings: Settings) -> int:
    level_name = (settings.log_level or "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    logging.getLogger("uvicorn.error").setLevel(level)
    logging.getLogger("uvicorn.access").setLevel(level)

    sdk_level = level if level <= logging.DEBUG else logging.WARNING
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)

    return level
