from __future__ import annotations

import logging

from .config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(settings: Settings) -> None:
    level = logging.DEBUG if settings.is_local else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("greetings").setLevel(level)
