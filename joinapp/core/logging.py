"""
Logging setup - stdlib logging configured once from settings.
"""

import logging

from joinapp.config import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> None:
    """Set root level and format. Debug mode forces DEBUG."""
    level = logging.DEBUG if settings.debug else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("joinapp").setLevel(level)
