"""
Logging configuration.

Sets up the root logger once at application startup.
"""

import logging
from typing import Optional

from event_booking.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging from settings.LOG_LEVEL (or an explicit level)."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)

    # SQL echo is noisy outside debug mode
    if not settings.DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
