# UI/logging_config.py
import logging

from UI.config import settings


def setup_logging(level=None):
    logging.basicConfig(
        level=level or settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
    )
