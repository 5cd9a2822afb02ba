# UI/config.py
# Settings are read once at import; .env is honoured the same way the backend did.
import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger("hrms")

DEFAULT_BACKEND_URL = "http://localhost:8000"


def _optional_float(name: str) -> Optional[float]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r, expected a number of seconds", name, raw)
        return None


class Settings:
    # BACKEND_URL wins; VITE_BACKEND_URL is still accepted for older .env files
    BACKEND_URL: str = os.getenv("BACKEND_URL") or os.getenv("VITE_BACKEND_URL") or DEFAULT_BACKEND_URL
    # unset means requests wait forever (single attempt, no retry)
    BACKEND_TIMEOUT: Optional[float] = _optional_float("BACKEND_TIMEOUT")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# module-level settings object (imported elsewhere as `from UI.config import settings`)
settings = Settings()
