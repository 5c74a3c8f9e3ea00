"""
Clock, logging and HTTP settings, read lazily from the environment.
Nothing here is persisted; every value is resolved at call time.
"""
import os
import logging
from datetime import date, datetime
from pathlib import Path

logger = logging.getLogger(__name__)

# backend/pantry/config.py -> parent=pantry, parent.parent=backend
_BACKEND_DIR = Path(__file__).resolve().parent.parent

# Fixed wire/display pattern for expiration dates (yyyy-MM-dd)
DATE_FORMAT = "%Y-%m-%d"


def get_env_path() -> Path:
    return _BACKEND_DIR / ".env"


# --- Logging ---
def get_log_level() -> str:
    return os.environ.get("PANTRY_LOG_LEVEL", "INFO").strip().upper() or "INFO"


# --- Clock ---
def get_today_override() -> str:
    return os.environ.get("PANTRY_TODAY", "").strip()


def today() -> date:
    """Current date for expiration checks. PANTRY_TODAY pins it when set."""
    raw = get_today_override()
    if raw:
        try:
            return datetime.strptime(raw, DATE_FORMAT).date()
        except ValueError:
            logger.warning("CONFIG ignoring unparseable PANTRY_TODAY=%s", raw)
    return date.today()


# --- HTTP ---
def get_cors_origins() -> list[str]:
    raw = os.environ.get("PANTRY_CORS_ORIGINS", "*")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


# --- Startup logging ---
def log_config() -> None:
    logger.info(
        "CONFIG: log_level=%s today=%s today_pinned=%s cors_origins=%s env_file=%s",
        get_log_level(),
        today().isoformat(),
        bool(get_today_override()),
        get_cors_origins(),
        get_env_path().exists(),
    )
