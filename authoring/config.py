"""Application configuration and constants."""
import os
from pathlib import Path


def _parse_int_env(name: str, default: int) -> int:
    """Parse integer from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_bool_env(name: str, default: bool) -> bool:
    """Parse boolean flag from environment variable."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# Database
DB_DIR = Path(os.environ.get("AUTHORING_DB_DIR", Path.cwd() / "data"))
DB_DIR.mkdir(parents=True, exist_ok=True)
DATABASE_URL = os.environ.get(
    "DATABASE_URL", f"sqlite:///{DB_DIR / 'authoring.db'}"
)

# Wizard sessions
WIZARD_SESSION_TTL_MINUTES = _parse_int_env("WIZARD_SESSION_TTL_MINUTES", 120)
WIZARD_SESSION_CLEANUP_INTERVAL_SECONDS = _parse_int_env(
    "WIZARD_SESSION_CLEANUP_INTERVAL_SECONDS", 10 * 60
)

# Re-validate persisted type identifiers against the current catalog
STRICT_TYPE_DECODE = _parse_bool_env("STRICT_TYPE_DECODE", False)

# CORS
CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]
