import os
from typing import List

from dotenv import load_dotenv

DEFAULT_MATERIAL = "PLA"
DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8080


def load_env() -> None:
    """Load environment variables from a local .env file (if present)."""
    load_dotenv()


def get_default_material() -> str:
    """Material used when a request does not name one."""
    return (os.getenv("WEIGHTBUDDY_DEFAULT_MATERIAL") or DEFAULT_MATERIAL).strip().upper()


def get_api_host() -> str:
    return os.getenv("WEIGHTBUDDY_API_HOST") or DEFAULT_API_HOST


def get_api_port() -> int:
    raw = os.getenv("WEIGHTBUDDY_API_PORT")
    try:
        return int(raw) if raw else DEFAULT_API_PORT
    except ValueError:
        return DEFAULT_API_PORT


def get_cors_origins() -> List[str]:
    """Comma separated WEIGHTBUDDY_CORS_ORIGINS; '*' (any origin) by default."""
    raw = os.getenv("WEIGHTBUDDY_CORS_ORIGINS") or "*"
    return [o.strip() for o in raw.split(",") if o.strip()]


def get_log_level() -> str:
    return (os.getenv("WEIGHTBUDDY_LOG_LEVEL") or "INFO").strip().upper()
