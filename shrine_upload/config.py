import os
from pathlib import Path

from dotenv import load_dotenv


_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(_ENV_PATH, override=False)

_TRUTHY = {"1", "true", "yes", "on"}


def _get_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def get_base_url() -> str | None:
    """Return the application origin that hosts the signing endpoint.

    No default: callers either set SHRINE_UPLOAD_BASE_URL or pass base_url explicitly.
    """
    return _get_env("SHRINE_UPLOAD_BASE_URL")


def get_timeout() -> float | None:
    raw = _get_env("SHRINE_UPLOAD_TIMEOUT")
    if raw is None:
        return None
    try:
        parsed = float(raw)
    except ValueError:
        return None
    if parsed <= 0:
        return None
    return parsed


def get_apply_headers() -> bool:
    raw = _get_env("SHRINE_UPLOAD_APPLY_HEADERS")
    return bool(raw) and raw.lower() in _TRUTHY
