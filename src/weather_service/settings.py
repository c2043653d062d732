"""
Runtime settings read from the environment.

Values are looked up on every call so a `.env` loaded by `load_dotenv()` or a
test's `monkeypatch.setenv` takes effect without re-importing anything.
"""

from __future__ import annotations

import os
from pathlib import Path

DEFAULT_WEB_ROOT = Path(__file__).resolve().parent / "static"

# Extension -> content type, applied on top of the `mimetypes` guess.
STATIC_CONTENT_TYPES = {
    ".yml": "application/x-yaml",
    ".yaml": "application/x-yaml",
}

API_DESCRIPTION_PATH = "/weather-service.yaml"


def host() -> str:
    return os.getenv("WEATHER_SERVICE_HOST", "127.0.0.1").strip() or "127.0.0.1"


def port() -> int:
    raw = os.getenv("WEATHER_SERVICE_PORT", "").strip()
    if not raw:
        return 8000
    try:
        return int(raw)
    except ValueError as exc:
        raise RuntimeError(f"WEATHER_SERVICE_PORT must be an integer, got {raw!r}") from exc


def reload_enabled() -> bool:
    return os.getenv("WEATHER_SERVICE_RELOAD", "false").strip().lower() in {"1", "true", "yes"}


def web_root() -> Path:
    raw = os.getenv("WEATHER_SERVICE_WEB_ROOT", "").strip()
    return Path(raw) if raw else DEFAULT_WEB_ROOT
