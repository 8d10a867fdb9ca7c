from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_BASE_URL = "https://jsonplaceholder.typicode.com"


class ConfigError(ValueError):
    pass


@dataclass(frozen=True)
class ClientConfig:
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 10.0
    verify_ssl: bool = True
    lang: str = "en"
    log_level: str = "INFO"


def _coerce_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "t", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "f", "no", "n", "off"}:
        return False
    return default


def _read_float(name: str, default: str) -> float:
    raw = os.getenv(name, default)
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"Invalid {name}: expected a number, got {raw!r}") from exc


def _validate(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigError(message)


def _normalize_base_url(value: str) -> str:
    normalized = value.strip().rstrip("/")
    return normalized or DEFAULT_BASE_URL


def load_config(env_file: str | None = None) -> ClientConfig:
    """Load config from environment with optional .env override."""
    load_dotenv(env_file)

    base_url = _normalize_base_url(os.getenv("USER_DASHBOARD_BASE_URL", DEFAULT_BASE_URL))
    _validate(
        base_url.startswith(("http://", "https://")),
        f"Invalid USER_DASHBOARD_BASE_URL: expected an http(s) URL, got {base_url!r}",
    )

    timeout_seconds = _read_float("USER_DASHBOARD_TIMEOUT_SECONDS", "10")
    _validate(
        timeout_seconds > 0,
        f"Invalid USER_DASHBOARD_TIMEOUT_SECONDS: expected > 0, got {timeout_seconds}",
    )

    verify_ssl = _coerce_bool(os.getenv("USER_DASHBOARD_VERIFY_SSL"), True)

    # Unknown tags are kept; the dictionary lookup falls back to English.
    lang = (os.getenv("USER_DASHBOARD_LANG") or "en").strip().lower() or "en"

    log_level = (os.getenv("USER_DASHBOARD_LOG_LEVEL") or "INFO").strip().upper()
    _validate(
        log_level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"},
        f"Invalid USER_DASHBOARD_LOG_LEVEL: got {log_level!r}",
    )

    return ClientConfig(
        base_url=base_url,
        timeout_seconds=timeout_seconds,
        verify_ssl=verify_ssl,
        lang=lang,
        log_level=log_level,
    )
