"""
Service settings.
Precedence: environment variable > default.

Usage:
    from config import get_settings
    settings = get_settings()
    print(settings.port)  # 8973
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Settings:
    """Service settings (immutable)"""

    host: str = "0.0.0.0"
    port: int = 8973

    log_level: str = "INFO"
    log_format: str = "text"  # "text" | "json"

    mcp_enabled: bool = True


def _to_bool(value: str) -> bool:
    v = value.strip().lower()
    if v in ("1", "true", "yes", "on"):
        return True
    if v in ("0", "false", "no", "off"):
        return False
    raise ValueError(f"not a boolean: {value}")


def _to_log_format(value: str) -> str:
    v = value.strip().lower()
    if v not in ("text", "json"):
        raise ValueError(f"unknown log format: {value}")
    return v


# env name -> (field name, converter)
_ENV_MAP = {
    "CHROMA_HOST": ("host", str),
    "CHROMA_PORT": ("port", int),
    "CHROMA_LOG_LEVEL": ("log_level", lambda v: v.strip().upper()),
    "CHROMA_LOG_FORMAT": ("log_format", _to_log_format),
    "CHROMA_MCP_ENABLED": ("mcp_enabled", _to_bool),
}


def load_settings() -> Settings:
    """Load settings from the environment, ignoring values that fail conversion"""
    overrides = {}
    for env_name, (field_name, converter) in _ENV_MAP.items():
        env_val = os.environ.get(env_name)
        if env_val is None:
            continue
        try:
            overrides[field_name] = converter(env_val)
        except (ValueError, TypeError):
            pass
    return Settings(**overrides)


_cached_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the settings singleton (loaded on first call)"""
    global _cached_settings
    if _cached_settings is None:
        _cached_settings = load_settings()
    return _cached_settings


def reset_settings() -> None:
    """Clear the settings cache (for tests)"""
    global _cached_settings
    _cached_settings = None
