"""redirpath config defaults.

No side effects on import. Values can be overridden via RP_* env vars.
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _env(name: str, default: str) -> str:
    if not name.startswith("RP_"):
        raise ValueError(f"Only RP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_bool(name: str, default: bool) -> bool:
    raw = _env(name, str(default))
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = _env(name, str(default))
    try:
        return int(raw)
    except Exception:
        return default


def _env_optional_int(name: str) -> int | None:
    raw = _env(name, "")
    if not raw.strip():
        return None
    try:
        return int(raw)
    except Exception:
        return None


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    """Get a lower-cased env value, falling back to ``default`` if not in ``choices``."""
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


LENGTH_UNITS = ("utf-8", "utf-16")


@dataclass(frozen=True)
class PathDefaults:
    # Unit used by the redirection protocol's length fields
    length_unit: str = _env_choice("RP_LENGTH_UNIT", "utf-8", LENGTH_UNITS)
    warn_unrestricted: bool = _env_bool("RP_WARN_UNRESTRICTED", True)


@dataclass(frozen=True)
class LogDefaults:
    log_dir: str | None = _env("RP_LOG_DIR", "") or None
    console: bool = _env_bool("RP_LOG_CONSOLE", False)
    full_paths: bool = _env_bool("RP_LOG_FULL_PATHS", False)
    max_size_mb: int | None = _env_optional_int("RP_LOG_MAX_SIZE_MB")
    max_files: int = _env_int("RP_LOG_MAX_FILES", 5)


PATHS = PathDefaults()
LOG = LogDefaults()
