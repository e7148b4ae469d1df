"""redirpath centralized configuration.

All settings are backed by environment variables following the RP_* naming
convention.

Example:
    >>> from redirpath.config import settings
    >>> settings.length_unit
    'utf-8'

Environment Variables:
    RP_LENGTH_UNIT: Unit counted by ``length()`` ("utf-8" bytes or "utf-16" code units)
    RP_WARN_UNRESTRICTED: Warn when a DOS path has a drive or UNC prefix (default: true)
    RP_LOG_FULL_PATHS: Log complete paths instead of redacting to the last segment
    RP_LOG_DIR: Directory for JSON-lines log files (default: unset, no file output)
    RP_LOG_CONSOLE: Echo structured log lines to stdout (default: false)
    RP_LOG_MAX_SIZE_MB: Rotate the log file once it exceeds this size
    RP_LOG_MAX_FILES: Number of rotated log files to keep (default: 5)
"""

from __future__ import annotations

from dataclasses import dataclass

from redirpath.config.defaults import LOG, PATHS, LENGTH_UNITS


@dataclass(frozen=True)
class Settings:
    """Runtime settings for redirpath.

    Frozen to prevent accidental mutation at runtime. For testing, override
    environment variables and reload ``redirpath.config.defaults`` and this
    module, or monkeypatch the module-level ``settings`` instance.
    """

    length_unit: str = PATHS.length_unit
    warn_unrestricted: bool = PATHS.warn_unrestricted


settings = Settings()

__all__ = [
    "settings",
    "Settings",
    "LENGTH_UNITS",
    "LOG",
    "PATHS",
]
