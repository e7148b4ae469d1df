"""Path redaction for structured logging."""

from __future__ import annotations

import re
from pathlib import PurePath
from typing import Any, Dict, Optional, Set, Union


class PathRedactor:
    """Hide directory structure of paths in log data, keeping the final segment."""

    def __init__(self, enabled: bool = True, sensitive_fields: Optional[Set[str]] = None) -> None:
        """Initialize redactor.

        Args:
            enabled: When False, strings pass through unchanged (sensitive fields
                are still redacted)
            sensitive_fields: Additional field names to redact entirely
        """
        self.enabled = enabled

        # Either separator, so DOS and POSIX paths are both caught
        self.separator_pattern = re.compile(r"[/\\]")

        self.sensitive_fields = {
            'password', 'token', 'secret', 'key', 'auth', 'credential',
            'api_key', 'access_token', 'session_key',
        }
        if sensitive_fields:
            self.sensitive_fields.update(f.lower() for f in sensitive_fields)

    def redact_path(self, path: Union[str, PurePath]) -> str:
        """Redact a path while preserving its final segment.

        Args:
            path: DOS or POSIX path

        Returns:
            ``[REDACTED]/<last segment>`` for multi-segment paths, the input
            unchanged otherwise
        """
        path_str = str(path)
        if not self.enabled or not self.separator_pattern.search(path_str):
            return path_str
        last = self.separator_pattern.split(path_str)[-1]
        return f"[REDACTED]/{last}"

    def redact_dict(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Recursively redact paths and sensitive fields in a dictionary."""
        result: Dict[str, Any] = {}

        for key, value in data.items():
            if key.lower() in self.sensitive_fields:
                result[key] = "[REDACTED]"
                continue

            if isinstance(value, dict):
                result[key] = self.redact_dict(value)
            elif isinstance(value, list):
                result[key] = [
                    self.redact_dict(item) if isinstance(item, dict)
                    else self.redact_path(item) if isinstance(item, str)
                    else item
                    for item in value
                ]
            elif isinstance(value, (str, PurePath)):
                result[key] = self.redact_path(value)
            else:
                result[key] = value

        return result

    def add_sensitive_field(self, field_name: str) -> None:
        """Add field name to redact entirely (case-insensitive)."""
        self.sensitive_fields.add(field_name.lower())
