"""Structured logging for redirpath."""

from .redaction import PathRedactor
from .structured import LogLevel, StructuredLogger, create_logger

__all__ = [
    "StructuredLogger",
    "LogLevel",
    "create_logger",
    "PathRedactor",
]
