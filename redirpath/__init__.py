"""redirpath: DOS/POSIX path adapter for remote-desktop device redirection."""

from redirpath.paths import (
    EmbeddedNulError,
    LengthUnit,
    PathAdapter,
    SourcePath,
    TargetPath,
    to_source_text,
    to_target_text,
)

__version__ = "0.1.0"

__all__ = [
    "EmbeddedNulError",
    "LengthUnit",
    "PathAdapter",
    "SourcePath",
    "TargetPath",
    "to_source_text",
    "to_target_text",
]
