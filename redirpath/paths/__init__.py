"""Path values and conversions for the redirection/host boundary."""

from ._types import SourcePath, TargetPath
from .adapter import PathAdapter
from .convert import is_restricted_dos_path, to_source_text, to_target_text
from .errors import EmbeddedNulError
from .units import LengthUnit, count_units

__all__ = [
    "SourcePath",
    "TargetPath",
    "PathAdapter",
    "EmbeddedNulError",
    "LengthUnit",
    "count_units",
    "is_restricted_dos_path",
    "to_source_text",
    "to_target_text",
]
