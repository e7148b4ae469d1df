from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from redirpath import config

from .convert import split_segments, to_source_text, to_target_text
from .errors import EmbeddedNulError
from .units import LengthUnit, count_units


def _unit_or_default(unit: Optional[Union[LengthUnit, str]]) -> Union[LengthUnit, str]:
    return config.settings.length_unit if unit is None else unit


@dataclass(frozen=True, slots=True)
class SourcePath:
    """
    A DOS-style path as received from the device-redirection channel.

    Wraps the text verbatim; nothing is validated. Only the restricted DOS
    subset (optional single leading backslash, no drive letter, no UNC
    prefix) converts to a meaningful ``TargetPath``.
    """
    text: str

    def length(self, unit: Optional[Union[LengthUnit, str]] = None) -> int:
        """Length in protocol units (defaults to ``RP_LENGTH_UNIT``)."""
        return count_units(self.text, _unit_or_default(unit))

    def to_target(self) -> "TargetPath":
        return TargetPath.from_source(self)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class TargetPath:
    """
    A POSIX-style path relative to the host's shared root.

    Build one from raw host text with ``TargetPath(text)`` or from a
    redirection path with ``TargetPath.from_source``.
    """
    text: str

    @classmethod
    def from_source(cls, source: SourcePath) -> "TargetPath":
        return cls(to_target_text(source.text))

    def length(self, unit: Optional[Union[LengthUnit, str]] = None) -> int:
        """Length in protocol units (defaults to ``RP_LENGTH_UNIT``)."""
        return count_units(self.text, _unit_or_default(unit))

    def segments(self) -> list[str]:
        return split_segments(self.text)

    def last_segment(self) -> str:
        """Return the text after the last ``/``, or the whole text if there is none.

        This is a naive split: ``"a/"`` yields ``""``, not ``"a"``.
        """
        return self.segments()[-1]

    def to_null_terminated(self) -> bytes:
        """Return the UTF-8 text followed by a single NUL byte.

        Lone surrogates are encoded with ``surrogatepass``, matching
        ``length("utf-8")``. Names decoded with ``os.fsdecode`` or
        ``surrogateescape`` do not map back to their original bytes; the host
        layer must pass decoded text, not surrogate-escaped bytes.

        Raises:
            EmbeddedNulError: If the text itself contains a NUL
        """
        position = self.text.find("\x00")
        if position != -1:
            raise EmbeddedNulError(self.text, position)
        return self.text.encode("utf-8", "surrogatepass") + b"\x00"

    def to_source(self) -> SourcePath:
        return SourcePath(to_source_text(self.text))

    def __fspath__(self) -> str:
        # Allows os.fspath(tp) and path-accepting APIs to consume it directly.
        return self.text

    def __str__(self) -> str:
        return self.text
