"""Length-unit counting for redirection protocol length fields.

The redirection protocol sizes its path fields in encoded units, not
characters: a UTF-8 byte count or a count of UTF-16 code units. Counting
uses ``surrogatepass`` so every ``str`` has a length, including ones holding
lone surrogates decoded from malformed UTF-16.
"""

from __future__ import annotations

from enum import Enum
from typing import Union


class LengthUnit(Enum):
    """Units a protocol length field may be expressed in."""

    UTF8 = "utf-8"
    UTF16 = "utf-16"

    @classmethod
    def parse(cls, value: Union["LengthUnit", str]) -> "LengthUnit":
        if isinstance(value, LengthUnit):
            return value
        if not isinstance(value, str):
            raise ValueError(f"length unit must be a string, got {type(value).__name__}")
        key = value.strip().lower().replace("_", "-")
        aliases = {"utf8": "utf-8", "bytes": "utf-8", "utf16": "utf-16", "utf-16-le": "utf-16"}
        key = aliases.get(key, key)
        for unit in cls:
            if unit.value == key:
                return unit
        raise ValueError(f"unknown length unit: {value!r}")


def count_units(text: str, unit: Union[LengthUnit, str] = LengthUnit.UTF8) -> int:
    """Return the number of ``unit`` units needed to encode ``text``.

    Args:
        text: Path text
        unit: ``LengthUnit`` or its name ("utf-8", "utf-16")

    Returns:
        Byte count for UTF-8, 16-bit code unit count for UTF-16 (characters
        outside the BMP count as two)

    Raises:
        ValueError: If ``unit`` is not a known length unit
    """
    resolved = LengthUnit.parse(unit)
    if resolved is LengthUnit.UTF16:
        return len(text.encode("utf-16-le", "surrogatepass")) // 2
    return len(text.encode("utf-8", "surrogatepass"))


__all__ = ["LengthUnit", "count_units"]
