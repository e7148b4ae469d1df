"""Pure conversion between redirection-channel (DOS) and host (POSIX) paths.

No filesystem I/O is performed by any function in this module.

Device redirection only ever sends two shapes of DOS path:

- ``\\Program Files\\Custom Utilities\\StringFinder.exe``: absolute from the
  root of the current drive
- ``2018\\January.xlsx``: relative to the current directory

The host side expects forward-slash paths relative to the shared root, with
no leading separator. Paths outside that subset (drive letters, UNC or device
namespace prefixes) are still converted, literally, and will come out
meaningless; ``is_restricted_dos_path`` lets the boundary report them.
"""

from __future__ import annotations

import re

DOS_SEP = "\\"
POSIX_SEP = "/"

# Drive-letter prefix ("C:"), or UNC / device namespace ("\\server", "\\?\", "\\.\")
_UNRESTRICTED_PREFIX_RE = re.compile(r"^(?:[A-Za-z]:|[\\/]{2})")


def to_target_text(dos_text: str) -> str:
    """Convert a DOS path from the redirection channel into a host path.

    Steps:
        1. Replace every backslash with a forward slash (no segment parsing)
        2. If the result starts with a slash, drop exactly that one character

    Nothing else is normalized: repeated separators, ``.``/``..`` segments
    and trailing separators pass through. ``"\\"`` becomes ``""``, the shared
    root itself.
    """
    cleaned = dos_text.replace(DOS_SEP, POSIX_SEP)
    if cleaned.startswith(POSIX_SEP):
        cleaned = cleaned[1:]
    return cleaned


def to_source_text(posix_text: str) -> str:
    """Convert a host path back into a DOS path absolute from the drive root.

    ``""`` (the shared root) becomes ``"\\"``. For text without backslashes,
    ``to_target_text(to_source_text(t)) == t``.
    """
    return DOS_SEP + posix_text.replace(POSIX_SEP, DOS_SEP)


def is_restricted_dos_path(dos_text: str) -> bool:
    """Return True if ``dos_text`` has no drive, UNC or device-namespace prefix."""
    return _UNRESTRICTED_PREFIX_RE.match(dos_text) is None


def split_segments(posix_text: str) -> list[str]:
    """Split a host path on ``/`` without dropping empty segments."""
    return posix_text.split(POSIX_SEP)


__all__ = [
    "DOS_SEP",
    "POSIX_SEP",
    "to_target_text",
    "to_source_text",
    "is_restricted_dos_path",
    "split_segments",
]
