"""Boundary service between the redirection channel and the host share.

The redirection layer hands every path it decodes to a ``PathAdapter`` and
every host path it reports back goes through the same adapter. The adapter
never rejects input: conversion is literal, and paths outside the restricted
DOS subset (drive letters, UNC prefixes) are only reported in the log.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from redirpath import config
from redirpath.logging import StructuredLogger, create_logger

from ._types import SourcePath, TargetPath
from .convert import is_restricted_dos_path
from .errors import EmbeddedNulError
from .units import LengthUnit

logger = logging.getLogger(__name__)


class PathAdapter:
    """Converts paths in both directions and derives values for filesystem calls."""

    def __init__(
        self,
        logger: Optional[StructuredLogger] = None,
        unit: Optional[Union[LengthUnit, str]] = None,
        warn_unrestricted: Optional[bool] = None,
    ) -> None:
        self.unit = LengthUnit.parse(config.settings.length_unit if unit is None else unit)
        self.warn_unrestricted = (
            config.settings.warn_unrestricted if warn_unrestricted is None else warn_unrestricted
        )
        self.logger = logger or create_logger(component="path_adapter")

    def to_target(self, raw: Union[str, SourcePath]) -> TargetPath:
        source = raw if isinstance(raw, SourcePath) else SourcePath(raw)
        if self.warn_unrestricted and not is_restricted_dos_path(source.text):
            self.logger.warning(
                "DOS path outside the supported subset; converting literally",
                source=source.text,
            )
        target = source.to_target()
        logger.debug("converted %r -> %r", source.text, target.text)
        return target

    def to_source(self, raw: Union[str, TargetPath]) -> SourcePath:
        target = raw if isinstance(raw, TargetPath) else TargetPath(raw)
        return target.to_source()

    def null_terminated(self, target: Union[str, TargetPath]) -> bytes:
        """Return the null-terminated form of ``target``.

        Raises:
            EmbeddedNulError: If the path holds a NUL; logged, then re-raised
        """
        path = target if isinstance(target, TargetPath) else TargetPath(target)
        try:
            return path.to_null_terminated()
        except EmbeddedNulError as e:
            self.logger.error(
                "Path cannot be passed to the filesystem",
                target=path.last_segment(),
                nul_position=e.position,
            )
            raise

    def length(self, path: Union[SourcePath, TargetPath]) -> int:
        return path.length(self.unit)

    def close(self) -> None:
        self.logger.close()

    def __enter__(self) -> "PathAdapter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
