"""Exceptions raised by the mirror path core.

Validation problems are reported as booleans by ``mirror.validation``;
only contract violations are raised.
"""

from __future__ import annotations


class MirrorError(Exception):
    """Base exception for mirror path errors."""


class InvalidMirrorDocumentPathError(MirrorError, ValueError):
    """A path was not produced by the mirror naming scheme.

    Raised when the collection segment of a document path is none of the
    configured mirror or tombstone collections. This means the caller and
    the naming configuration disagree, so the current operation must stop.

    Attributes:
        path: The offending document path.
        segment: The collection segment that was inspected (None if the
            path is too short to have one).
    """

    def __init__(self, path: str, segment: str | None = None) -> None:
        """Initialize invalid path error.

        Args:
            path: The offending document path.
            segment: The collection segment found in the path.
        """
        message = f"Invalid Mirror Document Path: {path!r}"
        if segment is not None:
            message += f" (unknown collection {segment!r})"
        super().__init__(message)
        self.path = path
        self.segment = segment
