"""Storage event classification."""

from __future__ import annotations

from enum import Enum


class ObjectEventType(str, Enum):
    """Object change notifications delivered by the object store."""

    FINALIZE = "google.storage.object.finalize"
    METADATA_UPDATE = "google.storage.object.metadataUpdate"
    DELETE = "google.storage.object.delete"
    ARCHIVE = "google.storage.object.archive"


# Membership is tested by equality so plain strings and members both match.
DELETION_EVENT_TYPES: tuple[ObjectEventType, ...] = (
    ObjectEventType.DELETE,
    ObjectEventType.ARCHIVE,
)


def is_deletion_event_type(event_type: str) -> bool:
    """Return whether the event is an object deletion or archival.

    Args:
        event_type: Event type identifier, e.g. ``google.storage.object.delete``.

    Returns:
        True only for an exact match with the delete or archive identifier.
    """
    return event_type in DELETION_EVENT_TYPES
