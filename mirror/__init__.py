"""Storage mirror path core.

Maps slash-delimited object-storage names onto the collection/document
layout of a hierarchical document database, and onto the parallel
tombstone namespace used to record deletions.

Examples:
    >>> from mirror import NamingConfig, object_name_to_firestore_paths
    >>> config = NamingConfig(root="mirror")
    >>> object_name_to_firestore_paths("photos/img.jpg", config).item_path
    'mirror/prefixes/photos/items/img.jpg'
"""

__version__ = "0.1.0"

from mirror.config import NamingConfig
from mirror.errors import InvalidMirrorDocumentPathError, MirrorError
from mirror.events import DELETION_EVENT_TYPES, ObjectEventType, is_deletion_event_type
from mirror.fields import FieldMatch, filter_custom_metadata, filter_object_fields
from mirror.naming import (
    DocumentKind,
    DocumentPaths,
    document_kind,
    mirror_document_path_to_tombstone_path,
    object_name_to_firestore_paths,
    path_hash,
    should_mirror_object,
    tombstone_path_to_mirror_document_path,
)
from mirror.validation import (
    are_valid_document_paths,
    invalid_path_reasons,
    is_valid_document_id,
    is_valid_document_name,
)

__all__ = [
    "DELETION_EVENT_TYPES",
    "DocumentKind",
    "DocumentPaths",
    "FieldMatch",
    "InvalidMirrorDocumentPathError",
    "MirrorError",
    "NamingConfig",
    "ObjectEventType",
    "are_valid_document_paths",
    "document_kind",
    "filter_custom_metadata",
    "filter_object_fields",
    "invalid_path_reasons",
    "is_deletion_event_type",
    "is_valid_document_id",
    "is_valid_document_name",
    "mirror_document_path_to_tombstone_path",
    "object_name_to_firestore_paths",
    "path_hash",
    "should_mirror_object",
    "tombstone_path_to_mirror_document_path",
]
