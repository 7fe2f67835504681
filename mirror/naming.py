"""Document path derivation for mirrored storage objects.

An object name such as ``photos/2024/img.jpg`` is mapped to one Prefix
Document per directory level and one Item Document for the object itself:

    {root}/{prefixes}/photos
    {root}/{prefixes}/photos/{prefixes}/2024
    {root}/{prefixes}/photos/{prefixes}/2024/{items}/img.jpg

Deleted documents are mirrored into the tombstone collections by swapping
the collection segment that precedes the document id.

Examples:
    >>> from mirror.config import NamingConfig
    >>> from mirror.naming import (
    ...     mirror_document_path_to_tombstone_path,
    ...     object_name_to_firestore_paths,
    ... )
    >>> config = NamingConfig(root="mirror")
    >>> paths = object_name_to_firestore_paths("photos/2024/img.jpg", config)
    >>> paths.prefix_paths
    ('mirror/prefixes/photos', 'mirror/prefixes/photos/prefixes/2024')
    >>> paths.item_path
    'mirror/prefixes/photos/prefixes/2024/items/img.jpg'
    >>> mirror_document_path_to_tombstone_path(paths.item_path, config)
    'mirror/prefixes/photos/prefixes/2024/itemsTombstones/img.jpg'
"""

from __future__ import annotations

import hashlib
import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict

from mirror.config import NamingConfig
from mirror.errors import InvalidMirrorDocumentPathError

logger = logging.getLogger(__name__)


class DocumentKind(str, Enum):
    """Kind of mirror document, read from its collection segment."""

    ITEM = "item"
    PREFIX = "prefix"
    ITEM_TOMBSTONE = "item_tombstone"
    PREFIX_TOMBSTONE = "prefix_tombstone"


class DocumentPaths(BaseModel):
    """All Prefix Document paths and the Item Document path for one object.

    ``prefix_paths`` runs from the root to the object's parent directory,
    so writing them in order creates every ancestor before its descendants.
    """

    model_config = ConfigDict(frozen=True)

    prefix_paths: tuple[str, ...] = ()
    item_path: str

    @property
    def all_paths(self) -> tuple[str, ...]:
        """Prefix paths followed by the item path."""
        return (*self.prefix_paths, self.item_path)


def should_mirror_object(name: str, config: NamingConfig) -> bool:
    """Return whether an object name matches the configured filter.

    Args:
        name: Object name.
        config: Naming configuration holding ``object_name_filter``.

    Returns:
        True if the filter is found anywhere in the name.
    """
    return config.object_name_pattern.search(name) is not None


def object_name_to_firestore_paths(name: str, config: NamingConfig) -> DocumentPaths:
    """Derive the Prefix Document and Item Document paths for an object.

    The name is split on every ``/``. Empty components (``a//b``, a leading
    ``/``) become empty document ids, and a trailing ``/`` gives an empty
    leaf. Use ``mirror.validation.are_valid_document_paths`` before writing.

    Args:
        name: Object name, e.g. ``photos/2024/img.jpg``.
        config: Naming configuration.

    Returns:
        DocumentPaths with prefix paths ordered ancestor-first.

    Raises:
        ValueError: If the name is empty.
    """
    if not name:
        raise ValueError("Object name must not be empty")

    *components, leaf = name.split("/")
    prefix = config.root
    prefix_paths: list[str] = []
    for component in components:
        prefix = f"{prefix}/{config.prefixes_collection}/{component}"
        prefix_paths.append(prefix)

    return DocumentPaths(
        prefix_paths=tuple(prefix_paths),
        item_path=f"{prefix}/{config.items_collection}/{leaf}",
    )


def _collection_kinds(config: NamingConfig) -> dict[str, DocumentKind]:
    return {
        config.items_collection: DocumentKind.ITEM,
        config.prefixes_collection: DocumentKind.PREFIX,
        config.item_tombstones_collection: DocumentKind.ITEM_TOMBSTONE,
        config.prefix_tombstones_collection: DocumentKind.PREFIX_TOMBSTONE,
    }


def _split_document_path(path: str) -> list[str]:
    parts = path.split("/")
    if len(parts) < 2:
        logger.error(f"Document path has no collection segment: {path!r}")
        raise InvalidMirrorDocumentPathError(path)
    return parts


def document_kind(path: str, config: NamingConfig) -> DocumentKind:
    """Classify a mirror document path by its collection segment.

    Args:
        path: Document path ending in ``<collection>/<id>``.
        config: Naming configuration.

    Returns:
        The DocumentKind of the path.

    Raises:
        InvalidMirrorDocumentPathError: If the collection is not a mirror
            or tombstone collection.
    """
    parts = _split_document_path(path)
    segment = parts[-2]
    kind = _collection_kinds(config).get(segment)
    if kind is None:
        logger.error(f"Unknown mirror collection {segment!r} in {path!r}")
        raise InvalidMirrorDocumentPathError(path, segment)
    return kind


def _swap_collection(path: str, mapping: dict[str, str]) -> str:
    parts = _split_document_path(path)
    segment = parts[-2]
    if segment not in mapping:
        logger.error(f"Unknown mirror collection {segment!r} in {path!r}")
        raise InvalidMirrorDocumentPathError(path, segment)
    parts[-2] = mapping[segment]
    return "/".join(parts)


def mirror_document_path_to_tombstone_path(path: str, config: NamingConfig) -> str:
    """Return the tombstone path for an Item Document or Prefix Document.

    Only the collection segment just before the document id is replaced;
    ancestors keep their mirror collection names.

    Args:
        path: Item or Prefix Document path, as produced by
            ``object_name_to_firestore_paths``.
        config: Naming configuration.

    Returns:
        The path with its items/prefixes collection swapped for the
        matching tombstone collection.

    Raises:
        InvalidMirrorDocumentPathError: If the collection segment is neither
            the items nor the prefixes collection.
    """
    return _swap_collection(path, {
        config.items_collection: config.item_tombstones_collection,
        config.prefixes_collection: config.prefix_tombstones_collection,
    })


def tombstone_path_to_mirror_document_path(path: str, config: NamingConfig) -> str:
    """Inverse of ``mirror_document_path_to_tombstone_path``.

    Args:
        path: Item or Prefix tombstone path.
        config: Naming configuration.

    Returns:
        The live mirror document path the tombstone stands for.

    Raises:
        InvalidMirrorDocumentPathError: If the collection segment is neither
            tombstone collection.
    """
    return _swap_collection(path, {
        config.item_tombstones_collection: config.items_collection,
        config.prefix_tombstones_collection: config.prefixes_collection,
    })


def path_hash(path: str) -> str:
    """Return a stable 32-character hex digest of a document path.

    MD5 is used as an identifier only, not for security.

    Args:
        path: Document path.

    Returns:
        Lowercase hex digest of the UTF-8 encoded path.
    """
    return hashlib.md5(path.encode("utf-8"), usedforsecurity=False).hexdigest()
