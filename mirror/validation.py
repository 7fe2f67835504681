"""Structural limits of document names and ids.

Limits follow the document database quotas:
https://firebase.google.com/docs/firestore/quotas#collections_documents_and_fields

Validation never raises; callers decide whether to skip, log or escalate.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

logger = logging.getLogger(__name__)

# At most 100 subcollections deep.
MAX_DOCUMENT_NAME_SEGMENTS = 100
# 6 KiB
MAX_DOCUMENT_NAME_BYTES = 6144
MAX_DOCUMENT_ID_BYTES = 1500
RESERVED_ID_PATTERN = re.compile(r"__.*__")


def _utf8_length(value: str) -> int:
    return len(value.encode("utf-8"))


def is_valid_document_name(name: str) -> bool:
    """Return whether a full document path is within the database limits.

    Args:
        name: Document path including all prefixes, e.g. ``gcs/foo/bar.jpg``.

    Returns:
        False if the path has more than 100 segments or exceeds 6 KiB.
    """
    if len(name.split("/")) > MAX_DOCUMENT_NAME_SEGMENTS:
        return False
    if _utf8_length(name) > MAX_DOCUMENT_NAME_BYTES:
        return False
    return True


def is_valid_document_id(doc_id: str) -> bool:
    """Return whether a single document id is allowed.

    Args:
        doc_id: Document id, e.g. ``image.jpg``.

    Returns:
        False if the id is empty, longer than 1500 bytes, ``.`` or ``..``,
        or contains a ``__...__`` run.
    """
    if not doc_id:
        return False
    if _utf8_length(doc_id) > MAX_DOCUMENT_ID_BYTES:
        return False
    if doc_id in (".", ".."):
        return False
    if RESERVED_ID_PATTERN.search(doc_id):
        return False
    return True


def invalid_path_reasons(paths: Iterable[str]) -> list[str]:
    """Explain why any of a set of document paths cannot be written.

    Each path is checked as a document name, and its final segment as a
    document id. Running this over ``DocumentPaths.all_paths`` checks every
    directory component as well as the leaf.

    Args:
        paths: Document paths to check.

    Returns:
        One message per failed check, empty if all paths are valid.
    """
    reasons: list[str] = []
    for path in paths:
        if not is_valid_document_name(path):
            reasons.append(f"invalid document name: {path!r}")
        doc_id = path.rsplit("/", 1)[-1]
        if not is_valid_document_id(doc_id):
            reasons.append(f"invalid document id {doc_id!r} in {path!r}")
    for reason in reasons:
        logger.debug(reason)
    return reasons


def are_valid_document_paths(paths: Iterable[str]) -> bool:
    """Return True if every path passes both the name and the id check."""
    return not invalid_path_reasons(paths)
