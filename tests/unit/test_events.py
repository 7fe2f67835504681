"""Tests for mirror.events module."""

import pytest

from mirror.events import DELETION_EVENT_TYPES, ObjectEventType, is_deletion_event_type


@pytest.mark.fast
class TestIsDeletionEventType:
    """Tests for is_deletion_event_type()."""

    @pytest.mark.parametrize(
        "event_type",
        ["google.storage.object.delete", "google.storage.object.archive"],
    )
    def test_deletion_events(self, event_type):
        assert is_deletion_event_type(event_type) is True

    @pytest.mark.parametrize(
        "event_type",
        [
            "",
            "google.storage.object.finalize",
            "google.storage.object.metadataUpdate",
            "GOOGLE.STORAGE.OBJECT.DELETE",
            "google.storage.object.delete ",
            "delete",
        ],
    )
    def test_other_events(self, event_type):
        assert is_deletion_event_type(event_type) is False

    def test_enum_members_accepted(self):
        assert is_deletion_event_type(ObjectEventType.DELETE) is True
        assert is_deletion_event_type(ObjectEventType.FINALIZE) is False

    def test_deletion_set(self):
        assert set(DELETION_EVENT_TYPES) == {ObjectEventType.DELETE, ObjectEventType.ARCHIVE}


@pytest.mark.fast
class TestObjectEventType:
    """Tests for ObjectEventType enum."""

    def test_values(self):
        assert ObjectEventType.FINALIZE.value == "google.storage.object.finalize"
        assert ObjectEventType.METADATA_UPDATE.value == "google.storage.object.metadataUpdate"
        assert ObjectEventType.DELETE.value == "google.storage.object.delete"
        assert ObjectEventType.ARCHIVE.value == "google.storage.object.archive"

    def test_lookup_by_value(self):
        assert ObjectEventType("google.storage.object.archive") is ObjectEventType.ARCHIVE
