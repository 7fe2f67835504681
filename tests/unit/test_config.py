"""Unit tests for configuration module.

Tests for mirror/config.py - NamingConfig and Settings.

Run with:
    pytest tests/unit/test_config.py -v
    pytest tests/unit/test_config.py -v -m fast
"""

import pytest
from pydantic import ValidationError

from mirror.config import NamingConfig, Settings, get_settings


@pytest.mark.fast
class TestNamingConfig:
    """Tests for NamingConfig model."""

    def test_defaults(self):
        """Test default collection names."""
        config = NamingConfig()
        assert config.root == "gcs-mirror/bucket"
        assert config.items_collection == "items"
        assert config.item_tombstones_collection == "itemsTombstones"
        assert config.prefixes_collection == "prefixes"
        assert config.prefix_tombstones_collection == "prefixesTombstones"
        assert config.object_name_filter == ".*"

    def test_frozen(self):
        """Test config cannot be mutated after creation."""
        config = NamingConfig()
        with pytest.raises(ValidationError):
            config.root = "other"

    def test_hashable_and_equal(self):
        """Test equal configs compare and hash equal."""
        assert NamingConfig(root="a") == NamingConfig(root="a")
        assert hash(NamingConfig(root="a")) == hash(NamingConfig(root="a"))

    @pytest.mark.parametrize("root", ["", "/mirror", "mirror/", "a//b"])
    def test_invalid_root(self, root):
        """Test root with empty segments is rejected."""
        with pytest.raises(ValidationError):
            NamingConfig(root=root)

    def test_collection_with_slash_rejected(self):
        """Test collection names must be single segments."""
        with pytest.raises(ValidationError, match="must not contain"):
            NamingConfig(items_collection="a/b")

    def test_empty_collection_rejected(self):
        """Test empty collection names are rejected."""
        with pytest.raises(ValidationError, match="must not be empty"):
            NamingConfig(prefixes_collection="")

    def test_duplicate_collections_rejected(self):
        """Test mirror and tombstone collections must differ."""
        with pytest.raises(ValidationError, match="must be distinct"):
            NamingConfig(item_tombstones_collection="items")

    def test_invalid_filter_rejected(self):
        """Test object_name_filter must compile."""
        with pytest.raises(ValidationError, match="not a valid regex"):
            NamingConfig(object_name_filter="(unclosed")

    def test_object_name_pattern(self):
        """Test the compiled filter."""
        config = NamingConfig(object_name_filter=r"^public/")
        assert config.object_name_pattern.search("public/a") is not None

    def test_collection_names(self):
        """Test collection_names lists all four subcollections."""
        assert NamingConfig().collection_names == (
            "items",
            "itemsTombstones",
            "prefixes",
            "prefixesTombstones",
        )


@pytest.mark.fast
class TestSettings:
    """Tests for Settings class."""

    def test_settings_default_values(self):
        """Test settings default values."""
        settings = Settings()
        assert settings.ROOT == "gcs-mirror/bucket"
        assert settings.LOG_LEVEL == "INFO"

    def test_settings_from_environment(self, monkeypatch):
        """Test MIRROR_ prefixed variables are loaded."""
        monkeypatch.setenv("MIRROR_ROOT", "env/root")
        monkeypatch.setenv("MIRROR_ITEMS_COLLECTION", "objects")
        monkeypatch.setenv("MIRROR_OBJECT_NAME_FILTER", r"\.jpg$")
        config = Settings().naming_config()
        assert config.root == "env/root"
        assert config.items_collection == "objects"
        assert config.object_name_filter == r"\.jpg$"

    def test_unprefixed_variables_ignored(self, monkeypatch):
        """Test variables without the prefix are not read."""
        monkeypatch.setenv("ROOT", "ignored")
        assert Settings().ROOT == "gcs-mirror/bucket"

    def test_log_level_normalized(self):
        """Test LOG_LEVEL is upper-cased."""
        assert Settings(LOG_LEVEL="debug").LOG_LEVEL == "DEBUG"

    def test_log_level_invalid(self):
        """Test LOG_LEVEL validation rejects unknown levels."""
        with pytest.raises(ValidationError, match="LOG_LEVEL must be one of"):
            Settings(LOG_LEVEL="verbose")

    def test_naming_config_validation_propagates(self):
        """Test invalid names surface when building the naming config."""
        settings = Settings(PREFIXES_COLLECTION="items")
        with pytest.raises(ValidationError):
            settings.naming_config()

    def test_get_settings_cached(self):
        """Test get_settings returns the same instance."""
        assert get_settings() is get_settings()
