"""Naming configuration with Pydantic Settings.

The naming configuration fixes the root document path and the four
subcollection names used to lay out mirrored objects. It is loaded once
per process and passed explicitly to every path function.

Examples:
    >>> from mirror.config import get_settings
    >>> config = get_settings().naming_config()
    >>> config.items_collection
    'items'

Tests:
    - tests/unit/test_config.py::TestNamingConfig
    - tests/unit/test_config.py::TestSettings
"""

from __future__ import annotations

import re
from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ROOT = "gcs-mirror/bucket"
DEFAULT_ITEMS_COLLECTION = "items"
DEFAULT_ITEM_TOMBSTONES_COLLECTION = "itemsTombstones"
DEFAULT_PREFIXES_COLLECTION = "prefixes"
DEFAULT_PREFIX_TOMBSTONES_COLLECTION = "prefixesTombstones"
DEFAULT_OBJECT_NAME_FILTER = ".*"


class NamingConfig(BaseModel):
    """Immutable naming configuration for mirror documents.

    Attributes:
        root: Document path under which the mirror is rooted.
        items_collection: Subcollection holding Item Documents.
        item_tombstones_collection: Subcollection holding Item tombstones.
        prefixes_collection: Subcollection holding Prefix Documents.
        prefix_tombstones_collection: Subcollection holding Prefix tombstones.
        object_name_filter: Regex an object name must match to be mirrored.
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(default=DEFAULT_ROOT, description="Root document path")
    items_collection: str = Field(default=DEFAULT_ITEMS_COLLECTION)
    item_tombstones_collection: str = Field(default=DEFAULT_ITEM_TOMBSTONES_COLLECTION)
    prefixes_collection: str = Field(default=DEFAULT_PREFIXES_COLLECTION)
    prefix_tombstones_collection: str = Field(default=DEFAULT_PREFIX_TOMBSTONES_COLLECTION)
    object_name_filter: str = Field(
        default=DEFAULT_OBJECT_NAME_FILTER,
        description="Objects whose names match this regex are mirrored",
    )

    @field_validator("root")
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Reject empty roots and roots with empty segments."""
        if not v:
            raise ValueError("root must not be empty")
        if any(segment == "" for segment in v.split("/")):
            raise ValueError(f"root must not contain empty path segments: {v!r}")
        return v

    @field_validator(
        "items_collection",
        "item_tombstones_collection",
        "prefixes_collection",
        "prefix_tombstones_collection",
    )
    @classmethod
    def validate_collection_name(cls, v: str) -> str:
        """Collection names are single path segments."""
        if not v:
            raise ValueError("collection name must not be empty")
        if "/" in v:
            raise ValueError(f"collection name must not contain '/': {v!r}")
        return v

    @field_validator("object_name_filter")
    @classmethod
    def validate_object_name_filter(cls, v: str) -> str:
        """Ensure the filter compiles."""
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"object_name_filter is not a valid regex: {e}") from e
        return v

    @model_validator(mode="after")
    def validate_distinct_collections(self) -> "NamingConfig":
        """The tombstone mapper tells kinds apart by collection name."""
        names = self.collection_names
        if len(set(names)) != len(names):
            raise ValueError(f"collection names must be distinct: {names}")
        return self

    @property
    def collection_names(self) -> tuple[str, str, str, str]:
        """All four subcollection names."""
        return (
            self.items_collection,
            self.item_tombstones_collection,
            self.prefixes_collection,
            self.prefix_tombstones_collection,
        )

    @property
    def object_name_pattern(self) -> re.Pattern[str]:
        """Compiled ``object_name_filter``."""
        return re.compile(self.object_name_filter)


class Settings(BaseSettings):
    """Process settings loaded from environment variables and .env.

    Every variable carries the ``MIRROR_`` prefix, e.g. ``MIRROR_ROOT``.

    Attributes:
        ROOT: Root document path for the mirror.
        ITEMS_COLLECTION: Item Document subcollection name.
        ITEM_TOMBSTONES_COLLECTION: Item tombstone subcollection name.
        PREFIXES_COLLECTION: Prefix Document subcollection name.
        PREFIX_TOMBSTONES_COLLECTION: Prefix tombstone subcollection name.
        OBJECT_NAME_FILTER: Regex selecting which objects are mirrored.
        LOG_LEVEL: Logging level name for the CLI.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="MIRROR_",
        case_sensitive=True,
        extra="ignore",
    )

    ROOT: str = Field(default=DEFAULT_ROOT, description="Root document path")
    ITEMS_COLLECTION: str = Field(
        default=DEFAULT_ITEMS_COLLECTION,
        description="Subcollection for Item Documents",
    )
    ITEM_TOMBSTONES_COLLECTION: str = Field(
        default=DEFAULT_ITEM_TOMBSTONES_COLLECTION,
        description="Subcollection for Item tombstones",
    )
    PREFIXES_COLLECTION: str = Field(
        default=DEFAULT_PREFIXES_COLLECTION,
        description="Subcollection for Prefix Documents",
    )
    PREFIX_TOMBSTONES_COLLECTION: str = Field(
        default=DEFAULT_PREFIX_TOMBSTONES_COLLECTION,
        description="Subcollection for Prefix tombstones",
    )
    OBJECT_NAME_FILTER: str = Field(
        default=DEFAULT_OBJECT_NAME_FILTER,
        description="Regex selecting which objects are mirrored",
    )
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the level name."""
        level = v.upper()
        valid_levels = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
        if level not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of: {valid_levels}")
        return level

    def naming_config(self) -> NamingConfig:
        """Build the immutable naming configuration.

        Returns:
            NamingConfig: Validated naming configuration.

        Raises:
            pydantic.ValidationError: If the configured names are invalid.
        """
        return NamingConfig(
            root=self.ROOT,
            items_collection=self.ITEMS_COLLECTION,
            item_tombstones_collection=self.ITEM_TOMBSTONES_COLLECTION,
            prefixes_collection=self.PREFIXES_COLLECTION,
            prefix_tombstones_collection=self.PREFIX_TOMBSTONES_COLLECTION,
            object_name_filter=self.OBJECT_NAME_FILTER,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: The process settings.
    """
    return Settings()
