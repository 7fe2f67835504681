"""
Pytest configuration and fixtures for mirror path tests.
"""
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from mirror.config import NamingConfig, get_settings


@pytest.fixture
def naming_config() -> NamingConfig:
    """Naming configuration with the default collection names."""
    return NamingConfig(root="mirror")


@pytest.fixture
def custom_config() -> NamingConfig:
    """Naming configuration with non-default names throughout."""
    return NamingConfig(
        root="buckets/photos-bucket",
        items_collection="objs",
        item_tombstones_collection="objsDeleted",
        prefixes_collection="dirs",
        prefix_tombstones_collection="dirsDeleted",
        object_name_filter=r"^public/",
    )


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Isolate tests from the caller's MIRROR_* environment and cached settings."""
    for name in (
        "MIRROR_ROOT",
        "MIRROR_ITEMS_COLLECTION",
        "MIRROR_ITEM_TOMBSTONES_COLLECTION",
        "MIRROR_PREFIXES_COLLECTION",
        "MIRROR_PREFIX_TOMBSTONES_COLLECTION",
        "MIRROR_OBJECT_NAME_FILTER",
        "MIRROR_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "fast: Fast unit tests (no I/O)"
    )
