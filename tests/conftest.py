"""
Global pytest configuration and fixtures for ffxl tests.
"""

import os
import sys

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from ffxl.store import default_store  # noqa: E402

FFXL_ENV_VARS = (
    "FEATURE_FLAGS_FILE",
    "FFXL_FILE",
    "FEATURE_FLAGS_CONFIG",
    "FFXL_CONFIG",
    "FFXL_ENV",
    "ENVIRONMENT",
    "FFXL_LOG_FORMAT",
    "FFXL_DEFAULT_FILE_NAME",
)

SAMPLE_FEATURES = {
    "test_feature_enabled": {
        "enabled": True,
        "comment": "Test feature that is enabled",
    },
    "test_feature_disabled": {
        "enabled": False,
        "comment": "Test feature that is disabled",
    },
    "test_feature_user_specific": {
        "onlyForUserIds": ["user-123", "user-456"],
        "comment": "Feature for specific users",
    },
    "test_feature_combined": {
        "enabled": False,
        "onlyForUserIds": ["user-789"],
        "comment": "Combined config - user list takes precedence",
    },
}


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove ffxl variables and clear the default store around each test."""
    for name in FFXL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    default_store.clear_cache()
    yield
    default_store.clear_cache()


@pytest.fixture
def sample_features():
    """Sample feature definitions."""
    return {name: dict(rule) for name, rule in SAMPLE_FEATURES.items()}


@pytest.fixture
def flags_yaml(tmp_path, monkeypatch):
    """Write a feature-flags.yaml into a temporary working directory."""
    monkeypatch.chdir(tmp_path)

    def _write(content: str, name: str = "feature-flags.yaml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
