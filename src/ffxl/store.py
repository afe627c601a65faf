"""
Runtime configuration store.

Holds at most one parsed configuration. The configuration arrives as a JSON
transport string in an environment variable (FEATURE_FLAGS_CONFIG or
FFXL_CONFIG), usually set by the loader in another process at build time.
Reading never raises: a missing or broken transport string degrades to an
empty configuration so every flag evaluates as disabled.
"""

from collections.abc import Callable

from pydantic import ValidationError

from ffxl.logging import get_logger
from ffxl.models import FeatureFlagsConfig
from ffxl.settings import Settings, get_settings

logger = get_logger(__name__)


class ConfigStore:
    """Single-slot cache for the feature flags configuration.

    Concurrent first reads may parse the transport string twice; both parses
    yield the same configuration, so no lock is taken.
    """

    def __init__(self, settings_factory: Callable[[], Settings] = get_settings) -> None:
        self._settings_factory = settings_factory
        self._config: FeatureFlagsConfig | None = None

    @property
    def is_cached(self) -> bool:
        return self._config is not None

    def get_config(self) -> FeatureFlagsConfig:
        """Return the cached configuration, loading it on first use."""
        if self._config is None:
            self._config = self._load()
        return self._config

    def clear_cache(self) -> None:
        """Forget the cached configuration; the next read goes back to the environment."""
        self._config = None

    def _load(self) -> FeatureFlagsConfig:
        try:
            payload = self._settings_factory().feature_flags_config
        except ValidationError as e:
            logger.error("feature_flags_settings_invalid", error=str(e))
            return FeatureFlagsConfig.empty()

        if not payload:
            logger.warning("feature_flags_config_missing")
            return FeatureFlagsConfig.empty()

        try:
            config = FeatureFlagsConfig.from_transport(payload)
        except ValidationError as e:
            logger.error("feature_flags_config_invalid", error=str(e))
            return FeatureFlagsConfig.empty()

        logger.info("feature_flags_config_loaded", feature_count=len(config.features))
        return config


default_store = ConfigStore()


def get_config() -> FeatureFlagsConfig:
    """Get the configuration from the default store."""
    return default_store.get_config()


def clear_cache() -> None:
    """Clear the default store."""
    default_store.clear_cache()
