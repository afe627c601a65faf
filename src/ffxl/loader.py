"""
Build-time feature flags loader.

Reads the YAML source from disk, validates it and turns it into the JSON
transport string consumed by the runtime config store. Only usable where a
file system is available; errors here are meant to stop a build.
"""

import os
from collections.abc import MutableMapping
from pathlib import Path

import yaml

from ffxl.environment import RuntimeEnvironment, detect_environment
from ffxl.exceptions import (
    FeatureFlagEnvironmentError,
    FeatureFlagNotFoundError,
    FeatureFlagValidationError,
)
from ffxl.logging import get_logger
from ffxl.models import FeatureFlagsConfig
from ffxl.settings import Settings, get_settings
from ffxl.validator import validate_config

logger = get_logger(__name__)

TRANSPORT_VARIABLE = "FFXL_CONFIG"


def resolve_feature_flags_path(settings: Settings | None = None) -> Path:
    """Get the feature flags file path from the environment or use the default."""
    settings = settings or get_settings()

    if settings.feature_flags_file:
        path = Path(settings.feature_flags_file)
        if not path.is_absolute():
            path = Path.cwd() / path
        logger.info("feature_flags_file_from_environment", path=str(path))
        return path

    path = Path.cwd() / settings.default_file_name
    logger.info("feature_flags_file_default", path=str(path))
    return path


def load_feature_flags(settings: Settings | None = None) -> FeatureFlagsConfig:
    """Load and validate feature flags from the YAML source.

    Raises:
        FeatureFlagEnvironmentError: when called outside a server environment
        FeatureFlagNotFoundError: when the resolved file does not exist
        FeatureFlagValidationError: on invalid YAML or an invalid document
    """
    if detect_environment() is not RuntimeEnvironment.SERVER:
        raise FeatureFlagEnvironmentError(
            "load_feature_flags() can only be called in a server environment"
        )

    path = resolve_feature_flags_path(settings)
    if not path.exists():
        logger.error("feature_flags_file_not_found", path=str(path))
        raise FeatureFlagNotFoundError(path)

    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as e:
        logger.error("feature_flags_file_not_utf8", path=str(path), error=str(e))
        raise FeatureFlagValidationError(f"Feature flags file is not valid UTF-8: {e}") from e
    except yaml.YAMLError as e:
        logger.error("feature_flags_yaml_invalid", path=str(path), error=str(e))
        raise FeatureFlagValidationError(f"Invalid YAML syntax: {e}") from e

    try:
        config = validate_config(document)
    except FeatureFlagValidationError as e:
        logger.error("feature_flags_validation_failed", path=str(path), error=str(e))
        raise

    logger.info("feature_flags_loaded", path=str(path), feature_count=len(config.features))
    return config


def load_feature_flags_as_string(settings: Settings | None = None) -> str:
    """Load feature flags and return them as the JSON transport string."""
    return load_feature_flags(settings).to_transport()


def export_feature_flags(
    environ: MutableMapping[str, str] | None = None,
    variable: str = TRANSPORT_VARIABLE,
    settings: Settings | None = None,
) -> str:
    """Load feature flags and publish the transport string into an environment mapping.

    Child processes started afterwards (and the config store in this process,
    once cleared) will see the configuration.
    """
    payload = load_feature_flags_as_string(settings)
    target = os.environ if environ is None else environ
    target[variable] = payload
    logger.info("feature_flags_exported", variable=variable)
    return payload
