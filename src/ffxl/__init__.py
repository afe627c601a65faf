"""
ffxl - static feature flags.

Flags are declared in a YAML file, loaded and validated at build time,
shipped to the runtime as a JSON string in an environment variable, and
evaluated from an in-memory cache.

Build time::

    from ffxl import export_feature_flags
    export_feature_flags()  # sets FFXL_CONFIG

Runtime::

    from ffxl import is_feature_enabled
    if is_feature_enabled("new_dashboard", {"userId": "user-123"}):
        ...
"""

from ffxl.decorators import feature_flag
from ffxl.environment import RuntimeEnvironment, detect_environment, is_development
from ffxl.evaluator import (
    FeatureFlagEvaluator,
    are_all_features_enabled,
    default_evaluator,
    evaluate_rule,
    feature_exists,
    get_all_feature_names,
    get_enabled_features,
    get_feature_config,
    get_feature_flags,
    is_any_feature_enabled,
    is_feature_enabled,
)
from ffxl.exceptions import (
    FeatureFlagEnvironmentError,
    FeatureFlagError,
    FeatureFlagNotFoundError,
    FeatureFlagValidationError,
)
from ffxl.loader import (
    export_feature_flags,
    load_feature_flags,
    load_feature_flags_as_string,
    resolve_feature_flags_path,
)
from ffxl.logging import get_logger, setup_logging
from ffxl.models import FeatureFlagsConfig, FeatureRule, UserIdentity
from ffxl.settings import Settings, get_settings
from ffxl.store import ConfigStore, clear_cache, default_store, get_config
from ffxl.validator import validate_config, validate_feature_rule

__version__ = "1.0.0"

__all__ = [
    # Models
    "FeatureFlagsConfig",
    "FeatureRule",
    "UserIdentity",
    # Errors
    "FeatureFlagError",
    "FeatureFlagValidationError",
    "FeatureFlagNotFoundError",
    "FeatureFlagEnvironmentError",
    # Settings and environment
    "Settings",
    "get_settings",
    "RuntimeEnvironment",
    "detect_environment",
    "is_development",
    "get_logger",
    "setup_logging",
    # Loader
    "load_feature_flags",
    "load_feature_flags_as_string",
    "export_feature_flags",
    "resolve_feature_flags_path",
    "validate_config",
    "validate_feature_rule",
    # Store
    "ConfigStore",
    "default_store",
    "get_config",
    "clear_cache",
    # Evaluation
    "FeatureFlagEvaluator",
    "default_evaluator",
    "evaluate_rule",
    "is_feature_enabled",
    "is_any_feature_enabled",
    "are_all_features_enabled",
    "get_enabled_features",
    "get_feature_flags",
    "get_feature_config",
    "feature_exists",
    "get_all_feature_names",
    "feature_flag",
]
