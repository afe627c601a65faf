"""
Feature flags document validation.

Checks a parsed document (the output of a YAML or JSON parser) against the
expected shape and stops at the first violation. Messages name the offending
feature and the constraint it breaks.
"""

from collections.abc import Mapping
from typing import Any

from ffxl.exceptions import FeatureFlagValidationError
from ffxl.models import FeatureFlagsConfig


def validate_feature_rule(name: str, rule: Any) -> None:
    """Validate a single feature entry."""
    if not isinstance(rule, Mapping):
        raise FeatureFlagValidationError(f'Feature "{name}" must be an object')

    has_enabled = "enabled" in rule
    has_user_ids = "onlyForUserIds" in rule

    if not has_enabled and not has_user_ids:
        raise FeatureFlagValidationError(
            f'Feature "{name}" must have either "enabled" or "onlyForUserIds" property'
        )

    # bool is checked by type; YAML integers 0/1 are not accepted as switches
    if has_enabled and not isinstance(rule["enabled"], bool):
        raise FeatureFlagValidationError(f'Feature "{name}": "enabled" must be a boolean')

    if has_user_ids:
        user_ids = rule["onlyForUserIds"]
        if not isinstance(user_ids, (list, tuple)):
            raise FeatureFlagValidationError(
                f'Feature "{name}": "onlyForUserIds" must be an array'
            )
        if not all(isinstance(user_id, str) for user_id in user_ids):
            raise FeatureFlagValidationError(
                f'Feature "{name}": all items in "onlyForUserIds" must be strings'
            )

    if "comment" in rule and not isinstance(rule["comment"], str):
        raise FeatureFlagValidationError(f'Feature "{name}": "comment" must be a string')


def validate_config(document: Any) -> FeatureFlagsConfig:
    """Validate a parsed document and build the configuration from it.

    Raises:
        FeatureFlagValidationError: on the first violation found
    """
    if not isinstance(document, Mapping):
        raise FeatureFlagValidationError("Configuration must be an object")

    if "features" not in document:
        raise FeatureFlagValidationError('Configuration must have a "features" property')

    features = document["features"]
    if not isinstance(features, Mapping):
        raise FeatureFlagValidationError('"features" must be an object')

    rules: dict[str, dict[str, Any]] = {}
    for name, rule in features.items():
        # YAML turns keys like 1 or true into non-strings
        if not isinstance(name, str):
            raise FeatureFlagValidationError(f"Feature name {name!r} must be a string")
        validate_feature_rule(name, rule)
        rules[name] = {
            "enabled": rule.get("enabled"),
            "onlyForUserIds": list(rule["onlyForUserIds"]) if "onlyForUserIds" in rule else None,
            "comment": rule.get("comment"),
        }

    return FeatureFlagsConfig.model_validate({"features": rules})
