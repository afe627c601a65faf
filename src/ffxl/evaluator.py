"""
Feature flag evaluation.

Every entry point here is total: unknown features, a broken configuration
or any other failure evaluate to disabled (or an empty result) and are
reported through logging only. A flag check must never break a request.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from ffxl.logging import get_logger
from ffxl.models import FeatureFlagsConfig, FeatureRule, UserIdentity
from ffxl.store import ConfigStore, default_store

logger = get_logger(__name__)

UserLike = UserIdentity | Mapping[str, Any] | None


def evaluate_rule(rule: FeatureRule, user: UserIdentity | None) -> bool:
    """Resolve a rule for an optional user.

    A non-empty ``only_for_user_ids`` list takes precedence over ``enabled``.
    An empty list does not restrict anyone and falls through to ``enabled``.
    """
    if rule.only_for_user_ids:
        if user is None or not user.user_id:
            return False
        return user.user_id in rule.only_for_user_ids

    if rule.enabled is not None:
        return rule.enabled

    return False


class FeatureFlagEvaluator:
    """Evaluates feature flags against a config store."""

    def __init__(self, store: ConfigStore | None = None) -> None:
        self.store = store or default_store

    def _config(self) -> FeatureFlagsConfig:
        return self.store.get_config()

    def is_feature_enabled(self, name: str, user: UserLike = None) -> bool:
        """Check if a feature flag is enabled for the given user."""
        try:
            rule = self._config().features.get(name)
            if rule is None:
                logger.warning("feature_flag_not_found", flag=name)
                return False

            enabled = evaluate_rule(rule, UserIdentity.coerce(user))
            logger.debug("feature_flag_checked", flag=name, enabled=enabled)
            return enabled
        except Exception as e:
            logger.error("feature_flag_evaluation_failed", flag=name, error=str(e))
            return False

    def is_any_feature_enabled(self, names: Iterable[str], user: UserLike = None) -> bool:
        """Check if any of the features is enabled. False for no features."""
        return any(self.is_feature_enabled(name, user) for name in names)

    def are_all_features_enabled(self, names: Iterable[str], user: UserLike = None) -> bool:
        """Check if all of the features are enabled. True for no features."""
        return all(self.is_feature_enabled(name, user) for name in names)

    def get_enabled_features(self, user: UserLike = None) -> list[str]:
        """Names of all features enabled for the user, in configuration order."""
        try:
            names = list(self._config().features)
        except Exception as e:
            logger.error("feature_flags_enabled_list_failed", error=str(e))
            return []
        return [name for name in names if self.is_feature_enabled(name, user)]

    def get_feature_flags(self, names: Iterable[str], user: UserLike = None) -> dict[str, bool]:
        """Evaluate several features at once."""
        return {name: self.is_feature_enabled(name, user) for name in names}

    def get_feature_config(self, name: str) -> FeatureRule | None:
        """Raw rule for a feature, for debugging."""
        try:
            return self._config().features.get(name)
        except Exception as e:
            logger.error("feature_flag_config_lookup_failed", flag=name, error=str(e))
            return None

    def feature_exists(self, name: str) -> bool:
        try:
            return name in self._config().features
        except Exception as e:
            logger.error("feature_flag_exists_check_failed", flag=name, error=str(e))
            return False

    def get_all_feature_names(self) -> list[str]:
        try:
            return list(self._config().features)
        except Exception as e:
            logger.error("feature_flag_names_failed", error=str(e))
            return []


default_evaluator = FeatureFlagEvaluator()


def is_feature_enabled(name: str, user: UserLike = None) -> bool:
    return default_evaluator.is_feature_enabled(name, user)


def is_any_feature_enabled(names: Iterable[str], user: UserLike = None) -> bool:
    return default_evaluator.is_any_feature_enabled(names, user)


def are_all_features_enabled(names: Iterable[str], user: UserLike = None) -> bool:
    return default_evaluator.are_all_features_enabled(names, user)


def get_enabled_features(user: UserLike = None) -> list[str]:
    return default_evaluator.get_enabled_features(user)


def get_feature_flags(names: Iterable[str], user: UserLike = None) -> dict[str, bool]:
    return default_evaluator.get_feature_flags(names, user)


def get_feature_config(name: str) -> FeatureRule | None:
    return default_evaluator.get_feature_config(name)


def feature_exists(name: str) -> bool:
    return default_evaluator.feature_exists(name)


def get_all_feature_names() -> list[str]:
    return default_evaluator.get_all_feature_names()
