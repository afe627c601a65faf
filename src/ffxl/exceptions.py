"""Feature flag exceptions."""

from pathlib import Path


class FeatureFlagError(Exception):
    """Base exception for feature flag operations."""

    pass


class FeatureFlagValidationError(FeatureFlagError):
    """Raised when a feature flags document has the wrong shape or invalid YAML."""

    pass


class FeatureFlagNotFoundError(FeatureFlagError):
    """Raised when the feature flags source file does not exist."""

    def __init__(self, path: Path | str):
        self.path = Path(path)
        super().__init__(f"Feature flags file not found: {self.path}")


class FeatureFlagEnvironmentError(FeatureFlagError):
    """Raised when a file-system operation runs outside a server environment."""

    pass
