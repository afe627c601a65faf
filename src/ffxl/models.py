"""
Feature flag models.

Pydantic models for the feature flags document and for the user identity
passed to evaluation. The serialized form uses the camelCase keys of the
YAML source so a loaded configuration survives the trip through an
environment variable unchanged.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FeatureRule(BaseModel):
    """Rule for a single feature flag."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, strict=True, extra="ignore")

    enabled: bool | None = Field(None, description="Global on/off switch")
    only_for_user_ids: list[str] | None = Field(
        None,
        alias="onlyForUserIds",
        description="When non-empty, restricts the feature to these user ids",
    )
    comment: str | None = Field(None, description="Free text, ignored by evaluation")


class FeatureFlagsConfig(BaseModel):
    """Root configuration: feature name to rule."""

    model_config = ConfigDict(frozen=True, strict=True)

    features: dict[str, FeatureRule] = Field(default_factory=dict)

    @classmethod
    def empty(cls) -> "FeatureFlagsConfig":
        return cls(features={})

    @classmethod
    def from_transport(cls, payload: str | bytes) -> "FeatureFlagsConfig":
        """Rebuild a configuration from its JSON transport string."""
        return cls.model_validate_json(payload)

    def to_transport(self) -> str:
        """Serialize to the JSON transport string read back by the config store."""
        return self.model_dump_json(by_alias=True, exclude_none=True)


class UserIdentity(BaseModel):
    """User context for feature flag evaluation.

    Only ``user_id`` takes part in matching; ``handle`` and ``email`` are
    carried for callers that pass their full user record.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True, extra="ignore")

    user_id: str | None = Field(None, alias="userId")
    handle: str | None = None
    email: str | None = None

    @classmethod
    def coerce(cls, user: "UserIdentity | dict[str, Any] | None") -> "UserIdentity | None":
        """Accept a UserIdentity, a mapping, an object with matching attributes, or None."""
        if user is None or isinstance(user, cls):
            return user
        return cls.model_validate(user)
