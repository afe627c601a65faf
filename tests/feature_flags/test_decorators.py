"""
Tests for the feature_flag decorator.
"""

import json

import pytest

from ffxl.decorators import feature_flag
from ffxl.evaluator import FeatureFlagEvaluator
from ffxl.store import ConfigStore


@pytest.fixture(autouse=True)
def sample_config(monkeypatch, sample_features):
    monkeypatch.setenv("FFXL_CONFIG", json.dumps({"features": sample_features}))


class TestSyncDecorator:
    def test_runs_when_enabled(self):
        @feature_flag("test_feature_enabled")
        def work(x):
            return x * 2

        assert work(21) == 42

    def test_skipped_when_disabled(self):
        calls = []

        @feature_flag("test_feature_disabled")
        def work():
            calls.append(1)
            return "ran"

        assert work() is None
        assert calls == []

    def test_default_forces_run(self):
        @feature_flag("test_feature_disabled", default=True)
        def work():
            return "ran"

        assert work() == "ran"

    def test_feature_user_is_consumed(self):
        """Test that _feature_user selects the user and is not forwarded."""

        @feature_flag("test_feature_user_specific")
        def work(**kwargs):
            return kwargs

        assert work(_feature_user={"userId": "user-123"}, extra=1) == {"extra": 1}
        assert work(_feature_user={"userId": "user-999"}) is None
        assert work() is None

    def test_preserves_metadata(self):
        @feature_flag("test_feature_enabled")
        def documented():
            """Docstring."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring."

    def test_custom_evaluator(self):
        evaluator = FeatureFlagEvaluator(ConfigStore())

        @feature_flag("test_feature_enabled", evaluator=evaluator)
        def work():
            return "ran"

        assert work() == "ran"


class TestAsyncDecorator:
    @pytest.mark.asyncio
    async def test_runs_when_enabled(self):
        @feature_flag("test_feature_enabled")
        async def work():
            return "ran"

        assert await work() == "ran"

    @pytest.mark.asyncio
    async def test_skipped_when_disabled(self):
        @feature_flag("test_feature_disabled")
        async def work():
            return "ran"

        assert await work() is None

    @pytest.mark.asyncio
    async def test_feature_user(self):
        @feature_flag("test_feature_combined")
        async def work(value):
            return value

        assert await work("x", _feature_user={"userId": "user-789"}) == "x"
        assert await work("x") is None
