"""Decorator for gating functions behind a feature flag."""

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar

from ffxl.evaluator import FeatureFlagEvaluator, default_evaluator
from ffxl.logging import get_logger

logger = get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def feature_flag(
    flag_name: str,
    default: bool = False,
    evaluator: FeatureFlagEvaluator | None = None,
) -> Callable[[F], F]:
    """Run the decorated function only when the flag is enabled.

    Callers may pass ``_feature_user`` to evaluate the flag for a specific
    user; it is removed before the function is called. A skipped call
    returns None.
    """

    def _enabled(user: Any) -> bool:
        return (evaluator or default_evaluator).is_feature_enabled(flag_name, user) or default

    def decorator(func: F) -> F:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                user = kwargs.pop("_feature_user", None)
                if _enabled(user):
                    return await func(*args, **kwargs)
                logger.debug("feature_flag_skipped", flag=flag_name, function=func.__qualname__)
                return None

            return async_wrapper  # type: ignore[return-value]

        @functools.wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            user = kwargs.pop("_feature_user", None)
            if _enabled(user):
                return func(*args, **kwargs)
            logger.debug("feature_flag_skipped", flag=flag_name, function=func.__qualname__)
            return None

        return sync_wrapper  # type: ignore[return-value]

    return decorator
