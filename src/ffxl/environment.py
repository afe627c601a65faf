"""Execution context detection."""

import sys
from enum import Enum

from pydantic import ValidationError

from ffxl.settings import Settings, get_settings

# Hosts without a real file system (Pyodide, WASI runtimes)
_BROWSER_PLATFORMS = frozenset({"emscripten", "wasi"})


class RuntimeEnvironment(str, Enum):
    """Where ffxl is running."""

    SERVER = "server"
    BROWSER = "browser"


def detect_environment() -> RuntimeEnvironment:
    """Return BROWSER on WebAssembly hosts, SERVER everywhere else."""
    if sys.platform in _BROWSER_PLATFORMS:
        return RuntimeEnvironment.BROWSER
    return RuntimeEnvironment.SERVER


def is_development(settings: Settings | None = None) -> bool:
    """Check whether development mode is switched on.

    Broken settings count as production so logging keeps working.
    """
    if settings is None:
        try:
            settings = get_settings()
        except ValidationError:
            return False
    return settings.is_development
