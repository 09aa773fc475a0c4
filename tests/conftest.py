"""Configuration file for pytest containing fixtures and configuration.

This module provides fixtures that can be used across multiple test files:
- clean_env: strips uigen and provider environment variables
- vfs: an empty in-memory workspace
- router: a tool router bound to that workspace
"""

import pytest

from uigen.drivers.vfs import InMemoryVFS
from uigen.stdlib.tools import WorkspaceToolRouter

_ENV_VARS = (
    "ANTHROPIC_API_KEY",
    "UIGEN_CONFIG_PATH",
    "UIGEN_LOG_LEVEL",
    "UIGEN_LOG_FORMAT",
    "UIGEN_LOG_FILE",
    "UIGEN_LOG_COLOR",
    "UIGEN_MODEL_DELAY_SCALE",
    "UIGEN_MAX_STEPS",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's environment out of config and model selection."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def vfs() -> InMemoryVFS:
    """Fixture providing an empty workspace filesystem."""
    return InMemoryVFS()


@pytest.fixture
def router(vfs: InMemoryVFS) -> WorkspaceToolRouter:
    """Fixture providing a tool router bound to the workspace."""
    return WorkspaceToolRouter(vfs)
