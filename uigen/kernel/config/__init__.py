"""Configuration loading and management for uigen."""

from uigen.kernel.config.loader import ConfigLoader, get_default_config, load_config
from uigen.kernel.config.models import AgentConfig, LoggingConfig, MockModelConfig, UIGenConfig

__all__ = [
    "AgentConfig",
    "ConfigLoader",
    "LoggingConfig",
    "MockModelConfig",
    "UIGenConfig",
    "get_default_config",
    "load_config",
]
