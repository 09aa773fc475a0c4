"""Configuration loader for uigen.

Supports two config sources:

1. **kind: Config YAML**: loaded via explicit path or ``UIGEN_CONFIG_PATH``.
2. **pyproject.toml [tool.uigen]**: auto-discovery fallback.

When neither exists the defaults are used. ``UIGEN_*`` environment variables
override file values in both cases.
"""

from __future__ import annotations

import os
import re
import tomllib
from pathlib import Path
from typing import Any

import yaml

from uigen.kernel.config.models import AgentConfig, LoggingConfig, MockModelConfig, UIGenConfig
from uigen.kernel.exceptions import ConfigurationError
from uigen.kernel.logging import get_logger

logger = get_logger(__name__)

_TRUTHY_VALUES = frozenset({"true", "1", "yes", "on", "enabled"})
_FALSY_VALUES = frozenset({"false", "0", "no", "off", "disabled"})


def _parse_bool_env(value: str) -> bool:
    """Parse a boolean environment variable value.

    Raises
    ------
    ValueError
        If value is not a recognized boolean string
    """
    normalized = value.lower().strip()
    if normalized in _TRUTHY_VALUES:
        return True
    if normalized in _FALSY_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")


class ConfigLoader:
    """Loads uigen configuration from YAML or pyproject.toml."""

    ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

    def load(self, path: str | Path | None = None) -> UIGenConfig:
        """Load configuration, falling back to defaults if no file is found.

        Raises
        ------
        ConfigurationError
            If an explicit *path* is missing or the file content is invalid.
        """
        config_path = self._find_config_file(path)
        if config_path is None:
            logger.debug("No configuration file found, using defaults")
            return self._parse_config({})

        logger.info("Loading configuration from {path}", path=config_path)
        if config_path.suffix in (".yaml", ".yml"):
            data = self._load_yaml(config_path)
        else:
            data = self._load_toml(config_path)
        return self._parse_config(self._substitute_env_vars(data))

    def _find_config_file(self, path: str | Path | None) -> Path | None:
        """Find the configuration file.

        Discovery order: explicit path, ``UIGEN_CONFIG_PATH``, then
        ``pyproject.toml`` in the working directory if it has ``[tool.uigen]``.
        """
        if path:
            config_path = Path(path)
            if not config_path.exists():
                raise ConfigurationError("config", f"file not found: {config_path}")
            return config_path

        if env_path := os.getenv("UIGEN_CONFIG_PATH"):
            config_path = Path(env_path)
            if config_path.exists():
                return config_path
            logger.warning("UIGEN_CONFIG_PATH set but file not found: {}", config_path)

        pyproject = Path("pyproject.toml")
        if pyproject.exists():
            with pyproject.open("rb") as f:
                data = tomllib.load(f)
            if "uigen" in data.get("tool", {}):
                return pyproject
        return None

    def _load_yaml(self, config_path: Path) -> dict[str, Any]:
        with config_path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ConfigurationError(
                "config", f"expected a mapping, got {type(data).__name__} in {config_path.name}"
            )
        kind = data.get("kind")
        if kind != "Config":
            raise ConfigurationError(
                "config", f"YAML config must use 'kind: Config', got 'kind: {kind}'"
            )
        spec = data.get("spec", {})
        if not isinstance(spec, dict):
            raise ConfigurationError("config", "'spec' field in kind: Config must be a mapping")
        return spec

    def _load_toml(self, config_path: Path) -> dict[str, Any]:
        with config_path.open("rb") as f:
            data = tomllib.load(f)
        if "tool" in data and "uigen" in data["tool"]:
            return data["tool"]["uigen"]
        if config_path.name == "pyproject.toml":
            logger.warning("No [tool.uigen] section found in pyproject.toml, using defaults")
            return {}
        return data

    def _substitute_env_vars(self, data: Any) -> Any:
        """Recursively replace ``${VAR}`` references with environment values."""
        if isinstance(data, str):

            def replacer(match: re.Match[str]) -> str:
                value = os.environ.get(match.group(1))
                return match.group(0) if value is None else value

            return self.ENV_VAR_PATTERN.sub(replacer, data)
        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}
        if isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]
        return data

    def _parse_config(self, data: dict[str, Any]) -> UIGenConfig:
        try:
            return UIGenConfig(
                logging=self._parse_logging_config(dict(data.get("logging") or {})),
                model=self._parse_model_config(dict(data.get("model") or {})),
                agent=self._parse_agent_config(dict(data.get("agent") or {})),
            )
        except (TypeError, ValueError) as exc:
            raise ConfigurationError("config", str(exc)) from exc

    def _parse_logging_config(self, logging_data: dict[str, Any]) -> LoggingConfig:
        """Parse logging configuration with environment variable overrides.

        - UIGEN_LOG_LEVEL: Log level
        - UIGEN_LOG_FORMAT: Output format
        - UIGEN_LOG_FILE: Optional file path for log output
        - UIGEN_LOG_COLOR: Use color output (true/false)
        """
        if env_level := os.getenv("UIGEN_LOG_LEVEL"):
            logging_data["level"] = env_level.upper()
        if env_format := os.getenv("UIGEN_LOG_FORMAT"):
            logging_data["format"] = env_format.lower()
        if env_file := os.getenv("UIGEN_LOG_FILE"):
            logging_data["output_file"] = env_file
        if env_color := os.getenv("UIGEN_LOG_COLOR"):
            try:
                logging_data["use_color"] = _parse_bool_env(env_color)
            except ValueError as e:
                logger.warning("Invalid UIGEN_LOG_COLOR value: {}", e)

        if "level" in logging_data:
            logging_data["level"] = str(logging_data["level"]).upper()
        return LoggingConfig(**logging_data)

    def _parse_model_config(self, model_data: dict[str, Any]) -> MockModelConfig:
        if env_scale := os.getenv("UIGEN_MODEL_DELAY_SCALE"):
            model_data["delay_scale"] = env_scale
        if "delay_scale" in model_data:
            model_data["delay_scale"] = float(model_data["delay_scale"])
        return MockModelConfig(**model_data)

    def _parse_agent_config(self, agent_data: dict[str, Any]) -> AgentConfig:
        if env_steps := os.getenv("UIGEN_MAX_STEPS"):
            agent_data["max_steps"] = env_steps
        if "max_steps" in agent_data:
            agent_data["max_steps"] = int(agent_data["max_steps"])
        return AgentConfig(**agent_data)


def load_config(path: str | Path | None = None) -> UIGenConfig:
    """Load configuration using the default :class:`ConfigLoader`."""
    return ConfigLoader().load(path)


def get_default_config() -> UIGenConfig:
    """Return the built-in defaults without reading any file."""
    return UIGenConfig()


__all__ = ["ConfigLoader", "get_default_config", "load_config"]
