"""Configuration data models for uigen."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Literal

from uigen.kernel.exceptions import ConfigurationError

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_LOG_FORMATS = ("console", "json", "structured", "rich")


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging configuration.

    Attributes
    ----------
    level : str, default="WARNING"
        Log level (TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL)
    format : str, default="structured"
        Output format (console, json, structured, rich)
    output_file : str | None, default=None
        Optional file path to write JSON logs to
    use_color : bool, default=True
        Use ANSI color codes (auto-disabled for non-TTY)
    include_timestamp : bool, default=True
        Include timestamp in log output

    Examples
    --------
    TOML configuration:

    ```toml
    [tool.uigen.logging]
    level = "DEBUG"
    format = "rich"
    ```

    Environment variable overrides:

    ```bash
    export UIGEN_LOG_LEVEL=DEBUG
    export UIGEN_LOG_FORMAT=json
    export UIGEN_LOG_FILE=/tmp/uigen.log
    ```
    """

    level: Literal["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["console", "json", "structured", "rich"] = "structured"
    output_file: str | None = None
    use_color: bool = True
    include_timestamp: bool = True

    def __post_init__(self) -> None:
        if self.level not in _LOG_LEVELS:
            raise ConfigurationError("logging", f"unknown level {self.level!r}")
        if self.format not in _LOG_FORMATS:
            raise ConfigurationError("logging", f"unknown format {self.format!r}")


@dataclass(frozen=True, slots=True)
class MockModelConfig:
    """Settings for the scripted mock model.

    Attributes
    ----------
    model_id : str
        Identifier the model reports.
    delay_scale : float
        Multiplier on the per-character streaming delay; 0 disables it.
    """

    model_id: str = "mock-claude-sonnet-4-0"
    delay_scale: float = 1.0

    def __post_init__(self) -> None:
        if not self.model_id:
            raise ConfigurationError("model", "model_id cannot be empty")
        if self.delay_scale < 0:
            raise ConfigurationError("model", f"delay_scale must be >= 0, got {self.delay_scale}")


@dataclass(frozen=True, slots=True)
class AgentConfig:
    """Agent loop limits.

    Attributes
    ----------
    max_steps : int
        Maximum number of model turns in one run.
    """

    max_steps: int = 40

    def __post_init__(self) -> None:
        if self.max_steps < 1:
            raise ConfigurationError("agent", f"max_steps must be >= 1, got {self.max_steps}")


@dataclass(slots=True)
class UIGenConfig:
    """Complete uigen configuration.

    Examples
    --------
    TOML configuration in pyproject.toml:

    ```toml
    [tool.uigen.logging]
    level = "INFO"

    [tool.uigen.model]
    delay_scale = 0.0

    [tool.uigen.agent]
    max_steps = 10
    ```
    """

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    model: MockModelConfig = field(default_factory=MockModelConfig)
    agent: AgentConfig = field(default_factory=AgentConfig)

    def to_dict(self) -> dict[str, Any]:
        return {
            "logging": asdict(self.logging),
            "model": asdict(self.model),
            "agent": asdict(self.agent),
        }


__all__ = ["AgentConfig", "LoggingConfig", "MockModelConfig", "UIGenConfig"]
