"""
Pydantic models for partlog configuration.

The ``logging`` section mirrors the node configuration files: a ``root``
logger plus any number of dotted logger names as sibling keys.

    logging:
      root:
        level: Info
        console: true
        file: log/root.log
      agora.network:
        level: Trace
        console: false
        file: log/network.log
"""

from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator

from ..core.levels import Severity

LevelName = Literal["trace", "debug", "info", "warn", "error", "fatal", "none"]

_LEVEL_ALIASES = {"warning": "warn", "critical": "fatal"}


class LoggerConfig(BaseModel):
    """Configuration of one logger (partition)."""

    level: LevelName | None = Field(
        default=None,
        description=(
            "Minimum level, case insensitive. 'none' disables the logger, "
            "unset inherits from the parent logger."
        ),
    )
    console: bool = Field(default=False, description="Write to stderr")
    file: Path | None = Field(
        default=None,
        description="Output file, relative to data_dir unless absolute",
    )
    propagate: bool | None = Field(
        default=None,
        description=(
            "Forward records to the parent logger's outputs. "
            "Defaults to False when the logger writes its own file."
        ),
    )

    model_config = {"extra": "forbid"}

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        if isinstance(value, Severity):
            return value.name.lower()
        if isinstance(value, str):
            normalized = value.strip().lower()
            return _LEVEL_ALIASES.get(normalized, normalized)
        return value

    @property
    def severity(self) -> Severity | None:
        """Minimum severity, or None when the logger is disabled or inherits."""
        if self.level is None or self.level == "none":
            return None
        return Severity.parse(self.level)

    @property
    def effective_propagate(self) -> bool:
        if self.propagate is not None:
            return self.propagate
        return self.file is None


def _default_root() -> LoggerConfig:
    return LoggerConfig(level="info", console=True)


class LoggingConfig(BaseModel):
    """The ``logging`` section.

    Keys other than the reserved ones below are logger names and are
    collected into ``loggers``.
    """

    root: LoggerConfig = Field(default_factory=_default_root)
    loggers: dict[str, LoggerConfig] = Field(default_factory=dict)
    peer_id: str | None = Field(
        default=None,
        description="Identifier bound to every record (e.g. the node's public key)",
    )
    timestamps: bool = True

    model_config = {"extra": "forbid"}

    @model_validator(mode="before")
    @classmethod
    def _collect_loggers(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        reserved = set(cls.model_fields)
        loggers = dict(data.get("loggers") or {})
        result: dict[str, Any] = {}
        for key, value in data.items():
            if key in reserved:
                result[key] = value
            else:
                loggers[key] = value
        result["loggers"] = loggers
        # Root defaults: info level, console output
        if isinstance(result.get("root"), dict):
            result["root"] = {"console": True, "level": "info", **result["root"]}
        return result

    @field_validator("loggers")
    @classmethod
    def _check_names(cls, loggers: dict[str, LoggerConfig]) -> dict[str, LoggerConfig]:
        for name in loggers:
            if not name or name.startswith(".") or name.endswith(".") or ".." in name:
                raise ValueError(f"Invalid logger name: {name!r}")
        return loggers


class AppConfig(BaseModel):
    """Root configuration.

    Unknown top-level sections are ignored so a complete node
    configuration file can be loaded directly.
    """

    data_dir: Path = Path(".")
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"extra": "ignore"}
