"""Configuration loading utilities."""
from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .exceptions import ConfigError
from .paths import local_config_path, runtime_config_dir

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class TieBreak(str, Enum):
    """How to choose between candidate secrets with equal tallies."""

    FIRST_SEEN = "first_seen"
    SMALLEST = "smallest"


class LoggingConfig(BaseModel):
    level: str = Field(default="WARNING", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level: {value}")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class ConsensusConfig(BaseModel):
    tie_break: TieBreak = Field(
        default=TieBreak.FIRST_SEEN,
        description="Policy for equally frequent candidate secrets",
    )
    strict_loading: bool = Field(
        default=False,
        description="Abort on the first undecodable share instead of dropping it",
    )


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    consensus: ConsensusConfig = Field(default_factory=ConsensusConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield local_config_path()
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    if path is not None and not path.is_file():
        raise ConfigError(f"Configuration file not found: {path}")
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                try:
                    data = yaml.safe_load(handle) or {}
                except yaml.YAMLError as exc:
                    raise ConfigError(f"Malformed YAML in {candidate}: {exc}") from exc
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ConfigError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    with target.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), handle, sort_keys=False)


__all__ = [
    "AppConfig",
    "ConsensusConfig",
    "DEFAULT_CONFIG",
    "LoggingConfig",
    "TieBreak",
    "config_search_paths",
    "dump_default_config",
    "load_config",
]
