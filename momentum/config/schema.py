"""Configuration schema using Pydantic."""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StorageConfig(Base):
    """Where the entity collections are persisted."""
    backend: Literal["file", "memory"] = "file"
    data_dir: str = "~/.momentum/data"
    key_prefix: str = "momentum"  # collection keys become <prefix>_tasks etc.

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()


class LifecycleConfig(Base):
    """Status transition policy."""
    enforce_transitions: bool = False  # False: illegal moves are logged, not rejected


class LoggingConfig(Base):
    """Console and file sinks."""
    level: str = "SUCCESS"          # console threshold
    log_file: Optional[str] = None  # defaults to ~/.momentum/momentum.log
    file_enabled: bool = True
    file_level: str = "DEBUG"
    rotation: str = "10 MB"
    retention: str = "1 week"

    @property
    def log_path(self) -> Path:
        if self.log_file:
            return Path(self.log_file).expanduser()
        return Path.home() / ".momentum" / "momentum.log"


class Config(BaseSettings):
    """Root configuration for momentum."""

    model_config = SettingsConfigDict(
        env_prefix="MOMENTUM_",
        env_nested_delimiter="__",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    storage: StorageConfig = Field(default_factory=StorageConfig)
    lifecycle: LifecycleConfig = Field(default_factory=LifecycleConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
