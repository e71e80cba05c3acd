"""Configuration management for the font directory generator."""

from pathlib import Path
from typing import Literal

import requests
import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import (
    ConfigFileNotFoundError,
    ConfigLoadError,
    ConfigurationError,
    EmptyConfigFileError,
    InvalidYamlError,
)

DEFAULT_BASE_URL = "http://fonts.gstatic.com/s/f/directory"
DEFAULT_INITIAL_VERSION = 7


class DirectoryConfig(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="FONTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )
    """Remote directory discovery and download configuration."""

    # Remote directory location
    base_url: str = Field(DEFAULT_BASE_URL, description="Directory URL prefix")
    extension: str = Field(".pb", description="Directory file extension")
    initial_version: int = Field(
        DEFAULT_INITIAL_VERSION, ge=0, description="First directory version to probe"
    )

    # HTTP settings
    probe_method: Literal["GET", "HEAD"] = Field("GET", description="Existence check method")
    timeout_seconds: float = Field(60.0, gt=0.0, description="Transport timeout")
    chunk_size: int = Field(8192, ge=1, description="Download chunk size")
    user_agent: str = Field("font-directory/1.0.0", description="User-Agent header")

    # Discovery
    gap_check_versions: int = Field(
        0, ge=0, description="Versions to look past the last one for gaps (0 disables)"
    )

    # Output
    output_path: Path = Field(Path("src/data.json"), description="Generated data file")
    show_progress: bool = Field(True, description="Show download progress bar")
    log_level: str = Field("INFO", description="Log level")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v):
        """Validate base URL format."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("Base URL must start with https:// or http://")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Normalize log level names."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @classmethod
    def from_yaml(cls, config_path: str | Path) -> "DirectoryConfig":
        """Load configuration from YAML file."""
        return load_config_from_yaml(config_path, cls)

    @classmethod
    def from_env_and_yaml(
        cls, yaml_path: str | Path | None = None, env_file: str = ".env"
    ) -> "DirectoryConfig":
        """Load configuration from environment variables and optionally override with YAML."""
        if yaml_path and Path(yaml_path).exists():
            return cls.from_yaml(yaml_path)
        # Load from environment variables/.env file
        return cls(_env_file=env_file if Path(env_file).exists() else None)


def load_config_from_yaml(config_path: str | Path, config_class: type) -> BaseSettings:
    """Load configuration from YAML file."""
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigFileNotFoundError(str(config_path))

    try:
        with config_path.open() as f:
            config_data = yaml.safe_load(f)

        if config_data is None:
            raise EmptyConfigFileError(str(config_path))

        # For BaseSettings classes, we can pass the data directly
        # but we need to disable env file loading for this specific instance
        if issubclass(config_class, BaseSettings):

            class TempConfig(config_class):
                model_config = SettingsConfigDict(
                    env_file=None,  # Don't load .env for YAML-based configs
                    case_sensitive=False,
                    extra="ignore",
                )

            return TempConfig(**config_data)
        return config_class(**config_data)

    except ConfigurationError:
        raise
    except yaml.YAMLError as e:
        raise InvalidYamlError(str(config_path), str(e)) from e
    except Exception as e:
        raise ConfigLoadError(str(e)) from e


def create_session(config: DirectoryConfig) -> requests.Session:
    """Create HTTP session shared by the prober and the fetcher."""
    session = requests.Session()
    session.headers.update({"User-Agent": config.user_agent})
    return session
