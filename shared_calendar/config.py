# Copyright 2026 Dell Inc. or its subsidiaries. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Runtime configuration for the shared calendar service.

Settings are read from an optional YAML file and then overridden by
environment variables::

    store: sql                      # SHARED_CALENDAR_STORE (memory | sql)
    database_url: sqlite:///calendar.db  # SHARED_CALENDAR_DATABASE_URL
    database_echo: false            # SHARED_CALENDAR_DATABASE_ECHO
    log_level: INFO                 # SHARED_CALENDAR_LOG_LEVEL
    update_retry_limit: 3           # SHARED_CALENDAR_UPDATE_RETRY_LIMIT
    cors_origins: []                # SHARED_CALENDAR_CORS_ORIGINS (comma separated)
    host: 0.0.0.0                   # SHARED_CALENDAR_HOST
    port: 5000                      # SHARED_CALENDAR_PORT

The YAML file path comes from ``SHARED_CALENDAR_CONFIG``.
"""

import logging
import os
from pathlib import Path
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Type

import yaml
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import (
    BaseSettings,
    NoDecode,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
)

logger = logging.getLogger(__name__)

ENV_PREFIX = "SHARED_CALENDAR_"
CONFIG_PATH_ENV = "SHARED_CALENDAR_CONFIG"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

# YAML values for the settings source, populated by load_settings
_yaml_config: Dict[str, Any] = {}


class ConfigurationError(Exception):
    """Exception raised when configuration is missing or invalid."""


class YamlConfigSettingsSource(PydanticBaseSettingsSource):
    """Settings source returning values read from the YAML config file."""

    def get_field_value(self, field: Any, field_name: str) -> Tuple[Any, str, bool]:
        value = _yaml_config.get(field_name)
        return value, field_name, False

    def __call__(self) -> Dict[str, Any]:
        return dict(_yaml_config)


class Settings(BaseSettings):
    """Service settings.

    Priority, highest first: constructor arguments, ``SHARED_CALENDAR_*``
    environment variables, the YAML file, then the defaults below.
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        case_sensitive=False,
        extra="forbid",
        frozen=True,
    )

    store: Literal["memory", "sql"] = Field(default="memory", description="Storage backend")
    database_url: str = Field(
        default="sqlite:///shared_calendar.db",
        description="SQLAlchemy URL used by the sql store",
    )
    database_echo: bool = Field(default=False, description="Log emitted SQL statements")
    log_level: str = Field(default="INFO", description="Root logging level")
    update_retry_limit: int = Field(
        default=3,
        description="Attempts for updates hitting version conflicts",
    )
    cors_origins: Annotated[List[str], NoDecode] = Field(
        default_factory=list,
        description="Origins allowed by the CORS middleware",
    )
    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=5000, description="Bind port")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("update_retry_limit")
    @classmethod
    def validate_retry_limit(cls, value: int) -> int:
        if value < 1:
            raise ValueError("update_retry_limit must be at least 1")
        return value

    @field_validator("port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError(f"Invalid port: {value}")
        return value

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_origins(cls, value: Any) -> Any:
        """Accept a comma separated string as well as a list."""
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(settings_cls),
        )


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as handle:
            content = yaml.safe_load(handle) or {}
    except FileNotFoundError as exc:
        raise ConfigurationError(f"Config file not found: {path}") from exc
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Config file is not valid YAML: {path}") from exc
    if not isinstance(content, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {path}")
    return content


def load_settings(config_path: Optional[str] = None) -> Settings:
    """Build Settings from the YAML file and environment variables.

    Args:
        config_path: YAML file to read; defaults to ``$SHARED_CALENDAR_CONFIG``.

    Returns:
        Validated Settings.

    Raises:
        ConfigurationError: If the file or any value is invalid.
    """
    global _yaml_config
    config_path = config_path or os.environ.get(CONFIG_PATH_ENV)

    values: Dict[str, Any] = {}
    if config_path:
        values = _read_yaml(Path(config_path))
        logger.info("Loaded configuration from %s", config_path)

    unknown = set(values) - set(Settings.model_fields)
    if unknown:
        raise ConfigurationError(f"Unknown configuration keys: {sorted(unknown)}")

    _yaml_config = values
    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid configuration: {exc}") from exc
    finally:
        _yaml_config = {}
