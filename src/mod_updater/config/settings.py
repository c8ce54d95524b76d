"""Configuration settings for the mod updater."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field, ValidationError, validator

from .. import __version__
from ..exceptions import ConfigError
from ..utils.file_utils import FileHelper

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "mod-updater" / "config.yaml"

ENV_PREFIX = "MOD_UPDATER_"


def _default_backup_root() -> Path:
    return Path.home() / "AxolotlSMP_Backups"


class UpdaterConfig(BaseModel):
    """Settings for one mod server and its local mirror."""

    # Remote server
    base_url: str = "https://axolotlsmp.com"
    manifest_endpoint: str = "/api/mods"
    content_endpoint: str = "/cdn"
    request_timeout: float = 30.0  # seconds
    user_agent: str = f"mod-updater/{__version__}"

    # Local backup
    backup_root: Path = Field(default_factory=_default_backup_root)
    backup_name: str = "mods_backup"

    # Instance discovery
    instance_keyword: str = "axolotlsmp"

    # Logging
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    @validator('base_url')
    def validate_base_url(cls, v):
        if not v.startswith(('http://', 'https://')):
            raise ValueError('base_url must start with http:// or https://')
        return v.rstrip('/')

    @validator('manifest_endpoint', 'content_endpoint')
    def validate_endpoint(cls, v):
        return '/' + v.strip('/')

    @validator('request_timeout')
    def validate_timeout(cls, v):
        if v <= 0:
            raise ValueError('request_timeout must be positive')
        return v

    @validator('backup_root', 'log_file')
    def expand_user(cls, v):
        return Path(v).expanduser() if v is not None else v

    @validator('backup_name')
    def validate_backup_name(cls, v):
        if not FileHelper.is_plain_filename(v):
            raise ValueError('backup_name must be a plain directory name')
        return v

    @validator('instance_keyword')
    def validate_instance_keyword(cls, v):
        if not v.strip():
            raise ValueError('instance_keyword must not be empty')
        return v.strip()

    @validator('log_level')
    def validate_log_level(cls, v):
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f'unknown log level: {v}')
        return level

    @property
    def manifest_url(self) -> str:
        return f"{self.base_url}{self.manifest_endpoint}"

    @property
    def content_url(self) -> str:
        return f"{self.base_url}{self.content_endpoint}"

    @property
    def backup_path(self) -> Path:
        return self.backup_root / self.backup_name

    @classmethod
    def from_yaml(cls, config_path: Union[str, Path]) -> "UpdaterConfig":
        """Load configuration from YAML file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

        if not isinstance(config_data, dict):
            raise ConfigError(f"Configuration in {config_path} must be a mapping")

        try:
            return cls(**config_data)
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {config_path}: {e}") from e

    def to_yaml(self, config_path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        config_path = Path(config_path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, indent=2)

    def to_dict(self) -> Dict[str, Any]:
        """Plain dictionary with paths rendered as strings."""
        data = self.dict(exclude_none=True)
        return {key: str(value) if isinstance(value, Path) else value
                for key, value in data.items()}

    @classmethod
    def from_env(cls) -> "UpdaterConfig":
        """Load configuration from environment variables."""
        env_map = {
            'base_url': os.getenv(f'{ENV_PREFIX}BASE_URL'),
            'backup_root': os.getenv(f'{ENV_PREFIX}BACKUP_ROOT'),
            'instance_keyword': os.getenv(f'{ENV_PREFIX}INSTANCE_KEYWORD'),
            'log_level': os.getenv(f'{ENV_PREFIX}LOG_LEVEL'),
        }
        try:
            return cls(**{key: value for key, value in env_map.items() if value})
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in environment: {e}") from e

    @classmethod
    def load(cls, config_path: Optional[Union[str, Path]] = None) -> "UpdaterConfig":
        """Load from a YAML file when one exists, otherwise from the environment."""
        path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
        if path.exists():
            return cls.from_yaml(path)
        if config_path:
            raise FileNotFoundError(f"Configuration file not found: {path}")
        return cls.from_env()
