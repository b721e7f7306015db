"""Configuration manager for settings stored as JSON."""

import json
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import (
    ConfigurationError,
    FileSystemError,
    HelperKitError,
    InvalidConfigError,
    MissingConfigError,
)
from .logging import LOG_LEVELS, configure_from, get_logger, log_call
from .paths import CONFIG_PATH

logger = get_logger(__name__)

ENV_OVERRIDES = {
    "HELPERKIT_DNS_TIMEOUT": ("dns", "timeout", float),
    "HELPERKIT_LOG_LEVEL": ("logging", "log_level", str),
}


class DNSConfig(BaseModel):
    """Pydantic model for DNS lookup settings."""

    model_config = ConfigDict(validate_assignment=True)

    timeout: float = 5.0  # in seconds, whole lookup
    nameservers: list[str] = Field(default_factory=list)  # empty means system resolver


class LoggingConfig(BaseModel):
    """Pydantic model for logging settings."""

    model_config = ConfigDict(validate_assignment=True)

    log_level: str = "INFO"
    console_level: str = "WARNING"
    log_to_file: bool = False
    max_file_size: int = 5_242_880  # 5 MB
    backup_count: int = 5

    @field_validator("log_level", "console_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        if value.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown logging level: {value!r}")
        return value.upper()


class AppConfig(BaseModel):
    """Pydantic model for overall configuration."""

    model_config = ConfigDict(validate_assignment=True)

    version: str = "0.1.0"
    dns: DNSConfig = Field(default_factory=DNSConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages helperkit configuration."""

    _instance = None
    _initialized = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
        return cls._instance

    def __init__(self, config_path: Optional[Path] = None):
        if not ConfigManager._initialized:
            self.path = Path(config_path) if config_path else CONFIG_PATH
            self.config = self._load_config()
            self._apply_env_overrides()
            configure_from(self.config.logging.model_dump())
            logger.debug(f"Configuration loaded from {self.path}")
            ConfigManager._initialized = True

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the loaded configuration so the next call reloads it."""
        cls._instance = None
        cls._initialized = False

    def _load_config(self) -> AppConfig:
        """Load configuration from file, or use defaults if not present."""

        if not self.path.exists():
            logger.debug("No config file found, using default configuration.")
            return AppConfig()

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
            config = AppConfig(**data)
            logger.debug("Configuration successfully loaded and validated.")
            return config

        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse config file: {e}")
            raise InvalidConfigError(f"Configuration file is not valid JSON: {str(e)}") from e
        except ValidationError as e:
            logger.error(f"Failed to validate config file: {e}")
            raise InvalidConfigError(f"Configuration data does not match expected schema: {str(e)}") from e
        except OSError as e:
            raise FileSystemError(f"Failed to read configuration file: {self.path}") from e

    def _apply_env_overrides(self) -> None:
        for var, (section, key, cast) in ENV_OVERRIDES.items():
            raw = os.environ.get(var)
            if raw is None:
                continue
            try:
                setattr(getattr(self.config, section), key, cast(raw))
            except (ValueError, ValidationError) as e:
                raise InvalidConfigError(f"Invalid value for {var}: {raw!r}") from e

    @log_call
    def save(self, config: Optional[AppConfig] = None) -> Path:
        """Write the current configuration to file."""

        config = config or self.config

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(config.model_dump(), f, indent=2, ensure_ascii=False)
            logger.debug("Configuration successfully saved.")
            return self.path
        except OSError as e:
            raise FileSystemError(f"Failed to write configuration file: {str(e)}") from e

    def get_config(self, key_path: str, default: Any = None) -> Any:
        """Get a configuration value using a dot-separated key path."""

        obj: Any = self.config
        for key in key_path.split("."):
            if not hasattr(obj, key):
                return default
            obj = getattr(obj, key)
        return obj

    @log_call
    def set_config(self, key_path: str, value: Any, persist: bool = False):
        """Set a configuration value using a dot-separated key path."""

        try:
            keys = key_path.split(".")
            obj = self.config

            for key in keys[:-1]:
                if not hasattr(obj, key):
                    raise MissingConfigError(f"Configuration path '{key_path}' is invalid: '{key}' not found")
                obj = getattr(obj, key)

            if not hasattr(obj, keys[-1]):
                raise MissingConfigError(f"Configuration key '{keys[-1]}' does not exist in path '{key_path}'")

            setattr(obj, keys[-1], value)

            if keys[0] == "logging":
                configure_from(self.config.logging.model_dump())

            if persist:
                self.save()

            logger.info(f"Config key '{key_path}' updated.")

        except HelperKitError:
            raise
        except ValidationError as e:
            raise InvalidConfigError(f"Invalid value for configuration key '{key_path}': {str(e)}") from e
        except Exception as e:
            raise ConfigurationError(f"Failed to set configuration key '{key_path}': {str(e)}") from e

    @log_call
    def reset_to_defaults(self):
        """Reset configuration to default values."""

        self.config = AppConfig()
        configure_from(self.config.logging.model_dump())
        logger.info("Configuration reset to default values.")


def get_settings() -> AppConfig:
    """Return the active configuration."""
    return ConfigManager().config
