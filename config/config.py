import os
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Dict, Optional, Any
from dotenv import load_dotenv

from pkg.logger.type import LoggerConfig
from pkg.redis.constant import (
    DEFAULT_DB,
    DEFAULT_HOST,
    DEFAULT_MAX_RETRIES,
    DEFAULT_NAME_PREFIX,
    DEFAULT_PORT,
    RESERVED_HOST_CHAR,
)
from pkg.redis.type import ConnectionOptions


@dataclass
class RedisConfig:
    """Default Redis connection settings.

    Used to fill whatever a caller leaves out of its connection options.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    db: int = DEFAULT_DB
    username: Optional[str] = None
    password: Optional[str] = None
    max_retries: int = DEFAULT_MAX_RETRIES

    def default_options(self) -> ConnectionOptions:
        return ConnectionOptions(
            host=self.host,
            port=self.port,
            db=self.db,
            username=self.username,
            password=self.password,
            max_retries=self.max_retries,
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    colorize: bool = True
    service_name: str = "redis-conncache"

    def logger_config(self) -> LoggerConfig:
        return LoggerConfig(
            level=self.level,
            colorize=self.colorize,
            service_name=self.service_name,
        )


@dataclass
class CacheConfig:
    """Connection cache configuration."""

    # Must contain "@", which no host:port key can
    name_prefix: str = DEFAULT_NAME_PREFIX
    log_events: bool = True


@dataclass
class Config:
    """Main configuration container."""

    redis: RedisConfig = field(default_factory=RedisConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)


class ConfigLoader:
    """Viper-style configuration loader.

    Sources, lowest priority first:
    1. ``config.yaml`` / ``config.yml`` from the first path that has one
    2. ``.env`` files in the config paths
    3. Environment variables, e.g. CONNCACHE_REDIS_HOST for ``redis.host``
    """

    env_prefix = "CONNCACHE"

    def __init__(self, config_paths: Optional[list] = None):
        paths = config_paths or [".", "config", "/etc/conncache"]
        self.config_paths = [Path(p) for p in paths]
        self._raw_config: Dict[str, Any] = {}

    def read_config(self) -> Config:
        """Read configuration from all sources.

        Returns:
            Config object with all settings
        """
        self._raw_config = self._read_yaml()
        for env_path in self._existing(".env"):
            load_dotenv(env_path, override=True)
        config = self._build_config()
        self._validate(config)
        return config

    def _existing(self, *names: str) -> list:
        return [
            path / name
            for path in self.config_paths
            for name in names
            if (path / name).exists()
        ]

    def _read_yaml(self) -> Dict[str, Any]:
        files = self._existing("config.yaml", "config.yml")
        if not files:
            return {}
        with open(files[0], "r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _get_value(self, key: str, default: Any = None) -> Any:
        """Get value with priority: env > yaml > default.

        Env strings are converted to the type of ``default`` for bool and int.
        """
        env_value = os.getenv(f"{self.env_prefix}_{key.replace('.', '_').upper()}")
        if env_value is not None:
            if isinstance(default, bool):
                return env_value.lower() in ("true", "1", "yes")
            if isinstance(default, int):
                try:
                    return int(env_value)
                except ValueError:
                    return default
            return env_value

        section, _, name = key.partition(".")
        value = (self._raw_config.get(section) or {}).get(name)
        return default if value is None else value

    def _build_config(self) -> Config:
        return Config(
            redis=RedisConfig(
                host=self._get_value("redis.host", DEFAULT_HOST),
                port=self._get_value("redis.port", DEFAULT_PORT),
                db=self._get_value("redis.db", DEFAULT_DB),
                username=self._get_value("redis.username", None),
                password=self._get_value("redis.password", None),
                max_retries=self._get_value("redis.max_retries", DEFAULT_MAX_RETRIES),
            ),
            logging=LoggingConfig(
                level=self._get_value("logging.level", "INFO"),
                colorize=self._get_value("logging.colorize", True),
                service_name=self._get_value("logging.service_name", "redis-conncache"),
            ),
            cache=CacheConfig(
                name_prefix=self._get_value("cache.name_prefix", DEFAULT_NAME_PREFIX),
                log_events=self._get_value("cache.log_events", True),
            ),
        )

    def _validate(self, config: Config) -> None:
        errors = []

        if not config.redis.host:
            errors.append("redis.host is required")
        if not 0 < config.redis.port <= 65535:
            errors.append("redis.port must be between 1 and 65535")
        if config.redis.db < 0:
            errors.append("redis.db must be non-negative")
        if RESERVED_HOST_CHAR not in config.cache.name_prefix:
            errors.append(f"cache.name_prefix must contain '{RESERVED_HOST_CHAR}'")
        if RESERVED_HOST_CHAR in config.redis.host:
            errors.append(f"redis.host must not contain '{RESERVED_HOST_CHAR}'")

        if errors:
            raise ValueError(
                f"Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


def load_config(config_paths: Optional[list] = None) -> Config:
    """Load configuration.

    Returns:
        Config object
    """
    return ConfigLoader(config_paths).read_config()
