"""Configuration loading for authgate."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from authgate.session_store.models import DEFAULT_TTL_SECONDS
from authgate.session_store.sweeper import DEFAULT_SWEEP_INTERVAL_SECONDS

CONFIG_FILENAME = "authgate.yaml"

# The single account this gateway knows about.
DEFAULT_USERNAME = "admin"
DEFAULT_PASSWORD = "admin"


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""


@dataclass
class ServerConfig:
    """HTTP listener configuration."""

    host: str = "127.0.0.1"
    port: int = 3000


@dataclass
class SessionConfig:
    """Session lifetime and cookie configuration.

    A sweep interval of 0 disables the background sweeper; expired
    sessions are then only evicted when looked up.
    """

    ttl_seconds: int = DEFAULT_TTL_SECONDS
    sweep_interval_seconds: int = DEFAULT_SWEEP_INTERVAL_SECONDS
    cookie_name: str = "session_id"
    cookie_secure: bool = False


@dataclass
class CredentialsConfig:
    """The fixed username/password pair accepted at login."""

    username: str = DEFAULT_USERNAME
    password: str = DEFAULT_PASSWORD

    def __repr__(self) -> str:
        return f"CredentialsConfig(username={self.username!r}, password='***')"


@dataclass
class LoggingConfig:
    """Logging configuration.

    ``dir`` and ``level`` of None fall back to the AUTHGATE_LOG_DIR and
    AUTHGATE_LOG_LEVEL environment variables.
    """

    level: str | None = None
    dir: str | None = None
    console: bool = True


@dataclass
class GatewayConfig:
    """authgate configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    credentials: CredentialsConfig = field(default_factory=CredentialsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GatewayConfig:
        """Create config from dictionary.

        Args:
            data: Configuration dictionary from YAML. Every section is optional.

        Returns:
            Parsed and validated configuration object.

        Raises:
            ConfigError: If a section is malformed or a value is out of range.
        """
        server_data = _section(data, "server")
        server = ServerConfig(
            host=_as_str(server_data.get("host"), "server.host", "127.0.0.1"),
            port=_as_int(server_data.get("port", 3000), "server.port"),
        )

        session_data = _section(data, "session")
        session = SessionConfig(
            ttl_seconds=_as_int(
                session_data.get("ttl_seconds", DEFAULT_TTL_SECONDS), "session.ttl_seconds"
            ),
            sweep_interval_seconds=_as_int(
                session_data.get("sweep_interval_seconds", DEFAULT_SWEEP_INTERVAL_SECONDS),
                "session.sweep_interval_seconds",
            ),
            cookie_name=_as_str(
                session_data.get("cookie_name"), "session.cookie_name", "session_id"
            ),
            cookie_secure=_as_bool(
                session_data.get("cookie_secure"), "session.cookie_secure", False
            ),
        )

        credentials_data = _section(data, "credentials")
        credentials = CredentialsConfig(
            username=_as_str(
                credentials_data.get("username"), "credentials.username", DEFAULT_USERNAME
            ),
            password=_as_str(
                credentials_data.get("password"), "credentials.password", DEFAULT_PASSWORD
            ),
        )

        logging_data = _section(data, "logging")
        logging_config = LoggingConfig(
            level=_as_str(logging_data.get("level"), "logging.level", None),
            dir=_as_str(logging_data.get("dir"), "logging.dir", None),
            console=_as_bool(logging_data.get("console"), "logging.console", True),
        )

        config = cls(
            server=server,
            session=session,
            credentials=credentials,
            logging=logging_config,
        )
        config.validate()
        return config

    def validate(self) -> None:
        """Check value ranges.

        Raises:
            ConfigError: If any value is out of range.
        """
        if not 1 <= self.server.port <= 65535:
            raise ConfigError(f"server.port must be between 1 and 65535, got {self.server.port}")
        if self.session.ttl_seconds <= 0:
            raise ConfigError(
                f"session.ttl_seconds must be positive, got {self.session.ttl_seconds}"
            )
        if self.session.sweep_interval_seconds < 0:
            raise ConfigError(
                "session.sweep_interval_seconds must not be negative, "
                f"got {self.session.sweep_interval_seconds}"
            )
        if not self.session.cookie_name:
            raise ConfigError("session.cookie_name must not be empty")
        if not self.credentials.username:
            raise ConfigError("credentials.username must not be empty")


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ConfigError(f"Section '{name}' must be a mapping, got {type(section).__name__}")
    return section


def _as_bool(value: Any, key: str, default: bool) -> bool:
    # YAML null means "not set"; quoted strings like "false" are rejected
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigError(f"{key} must be true or false, got {value!r}")
    return value


def _as_str(value: Any, key: str, default: str | None) -> str | None:
    if value is None:
        return default
    if isinstance(value, (dict, list)):
        raise ConfigError(f"{key} must be a string, got {type(value).__name__}")
    return str(value)


def _as_int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{key} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"{key} must be an integer, got {value!r}") from e


def load_config(config_path: Path | str) -> GatewayConfig:
    """Load authgate configuration from a YAML file.

    Args:
        config_path: Path to authgate.yaml file.

    Returns:
        Parsed configuration object.

    Raises:
        ConfigError: If file doesn't exist or is invalid.
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return GatewayConfig.from_dict(data)


def find_config(start_path: Path | str | None = None) -> Path:
    """Find authgate.yaml by walking up directory tree.

    Args:
        start_path: Starting directory. Defaults to current directory.

    Returns:
        Path to authgate.yaml file.

    Raises:
        ConfigError: If no config file is found.
    """
    if start_path is None:
        start_path = Path.cwd()
    else:
        start_path = Path(start_path)

    current = start_path.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        if current.parent == current:
            break
        current = current.parent

    raise ConfigError(f"No {CONFIG_FILENAME} found in {start_path} or any parent directory")
