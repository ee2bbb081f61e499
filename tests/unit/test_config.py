"""Unit tests for configuration loading."""

from pathlib import Path
from textwrap import dedent

import pytest

from authgate.config import (
    ConfigError,
    GatewayConfig,
    find_config,
    load_config,
)


@pytest.fixture
def temp_config(tmp_path: Path) -> Path:
    """Create a temporary config file."""
    config_content = dedent("""
        server:
          host: 0.0.0.0
          port: 8080

        session:
          ttl_seconds: 900
          sweep_interval_seconds: 60
          cookie_name: gw_session
          cookie_secure: true

        credentials:
          username: operator
          password: s3cret

        logging:
          level: DEBUG
          dir: /var/log/authgate
          console: false
    """).strip()

    config_path = tmp_path / "authgate.yaml"
    config_path.write_text(config_content)
    return config_path


@pytest.mark.unit
class TestDefaults:
    """Tests for default configuration."""

    def test_defaults(self) -> None:
        config = GatewayConfig()

        assert config.server.host == "127.0.0.1"
        assert config.server.port == 3000
        assert config.session.ttl_seconds == 3600
        assert config.session.sweep_interval_seconds == 600
        assert config.session.cookie_name == "session_id"
        assert config.session.cookie_secure is False
        assert config.credentials.username == "admin"
        assert config.credentials.password == "admin"
        assert config.logging.level is None

    def test_empty_dict_gives_defaults(self) -> None:
        assert GatewayConfig.from_dict({}) == GatewayConfig()

    def test_repr_hides_password(self) -> None:
        config = GatewayConfig.from_dict({"credentials": {"password": "hunter2"}})

        assert "hunter2" not in repr(config)


@pytest.mark.unit
class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_server_config(self, temp_config: Path) -> None:
        config = load_config(temp_config)

        assert config.server.host == "0.0.0.0"
        assert config.server.port == 8080

    def test_load_session_config(self, temp_config: Path) -> None:
        config = load_config(temp_config)

        assert config.session.ttl_seconds == 900
        assert config.session.sweep_interval_seconds == 60
        assert config.session.cookie_name == "gw_session"
        assert config.session.cookie_secure is True

    def test_load_credentials_and_logging(self, temp_config: Path) -> None:
        config = load_config(temp_config)

        assert config.credentials.username == "operator"
        assert config.credentials.password == "s3cret"
        assert config.logging.level == "DEBUG"
        assert config.logging.dir == "/var/log/authgate"
        assert config.logging.console is False

    def test_partial_config(self, tmp_path: Path) -> None:
        config_path = tmp_path / "authgate.yaml"
        config_path.write_text("session:\n  ttl_seconds: 120\n")

        config = load_config(config_path)

        assert config.session.ttl_seconds == 120
        assert config.server.port == 3000
        assert config.credentials.username == "admin"

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "authgate.yaml"
        config_path.write_text("")

        assert load_config(config_path) == GatewayConfig()

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        config_path = tmp_path / "authgate.yaml"
        config_path.write_text("server: [unclosed")

        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(config_path)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        config_path = tmp_path / "authgate.yaml"
        config_path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(config_path)

    def test_non_mapping_section_raises(self, tmp_path: Path) -> None:
        config_path = tmp_path / "authgate.yaml"
        config_path.write_text("session: 5\n")

        with pytest.raises(ConfigError, match="session"):
            load_config(config_path)


@pytest.mark.unit
class TestValidation:
    """Tests for value validation."""

    @pytest.mark.parametrize(
        ("data", "fragment"),
        [
            ({"server": {"port": 0}}, "server.port"),
            ({"server": {"port": 70000}}, "server.port"),
            ({"server": {"port": "http"}}, "server.port"),
            ({"session": {"ttl_seconds": 0}}, "ttl_seconds"),
            ({"session": {"ttl_seconds": True}}, "ttl_seconds"),
            ({"session": {"sweep_interval_seconds": -1}}, "sweep_interval_seconds"),
            ({"session": {"cookie_name": ""}}, "cookie_name"),
            ({"credentials": {"username": ""}}, "username"),
            ({"session": {"cookie_secure": "false"}}, "cookie_secure"),
            ({"session": {"cookie_secure": "no"}}, "cookie_secure"),
            ({"session": {"cookie_secure": 1}}, "cookie_secure"),
            ({"logging": {"console": "false"}}, "logging.console"),
            ({"server": {"host": ["a", "b"]}}, "server.host"),
            ({"credentials": {"password": {"nested": 1}}}, "credentials.password"),
        ],
    )
    def test_invalid_values_raise(self, data: dict, fragment: str) -> None:
        with pytest.raises(ConfigError, match=fragment):
            GatewayConfig.from_dict(data)

    def test_quoted_boolean_in_yaml_raises(self, tmp_path: Path) -> None:
        """A quoted "false" must not silently turn the Secure flag on."""
        config_path = tmp_path / "authgate.yaml"
        config_path.write_text('session:\n  cookie_secure: "false"\n')

        with pytest.raises(ConfigError, match="cookie_secure"):
            load_config(config_path)

    def test_real_booleans_accepted(self) -> None:
        config = GatewayConfig.from_dict(
            {"session": {"cookie_secure": True}, "logging": {"console": False}}
        )

        assert config.session.cookie_secure is True
        assert config.logging.console is False

    def test_null_values_use_defaults(self, tmp_path: Path) -> None:
        """Keys present with no value fall back to defaults, not the string 'None'."""
        config_path = tmp_path / "authgate.yaml"
        config_path.write_text(
            dedent("""
                server:
                  host:
                session:
                  cookie_name:
                  cookie_secure:
                credentials:
                  username:
                  password:
                logging:
                  level:
                  console:
            """)
        )

        assert load_config(config_path) == GatewayConfig()

    def test_zero_sweep_interval_allowed(self) -> None:
        config = GatewayConfig.from_dict({"session": {"sweep_interval_seconds": 0}})

        assert config.session.sweep_interval_seconds == 0


@pytest.mark.unit
class TestFindConfig:
    """Tests for find_config function."""

    def test_find_in_current_dir(self, temp_config: Path) -> None:
        assert find_config(temp_config.parent) == temp_config.resolve()

    def test_find_in_parent_dir(self, temp_config: Path) -> None:
        nested = temp_config.parent / "a" / "b"
        nested.mkdir(parents=True)

        assert find_config(nested) == temp_config.resolve()

    def test_not_found_raises(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        # Guard against a stray authgate.yaml above tmp_path
        if any((p / "authgate.yaml").exists() for p in empty.resolve().parents):
            pytest.skip("authgate.yaml present in a parent directory")

        with pytest.raises(ConfigError, match="No authgate.yaml"):
            find_config(empty)
