"""
Tests for ConfigManager: YAML loading, defaults, environment overrides
"""

import pytest

from managers.config_manager import ConfigManager
from models.enums import LogLevel


def write_config(tmp_path, text):
    path = tmp_path / "config.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_loads_yaml(tmp_path):
    path = write_config(tmp_path, """
shelly:
  ip: 10.0.0.7
  timeout: 2.5
server:
  host: 127.0.0.1
  port: 9000
logging:
  level: debug
  use_colors: false
""")

    config = ConfigManager(path, environ={}).load()

    assert config.shelly.ip == "10.0.0.7"
    assert config.shelly.timeout == 2.5
    assert config.shelly.is_configured
    assert config.server.host == "127.0.0.1"
    assert config.server.port == 9000
    assert config.logging.level is LogLevel.DEBUG
    assert config.logging.use_colors is False


def test_missing_file_uses_defaults(tmp_path):
    config = ConfigManager(tmp_path / "absent.yaml", environ={}).load()

    assert config.shelly.ip == ""
    assert not config.shelly.is_configured
    assert config.shelly.timeout == 5.0
    assert config.server.port == 8080
    assert config.logging.level is LogLevel.INFO


def test_broken_yaml_falls_back_to_defaults(tmp_path):
    path = write_config(tmp_path, "shelly: [unclosed\n")

    config = ConfigManager(path, environ={}).load()

    assert not config.shelly.is_configured


def test_environment_overrides_yaml(tmp_path):
    path = write_config(tmp_path, "shelly:\n  ip: 10.0.0.7\n")
    environ = {"SHELLY_IP": " 192.168.1.80 ", "API_PORT": "8181", "LOG_LEVEL": "warning"}

    config = ConfigManager(path, environ=environ).load()

    assert config.shelly.ip == "192.168.1.80"
    assert config.server.port == 8181
    assert config.logging.level is LogLevel.WARN


def test_blank_address_is_not_configured(tmp_path):
    path = write_config(tmp_path, "shelly:\n  ip: 10.0.0.7\n")

    config = ConfigManager(path, environ={"SHELLY_IP": "   "}).load()

    assert config.shelly.ip == ""
    assert not config.shelly.is_configured


def test_cors_origins_from_comma_separated_string(tmp_path):
    path = write_config(tmp_path, "server:\n  cors_origins: 'http://a.local, http://b.local'\n")

    config = ConfigManager(path, environ={}).load()

    assert config.server.cors_origins == ["http://a.local", "http://b.local"]


def test_unknown_log_level_raises(tmp_path):
    path = write_config(tmp_path, "logging:\n  level: LOUD\n")

    with pytest.raises(ValueError, match="Unknown log level"):
        ConfigManager(path, environ={}).load()


def test_config_property_requires_load():
    with pytest.raises(RuntimeError):
        ConfigManager(environ={}).config


def test_bundled_config_file_loads():
    config = ConfigManager(environ={}).load()

    assert config.server.port == 8080
