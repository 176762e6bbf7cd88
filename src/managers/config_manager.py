"""
Config Manager

Loads config/config.yaml, layers environment overrides on top and
produces an immutable AppConfig. Read once at startup.
"""

import os
import yaml
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from models.config import AppConfig, LoggingConfig, ServerConfig, ShellyConfig
from models.enums import LogCategory, LogLevel
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)


# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "SHELLY_IP": ("shelly", "ip"),
    "SHELLY_TIMEOUT": ("shelly", "timeout"),
    "API_HOST": ("server", "host"),
    "API_PORT": ("server", "port"),
    "LOG_LEVEL": ("logging", "level"),
}


class ConfigManager:
    """
    Configuration loader for the bulb relay

    Process:
    1. Load config.yaml (path relative to src/)
    2. Fall back to built-in defaults if the file is missing or broken
    3. Apply environment overrides (SHELLY_IP wins over shelly.ip)
    4. Build frozen AppConfig

    Example:
        config = ConfigManager().load()
        config.shelly.ip          # "192.168.1.50"
        config.shelly.is_configured
    """

    def __init__(self, config_path="config/config.yaml", environ: Optional[Mapping[str, str]] = None):
        """
        Args:
            config_path: Path to config.yaml (relative to src/ unless absolute)
            environ: Environment mapping, defaults to os.environ
        """
        self.config_path = Path(config_path)
        self.environ = os.environ if environ is None else environ
        self.data: Dict[str, Any] = {}
        self._config: Optional[AppConfig] = None

    @property
    def config(self) -> AppConfig:
        if self._config is None:
            raise RuntimeError("ConfigManager.load() has not been called")
        return self._config

    def load(self) -> AppConfig:
        self.data = self._read_yaml()
        self._apply_env_overrides(self.data)
        self._config = self._build(self.data)

        shelly = self._config.shelly
        if shelly.is_configured:
            log.info("Bulb address configured", ip=shelly.ip, timeout=f"{shelly.timeout}s")
        else:
            log.warn("Bulb address not configured; color requests will be rejected with 503")

        return self._config

    def _resolve_path(self) -> Path:
        if self.config_path.is_absolute():
            return self.config_path
        src_dir = Path(__file__).parent.parent
        return src_dir / self.config_path

    def _read_yaml(self) -> Dict[str, Any]:
        full_path = self._resolve_path()
        try:
            with open(full_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if not isinstance(data, dict):
                raise ValueError(f"top-level YAML must be a mapping, got {type(data).__name__}")
            log.info("Loaded configuration", path=str(full_path))
            return data
        except FileNotFoundError:
            log.warn("Config file not found, using defaults", path=str(full_path))
        except (OSError, yaml.YAMLError, ValueError) as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to defaults")
        return {}

    def _apply_env_overrides(self, data: Dict[str, Any]) -> None:
        for env_name, (section, key) in ENV_OVERRIDES.items():
            value = self.environ.get(env_name)
            if value is None:
                continue
            section_data = data.get(section)
            if not isinstance(section_data, dict):
                section_data = {}
                data[section] = section_data
            section_data[key] = value
            log.debug(f"Environment override {env_name}", section=section, key=key)

    @staticmethod
    def _build(data: Dict[str, Any]) -> AppConfig:
        shelly = data.get("shelly") or {}
        server = data.get("server") or {}
        logging_cfg = data.get("logging") or {}

        defaults = AppConfig()

        ip = shelly.get("ip")
        shelly_config = ShellyConfig(
            ip="" if ip is None else str(ip).strip(),
            timeout=float(shelly.get("timeout", defaults.shelly.timeout)),
        )

        cors = server.get("cors_origins", defaults.server.cors_origins)
        if isinstance(cors, str):
            cors = [o.strip() for o in cors.split(",") if o.strip()]
        server_config = ServerConfig(
            host=str(server.get("host", defaults.server.host)),
            port=int(server.get("port", defaults.server.port)),
            docs_enabled=_as_bool(server.get("docs_enabled", defaults.server.docs_enabled)),
            cors_origins=list(cors),
        )

        level_name = str(logging_cfg.get("level", defaults.logging.level.name)).upper()
        if level_name == "WARNING":
            level_name = "WARN"
        try:
            level = LogLevel[level_name]
        except KeyError:
            raise ValueError(f"Unknown log level: {level_name}")
        logging_config = LoggingConfig(
            level=level,
            use_colors=_as_bool(logging_cfg.get("use_colors", defaults.logging.use_colors)),
        )

        return AppConfig(shelly=shelly_config, server=server_config, logging=logging_config)


def _as_bool(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in ("true", "1", "yes", "on")
    return bool(value)
