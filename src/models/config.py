"""
Configuration models - immutable settings read once at startup
"""

from dataclasses import dataclass, field
from typing import List

from .enums import LogLevel


@dataclass(frozen=True)
class ShellyConfig:
    """Where the bulb lives and how long to wait for it"""
    ip: str = ""
    timeout: float = 5.0     # seconds, matches the httpx default

    @property
    def is_configured(self) -> bool:
        return bool(self.ip and self.ip.strip())


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8080
    docs_enabled: bool = True
    cors_origins: List[str] = field(default_factory=lambda: ["*"])


@dataclass(frozen=True)
class LoggingConfig:
    level: LogLevel = LogLevel.INFO
    use_colors: bool = True


@dataclass(frozen=True)
class AppConfig:
    """Complete application configuration"""
    shelly: ShellyConfig = field(default_factory=ShellyConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
