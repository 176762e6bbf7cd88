"""Service Container - Dependency injection container for core services"""

from dataclasses import dataclass
from models.config import AppConfig
from services.shelly_bulb_service import ShellyBulbService


@dataclass
class ServiceContainer:
    """
    Container built once at startup and shared by API endpoints.

    Holds only read-only collaborators:
    - config: Immutable AppConfig produced by ConfigManager
    - bulb_service: Outbound translator bound to the configured bulb address

    Usage:
        services = ServiceContainer.from_config(config_manager.load())
        set_service_container(services)
    """

    config: AppConfig
    bulb_service: ShellyBulbService

    @classmethod
    def from_config(cls, config: AppConfig) -> 'ServiceContainer':
        return cls(config=config, bulb_service=ShellyBulbService(config.shelly))
