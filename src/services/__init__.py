"""Services layer"""

from .shelly_bulb_service import ShellyBulbService
from .service_container import ServiceContainer

__all__ = [
    "ShellyBulbService",
    "ServiceContainer",
]
