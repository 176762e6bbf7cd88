"""
API Dependencies - Service container access for FastAPI endpoints

Pattern:
1. main_asyncio.py creates ServiceContainer during initialization
2. main_asyncio.py calls set_service_container() after creation
3. API endpoints use get_service_container() dependency via Depends()

Example:
    @router.get("/bulb")
    async def bulb_status(services: ServiceContainer = Depends(get_service_container)):
        return services.bulb_service.is_configured()
"""

from typing import Optional
from services.service_container import ServiceContainer
from api.middleware.error_handler import ServicesNotReadyError


# Global service container (set by main_asyncio.py during initialization)
_service_container: Optional[ServiceContainer] = None


def set_service_container(services: Optional[ServiceContainer]) -> None:
    """
    Store the service container for API access.

    Args:
        services: The ServiceContainer, or None to clear it (tests)
    """
    global _service_container
    _service_container = services


async def get_service_container() -> ServiceContainer:
    """
    FastAPI dependency for accessing service container.

    Raises:
        ServicesNotReadyError: 503 if services not initialized
    """
    if _service_container is None:
        raise ServicesNotReadyError()
    return _service_container
