"""
Color Endpoints - HTTP routes for bulb control

POST /api/color   apply an RGBW color
GET  /api/bulb    report whether a bulb address is configured
"""

from typing import Optional

from fastapi import APIRouter, Body, Depends, Response

from api.dependencies import get_service_container
from api.schemas.color import BulbStatusResponse, ColorResponseBody, SetColorRequest
from api.services.color_service import ColorAPIService
from services.service_container import ServiceContainer

router = APIRouter(tags=["Color"])


async def get_color_service(
    services: ServiceContainer = Depends(get_service_container)
) -> ColorAPIService:
    """Dependency to get the color service from the service container."""
    return ColorAPIService(bulb_service=services.bulb_service)


@router.post(
    "/color",
    response_model=ColorResponseBody,
    summary="Set bulb color",
    description="Validate an RGBW color and forward it to the configured Shelly bulb",
    responses={
        400: {"model": ColorResponseBody, "description": "Channel outside 0..255"},
        503: {"model": ColorResponseBody, "description": "Bulb address not configured"},
    },
)
async def set_color(
    response: Response,
    body: Optional[SetColorRequest] = Body(None),
    color_service: ColorAPIService = Depends(get_color_service)
) -> ColorResponseBody:
    """
    Apply an RGBW color.

    All four channels at 0 switches the bulb off.

    **Example Request:**
    ```json
    {"r": 255, "g": 120, "b": 0, "w": 0}
    ```

    A bulb that is unreachable or answers with a non-2xx status still yields
    HTTP 200; check `status` in the body.
    """
    request = body.to_domain() if body is not None else None
    status_code, result = await color_service.set_color(request)
    response.status_code = status_code
    return ColorResponseBody.from_domain(result)


@router.get(
    "/bulb",
    response_model=BulbStatusResponse,
    summary="Bulb configuration",
    description="Report whether a bulb address is configured"
)
async def bulb_status(
    services: ServiceContainer = Depends(get_service_container)
) -> BulbStatusResponse:
    bulb = services.bulb_service
    if not bulb.is_configured():
        return BulbStatusResponse(configured=False)
    return BulbStatusResponse(configured=True, address=bulb.ip, endpoint=bulb.device_url())
