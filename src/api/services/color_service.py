"""
API Color Service - boundary between the HTTP route and the bulb translator

Sequence per request:
1. Reject absent or out-of-range requests (400), device untouched
2. Reject when no bulb address is configured (503)
3. Delegate to ShellyBulbService and return its result unchanged (200)

Bulb-side failures come back from step 3 as status "error" with HTTP 200.
"""

from typing import Optional, Tuple

from fastapi import status

from models.color import ColorRequest, ColorResponse
from models.enums import LogCategory
from services.shelly_bulb_service import ShellyBulbService
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.COLOR)

INVALID_CHANNELS_MESSAGE = "Color channels must be integers 0..255"
NOT_CONFIGURED_MESSAGE = "Bulb IP not configured. Set shelly.ip in config.yaml or SHELLY_IP."


class ColorAPIService:
    """API wrapper over the domain ShellyBulbService"""

    def __init__(self, bulb_service: ShellyBulbService):
        self.bulb_service = bulb_service

    async def set_color(self, request: Optional[ColorRequest]) -> Tuple[int, ColorResponse]:
        """
        Validate, check configuration, forward.

        Returns:
            (http_status, ColorResponse)
        """
        if request is None:
            log.warn("Rejected color request: empty body")
            return status.HTTP_400_BAD_REQUEST, ColorResponse.error(
                ColorRequest(0, 0, 0, 0), INVALID_CHANNELS_MESSAGE
            )

        if not request.is_valid():
            log.warn("Rejected color request: channel out of range",
                     r=request.r, g=request.g, b=request.b, w=request.w)
            return status.HTTP_400_BAD_REQUEST, ColorResponse.error(
                request.clamped(), INVALID_CHANNELS_MESSAGE
            )

        if not self.bulb_service.is_configured():
            log.warn("Rejected color request: bulb address not configured")
            return status.HTTP_503_SERVICE_UNAVAILABLE, ColorResponse.error(
                request, NOT_CONFIGURED_MESSAGE
            )

        return status.HTTP_200_OK, await self.bulb_service.set_color(request)
