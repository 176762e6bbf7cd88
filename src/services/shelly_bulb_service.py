"""
Shelly Bulb Service - translates RGBW requests into Shelly Gen1 commands

One color request becomes exactly one GET to http://<ip>/color/0.
Every outcome (success, unexpected status, transport failure) comes back as
a ColorResponse; nothing is raised to the caller.
"""

from typing import Optional

import httpx

from models.color import BulbCommand, ColorRequest, ColorResponse
from models.config import ShellyConfig
from models.enums import LogCategory
from utils.logger import get_logger

log = get_logger().for_category(LogCategory.BULB)


class ShellyBulbService:
    """Outbound side of the relay, bound to a single bulb address"""

    COLOR_PATH = "/color/0"

    def __init__(
        self,
        config: ShellyConfig,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Args:
            config: Bulb address and request timeout
            transport: Optional httpx transport (tests pass httpx.MockTransport)
        """
        self.ip = (config.ip or "").strip()
        self.timeout = config.timeout
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self.ip)

    def device_url(self) -> str:
        return f"http://{self.ip}{self.COLOR_PATH}"

    def build_command(self, request: ColorRequest) -> BulbCommand:
        """Clamp the request and pick ON or OFF"""
        return BulbCommand.for_color(request.clamped())

    async def set_color(self, request: ColorRequest) -> ColorResponse:
        """
        Apply an RGBW color to the bulb.

        Args:
            request: Requested channels (clamped again here before sending)

        Returns:
            ColorResponse with the clamped values; status "ok" on any 2xx reply
        """
        command = self.build_command(request)
        color = command.color
        params = command.to_query_params()

        log.debug("Sending bulb command", url=self.device_url(), **params)

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(self.device_url(), params=params)
        except Exception as e:
            cause = _first_leaf(e)
            detail = str(cause) or type(cause).__name__
            log.warn("Bulb request failed", error=detail, error_type=type(cause).__name__)
            return ColorResponse.error(color, f"Shelly request failed: {detail}")

        if response.is_success:
            log.info("Bulb color applied", turn=command.turn.value, status=response.status_code)
            return ColorResponse.ok(color, f"Shelly Gen1 applied via GET {response.request.url}")

        status_text = f"{response.status_code} {response.reason_phrase}".strip()
        log.warn("Bulb responded with unexpected status", status=status_text)
        return ColorResponse.error(color, f"Shelly responded with status {status_text}")


def _first_leaf(exc: BaseException) -> BaseException:
    """Unwrap exception groups (raised by anyio task groups) to the first real error"""
    while isinstance(exc, BaseExceptionGroup) and exc.exceptions:
        exc = exc.exceptions[0]
    return exc
