"""
Tests for ShellyBulbService against a simulated bulb (httpx.MockTransport)
"""

import httpx
import pytest

from models.color import ColorRequest
from models.config import ShellyConfig
from models.enums import ResponseStatus
from services.shelly_bulb_service import ShellyBulbService

from conftest import BULB_IP, FakeBulb


def test_is_configured_trims_address():
    assert ShellyBulbService(ShellyConfig(ip=f"  {BULB_IP} ")).ip == BULB_IP
    assert not ShellyBulbService(ShellyConfig(ip="   ")).is_configured()
    assert not ShellyBulbService(ShellyConfig()).is_configured()


def test_device_url(bulb_service):
    assert bulb_service.device_url() == f"http://{BULB_IP}/color/0"


def test_build_command_clamps_before_choosing(bulb_service):
    command = bulb_service.build_command(ColorRequest(-10, -1, 0, -255))
    assert command.to_query_params() == {"turn": "off"}


@pytest.mark.asyncio
async def test_all_zero_sends_off(bulb_service, fake_bulb):
    result = await bulb_service.set_color(ColorRequest(0, 0, 0, 0))

    assert result.status is ResponseStatus.OK
    assert len(fake_bulb.requests) == 1
    request = fake_bulb.requests[0]
    assert request.method == "GET"
    assert request.url.host == BULB_IP
    assert request.url.path == "/color/0"
    assert fake_bulb.last_params == {"turn": "off"}


@pytest.mark.asyncio
async def test_non_zero_sends_on_with_gain(bulb_service, fake_bulb):
    result = await bulb_service.set_color(ColorRequest(255, 128, 0, 7))

    assert fake_bulb.last_params == {
        "turn": "on", "red": "255", "green": "128", "blue": "0", "white": "7", "gain": "100"
    }
    assert (result.r, result.g, result.b, result.w) == (255, 128, 0, 7)
    assert result.message == (
        f"Shelly Gen1 applied via GET http://{BULB_IP}/color/0"
        "?turn=on&red=255&green=128&blue=0&white=7&gain=100"
    )


@pytest.mark.asyncio
async def test_out_of_range_values_are_clamped(bulb_service, fake_bulb):
    result = await bulb_service.set_color(ColorRequest(300, -5, 10, 0))

    assert fake_bulb.last_params["red"] == "255"
    assert fake_bulb.last_params["green"] == "0"
    assert (result.r, result.g, result.b, result.w) == (255, 0, 10, 0)


@pytest.mark.asyncio
async def test_any_2xx_is_success():
    bulb = FakeBulb(status_code=204)
    service = ShellyBulbService(ShellyConfig(ip=BULB_IP), transport=bulb.transport)

    result = await service.set_color(ColorRequest(1, 1, 1, 1))

    assert result.is_ok


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code, text", [(404, "404 Not Found"), (500, "500 Internal Server Error")])
async def test_non_2xx_is_error_naming_status(status_code, text):
    bulb = FakeBulb(status_code=status_code)
    service = ShellyBulbService(ShellyConfig(ip=BULB_IP), transport=bulb.transport)

    result = await service.set_color(ColorRequest(10, 20, 30, 40))

    assert result.status is ResponseStatus.ERROR
    assert result.message == f"Shelly responded with status {text}"
    assert (result.r, result.g, result.b, result.w) == (10, 20, 30, 40)


@pytest.mark.asyncio
async def test_connection_refused_is_error_value():
    bulb = FakeBulb(error=httpx.ConnectError("Connection refused"))
    service = ShellyBulbService(ShellyConfig(ip=BULB_IP), transport=bulb.transport)

    result = await service.set_color(ColorRequest(300, 0, 0, 0))

    assert result.status is ResponseStatus.ERROR
    assert result.message == "Shelly request failed: Connection refused"
    assert result.r == 255


@pytest.mark.asyncio
async def test_timeout_without_message_names_exception_type():
    bulb = FakeBulb(error=httpx.ReadTimeout(""))
    service = ShellyBulbService(ShellyConfig(ip=BULB_IP), transport=bulb.transport)

    result = await service.set_color(ColorRequest(1, 2, 3, 4))

    assert result.status is ResponseStatus.ERROR
    assert result.message == "Shelly request failed: ReadTimeout"


@pytest.mark.asyncio
async def test_negative_channels_clamp_to_off_command(bulb_service, fake_bulb):
    result = await bulb_service.set_color(ColorRequest(-3, -1, 0, -9))

    assert fake_bulb.last_params == {"turn": "off"}
    assert result.is_ok
    assert (result.r, result.g, result.b, result.w) == (0, 0, 0, 0)


@pytest.mark.asyncio
async def test_task_group_failure_reports_underlying_error():
    inner = httpx.ConnectError("Invalid port: '99999'")
    bulb = FakeBulb(error=ExceptionGroup("unhandled errors in a TaskGroup", [inner]))
    service = ShellyBulbService(ShellyConfig(ip="1.2.3.4:99999"), transport=bulb.transport)

    result = await service.set_color(ColorRequest(1, 2, 3, 4))

    assert result.status is ResponseStatus.ERROR
    assert result.message == "Shelly request failed: Invalid port: '99999'"
