import sys
from pathlib import Path

import httpx
import pytest
from fastapi.testclient import TestClient

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api.dependencies import set_service_container
from api.main import create_app
from models.config import AppConfig, ShellyConfig
from services.service_container import ServiceContainer
from services.shelly_bulb_service import ShellyBulbService

BULB_IP = "192.168.1.50"


class FakeBulb:
    """
    Stand-in for a Shelly bulb behind httpx.MockTransport.

    Records every request; replies with `status_code`, or raises `error`
    from the transport when set.
    """

    def __init__(self, status_code: int = 200, error: Exception = None):
        self.status_code = status_code
        self.error = error
        self.requests: list[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, json={"ison": True, "mode": "color"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last_params(self) -> dict:
        return dict(self.requests[-1].url.params)


@pytest.fixture
def fake_bulb():
    return FakeBulb()


@pytest.fixture
def bulb_service(fake_bulb):
    return ShellyBulbService(ShellyConfig(ip=BULB_IP), transport=fake_bulb.transport)


@pytest.fixture
def unconfigured_bulb_service(fake_bulb):
    return ShellyBulbService(ShellyConfig(ip="  "), transport=fake_bulb.transport)


def _client_for(service: ShellyBulbService):
    config = AppConfig(shelly=ShellyConfig(ip=service.ip))
    set_service_container(ServiceContainer(config=config, bulb_service=service))
    return TestClient(create_app())


@pytest.fixture
def client(bulb_service):
    yield _client_for(bulb_service)
    set_service_container(None)


@pytest.fixture
def unconfigured_client(unconfigured_bulb_service):
    yield _client_for(unconfigured_bulb_service)
    set_service_container(None)
