"""Shared fixtures: a Tower client pointed at a respx-mocked host."""

import pytest
import pytest_asyncio
import respx

from panop.config import ClientConfig
from panop.connectors.tower.client import TowerClient

TOWER_HOST = "tower.example.com"
TOWER_URL = f"https://{TOWER_HOST}"
ACCESS_KEY = "test-access-key"


@pytest.fixture
def client_config():
    return ClientConfig(host=TOWER_HOST, access_key=ACCESS_KEY)


@pytest_asyncio.fixture
async def tower_client(client_config):
    client = TowerClient(client_config)
    yield client
    await client.close()


@pytest.fixture
def tower():
    """respx router for the Tower host; every request must be routed."""
    with respx.mock(base_url=TOWER_URL, assert_all_called=False) as router:
        yield router


@pytest.fixture
def sample_zones():
    return [
        {
            "id": 11,
            "zone_name": "example.com",
            "zone_type": "dns",
            "validated": True,
            "token": "tok-example",
            "tenant_id": 7,
        },
        {
            "id": 12,
            "zone_name": "example.org",
            "zone_type": "dns",
            "validated": False,
            "token": "tok-org",
            "tenant_id": 7,
        },
    ]


@pytest.fixture
def sample_assets():
    return [
        {"id": 101, "asset_name": "www", "zone_id": 1},
        {"id": 102, "asset_name": "api", "zone_id": 1},
        {"id": 103, "asset_name": "mail", "zone_id": 2},
    ]
