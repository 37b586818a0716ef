"""PANOP — Zone Data Source (panop_zone)."""

from panop.connectors.tower import endpoints
from panop.connectors.tower.client import TowerClient
from panop.core.logging import get_logger
from panop.models.zone_models import ZoneListing, ZoneResponse

logger = get_logger("datasources.zone")


class ZoneLister:
    """Read-only view of every zone Tower knows about."""

    type_name = "panop_zone"

    def __init__(self, client: TowerClient):
        self.client = client

    async def read(self) -> ZoneListing:
        """List zones in the order Tower returns them."""
        resp = await self.client.send("GET", endpoints.ZONES_PATH)
        resp.expect(endpoints.OK, "list zones")
        zones = [entry.to_zone() for entry in resp.parse_list(ZoneResponse)]
        logger.debug(f"Listed {len(zones)} zones")
        return ZoneListing(zones=zones)
