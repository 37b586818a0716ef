"""PANOP — Asset Data Source (panop_asset)."""

from typing import Optional

from panop.connectors.tower import endpoints
from panop.connectors.tower.client import TowerClient
from panop.core.logging import get_logger
from panop.models.asset_models import AssetEntry, AssetListing

logger = get_logger("datasources.asset")


class AssetLister:
    """Read-only view of assets, optionally narrowed to one zone."""

    type_name = "panop_asset"

    def __init__(self, client: TowerClient):
        self.client = client

    async def read(self, zone_id: Optional[int] = None) -> AssetListing:
        """List assets, keeping only those in ``zone_id`` when it is given.

        Filtering happens after the full collection is fetched; Tower's order
        is preserved.
        """
        resp = await self.client.send("GET", endpoints.ASSETS_PATH)
        resp.expect(endpoints.OK, "list assets")

        assets = [
            entry.to_asset()
            for entry in resp.parse_list(AssetEntry)
            if zone_id is None or entry.zone_id == zone_id
        ]
        logger.debug(
            f"Listed {len(assets)} assets"
            + (f" in zone {zone_id}" if zone_id is not None else "")
        )
        return AssetListing(zone_id=zone_id, assets=assets)
