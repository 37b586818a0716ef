"""PANOP — Asset Resource (panop_asset)."""

from typing import Optional

from panop.connectors.tower import endpoints
from panop.core.errors import MissingIdentifierError, UpdateUnsupportedError
from panop.core.logging import get_logger
from panop.models.asset_models import Asset, AssetEntry, AssetInput, AssetResponse
from panop.resources.base import Reconciler, parse_import_id

logger = get_logger("resources.asset")


class AssetReconciler(Reconciler[Asset]):
    """Lifecycle of a single asset. ``zone_id`` is passed through untouched."""

    type_name = "panop_asset"

    async def create(self, desired: Asset) -> Asset:
        if desired.zone_id is None:
            raise MissingIdentifierError(
                f"Asset {desired.name!r} needs a zone_id to be created"
            )
        # Tower's create contract has no asset type; it stays local.
        payload = AssetInput(asset_name=desired.name, zone_id=desired.zone_id)
        resp = await self.client.send(
            "POST", endpoints.ASSETS_PATH, payload.model_dump()
        )
        resp.expect(endpoints.CREATED, "create asset")
        created = resp.parse(AssetResponse)

        asset = desired.model_copy(
            update={"id": created.id, "name": created.asset_name or desired.name}
        )
        logger.info(f"Created asset {asset.name}", extra={"entity_id": asset.id})
        return asset

    async def find(self, asset_id: int) -> Optional[AssetEntry]:
        """First entry of GET /api/assets whose id is ``asset_id``."""
        resp = await self.client.send("GET", endpoints.ASSETS_PATH)
        resp.expect(endpoints.OK, "read assets")
        for entry in resp.parse_list(AssetEntry):
            if entry.id == asset_id:
                return entry
        return None

    async def read(self, current: Asset) -> Asset:
        asset_id = self.require_id(current, "Asset")
        match = await self.find(asset_id)
        if match is None:
            logger.warning(
                f"Asset {asset_id} not found on refresh; keeping prior state",
                extra={"entity_id": asset_id},
            )
            return current

        return current.model_copy(
            update={"name": match.asset_name, "zone_id": match.zone_id}
        )

    async def update(self, current: Asset, desired: Asset) -> Asset:
        """Carry the id forward; name and zone_id cannot change remotely.

        Fields still unknown after an import (empty name, no zone_id) take the
        desired value.
        """
        changed = [
            field
            for field in ("name", "zone_id")
            if getattr(current, field) not in (None, "")
            and getattr(desired, field) != getattr(current, field)
        ]
        if changed:
            raise UpdateUnsupportedError(
                f"Asset {current.id} cannot change {', '.join(changed)} in place; "
                f"replace the asset instead"
            )
        return desired.model_copy(update={"id": current.id})

    async def delete(self, current: Asset) -> None:
        asset_id = self.require_id(current, "Asset")
        resp = await self.client.send("DELETE", endpoints.asset_path(asset_id))
        resp.expect(endpoints.OK, "delete asset")
        logger.info(f"Deleted asset {asset_id}", extra={"entity_id": asset_id})

    def import_state(self, external_id: str) -> Asset:
        # name and zone_id stay unknown until the first read
        return Asset(id=parse_import_id(external_id), name="")
