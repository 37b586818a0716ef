"""PANOP — Zone Resource (panop_zone)."""

from typing import Optional

from panop.connectors.tower import endpoints
from panop.core.errors import UpdateUnsupportedError
from panop.core.logging import get_logger
from panop.models.zone_models import Zone, ZoneInput, ZoneResponse
from panop.resources.base import Reconciler, parse_import_id

logger = get_logger("resources.zone")


class ZoneReconciler(Reconciler[Zone]):
    """Lifecycle of a single zone."""

    type_name = "panop_zone"

    async def create(self, desired: Zone) -> Zone:
        """POST the zone name; Tower assigns the id and verification token."""
        payload = ZoneInput(zone_name=desired.name)
        resp = await self.client.send(
            "POST", endpoints.ZONES_PATH, payload.model_dump()
        )
        resp.expect(endpoints.CREATED, "create zone")
        created = resp.parse(ZoneResponse)

        zone = desired.model_copy(
            update={
                "id": created.id,
                "token": created.token,
                "tenant_id": created.tenant_id,
                "type": created.zone_type or desired.type,
            }
        )
        logger.info(f"Created zone {zone.name}", extra={"entity_id": zone.id})
        return zone

    async def find(self, zone_id: int) -> Optional[ZoneResponse]:
        """Scan the zone collection for ``zone_id``.

        Tower cannot fetch one zone by path, so this lists everything. The
        first entry with a matching id wins; later duplicates are ignored.
        """
        resp = await self.client.send("GET", endpoints.ZONES_PATH)
        resp.expect(endpoints.OK, "read zones")
        for entry in resp.parse_list(ZoneResponse):
            if entry.id == zone_id:
                return entry
        return None

    async def read(self, current: Zone) -> Zone:
        zone_id = self.require_id(current, "Zone")
        match = await self.find(zone_id)
        if match is None:
            logger.warning(
                f"Zone {zone_id} not found on refresh; keeping prior state",
                extra={"entity_id": zone_id},
            )
            return current

        return current.model_copy(
            update={
                "name": match.zone_name,
                "token": match.token,
                "type": match.zone_type or current.type,
                "tenant_id": match.tenant_id,
            }
        )

    async def update(self, current: Zone, desired: Zone) -> Zone:
        """Carry identity forward; Tower has no endpoint to rename a zone.

        An imported zone that was never refreshed has no name yet and adopts
        the desired one.
        """
        if current.name and desired.name != current.name:
            raise UpdateUnsupportedError(
                f"Zone {current.id} cannot be renamed from {current.name!r} "
                f"to {desired.name!r}; replace the zone instead"
            )
        return desired.model_copy(
            update={
                "id": current.id,
                "token": current.token,
                "tenant_id": current.tenant_id,
            }
        )

    async def delete(self, current: Zone) -> None:
        zone_id = self.require_id(current, "Zone")
        resp = await self.client.send("DELETE", endpoints.zone_path(zone_id))
        resp.expect(endpoints.OK, "delete zone")
        logger.info(f"Deleted zone {zone_id}", extra={"entity_id": zone_id})

    def import_state(self, external_id: str) -> Zone:
        return Zone(id=parse_import_id(external_id), name="")
