"""PANOP — Zone Models."""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


# ─────────────────────────────────────────────
# STATE: what the host declares and stores
# ─────────────────────────────────────────────


class Zone(BaseModel):
    """A namespace root (e.g. a DNS domain) owned by a tenant.

    ``id``, ``token`` and ``tenant_id`` are only ever set from Tower replies.
    """

    id: Optional[int] = None
    name: str
    type: str = "dns"
    token: Optional[str] = Field(default=None, repr=False)
    tenant_id: Optional[int] = None


class ZoneListing(BaseModel):
    """Result of listing every zone."""

    zones: List[Zone] = []


# ─────────────────────────────────────────────
# WIRE: Tower request / response bodies
# ─────────────────────────────────────────────


class ZoneInput(BaseModel):
    """Body for POST /api/zones. Tenant is inferred from the credential."""

    zone_name: str


class ZoneResponse(BaseModel):
    """A zone as Tower reports it.

    Create replies carry the identifier as ``zone_id``, list replies as ``id``.
    """

    model_config = ConfigDict(extra="ignore")

    id: int = Field(validation_alias=AliasChoices("id", "zone_id"))
    zone_name: str = ""
    zone_type: str = ""
    validated: bool = False
    token: Optional[str] = Field(default=None, repr=False)
    tenant_id: Optional[int] = None

    def to_zone(self) -> Zone:
        return Zone(
            id=self.id,
            name=self.zone_name,
            type=self.zone_type,
            token=self.token,
            tenant_id=self.tenant_id,
        )
