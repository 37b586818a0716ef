"""PANOP — Asset Models."""

from typing import List, Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class Asset(BaseModel):
    """A named record scoped to exactly one zone.

    ``zone_id`` is an opaque foreign key; it is never checked locally. It is
    None only for imported state that has not been refreshed yet.
    """

    id: Optional[int] = None
    name: str
    type: Optional[str] = None
    zone_id: Optional[int] = None


class AssetListing(BaseModel):
    """Result of listing assets, optionally filtered by zone."""

    zone_id: Optional[int] = None
    assets: List[Asset] = []


class AssetInput(BaseModel):
    """Body for POST /api/assets."""

    asset_name: str
    zone_id: int


class AssetResponse(BaseModel):
    """Reply to POST /api/assets."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(validation_alias=AliasChoices("asset_id", "id"))
    asset_name: str = ""


class AssetEntry(BaseModel):
    """One element of GET /api/assets."""

    model_config = ConfigDict(extra="ignore")

    id: int = Field(validation_alias=AliasChoices("id", "asset_id"))
    asset_name: str = ""
    zone_id: int

    def to_asset(self) -> Asset:
        return Asset(id=self.id, name=self.asset_name, zone_id=self.zone_id)
