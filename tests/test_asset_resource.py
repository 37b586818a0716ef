import json

import httpx
import pytest

from panop.connectors.tower.client import TowerClient
from panop.core.errors import (
    DecodeError,
    InvalidImportIdError,
    MissingIdentifierError,
    UnexpectedStatusError,
    UpdateUnsupportedError,
)
from panop.models.asset_models import Asset
from panop.resources.asset import AssetReconciler


@pytest.fixture
def assets(tower_client):
    return AssetReconciler(tower_client)


@pytest.mark.asyncio
async def test_create_passes_zone_id_through(tower, assets):
    route = tower.post("/api/assets").mock(
        return_value=httpx.Response(201, json={"asset_id": 501, "asset_name": "www"})
    )

    asset = await assets.create(Asset(name="www", type="dns", zone_id=337))

    assert json.loads(route.calls.last.request.content) == {
        "asset_name": "www",
        "zone_id": 337,
    }
    assert asset.id == 501
    assert asset.name == "www"
    assert asset.zone_id == 337
    assert asset.type == "dns"


@pytest.mark.asyncio
async def test_create_with_server_error(tower, assets):
    tower.post("/api/assets").mock(return_value=httpx.Response(500))

    with pytest.raises(UnexpectedStatusError, match="Unable to create asset"):
        await assets.create(Asset(name="www", zone_id=1))


@pytest.mark.asyncio
async def test_create_reply_that_is_not_json(tower, assets):
    tower.post("/api/assets").mock(return_value=httpx.Response(201, text="ok"))

    with pytest.raises(DecodeError):
        await assets.create(Asset(name="www", zone_id=1))


@pytest.mark.asyncio
async def test_read_refreshes_name_and_zone(tower, assets, sample_assets):
    tower.get("/api/assets").mock(return_value=httpx.Response(200, json=sample_assets))

    asset = await assets.read(Asset(id=103, name="old", type="dns", zone_id=9))

    assert asset.id == 103
    assert asset.name == "mail"
    assert asset.zone_id == 2
    assert asset.type == "dns"


@pytest.mark.asyncio
async def test_read_missing_asset_leaves_state_unchanged(tower, assets, sample_assets):
    tower.get("/api/assets").mock(return_value=httpx.Response(200, json=sample_assets))
    current = Asset(id=404, name="gone", zone_id=1)

    assert await assets.read(current) == current


@pytest.mark.asyncio
async def test_read_entry_without_zone_id_is_decode_error(tower, assets):
    tower.get("/api/assets").mock(
        return_value=httpx.Response(200, json=[{"id": 1, "asset_name": "www"}])
    )

    with pytest.raises(DecodeError):
        await assets.read(Asset(id=1, name="www", zone_id=1))


@pytest.mark.asyncio
async def test_read_non_200_is_fatal(tower, assets):
    tower.get("/api/assets").mock(return_value=httpx.Response(502))

    with pytest.raises(UnexpectedStatusError):
        await assets.read(Asset(id=1, name="www", zone_id=1))


@pytest.mark.asyncio
async def test_update_keeps_id_when_nothing_remote_changes(assets):
    current = Asset(id=5, name="www", type="dns", zone_id=1)

    asset = await assets.update(current, Asset(name="www", type="cname", zone_id=1))

    assert asset.id == 5
    assert asset.type == "cname"


@pytest.mark.asyncio
async def test_update_moving_zone_is_unsupported(assets):
    current = Asset(id=5, name="www", zone_id=1)

    with pytest.raises(UpdateUnsupportedError, match="zone_id"):
        await assets.update(current, Asset(name="www", zone_id=2))


@pytest.mark.asyncio
async def test_delete_by_id(tower, assets):
    route = tower.delete("/api/assets/501").mock(return_value=httpx.Response(200))

    await assets.delete(Asset(id=501, name="www", zone_id=1))

    assert route.called


@pytest.mark.asyncio
async def test_delete_404_is_fatal(tower, assets):
    tower.delete("/api/assets/501").mock(return_value=httpx.Response(404))

    with pytest.raises(UnexpectedStatusError, match="Unable to delete asset"):
        await assets.delete(Asset(id=501, name="www", zone_id=1))


@pytest.mark.asyncio
async def test_delete_without_id_raises(assets):
    with pytest.raises(MissingIdentifierError):
        await assets.delete(Asset(name="www", zone_id=1))


def test_import_state(client_config):
    assets = AssetReconciler(TowerClient(client_config))

    imported = assets.import_state("337")
    assert imported.id == 337
    assert imported.zone_id is None
    with pytest.raises(InvalidImportIdError):
        assets.import_state("www")


@pytest.mark.asyncio
async def test_create_without_zone_id_makes_no_call(tower, assets):
    route = tower.post("/api/assets")

    with pytest.raises(MissingIdentifierError, match="zone_id"):
        await assets.create(Asset(name="www"))

    assert not route.called


@pytest.mark.asyncio
async def test_read_first_match_wins(tower, assets):
    tower.get("/api/assets").mock(
        return_value=httpx.Response(
            200,
            json=[
                {"id": 7, "asset_name": "first", "zone_id": 1},
                {"id": 7, "asset_name": "second", "zone_id": 2},
            ],
        )
    )

    asset = await assets.read(Asset(id=7, name="", zone_id=1))

    assert asset.name == "first"
    assert asset.zone_id == 1


@pytest.mark.asyncio
async def test_second_delete_surfaces_remote_rejection(tower, assets):
    tower.delete("/api/assets/501").mock(
        side_effect=[httpx.Response(200), httpx.Response(404)]
    )
    asset = Asset(id=501, name="www", zone_id=1)

    await assets.delete(asset)
    with pytest.raises(UnexpectedStatusError) as exc_info:
        await assets.delete(asset)

    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_imported_asset_not_found_keeps_unknown_zone(tower, assets):
    tower.get("/api/assets").mock(return_value=httpx.Response(200, json=[]))

    imported = assets.import_state("7")
    refreshed = await assets.read(imported)
    updated = await assets.update(refreshed, Asset(name="www", zone_id=3))

    assert imported.zone_id is None
    assert refreshed.zone_id is None
    assert updated.id == 7
    assert updated.zone_id == 3
    assert updated.name == "www"
