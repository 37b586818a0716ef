"""PANOP — Tower API Endpoints.

REST paths and the status code each call must answer with. Tower has no
single-resource GET, so reads list the whole collection.
"""

ZONES_PATH = "/api/zones"
ASSETS_PATH = "/api/assets"

CREATED = 201
OK = 200


def zone_path(zone_id: int) -> str:
    return f"{ZONES_PATH}/{zone_id}"


def asset_path(asset_id: int) -> str:
    return f"{ASSETS_PATH}/{asset_id}"
