"""PANOP — Provider Entry Point.

Resolves configuration once, builds the shared Tower client, and hands out
reconcilers (resources) and listers (data sources) by type name.
"""

from typing import Dict, List, Optional, Type, Union

import httpx

from panop.config import ProviderConfig, Settings, resolve_client_config
from panop.connectors.tower.client import TowerClient
from panop.core.errors import ConfigurationError
from panop.core.logging import get_logger, set_log_level
from panop.datasources.asset import AssetLister
from panop.datasources.zone import ZoneLister
from panop.resources.asset import AssetReconciler
from panop.resources.base import Reconciler
from panop.resources.zone import ZoneReconciler

logger = get_logger("provider")

__version__ = "0.1.0"

Lister = Union[ZoneLister, AssetLister]


class PanopProvider:
    """Registry of everything the ``panop`` provider offers the host.

    ``version`` is the release version, "dev" for local builds, and "test"
    under acceptance testing.
    """

    type_name = "panop"

    RESOURCES: List[Type[Reconciler]] = [ZoneReconciler, AssetReconciler]
    DATA_SOURCES: List[Type] = [ZoneLister, AssetLister]

    def __init__(self, version: str = __version__):
        self.version = version

    def configure(
        self,
        declared: ProviderConfig,
        settings: Optional[Settings] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> TowerClient:
        """Build the Tower client every resource and data source will share."""
        settings = settings or Settings()
        set_log_level(settings.log_level)
        config = resolve_client_config(declared, settings)
        if not config.access_key:
            logger.warning("No Tower access key configured; requests will be rejected")
        logger.info(
            f"Configured provider {self.type_name} {self.version} for {config.host}"
        )
        return TowerClient(config, http_client=http_client)

    def resources(self) -> List[Type[Reconciler]]:
        return list(self.RESOURCES)

    def data_sources(self) -> List[Type]:
        return list(self.DATA_SOURCES)

    def resource(self, type_name: str, client: TowerClient) -> Reconciler:
        return self._lookup(self.RESOURCES, type_name, "resource")(client)

    def data_source(self, type_name: str, client: TowerClient) -> Lister:
        return self._lookup(self.DATA_SOURCES, type_name, "data source")(client)

    @staticmethod
    def _lookup(registry: List[Type], type_name: str, kind: str) -> Type:
        by_name: Dict[str, Type] = {cls.type_name: cls for cls in registry}
        try:
            return by_name[type_name]
        except KeyError:
            raise ConfigurationError(
                f"Unknown {kind} type {type_name!r}; "
                f"expected one of {', '.join(sorted(by_name))}"
            ) from None
