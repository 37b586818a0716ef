"""PANOP — Provider Configuration via Pydantic Settings.

Environment values (``PANOP_*`` or ``.env``) override what the host declares
for ``host`` and ``access_key``. The resolved ``ClientConfig`` is immutable and
handed to every reconciler and lister by reference.
"""

from typing import Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from panop.core.errors import ConfigurationError


class Settings(BaseSettings):
    """Process settings loaded from environment variables / .env file."""

    # ── Tower ──
    host: str = ""
    access_key: str = Field(default="", repr=False)
    skip_tls_verify: bool = False

    # ── App ──
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="PANOP_", env_file=".env", env_file_encoding="utf-8"
    )


class ProviderConfig(BaseModel):
    """Provider block as declared by the host. Every attribute is optional."""

    host: Optional[str] = None
    skip_tls_verify: Optional[bool] = None
    access_key: Optional[str] = Field(default=None, repr=False)


class ClientConfig(BaseModel):
    """Resolved connection settings shared by every Tower call."""

    model_config = ConfigDict(frozen=True)

    host: str
    access_key: str = Field(default="", repr=False)
    skip_tls_verify: bool = False

    @property
    def base_url(self) -> str:
        return tower_base_url(self.host)


def tower_base_url(host: str) -> str:
    """Return ``https://<host>``, refusing anything that is not a bare host[:port]."""
    if "/" in host or "?" in host or "#" in host:
        raise ConfigurationError(
            f"Tower host {host!r} must be a bare host name, without scheme or path"
        )
    try:
        url = httpx.URL(f"https://{host}")
    except httpx.InvalidURL as e:
        raise ConfigurationError(f"Tower host {host!r} is not valid: {e}") from e
    if not url.host:
        raise ConfigurationError(f"Tower host {host!r} has no host name")
    return f"https://{host}"


def resolve_client_config(
    declared: ProviderConfig, settings: Optional[Settings] = None
) -> ClientConfig:
    """Merge declared provider values with the environment.

    For ``host`` and ``access_key`` a non-empty environment value wins over the
    declared one. ``skip_tls_verify`` uses the declared value when set.
    """
    settings = settings or Settings()

    host = settings.host or declared.host or ""
    access_key = settings.access_key or declared.access_key or ""
    skip_tls_verify = (
        declared.skip_tls_verify
        if declared.skip_tls_verify is not None
        else settings.skip_tls_verify
    )

    if not host:
        raise ConfigurationError(
            "Tower host is not configured. Set 'host' in the provider block "
            "or the PANOP_HOST environment variable."
        )
    tower_base_url(host)

    return ClientConfig(
        host=host, access_key=access_key, skip_tls_verify=skip_tls_verify
    )


settings = Settings()
