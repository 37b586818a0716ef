"""PANOP — Tower API Client.

Thin transport over httpx: bearer auth, JSON content type, one round trip per
call. Status codes are left to the caller; ``TowerResponse.expect`` is the gate.
"""

import json
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from panop.config import ClientConfig
from panop.core.errors import DecodeError, TransportError, UnexpectedStatusError
from panop.core.logging import get_logger

logger = get_logger("tower.client")

M = TypeVar("M", bound=BaseModel)


@dataclass(frozen=True)
class TowerResponse:
    """Status, reason phrase and raw body of one Tower reply."""

    status_code: int
    reason: str
    content: bytes

    @property
    def status(self) -> str:
        return f"{self.status_code} {self.reason}".strip()

    def expect(self, status_code: int, action: str) -> "TowerResponse":
        """Raise unless Tower answered with ``status_code``.

        ``action`` completes the message, e.g. "create zone".
        """
        if self.status_code != status_code:
            raise UnexpectedStatusError(
                f"Unable to {action}, got error: {self.status}",
                self.status_code,
                self.reason,
            )
        return self

    def _decode(self) -> Any:
        try:
            return json.loads(self.content)
        except (TypeError, ValueError) as e:
            raise DecodeError(
                f"Unable to decode Tower response: {e}", self.status_code
            ) from e

    def json_object(self) -> Dict[str, Any]:
        data = self._decode()
        if not isinstance(data, dict):
            raise DecodeError(
                f"Expected a JSON object, got {type(data).__name__}",
                self.status_code,
            )
        return data

    def json_list(self) -> List[Any]:
        data = self._decode()
        if not isinstance(data, list):
            raise DecodeError(
                f"Expected a JSON array, got {type(data).__name__}",
                self.status_code,
            )
        return data

    # ── Typed Decoding ──

    def parse(self, model: Type[M]) -> M:
        """Validate a JSON object body into ``model``."""
        try:
            return model.model_validate(self.json_object())
        except ValidationError as e:
            raise DecodeError(
                f"Malformed {model.__name__} in Tower response: {e}",
                self.status_code,
            ) from e

    def parse_list(self, model: Type[M]) -> List[M]:
        """Validate every element of a JSON array body, keeping Tower's order."""
        entries: List[M] = []
        for index, item in enumerate(self.json_list()):
            try:
                entries.append(model.model_validate(item))
            except ValidationError as e:
                raise DecodeError(
                    f"Malformed {model.__name__} at index {index}: {e}",
                    self.status_code,
                ) from e
        return entries


class TowerClient:
    """Async HTTP client for the Tower management API.

    The configuration is fixed at construction, so one instance can be shared
    by every reconciler and lister in a session.
    """

    def __init__(
        self, config: ClientConfig, http_client: Optional[httpx.AsyncClient] = None
    ):
        self.config = config
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def host(self) -> str:
        return self.config.host

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url,
                verify=not self.config.skip_tls_verify,
            )
            self._owns_client = True
        return self._client

    def _headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.access_key}",
            "Content-Type": "application/json",
        }

    async def close(self) -> None:
        if self._owns_client and self._client and not self._client.is_closed:
            await self._client.aclose()

    async def __aenter__(self) -> "TowerClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # ── Core Request Method ──

    async def send(
        self, method: str, path: str, body: Optional[Dict[str, Any]] = None
    ) -> TowerResponse:
        """Issue one request against ``https://<host><path>``.

        Raises ``TransportError`` when no response arrives. Any status code is
        returned as-is.
        """
        client = self._get_client()
        url = f"{self.config.base_url}{path}"
        content = json.dumps(body).encode() if body is not None else None

        started = time.monotonic()
        try:
            resp = await client.request(
                method, url, content=content, headers=self._headers()
            )
        except httpx.RequestError as e:
            logger.error(
                f"Tower request {method} {path} failed: {e}",
                extra={"method": method, "path": path},
            )
            raise TransportError(f"Request failed: {e}") from e

        duration_ms = round((time.monotonic() - started) * 1000, 1)
        logger.debug(
            f"{method} {path} -> {resp.status_code}",
            extra={
                "method": method,
                "path": path,
                "status_code": resp.status_code,
                "duration_ms": duration_ms,
            },
        )
        return TowerResponse(
            status_code=resp.status_code,
            reason=resp.reason_phrase,
            content=resp.content,
        )
