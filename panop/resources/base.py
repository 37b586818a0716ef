"""PANOP — Abstract Resource Reconciler."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from panop.connectors.tower.client import TowerClient
from panop.core.errors import InvalidImportIdError, MissingIdentifierError

S = TypeVar("S", bound=BaseModel)


def parse_import_id(external_id: str) -> int:
    """Parse a decimal import identifier such as ``"337"``."""
    value = external_id.strip()
    if not value.isdecimal():
        raise InvalidImportIdError(
            f"Import identifier must be a decimal integer, got {external_id!r}"
        )
    return int(value)


class Reconciler(ABC, Generic[S]):
    """Drives one remote entity toward its declared state.

    Each operation is a single, independent Tower round trip. Nothing is kept
    between calls: the host stores whatever state is returned and hands it back
    on the next operation.
    """

    type_name: str = ""

    def __init__(self, client: TowerClient):
        self.client = client

    @staticmethod
    def require_id(state: S, kind: str) -> int:
        entity_id: Optional[int] = getattr(state, "id", None)
        if entity_id is None:
            raise MissingIdentifierError(f"{kind} has no identifier; was it created?")
        return entity_id

    @abstractmethod
    async def create(self, desired: S) -> S:
        """Create the entity and return it with its remote identifier."""
        ...

    @abstractmethod
    async def read(self, current: S) -> S:
        """Refresh ``current`` from Tower's view, matched by identifier.

        When Tower no longer lists the identifier, ``current`` comes back
        unchanged.
        """
        ...

    @abstractmethod
    async def update(self, current: S, desired: S) -> S:
        """Move from ``current`` to ``desired``."""
        ...

    @abstractmethod
    async def delete(self, current: S) -> None:
        """Delete the entity. Returns only once Tower acknowledged it."""
        ...

    @abstractmethod
    def import_state(self, external_id: str) -> S:
        """Seed tracking state from an existing remote identifier."""
        ...
