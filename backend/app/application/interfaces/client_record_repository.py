"""Abstract repository interface (port) for ClientRecord persistence."""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from app.domain.entities import ClientRecord


class ClientRecordRepository(ABC):
    """Port for client record persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def wait_ready(self) -> None:
        """Block until the underlying storage connection can serve calls."""
        ...

    @abstractmethod
    async def find_by_id(self, client_id: int) -> ClientRecord | None:
        """Retrieve a single record by its id."""
        ...

    @abstractmethod
    async def save(self, record: ClientRecord) -> ClientRecord:
        """Persist a record and return it with its id.

        A record without an id is inserted. A record with an id replaces the
        stored row entirely (or is inserted under that id).
        """
        ...

    @abstractmethod
    async def update_fields(self, client_id: int, fields: Mapping[str, Any]) -> None:
        """Update only the given fields of an existing record.

        Raises:
            EntityNotFoundError: If no record has this id.
        """
        ...
