"""Concrete repository implementation for ClientRecord backed by SQLAlchemy."""

from collections.abc import Mapping
from typing import Any

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import ClientRecordRepository
from app.domain.entities import ClientRecord
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.models import ClientRecordModel

_COLUMNS = (
    "name",
    "identity_number",
    "status",
    "email",
    "cellphone",
    "postal_code",
    "state",
    "city",
    "district",
    "street",
    "number",
    "birth_date",
)


class SQLAlchemyClientRecordRepository(ClientRecordRepository):
    """Implements the ClientRecordRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ClientRecordModel) -> ClientRecord:
        """Map ORM model → domain entity."""
        return ClientRecord(id=model.id, **{name: getattr(model, name) for name in _COLUMNS})

    def _to_model(self, entity: ClientRecord) -> ClientRecordModel:
        """Map domain entity → ORM model. An entity without id yields a model without id."""
        values = {name: getattr(entity, name) for name in _COLUMNS}
        if entity.id is not None:
            values["id"] = entity.id
        return ClientRecordModel(**values)

    async def wait_ready(self) -> None:
        await self._session.connection()

    async def find_by_id(self, client_id: int) -> ClientRecord | None:
        result = await self._session.get(ClientRecordModel, client_id)
        return self._to_entity(result) if result else None

    async def save(self, record: ClientRecord) -> ClientRecord:
        model = self._to_model(record)
        if record.id is None:
            self._session.add(model)
        else:
            # Full overwrite: every column is taken from the entity.
            model = await self._session.merge(model)
        await self._session.flush()
        return self._to_entity(model)

    async def update_fields(self, client_id: int, fields: Mapping[str, Any]) -> None:
        unknown = set(fields) - set(_COLUMNS)
        if unknown:
            raise ValueError(f"Unknown client fields: {', '.join(sorted(unknown))}")

        stmt = (
            update(ClientRecordModel)
            .where(ClientRecordModel.id == client_id)
            .values(**fields)
            .execution_options(synchronize_session="fetch")
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise EntityNotFoundError("ClientRecord", client_id)
        await self._session.flush()
