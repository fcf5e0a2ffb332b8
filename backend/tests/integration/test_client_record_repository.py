"""Integration tests for SQLAlchemyClientRecordRepository on in-memory SQLite."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.domain.entities import ClientRecord
from app.domain.exceptions import EntityNotFoundError
from app.infrastructure.database.base import Base
from app.infrastructure.database.repositories import SQLAlchemyClientRecordRepository


@asynccontextmanager
async def _session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    finally:
        await engine.dispose()


def _ana(**overrides) -> ClientRecord:
    values = {
        "name": "Ana",
        "identity_number": "52998224725",
        "postal_code": "01001000",
        "city": "São Paulo",
        "birth_date": date(1990, 5, 17),
    }
    values.update(overrides)
    return ClientRecord(**values)


@pytest.mark.asyncio
async def test_save_new_record_assigns_id():
    async with _session_factory() as factory:
        async with factory() as session:
            repository = SQLAlchemyClientRecordRepository(session)
            await repository.wait_ready()
            saved = await repository.save(_ana())
            await session.commit()

        assert saved.id is not None

        async with factory() as session:
            found = await SQLAlchemyClientRecordRepository(session).find_by_id(saved.id)

    assert found == _ana(id=saved.id)


@pytest.mark.asyncio
async def test_find_missing_record_returns_none():
    async with _session_factory() as factory:
        async with factory() as session:
            assert await SQLAlchemyClientRecordRepository(session).find_by_id(99) is None


@pytest.mark.asyncio
async def test_save_with_id_overwrites_every_field():
    async with _session_factory() as factory:
        async with factory() as session:
            repository = SQLAlchemyClientRecordRepository(session)
            saved = await repository.save(_ana(email="ana@example.com", number="10"))
            await session.commit()

        async with factory() as session:
            repository = SQLAlchemyClientRecordRepository(session)
            await repository.save(_ana(id=saved.id, name="Ana Maria"))
            await session.commit()

        async with factory() as session:
            found = await SQLAlchemyClientRecordRepository(session).find_by_id(saved.id)

    assert found.name == "Ana Maria"
    # Full overwrite: fields missing from the new version are cleared.
    assert found.email == ""
    assert found.number is None


@pytest.mark.asyncio
async def test_update_fields_changes_only_given_fields():
    async with _session_factory() as factory:
        async with factory() as session:
            repository = SQLAlchemyClientRecordRepository(session)
            saved = await repository.save(_ana())
            await session.commit()

        async with factory() as session:
            await SQLAlchemyClientRecordRepository(session).update_fields(saved.id, {"status": False})
            await session.commit()

        async with factory() as session:
            found = await SQLAlchemyClientRecordRepository(session).find_by_id(saved.id)

    assert found.status is False
    assert found.name == "Ana"


@pytest.mark.asyncio
async def test_update_fields_on_missing_record_raises():
    async with _session_factory() as factory:
        async with factory() as session:
            with pytest.raises(EntityNotFoundError):
                await SQLAlchemyClientRecordRepository(session).update_fields(7, {"status": False})


@pytest.mark.asyncio
async def test_update_fields_rejects_unknown_columns():
    async with _session_factory() as factory:
        async with factory() as session:
            with pytest.raises(ValueError):
                await SQLAlchemyClientRecordRepository(session).update_fields(1, {"id": 2})
