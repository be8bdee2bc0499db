"""
Entity store - async persistence for the five collections.

Records go in and come out as plain dicts. The store owns identifier
assignment and the ``created_at``/``updated_at`` stamps; everything else in a
record is persisted as-is in the row's JSON document.
"""

import copy
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Callable, Iterable, List, Optional, Sequence

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from talentflow.models import DocumentModel, IdSequence
from talentflow.repositories.collections import Collection, get_descriptor
from talentflow.utils.canonical_json import to_document
from talentflow.utils.time import ensure_aware, parse_datetime, utc_now

logger = logging.getLogger(__name__)

Record = dict[str, Any]

SYSTEM_FIELDS = ("id", "created_at", "updated_at")

# Largest id SQLite (and BIGINT) can hold; anything above can never be stored.
MAX_ID = 2**63 - 1


def id_in_range(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value <= MAX_ID


def _strip_system_fields(record: Record) -> Record:
    return {key: value for key, value in record.items() if key not in SYSTEM_FIELDS}


def _index_value(model: type[DocumentModel], field_name: str, value: Any) -> Any:
    python_type = model.__table__.c[field_name].type.python_type
    if value is None:
        return None
    if isinstance(value, python_type) and not isinstance(value, bool):
        coerced = value
    else:
        try:
            coerced = python_type(value)
        except (TypeError, ValueError):
            return None
    if python_type is int and not id_in_range(coerced):
        return None
    return coerced


class EntityStore:
    """
    Repository for every collection.

    One instance is built at startup and shared by reference with all
    services. Each call runs in its own short transaction.
    """

    def __init__(self, session_maker: async_sessionmaker[AsyncSession]):
        self._session_maker = session_maker

    @asynccontextmanager
    async def _session(self) -> AsyncGenerator[AsyncSession, None]:
        async with self._session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    @staticmethod
    def _model(collection: Collection | str) -> type[DocumentModel]:
        return get_descriptor(collection).model

    @staticmethod
    async def _allocate_ids(session: AsyncSession, name: str, count: int) -> int:
        """Reserve ``count`` identifiers and return the first one."""
        # The UPDATE takes the write lock first, so the read below is ours alone.
        await session.execute(
            update(IdSequence)
            .where(IdSequence.collection == name)
            .values(last_id=IdSequence.last_id + count)
        )
        result = await session.execute(
            select(IdSequence.last_id).where(IdSequence.collection == name)
        )
        last_id = result.scalar_one()
        return last_id - count + 1

    @staticmethod
    def _apply_body(row: DocumentModel, body: Record) -> None:
        row.document = body
        for field_name in row.__index_fields__:
            setattr(row, field_name, _index_value(type(row), field_name, body.get(field_name)))

    @staticmethod
    def _to_record(row: DocumentModel) -> Record:
        record = copy.deepcopy(row.document or {})
        record["id"] = row.id
        record["created_at"] = ensure_aware(row.created_at)
        record["updated_at"] = ensure_aware(row.updated_at)
        return record

    async def create(
        self,
        collection: Collection | str,
        record: Record,
        finalize: Optional[Callable[[int, Record], Record]] = None,
    ) -> Record:
        """
        Persist a new record and return it with id and timestamps assigned.

        ``finalize`` receives the allocated id and the body before insert,
        for fields derived from the id (job slugs).
        """
        model = self._model(collection)
        now = utc_now()
        body = to_document(_strip_system_fields(record))
        async with self._session() as session:
            new_id = await self._allocate_ids(session, model.__tablename__, 1)
            if finalize is not None:
                body = to_document(finalize(new_id, body))
            row = model(id=new_id, created_at=now, updated_at=now)
            self._apply_body(row, body)
            session.add(row)
        logger.debug("Created %s #%s", model.__tablename__, new_id)
        return self._to_record(row)

    async def bulk_create(
        self,
        collection: Collection | str,
        records: Sequence[Record],
        finalize: Optional[Callable[[int, Record], Record]] = None,
    ) -> List[Record]:
        """
        Insert many records in one transaction with consecutive ids.

        Unlike ``create``, timestamps already present on the records are
        kept, so seeded data can be spread over the past.
        """
        if not records:
            return []
        model = self._model(collection)
        now = utc_now()
        rows = []
        async with self._session() as session:
            first_id = await self._allocate_ids(session, model.__tablename__, len(records))
            for offset, record in enumerate(records):
                new_id = first_id + offset
                body = to_document(_strip_system_fields(record))
                if finalize is not None:
                    body = to_document(finalize(new_id, body))
                created_at = parse_datetime(record.get("created_at")) or now
                updated_at = parse_datetime(record.get("updated_at")) or created_at
                row = model(id=new_id, created_at=created_at, updated_at=updated_at)
                self._apply_body(row, body)
                rows.append(row)
            session.add_all(rows)
        logger.debug("Bulk created %d %s", len(rows), model.__tablename__)
        return [self._to_record(row) for row in rows]

    async def get(self, collection: Collection | str, record_id: int) -> Optional[Record]:
        """Get a record by id, or None."""
        if not id_in_range(record_id):
            return None
        model = self._model(collection)
        async with self._session() as session:
            row = await session.get(model, record_id)
            return self._to_record(row) if row is not None else None

    async def update(
        self,
        collection: Collection | str,
        record_id: int,
        patch: Record,
    ) -> Optional[Record]:
        """Shallow-merge ``patch`` into a record. Returns None if missing."""
        if not id_in_range(record_id):
            return None
        model = self._model(collection)
        async with self._session() as session:
            row = await session.get(model, record_id)
            if row is None:
                return None
            body = {**copy.deepcopy(row.document or {}), **to_document(_strip_system_fields(patch))}
            self._apply_body(row, body)
            row.updated_at = utc_now()
        logger.debug("Updated %s #%s (%s)", model.__tablename__, record_id, ", ".join(sorted(patch)))
        return self._to_record(row)

    async def replace(
        self,
        collection: Collection | str,
        record_id: int,
        record: Record,
        keep: Iterable[str] = (),
    ) -> Optional[Record]:
        """
        Replace a record's body. Fields named in ``keep`` survive when the
        new body does not carry them. Returns None if missing.
        """
        if not id_in_range(record_id):
            return None
        model = self._model(collection)
        async with self._session() as session:
            row = await session.get(model, record_id)
            if row is None:
                return None
            previous = row.document or {}
            body = to_document(_strip_system_fields(record))
            for field_name in keep:
                if field_name not in body and field_name in previous:
                    body[field_name] = copy.deepcopy(previous[field_name])
            self._apply_body(row, body)
            row.updated_at = utc_now()
        logger.debug("Replaced %s #%s", model.__tablename__, record_id)
        return self._to_record(row)

    async def delete(self, collection: Collection | str, record_id: int) -> bool:
        """Delete a record. Returns False if it did not exist."""
        if not id_in_range(record_id):
            return False
        model = self._model(collection)
        async with self._session() as session:
            row = await session.get(model, record_id)
            if row is None:
                return False
            await session.delete(row)
        logger.debug("Deleted %s #%s", model.__tablename__, record_id)
        return True

    async def all(self, collection: Collection | str) -> List[Record]:
        """Every record of a collection, in id order."""
        model = self._model(collection)
        async with self._session() as session:
            result = await session.execute(select(model).order_by(model.id))
            return [self._to_record(row) for row in result.scalars().all()]

    async def count(self, collection: Collection | str) -> int:
        model = self._model(collection)
        async with self._session() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return int(result.scalar_one())

    async def filter_by(self, collection: Collection | str, field_name: str, value: Any) -> List[Record]:
        """Records whose ``field_name`` equals ``value``, in id order."""
        model = self._model(collection)
        if field_name in model.__index_fields__:
            indexed = _index_value(model, field_name, value)
            if indexed is None:
                return []
            column = getattr(model, field_name)
            async with self._session() as session:
                result = await session.execute(
                    select(model).where(column == indexed).order_by(model.id)
                )
                return [self._to_record(row) for row in result.scalars().all()]
        return [record for record in await self.all(collection) if record.get(field_name) == value]

    async def find_first(self, collection: Collection | str, field_name: str, value: Any) -> Optional[Record]:
        """First record (lowest id) whose ``field_name`` equals ``value``."""
        matches = await self.filter_by(collection, field_name, value)
        return matches[0] if matches else None
