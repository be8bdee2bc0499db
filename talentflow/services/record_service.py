"""
Shared CRUD and list behaviour for every collection service.

Each public method is one simulated network call: it may be delayed and may
fail as a whole before touching the store.
"""

from typing import Any, ClassVar, Iterable

from talentflow.errors import NotFoundError
from talentflow.repositories.collections import Collection, get_descriptor
from talentflow.repositories.entity_store import EntityStore
from talentflow.services.identifier_resolver import IdentifierResolver
from talentflow.services.network import NetworkSimulator, simulated
from talentflow.services.query_engine import QueryEngine, QueryParams

Record = dict[str, Any]


class RecordService:
    """Base service; subclasses set ``collection`` and ``resource``."""

    collection: ClassVar[Collection]
    resource: ClassVar[str]
    # fields a full replace carries over when the new body omits them
    replace_keeps: ClassVar[tuple[str, ...]] = ()
    # fields only dedicated operations may write; generic update/replace drop them
    protected_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, store: EntityStore, network: NetworkSimulator):
        self.store = store
        self.network = network
        self.descriptor = get_descriptor(self.collection)
        self.engine = QueryEngine(self.descriptor)
        self.resolver = IdentifierResolver(store)

    # Hooks

    def prepare_create(self, data: Record) -> Record:
        return data

    def finalize_create(self, record_id: int, body: Record) -> Record:
        return body

    async def source_records(self, **scope: Any) -> Iterable[Record]:
        return await self.store.all(self.collection)

    def writable(self, data: Record) -> Record:
        return {key: value for key, value in data.items() if key not in self.protected_fields}

    def not_found(self, token: Any) -> NotFoundError:
        return NotFoundError(self.descriptor.entity_label, token)

    # Operations

    @simulated("list")
    async def list(self, params: QueryParams, **scope: Any) -> dict[str, Any]:
        """Search, filter, sort and paginate the collection."""
        records = await self.source_records(**scope)
        return self.engine.run(records, params)

    @simulated("get")
    async def get(self, token: Any) -> Record:
        return await self.resolver.resolve(self.collection, token)

    @simulated("create")
    async def create(self, data: Record) -> Record:
        return await self.store.create(
            self.collection,
            self.prepare_create(self.writable(dict(data))),
            finalize=self.finalize_create,
        )

    @simulated("replace")
    async def replace(self, token: Any, data: Record) -> Record:
        current = await self.resolver.resolve(self.collection, token)
        replaced = await self.store.replace(
            self.collection,
            current["id"],
            self.writable(data),
            keep=self.replace_keeps + self.protected_fields,
        )
        if replaced is None:
            raise self.not_found(token)
        return replaced

    @simulated("update")
    async def update(self, token: Any, patch: Record) -> Record:
        current = await self.resolver.resolve(self.collection, token)
        updated = await self.store.update(self.collection, current["id"], self.writable(patch))
        if updated is None:
            raise self.not_found(token)
        return updated

    @simulated("delete")
    async def delete(self, token: Any) -> None:
        current = await self.resolver.resolve(self.collection, token)
        if not await self.store.delete(self.collection, current["id"]):
            raise self.not_found(token)
