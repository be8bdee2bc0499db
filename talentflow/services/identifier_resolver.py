"""Resolve a caller-supplied token (id or slug) to a stored record."""

import re
from typing import Any, Optional

from talentflow.errors import NotFoundError
from talentflow.repositories.collections import Collection, get_descriptor
from talentflow.repositories.entity_store import EntityStore, id_in_range

_NUMERIC = re.compile(r"^\d+$")


def is_numeric_token(token: Any) -> bool:
    return isinstance(token, int) and not isinstance(token, bool) or bool(_NUMERIC.match(str(token)))


class IdentifierResolver:
    """
    Numeric tokens are looked up by id; anything else by the collection's
    secondary key. Collections without a secondary key only accept ids.
    """

    def __init__(self, store: EntityStore):
        self.store = store

    async def find(self, collection: Collection, token: Any) -> Optional[dict[str, Any]]:
        descriptor = get_descriptor(collection)
        if is_numeric_token(token):
            record_id = int(token)
            # too large to be any stored id
            if not id_in_range(record_id):
                return None
            return await self.store.get(collection, record_id)
        if descriptor.slug_field is None:
            return None
        return await self.store.find_first(collection, descriptor.slug_field, str(token))

    async def resolve(self, collection: Collection, token: Any) -> dict[str, Any]:
        """Like ``find`` but raises NotFoundError."""
        record = await self.find(collection, token)
        if record is None:
            raise NotFoundError(get_descriptor(collection).entity_label, token)
        return record
