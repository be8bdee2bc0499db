"""
Stage history recording for candidates and applications.

Only the dedicated stage-update operations go through here. Generic
update/patch/bulk paths write ``stage`` without touching ``stage_history``.

The read and the write below are separate store calls with no lock or
version check in between: two concurrent stage updates on the same record
are last-writer-wins and one of the appended entries can be lost.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional

from talentflow.errors import NotFoundError
from talentflow.repositories.collections import Collection, get_descriptor
from talentflow.repositories.entity_store import EntityStore
from talentflow.schemas.common import Stage
from talentflow.utils.time import utc_now

logger = logging.getLogger(__name__)

INITIAL_NOTE = "Initial application received"


def history_entry(stage: Stage | str, notes: Optional[str] = None, when: Optional[datetime] = None) -> dict[str, Any]:
    return {
        "stage": Stage(stage).value if isinstance(stage, Stage) else stage,
        "date": (when or utc_now()).isoformat(),
        "notes": notes or "",
    }


def initial_history(record: dict[str, Any], notes: str = INITIAL_NOTE) -> List[dict[str, Any]]:
    """History for a newly created record: one entry for its starting stage."""
    return [history_entry(record.get("stage") or Stage.APPLIED, notes)]


class StageHistoryRecorder:
    """Sets a record's stage and appends the transition to its history."""

    def __init__(self, store: EntityStore):
        self.store = store

    async def record(
        self,
        collection: Collection,
        record_id: int,
        stage: Stage | str,
        notes: Optional[str] = None,
    ) -> dict[str, Any]:
        label = get_descriptor(collection).entity_label
        current = await self.store.get(collection, record_id)
        if current is None:
            raise NotFoundError(label, record_id)

        previous = current.get("stage_history")
        history = list(previous) if isinstance(previous, list) else []
        entry = history_entry(stage, notes)
        history.append(entry)

        updated = await self.store.update(
            collection,
            record_id,
            {"stage": entry["stage"], "stage_history": history},
        )
        if updated is None:
            # deleted between the read and the write
            raise NotFoundError(label, record_id)

        logger.info(
            "%s %s moved %s -> %s",
            label,
            record_id,
            current.get("stage"),
            entry["stage"],
        )
        return updated
