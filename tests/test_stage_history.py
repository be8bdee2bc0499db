"""Stage changes through the dedicated operations are recorded; generic writes are not."""

import pytest

from talentflow.errors import NotFoundError
from talentflow.repositories.collections import Collection
from talentflow.schemas.common import Stage
from talentflow.services.application_service import ApplicationService
from talentflow.services.candidate_service import CandidateService
from talentflow.services.stage_history import INITIAL_NOTE, StageHistoryRecorder, history_entry

pytestmark = pytest.mark.db


def test_history_entry_shape():
    entry = history_entry(Stage.SCREEN, None)

    assert entry["stage"] == "screen"
    assert entry["notes"] == ""
    assert "T" in entry["date"]


@pytest.mark.asyncio
async def test_new_candidate_starts_with_one_entry(store, network):
    candidate = await CandidateService(store, network).create({"name": "Maya Johnson"})

    assert candidate["stage"] == "applied"
    assert len(candidate["stage_history"]) == 1
    assert candidate["stage_history"][0]["stage"] == "applied"
    assert candidate["stage_history"][0]["notes"] == INITIAL_NOTE


@pytest.mark.asyncio
async def test_stage_updates_append_in_order(store, network):
    service = CandidateService(store, network)
    candidate = await service.create({"name": "Alex Turner", "stage": "applied"})

    await service.update_stage(candidate["id"], Stage.SCREEN, "Phone screen booked")
    updated = await service.update_stage(str(candidate["id"]), "test", None)

    assert updated["stage"] == "test"
    assert [entry["stage"] for entry in updated["stage_history"]] == ["applied", "screen", "test"]
    assert updated["stage_history"][1]["notes"] == "Phone screen booked"
    assert updated["stage_history"][0] == candidate["stage_history"][0]


@pytest.mark.asyncio
async def test_generic_update_changes_stage_without_history(store, network):
    service = CandidateService(store, network)
    candidate = await service.create({"name": "Nathan Lee"})

    updated = await service.update(candidate["id"], {"stage": "offer", "stage_history": []})

    assert updated["stage"] == "offer"
    assert [entry["stage"] for entry in updated["stage_history"]] == ["applied"]


@pytest.mark.asyncio
async def test_replace_keeps_history_and_notes(store, network):
    service = CandidateService(store, network)
    candidate = await service.create({"name": "Chloe Anderson"})
    await service.add_note(candidate["id"], "Strong portfolio")

    replaced = await service.replace(candidate["id"], {"name": "Chloe A.", "stage": "screen"})

    assert replaced["name"] == "Chloe A."
    assert len(replaced["stage_history"]) == 1
    assert [note["content"] for note in replaced["notes_log"]] == ["Strong portfolio"]


@pytest.mark.asyncio
async def test_application_stage_update(store, network):
    service = ApplicationService(store, network)
    application = await service.create({"job_id": 1, "candidate_id": 1})

    assert application["applied_at"]
    updated = await service.update_stage(application["id"], Stage.REJECTED, "Position filled")

    assert updated["stage"] == "rejected"
    assert [entry["stage"] for entry in updated["stage_history"]] == ["applied", "rejected"]


@pytest.mark.asyncio
async def test_recorder_on_missing_record(store):
    with pytest.raises(NotFoundError):
        await StageHistoryRecorder(store).record(Collection.CANDIDATES, 404, Stage.HIRED)


@pytest.mark.asyncio
async def test_create_ignores_supplied_history_and_notes(store, network):
    candidate = await CandidateService(store, network).create({
        "name": "Ryan O'Connor",
        "stage": "screen",
        "stage_history": [{"stage": "hired", "date": "2020-01-01T00:00:00+00:00", "notes": ""}],
        "notes_log": [{"id": 9, "content": "forged"}],
    })

    assert [entry["stage"] for entry in candidate["stage_history"]] == ["screen"]
    assert "notes_log" not in candidate
