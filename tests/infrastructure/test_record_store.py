"""JSON Record Store: file-backed collections on tmp_path.

Invariants tested:
    - Missing file reads as empty; malformed content raises StorageFormatError
    - create() rejects duplicate keys; update() shallow-merges; delete() reports
    - find_by() and read_all() keep insertion order
    - Writes leave no temp files behind
    - Summaries are addressed by practiceId
    - Unsynchronized read-modify-write: the later writer wins
"""

import asyncio
import json

import pytest

from practice_feedback.core.domain_types import Collection
from practice_feedback.core.errors import (
    ConflictError, ResourceNotFoundError, StorageFormatError, StorageIOError,
)
from practice_feedback.infrastructure.record_store import JsonRecordStore


@pytest.fixture
def store(tmp_path):
    return JsonRecordStore(tmp_path / "data")


async def test_missing_file_reads_empty(store):
    assert await store.read_all(Collection.TEAMS) == []
    assert await store.find_by_id(Collection.TEAMS, "t1") is None


async def test_write_creates_data_dir_and_pretty_json(store):
    await store.write_all(Collection.TEAMS, [{"id": "t1", "name": "Spikers"}])
    path = store.path_for(Collection.TEAMS)
    assert path.exists()
    assert json.loads(path.read_text()) == [{"id": "t1", "name": "Spikers"}]
    assert "\n  " in path.read_text()


async def test_malformed_json_raises_format_error(store):
    store.data_dir.mkdir(parents=True)
    store.path_for(Collection.PLAYERS).write_text("{not json")
    with pytest.raises(StorageFormatError) as exc_info:
        await store.read_all(Collection.PLAYERS)
    assert exc_info.value.collection == "players"


@pytest.mark.parametrize("content", ['{"id": "x"}', '"text"', "[1, 2]"])
async def test_non_array_of_objects_raises_format_error(store, content):
    store.data_dir.mkdir(parents=True)
    store.path_for(Collection.PRACTICES).write_text(content)
    with pytest.raises(StorageFormatError):
        await store.read_all(Collection.PRACTICES)


async def test_invalid_utf8_raises_format_error(store):
    store.data_dir.mkdir(parents=True)
    store.path_for(Collection.TEAMS).write_bytes(b'[{"id": "\xff"}]')
    with pytest.raises(StorageFormatError) as exc_info:
        await store.read_all(Collection.TEAMS)
    assert exc_info.value.collection == "teams"


async def test_unreadable_path_raises_io_error(store):
    # A directory where the file should be: not FileNotFoundError, still OSError
    store.path_for(Collection.TEAMS).mkdir(parents=True)
    with pytest.raises(StorageIOError) as exc_info:
        await store.read_all(Collection.TEAMS)
    assert exc_info.value.operation == "read"


async def test_create_appends_in_order(store):
    for n in range(3):
        await store.create(Collection.TEAMS, {"id": f"t{n}", "name": f"Team {n}"})
    records = await store.read_all(Collection.TEAMS)
    assert [r["id"] for r in records] == ["t0", "t1", "t2"]


async def test_create_rejects_duplicate_key(store):
    await store.create(Collection.TEAMS, {"id": "t1", "name": "A"})
    with pytest.raises(ConflictError, match="already exists in teams"):
        await store.create(Collection.TEAMS, {"id": "t1", "name": "B"})
    assert len(await store.read_all(Collection.TEAMS)) == 1


async def test_find_by_filters_and_keeps_order(store):
    await store.write_all(Collection.PLAYERS, [
        {"id": "p1", "teamId": "a"},
        {"id": "p2", "teamId": "b"},
        {"id": "p3", "teamId": "a"},
    ])
    found = await store.find_by(Collection.PLAYERS, "teamId", "a")
    assert [r["id"] for r in found] == ["p1", "p3"]
    assert await store.find_by(Collection.PLAYERS, "teamId", "zzz") == []


async def test_update_shallow_merges(store):
    await store.create(Collection.TEAMS, {
        "id": "t1", "name": "Old", "meta": {"a": 1, "b": 2},
    })
    merged = await store.update(Collection.TEAMS, "t1", {
        "name": "New", "meta": {"a": 9},
    })
    assert merged == {"id": "t1", "name": "New", "meta": {"a": 9}}
    assert await store.find_by_id(Collection.TEAMS, "t1") == merged


async def test_update_missing_raises_not_found(store):
    with pytest.raises(ResourceNotFoundError) as exc_info:
        await store.update(Collection.SUMMARIES, "nope", {"summary": "x"})
    assert exc_info.value.message == "Summary not found"


async def test_delete(store):
    await store.create(Collection.TEAMS, {"id": "t1"})
    await store.create(Collection.TEAMS, {"id": "t2"})
    assert await store.delete(Collection.TEAMS, "t1") is True
    assert await store.delete(Collection.TEAMS, "t1") is False
    assert [r["id"] for r in await store.read_all(Collection.TEAMS)] == ["t2"]


async def test_summaries_addressed_by_practice_id(store):
    await store.create(Collection.SUMMARIES, {
        "practiceId": "pr1", "summary": "first", "generatedAt": "t0",
    })
    with pytest.raises(ConflictError):
        await store.create(Collection.SUMMARIES, {
            "practiceId": "pr1", "summary": "again", "generatedAt": "t1",
        })
    found = await store.find_by_id(Collection.SUMMARIES, "pr1")
    assert found["summary"] == "first"


async def test_writes_leave_no_temp_files(store):
    for n in range(5):
        await store.create(Collection.RESPONSES, {"id": f"r{n}"})
    names = sorted(p.name for p in store.data_dir.iterdir())
    assert names == ["responses.json"]


async def test_concurrent_creates_may_lose_updates(store):
    """No locking: both creates succeed, the stored file holds one or both."""
    await asyncio.gather(
        store.create(Collection.TEAMS, {"id": "a"}),
        store.create(Collection.TEAMS, {"id": "b"}),
    )
    ids = {r["id"] for r in await store.read_all(Collection.TEAMS)}
    assert ids and ids <= {"a", "b"}


async def test_health_check_creates_dir(store):
    assert await store.health_check() is True
    assert store.data_dir.is_dir()


async def test_health_check_false_when_dir_is_a_file(tmp_path):
    blocker = tmp_path / "blocked"
    blocker.write_text("")
    assert await JsonRecordStore(blocker).health_check() is False
