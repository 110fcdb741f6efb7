"""JSON Record Store: whole-collection persistence over one JSON file per collection.

Invariants:
    - A missing collection file reads as an empty collection
    - Every write replaces the whole file atomically (temp file + os.replace):
      readers see the old array or the new one, never a partial file
    - Records are matched on the collection key (Collection.key_field)
    - find_by() and read_all() preserve insertion order
    - OSError maps to StorageIOError; invalid UTF-8, bad JSON or non-array
      content maps to StorageFormatError (core/errors.py)

Design Decisions:
    - Every operation is a full read-modify-write. No locks: two concurrent
      writers race and the later write wins (lost update). Accepted at
      single-club scale
    - File IO runs in a worker thread (asyncio.to_thread): the awaiting request
      blocks, the event loop does not
    - Store instance constructed by create_app() and injected: no module-level
      singleton, so tests get isolated stores on tmp_path
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from practice_feedback.core.domain_types import Collection
from practice_feedback.core.errors import (
    ConflictError, ResourceNotFoundError, StorageFormatError, StorageIOError,
)

logger = logging.getLogger(__name__)

Record = dict[str, Any]


class JsonRecordStore:
    """Generic read/write/find/create/update/delete over named collections."""

    def __init__(self, data_dir: str | os.PathLike):
        self.data_dir = Path(data_dir)

    def path_for(self, collection: Collection) -> Path:
        return self.data_dir / collection.filename

    # ─── Whole-collection IO ────────────────────────────────────

    async def read_all(self, collection: Collection) -> list[Record]:
        """Return every record, or [] when the collection file is absent."""
        return await asyncio.to_thread(self._read_file, collection)

    async def write_all(
        self, collection: Collection, records: list[Record],
    ) -> None:
        """Replace the collection with `records`, creating data_dir if needed."""
        await asyncio.to_thread(self._write_file, collection, records)

    # ─── Record operations ──────────────────────────────────────

    async def find_by_id(
        self, collection: Collection, record_id: str,
    ) -> Record | None:
        key = collection.key_field
        for record in await self.read_all(collection):
            if record.get(key) == record_id:
                return record
        return None

    async def find_by(
        self, collection: Collection, field: str, value: Any,
    ) -> list[Record]:
        records = await self.read_all(collection)
        return [r for r in records if r.get(field) == value]

    async def create(self, collection: Collection, record: Record) -> Record:
        """Append `record`. ConflictError if its key is already taken."""
        key = collection.key_field
        records = await self.read_all(collection)
        if any(r.get(key) == record.get(key) for r in records):
            raise ConflictError(
                f"Record with {key} {record.get(key)} already exists "
                f"in {collection.value}",
            )
        records.append(record)
        await self.write_all(collection, records)
        logger.debug(
            f"Created record {record.get(key)}",
            extra={"collection": collection.value},
        )
        return record

    async def update(
        self, collection: Collection, record_id: str, fields: Record,
    ) -> Record:
        """Shallow-merge `fields` into the keyed record and persist it."""
        key = collection.key_field
        records = await self.read_all(collection)
        for index, existing in enumerate(records):
            if existing.get(key) == record_id:
                merged = {**existing, **fields}
                records[index] = merged
                await self.write_all(collection, records)
                return merged
        raise ResourceNotFoundError(_resource_name(collection), record_id)

    async def delete(self, collection: Collection, record_id: str) -> bool:
        """Remove the keyed record. False when nothing matched."""
        key = collection.key_field
        records = await self.read_all(collection)
        remaining = [r for r in records if r.get(key) != record_id]
        if len(remaining) == len(records):
            return False
        await self.write_all(collection, remaining)
        return True

    async def health_check(self) -> bool:
        """Check the data directory is creatable and writable (readiness probe)."""
        try:
            return await asyncio.to_thread(self._probe_data_dir)
        except OSError as e:
            logger.error(f"Data directory health check failed: {e}")
            return False

    # ─── Blocking helpers (worker thread) ───────────────────────

    def _read_file(self, collection: Collection) -> list[Record]:
        path = self.path_for(collection)
        try:
            raw = path.read_bytes()
        except FileNotFoundError:
            return []
        except OSError as e:
            logger.error(
                f"Read failed for {path}: {e}",
                extra={"collection": collection.value},
            )
            raise StorageIOError(str(e), collection.value, "read")

        try:
            data = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.error(
                f"Invalid JSON in {path}: {e}",
                extra={"collection": collection.value},
            )
            raise StorageFormatError(str(e), collection.value)

        if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
            raise StorageFormatError(
                "expected a JSON array of objects", collection.value,
            )
        return data

    def _write_file(self, collection: Collection, records: list[Record]) -> None:
        path = self.path_for(collection)
        payload = json.dumps(records, indent=2, ensure_ascii=False)
        tmp_name = None
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=self.data_dir, prefix=f".{collection.value}.", suffix=".tmp",
            )
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            logger.error(
                f"Write failed for {path}: {e}",
                extra={"collection": collection.value},
            )
            raise StorageIOError(str(e), collection.value, "write")

    def _probe_data_dir(self) -> bool:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        with tempfile.TemporaryFile(dir=self.data_dir):
            pass
        return True


_RESOURCE_NAMES = {
    Collection.TEAMS: "Team",
    Collection.PLAYERS: "Player",
    Collection.PRACTICES: "Practice",
    Collection.QUESTIONS: "Question",
    Collection.RESPONSES: "Response",
    Collection.SUMMARIES: "Summary",
}


def _resource_name(collection: Collection) -> str:
    return _RESOURCE_NAMES[collection]
