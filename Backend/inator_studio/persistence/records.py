# inator_studio/persistence/records.py
"""
Flat-file record store: one pretty-printed JSON file per record.
"""
import asyncio
import json
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from inator_studio.core.exceptions import StorageReadFailed, StorageWriteFailed
from inator_studio.core.logging import log
from inator_studio.models.record import Record


RECORD_SUFFIX = ".json"

# A same-millisecond collision moves the id forward by 1ms, at most this many times
MAX_ID_BUMPS = 100


def record_path(storage_dir: Path, record_id: str) -> Path:
    return storage_dir / f"{record_id}{RECORD_SUFFIX}"


def _timestamp(now: datetime) -> str:
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class RecordStore:
    """
    Directory-backed store of immutable records.

    save() creates each file exclusively, so an existing record is never
    overwritten. list_all() is fail-open: unreadable storage means no history.
    """

    def __init__(self, storage_dir: Path):
        self.storage_dir = Path(storage_dir)

    @property
    def location(self) -> str:
        return str(self.storage_dir)

    async def save(self, title: str, description: str, result: str) -> Record:
        record = await asyncio.to_thread(self._write, title, description, result)
        log("STORE", f"Record saved: {record.id}")
        return record

    async def list_all(self) -> List[Record]:
        """All stored records, newest first. Returns [] if storage can't be read."""
        try:
            return await asyncio.to_thread(self._read_all)
        except StorageReadFailed as e:
            log("STORE", f"⚠️ {e.message} - returning empty history")
            return []

    def _write(self, title: str, description: str, result: str) -> Record:
        now = datetime.now(timezone.utc)
        millis = int(now.timestamp() * 1000)
        path = self.storage_dir

        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            for bump in range(MAX_ID_BUMPS + 1):
                record = Record(
                    id=str(millis + bump),
                    title=title,
                    description=description,
                    result=result,
                    createdAt=_timestamp(now),
                )
                path = record_path(self.storage_dir, record.id)
                # Encode before the file exists; text that is not valid UTF-8
                # (e.g. a lone surrogate) must never leave a partial record behind
                data = json.dumps(record.model_dump(), indent=2, ensure_ascii=False).encode("utf-8")
                try:
                    f = open(path, "xb")
                except FileExistsError:
                    continue
                try:
                    with f:
                        f.write(data)
                except BaseException:
                    path.unlink(missing_ok=True)
                    raise
                return record
        except (OSError, ValueError) as e:
            raise StorageWriteFailed(str(path), str(e)) from e

        raise StorageWriteFailed(str(path), f"no free record id after {MAX_ID_BUMPS} attempts")

    def _read_all(self) -> List[Record]:
        try:
            self.storage_dir.mkdir(parents=True, exist_ok=True)
            files = [p for p in self.storage_dir.iterdir() if p.suffix == RECORD_SUFFIX and p.is_file()]
            records = [
                Record.model_validate(json.loads(p.read_text(encoding="utf-8")))
                for p in files
            ]
            records.sort(key=lambda r: int(r.id), reverse=True)
        except (OSError, ValueError) as e:
            raise StorageReadFailed(str(self.storage_dir), str(e)) from e

        log("HISTORY", f"Loaded {len(records)} records")
        return records
