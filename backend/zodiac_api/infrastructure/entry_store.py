"""Entry Store - bounded, durable entry log backed by a single JSON document.

Invariants:
    - Persisted document is a JSON array of entries in insertion order
    - Never more than retention_cap entries persisted (FIFO eviction)
    - append() is a full read-modify-write serialized by one asyncio.Lock
    - Writes go to a temp file then os.replace() - readers never see a partial file
    - All OSError / JSON / shape failures mapped to PersistenceError (core/errors.py)

Design Decisions:
    - Store object owns the file and is injected via app.state: no module-level state
    - Blocking file IO runs in asyncio.to_thread so the event loop stays free
    - Lock is per-store and per-process; multi-worker deployments sharing one
      file are out of scope
"""

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path

from zodiac_api.core.domain_types import Entry
from zodiac_api.core.entry_log import append_capped, recent_window
from zodiac_api.core.errors import PersistenceError

logger = logging.getLogger(__name__)

DEFAULT_RETENTION_CAP: int = 100
DEFAULT_RECENT_LIMIT: int = 10


class JsonFileEntryStore:
    """EntryStore persisted as one pretty-printed JSON document."""

    def __init__(
        self,
        path: str | Path,
        retention_cap: int = DEFAULT_RETENTION_CAP,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
    ):
        if retention_cap < 1:
            raise ValueError(f"retention_cap must be >= 1, got {retention_cap}")
        self.path = Path(path)
        self.retention_cap = retention_cap
        self.recent_limit = recent_limit
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        """Create an empty document on first run."""
        async with self._lock:
            await asyncio.to_thread(self._initialize_sync)

    async def append(self, entry: Entry) -> None:
        async with self._lock:
            entries = await asyncio.to_thread(self._read_sync)
            updated = append_capped(entries, entry, self.retention_cap)
            await asyncio.to_thread(self._write_sync, updated)
        logger.info(
            "Entry appended",
            extra={
                "entry_id": entry.id,
                "zodiac_sign": entry.zodiac_sign,
                "retained": len(updated),
            },
        )

    async def recent(self, n: int | None = None) -> list[Entry]:
        entries = await asyncio.to_thread(self._read_sync)
        return recent_window(entries, self.recent_limit if n is None else n)

    async def all(self) -> list[Entry]:
        return await asyncio.to_thread(self._read_sync)

    # ─── Sync IO (runs in worker thread) ────────────────────────

    def _initialize_sync(self) -> None:
        if self.path.exists():
            return
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create data directory: {e}")
            raise PersistenceError("Failed to initialize data file", "initialize")
        self._write_sync([])
        logger.info("Initialized empty data file", extra={"path": str(self.path)})

    def _read_sync(self) -> list[Entry]:
        if not self.path.exists():
            return []
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            logger.error(f"Error reading data file: {e}", extra={"operation": "read"})
            raise PersistenceError("Failed to read data", "read")
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Malformed data file: {e}", extra={"operation": "read"})
            raise PersistenceError("Failed to read data", "read")
        if not isinstance(data, list):
            logger.error(
                f"Data file holds {type(data).__name__}, expected list",
                extra={"operation": "read"},
            )
            raise PersistenceError("Failed to read data", "read")
        try:
            return [Entry.from_dict(item) for item in data]
        except ValueError as e:
            logger.error(f"Invalid entry in data file: {e}", extra={"operation": "read"})
            raise PersistenceError("Failed to read data", "read")

    def _write_sync(self, entries: list[Entry]) -> None:
        payload = json.dumps(
            [e.to_dict() for e in entries], indent=2, ensure_ascii=False,
        )
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.path.parent,
                prefix=f".{self.path.name}.", suffix=".tmp", delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self.path)
        except OSError as e:
            logger.error(f"Error writing data file: {e}", extra={"operation": "write"})
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError("Failed to save data", "write")


class InMemoryEntryStore:
    """EntryStore kept in process memory. Same semantics, nothing durable."""

    def __init__(
        self,
        retention_cap: int = DEFAULT_RETENTION_CAP,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
    ):
        if retention_cap < 1:
            raise ValueError(f"retention_cap must be >= 1, got {retention_cap}")
        self.retention_cap = retention_cap
        self.recent_limit = recent_limit
        self._entries: list[Entry] = []
        self._lock = asyncio.Lock()

    async def initialize(self) -> None:
        return None

    async def append(self, entry: Entry) -> None:
        async with self._lock:
            self._entries = append_capped(self._entries, entry, self.retention_cap)

    async def recent(self, n: int | None = None) -> list[Entry]:
        return recent_window(self._entries, self.recent_limit if n is None else n)

    async def all(self) -> list[Entry]:
        return list(self._entries)
