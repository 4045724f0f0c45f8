"""JSON document store — the store of record.

All tables (products, colors, variants, orders, reviews) live in one JSON
document, so a unit of work can publish every change with a single
atomic file replace.

Access to a document is serialised twice: a thread lock inside the
process, and a ``FileLock`` on ``<store>.lock`` across processes. Every
CLI invocation is its own process, so the file lock is what keeps two
concurrent checkouts from reading the same stock.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path

from filelock import FileLock, Timeout

from storefront.domain.exceptions import PersistenceError

TABLES = ("products", "colors", "variants", "orders", "reviews")

DEFAULT_LOCK_TIMEOUT = 30.0

_locks: dict[Path, tuple[threading.RLock, FileLock]] = {}
_locks_guard = threading.Lock()


def _locks_for(path: Path, timeout: float) -> tuple[threading.RLock, FileLock]:
    with _locks_guard:
        if path not in _locks:
            _locks[path] = (
                threading.RLock(),
                FileLock(str(path) + ".lock", timeout=timeout),
            )
        return _locks[path]


class JsonDocumentStore:

    def __init__(self, file_path: Path, lock_timeout: float = DEFAULT_LOCK_TIMEOUT) -> None:
        self._file_path = file_path.resolve()
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        self._thread_lock, self._file_lock = _locks_for(self._file_path, lock_timeout)

        self.acquire()
        try:
            self._ensure_file()
        finally:
            self.release()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def acquire(self) -> None:
        """Take exclusive access to the document, waiting for other holders."""
        self._thread_lock.acquire()
        try:
            self._file_lock.acquire()
        except Timeout as exc:
            self._thread_lock.release()
            raise PersistenceError(
                f"Store {self._file_path} is locked by another process; try again"
            ) from exc

    def release(self) -> None:
        try:
            self._file_lock.release()
        finally:
            self._thread_lock.release()

    def load(self) -> dict[str, list[dict]]:
        """Return a fresh copy of every table."""
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            raise PersistenceError(f"Store {self._file_path} is unreadable: {exc}") from exc
        return {table: raw.get(table, []) for table in TABLES}

    def write(self, document: dict[str, list[dict]]) -> None:
        """Replace the whole document in one step."""
        payload = json.dumps(document, indent=2) + "\n"
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=f".{self._file_path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_name, self._file_path)
        except OSError as exc:
            Path(tmp_name).unlink(missing_ok=True)
            raise PersistenceError(
                f"Could not write {self._file_path}; no changes were saved: {exc}"
            ) from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self.write({table: [] for table in TABLES})
