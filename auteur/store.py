"""An in-memory document store that keeps JSON-like records in tables."""

from __future__ import annotations

import copy
import threading
import uuid
from collections.abc import Mapping, Sequence
from typing import Any

__all__ = ["StoreError", "MemoryPostStore"]


class StoreError(Exception):
    """Raised when the store refuses an operation."""


class MemoryPostStore:
    """Tables of records, each record a dict with an ``id`` of the form ``table:key``."""

    def __init__(self) -> None:
        self._tables: dict[str, dict[str, dict[str, Any]]] = {}
        self._lock = threading.Lock()

    @staticmethod
    def _check_table(table: str) -> None:
        if not isinstance(table, str) or not table or ":" in table:
            raise StoreError(f"invalid table name: {table!r}")

    @staticmethod
    def _record_id(table: str, given: Any) -> str:
        if given is None:
            return f"{table}:{uuid.uuid4().hex[:20]}"
        if not isinstance(given, str) or not given:
            raise StoreError(f"invalid record id: {given!r}")
        prefix = f"{table}:"
        return given if given.startswith(prefix) else prefix + given

    def insert(self, table: str, content: Any) -> list[dict[str, Any]]:
        """Insert one record or a sequence of records and return what was created."""
        self._check_table(table)
        if isinstance(content, Mapping):
            items = [content]
        elif isinstance(content, Sequence) and not isinstance(content, (str, bytes)):
            items = list(content)
        else:
            raise StoreError("content must be an object or a list of objects")
        for item in items:
            if not isinstance(item, Mapping):
                raise StoreError("content must be an object or a list of objects")

        with self._lock:
            rows = self._tables.get(table, {})
            staged: dict[str, dict[str, Any]] = {}
            for item in items:
                record = copy.deepcopy(dict(item))
                record_id = self._record_id(table, record.get("id"))
                if record_id in rows or record_id in staged:
                    raise StoreError(f"record `{record_id}` already exists")
                record["id"] = record_id
                staged[record_id] = record
            rows.update(staged)
            self._tables[table] = rows
            return [copy.deepcopy(record) for record in staged.values()]

    def select(self, table: str) -> list[dict[str, Any]]:
        """Return copies of every record in ``table``, oldest first."""
        self._check_table(table)
        with self._lock:
            return [copy.deepcopy(r) for r in self._tables.get(table, {}).values()]