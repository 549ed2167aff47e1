from __future__ import annotations

import threading
from dataclasses import replace
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class InMemoryTable(Generic[T]):
    """Auto-incrementing collection of frozen dataclass rows.

    Every write happens under a lock so a single add/update/delete is atomic
    even when several request threads share the table.
    """

    def __init__(self, id_field: str):
        self._id_field = id_field
        self._rows: dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def _id_of(self, row: T) -> int:
        return int(getattr(row, self._id_field))

    def insert(self, row: T) -> T:
        with self._lock:
            stored = replace(row, **{self._id_field: self._next_id})
            self._rows[self._next_id] = stored
            self._next_id += 1
            return stored

    def overwrite(self, row: T) -> T:
        with self._lock:
            row_id = self._id_of(row)
            if row_id in self._rows:
                self._rows[row_id] = row
            return row

    def remove(self, row_id: int) -> bool:
        with self._lock:
            return self._rows.pop(int(row_id), None) is not None

    def get(self, row_id: int) -> Optional[T]:
        return self._rows.get(int(row_id))

    def first(self, predicate: Callable[[T], bool]) -> Optional[T]:
        for row in self.all():
            if predicate(row):
                return row
        return None

    def filter(self, predicate: Callable[[T], bool]) -> list[T]:
        return [row for row in self.all() if predicate(row)]

    def all(self) -> list[T]:
        with self._lock:
            return list(self._rows.values())
