from contextvars import ContextVar
from dataclasses import dataclass, field
from typing import Any, Callable

# Undo actions of the transaction running in the current task, if any.
_undo_log: ContextVar[list[Callable[[], None]] | None] = ContextVar("in_memory_undo_log", default=None)


@dataclass
class InMemoryDatabase:
    hotels: dict[int, dict[str, Any]] = field(default_factory=dict)
    rooms: dict[int, dict[str, Any]] = field(default_factory=dict)
    customers: dict[int, dict[str, Any]] = field(default_factory=dict)
    orders: dict[int, dict[str, Any]] = field(default_factory=dict)
    order_items: dict[int, dict[str, Any]] = field(default_factory=dict)
    order_payments: dict[int, str] = field(default_factory=dict)
    _sequences: dict[str, int] = field(default_factory=dict)

    def insert(self, table: str, row: dict[str, Any]) -> int:
        rows = getattr(self, table)
        row_id = self._sequences.get(table, 0) + 1
        self._sequences[table] = row_id
        rows[row_id] = {"id": row_id, **row}
        record_undo(lambda: rows.pop(row_id, None))
        return row_id

    def seed_catalog(self, hotels: list[dict[str, Any]], rooms: list[dict[str, Any]]) -> None:
        for hotel in hotels:
            self.hotels[hotel["id"]] = dict(hotel)
        for room in rooms:
            self.rooms[room["id"]] = dict(room)


def record_undo(action: Callable[[], None]) -> None:
    log = _undo_log.get()
    if log is not None:
        log.append(action)


def begin_undo_log() -> tuple[list[Callable[[], None]], Any]:
    log: list[Callable[[], None]] = []
    return log, _undo_log.set(log)


def end_undo_log(token: Any) -> None:
    _undo_log.reset(token)


def in_undo_log() -> bool:
    return _undo_log.get() is not None

