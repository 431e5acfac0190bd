from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any

import pytest


@dataclass
class FakeResult:
    data: list[dict[str, Any]]


class FakeQuery:
    def __init__(self, tables: dict[str, list[dict[str, Any]]], name: str) -> None:
        self.tables = tables
        self.name = name
        self.filters: list[tuple[str, Any]] = []
        self.pending: list[dict[str, Any]] | None = None
        self.conflict_keys: list[str] = []

    def select(self, *_columns: str) -> "FakeQuery":
        return self

    def eq(self, column: str, value: Any) -> "FakeQuery":
        self.filters.append((column, value))
        return self

    def limit(self, _count: int) -> "FakeQuery":
        return self

    def upsert(self, rows: list[dict[str, Any]], on_conflict: str = "") -> "FakeQuery":
        self.pending = rows
        self.conflict_keys = [key.strip() for key in on_conflict.split(",") if key.strip()]
        return self

    def execute(self) -> FakeResult:
        table = self.tables[self.name]
        if self.pending is not None:
            for row in self.pending:
                key = tuple(row.get(k) for k in self.conflict_keys)
                table[:] = [r for r in table if tuple(r.get(k) for k in self.conflict_keys) != key]
                table.append(dict(row))
            return FakeResult(list(self.pending))
        rows = [row for row in table if all(row.get(column) == value for column, value in self.filters)]
        return FakeResult(rows)


class FakeSupabase:
    def __init__(self) -> None:
        self.tables: dict[str, list[dict[str, Any]]] = defaultdict(list)
        self.requested: list[Any] = []

    def table(self, name: str) -> FakeQuery:
        return FakeQuery(self.tables, name)


@pytest.fixture
def fake_supabase() -> FakeSupabase:
    return FakeSupabase()
