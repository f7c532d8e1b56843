"""
Local Northwind table store backed by one JSON document per table.

The Northwind database is kept in flat JSON files (`<TableName>.json`, shaped
`{"<TableName>": [row, ...]}`). There is no locking and no integrity guarantee;
it exists for development only. Populate it with:

    python scripts/download_northwind_db.py

Tables are read-only: they are loaded once, never refreshed from disk and never
written back, so the lookup indexes built over them never need invalidating.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

Row = Dict[str, Any]


class RecordNotFoundError(KeyError):
    def __init__(self, table_name: str, key: Any) -> None:
        super().__init__(f"{table_name}: no row with key {key!r}")
        self.table_name = table_name
        self.key = key


def _index_key(value: Any) -> str:
    # Ids arrive as strings from URL paths while JSON columns hold integers;
    # keys follow JavaScript property-name coercion (5.0 -> "5", True -> "true").
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class LookupIndex:
    """Column value -> row position, built in a single pass."""

    def __init__(self, table: "Table", column: str) -> None:
        self.table = table
        self.column = column
        self._positions: Dict[str, int] = {}
        for position, row in enumerate(table.rows):
            if column not in row:
                continue
            # Duplicates: last occurrence wins.
            self._positions[_index_key(row[column])] = position

    @property
    def name(self) -> str:
        return f"{self.table.name}::{self.column}"

    def position(self, value: Any) -> Optional[int]:
        return self._positions.get(_index_key(value))

    def lookup(self, value: Any) -> Optional[Row]:
        position = self.position(value)
        if position is None:
            return None
        return self.table.rows[position]

    def __len__(self) -> int:
        return len(self._positions)


class Table:
    def __init__(self, store: "TableStore", name: str, primary_key: str, rows: Sequence[Row]) -> None:
        self._store = store
        self.name = name
        self.primary_key = primary_key
        self._rows: Tuple[Row, ...] = tuple(rows)

    @property
    def rows(self) -> Tuple[Row, ...]:
        return self._rows

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._rows)

    def find(self, key: Any) -> Optional[Row]:
        """Row with the given primary-key value, or None."""
        return self._store.get_index(self, self.primary_key).lookup(key)

    def item(self, key: Any) -> Row:
        """Row with the given primary-key value; raises RecordNotFoundError if absent."""
        row = self.find(key)
        if row is None:
            raise RecordNotFoundError(self.name, key)
        return row

    def save(self) -> None:
        # Read-only store: nothing is written back.
        logger.debug("save() on read-only table %s ignored", self.name)


class TableStore:
    """
    Owns the loaded tables and their indexes for one data directory.

    Create one at startup and close it at shutdown; nothing is shared between
    stores.
    """

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        self._tables: Dict[str, Table] = {}
        self._indexes: Dict[str, LookupIndex] = {}

    def table_path(self, table_name: str) -> Path:
        return self.directory / f"{table_name}.json"

    def get_table(self, table_name: str, primary_key: str) -> Table:
        tables_key = f"{table_name}::{primary_key}"
        table = self._tables.get(tables_key)
        if table is None:
            rows = self._read_rows(table_name)
            table = Table(self, table_name, primary_key, rows)
            self._tables[tables_key] = table
            logger.info("Loaded table %s (%d rows) from %s", table_name, len(table), self.directory)
        return table

    def get_index(self, table: Table, column: str) -> LookupIndex:
        index_name = f"{table.name}::{column}"
        index = self._indexes.get(index_name)
        if index is None:
            index = LookupIndex(table, column)
            self._indexes[index_name] = index
            logger.debug("Built index %s (%d keys)", index_name, len(index))
        return index

    def _read_rows(self, table_name: str) -> list:
        path = self.table_path(table_name)
        if not path.exists():
            logger.warning("Table file %s not found; treating %s as empty", path, table_name)
            return []

        try:
            raw = path.read_text(encoding="utf-8")
            if not raw.strip():
                return []
            data = json.loads(raw)
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            logger.warning("Malformed table file %s (%s); treating %s as empty", path, e, table_name)
            return []

        rows = data.get(table_name) if isinstance(data, dict) else None
        if not isinstance(rows, list):
            return []
        return [row for row in rows if isinstance(row, dict)]

    def close(self) -> None:
        self._indexes.clear()
        self._tables.clear()

    def __enter__(self) -> "TableStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
