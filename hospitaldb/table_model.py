"""A tabular view of one hospital table, kept in step with the database."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterable, Sequence

from hospitaldb.database import Database
from hospitaldb.tables import ElementType, columns_of

__all__ = ["TableModel"]


class TableModel:
    """Rows of one table held in memory, with editing that goes to the database."""

    def __init__(self, table_type: ElementType, connection: sqlite3.Connection) -> None:
        self.table_type = table_type
        self._db = Database(table_type, connection)
        self._values: list[list[str]] = self._db.select_rows()

    def row_count(self) -> int:
        """Number of rows shown."""
        return len(self._values)

    def column_count(self) -> int:
        """Number of columns shown."""
        return len(self.headers())

    def headers(self) -> list[str]:
        """Column headers of the table."""
        return columns_of(self.table_type)

    def data(self, row: int, column: int) -> str:
        """Text of one cell."""
        if not 0 <= row < len(self._values):
            raise IndexError(f"row {row} out of range")
        cells = self._values[row]
        if not 0 <= column < len(cells):
            raise IndexError(f"column {column} out of range")
        return cells[column]

    def header_data(self, section: int) -> str | int:
        """Header of a column; past the known columns, the 1-based section number."""
        headers = self.headers()
        if 0 <= section < len(headers):
            return headers[section]
        return section + 1

    def populate(self, values: Iterable[Sequence[str]]) -> None:
        """Replace the rows shown."""
        self._values = [list(row) for row in values]

    def refresh(self) -> list[list[str]]:
        """Reload every row from the database and return them."""
        self.populate(self._db.select_rows())
        return self.rows()

    def add_item(self, new_value: Sequence[str]) -> None:
        """Insert a row (without id) and reload."""
        self._db.insert_row(new_value)
        self.refresh()

    def remove_item(self, row: int) -> None:
        """Delete the row shown at the given position and reload."""
        if not 0 <= row < len(self._values):
            raise IndexError(f"row {row} out of range")
        self._db.delete_row(self._values[row][0])
        self.refresh()

    def search(self, position: str, qualification_date: str) -> None:
        """Show employees matching a position pattern and a latest qualification date."""
        self.populate(self._db.search_rows(position, qualification_date))

    def rows(self) -> list[list[str]]:
        """A copy of the rows shown."""
        return [list(row) for row in self._values]