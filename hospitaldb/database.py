"""Row-level access to the hospital tables stored in SQLite."""

from __future__ import annotations

import sqlite3
from collections.abc import Sequence

from hospitaldb.tables import ElementType, columns_of, table_name_of

__all__ = ["Database"]

_EMPLOYEE_JOIN = (
    "SELECT e.* "
    "FROM employees e "
    "JOIN employee_qualifications eq ON e.id = eq.employee_id "
)

_EMPLOYEE_SEARCH = (
    _EMPLOYEE_JOIN
    + "WHERE e.position LIKE ? "
    "AND strftime('%Y-%m-%d %H:%M:%S', eq.qualification_date) <= ? "
)


def _to_text(value: object) -> str:
    """Render a stored value as the text shown in a table cell."""
    if value is None:
        return ""
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    if isinstance(value, float):
        if value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    return str(value)


class Database:
    """Reads and writes the rows of one table through an SQLite connection."""

    def __init__(self, table_type: ElementType, connection: sqlite3.Connection) -> None:
        self.table_type = table_type
        self._connection = connection

    def column_names(self) -> list[str]:
        """Column names of the table, the id column first."""
        return columns_of(self.table_type)

    def table_name(self) -> str:
        """SQL name of the table."""
        return table_name_of(self.table_type)

    def insert_row(self, row: Sequence[str]) -> None:
        """Insert one row; the values cover every column except the id."""
        columns = self.column_names()[1:]
        if not columns or len(row) != len(columns):
            raise ValueError(
                f"{self.table_type.name} expects {len(columns)} values, got {len(row)}"
            )
        placeholders = ", ".join(f":{name}" for name in columns)
        sql = (
            f"INSERT INTO {self.table_name()} ({', '.join(columns)}) "
            f"VALUES ({placeholders})"
        )
        with self._connection:
            self._connection.execute(sql, dict(zip(columns, row)))

    def delete_row(self, row_id: str) -> None:
        """Delete the row whose id column equals row_id."""
        columns = self.column_names()
        if not columns:
            raise ValueError(f"{self.table_type.name} has no columns")
        sql = f"DELETE FROM {self.table_name()} WHERE {columns[0]} = :id"
        with self._connection:
            self._connection.execute(sql, {"id": row_id})

    def search_rows(self, position: str, qualification_date: str) -> list[list[str]]:
        """Employees whose position is LIKE the pattern and qualified no later than the date."""
        cursor = self._connection.execute(_EMPLOYEE_SEARCH, (position, qualification_date))
        return self._fetch_all(cursor)

    def select_rows(self) -> list[list[str]]:
        """Every row of the table, each as a list of cell texts."""
        if self.table_type is ElementType.SEARCHING_RESULT:
            cursor = self._connection.execute(_EMPLOYEE_JOIN)
        else:
            cursor = self._connection.execute(f"SELECT * FROM {self.table_name()}")
        return self._fetch_all(cursor)

    @staticmethod
    def _fetch_all(cursor: sqlite3.Cursor) -> list[list[str]]:
        return [[_to_text(value) for value in record] for record in cursor]