"""The application: one model per table over a shared SQLite database, and its command line."""

from __future__ import annotations

import argparse
import sqlite3
import sys
from collections.abc import Mapping, Sequence
from datetime import date, datetime

from hospitaldb.form import EntryForm, InvalidFieldError
from hospitaldb.table_model import TableModel
from hospitaldb.tables import ElementType, columns_of, table_name_of

__all__ = ["HospitalApp", "search_pattern", "main"]

DEFAULT_DATABASE = "./hospital.db"

_TABLE_CHOICES: tuple[tuple[str, ElementType], ...] = (
    ("Палаты", ElementType.WARDS),
    ("Сотрудники", ElementType.EMPLOYEES),
    ("Квалификации", ElementType.EMPLOYEE_QUALIFICATIONS),
    ("Опыт работы", ElementType.EMPLOYEE_EXPERIENCE),
    ("График работы", ElementType.WORK_SCHEDULES),
    ("Пациенты", ElementType.PATIENTS),
    ("Родственники", ElementType.PATIENT_RELATIVES),
    ("Участковые врачи", ElementType.DISTRICT_DOCTORS),
    ("Приемы", ElementType.APPOINTMENTS),
    ("Амбулаторные пациенты", ElementType.OUTPATIENT_PATIENTS),
    ("Стационарные пациенты", ElementType.INPATIENT_PATIENTS),
    ("Медикаменты", ElementType.MEDICATIONS),
    ("Назначенные медикаменты", ElementType.PRESCRIBED_MEDICATIONS),
    ("Расходные материалы", ElementType.SUPPLIES),
    ("Поставщики", ElementType.SUPPLIERS),
    ("Заявки на материалы", ElementType.SUPPLY_REQUESTS),
)

_EDITABLE_TYPES = frozenset(element_type for _, element_type in _TABLE_CHOICES)
_MODEL_TYPES = tuple(t for t in ElementType if t is not ElementType.UNKNOWN)
_SQL_DATETIME = "%Y-%m-%d %H:%M:%S"


def search_pattern(text: str) -> str:
    """Turn a search text into a LIKE pattern matching it anywhere; empty matches all."""
    return f"%{text}%" if text else "%"


def _date_text(value: str | date) -> str:
    if isinstance(value, datetime):
        return value.strftime(_SQL_DATETIME)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).strftime(_SQL_DATETIME)
    return value


class HospitalApp:
    """Models for every hospital table, sharing one database connection."""

    def __init__(self, database_path: str = DEFAULT_DATABASE) -> None:
        self._connection = sqlite3.connect(database_path)
        try:
            self._models = {t: TableModel(t, self._connection) for t in _MODEL_TYPES}
        except sqlite3.Error:
            self._connection.close()
            raise

    def __enter__(self) -> HospitalApp:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the database connection."""
        self._connection.close()

    def table_choices(self) -> list[tuple[str, ElementType]]:
        """The tables a user can pick, with their display labels, in display order."""
        return list(_TABLE_CHOICES)

    def model_for(self, element_type: ElementType) -> TableModel:
        """The model showing the given table."""
        try:
            return self._models[element_type]
        except KeyError:
            raise KeyError(f"no table for {element_type.name}") from None

    def _editable_model(self, element_type: ElementType) -> TableModel:
        if element_type not in _EDITABLE_TYPES:
            raise ValueError(f"{element_type.name} cannot be edited")
        return self.model_for(element_type)

    def add_row(self, element_type: ElementType, values: Mapping[str, str]) -> None:
        """Validate the entered field values and insert them as a new row."""
        model = self._editable_model(element_type)
        row = EntryForm(element_type).collect(values)
        model.add_item(row)

    def delete_row(self, element_type: ElementType, row: int) -> None:
        """Delete the row shown at the given position of a table."""
        self._editable_model(element_type).remove_item(row)

    def search_employees(
        self, position: str, qualification_date: str | date
    ) -> list[list[str]]:
        """Employees whose position contains the text, qualified no later than the date."""
        model = self.model_for(ElementType.SEARCHING_RESULT)
        model.search(search_pattern(position), _date_text(qualification_date))
        return model.rows()


def _table_arg(text: str) -> ElementType:
    for _, element_type in _TABLE_CHOICES:
        if text == table_name_of(element_type) or text.upper() == element_type.name:
            return element_type
    raise argparse.ArgumentTypeError(f"unknown table {text!r}")


def _field_arg(text: str) -> tuple[str, str]:
    field, sep, value = text.partition("=")
    if not sep or not field:
        raise argparse.ArgumentTypeError(f"expected FIELD=VALUE, got {text!r}")
    return field, value


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hospitaldb", description="Hospital database front-end.")
    parser.add_argument("--database", default=DEFAULT_DATABASE, help="SQLite database file")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("tables", help="list the tables")

    show = commands.add_parser("show", help="print the rows of a table")
    show.add_argument("table", type=_table_arg)

    add = commands.add_parser("add", help="add a row to a table")
    add.add_argument("table", type=_table_arg)
    add.add_argument("fields", nargs="*", type=_field_arg, metavar="FIELD=VALUE")

    delete = commands.add_parser("delete", help="delete the row at a position (from 0)")
    delete.add_argument("table", type=_table_arg)
    delete.add_argument("row", type=int)

    search = commands.add_parser("search", help="search employees")
    search.add_argument("--position", default="", help="text the position contains")
    search.add_argument(
        "--date",
        default=None,
        help="latest qualification date, YYYY-MM-DD HH:MM:SS (default: now)",
    )
    return parser


def _print_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> None:
    print("\t".join(headers))
    for row in rows:
        print("\t".join(row))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command line front-end."""
    args = _build_parser().parse_args(argv)
    try:
        with HospitalApp(args.database) as app:
            if args.command == "tables":
                for label, element_type in app.table_choices():
                    print(f"{table_name_of(element_type)}\t{label}")
            elif args.command == "show":
                model = app.model_for(args.table)
                _print_table(model.headers(), model.rows())
            elif args.command == "add":
                app.add_row(args.table, dict(args.fields))
            elif args.command == "delete":
                app.delete_row(args.table, args.row)
            elif args.command == "search":
                when = args.date or datetime.now().strftime(_SQL_DATETIME)
                rows = app.search_employees(args.position, when)
                _print_table(columns_of(ElementType.SEARCHING_RESULT), rows)
    except (InvalidFieldError, IndexError, ValueError, sqlite3.Error) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())