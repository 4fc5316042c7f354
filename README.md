# hospitaldb

A small front-end for a hospital's SQLite database. It knows sixteen tables:
wards, employees, their qualifications, work experience and schedules,
patients and their relatives, district doctors, appointments, outpatients and
inpatients, medications and prescriptions, supplies, suppliers and supply
requests. It can list their rows, add and delete rows, and search for
employees by position and qualification date.

## Installing

```
pip install .
```

## The command line

```
hospitaldb [--database FILE] COMMAND ...
```

`--database` names the SQLite file to open; it defaults to `./hospital.db`.

- `hospitaldb tables` lists the tables: SQL name and display label.
- `hospitaldb show TABLE` prints the column headers and every row of a table,
  tab-separated.
- `hospitaldb add TABLE FIELD=VALUE ...` adds a row. Every field except `id`
  may be given; a field left out is stored as empty text. A non-empty value
  must match its field's format, and an unknown field name is refused.
- `hospitaldb delete TABLE ROW` deletes the row shown at position `ROW`
  (counting from 0) of `show TABLE`.
- `hospitaldb search [--position TEXT] [--date "YYYY-MM-DD HH:MM:SS"]` prints
  the employees whose position contains `TEXT` (all positions when it is
  empty) and who have a qualification dated no later than `--date` (default:
  now). An employee appears once per matching qualification.

`TABLE` is either the SQL name (`wards`, `employees`, ...) or the element type
name in any case (`wards`, `EMPLOYEE_QUALIFICATIONS`, ...). On an invalid
value, an out-of-range row or a database error the command prints
`error: ...` to standard error and exits with status 1.

## Using it from Python

- `hospitaldb.tables` describes the schema: the `ElementType` enumeration
  names every table, `columns_of` and `table_name_of` give a table's columns
  and its SQL name, `describe_field` gives the Russian label of a column, and
  `validate_field` checks a value against the format a column expects (dates
  as `DD.MM.YYYY`, gender as `М` or `Ж`, and so on). Fields without a format
  accept anything.
- `hospitaldb.database.Database` reads, inserts and deletes rows of one table
  over an `sqlite3` connection, and runs the employee search. Cell values come
  back as text.
- `hospitaldb.table_model.TableModel` holds the rows of one table for display,
  with its headers, and reloads them after every insert or delete.
- `hospitaldb.form.EntryForm` lists the fields to fill in for a new row, with
  their prompts, and `collect` returns the entered values in column order; a
  value that does not match its field's format, or an unknown field, raises
  `InvalidFieldError`.
- `hospitaldb.app.HospitalApp` opens one database file and keeps a model for
  every table. It is also a context manager that closes the connection.

```python
from hospitaldb.app import HospitalApp
from hospitaldb.tables import ElementType

with HospitalApp("hospital.db") as app:
    for label, element_type in app.table_choices():
        print(label, element_type.name)
    app.add_row(ElementType.WARDS, {"number": "W-1", "name": "Терапия", "total_beds": "12"})
    found = app.search_employees("хирург", "2024-01-01 00:00:00")
```

`search_employees` takes plain text and turns it into a `LIKE` pattern with
`search_pattern` itself (`"хирург"` becomes `"%хирург%"`, empty text becomes
`"%"`). The date may be a string or a `date`/`datetime`, which is written as
`YYYY-MM-DD HH:MM:SS`.

## What it does not do

- It has no graphical window; everything goes through the command line or the
  Python classes above.
- It does not create the database schema. The file must already hold the
  tables with the columns listed in `hospitaldb.tables`; opening a file that
  lacks them fails with an `sqlite3` error.

## Tests

```
pip install ".[test]"
pytest
```