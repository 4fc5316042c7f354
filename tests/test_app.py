import sqlite3
from datetime import datetime

import pytest

from hospitaldb.app import HospitalApp, main, search_pattern
from hospitaldb.form import InvalidFieldError
from hospitaldb.tables import ElementType, columns_of, table_name_of


def _create_schema(path):
    conn = sqlite3.connect(path)
    with conn:
        for element_type in ElementType:
            if element_type in (ElementType.SEARCHING_RESULT, ElementType.UNKNOWN):
                continue
            if element_type is ElementType.EMPLOYEES:
                columns = columns_of(ElementType.SEARCHING_RESULT)
            else:
                columns = columns_of(element_type)
            defs = ", ".join(["id INTEGER PRIMARY KEY", *(f"{c} TEXT" for c in columns[1:])])
            conn.execute(f"CREATE TABLE {table_name_of(element_type)} ({defs})")
    conn.close()


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "hospital.db"
    _create_schema(path)
    return str(path)


@pytest.fixture
def app(db_path):
    with HospitalApp(db_path) as application:
        yield application


def _seed_employees(path):
    conn = sqlite3.connect(path)
    with conn:
        conn.execute("INSERT INTO employees (id, last_name, position) VALUES (1, 'Иванов', 'хирург')")
        conn.execute("INSERT INTO employees (id, last_name, position) VALUES (2, 'Петров', 'терапевт')")
        conn.execute(
            "INSERT INTO employee_qualifications (employee_id, qualification_date) "
            "VALUES (1, '2020-01-15'), (2, '2020-01-15')"
        )
    conn.close()


def test_search_pattern_empty_matches_everything():
    assert search_pattern("") == "%"


def test_search_pattern_wraps_text():
    assert search_pattern("врач") == "%врач%"


def test_table_choices(app):
    choices = app.table_choices()
    assert len(choices) == 16
    assert choices[0] == ("Палаты", ElementType.WARDS)
    assert choices[-1] == ("Заявки на материалы", ElementType.SUPPLY_REQUESTS)
    types = [t for _, t in choices]
    assert len(set(types)) == len(types)
    assert ElementType.SEARCHING_RESULT not in types


def test_models_load_existing_rows(db_path):
    conn = sqlite3.connect(db_path)
    with conn:
        conn.execute("INSERT INTO wards (number, name) VALUES ('A-1', 'Главная')")
    conn.close()
    with HospitalApp(db_path) as application:
        rows = application.model_for(ElementType.WARDS).rows()
    assert len(rows) == 1
    assert rows[0][1:3] == ["A-1", "Главная"]


def test_model_for_unknown_raises(app):
    with pytest.raises(KeyError):
        app.model_for(ElementType.UNKNOWN)


def test_add_then_delete_row(app):
    app.add_row(ElementType.WARDS, {"number": "B-2", "name": "Хирургия", "total_beds": "12"})
    model = app.model_for(ElementType.WARDS)
    assert model.row_count() == 1
    assert model.rows()[0][1:] == ["B-2", "Хирургия", "", "12", ""]
    app.delete_row(ElementType.WARDS, 0)
    assert model.row_count() == 0


def test_add_row_rejects_invalid_value(app):
    with pytest.raises(InvalidFieldError) as info:
        app.add_row(ElementType.WARDS, {"total_beds": "many"})
    assert info.value.field == "total_beds"
    assert app.model_for(ElementType.WARDS).row_count() == 0


def test_add_row_to_search_result_is_refused(app):
    with pytest.raises(ValueError):
        app.add_row(ElementType.SEARCHING_RESULT, {})


def test_delete_row_out_of_range(app):
    with pytest.raises(IndexError):
        app.delete_row(ElementType.WARDS, 0)


def test_search_employees_filters_position_and_date(db_path):
    _seed_employees(db_path)
    with HospitalApp(db_path) as application:
        found = application.search_employees("хирург", "2021-01-01 00:00:00")
        assert [row[0] for row in found] == ["1"]
        assert found[0][2] == "Иванов"
        assert len(found[0]) == len(columns_of(ElementType.SEARCHING_RESULT))
        assert application.search_employees("хирург", "2019-01-01 00:00:00") == []
        everyone = application.search_employees("", "2021-01-01 00:00:00")
        assert sorted(row[0] for row in everyone) == ["1", "2"]


def test_search_employees_accepts_datetime(db_path):
    _seed_employees(db_path)
    with HospitalApp(db_path) as application:
        by_text = application.search_employees("терап", "2021-01-01 00:00:00")
        by_datetime = application.search_employees("терап", datetime(2021, 1, 1))
    assert by_text == by_datetime
    assert [row[0] for row in by_text] == ["2"]


def test_missing_tables_raise(tmp_path):
    with pytest.raises(sqlite3.OperationalError):
        HospitalApp(str(tmp_path / "empty.db"))


def test_closed_app_cannot_reload(db_path):
    application = HospitalApp(db_path)
    model = application.model_for(ElementType.WARDS)
    application.close()
    with pytest.raises(sqlite3.ProgrammingError):
        model.refresh()


def test_main_lists_tables(db_path, capsys):
    assert main(["--database", db_path, "tables"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 16
    assert lines[0] == "wards\tПалаты"


def test_main_add_and_show(db_path, capsys):
    assert main(["--database", db_path, "add", "wards", "number=C-3", "name=Терапия"]) == 0
    assert main(["--database", db_path, "show", "wards"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "\t".join(columns_of(ElementType.WARDS))
    assert lines[1].split("\t")[1:3] == ["C-3", "Терапия"]


def test_main_add_invalid_reports_error(db_path, capsys):
    assert main(["--database", db_path, "add", "wards", "total_beds=lots"]) == 1
    assert "error" in capsys.readouterr().err
    with HospitalApp(db_path) as application:
        assert application.model_for(ElementType.WARDS).row_count() == 0


def test_main_delete(db_path):
    assert main(["--database", db_path, "add", "WARDS", "number=D-4"]) == 0
    assert main(["--database", db_path, "delete", "wards", "0"]) == 0
    with HospitalApp(db_path) as application:
        assert application.model_for(ElementType.WARDS).rows() == []


def test_main_search(db_path, capsys):
    _seed_employees(db_path)
    assert main(
        ["--database", db_path, "search", "--position", "хирург", "--date", "2021-01-01 00:00:00"]
    ) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[1].split("\t")[0] == "1"


def test_main_unknown_table_exits(db_path):
    with pytest.raises(SystemExit) as info:
        main(["--database", db_path, "show", "nowhere"])
    assert info.value.code == 2