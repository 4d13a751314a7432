from pathlib import Path

from payroll_system.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


def test_splitter_ignores_semicolons_inside_quotes():
    sql = """
    INSERT INTO attendance (id, notes) VALUES ('a-1', '{"note": "late; gate 2"}');
    INSERT INTO branches (id, name) VALUES ('b-1', 'O\\'Neil; Road');
    """

    statements = list(_iter_sql_statements(sql))

    assert len(statements) == 2
    assert statements[0].endswith("'{\"note\": \"late; gate 2\"}')")
    assert "O\\'Neil; Road" in statements[1]


def test_create_database_and_use_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS payroll_db;\nUSE payroll_db;\nCREATE TABLE t (id INT);\n"

    statements = list(_iter_sql_statements(_strip_create_db_and_use(sql)))

    assert statements == ["CREATE TABLE t (id INT)"]


def test_seed_and_schema_files_split_cleanly():
    root = Path(__file__).resolve().parents[1] / "database"
    schema = list(_iter_sql_statements(_strip_create_db_and_use((root / "schema.sql").read_text(encoding="utf-8"))))
    seed = list(_iter_sql_statements((root / "seed.sql").read_text(encoding="utf-8")))

    assert any("CREATE TABLE" in s and "attendance" in s for s in schema)
    assert seed and all(s.upper().startswith("INSERT") for s in seed)
