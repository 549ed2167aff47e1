from __future__ import annotations

from src.hotel_hrm.hotel_hrm.database.bootstrap import SCHEMA_PATH, schema_statements


def test_schema_file_has_one_statement_per_table():
    statements = schema_statements(SCHEMA_PATH.read_text(encoding="utf-8"))

    assert len(statements) == 3
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in statements)


def test_comment_lines_and_blank_statements_are_dropped():
    sql = "-- users\nCREATE TABLE a (id INT);\n\n;\n  -- end\nCREATE TABLE b (id INT)"

    assert schema_statements(sql) == ["CREATE TABLE a (id INT)", "CREATE TABLE b (id INT)"]
