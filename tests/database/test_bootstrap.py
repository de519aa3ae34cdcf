from attendsync.database.bootstrap import iter_sql_statements, strip_create_db_and_use


def test_splits_statements_outside_quotes():
    sql = "CREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n  ;\nSELECT \"q;\" FROM a"

    assert list(iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('x;y')",
        'SELECT "q;" FROM a',
    ]


def test_strips_database_selection():
    sql = "CREATE DATABASE IF NOT EXISTS attendsync;\nUSE attendsync;\nCREATE TABLE t (id INT);"

    assert list(iter_sql_statements(strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
