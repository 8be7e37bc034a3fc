from unittest.mock import MagicMock

import pytest

from src.ticketing.ticketing.database.bootstrap import iter_sql_statements
from src.ticketing.ticketing.database.mysql_base import db_cursor, fetchall, fetchone


def _factory():
    conn = MagicMock()
    cur = MagicMock()
    conn.cursor.return_value = cur
    factory = MagicMock()
    factory.connect.return_value = conn
    return factory, conn, cur


def test_db_cursor_commits_and_closes_on_success():
    factory, conn, cur = _factory()

    with db_cursor(factory) as (_, c):
        c.execute("SELECT 1")

    conn.commit.assert_called_once()
    conn.rollback.assert_not_called()
    cur.close.assert_called_once()
    conn.close.assert_called_once()


def test_db_cursor_rolls_back_and_reraises():
    factory, conn, _ = _factory()

    with pytest.raises(RuntimeError):
        with db_cursor(factory):
            raise RuntimeError("boom")

    conn.commit.assert_not_called()
    conn.rollback.assert_called_once()
    conn.close.assert_called_once()


def test_fetch_helpers_normalize_empty_results():
    cur = MagicMock()
    cur.fetchone.return_value = None
    cur.fetchall.return_value = None

    assert fetchone(cur) is None
    assert fetchall(cur) == []


def test_sql_splitter_handles_quotes_and_comments():
    sql = """
    -- roles; seeded below
    INSERT INTO roles (description) VALUES ('a;b');
    INSERT INTO roles (description) VALUES ("c");
    """

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO roles (description) VALUES ('a;b')",
        'INSERT INTO roles (description) VALUES ("c")',
    ]
