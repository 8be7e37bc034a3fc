from unittest.mock import MagicMock

import mysql.connector
import pytest

from src.ticketing.ticketing.core.enums import Gender
from src.ticketing.ticketing.core.exceptions import ConcurrentModificationError, DuplicateUsernameError, ValidationError
from src.ticketing.ticketing.users.model import Role, User
from src.ticketing.ticketing.users.mysql_user_repository import MySQLUserRepository


def _repo():
    conn = MagicMock()
    cur = MagicMock()
    conn.cursor.return_value = cur
    factory = MagicMock()
    factory.connect.return_value = conn
    return MySQLUserRepository(factory), cur


def _user(**overrides) -> User:
    values = dict(
        user_id=4,
        first_name="Ann",
        last_name="Lee",
        user_name="ann",
        password_hash="h",
        role=Role(2, "Manager"),
        version=3,
    )
    values.update(overrides)
    return User(**values)


def test_find_active_by_username_maps_row():
    repo, cur = _repo()
    cur.fetchone.return_value = {
        "user_id": 4,
        "first_name": "Ann",
        "last_name": "Lee",
        "user_name": "ann",
        "password_hash": "h",
        "phone": None,
        "gender": "FEMALE",
        "enabled": 1,
        "is_deleted": 0,
        "version": 3,
        "role_id": 2,
        "role_description": "Manager",
    }

    user = repo.find_active_by_username("ann")

    assert user == _user(gender=Gender.FEMALE)
    sql, params = cur.execute.call_args.args
    assert "u.is_deleted=0" in sql
    assert params == ("ann",)


def test_find_active_by_username_missing_returns_none():
    repo, cur = _repo()
    cur.fetchone.return_value = None

    assert repo.find_active_by_username("ghost") is None


def test_update_bumps_version():
    repo, cur = _repo()
    cur.rowcount = 1

    saved = repo.save(_user())

    assert saved.version == 4
    sql, params = cur.execute.call_args.args
    assert "WHERE user_id=%s AND version=%s" in sql
    assert params[-2:] == (4, 3)


def test_update_with_stale_version_raises():
    repo, cur = _repo()
    cur.rowcount = 0

    with pytest.raises(ConcurrentModificationError):
        repo.save(_user())


def test_insert_resolves_role_by_description():
    repo, cur = _repo()
    cur.fetchone.return_value = {"role_id": 3, "description": "Employee"}
    cur.lastrowid = 11

    saved = repo.save(_user(user_id=None, role=Role(None, "Employee"), version=0))

    assert saved.user_id == 11
    assert saved.role == Role(3, "Employee")


def test_insert_with_unknown_role_raises():
    repo, cur = _repo()
    cur.fetchone.return_value = None

    with pytest.raises(ValidationError):
        repo.save(_user(user_id=None, role=Role(None, "Nope")))


def test_update_colliding_username_raises_duplicate_error():
    repo, cur = _repo()
    cur.execute.side_effect = mysql.connector.IntegrityError("Duplicate entry 'ann-4'")

    with pytest.raises(DuplicateUsernameError):
        repo.save(_user(user_name="ann-4", is_deleted=True))
