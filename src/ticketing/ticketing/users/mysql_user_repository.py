from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, Optional, Sequence

import mysql.connector

from ..core.enums import Gender
from ..core.exceptions import ConcurrentModificationError, DuplicateUsernameError, ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Role, User
from .repository import UserRepository

_SELECT_USERS = """
    SELECT u.user_id, u.first_name, u.last_name, u.user_name, u.password_hash,
           u.phone, u.gender, u.enabled, u.is_deleted, u.version,
           r.role_id, r.description AS role_description
    FROM users u
    JOIN roles r ON r.role_id = u.role_id
"""


def _to_user(row: Dict[str, Any]) -> User:
    return User(
        user_id=int(row["user_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        user_name=row["user_name"],
        password_hash=row["password_hash"],
        role=Role(role_id=int(row["role_id"]), description=row["role_description"]),
        phone=row.get("phone"),
        gender=Gender(row["gender"]) if row.get("gender") else None,
        enabled=bool(row.get("enabled", True)),
        is_deleted=bool(row.get("is_deleted", False)),
        version=int(row.get("version") or 0),
    )


class MySQLUserRepository(UserRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_active_by_username(self, username: str) -> Optional[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_USERS + " WHERE u.user_name=%s AND u.is_deleted=0", (username,))
            row = fetchone(cur)
            return _to_user(row) if row else None

    def find_all_active_order_by_first_name_desc(self) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT_USERS + " WHERE u.is_deleted=0 ORDER BY u.first_name DESC")
            return [_to_user(r) for r in fetchall(cur)]

    def find_active_by_role_description(self, description: str) -> Sequence[User]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_USERS + " WHERE LOWER(r.description)=LOWER(%s) AND u.is_deleted=0 ORDER BY u.user_id",
                (description,),
            )
            return [_to_user(r) for r in fetchall(cur)]

    def save(self, user: User) -> User:
        with db_cursor(self._conn_factory) as (_, cur):
            role = self._resolve_role(cur, user.role)
            if user.user_id is None:
                return self._insert(cur, replace(user, role=role))
            return self._update(cur, replace(user, role=role))

    def delete_by_username(self, username: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM users WHERE user_name=%s", (username,))

    @staticmethod
    def _resolve_role(cur, role: Role) -> Role:
        if role.role_id is not None:
            return role
        cur.execute("SELECT role_id, description FROM roles WHERE description=%s", (role.description,))
        row = fetchone(cur)
        if not row:
            raise ValidationError(f"Role '{role.description}' does not exist")
        return Role(role_id=int(row["role_id"]), description=row["description"])

    @staticmethod
    def _insert(cur, user: User) -> User:
        try:
            cur.execute(
                """
                INSERT INTO users(first_name, last_name, user_name, password_hash, phone, gender,
                                  enabled, is_deleted, role_id, version)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,0)
                """,
                (
                    user.first_name,
                    user.last_name,
                    user.user_name,
                    user.password_hash,
                    user.phone,
                    user.gender.value if user.gender else None,
                    int(user.enabled),
                    int(user.is_deleted),
                    user.role.role_id,
                ),
            )
        except mysql.connector.IntegrityError as e:
            raise DuplicateUsernameError("Username already exists") from e
        return replace(user, user_id=int(cur.lastrowid), version=0)

    @staticmethod
    def _update(cur, user: User) -> User:
        try:
            cur.execute(
                """
                UPDATE users
                SET first_name=%s, last_name=%s, user_name=%s, password_hash=%s, phone=%s, gender=%s,
                    enabled=%s, is_deleted=%s, role_id=%s, version=version+1
                WHERE user_id=%s AND version=%s
                """,
                (
                    user.first_name,
                    user.last_name,
                    user.user_name,
                    user.password_hash,
                    user.phone,
                    user.gender.value if user.gender else None,
                    int(user.enabled),
                    int(user.is_deleted),
                    user.role.role_id,
                    user.user_id,
                    user.version,
                ),
            )
        except mysql.connector.IntegrityError as e:
            raise DuplicateUsernameError("Username already exists") from e
        if cur.rowcount == 0:
            raise ConcurrentModificationError(f"User {user.user_id} was modified concurrently")
        return replace(user, version=user.version + 1)
