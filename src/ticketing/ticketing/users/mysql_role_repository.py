from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Role
from .role_repository import RoleRepository


class MySQLRoleRepository(RoleRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Role]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT role_id, description FROM roles ORDER BY role_id")
            rows = fetchall(cur)
            return [Role(role_id=int(r["role_id"]), description=r["description"]) for r in rows]

    def get_by_id(self, role_id: int) -> Optional[Role]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT role_id, description FROM roles WHERE role_id=%s", (role_id,))
            r = fetchone(cur)
            if not r:
                return None
            return Role(role_id=int(r["role_id"]), description=r["description"])
