from __future__ import annotations

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone
from ..users.model import User
from .repository import ProjectLookup


class MySQLProjectRepository(ProjectLookup):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def count_live_projects_managed_by(self, user: User) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT COUNT(*) AS total
                FROM projects
                WHERE assigned_manager_id=%s AND is_deleted=0
                """,
                (user.user_id,),
            )
            row = fetchone(cur)
            return int(row["total"]) if row else 0
