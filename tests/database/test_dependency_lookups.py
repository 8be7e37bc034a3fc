from unittest.mock import MagicMock

from src.ticketing.ticketing.container import build_container
from src.ticketing.ticketing.projects.mysql_project_repository import MySQLProjectRepository
from src.ticketing.ticketing.tasks.mysql_task_repository import MySQLTaskRepository
from src.ticketing.ticketing.users.model import Role, User
from src.ticketing.ticketing.users.service import UserService

USER = User(user_id=8, first_name="A", last_name="B", user_name="a", password_hash="h", role=Role(2, "Manager"))


def _factory(row):
    cur = MagicMock()
    cur.fetchone.return_value = row
    conn = MagicMock()
    conn.cursor.return_value = cur
    factory = MagicMock()
    factory.connect.return_value = conn
    return factory, cur


def test_project_count_filters_live_rows_for_manager():
    factory, cur = _factory({"total": 2})

    assert MySQLProjectRepository(factory).count_live_projects_managed_by(USER) == 2
    sql, params = cur.execute.call_args.args
    assert "assigned_manager_id=%s AND is_deleted=0" in sql
    assert params == (8,)


def test_task_count_filters_live_rows_for_employee():
    factory, cur = _factory({"total": 0})

    assert MySQLTaskRepository(factory).count_live_tasks_assigned_to(USER) == 0
    sql, params = cur.execute.call_args.args
    assert "assigned_employee_id=%s AND is_deleted=0" in sql
    assert params == (8,)


def test_build_container_wires_services():
    container = build_container(
        db_config={"host": "db", "port": 3306, "user": "u", "password": "p", "database": "ticketing_db"},
        keycloak_config={"server_url": "http://kc", "realm": "ticketing", "client_id": "app"},
    )

    assert isinstance(container.user_service, UserService)
    assert container.users_repo._conn_factory is container.conn
