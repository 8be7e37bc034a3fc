from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .identity.keycloak_client import KeycloakConfig, KeycloakIdentityClient
from .projects.mysql_project_repository import MySQLProjectRepository
from .tasks.mysql_task_repository import MySQLTaskRepository
from .users.deletion_policy import DeletionPolicy
from .users.mysql_role_repository import MySQLRoleRepository
from .users.mysql_user_repository import MySQLUserRepository
from .users.service import RoleService, UserService


@dataclass(frozen=True)
class Container:
    conn: DatabaseConnection

    users_repo: MySQLUserRepository
    roles_repo: MySQLRoleRepository
    projects_repo: MySQLProjectRepository
    tasks_repo: MySQLTaskRepository
    identity_client: KeycloakIdentityClient

    user_service: UserService
    role_service: RoleService


def build_container(*, db_config: dict, keycloak_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    users_repo = MySQLUserRepository(conn)
    roles_repo = MySQLRoleRepository(conn)
    projects_repo = MySQLProjectRepository(conn)
    tasks_repo = MySQLTaskRepository(conn)
    identity_client = KeycloakIdentityClient(KeycloakConfig.from_dict(keycloak_config))

    user_service = UserService(
        users_repo,
        DeletionPolicy(projects=projects_repo, tasks=tasks_repo),
        identity_client,
    )
    role_service = RoleService(roles_repo)

    return Container(
        conn=conn,
        users_repo=users_repo,
        roles_repo=roles_repo,
        projects_repo=projects_repo,
        tasks_repo=tasks_repo,
        identity_client=identity_client,
        user_service=user_service,
        role_service=role_service,
    )
