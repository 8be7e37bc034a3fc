from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from ..core.constants import ROLE_EMPLOYEE, ROLE_MANAGER
from ..projects.repository import ProjectLookup
from ..tasks.repository import TaskLookup
from .model import User

DependencyCheck = Callable[[User], bool]


@dataclass
class DeletionPolicy:
    """Lookup from role description to the check a user must pass before soft delete.

    Roles without an entry have no ownership precondition.
    """

    projects: ProjectLookup
    tasks: TaskLookup

    def _checks(self) -> Dict[str, DependencyCheck]:
        return {
            ROLE_MANAGER: self._owns_no_live_projects,
            ROLE_EMPLOYEE: self._owns_no_live_tasks,
        }

    def _owns_no_live_projects(self, user: User) -> bool:
        return self.projects.count_live_projects_managed_by(user) == 0

    def _owns_no_live_tasks(self, user: User) -> bool:
        return self.tasks.count_live_tasks_assigned_to(user) == 0

    def can_delete(self, user: User) -> bool:
        check = self._checks().get(user.role.description)
        if check is None:
            return True
        return check(user)
