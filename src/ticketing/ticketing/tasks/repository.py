from __future__ import annotations

from typing import Protocol

from ..users.model import User


class TaskLookup(Protocol):
    def count_live_tasks_assigned_to(self, user: User) -> int:
        """Tasks not soft-deleted whose assigned employee is `user`."""

        raise NotImplementedError
