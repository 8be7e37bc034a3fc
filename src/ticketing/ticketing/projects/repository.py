from __future__ import annotations

from typing import Protocol

from ..users.model import User


class ProjectLookup(Protocol):
    def count_live_projects_managed_by(self, user: User) -> int:
        """Projects not soft-deleted whose assigned manager is `user`."""

        raise NotImplementedError
