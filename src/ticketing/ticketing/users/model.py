from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Optional

from ..core.constants import DELETED_USERNAME_SEPARATOR
from ..core.enums import Gender


@dataclass(frozen=True)
class Role:
    """Named classification of a user (Admin, Manager, Employee, ...).

    Open-ended on purpose: rules keyed on `description` must have a default branch.
    """

    role_id: Optional[int]
    description: str


@dataclass(frozen=True)
class User:
    """Domain entity: a persisted user record.

    Note: Plain data object (no DB access code). `version` is the optimistic
    concurrency token owned by the repository.
    """

    user_id: Optional[int]
    first_name: str
    last_name: str
    user_name: str
    password_hash: str = field(repr=False)
    role: Role
    phone: Optional[str] = None
    gender: Optional[Gender] = None
    enabled: bool = True
    is_deleted: bool = False
    version: int = 0

    def mark_deleted(self) -> "User":
        if self.user_id is None:
            raise ValueError("Cannot soft-delete a user that was never persisted")
        return replace(
            self,
            is_deleted=True,
            user_name=deleted_username(self.user_name, self.user_id),
        )


@dataclass(frozen=True)
class UserPayload:
    """What callers send in and get back (never carries the password hash)."""

    first_name: str
    last_name: str
    user_name: str
    role: Role
    password: Optional[str] = field(default=None, repr=False)
    confirm_password: Optional[str] = field(default=None, repr=False)
    phone: Optional[str] = None
    gender: Optional[Gender] = None
    enabled: bool = False
    user_id: Optional[int] = None


def deleted_username(user_name: str, user_id: int) -> str:
    """Rename applied on soft delete so the original username can be reused."""
    return f"{user_name}{DELETED_USERNAME_SEPARATOR}{user_id}"
