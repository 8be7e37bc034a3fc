from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import User


class UserRepository(Protocol):
    """Repository interface for User.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    All finders only see records whose soft-delete flag is false.
    """

    def find_active_by_username(self, username: str) -> Optional[User]:
        raise NotImplementedError

    def find_all_active_order_by_first_name_desc(self) -> Sequence[User]:
        raise NotImplementedError

    def find_active_by_role_description(self, description: str) -> Sequence[User]:
        """Case-insensitive match on the role description."""

        raise NotImplementedError

    def save(self, user: User) -> User:
        """Insert when `user_id` is None, otherwise update guarded by `version`.

        Raises ConcurrentModificationError when the stored version moved on.
        """

        raise NotImplementedError

    def delete_by_username(self, username: str) -> None:
        raise NotImplementedError
