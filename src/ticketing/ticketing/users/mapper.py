from __future__ import annotations

from typing import Iterable, List

from .model import User, UserPayload


class UserMapper:
    """Translate between the caller's payload and the stored record."""

    def to_entity(self, payload: UserPayload, *, password_hash: str) -> User:
        return User(
            user_id=payload.user_id,
            first_name=payload.first_name,
            last_name=payload.last_name,
            user_name=payload.user_name,
            password_hash=password_hash,
            role=payload.role,
            phone=payload.phone,
            gender=payload.gender,
            enabled=payload.enabled,
        )

    def to_payload(self, user: User) -> UserPayload:
        return UserPayload(
            user_id=user.user_id,
            first_name=user.first_name,
            last_name=user.last_name,
            user_name=user.user_name,
            role=user.role,
            phone=user.phone,
            gender=user.gender,
            enabled=user.enabled,
        )

    def to_payloads(self, users: Iterable[User]) -> List[UserPayload]:
        return [self.to_payload(u) for u in users]
