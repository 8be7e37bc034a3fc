from __future__ import annotations

from typing import Protocol

from ..users.model import UserPayload


class IdentityProviderClient(Protocol):
    """Mirror of local accounts in the external auth system.

    Implementations raise IdentitySyncError on any failure, including timeouts.
    """

    def create_account(self, payload: UserPayload) -> None:
        raise NotImplementedError

    def deactivate_account(self, username: str) -> None:
        raise NotImplementedError
