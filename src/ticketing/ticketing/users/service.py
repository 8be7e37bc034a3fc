from __future__ import annotations

import logging
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..common.validators import require_min_length, require_non_empty
from ..core.constants import MIN_PASSWORD_LENGTH
from ..core.exceptions import (
    BusinessRuleViolation,
    DuplicateUsernameError,
    IdentitySyncError,
    NotFoundError,
    ValidationError,
)
from ..identity.client import IdentityProviderClient
from .deletion_policy import DeletionPolicy
from .mapper import UserMapper
from .model import Role, UserPayload
from .repository import UserRepository
from .role_repository import RoleRepository

logger = logging.getLogger(__name__)

PasswordHasher = Callable[[str], str]


class UserService:
    """Use case: user lifecycle (create, update, lookup, soft delete).

    Local writes always happen before the identity provider is called. A failed
    identity call is logged and re-raised as IdentitySyncError; the local write
    is not rolled back.
    """

    def __init__(
        self,
        users: UserRepository,
        deletion_policy: DeletionPolicy,
        identity: IdentityProviderClient,
        *,
        mapper: Optional[UserMapper] = None,
        password_hasher: PasswordHasher = generate_password_hash,
    ):
        self._users = users
        self._deletion_policy = deletion_policy
        self._identity = identity
        self._mapper = mapper or UserMapper()
        self._hash_password = password_hasher

    def list_all_users(self) -> List[UserPayload]:
        return self._mapper.to_payloads(self._users.find_all_active_order_by_first_name_desc())

    def find_by_user_name(self, username: str) -> UserPayload:
        user = self._users.find_active_by_username(username)
        if not user:
            raise NotFoundError("User not found")
        return self._mapper.to_payload(user)

    def save(self, payload: UserPayload) -> UserPayload:
        payload = replace(self._validate_new(payload), enabled=True)
        entity = self._mapper.to_entity(payload, password_hash=self._hash_password(payload.password))
        saved = self._users.save(replace(entity, user_id=None, is_deleted=False))
        logger.info("user %s created (id=%s)", saved.user_name, saved.user_id)

        self._mirror("create_account", payload.user_name, lambda: self._identity.create_account(payload))
        return self._mapper.to_payload(saved)

    def update(self, payload: UserPayload) -> UserPayload:
        current = self._users.find_active_by_username(payload.user_name)
        if not current:
            raise NotFoundError("User not found")

        password_hash = current.password_hash
        if payload.password:
            password_hash = self._hash_password(payload.password)

        merged = replace(
            self._mapper.to_entity(payload, password_hash=password_hash),
            user_id=current.user_id,
            version=current.version,
        )
        self._users.save(merged)
        return self.find_by_user_name(payload.user_name)

    def delete_by_user_name(self, username: str) -> None:
        self._users.delete_by_username(username)

    def delete(self, username: str) -> None:
        user = self._users.find_active_by_username(username)
        if not user:
            raise BusinessRuleViolation("User not found")

        if not self._deletion_policy.can_delete(user):
            logger.warning("refused to delete %s (role=%s): user still owns live work", username, user.role.description)
            raise BusinessRuleViolation("User can not be deleted")

        try:
            deleted = self._users.save(user.mark_deleted())
        except DuplicateUsernameError as e:
            # another record already holds the "<name>-<id>" form
            logger.warning("refused to delete %s: renamed username is taken", username)
            raise BusinessRuleViolation("User can not be deleted") from e
        logger.info("user %s soft-deleted as %s", username, deleted.user_name)

        self._mirror("deactivate_account", username, lambda: self._identity.deactivate_account(username))

    def list_all_by_role(self, role_description: str) -> List[UserPayload]:
        return self._mapper.to_payloads(self._users.find_active_by_role_description(role_description))

    def _validate_new(self, payload: UserPayload) -> UserPayload:
        payload = replace(
            payload,
            user_name=require_non_empty(payload.user_name, "Username"),
            first_name=require_non_empty(payload.first_name, "First name"),
            last_name=require_non_empty(payload.last_name, "Last name"),
        )
        require_min_length(payload.password, "Password", MIN_PASSWORD_LENGTH)
        if payload.confirm_password is not None and payload.confirm_password != payload.password:
            raise ValidationError("Passwords do not match")

        if self._users.find_active_by_username(payload.user_name):
            raise ValidationError("Username already exists")
        return payload

    @staticmethod
    def _mirror(operation: str, username: str, call: Callable[[], None]) -> None:
        try:
            call()
        except IdentitySyncError:
            logger.error("%s failed for %s; local state kept, identity provider out of sync", operation, username)
            raise


class RoleService:
    """Use case: read-only role lookups."""

    def __init__(self, roles: RoleRepository):
        self._roles = roles

    def list_all_roles(self) -> Sequence[Role]:
        return self._roles.list_all()

    def find_by_id(self, role_id: int) -> Role:
        role = self._roles.get_by_id(int(role_id))
        if not role:
            raise NotFoundError("Role not found")
        return role
