"""Keycloak admin REST client used to mirror user accounts."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import requests

from ..core.constants import DEFAULT_IDP_TIMEOUT_SECONDS
from ..core.exceptions import IdentitySyncError
from ..users.model import UserPayload
from .client import IdentityProviderClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeycloakConfig:
    server_url: str
    realm: str
    client_id: str
    master_realm: str = "master"
    master_client: str = "admin-cli"
    master_user: str = "admin"
    master_password: str = "admin"
    timeout_seconds: float = DEFAULT_IDP_TIMEOUT_SECONDS

    @classmethod
    def from_dict(cls, cfg: dict) -> "KeycloakConfig":
        return cls(
            server_url=str(cfg["server_url"]).rstrip("/"),
            realm=str(cfg["realm"]),
            client_id=str(cfg["client_id"]),
            master_realm=str(cfg.get("master_realm", "master")),
            master_client=str(cfg.get("master_client", "admin-cli")),
            master_user=str(cfg.get("master_user", "admin")),
            master_password=str(cfg.get("master_password", "admin")),
            timeout_seconds=float(cfg.get("timeout_seconds", DEFAULT_IDP_TIMEOUT_SECONDS)),
        )


class KeycloakIdentityClient(IdentityProviderClient):
    def __init__(self, config: KeycloakConfig, session: Optional[requests.Session] = None):
        self._config = config
        self._session = session or requests.Session()

    @property
    def _admin_base(self) -> str:
        return f"{self._config.server_url}/admin/realms/{self._config.realm}"

    def _request(self, method: str, url: str, *, operation: str, username: str, **kwargs: Any) -> requests.Response:
        logger.debug("keycloak %s %s", method, url)
        try:
            response = self._session.request(method, url, timeout=self._config.timeout_seconds, **kwargs)
            response.raise_for_status()
        except requests.Timeout as e:
            raise IdentitySyncError(
                f"Identity provider timed out during {operation}", operation=operation, username=username
            ) from e
        except requests.RequestException as e:
            raise IdentitySyncError(
                f"Identity provider failed during {operation}: {e}", operation=operation, username=username
            ) from e
        return response

    @staticmethod
    def _json(
        response: requests.Response,
        *,
        operation: str,
        username: str,
        extract: Callable[[Any], Any] = lambda body: body,
    ) -> Any:
        """Decode a response body, turning malformed or unexpected bodies into IdentitySyncError."""
        try:
            return extract(response.json())
        except (ValueError, KeyError, IndexError, TypeError, AttributeError) as e:
            raise IdentitySyncError(
                f"Identity provider returned an unexpected body during {operation}", operation=operation, username=username
            ) from e

    def _admin_token(self, *, operation: str, username: str) -> str:
        url = f"{self._config.server_url}/realms/{self._config.master_realm}/protocol/openid-connect/token"
        response = self._request(
            "POST",
            url,
            operation=operation,
            username=username,
            data={
                "grant_type": "password",
                "client_id": self._config.master_client,
                "username": self._config.master_user,
                "password": self._config.master_password,
            },
        )
        token = self._json(
            response, operation=operation, username=username, extract=lambda body: body.get("access_token")
        )
        if not token:
            raise IdentitySyncError("Identity provider returned no admin token", operation=operation, username=username)
        return token

    def create_account(self, payload: UserPayload) -> None:
        operation = "create_account"
        username = payload.user_name
        headers = {"Authorization": f"Bearer {self._admin_token(operation=operation, username=username)}"}

        representation = {
            "username": payload.user_name,
            "firstName": payload.first_name,
            "lastName": payload.last_name,
            "email": payload.user_name,
            "emailVerified": True,
            "enabled": payload.enabled,
            "credentials": [{"type": "password", "value": payload.password, "temporary": False}],
        }
        response = self._request(
            "POST", f"{self._admin_base}/users", operation=operation, username=username, headers=headers, json=representation
        )
        location = response.headers.get("Location", "")
        user_uuid = location.rstrip("/").rsplit("/", 1)[-1]
        if not user_uuid:
            raise IdentitySyncError("Identity provider did not return the new account id", operation=operation, username=username)

        response = self._request(
            "GET",
            f"{self._admin_base}/clients",
            operation=operation,
            username=username,
            headers=headers,
            params={"clientId": self._config.client_id},
        )
        client_uuid = self._json(
            response, operation=operation, username=username, extract=lambda body: body[0]["id"] if body else None
        )
        if not client_uuid:
            raise IdentitySyncError(
                f"Client '{self._config.client_id}' not found in identity provider", operation=operation, username=username
            )

        response = self._request(
            "GET",
            f"{self._admin_base}/clients/{client_uuid}/roles/{payload.role.description}",
            operation=operation,
            username=username,
            headers=headers,
        )
        role = self._json(response, operation=operation, username=username)
        self._request(
            "POST",
            f"{self._admin_base}/users/{user_uuid}/role-mappings/clients/{client_uuid}",
            operation=operation,
            username=username,
            headers=headers,
            json=[role],
        )
        logger.info("identity account created for %s", username)

    def deactivate_account(self, username: str) -> None:
        operation = "deactivate_account"
        headers = {"Authorization": f"Bearer {self._admin_token(operation=operation, username=username)}"}

        response = self._request(
            "GET",
            f"{self._admin_base}/users",
            operation=operation,
            username=username,
            headers=headers,
            params={"username": username, "exact": "true"},
        )
        account_uuid = self._json(
            response, operation=operation, username=username, extract=lambda body: body[0]["id"] if body else None
        )
        if not account_uuid:
            logger.warning("no identity account for %s, nothing to deactivate", username)
            return

        self._request(
            "DELETE", f"{self._admin_base}/users/{account_uuid}", operation=operation, username=username, headers=headers
        )
        logger.info("identity account removed for %s", username)
