"""Keycloak identity store adapter."""

import logging
from typing import Any, Callable, Dict, Optional

from keycloak import KeycloakAdmin, KeycloakOpenIDConnection
from keycloak.exceptions import KeycloakError

from ...config.settings import AclSettings
from ...core.exceptions import UpstreamLookupFailedError

logger = logging.getLogger(__name__)


class KeycloakIdentityStore:
    """Fetches user records from Keycloak, one admin client per realm.

    The store reference of an external identity is the Keycloak realm. Admin
    clients are created lazily and reused across requests; user records are
    never cached here.
    """

    def __init__(
        self,
        server_url: str,
        auth_realm: str = "master",
        client_id: str = "admin-cli",
        verify: bool = True,
        username: Optional[str] = None,
        password: Optional[str] = None,
        client_secret: Optional[str] = None,
        admin_factory: Optional[Callable[[str], KeycloakAdmin]] = None,
    ):
        """Initialize the identity store.

        Supports two authentication methods:
        1. Admin credentials: username + password
        2. Client credentials: client_id + client_secret

        Args:
            server_url: Keycloak server URL
            auth_realm: Realm the admin credentials belong to
            client_id: Client ID (default: admin-cli)
            verify: SSL verification (default: True)
            username: Admin username (for admin auth)
            password: Admin password (for admin auth)
            client_secret: Client secret (for client credentials auth)
            admin_factory: Builds the admin client for a realm; overrides the
                connection settings above
        """
        if admin_factory is None and not ((username and password) or client_secret):
            raise ValueError("Must provide either (username + password) or client_secret for authentication")

        self.server_url = self._normalize_server_url(server_url)
        self.auth_realm = auth_realm
        self.client_id = client_id
        self.verify = verify
        self.username = username
        self.password = password
        self.client_secret = client_secret
        self._admin_factory = admin_factory or self._create_realm_admin
        self._admins: Dict[str, KeycloakAdmin] = {}

    @classmethod
    def from_settings(cls, settings: AclSettings) -> "KeycloakIdentityStore":
        if not settings.keycloak_configured:
            raise ValueError("Keycloak settings are incomplete")
        return cls(
            server_url=settings.keycloak_server_url,
            auth_realm=settings.keycloak_auth_realm,
            client_id=settings.keycloak_client_id,
            verify=settings.keycloak_verify,
            username=settings.keycloak_username,
            password=settings.keycloak_password.get_secret_value() if settings.keycloak_password else None,
            client_secret=(
                settings.keycloak_client_secret.get_secret_value()
                if settings.keycloak_client_secret else None
            ),
        )

    def _normalize_server_url(self, server_url: str) -> str:
        """Remove the legacy /auth suffix, not needed for Keycloak v18+."""
        server_url = server_url.rstrip('/')
        if server_url.endswith('/auth'):
            server_url = server_url[:-5]
        return server_url

    def _create_realm_admin(self, realm_name: str) -> KeycloakAdmin:
        """Create a KeycloakAdmin client for a specific realm."""
        if self.client_secret:
            connection = KeycloakOpenIDConnection(
                server_url=self.server_url,
                realm_name=realm_name,
                user_realm_name=self.auth_realm,
                client_id=self.client_id,
                client_secret_key=self.client_secret,
                verify=self.verify,
            )
        else:
            connection = KeycloakOpenIDConnection(
                server_url=self.server_url,
                username=self.username,
                password=self.password,
                realm_name=realm_name,
                user_realm_name=self.auth_realm,
                client_id=self.client_id,
                verify=self.verify,
            )
        return KeycloakAdmin(connection=connection)

    def _get_admin(self, realm_name: str) -> KeycloakAdmin:
        admin = self._admins.get(realm_name)
        if admin is None:
            admin = self._admin_factory(realm_name)
            self._admins[realm_name] = admin
            logger.info(f"Created Keycloak admin client for realm: {realm_name}")
        return admin

    async def fetch_user(self, store_ref: str, username: str) -> Dict[str, Any]:
        """Fetch a user, with attributes, by exact username.

        Raises:
            UpstreamLookupFailedError: Keycloak failed or the user does not exist
        """
        details = {"store_ref": store_ref, "username": username}
        try:
            admin = self._get_admin(store_ref)
            users = await admin.a_get_users(query={"username": username, "exact": True})
        except KeycloakError as e:
            logger.error(f"Failed to get user {username} in realm {store_ref}: {e}")
            raise UpstreamLookupFailedError(f"Keycloak lookup failed: {e}", details=details) from e

        if not users:
            raise UpstreamLookupFailedError(f"User '{username}' not found in realm '{store_ref}'", details=details)
        return users[0]
