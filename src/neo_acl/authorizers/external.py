"""
External Authorizer for neo-acl

Resolves a principal's roles from a user record held in an external
identity store (Keycloak in production). The record is fetched at most once
per authorizer instance, and an authorizer lives for a single request, so
there is no identity cache shared between requests.
"""
import asyncio
import logging
from typing import Any, Dict, List, Optional

from ..acl.entities import AuthorizationRequest
from ..acl.registry import AclRegistry
from ..core.exceptions import UpstreamLookupFailedError
from .base import authorize_roles
from .entities import AuthorizationResult, Identity
from .protocols import IdentityStoreProtocol

logger = logging.getLogger(__name__)

DEFAULT_ROLES_ATTRIBUTE = "roles"
DEFAULT_GUEST_ROLE = "guest"


class ExternalAuthorizer:
    """
    Authorizer backed by an external identity store.

    Roles are read from a custom attribute on the user record, whose value
    is a space separated role list. When the store cannot be reached, or the
    attribute is missing, the principal degrades to the guest role so that
    unguarded and guest-permitted routes keep working.

    With ``eager_fetch`` enabled, ``authorize()`` refuses to degrade and
    raises UpstreamLookupFailedError instead.
    """

    def __init__(
        self,
        identity: Identity,
        registry: AclRegistry,
        store: IdentityStoreProtocol,
        roles_attribute: str = DEFAULT_ROLES_ATTRIBUTE,
        guest_role: str = DEFAULT_GUEST_ROLE,
        eager_fetch: bool = False,
    ):
        if identity.external is None:
            raise ValueError("ExternalAuthorizer requires an identity with an external payload")
        self.identity = identity
        self.registry = registry
        self.store = store
        self.roles_attribute = roles_attribute
        self.guest_role = guest_role
        self.eager_fetch = eager_fetch

        self._lock = asyncio.Lock()
        self._fetched = False
        self._user: Optional[Dict[str, Any]] = None
        self._error: Optional[UpstreamLookupFailedError] = None

    async def _get_user(self) -> Dict[str, Any]:
        """Fetch the user record once; later calls replay the outcome."""
        async with self._lock:
            if not self._fetched:
                external = self.identity.external
                try:
                    self._user = await self.store.fetch_user(external.store_ref, external.username)
                except UpstreamLookupFailedError as e:
                    self._error = e
                except Exception as e:
                    self._error = UpstreamLookupFailedError(
                        f"Identity store lookup failed for '{external.username}': {e}",
                        details={"store_ref": external.store_ref, "username": external.username},
                    )
                    self._error.__cause__ = e
                finally:
                    self._fetched = True

        if self._error is not None:
            raise self._error.with_traceback(None)
        return self._user

    def _extract_roles(self, user: Dict[str, Any]) -> Optional[List[str]]:
        attributes = user.get("attributes") or {}
        value = attributes.get(self.roles_attribute)
        if value is None:
            return None

        # Keycloak stores attribute values as lists of strings
        values = [value] if isinstance(value, str) else list(value)
        if not values:
            return None

        roles: List[str] = []
        for item in values:
            roles.extend(item.split(" "))
        return roles

    async def get_roles(self) -> List[str]:
        """Roles from the store, or the guest role when unavailable."""
        try:
            user = await self._get_user()
        except UpstreamLookupFailedError as e:
            logger.warning(f"Falling back to '{self.guest_role}' role: {e.message}")
            return [self.guest_role]

        roles = self._extract_roles(user)
        if roles is None:
            logger.warning(
                f"User '{self.identity.external.username}' has no '{self.roles_attribute}' "
                f"attribute, falling back to '{self.guest_role}' role"
            )
            return [self.guest_role]
        return roles

    async def authorize(
        self,
        request: Optional[AuthorizationRequest] = None
    ) -> AuthorizationResult:
        if self.eager_fetch:
            await self._get_user()

        roles = await self.get_roles()
        action = authorize_roles(roles, request, self.registry)
        return AuthorizationResult(roles=roles, action=action)
