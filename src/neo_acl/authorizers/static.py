"""Authorizer for principals whose roles travel with the descriptor."""

from typing import List, Optional

from ..acl.entities import AuthorizationRequest
from ..acl.registry import AclRegistry
from .base import authorize_roles
from .entities import AuthorizationResult, Identity


class StaticAuthorizer:
    """Takes roles verbatim from the identity; never calls out."""

    def __init__(self, identity: Identity, registry: AclRegistry):
        if identity.static is None:
            raise ValueError("StaticAuthorizer requires an identity with a static payload")
        self.identity = identity
        self.registry = registry
        self.roles: List[str] = list(identity.static.roles)
        self.username = identity.static.username

    async def get_roles(self) -> List[str]:
        return list(self.roles)

    async def authorize(
        self,
        request: Optional[AuthorizationRequest] = None
    ) -> AuthorizationResult:
        roles = await self.get_roles()
        action = authorize_roles(roles, request, self.registry)
        return AuthorizationResult(roles=roles, action=action)
