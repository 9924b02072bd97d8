"""
Authorizer Protocols for neo-acl

Protocol definitions for role resolution and the external identity store
the external authorizer reads user records from.
"""
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from ..acl.entities import AuthorizationRequest
from .entities import AuthorizationResult


@runtime_checkable
class AuthorizerProtocol(Protocol):
    """Protocol implemented by every authorizer variant."""

    async def get_roles(self) -> List[str]:
        """Get the principal's direct roles."""
        ...

    async def authorize(
        self,
        request: Optional[AuthorizationRequest] = None
    ) -> AuthorizationResult:
        """Resolve the effective action and check one permission.

        A None request only resolves the action.
        """
        ...


@runtime_checkable
class IdentityStoreProtocol(Protocol):
    """Protocol for fetching principal records from an external store."""

    async def fetch_user(self, store_ref: str, username: str) -> Dict[str, Any]:
        """Fetch a user record with its custom attributes.

        Raises:
            UpstreamLookupFailedError: the store failed or the user is unknown
        """
        ...


__all__ = [
    "AuthorizerProtocol",
    "IdentityStoreProtocol",
]
