"""Authorizer selection by principal kind."""

import logging
from typing import Optional

from ..acl.registry import AclRegistry
from ..config.settings import AclSettings
from .entities import Identity, IdentityKind
from .external import ExternalAuthorizer
from .protocols import AuthorizerProtocol, IdentityStoreProtocol
from .static import StaticAuthorizer

logger = logging.getLogger(__name__)


class AuthorizerFactory:
    """Builds a fresh authorizer per request from shared, read-only state."""

    def __init__(
        self,
        registry: AclRegistry,
        identity_store: Optional[IdentityStoreProtocol] = None,
        settings: Optional[AclSettings] = None,
    ):
        self.registry = registry
        self.identity_store = identity_store
        self.settings = settings or AclSettings()

    def get_authorizer(self, identity: Optional[Identity]) -> Optional[AuthorizerProtocol]:
        """
        Select the authorizer variant for an identity, strictly by kind.

        Returns:
            An authorizer, or None when the kind is unknown or the external
            variant has no identity store configured
        """
        if identity is None:
            return None

        if identity.kind == IdentityKind.STATIC.value:
            return StaticAuthorizer(identity, self.registry)

        if identity.kind == IdentityKind.EXTERNAL.value:
            if self.identity_store is None:
                logger.error("External identity received but no identity store is configured")
                return None
            return ExternalAuthorizer(
                identity,
                self.registry,
                self.identity_store,
                roles_attribute=self.settings.roles_attribute,
                guest_role=self.settings.guest_role,
                eager_fetch=self.settings.external_eager_fetch,
            )

        logger.warning(f"No authorizer for identity kind '{identity.kind}'")
        return None
