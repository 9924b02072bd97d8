"""Identity authorizers: static and external role resolution."""

from .entities import (
    IdentityKind,
    StaticIdentity,
    ExternalIdentity,
    Identity,
    AuthorizationResult,
)
from .protocols import AuthorizerProtocol, IdentityStoreProtocol
from .base import authorize_roles
from .static import StaticAuthorizer
from .external import ExternalAuthorizer
from .factory import AuthorizerFactory

__all__ = [
    "IdentityKind",
    "StaticIdentity",
    "ExternalIdentity",
    "Identity",
    "AuthorizationResult",
    "AuthorizerProtocol",
    "IdentityStoreProtocol",
    "authorize_roles",
    "StaticAuthorizer",
    "ExternalAuthorizer",
    "AuthorizerFactory",
]
