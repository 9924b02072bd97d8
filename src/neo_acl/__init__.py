"""Neo-ACL - Authorization and request dispatch for NeoMultiTenant services.

Resolves a principal's effective permissions from a role hierarchy, checks
a (resource, operation) pair against them and routes requests to
registered handlers behind that check.
"""

# Initialize logging configuration on import
from .config.logging_config import setup_logging
setup_logging()

from .__version__ import __version__

from .config import AclSettings, get_settings

from .core.exceptions import (
    NeoAclError,
    NotAuthorizedError,
    RouteNotFoundError,
    AuthorizerUnavailableError,
    UpstreamLookupFailedError,
    HandlerMisconfiguredError,
    AclConfigurationError,
    RouteConfigurationError,
    ErrorCode,
    ErrorCodeTable,
)

from .acl import (
    Operation,
    Action,
    AclEntry,
    AuthorizationRequest,
    AclRegistry,
    AclRegistryBuilder,
    matches,
    resolve_parents,
    aggregate,
    resolve_action,
)

from .authorizers import (
    IdentityKind,
    Identity,
    AuthorizationResult,
    AuthorizerFactory,
    StaticAuthorizer,
    ExternalAuthorizer,
)

from .dispatch import (
    Response,
    RequestContext,
    Route,
    RouteRegistry,
    RouteRegistryBuilder,
    Dispatcher,
)

from .menu import MenuItem, MenuRegistry, filter_menu

__all__ = [
    "__version__",
    "AclSettings",
    "get_settings",
    "NeoAclError",
    "NotAuthorizedError",
    "RouteNotFoundError",
    "AuthorizerUnavailableError",
    "UpstreamLookupFailedError",
    "HandlerMisconfiguredError",
    "AclConfigurationError",
    "RouteConfigurationError",
    "ErrorCode",
    "ErrorCodeTable",
    "Operation",
    "Action",
    "AclEntry",
    "AuthorizationRequest",
    "AclRegistry",
    "AclRegistryBuilder",
    "matches",
    "resolve_parents",
    "aggregate",
    "resolve_action",
    "IdentityKind",
    "Identity",
    "AuthorizationResult",
    "AuthorizerFactory",
    "StaticAuthorizer",
    "ExternalAuthorizer",
    "Response",
    "RequestContext",
    "Route",
    "RouteRegistry",
    "RouteRegistryBuilder",
    "Dispatcher",
    "MenuItem",
    "MenuRegistry",
    "filter_menu",
]
