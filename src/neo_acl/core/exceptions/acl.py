"""Authorization and dispatch exceptions for neo-acl."""

from .base import NeoAclError


class NotAuthorizedError(NeoAclError):
    """Raised when the requested resource/operation is not in the effective action."""
    default_error_code = "10"


class RouteNotFoundError(NeoAclError):
    """Raised when no route is registered for a (resource, method) pair."""
    default_error_code = "20"


class AuthorizerUnavailableError(NeoAclError):
    """Raised when no authorizer can be selected for the principal."""
    default_error_code = "30"


class UpstreamLookupFailedError(NeoAclError):
    """Raised when the external identity store lookup fails during an eager authorize."""
    default_error_code = "40"


class HandlerMisconfiguredError(NeoAclError):
    """Raised when a matched route has no handler."""
    default_error_code = "50"


class AclConfigurationError(NeoAclError):
    """Raised at startup when the ACL table is invalid (e.g. cyclic parents)."""
    default_error_code = "60"


class RouteConfigurationError(NeoAclError):
    """Raised at startup when a route is registered twice."""
    default_error_code = "61"
