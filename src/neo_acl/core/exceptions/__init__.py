"""Exception hierarchy for neo-acl."""

from .base import NeoAclError
from .acl import (
    NotAuthorizedError,
    RouteNotFoundError,
    AuthorizerUnavailableError,
    UpstreamLookupFailedError,
    HandlerMisconfiguredError,
    AclConfigurationError,
    RouteConfigurationError,
)
from .http_mapping import (
    SUCCESS_CODE,
    SUCCESS_MESSAGE,
    DEFAULT_ERROR_CODES,
    ErrorCode,
    ErrorCodeTable,
    get_http_status_code,
    format_error_message,
    create_error_response,
)

__all__ = [
    "NeoAclError",
    "NotAuthorizedError",
    "RouteNotFoundError",
    "AuthorizerUnavailableError",
    "UpstreamLookupFailedError",
    "HandlerMisconfiguredError",
    "AclConfigurationError",
    "RouteConfigurationError",
    "SUCCESS_CODE",
    "SUCCESS_MESSAGE",
    "DEFAULT_ERROR_CODES",
    "ErrorCode",
    "ErrorCodeTable",
    "get_http_status_code",
    "format_error_message",
    "create_error_response",
]
