"""Error-code table and HTTP status mapping.

Services build one ErrorCodeTable at startup (usually by extending the
default table with their own codes) and hand it to the transport layer.
The table is read-only once built.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from .base import NeoAclError

SUCCESS_CODE = "00"
SUCCESS_MESSAGE = "Success"
DEFAULT_STATUS_CODE = 500


@dataclass(frozen=True)
class ErrorCode:
    """Message and HTTP status for one coarse error code."""

    message: str
    status_code: int


DEFAULT_ERROR_CODES: Dict[str, ErrorCode] = {
    "10": ErrorCode("Not authorized", 403),
    "20": ErrorCode("Route not found", 404),
    "30": ErrorCode("No authorizer for principal", 500),
    "40": ErrorCode("Identity store lookup failed", 502),
    "50": ErrorCode("Handler misconfigured", 500),
    "60": ErrorCode("Invalid ACL configuration", 500),
    "61": ErrorCode("Invalid route configuration", 500),
    "99": ErrorCode("Internal error", 500),
}


class ErrorCodeTable:
    """Immutable mapping of error code to ErrorCode."""

    def __init__(self, codes: Optional[Mapping[str, ErrorCode]] = None):
        self._codes = MappingProxyType(dict(codes or {}))

    @classmethod
    def default(cls) -> "ErrorCodeTable":
        return cls(DEFAULT_ERROR_CODES)

    def with_codes(self, codes: Mapping[str, ErrorCode]) -> "ErrorCodeTable":
        """Return a new table with the given codes added or overridden."""
        merged = dict(self._codes)
        merged.update(codes)
        return ErrorCodeTable(merged)

    def get(self, code: str) -> Optional[ErrorCode]:
        return self._codes.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._codes

    def __len__(self) -> int:
        return len(self._codes)


def get_http_status_code(exception: Exception, table: Optional[ErrorCodeTable] = None) -> int:
    """Get HTTP status code for an exception.

    Unknown codes, and exceptions outside the neo-acl hierarchy, map to 500.
    """
    if not isinstance(exception, NeoAclError):
        return DEFAULT_STATUS_CODE

    entry = (table or ErrorCodeTable.default()).get(exception.error_code)
    if entry is None:
        return DEFAULT_STATUS_CODE
    return entry.status_code


def format_error_message(exception: NeoAclError, table: Optional[ErrorCodeTable] = None) -> str:
    """Render "code:table message:detail", or "code:detail" for unknown codes."""
    entry = (table or ErrorCodeTable.default()).get(exception.error_code)
    if entry is None:
        return f"{exception.error_code}:{exception.message}"
    return f"{exception.error_code}:{entry.message}:{exception.message}"


def create_error_response(
    exception: NeoAclError,
    table: Optional[ErrorCodeTable] = None
) -> Dict[str, Any]:
    """Create the standard error envelope for an exception."""
    return {
        "error": exception.error_code,
        "message": format_error_message(exception, table),
        "data": None,
    }
