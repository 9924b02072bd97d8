"""Base exceptions for neo-acl.

Every error the core surfaces inherits from NeoAclError and carries a
coarse error code, a message and structured details, so a transport layer
can map it to a status code and response body.
"""

from typing import Any, Dict, Optional


class NeoAclError(Exception):
    """Base exception for all neo-acl errors."""

    default_error_code = "99"

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        *args,
        **kwargs
    ):
        super().__init__(message, *args, **kwargs)
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "code": self.error_code,
            "message": self.message,
            "details": self.details,
            "type": self.__class__.__name__,
        }
