"""FastAPI transport adapter for the dispatcher."""

from .payload import build_payload
from .identity import identity_from_claims, realm_from_issuer
from .responses import CORS_HEADERS, build_success_response, build_error_response
from .exception_handlers import register_exception_handlers
from .router import DispatchRouter, create_app

__all__ = [
    "build_payload",
    "identity_from_claims",
    "realm_from_issuer",
    "CORS_HEADERS",
    "build_success_response",
    "build_error_response",
    "register_exception_handlers",
    "DispatchRouter",
    "create_app",
]
