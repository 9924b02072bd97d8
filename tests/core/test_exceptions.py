"""Tests for the exception hierarchy and error-code mapping."""

import pytest

from neo_acl.core.exceptions import (
    AclConfigurationError,
    AuthorizerUnavailableError,
    ErrorCode,
    ErrorCodeTable,
    HandlerMisconfiguredError,
    NeoAclError,
    NotAuthorizedError,
    RouteConfigurationError,
    RouteNotFoundError,
    UpstreamLookupFailedError,
    create_error_response,
    format_error_message,
    get_http_status_code,
)


class TestNeoAclError:
    """Test cases for NeoAclError."""

    @pytest.mark.parametrize("exc_class, code", [
        (NotAuthorizedError, "10"),
        (RouteNotFoundError, "20"),
        (AuthorizerUnavailableError, "30"),
        (UpstreamLookupFailedError, "40"),
        (HandlerMisconfiguredError, "50"),
        (AclConfigurationError, "60"),
        (RouteConfigurationError, "61"),
        (NeoAclError, "99"),
    ])
    def test_default_codes(self, exc_class, code):
        assert exc_class("boom").error_code == code

    def test_explicit_code_overrides_default(self):
        assert NotAuthorizedError("boom", error_code="11").error_code == "11"

    def test_to_dict(self):
        exc = RouteNotFoundError("missing", details={"resource": "/x"})
        assert exc.to_dict() == {
            "code": "20",
            "message": "missing",
            "details": {"resource": "/x"},
            "type": "RouteNotFoundError",
        }


class TestHttpMapping:
    """Test cases for status and message lookup."""

    @pytest.mark.parametrize("exc, status", [
        (NotAuthorizedError("no"), 403),
        (RouteNotFoundError("no"), 404),
        (AuthorizerUnavailableError("no"), 500),
        (UpstreamLookupFailedError("no"), 502),
        (HandlerMisconfiguredError("no"), 500),
    ])
    def test_default_statuses(self, exc, status):
        assert get_http_status_code(exc) == status

    def test_unknown_code_is_500(self):
        assert get_http_status_code(NeoAclError("no", error_code="77")) == 500

    def test_foreign_exception_is_500(self):
        assert get_http_status_code(ValueError("no")) == 500

    def test_custom_codes(self):
        table = ErrorCodeTable.default().with_codes({"70": ErrorCode("Quota exceeded", 429)})
        exc = NeoAclError("too many", error_code="70")

        assert get_http_status_code(exc, table) == 429
        assert format_error_message(exc, table) == "70:Quota exceeded:too many"
        assert "70" not in ErrorCodeTable.default()

    def test_override_default_code(self):
        table = ErrorCodeTable.default().with_codes({"10": ErrorCode("Forbidden", 401)})
        assert get_http_status_code(NotAuthorizedError("no"), table) == 401

    def test_format_unknown_code(self):
        assert format_error_message(NeoAclError("odd", error_code="77")) == "77:odd"

    def test_create_error_response(self):
        assert create_error_response(NotAuthorizedError("doc/remove")) == {
            "error": "10",
            "message": "10:Not authorized:doc/remove",
            "data": None,
        }
