"""Tests for the static authorizer and shared authorization logic."""

import pytest

from neo_acl.acl import AclRegistry, AuthorizationRequest, Operation
from neo_acl.authorizers import AuthorizerProtocol, Identity, StaticAuthorizer, authorize_roles
from neo_acl.core.exceptions import NotAuthorizedError


class TestAuthorizeRoles:
    """Test cases for authorize_roles."""

    def test_none_request_returns_action(self, acl_registry):
        action = authorize_roles(["editor"], None, acl_registry)
        assert action.edit == ("doc",)

    def test_granted_request(self, acl_registry):
        action = authorize_roles(["editor"], AuthorizationRequest("doc", Operation.CREATE), acl_registry)
        assert "doc" in action.create

    def test_denied_request(self, acl_registry):
        with pytest.raises(NotAuthorizedError) as exc_info:
            authorize_roles(["editor"], AuthorizationRequest("doc", Operation.REMOVE), acl_registry)

        assert exc_info.value.error_code == "10"
        assert exc_info.value.details["operation"] == "remove"
        assert exc_info.value.details["resource"] == "doc"

    def test_parent_grants_are_used(self, acl_registry):
        action = authorize_roles(["admin"], AuthorizationRequest("doc", Operation.REMOVE), acl_registry)
        assert action.remove == ("doc",)

    def test_wildcard_grant(self, acl_registry):
        action = authorize_roles(
            ["system/admin"], AuthorizationRequest("anything", Operation.REMOVE), acl_registry
        )
        assert action.remove == ("*",)

    def test_guest_without_grant_is_denied(self, acl_registry):
        with pytest.raises(NotAuthorizedError):
            authorize_roles(["guest"], AuthorizationRequest("doc", Operation.VIEW), acl_registry)

    def test_empty_registry_denies_everything(self):
        with pytest.raises(NotAuthorizedError):
            authorize_roles(["editor"], AuthorizationRequest("doc"), AclRegistry.empty())


class TestStaticAuthorizer:
    """Test cases for StaticAuthorizer."""

    def test_implements_protocol(self, static_identity, acl_registry):
        assert isinstance(StaticAuthorizer(static_identity, acl_registry), AuthorizerProtocol)

    def test_requires_static_payload(self, external_identity, acl_registry):
        with pytest.raises(ValueError):
            StaticAuthorizer(external_identity, acl_registry)

    @pytest.mark.asyncio
    async def test_get_roles_verbatim(self, static_identity, acl_registry):
        authorizer = StaticAuthorizer(static_identity, acl_registry)
        assert await authorizer.get_roles() == ["editor"]

    @pytest.mark.asyncio
    async def test_get_roles_returns_copy(self, static_identity, acl_registry):
        authorizer = StaticAuthorizer(static_identity, acl_registry)
        roles = await authorizer.get_roles()
        roles.append("admin")

        assert await authorizer.get_roles() == ["editor"]

    @pytest.mark.asyncio
    async def test_authorize_discovery(self, static_identity, acl_registry):
        result = await StaticAuthorizer(static_identity, acl_registry).authorize(None)

        assert result.roles == ["editor"]
        assert result.action.view == ("doc",)

    @pytest.mark.asyncio
    async def test_authorize_granted(self, acl_registry):
        identity = Identity.for_static(roles=["admin"])
        result = await StaticAuthorizer(identity, acl_registry).authorize(
            AuthorizationRequest("doc", Operation.REMOVE)
        )

        assert result.roles == ["admin"]
        assert result.action.remove == ("doc",)

    @pytest.mark.asyncio
    async def test_authorize_denied(self, acl_registry):
        identity = Identity.for_static(roles=["guest"])
        with pytest.raises(NotAuthorizedError):
            await StaticAuthorizer(identity, acl_registry).authorize(AuthorizationRequest("doc"))
