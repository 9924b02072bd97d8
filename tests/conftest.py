"""Pytest configuration and fixtures for neo-acl tests."""

import pytest
from unittest.mock import AsyncMock

from neo_acl.acl import AclEntry, AclRegistryBuilder
from neo_acl.authorizers import AuthorizerFactory, Identity
from neo_acl.config import AclSettings


SAMPLE_ACLS = {
    "guest": {"view": ["public"]},
    "editor": {"edit": ["doc"]},
    "admin": {"remove": ["doc"], "parent": "editor"},
    "system/admin": {"remove": ["*"]},
    "auditor": {"view": ["report", "doc"], "parent": "guest"},
}


@pytest.fixture
def acl_registry():
    """ACL registry with a small editor/admin hierarchy."""
    return AclRegistryBuilder().register_acls(SAMPLE_ACLS).build()


@pytest.fixture
def settings():
    """Settings isolated from the environment."""
    return AclSettings(
        _env_file=None,
        local_mode=False,
        guest_role="guest",
        roles_attribute="roles",
        external_eager_fetch=False,
    )


@pytest.fixture
def identity_store():
    """Mock identity store returning an editor user."""
    store = AsyncMock()
    store.fetch_user = AsyncMock(return_value={
        "id": "kc-user-1",
        "username": "jane",
        "attributes": {"roles": ["editor auditor"]},
    })
    return store


@pytest.fixture
def authorizer_factory(acl_registry, identity_store, settings):
    return AuthorizerFactory(acl_registry, identity_store, settings)


@pytest.fixture
def static_identity():
    return Identity.for_static(roles=["editor"], username="jane", member_id="member-1")


@pytest.fixture
def external_identity():
    return Identity.for_external(store_ref="acme", username="jane", member_id="member-1")


@pytest.fixture
def editor_entry():
    return AclEntry(edit=("doc",))
