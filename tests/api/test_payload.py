"""Tests for payload extraction and principal construction."""

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from neo_acl.api import build_payload, identity_from_claims, realm_from_issuer
from neo_acl.config import AclSettings


STAGE_VARIABLES = {"table": "docs-dev", "id": "from-stage"}


@pytest.fixture
def client():
    app = FastAPI()

    @app.post("/items/{id}")
    async def items(request: Request):
        return await build_payload(request, STAGE_VARIABLES)

    @app.get("/plain")
    async def plain(request: Request):
        return await build_payload(request)

    return TestClient(app)


class TestBuildPayload:
    """Test cases for build_payload."""

    def test_merge_order(self, client):
        response = client.post(
            "/items/from-path",
            json={"id": "from-body", "title": "Report", "session": "from-body"},
            params={"title": "from-query"},
            headers={"Cookie": "session=from-cookie"},
        )

        assert response.json() == {
            "table": "docs-dev",
            "id": "from-path",
            "title": "from-query",
            "session": "from-cookie",
        }

    def test_body_overrides_stage_variables(self, client):
        response = client.post("/items/1", json={"table": "custom"})
        assert response.json()["table"] == "custom"

    def test_form_body(self, client):
        response = client.post("/items/1", data={"title": "Report", "tag": ["a", "b"]})

        payload = response.json()
        assert payload["title"] == "Report"
        assert payload["tag"] == ["a", "b"]

    def test_invalid_json_body_is_ignored(self, client):
        response = client.post(
            "/items/1", content=b"{not json", headers={"Content-Type": "application/json"}
        )
        assert response.json() == {"table": "docs-dev", "id": "1"}

    def test_non_json_body_read_as_form(self, client):
        response = client.post(
            "/items/1", content=b"title=Report&tag=a&tag=b", headers={"Content-Type": "text/plain"}
        )

        payload = response.json()
        assert payload["title"] == "Report"
        assert payload["tag"] == ["a", "b"]
        assert payload["id"] == "1"

    def test_non_object_json_body(self, client):
        response = client.post("/items/1", json=[1, 2, 3])
        assert response.json()["body"] == [1, 2, 3]

    def test_empty_request(self, client):
        assert client.get("/plain").json() == {}

    def test_repeated_query_parameter_keeps_last(self, client):
        assert client.get("/plain", params=[("q", "a"), ("q", "b")]).json() == {"q": "b"}


class TestIdentityFromClaims:
    """Test cases for identity_from_claims."""

    def test_realm_from_issuer(self):
        assert realm_from_issuer("https://sso.example.com/realms/acme") == "acme"
        assert realm_from_issuer("https://sso.example.com/realms/acme/") == "acme"

    def test_external_identity(self, settings):
        identity = identity_from_claims(
            {"iss": "https://sso.example.com/realms/acme", "preferred_username": "jane", "member_id": "m-1"},
            settings,
        )

        assert identity.kind == "external"
        assert identity.external.store_ref == "acme"
        assert identity.external.username == "jane"
        assert identity.member_id == "m-1"

    def test_custom_member_id_claim(self):
        settings = AclSettings(_env_file=None, member_id_claim="sub")
        identity = identity_from_claims(
            {"iss": "https://sso/realms/acme", "preferred_username": "jane", "sub": "abc"}, settings
        )
        assert identity.member_id == "abc"

    def test_missing_claims(self, settings):
        assert identity_from_claims(None, settings) is None
        assert identity_from_claims({}, settings) is None
        assert identity_from_claims({"iss": "https://sso/realms/acme"}, settings) is None

    def test_local_mode_ignores_claims(self):
        settings = AclSettings(_env_file=None, local_mode=True)
        identity = identity_from_claims({"iss": "https://sso/realms/acme", "preferred_username": "jane"}, settings)

        assert identity.kind == "static"
        assert identity.static.roles == ("system/admin",)
        assert identity.static.username == "local user"
        assert identity.member_id == "000000000000000_LOCAL_TEST"
