"""
Settings for neo-acl.

Pydantic settings covering the local/remote identity switch, guest degrade,
claim names and the Keycloak admin connection used to resolve external
principals.
"""
from functools import lru_cache
from typing import Dict, List, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AclSettings(BaseSettings):
    """Runtime configuration for the ACL engine and dispatcher."""

    model_config = SettingsConfigDict(
        env_prefix="NEO_ACL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application metadata
    app_name: str = Field(default="neo-acl")
    environment: str = Field(default="development")
    stage: str = Field(default="dev")

    # Local mode replaces every principal with a static identity
    local_mode: bool = Field(default=False)
    local_roles: List[str] = Field(default_factory=lambda: ["system/admin"])
    local_username: str = Field(default="local user")
    local_member_id: str = Field(default="000000000000000_LOCAL_TEST")

    # Role resolution
    guest_role: str = Field(default="guest")
    roles_attribute: str = Field(default="roles")
    member_id_claim: str = Field(default="member_id")
    external_eager_fetch: bool = Field(default=False)

    # Keycloak admin connection
    keycloak_server_url: Optional[str] = Field(default=None)
    keycloak_auth_realm: str = Field(default="master")
    keycloak_client_id: str = Field(default="admin-cli")
    keycloak_client_secret: Optional[SecretStr] = Field(default=None)
    keycloak_username: Optional[str] = Field(default=None)
    keycloak_password: Optional[SecretStr] = Field(default=None)
    keycloak_verify: bool = Field(default=True)

    # Merged into every request payload before body and parameters
    stage_variables: Dict[str, str] = Field(default_factory=dict)

    # API documentation pages; off by default so dispatched routes own every path
    docs_url: Optional[str] = Field(default=None)
    redoc_url: Optional[str] = Field(default=None)
    openapi_url: Optional[str] = Field(default=None)

    @property
    def is_production(self) -> bool:
        return self.environment.lower() in ("production", "prod")

    @property
    def keycloak_configured(self) -> bool:
        """True when enough Keycloak settings are present to build an admin client."""
        if not self.keycloak_server_url:
            return False
        has_password = bool(self.keycloak_username and self.keycloak_password)
        return has_password or self.keycloak_client_secret is not None


@lru_cache()
def get_settings() -> AclSettings:
    """Get cached settings instance."""
    return AclSettings()
