"""Keycloak integration for resolving external principals."""

from .identity_store import KeycloakIdentityStore

__all__ = ["KeycloakIdentityStore"]
