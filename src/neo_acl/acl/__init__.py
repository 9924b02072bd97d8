"""ACL engine: resource matching, role hierarchy and action aggregation."""

from .entities import Operation, Action, AclEntry, AuthorizationRequest
from .matcher import WILDCARD, matches, matches_any
from .registry import AclRegistry, AclRegistryBuilder, find_parent_cycle
from .resolver import resolve_parents, resolve_roles
from .aggregator import aggregate, resolve_action

__all__ = [
    "Operation",
    "Action",
    "AclEntry",
    "AuthorizationRequest",
    "WILDCARD",
    "matches",
    "matches_any",
    "AclRegistry",
    "AclRegistryBuilder",
    "find_parent_cycle",
    "resolve_parents",
    "resolve_roles",
    "aggregate",
    "resolve_action",
]
