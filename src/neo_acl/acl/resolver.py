"""Role hierarchy resolution."""

import logging
from typing import Iterable, List

from .registry import AclRegistry

logger = logging.getLogger(__name__)


def resolve_parents(roles: Iterable[str], registry: AclRegistry) -> List[str]:
    """
    Collect every ancestor reachable from the given roles.

    Each starting role's parent chain is walked depth-first and ancestors are
    appended in discovery order. Roles missing from the registry contribute
    nothing. A chain stops at the first role already seen for the same
    starting role, so a cyclic table cannot recurse forever; ancestors shared
    by several starting roles are repeated once per starting role.

    Args:
        roles: Starting roles
        registry: ACL table

    Returns:
        Ancestor roles, excluding the starting roles unless one is an
        ancestor of another
    """
    parents: List[str] = []

    for role in roles:
        visited = {role}
        parent = registry.parent_of(role)
        while parent is not None and parent not in visited:
            visited.add(parent)
            parents.append(parent)
            parent = registry.parent_of(parent)

        if parent is not None:
            logger.warning(f"Role hierarchy loops back to '{parent}' while resolving '{role}'")

    return parents


def resolve_roles(roles: Iterable[str], registry: AclRegistry) -> List[str]:
    """Starting roles followed by all of their ancestors."""
    roles = list(roles)
    return roles + resolve_parents(roles, registry)
