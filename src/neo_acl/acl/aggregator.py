"""Action aggregation.

Folds the grants of a role set into one effective Action. Stronger
operations imply the weaker ones for the same pattern:
remove implies edit, edit implies create, create implies view.
"""

import logging
from typing import Iterable, List

from .entities import Action
from .registry import AclRegistry
from .resolver import resolve_roles

logger = logging.getLogger(__name__)


def aggregate(roles: Iterable[str], registry: AclRegistry) -> Action:
    """
    Build the effective Action for the given roles.

    Patterns are concatenated in role order; duplicates across roles are
    kept. Unknown roles contribute nothing, and no roles (or an empty
    registry) yields an Action with four empty sequences.
    """
    view: List[str] = []
    create: List[str] = []
    edit: List[str] = []
    remove: List[str] = []

    for role in roles:
        entry = registry.get(role)
        if entry is None:
            continue

        view.extend(entry.view + entry.create + entry.edit + entry.remove)
        create.extend(entry.create + entry.edit + entry.remove)
        edit.extend(entry.edit + entry.remove)
        remove.extend(entry.remove)

    return Action(view=tuple(view), create=tuple(create), edit=tuple(edit), remove=tuple(remove))


def resolve_action(roles: Iterable[str], registry: AclRegistry) -> Action:
    """Effective Action for the roles plus all of their ancestors."""
    full_roles = resolve_roles(roles, registry)
    logger.debug(f"Resolved roles: {full_roles}")
    return aggregate(full_roles, registry)
