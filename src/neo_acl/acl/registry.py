"""ACL registry.

Maps role names to their ACL entries. Services populate an
AclRegistryBuilder during startup and call build(), which validates the
parent graph and returns a read-only AclRegistry shared by all requests.
"""

import logging
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Mapping, Optional, Union

from ..core.exceptions import AclConfigurationError
from .entities import AclEntry

logger = logging.getLogger(__name__)


class AclRegistry:
    """Read-only role table."""

    def __init__(self, entries: Mapping[str, AclEntry]):
        self._entries = MappingProxyType(dict(entries))

    @classmethod
    def empty(cls) -> "AclRegistry":
        return cls({})

    def get(self, role: str) -> Optional[AclEntry]:
        return self._entries.get(role)

    def parent_of(self, role: str) -> Optional[str]:
        entry = self._entries.get(role)
        return entry.parent if entry is not None else None

    def roles(self) -> List[str]:
        return list(self._entries)

    def __contains__(self, role: object) -> bool:
        return role in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def to_dict(self) -> Dict[str, Dict[str, Any]]:
        return {role: entry.to_dict() for role, entry in self._entries.items()}


class AclRegistryBuilder:
    """Collects ACL entries before traffic starts."""

    def __init__(self):
        self._entries: Dict[str, AclEntry] = {}

    def register_acl(self, role: str, entry: Union[AclEntry, Mapping[str, Any]]) -> "AclRegistryBuilder":
        """Register the entry for one role, replacing any earlier one."""
        if not role:
            raise AclConfigurationError("Role name must be non-empty")
        if not isinstance(entry, AclEntry):
            try:
                entry = AclEntry.from_dict(entry)
            except (TypeError, ValueError) as e:
                raise AclConfigurationError(
                    f"Invalid ACL entry for role '{role}': {e}",
                    details={"role": role},
                ) from e

        if role in self._entries:
            logger.warning(f"ACL entry for role '{role}' registered twice, keeping the last one")
        self._entries[role] = entry
        return self

    def register_acls(self, acls: Mapping[str, Union[AclEntry, Mapping[str, Any]]]) -> "AclRegistryBuilder":
        for role, entry in acls.items():
            self.register_acl(role, entry)
        return self

    def build(self) -> AclRegistry:
        """Validate the parent graph and freeze the table.

        Raises:
            AclConfigurationError: a parent chain loops back on itself
        """
        for role, entry in self._entries.items():
            if entry.parent is not None and entry.parent not in self._entries:
                logger.warning(f"Role '{role}' has unregistered parent '{entry.parent}'")

        cycle = find_parent_cycle(self._entries)
        if cycle:
            raise AclConfigurationError(
                f"Cyclic role hierarchy: {' -> '.join(cycle)}",
                details={"cycle": cycle},
            )

        logger.info(f"ACL registry built with {len(self._entries)} roles")
        return AclRegistry(self._entries)


def find_parent_cycle(entries: Mapping[str, AclEntry]) -> Optional[List[str]]:
    """Return the first parent cycle found as a closed role path, or None.

    Each role has at most one parent, so every walk is a simple chain.
    """
    checked = set()
    for start in entries:
        if start in checked:
            continue
        path: List[str] = []
        on_path = {}
        role: Optional[str] = start
        while role is not None and role in entries and role not in checked:
            if role in on_path:
                return path[on_path[role]:] + [role]
            on_path[role] = len(path)
            path.append(role)
            role = entries[role].parent
        checked.update(path)
    return None
