"""ACL domain entities.

ACL entries are declared once at startup; actions and authorization
requests are built per request. All of them are immutable value objects.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple


class Operation(str, Enum):
    """Operation kinds, weakest to strongest."""
    VIEW = "view"
    CREATE = "create"
    EDIT = "edit"
    REMOVE = "remove"


def _as_patterns(values: Optional[Iterable[str]]) -> Tuple[str, ...]:
    if values is None:
        return ()
    if isinstance(values, str):
        raise TypeError(f"Resource patterns must be a sequence of strings, got string: {values!r}")
    return tuple(values)


@dataclass(frozen=True)
class Action:
    """Effective resource patterns per operation for a resolved role set."""

    view: Tuple[str, ...] = ()
    create: Tuple[str, ...] = ()
    edit: Tuple[str, ...] = ()
    remove: Tuple[str, ...] = ()

    def __post_init__(self):
        for name in ("view", "create", "edit", "remove"):
            object.__setattr__(self, name, _as_patterns(getattr(self, name)))

    def patterns_for(self, operation: Operation) -> Tuple[str, ...]:
        """Patterns granted for one operation."""
        return getattr(self, Operation(operation).value)

    def get_resources(self) -> Tuple[str, ...]:
        """All patterns across operations, in view/create/edit/remove order."""
        return self.view + self.create + self.edit + self.remove

    def to_dict(self) -> Dict[str, list]:
        return {
            "view": list(self.view),
            "create": list(self.create),
            "edit": list(self.edit),
            "remove": list(self.remove),
        }


@dataclass(frozen=True)
class AclEntry:
    """Directly granted patterns and optional parent role for one role."""

    view: Tuple[str, ...] = ()
    create: Tuple[str, ...] = ()
    edit: Tuple[str, ...] = ()
    remove: Tuple[str, ...] = ()
    parent: Optional[str] = None

    def __post_init__(self):
        for name in ("view", "create", "edit", "remove"):
            object.__setattr__(self, name, _as_patterns(getattr(self, name)))
        if self.parent is not None and not self.parent:
            raise ValueError("ACL parent must be a non-empty role name or None")

    @property
    def grants(self) -> Action:
        """The direct grants, without implication applied."""
        return Action(view=self.view, create=self.create, edit=self.edit, remove=self.remove)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AclEntry":
        """Build an entry from its plain-dict form.

        Unknown keys are rejected so a typo in an ACL table fails at startup.
        """
        allowed = {"view", "create", "edit", "remove", "parent"}
        unknown = set(data) - allowed
        if unknown:
            raise ValueError(f"Unknown ACL entry keys: {sorted(unknown)}")
        return cls(
            view=data.get("view") or (),
            create=data.get("create") or (),
            edit=data.get("edit") or (),
            remove=data.get("remove") or (),
            parent=data.get("parent"),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = self.grants.to_dict()
        if self.parent is not None:
            result["parent"] = self.parent
        return result


@dataclass(frozen=True)
class AuthorizationRequest:
    """A single (resource, operation) permission check."""

    resource: str
    operation: Operation = field(default=Operation.VIEW)

    def __post_init__(self):
        object.__setattr__(self, "operation", Operation(self.operation))
