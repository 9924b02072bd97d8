"""Principal descriptors and authorization results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from ..acl.entities import Action


class IdentityKind(str, Enum):
    """How a principal's roles are resolved."""
    STATIC = "static"
    EXTERNAL = "external"


@dataclass(frozen=True)
class StaticIdentity:
    """Roles carried directly by the principal descriptor."""

    roles: Tuple[str, ...]
    username: str = ""

    def __post_init__(self):
        object.__setattr__(self, "roles", tuple(self.roles))


@dataclass(frozen=True)
class ExternalIdentity:
    """Lookup key for a principal held in an external identity store."""

    store_ref: str
    username: str

    def __post_init__(self):
        if not self.store_ref or not self.username:
            raise ValueError("External identity requires both store_ref and username")


@dataclass(frozen=True)
class Identity:
    """An authenticated principal.

    ``kind`` is kept as a plain string so descriptors decoded from untrusted
    payloads can carry kinds this library does not know; those select no
    authorizer.
    """

    kind: str
    member_id: Optional[str] = None
    static: Optional[StaticIdentity] = None
    external: Optional[ExternalIdentity] = None

    def __post_init__(self):
        kind = self.kind.value if isinstance(self.kind, IdentityKind) else self.kind
        object.__setattr__(self, "kind", kind)

        if kind == IdentityKind.STATIC.value and self.static is None:
            raise ValueError("Static identity requires a static payload")
        if kind == IdentityKind.EXTERNAL.value and self.external is None:
            raise ValueError("External identity requires an external payload")

    @classmethod
    def for_static(cls, roles, username: str = "", member_id: Optional[str] = None) -> "Identity":
        return cls(
            kind=IdentityKind.STATIC.value,
            member_id=member_id,
            static=StaticIdentity(roles=tuple(roles), username=username),
        )

    @classmethod
    def for_external(cls, store_ref: str, username: str, member_id: Optional[str] = None) -> "Identity":
        return cls(
            kind=IdentityKind.EXTERNAL.value,
            member_id=member_id,
            external=ExternalIdentity(store_ref=store_ref, username=username),
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"memberId": self.member_id, "type": self.kind}
        if self.static is not None:
            result["static"] = {"roles": list(self.static.roles), "username": self.static.username}
        if self.external is not None:
            result["external"] = {"storeRef": self.external.store_ref, "username": self.external.username}
        return result


@dataclass(frozen=True)
class AuthorizationResult:
    """Roles and effective action of an authorized principal."""

    roles: List[str] = field(default_factory=list)
    action: Action = field(default_factory=Action)
