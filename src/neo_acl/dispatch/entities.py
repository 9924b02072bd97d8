"""Dispatch entities: routes, request contexts and handler responses."""

from dataclasses import dataclass, field, replace
from typing import Any, Awaitable, Callable, Dict, Optional, Tuple

from ..acl.entities import Action, AuthorizationRequest
from ..authorizers.entities import Identity


@dataclass(frozen=True)
class Response:
    """Handler result, rendered into a transport envelope by the api layer."""

    data: Any = None
    message: Optional[str] = None
    count: Optional[int] = None
    start: Optional[int] = None
    total: Optional[int] = None
    last_evaluated_key: Any = None
    headers: Dict[str, str] = field(default_factory=dict)
    bare_body: bool = False


@dataclass(frozen=True)
class RequestContext:
    """An inbound request, enriched with roles and action once authorized."""

    stage: str = ""
    request_id: str = ""
    payload: Any = None
    identity: Optional[Identity] = None
    roles: Optional[Tuple[str, ...]] = None
    action: Optional[Action] = None

    def with_authorization(self, roles, action: Action) -> "RequestContext":
        return replace(self, roles=tuple(roles), action=action)

    @property
    def is_authorized(self) -> bool:
        return self.action is not None


Handler = Callable[[RequestContext], Awaitable[Response]]


@dataclass(frozen=True)
class Route:
    """Binding of a literal (resource, method) pair to a handler."""

    resource: str
    method: str
    handler: Optional[Handler] = None
    authorization: Optional[AuthorizationRequest] = None

    @property
    def key(self) -> Tuple[str, str]:
        return (self.resource, self.method)

    @property
    def is_guarded(self) -> bool:
        return self.authorization is not None
