"""Authorization logic shared by all authorizer variants."""

import logging
from typing import Iterable, Optional

from ..acl.aggregator import resolve_action
from ..acl.entities import Action, AuthorizationRequest
from ..acl.matcher import matches_any
from ..acl.registry import AclRegistry
from ..core.exceptions import NotAuthorizedError

logger = logging.getLogger(__name__)


def authorize_roles(
    roles: Iterable[str],
    request: Optional[AuthorizationRequest],
    registry: AclRegistry,
) -> Action:
    """
    Resolve the effective action for roles and check one permission.

    Args:
        roles: The principal's direct roles
        request: Permission to check, or None to only resolve the action
        registry: ACL table

    Returns:
        Effective action for the roles and their ancestors

    Raises:
        NotAuthorizedError: no granted pattern covers the requested resource
    """
    roles = list(roles)
    action = resolve_action(roles, registry)

    if request is None:
        return action

    if not matches_any(request.resource, action.patterns_for(request.operation)):
        logger.info(
            f"Denied {request.operation.value} on '{request.resource}' for roles {roles}"
        )
        raise NotAuthorizedError(
            f"{request.operation.value} on '{request.resource}' is not permitted",
            details={
                "resource": request.resource,
                "operation": request.operation.value,
                "roles": roles,
            },
        )

    return action
