"""Route registry.

Routes are registered on a RouteRegistryBuilder during startup; build()
returns a RouteRegistry that is never mutated afterwards, so concurrent
requests read it without locking.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Optional, Tuple

from ..acl.entities import AuthorizationRequest
from ..core.exceptions import RouteConfigurationError
from .entities import Handler, Route

logger = logging.getLogger(__name__)


class RouteRegistry:
    """Read-only (resource, method) -> Route table."""

    def __init__(self, routes: Dict[Tuple[str, str], Route]):
        self._routes = MappingProxyType(dict(routes))

    def lookup(self, resource: str, method: str) -> Optional[Route]:
        """Exact lookup; no pattern matching on either key."""
        return self._routes.get((resource, method))

    def routes(self) -> List[Route]:
        return list(self._routes.values())

    def __len__(self) -> int:
        return len(self._routes)

    def __contains__(self, key: object) -> bool:
        return key in self._routes


class RouteRegistryBuilder:
    """Collects routes before traffic starts."""

    def __init__(self):
        self._routes: Dict[Tuple[str, str], Route] = {}

    def register_route(
        self,
        resource: str,
        method: str,
        handler: Optional[Handler],
        authorization: Optional[AuthorizationRequest] = None,
    ) -> "RouteRegistryBuilder":
        """Register one route.

        Raises:
            RouteConfigurationError: the (resource, method) pair is taken
        """
        route = Route(resource=resource, method=method, handler=handler, authorization=authorization)
        if route.key in self._routes:
            raise RouteConfigurationError(
                f"Route {method} {resource} registered twice",
                details={"resource": resource, "method": method},
            )
        self._routes[route.key] = route
        return self

    def route(
        self,
        resource: str,
        method: str,
        authorization: Optional[AuthorizationRequest] = None,
    ):
        """Decorator form of register_route."""
        def decorator(handler: Handler) -> Handler:
            self.register_route(resource, method, handler, authorization)
            return handler
        return decorator

    def build(self) -> RouteRegistry:
        for route in self._routes.values():
            if route.handler is None:
                logger.warning(f"Route {route.method} {route.resource} has no handler")
        logger.info(f"Route registry built with {len(self._routes)} routes")
        return RouteRegistry(self._routes)
