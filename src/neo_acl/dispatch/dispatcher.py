"""
Request dispatcher.

Looks up the route for a request, runs the authorization guard when the
route demands one, and invokes the handler with the enriched context.
"""
import logging

from ..authorizers.factory import AuthorizerFactory
from ..core.exceptions import (
    AuthorizerUnavailableError,
    HandlerMisconfiguredError,
    RouteNotFoundError,
)
from .entities import RequestContext, Response, Route
from .registry import RouteRegistry

logger = logging.getLogger(__name__)


class Dispatcher:
    """Routes requests to handlers behind the authorization guard."""

    def __init__(self, routes: RouteRegistry, authorizers: AuthorizerFactory):
        self.routes = routes
        self.authorizers = authorizers

    async def dispatch(self, context: RequestContext, resource: str, method: str) -> Response:
        """
        Dispatch one request.

        Args:
            context: Request context carrying payload and identity
            resource: Literal resource identifier the route was registered with
            method: Literal method (HTTP method or operation kind)

        Returns:
            The handler's response

        Raises:
            RouteNotFoundError: no route for (resource, method)
            AuthorizerUnavailableError: guarded route, no authorizer for the principal
            NotAuthorizedError: guarded route, permission not granted
            UpstreamLookupFailedError: eager identity lookup failed
            HandlerMisconfiguredError: route has no handler
        """
        route = self.routes.lookup(resource, method)
        if route is None:
            raise RouteNotFoundError(
                f"No route for {method} {resource}",
                details={"resource": resource, "method": method},
            )

        if route.is_guarded:
            context = await self._guard(route, context)

        return await self._invoke(route, context)

    async def _guard(self, route: Route, context: RequestContext) -> RequestContext:
        authorizer = self.authorizers.get_authorizer(context.identity)
        if authorizer is None:
            kind = context.identity.kind if context.identity is not None else None
            raise AuthorizerUnavailableError(
                f"No authorizer for principal kind '{kind}'",
                details={"kind": kind, "request_id": context.request_id},
            )

        result = await authorizer.authorize(route.authorization)
        logger.debug(f"Authorized {route.method} {route.resource} with roles {result.roles}")
        return context.with_authorization(result.roles, result.action)

    async def _invoke(self, route: Route, context: RequestContext) -> Response:
        if route.handler is None:
            raise HandlerMisconfiguredError(
                f"Route {route.method} {route.resource} has no handler",
                details={"resource": route.resource, "method": route.method},
            )
        return await route.handler(context)
