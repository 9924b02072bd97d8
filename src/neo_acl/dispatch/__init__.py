"""Request dispatch: route registry and authorization-guarded dispatcher."""

from .entities import Response, RequestContext, Route, Handler
from .registry import RouteRegistry, RouteRegistryBuilder
from .dispatcher import Dispatcher

__all__ = [
    "Response",
    "RequestContext",
    "Route",
    "Handler",
    "RouteRegistry",
    "RouteRegistryBuilder",
    "Dispatcher",
]
