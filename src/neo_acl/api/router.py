"""
FastAPI router exposing dispatcher routes over HTTP.

Each registered route whose method is an HTTP verb becomes one FastAPI
route at the same path. The endpoint builds the request context (payload
and principal) and hands it to the dispatcher, which owns lookup, the
authorization guard and handler invocation.
"""
import logging
from typing import Optional
from uuid import uuid4

from fastapi import APIRouter, FastAPI, Request

from ..config.settings import AclSettings
from ..core.exceptions import ErrorCodeTable
from ..dispatch.dispatcher import Dispatcher
from ..dispatch.entities import RequestContext, Route
from .exception_handlers import register_exception_handlers
from .identity import identity_from_claims
from .payload import build_payload
from .responses import build_success_response

logger = logging.getLogger(__name__)

HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"})
REQUEST_ID_HEADER = "x-request-id"


class DispatchRouter:
    """Builds an APIRouter over a dispatcher's route registry."""

    def __init__(self, dispatcher: Dispatcher, settings: Optional[AclSettings] = None):
        self.dispatcher = dispatcher
        self.settings = settings or AclSettings()

    async def build_context(self, request: Request) -> RequestContext:
        claims = getattr(request.state, "claims", None)
        return RequestContext(
            stage=self.settings.stage,
            request_id=request.headers.get(REQUEST_ID_HEADER) or str(uuid4()),
            payload=await build_payload(request, self.settings.stage_variables),
            identity=identity_from_claims(claims, self.settings),
        )

    def _make_endpoint(self, route: Route):
        async def endpoint(request: Request):
            context = await self.build_context(request)
            response = await self.dispatcher.dispatch(context, route.resource, route.method)
            return build_success_response(response)

        path_name = "".join(c if c.isalnum() else "_" for c in route.resource).strip("_") or "root"
        endpoint.__name__ = f"dispatch_{route.method.lower()}_{path_name}"
        return endpoint

    def build(self) -> APIRouter:
        router = APIRouter()
        for route in self.dispatcher.routes.routes():
            if route.method not in HTTP_METHODS:
                logger.debug(f"Skipping non-HTTP route {route.method} {route.resource}")
                continue
            router.add_api_route(
                route.resource,
                self._make_endpoint(route),
                methods=[route.method],
            )
        return router


def create_app(
    dispatcher: Dispatcher,
    settings: Optional[AclSettings] = None,
    error_codes: Optional[ErrorCodeTable] = None,
) -> FastAPI:
    """Create a FastAPI application serving every HTTP route of the dispatcher."""
    settings = settings or AclSettings()
    app = FastAPI(
        title=settings.app_name,
        docs_url=settings.docs_url,
        redoc_url=settings.redoc_url,
        openapi_url=settings.openapi_url,
    )
    app.include_router(DispatchRouter(dispatcher, settings).build())
    register_exception_handlers(app, error_codes, is_production=settings.is_production)
    return app
