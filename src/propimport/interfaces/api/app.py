"""Falcon ASGI application."""

import logging

import falcon
import falcon.asgi
from falcon.asgi import App
from psycopg_pool import AsyncConnectionPool

from propimport.application.ports import IdentityProvider
from propimport.interfaces.api.middleware.auth import AuthMiddleware
from propimport.interfaces.api.middleware.cors import CORSMiddleware
from propimport.interfaces.api.middleware.pool_lifespan import PoolLifespanMiddleware
from propimport.interfaces.api.resources.health import HealthResource
from propimport.interfaces.api.resources.import_property import ImportPropertyResource

logger = logging.getLogger(__name__)


async def handle_unexpected(req, resp, ex, params) -> None:
    """Log unexpected exceptions; never echo internals to the caller."""
    logger.exception("Unhandled error on %s %s", req.method, req.path, exc_info=ex)
    resp.status = falcon.HTTP_500
    resp.media = {"error": "Internal server error"}


def create_app(
    import_resource: ImportPropertyResource,
    identity_provider: IdentityProvider | None = None,
    cors_origins: list[str] | None = None,
    pool: AsyncConnectionPool | None = None,
) -> App:
    """Create Falcon ASGI app with routes.

    CORS runs first so that preflight requests are answered before auth.
    """
    middleware: list = [CORSMiddleware(cors_origins)]
    if pool is not None:
        middleware.append(PoolLifespanMiddleware(pool))
    middleware.append(AuthMiddleware(identity_provider))

    app = falcon.asgi.App(middleware=middleware)
    app.add_error_handler(Exception, handle_unexpected)
    health = HealthResource(pool)
    app.add_route("/v1/health", health)
    app.add_route("/v1/health/ready", health, suffix="ready")
    app.add_route("/v1/import-property", import_resource)
    return app
