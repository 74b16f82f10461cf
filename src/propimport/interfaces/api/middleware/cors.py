"""CORS middleware - adds Access-Control-Allow-* headers."""

import falcon.asgi

ALLOW_HEADERS = "authorization, x-client-info, apikey, content-type"


class CORSMiddleware:
    """Middleware that adds CORS headers and answers OPTIONS preflight."""

    def __init__(self, origins: list[str] | None = None) -> None:
        self._origins = origins or ["*"]

    def _set_cors_headers(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Set CORS headers on response."""
        if "*" in self._origins:
            resp.set_header("Access-Control-Allow-Origin", "*")
        else:
            origin = req.get_header("Origin")
            resp.set_header(
                "Access-Control-Allow-Origin",
                origin if origin in self._origins else self._origins[0],
            )
            resp.append_header("Vary", "Origin")
        resp.set_header("Access-Control-Allow-Headers", ALLOW_HEADERS)
        resp.set_header("Access-Control-Allow-Methods", "GET, POST, OPTIONS")

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Short-circuit OPTIONS preflight with an empty 200, before auth runs."""
        if req.method == "OPTIONS":
            self._set_cors_headers(req, resp)
            resp.status = falcon.HTTP_200
            resp.data = b""
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        """Ensure CORS headers on every response, errors included."""
        self._set_cors_headers(req, resp)
