"""Auth middleware - resolves the bearer token to a user."""

import asyncio
from dataclasses import dataclass

import falcon.asgi

from propimport.application.ports import IdentityProvider


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str
    email: str | None = None
    username: str | None = None


def bearer_token(header: str | None) -> str | None:
    """Token from an 'Authorization: Bearer <token>' header value, if well formed."""
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        return None
    return token


class AuthMiddleware:
    """Sets req.context.user, or None when the caller could not be identified.

    Resources decide how to answer an unidentified caller.
    """

    def __init__(self, identity_provider: IdentityProvider | None) -> None:
        self._identity = identity_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        req.context.user = None
        req.context.auth_error = "Missing authorization header"
        token = bearer_token(req.get_header("Authorization"))
        if token is None:
            if req.get_header("Authorization"):
                req.context.auth_error = "Invalid authorization header"
            return
        user = (
            await asyncio.to_thread(self._identity.decode_token, token)
            if self._identity
            else None
        )
        if user is None:
            req.context.auth_error = "User not found."
            return
        req.context.user = RequestUser(
            user_id=user.user_id,
            email=user.email,
            username=user.username,
        )
