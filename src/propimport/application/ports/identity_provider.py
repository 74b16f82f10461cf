"""Identity provider port - resolves bearer tokens to users."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    email: str | None = None
    username: str | None = None
    realm_roles: list[str] = field(default_factory=list)


class IdentityProvider(Protocol):
    """Port for validating access tokens."""

    def decode_token(self, token: str) -> OIDCUser | None: ...
