"""Keycloak OIDC provider for JWT validation and user sessions."""

import logging

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from propimport.application.dto.upload_dto import ClientSession
from propimport.application.ports.identity_provider import OIDCUser
from propimport.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)


def _client(server_url: str, realm: str, client_id: str, client_secret: str) -> KeycloakOpenID:
    return KeycloakOpenID(
        server_url=server_url,
        realm_name=realm,
        client_id=client_id,
        client_secret_key=client_secret or None,
    )


class KeycloakProvider:
    """Keycloak OIDC - validates JWT and extracts user info."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = _client(server_url, realm, client_id, client_secret)

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError as e:
            logger.warning("Token introspection failed: %s", e)
            return None
        if not token_info.get("active") or not token_info.get("sub"):
            return None
        return OIDCUser(
            user_id=token_info["sub"],
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
            realm_roles=token_info.get("realm_access", {}).get("roles", []),
        )


class KeycloakSessionProvider:
    """Password-grant session for the uploading side."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = _client(server_url, realm, client_id, client_secret)
        self._session: ClientSession | None = None

    def login(self, username: str, password: str) -> ClientSession:
        """Obtain tokens for user and keep them as the current session."""
        try:
            token = self._keycloak.token(username, password)
            info = self._keycloak.userinfo(token["access_token"])
        except KeycloakError as e:
            raise AuthenticationError(f"Login failed: {e}") from e
        self._session = ClientSession(
            user_id=info["sub"],
            access_token=token["access_token"],
            refresh_token=token.get("refresh_token"),
        )
        return self._session

    def get_session(self) -> ClientSession | None:
        return self._session

    def sign_out(self) -> None:
        session, self._session = self._session, None
        if session and session.refresh_token:
            try:
                self._keycloak.logout(session.refresh_token)
            except KeycloakError as e:
                logger.warning("Logout failed: %s", e)
