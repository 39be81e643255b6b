"""Keycloak OIDC provider - token introspection and role mapping."""

import logging
from dataclasses import dataclass, field

from keycloak import KeycloakOpenID
from keycloak.exceptions import KeycloakError

from attendtrack.domain.value_objects import UserRole

logger = logging.getLogger(__name__)

# Highest privilege wins when a token carries several application roles.
_ROLE_PRECEDENCE = (
    UserRole.ADMIN,
    UserRole.COORDINATOR,
    UserRole.LECTURER,
    UserRole.CLASS_REP,
)


@dataclass
class OIDCUser:
    """Authenticated user from OIDC token."""

    user_id: str
    email: str | None
    username: str | None
    realm_roles: list[str] = field(default_factory=list)

    @property
    def role(self) -> UserRole | None:
        """Application role derived from realm roles, None if there is none."""
        held = {UserRole.parse(r) for r in self.realm_roles}
        for role in _ROLE_PRECEDENCE:
            if role in held:
                return role
        return None


class KeycloakProvider:
    """Keycloak OIDC - validates bearer tokens and extracts user info."""

    def __init__(
        self,
        server_url: str,
        realm: str,
        client_id: str,
        client_secret: str = "",
    ) -> None:
        self._keycloak = KeycloakOpenID(
            server_url=server_url,
            realm_name=realm,
            client_id=client_id,
            client_secret_key=client_secret,
        )

    def decode_token(self, token: str) -> OIDCUser | None:
        """Introspect token, return user info or None if inactive or invalid."""
        try:
            token_info = self._keycloak.introspect(token)
        except KeycloakError:
            logger.warning("Token introspection failed", exc_info=True)
            return None
        if not token_info.get("active"):
            return None
        return OIDCUser(
            user_id=token_info.get("sub", ""),
            email=token_info.get("email"),
            username=token_info.get("preferred_username"),
            realm_roles=token_info.get("realm_access", {}).get("roles", []),
        )
