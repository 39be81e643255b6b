"""Auth middleware - resolves the bearer token into a session user."""

import falcon.asgi

from attendtrack.application.dto.session_dto import SessionUser


class AuthMiddleware:
    """Middleware that validates the bearer token and sets req.context.user.

    req.context.user is None when there is no valid token.
    """

    def __init__(self, keycloak_provider=None) -> None:
        self._keycloak = keycloak_provider

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        """Extract user from Authorization header."""
        req.context.user = None
        auth = req.get_header("Authorization")
        if not auth or not auth.startswith("Bearer ") or not self._keycloak:
            return
        user = self._keycloak.decode_token(auth[7:])
        if user:
            req.context.user = SessionUser(
                user_id=user.user_id,
                role=user.role,
                email=user.email,
            )
