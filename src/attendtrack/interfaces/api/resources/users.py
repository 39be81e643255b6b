"""User API resources."""

import falcon.asgi


class UserResource:
    """GET /v1/users/{id} - own profile, or any profile for staff roles."""

    access_gates = {"GET": "user_profile"}

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        user_id: str,
    ) -> None:
        """Get user by id."""
        async with self._uow_factory() as uow:
            user = await uow.users.get_by_id(user_id)
        if not user:
            resp.status = falcon.HTTP_404
            resp.media = {"error": "User not found"}
            return

        resp.media = {
            "id": user.id,
            "email": user.email,
            "first_name": user.first_name,
            "last_name": user.last_name,
            "role": user.role,
            "is_active": user.is_active,
        }
        resp.status = falcon.HTTP_200
