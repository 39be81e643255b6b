"""Permission gate middleware - runs the evaluator before gated responders.

A resource opts in by declaring ``access_gates``, a mapping of HTTP method to
the name of a predefined gate configuration.
"""

import logging
from collections.abc import Mapping

import falcon.asgi

from attendtrack.application.authorization import (
    GATE_CONFIGS,
    DenyReason,
    GateConfig,
    PermissionEvaluator,
)
from attendtrack.application.dto.session_dto import RequestInfo

logger = logging.getLogger(__name__)


class PermissionGateMiddleware:
    """Denies gated requests with 401/403 and fails closed with 500 on errors."""

    def __init__(
        self,
        evaluator: PermissionEvaluator,
        gates: Mapping[str, GateConfig] = GATE_CONFIGS,
    ) -> None:
        self._evaluator = evaluator
        self._gates = gates

    async def process_resource(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, params
    ) -> None:
        """Evaluate the gate declared for this resource and method, if any."""
        gate_name = (getattr(resource, "access_gates", None) or {}).get(req.method)
        if gate_name is None:
            return

        try:
            decision = await self._evaluator.evaluate(
                self._gates[gate_name],
                getattr(req.context, "user", None),
                RequestInfo(method=req.method, path=req.path, params=dict(req.params)),
            )
        except Exception:
            logger.exception("Permission gate %s failed for %s %s", gate_name, req.method, req.path)
            resp.status = falcon.HTTP_500
            resp.media = {"error": "Internal server error"}
            resp.complete = True
            return

        if decision.allowed:
            return

        logger.info(
            "Denied %s %s by gate %s: %s", req.method, req.path, gate_name, decision.reason
        )
        if decision.reason is DenyReason.UNAUTHENTICATED:
            resp.status = falcon.HTTP_401
        else:
            resp.status = falcon.HTTP_403
        resp.media = {"error": decision.reason.value}
        resp.complete = True
