"""
JWT Gate Middleware for Starlette/FastAPI Services

Rejects requests that do not carry a valid bearer token before they reach
protected routes.

Usage:
    from jwt_gate import GateConfig, JWTGateMiddleware, get_token_claims

    app.add_middleware(JWTGateMiddleware, config=GateConfig.from_env())

    @app.get("/protected")
    async def protected(claims: dict = Depends(get_token_claims)):
        ...
"""

from typing import Any, Dict, Optional, Set

from fastapi import HTTPException, Request
from starlette.middleware.base import BaseHTTPMiddleware
import structlog

from .config import GateConfig
from .gate import CredentialGate
from .messages import MessageRenderer
from .responses import rejection_response

logger = structlog.get_logger(__name__)

CLAIMS_STATE_ATTR = "jwt_claims"


class JWTGateMiddleware(BaseHTTPMiddleware):
    """
    Middleware that runs every request through the credential gate.

    On success the request continues unchanged; the decoded claims are
    stored on ``request.state.jwt_claims``. On failure the rejection
    response is returned and the downstream app is never called.
    """

    def __init__(
        self,
        app,
        config: Optional[GateConfig] = None,
        gate: Optional[CredentialGate] = None,
        excluded_paths: Optional[Set[str]] = None,
        renderer: Optional[MessageRenderer] = None,
    ):
        super().__init__(app)
        if gate is None:
            gate = CredentialGate(config or GateConfig.from_env())
        self.gate = gate
        self.config = gate.config
        self.excluded_paths = frozenset(
            excluded_paths if excluded_paths is not None else self.config.excluded_paths
        )
        self.renderer = renderer

        logger.info(
            "jwt_gate_configured",
            algorithms=list(self.config.algorithms),
            excluded_paths=sorted(self.excluded_paths),
        )

    async def dispatch(self, request: Request, call_next):
        if request.url.path in self.excluded_paths:
            return await call_next(request)

        result = self.gate.evaluate(request.headers)
        if not result.allowed:
            logger.warning(
                "jwt_gate_blocked",
                path=request.url.path,
                method=request.method,
                reason=result.rejection.kind.value,
            )
            return rejection_response(
                result.rejection,
                status_code=self.config.rejection_status_code,
                renderer=self.renderer,
            )

        setattr(request.state, CLAIMS_STATE_ATTR, result.claims)
        return await call_next(request)


def get_token_claims(request: Request) -> Dict[str, Any]:
    """
    Dependency to get the decoded claims stored by the gate.

    Returns an empty dict for requests that bypassed the gate.
    """
    return getattr(request.state, CLAIMS_STATE_ATTR, None) or {}


def require_token_claims(request: Request) -> Dict[str, Any]:
    """
    Dependency that requires the request to have passed the gate.
    Raises 401 for excluded paths or apps mounted without the middleware.
    """
    claims = getattr(request.state, CLAIMS_STATE_ATTR, None)
    if claims is None:
        raise HTTPException(
            status_code=401,
            detail="This endpoint requires a verified bearer token",
        )
    return claims
