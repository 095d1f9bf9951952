"""
JWT Gate
========
Bearer token authentication gate for Starlette/FastAPI services.
"""

__version__ = "0.1.0"

from .config import GateConfig, GateConfigError, HMAC_ALGORITHMS
from .models import GateDecision, GateResult, Rejection, RejectionKind
from .messages import render_message
from .headers import extract_bearer_token
from .verifier import verify_token
from .gate import CredentialGate
from .responses import rejection_response
from .middleware import JWTGateMiddleware, get_token_claims, require_token_claims

__all__ = [
    # Config
    "GateConfig",
    "GateConfigError",
    "HMAC_ALGORITHMS",
    # Models
    "GateDecision",
    "GateResult",
    "Rejection",
    "RejectionKind",
    # Gate
    "render_message",
    "extract_bearer_token",
    "verify_token",
    "CredentialGate",
    # Middleware
    "rejection_response",
    "JWTGateMiddleware",
    "get_token_claims",
    "require_token_claims",
]
