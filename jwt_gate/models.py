"""
Gate Models
===========
Decision and rejection types produced by the credential gate.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class GateDecision(str, Enum):
    """Credential gate decision types."""
    ALLOW = "ALLOW"
    REJECT = "REJECT"


class RejectionKind(str, Enum):
    """Reasons for rejecting a request."""
    MISSING_CREDENTIAL = "missing_credential"
    MALFORMED_SCHEME = "malformed_scheme"
    UNEXPECTED_SIGNING_METHOD = "unexpected_signing_method"
    MALFORMED = "malformed"
    TOKEN_NOT_VALID = "token_not_valid"


@dataclass(frozen=True)
class Rejection:
    """
    A rejection with its structured fields.

    ``algorithm`` is the algorithm declared by the token header and is only
    set for UNEXPECTED_SIGNING_METHOD. ``detail`` holds the parser error text
    for MALFORMED.
    """
    kind: RejectionKind
    algorithm: Optional[str] = None
    detail: Optional[str] = None


@dataclass(frozen=True)
class GateResult:
    """Result of evaluating a request's credential."""
    decision: GateDecision
    rejection: Optional[Rejection] = None
    claims: Optional[Dict[str, Any]] = None

    @property
    def allowed(self) -> bool:
        return self.decision == GateDecision.ALLOW

    @classmethod
    def allow(cls, claims: Dict[str, Any]) -> "GateResult":
        return cls(decision=GateDecision.ALLOW, claims=claims)

    @classmethod
    def reject(cls, rejection: Rejection) -> "GateResult":
        return cls(decision=GateDecision.REJECT, rejection=rejection)
