"""
Credential Gate
===============
Decides whether a request may proceed to the protected handler.
"""

from typing import Mapping

import structlog

from .config import GateConfig
from .headers import extract_bearer_token
from .models import GateResult
from .verifier import verify_token

logger = structlog.get_logger(__name__)


class CredentialGate:
    """
    Bearer credential gate.

    Every call re-verifies the credential; nothing is cached between
    requests. The only state is the immutable configuration, so one gate
    can be shared by any number of concurrent requests.
    """

    def __init__(self, config: GateConfig):
        self.config = config

    def evaluate(self, headers: Mapping[str, str]) -> GateResult:
        """
        Evaluate the credential carried by request headers.

        Args:
            headers: Request headers (Starlette ``Headers`` or a plain mapping)

        Returns:
            GateResult with decision ALLOW (and claims) or REJECT (and reason)
        """
        token, rejection = extract_bearer_token(headers)
        if rejection is not None:
            result = GateResult.reject(rejection)
        else:
            result = verify_token(token, self.config)

        if result.allowed:
            logger.debug("jwt_gate_allowed")
        else:
            logger.debug(
                "jwt_gate_rejected",
                kind=result.rejection.kind.value,
                algorithm=result.rejection.algorithm,
            )
        return result
