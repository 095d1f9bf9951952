"""
Gate Configuration
==================
Immutable configuration injected into the credential gate.
"""

import math
import os
from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple

# Symmetric (shared-secret) signing family
HMAC_ALGORITHMS: Tuple[str, ...] = ("HS256", "HS384", "HS512")

SECRET_ENV_VAR = "token_password"
ALGORITHMS_ENV_VAR = "JWT_GATE_ALGORITHMS"
LEEWAY_ENV_VAR = "JWT_GATE_LEEWAY_SECONDS"
EXCLUDED_PATHS_ENV_VAR = "JWT_GATE_EXCLUDED_PATHS"

DEFAULT_REJECTION_STATUS_CODE = 403


class GateConfigError(ValueError):
    """Raised when the gate is configured with unusable values."""


def _split_csv(value: str) -> Tuple[str, ...]:
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class GateConfig:
    """
    Configuration for the credential gate.

    The secret never appears in ``repr`` output. Algorithms are restricted
    to the HMAC family; the allow-list belongs to the verifier, not to
    incoming tokens.
    """
    secret: bytes = field(repr=False)
    algorithms: Tuple[str, ...] = HMAC_ALGORITHMS
    leeway_seconds: float = 0
    rejection_status_code: int = DEFAULT_REJECTION_STATUS_CODE
    excluded_paths: FrozenSet[str] = frozenset()

    def __post_init__(self):
        if isinstance(self.secret, str):
            object.__setattr__(self, "secret", self.secret.encode())
        if not self.secret:
            raise GateConfigError("Verification secret must not be empty")

        algorithms = tuple(self.algorithms)
        if not algorithms:
            raise GateConfigError("At least one signing algorithm is required")
        unsupported = [alg for alg in algorithms if alg not in HMAC_ALGORITHMS]
        if unsupported:
            raise GateConfigError(
                f"Only HMAC algorithms are accepted, got: {', '.join(unsupported)}"
            )
        object.__setattr__(self, "algorithms", algorithms)
        object.__setattr__(self, "excluded_paths", frozenset(self.excluded_paths))

        if not math.isfinite(self.leeway_seconds) or self.leeway_seconds < 0:
            raise GateConfigError("Leeway must be a finite, non-negative number")

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "GateConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)

        Returns:
            GateConfig loaded once, to be shared for the process lifetime

        Raises:
            GateConfigError: If the secret is missing or a value is invalid
        """
        env = os.environ if environ is None else environ

        algorithms = _split_csv(env.get(ALGORITHMS_ENV_VAR, "")) or HMAC_ALGORITHMS
        try:
            leeway = float(env.get(LEEWAY_ENV_VAR, "0"))
        except ValueError as exc:
            raise GateConfigError(f"{LEEWAY_ENV_VAR} must be a number") from exc

        return cls(
            secret=env.get(SECRET_ENV_VAR, "").encode(),
            algorithms=algorithms,
            leeway_seconds=leeway,
            excluded_paths=frozenset(_split_csv(env.get(EXCLUDED_PATHS_ENV_VAR, ""))),
        )
