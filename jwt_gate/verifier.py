"""
Token Verification
==================
Structural, algorithm and signature checks for compact JWS credentials.

The accepted algorithms come from the verifier's configuration. The
algorithm declared in a token header is only compared against that
allow-list; it never selects how the token is verified.
"""

import json
import math
import time
from typing import Any, Dict

import jwt
from jwt.utils import base64url_decode

from .config import GateConfig
from .models import GateResult, Rejection, RejectionKind

TOKEN_SEGMENTS = 3
INVALID_SEGMENTS_DETAIL = "token contains an invalid number of segments"
MISSING_ALGORITHM_DETAIL = "signing method (alg) is unspecified."

TIME_CLAIMS = ("exp", "nbf", "iat")

# Signature and payload only; time claims are checked by check_time_claims
DECODE_OPTIONS: Dict[str, Any] = {
    "verify_signature": True,
    "verify_exp": False,
    "verify_nbf": False,
    "verify_iat": False,
    "verify_aud": False,
    "verify_iss": False,
    "verify_sub": False,
    "verify_jti": False,
    "require": [],
}


def _malformed(detail: str) -> GateResult:
    return GateResult.reject(Rejection(RejectionKind.MALFORMED, detail=detail))


def decode_header(token: str) -> Dict[str, Any]:
    """
    Decode the header segment without validating any of its fields.

    Raises:
        jwt.DecodeError: If the segment is not base64url encoded JSON object
    """
    header_segment = token.split(".", 1)[0]
    try:
        header_data = base64url_decode(header_segment)
    except ValueError as exc:
        raise jwt.DecodeError("Invalid header padding") from exc
    try:
        header = json.loads(header_data)
    except (ValueError, RecursionError) as exc:
        raise jwt.DecodeError(f"Invalid header string: {exc}") from exc
    if not isinstance(header, dict):
        raise jwt.DecodeError("Invalid header string: must be a json object")
    return header


def _is_numeric_date(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


def check_time_claims(claims: Dict[str, Any], leeway: float) -> bool:
    """
    Check the registered time claims that are present.

    Args:
        claims: Payload with a verified signature
        leeway: Allowed clock skew in seconds

    Returns:
        True if every present time claim is a JSON number and currently valid
    """
    present = {name: claims[name] for name in TIME_CLAIMS if name in claims}
    if not all(_is_numeric_date(value) for value in present.values()):
        return False

    now = time.time()
    if "exp" in present and present["exp"] <= now - leeway:
        return False
    if "nbf" in present and present["nbf"] > now + leeway:
        return False
    if "iat" in present and present["iat"] > now + leeway:
        return False
    return True


def verify_token(token: str, config: GateConfig) -> GateResult:
    """
    Verify a bearer token against the configured secret and algorithms.

    Args:
        token: Compact serialized token (header.payload.signature)
        config: Gate configuration holding the secret and allow-list

    Returns:
        GateResult with the decoded claims, or the rejection
    """
    if token.count(".") != TOKEN_SEGMENTS - 1:
        return _malformed(INVALID_SEGMENTS_DETAIL)

    try:
        header = decode_header(token)
    except jwt.PyJWTError as exc:
        return _malformed(str(exc))

    algorithm = header.get("alg")
    if algorithm is None:
        return _malformed(MISSING_ALGORITHM_DETAIL)
    if algorithm not in config.algorithms:
        return GateResult.reject(
            Rejection(RejectionKind.UNEXPECTED_SIGNING_METHOD, algorithm=str(algorithm))
        )

    try:
        claims = jwt.decode(
            token,
            config.secret,
            algorithms=list(config.algorithms),
            options=DECODE_OPTIONS,
        )
    except jwt.PyJWTError as exc:
        return _malformed(str(exc))

    if not check_time_claims(claims, config.leeway_seconds):
        return GateResult.reject(Rejection(RejectionKind.TOKEN_NOT_VALID))

    return GateResult.allow(claims)
