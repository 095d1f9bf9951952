"""
Rejection Messages
==================
Renders rejections to the messages returned to callers.

These strings are part of the wire contract and must not change.
"""

from typing import Callable

from .models import Rejection, RejectionKind

MISSING_CREDENTIAL_MESSAGE = "Missing auth token."
MALFORMED_SCHEME_MESSAGE = (
    "Invalid/Malformed auth token. Authorization Header must contain Bearer token."
)
MALFORMED_PREFIX = "Malformed authorization token."
TOKEN_NOT_VALID_MESSAGE = "Authorization token is not valid."

MessageRenderer = Callable[[Rejection], str]


def render_message(rejection: Rejection) -> str:
    """
    Render a rejection to its caller-visible message.

    Args:
        rejection: The rejection to render

    Returns:
        Message text for the ``message`` field of the response body
    """
    kind = rejection.kind
    if kind == RejectionKind.MISSING_CREDENTIAL:
        return MISSING_CREDENTIAL_MESSAGE
    if kind == RejectionKind.MALFORMED_SCHEME:
        return MALFORMED_SCHEME_MESSAGE
    if kind == RejectionKind.UNEXPECTED_SIGNING_METHOD:
        return f"{MALFORMED_PREFIX} Unexpected signing method: {rejection.algorithm}."
    if kind == RejectionKind.MALFORMED:
        return f"{MALFORMED_PREFIX} {rejection.detail or ''}".rstrip()
    if kind == RejectionKind.TOKEN_NOT_VALID:
        return TOKEN_NOT_VALID_MESSAGE
    raise ValueError(f"Unknown rejection kind: {kind}")
