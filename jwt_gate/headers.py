"""
Header Functions
================
Extraction of the bearer credential from request headers.
"""

from typing import Mapping, Optional, Tuple

from .models import Rejection, RejectionKind

AUTHORIZATION_HEADER = "Authorization"
BEARER_PREFIX = "Bearer "


def get_authorization_header(headers: Mapping[str, str]) -> str:
    """
    Look up the Authorization header value.

    Starlette ``Headers`` are already case-insensitive; plain mappings are
    scanned without regard to case.
    """
    value = headers.get(AUTHORIZATION_HEADER)
    if value is not None:
        return value
    wanted = AUTHORIZATION_HEADER.lower()
    for name, candidate in headers.items():
        if name.lower() == wanted:
            return candidate
    return ""


def extract_bearer_token(
    headers: Mapping[str, str],
) -> Tuple[Optional[str], Optional[Rejection]]:
    """
    Extract the bearer token from request headers.

    The header must start with the literal ``"Bearer "`` and contain it
    exactly once.

    Args:
        headers: Request headers

    Returns:
        (token, None) on success, (None, rejection) otherwise
    """
    auth_header = get_authorization_header(headers)
    if not auth_header:
        return None, Rejection(RejectionKind.MISSING_CREDENTIAL)

    parts = auth_header.split(BEARER_PREFIX)
    if len(parts) != 2 or parts[0]:
        return None, Rejection(RejectionKind.MALFORMED_SCHEME)

    return parts[1], None
