"""
Rejection Responses
===================
JSON responses emitted when the gate rejects a request.
"""

from typing import Optional

from starlette.responses import JSONResponse

from .config import DEFAULT_REJECTION_STATUS_CODE
from .messages import MessageRenderer, render_message
from .models import Rejection


def rejection_response(
    rejection: Rejection,
    status_code: int = DEFAULT_REJECTION_STATUS_CODE,
    renderer: Optional[MessageRenderer] = None,
) -> JSONResponse:
    """
    Create the JSON response for a rejection.

    Args:
        rejection: Why the request was rejected
        status_code: HTTP status code (403 for every rejection by default)
        renderer: Optional replacement for the default message rendering

    Returns:
        JSONResponse with body ``{"message": "<text>"}``
    """
    render = renderer or render_message
    return JSONResponse(
        status_code=status_code,
        content={"message": render(rejection)},
    )
