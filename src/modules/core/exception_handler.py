"""DRF exception handler producing the standard envelope.

Covers failures raised by the framework before a handler body runs:
missing or invalid credentials, unparsable request bodies, unsupported
methods, throttling.  Handlers deal with their own domain errors.
"""

from __future__ import annotations

from typing import Any

import structlog
from rest_framework import exceptions
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)


def _message_for(exc: exceptions.APIException) -> str:
    detail: Any = exc.detail
    if isinstance(detail, dict):
        detail = detail.get("detail", exc.default_detail)
    if isinstance(detail, list):
        detail = detail[0] if detail else exc.default_detail
    return str(detail)


def envelope_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, exceptions.APIException):
        message = _message_for(exc)
    else:
        message = str(response.data.get("detail", "Request failed"))

    logger.warning(
        "request.rejected",
        status_code=response.status_code,
        error_type=type(exc).__name__,
    )
    response.data = {"status": False, "message": message, "data": None}
    return response
