"""Response envelope helpers.

Every API response body has the shape::

    {"status": bool, "message": str, "data": ..., **extra}

``extra`` carries listing metadata (``total``, ``limit``, ``skip``).
"""

from __future__ import annotations

from typing import Any

import structlog
from django.core.signals import got_request_exception
from pydantic import ValidationError as PydanticValidationError
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

logger = structlog.get_logger(__name__)


def envelope(
    ok: bool,
    message: str,
    data: Any = None,
    status_code: int = status.HTTP_200_OK,
    **extra: Any,
) -> Response:
    body = {"status": ok, "message": message, "data": data}
    body.update(extra)
    return Response(body, status=status_code)


def success(
    message: str,
    data: Any = None,
    status_code: int = status.HTTP_200_OK,
    **extra: Any,
) -> Response:
    return envelope(True, message, data, status_code, **extra)


def failure(message: str, status_code: int, data: Any = None) -> Response:
    return envelope(False, message, data, status_code)


def validation_errors(exc: PydanticValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``[{"field", "detail"}]``."""
    return [
        {
            "field": ".".join(str(part) for part in err["loc"]) or "__all__",
            "detail": err["msg"],
        }
        for err in exc.errors()
    ]


def internal_error(request: Request, message: str, exc: Exception) -> Response:
    """Log an unexpected failure, forward it, and return a generic 500.

    The exception text never reaches the client.  Error reporters hook
    into Django's ``got_request_exception`` signal, so it is sent here
    even though the handler produces a response.
    """
    logger.exception(
        "request.internal_error",
        message=message,
        error_type=type(exc).__name__,
        path=request.path,
    )
    got_request_exception.send(sender=None, request=request._request)
    return failure(message, status.HTTP_500_INTERNAL_SERVER_ERROR)
