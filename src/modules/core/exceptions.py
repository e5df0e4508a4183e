"""Standardized API error responses.

Every error leaves the API in one shape::

    {"type": "validation_error",
     "errors": [{"code": "max_length", "detail": "...", "attr": "name"}]}

Exceptions DRF does not know about are logged and answered with a
generic 500; the traceback never reaches the client.
"""

from __future__ import annotations

from typing import Any, Dict, Iterator, Optional

import structlog
from django.core.exceptions import PermissionDenied
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

SERVER_ERROR_DETAIL = "An unexpected error occurred."


def _flatten(details: Any, attr: Optional[str] = None) -> Iterator[Dict[str, Any]]:
    if isinstance(details, dict) and {"message", "code"} <= details.keys():
        yield {"code": details["code"], "detail": str(details["message"]), "attr": attr}
    elif isinstance(details, dict):
        for key, value in details.items():
            name = key if attr is None else f"{attr}.{key}"
            yield from _flatten(value, None if key == "non_field_errors" else name)
    elif isinstance(details, list):
        for item in details:
            yield from _flatten(item, attr)


def standard_exception_handler(exc: Exception, context: Dict[str, Any]) -> Response:
    response = _render(exc, context)
    request = context.get("request")
    if request is not None and request.method == "HEAD":
        response.data = None
    return response


def _render(exc: Exception, context: Dict[str, Any]) -> Response:
    if isinstance(exc, Http404):
        exc = exceptions.NotFound()
    elif isinstance(exc, PermissionDenied):
        exc = exceptions.PermissionDenied()

    response = exception_handler(exc, context)
    if response is None:
        view = context.get("view")
        logger.error(
            "request.unhandled_exception",
            view=view.__class__.__name__ if view is not None else None,
            exc_info=exc,
        )
        return Response(
            {
                "type": "server_error",
                "errors": [
                    {"code": "error", "detail": SERVER_ERROR_DETAIL, "attr": None}
                ],
            },
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    if isinstance(exc, exceptions.ValidationError):
        error_type = "validation_error"
    elif response.status_code >= 500:
        error_type = "server_error"
    else:
        error_type = "client_error"

    response.data = {
        "type": error_type,
        "errors": list(_flatten(exc.get_full_details())),
    }
    return response
