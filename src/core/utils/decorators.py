"""
Common decorators for API Gateway Lambda handlers.
"""

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any

from aws_lambda_powertools import Logger

from core.utils.constants import ERROR_CODE_INTERNAL_ERROR
from core.utils.response import JsonDict, ResponseBuilder

logger = Logger(service="api-gateway-handler", UTC=True)


def api_gateway_handler(
    func: Callable[..., JsonDict],
) -> Callable[..., JsonDict]:
    """
    Decorator for API Gateway Lambda handlers.

    Provides:
    - CORS preflight (OPTIONS) handling
    - A last-resort 500 response for exceptions the handler did not map

    Example:
        @api_gateway_handler
        def handler(event, context):
            return ResponseBuilder.ok({"message": "done"})
    """

    @wraps(func)
    def wrapper(event: Any, context: Any) -> JsonDict:
        if event.get("httpMethod") == "OPTIONS":
            return ResponseBuilder.no_content()

        request_id = getattr(context, "aws_request_id", None)

        try:
            return func(event, context)
        except Exception as exc:
            logger.exception(
                "Unexpected error in handler",
                extra={
                    "handler": func.__name__,
                    "request_id": request_id,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            return ResponseBuilder.internal_error(
                "Unexpected error occurred",
                error_code=ERROR_CODE_INTERNAL_ERROR,
                request_id=request_id,
            )

    return wrapper
