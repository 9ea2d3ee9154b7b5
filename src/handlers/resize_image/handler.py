"""
Lambda handler responsible for resizing images and returning a download link.
"""

import base64
import binascii
from functools import lru_cache
import json
import traceback
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError as PydanticValidationError

from core.models.errors import ConfigurationError, ImageProcessingError
from core.utils.config import ServiceConfig
from core.utils.constants import (
    ERROR_CODE_MALFORMED_JSON,
    ERROR_CODE_MISSING_BODY,
    ERROR_CODE_MISSING_FIELD,
    ERROR_CODE_PROCESSING_FAILED,
    ERROR_CODE_VALIDATION_FAILED,
    MSG_INVALID_JSON,
    MSG_INVALID_PARAMS,
    MSG_MISSING_BODY,
    MSG_MISSING_PARAMETERS,
    MSG_PROCESSING_FAILED,
    MSG_RESIZE_SUCCESS,
)
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import (
    field_presence,
    sanitize_validation_errors,
    validate_request,
)

from .models import ResizeRequest, ResizeResponse
from .service import ResizeService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()

REQUIRED_FIELDS = ("height", "width", "image")


@lru_cache(maxsize=1)
def get_service() -> ResizeService:
    """Build the resize service once per warm container.

    A missing bucket raises ``ConfigurationError``; exceptions are not
    cached, so the lookup is retried on the next invocation.
    """
    return ResizeService(ServiceConfig.from_env())


def _read_body(event: dict[str, Any]) -> str | None:
    body = event.get("body")
    if not body:
        return None

    if event.get("isBase64Encoded"):
        try:
            return base64.b64decode(body).decode("utf-8")
        except (binascii.Error, UnicodeDecodeError):
            # Let the JSON stage report the malformed payload
            return str(body)

    return str(body)


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle image resize requests.

    Validation short-circuits in this order: body present, body is JSON,
    required fields present, bucket configured, parameter bounds. Any
    failure while decoding, resizing, uploading or signing is reported as
    a single processing error.

    Expected API Gateway event structure:
    {
        "body": "{\"width\": 100, \"height\": 50, \"image\": \"...\"}",
        "isBase64Encoded": false
    }

    Args:
        event: API Gateway Lambda proxy event containing the resize payload
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response with the download URL
    """
    raw_body = _read_body(event)

    logger.info(
        "Received image resize request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "body_length": len(raw_body) if raw_body else 0,
            "request_id": getattr(context, "aws_request_id", None),
            "function_name": getattr(context, "function_name", None),
        },
    )

    if raw_body is None:
        logger.warning("Request body missing")
        return ResponseBuilder.bad_request(
            MSG_MISSING_BODY,
            error_code=ERROR_CODE_MISSING_BODY,
        )

    try:
        body = json.loads(raw_body)
    except json.JSONDecodeError as exc:
        logger.warning("Invalid JSON body received", extra={"error": str(exc)})
        return ResponseBuilder.bad_request(
            MSG_INVALID_JSON,
            error_code=ERROR_CODE_MALFORMED_JSON,
            error=str(exc),
        )

    if not isinstance(body, dict):
        logger.warning("JSON body is not an object", extra={"type": type(body).__name__})
        return ResponseBuilder.bad_request(
            MSG_INVALID_JSON,
            error_code=ERROR_CODE_MALFORMED_JSON,
            error="Request body must be a JSON object",
        )

    received = field_presence(body, *REQUIRED_FIELDS)
    if not all(received.values()):
        logger.warning("Missing required parameters", extra={"received": received})
        return ResponseBuilder.bad_request(
            MSG_MISSING_PARAMETERS,
            error_code=ERROR_CODE_MISSING_FIELD,
            extra={"received": received},
        )

    try:
        service = get_service()
    except ConfigurationError as exc:
        logger.error("Service misconfigured", extra={"details": exc.details})
        return ResponseBuilder.internal_error(exc.message, error_code=exc.error_code)

    try:
        request = validate_request(
            ResizeRequest,
            {name: body[name] for name in REQUIRED_FIELDS},
            context={"max_dimension": service.config.max_dimension},
        )
    except PydanticValidationError as exc:
        errors = sanitize_validation_errors(
            [dict(err) for err in exc.errors(include_input=False)]
        )
        logger.warning("Request validation failed", extra={"errors": errors})
        return ResponseBuilder.bad_request(
            MSG_INVALID_PARAMS,
            error_code=ERROR_CODE_VALIDATION_FAILED,
            details={"errors": errors},
        )

    try:
        result = service.resize_image(
            image=request.image,
            width=request.width,
            height=request.height,
        )
    except ImageProcessingError as exc:
        logger.exception(
            "Error processing image",
            extra={"error_code": exc.error_code, "details": exc.details},
        )
        extra: dict[str, Any] = {}
        if service.config.is_development:
            extra["stack"] = traceback.format_exc()
        return ResponseBuilder.internal_error(
            MSG_PROCESSING_FAILED,
            error_code=ERROR_CODE_PROCESSING_FAILED,
            error=exc.message,
            extra=extra,
        )

    response = ResizeResponse(
        message=MSG_RESIZE_SUCCESS,
        download_url=result.download_url,
    )

    return ResponseBuilder.ok(response.model_dump(by_alias=True))
