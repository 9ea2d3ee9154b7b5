"""Global constants used throughout the application.

This module centralizes the error codes, limits, and environment variable
names shared by the handler, the service layer, and the client.
"""

from typing import Final

# ============================================================================
# Error Codes
# ============================================================================


# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_MISSING_BODY = "MISSING_BODY"
ERROR_CODE_MALFORMED_JSON = "MALFORMED_JSON"
ERROR_CODE_MISSING_FIELD = "MISSING_FIELD"

# Configuration Errors
ERROR_CODE_CONFIGURATION = "CONFIGURATION_ERROR"

# Processing Errors
ERROR_CODE_PROCESSING_FAILED = "PROCESSING_FAILED"
ERROR_CODE_IMAGE_DECODE_FAILED = "IMAGE_DECODE_FAILED"
ERROR_CODE_IMAGE_RESIZE_FAILED = "IMAGE_RESIZE_FAILED"
ERROR_CODE_IMAGE_UPLOAD_FAILED = "IMAGE_UPLOAD_FAILED"
ERROR_CODE_IMAGE_PRESIGNED_URL_FAILED = "PRESIGNED_URL_FAILED"

# Internal / Unexpected
ERROR_CODE_INTERNAL_ERROR = "INTERNAL_ERROR"


# ============================================================================
# Image Constraints
# ============================================================================

MAX_FILE_SIZE = 6 * 1024 * 1024  # Lambda synchronous payload limit

MIN_DIMENSION = 1
DEFAULT_MAX_DIMENSION = 10_000

DEFAULT_JPEG_QUALITY = 85

OUTPUT_CONTENT_TYPE = "image/jpeg"
OUTPUT_FORMAT = "JPEG"
RESIZED_KEY_TEMPLATE = "resized-{width}x{height}-{timestamp}.jpg"

MIME_TYPE_EXTENSION_MAP: Final[dict[str, tuple[str, ...]]] = {
    "image/jpeg": ("jpg", "jpeg"),
    "image/png": ("png",),
    "image/gif": ("gif",),
    "image/webp": ("webp",),
    "image/bmp": ("bmp",),
    "image/tiff": ("tif", "tiff"),
}

ALLOWED_MIME_TYPES: Final[frozenset[str]] = frozenset(MIME_TYPE_EXTENSION_MAP.keys())


# ============================================================================
# Download URL
# ============================================================================

DOWNLOAD_URL_EXPIRES_IN = 3600  # seconds


# ============================================================================
# Response Messages
# ============================================================================

MSG_MISSING_BODY = "Missing request body"
MSG_INVALID_JSON = "Invalid JSON in request body"
MSG_MISSING_PARAMETERS = (
    "Missing required parameters. Please provide height, width, and image."
)
MSG_INVALID_PARAMS = "Invalid request params"
MSG_BUCKET_NOT_SET = "TARGET_BUCKET_NAME environment variable is not set"
MSG_PROCESSING_FAILED = "Error processing image"
MSG_RESIZE_SUCCESS = "Image resized successfully"


# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "POST,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
DEFAULT_CONTENT_TYPE = "application/json"


# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_TARGET_BUCKET_NAME = "TARGET_BUCKET_NAME"
ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_AWS_REGION = "AWS_REGION"
ENV_ENVIRONMENT = "ENVIRONMENT"
ENV_DOWNLOAD_URL_EXPIRES_IN = "DOWNLOAD_URL_EXPIRES_IN"
ENV_MAX_IMAGE_DIMENSION = "MAX_IMAGE_DIMENSION"
ENV_JPEG_QUALITY = "JPEG_QUALITY"
ENV_RESIZE_API_URL = "RESIZE_API_URL"

DEFAULT_AWS_REGION = "us-east-1"
DEFAULT_ENVIRONMENT = "production"
DEVELOPMENT_ENVIRONMENT = "development"


# ============================================================================
# Helper Functions
# ============================================================================


def get_max_file_size_mb() -> int:
    """Get maximum file size in megabytes."""
    return MAX_FILE_SIZE // (1024 * 1024)
