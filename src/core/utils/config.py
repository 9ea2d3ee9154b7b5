"""Service configuration loaded from the Lambda environment."""

from collections.abc import Mapping
import os

from pydantic import BaseModel, ConfigDict, Field, ValidationError as PydanticValidationError

from core.models.errors import ConfigurationError
from core.utils.constants import (
    DEFAULT_AWS_REGION,
    DEFAULT_ENVIRONMENT,
    DEFAULT_JPEG_QUALITY,
    DEFAULT_MAX_DIMENSION,
    DEVELOPMENT_ENVIRONMENT,
    DOWNLOAD_URL_EXPIRES_IN,
    ENV_AWS_ENDPOINT_URL,
    ENV_AWS_REGION,
    ENV_DOWNLOAD_URL_EXPIRES_IN,
    ENV_ENVIRONMENT,
    ENV_JPEG_QUALITY,
    ENV_MAX_IMAGE_DIMENSION,
    ENV_TARGET_BUCKET_NAME,
    MIN_DIMENSION,
    MSG_BUCKET_NOT_SET,
)


class ServiceConfig(BaseModel):
    """Immutable settings for one warm Lambda container."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    target_bucket: str = Field(..., min_length=1, description="Destination S3 bucket")
    region: str = Field(DEFAULT_AWS_REGION, description="AWS region for the S3 client")
    endpoint_url: str | None = Field(
        None, description="S3 endpoint override (LocalStack)"
    )
    environment: str = Field(DEFAULT_ENVIRONMENT, description="Deployment environment")
    url_expires_in: int = Field(
        DOWNLOAD_URL_EXPIRES_IN, gt=0, description="Download URL lifetime in seconds"
    )
    max_dimension: int = Field(
        DEFAULT_MAX_DIMENSION,
        ge=MIN_DIMENSION,
        description="Largest accepted width or height in pixels",
    )
    jpeg_quality: int = Field(DEFAULT_JPEG_QUALITY, ge=1, le=95)

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == DEVELOPMENT_ENVIRONMENT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ServiceConfig":
        """Build configuration from environment variables.

        Raises:
            ConfigurationError: If the target bucket is missing or a
                numeric setting is not a valid value
        """
        env = os.environ if environ is None else environ

        bucket = (env.get(ENV_TARGET_BUCKET_NAME) or "").strip()
        if not bucket:
            raise ConfigurationError(
                message=MSG_BUCKET_NOT_SET,
                details={"variable": ENV_TARGET_BUCKET_NAME},
            )

        values: dict[str, str] = {"target_bucket": bucket}
        optional = {
            "region": ENV_AWS_REGION,
            "endpoint_url": ENV_AWS_ENDPOINT_URL,
            "environment": ENV_ENVIRONMENT,
            "url_expires_in": ENV_DOWNLOAD_URL_EXPIRES_IN,
            "max_dimension": ENV_MAX_IMAGE_DIMENSION,
            "jpeg_quality": ENV_JPEG_QUALITY,
        }
        for field_name, variable in optional.items():
            value = env.get(variable)
            if value:
                values[field_name] = value

        try:
            return cls.model_validate(values)
        except PydanticValidationError as exc:
            raise ConfigurationError(
                message="Invalid service configuration",
                details={"errors": [err["msg"] for err in exc.errors()]},
            ) from exc
