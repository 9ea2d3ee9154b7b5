"""Pydantic models for image resize request/response."""

from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationInfo,
    field_validator,
)

from core.utils.constants import DEFAULT_MAX_DIMENSION, MIN_DIMENSION


class ResizeRequest(BaseModel):
    """Validation model for image resize request.

    The largest accepted dimension can be supplied through the validation
    context as ``max_dimension``; it defaults to ``DEFAULT_MAX_DIMENSION``.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    width: int = Field(..., ge=MIN_DIMENSION, description="Target width in pixels")
    height: int = Field(..., ge=MIN_DIMENSION, description="Target height in pixels")
    image: StrictStr = Field(
        ...,
        min_length=1,
        description="Base64 encoded image, bare or as a data URI",
    )

    @field_validator("width", "height", mode="before")
    @classmethod
    def reject_booleans(cls, value: Any) -> Any:
        # bool is an int subclass; true must not become a 1px image
        if isinstance(value, bool):
            raise ValueError("must be an integer")
        return value

    @field_validator("width", "height")
    @classmethod
    def validate_upper_bound(cls, value: int, info: ValidationInfo) -> int:
        max_dimension = DEFAULT_MAX_DIMENSION
        if info.context:
            max_dimension = info.context.get("max_dimension", max_dimension)

        if value > max_dimension:
            raise ValueError(f"must not exceed {max_dimension} pixels")
        return value


class ResizeResponse(BaseModel):
    """Response model for a successful resize."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(..., description="Success message")
    download_url: str = Field(
        ...,
        alias="downloadUrl",
        description="Pre-signed URL for the resized image",
    )
