"""Resized image value object."""

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr


class ResizedImage(BaseModel):
    """A resized image that has been written to storage.

    Only lives for the duration of one request; the stored object belongs
    to the bucket afterwards.
    """

    model_config = ConfigDict(frozen=True)

    key: StrictStr = Field(..., description="Object key of the resized image")
    bucket: StrictStr = Field(..., description="Bucket the image was written to")
    content_type: StrictStr = Field(..., description="MIME type of the stored image")
    width: StrictInt = Field(..., description="Output width in pixels")
    height: StrictInt = Field(..., description="Output height in pixels")
    file_size: StrictInt = Field(..., description="Stored size in bytes")
    created_at: StrictStr = Field(..., description="ISO-8601 creation timestamp (UTC)")
    download_url: StrictStr = Field(..., description="Pre-signed download URL")
    expires_in: StrictInt = Field(..., description="Download URL lifetime in seconds")
