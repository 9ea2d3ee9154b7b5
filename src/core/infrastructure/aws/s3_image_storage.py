"""S3-backed implementation of ImageStorageRepository."""

from aws_lambda_powertools import Logger
from botocore.exceptions import BotoCoreError, ClientError

from core.infrastructure.adapters.s3_adapter import S3AdapterProtocol
from core.models.errors import (
    ImageProcessingError,
    ImageUploadFailedError,
    PresignedUrlFailedError,
)
from core.repositories.storage_repository import ImageStorageRepository

logger = Logger(UTC=True)


class S3ImageStorage(ImageStorageRepository):
    """Image storage implementation backed by Amazon S3.

    Objects are written without an ACL, so they stay private to the bucket
    and are only reachable through the pre-signed URL.
    """

    def __init__(self, adapter: S3AdapterProtocol) -> None:
        """Create storage using the provided S3 adapter."""
        self._s3 = adapter

    def upload_image(
        self,
        *,
        key: str,
        file_data: bytes,
        content_type: str,
        metadata: dict[str, str] | None = None,
    ) -> str:
        """Upload image bytes to S3 and return the object key."""
        logger.debug(
            "Uploading image",
            extra={"key": key, "size": len(file_data), "content_type": content_type},
        )

        try:
            self._s3.put_object(
                key=key,
                body=file_data,
                content_type=content_type,
                metadata=metadata or {},
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error("S3 upload failed", extra={"key": key, "error": str(exc)})
            raise ImageUploadFailedError(
                message=f"Unable to upload image: {exc}",
                details={"key": key},
            ) from exc

        logger.info("Image uploaded successfully", extra={"key": key})
        return key

    def generate_presigned_get_url(self, *, key: str, expires_in: int) -> str:
        """Generate a pre-signed S3 URL for reading an image object."""
        logger.debug(
            "Generating pre-signed S3 URL",
            extra={"key": key, "expires_in": expires_in},
        )

        try:
            url: str = self._s3.generate_presigned_url(
                method="get_object",
                params={"Key": key},
                expires_in=expires_in,
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error("Failed to generate pre-signed URL", extra={"key": key})
            raise PresignedUrlFailedError(
                message=f"Unable to generate image download URL: {exc}",
                details={"key": key},
            ) from exc

        return url

    def remove_image(self, *, key: str) -> None:
        """Delete an image object from S3."""
        logger.debug("Deleting image", extra={"key": key})

        try:
            self._s3.delete_object(key=key)
        except (ClientError, BotoCoreError) as exc:
            logger.error("S3 deletion failed", extra={"key": key})
            raise ImageProcessingError(
                message=f"Unable to delete image: {exc}",
                details={"key": key},
            ) from exc

        logger.info("Image deleted successfully", extra={"key": key})
