"""Business logic for image resizing.

This module decodes the incoming image, resizes it, stores the result and
signs a download URL. The steps run strictly in order because each consumes
the previous step's output.
"""

import base64
import binascii

from aws_lambda_powertools import Logger

from core.infrastructure.adapters.s3_adapter import S3Adapter
from core.infrastructure.aws.s3_image_storage import S3ImageStorage
from core.infrastructure.imaging.pillow_processor import PillowImageProcessor
from core.models.errors import ImageDecodeError, ImageProcessingError
from core.models.image import ResizedImage
from core.repositories.image_processor import ImageProcessor
from core.repositories.storage_repository import ImageStorageRepository
from core.utils.config import ServiceConfig
from core.utils.constants import MAX_FILE_SIZE, RESIZED_KEY_TEMPLATE, get_max_file_size_mb
from core.utils.time import epoch_millis, utc_now_iso

logger = Logger(UTC=True)


class ResizeService:
    """Application service responsible for resizing and publishing images.

    This service orchestrates:
    - Base64 / data URI decoding
    - Resizing through the image processor
    - Uploading the result to storage
    - Signing a time-limited download URL
    """

    def __init__(
        self,
        config: ServiceConfig,
        *,
        storage: ImageStorageRepository | None = None,
        processor: ImageProcessor | None = None,
    ) -> None:
        self.config = config
        self.storage = storage or S3ImageStorage(S3Adapter(config))
        self.processor = processor or PillowImageProcessor(quality=config.jpeg_quality)

    @staticmethod
    def decode_image(encoded: str) -> bytes:
        """Decode a bare base64 string or a data URI.

        For data URIs everything after the first comma is the payload.

        Args:
            encoded: Base64 image content, optionally prefixed with
                ``data:<mime>;base64,``

        Returns:
            Decoded image bytes

        Raises:
            ImageDecodeError: If the payload is not valid base64, is empty,
                or exceeds ``MAX_FILE_SIZE`` once decoded
        """
        _, comma, payload = encoded.partition(",")
        if not comma:
            payload = encoded

        # Tolerate line-wrapped base64
        payload = "".join(payload.split())

        try:
            file_data = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            logger.warning("Failed to decode base64 image data", extra={"error": str(exc)})
            raise ImageDecodeError(
                message=f"Invalid base64 image data: {exc}",
                details={"encoding": "base64"},
            ) from exc

        if not file_data:
            raise ImageDecodeError(
                message="Decoded image is empty",
                details={"encoding": "base64"},
            )

        if len(file_data) > MAX_FILE_SIZE:
            raise ImageDecodeError(
                message=f"Image exceeds {get_max_file_size_mb()}MB limit",
                details={"size": len(file_data)},
            )

        return file_data

    @staticmethod
    def build_key(width: int, height: int) -> str:
        """Generate the storage key for a resized image."""
        return RESIZED_KEY_TEMPLATE.format(
            width=width,
            height=height,
            timestamp=epoch_millis(),
        )

    def resize_image(self, *, image: str, width: int, height: int) -> ResizedImage:
        """Resize an image and publish it behind a pre-signed URL.

        The flow is:
        1. Decode base64 / data URI payload
        2. Resize and encode as JPEG
        3. Upload to storage
        4. Sign a download URL, removing the upload if signing fails

        Raises:
            ImageProcessingError: If any step fails (decode, resize, upload
                or sign are reported through its subclasses)
        """
        logger.debug("Starting image resize", extra={"width": width, "height": height})

        # Step 1: Decode
        file_data = self.decode_image(image)

        # Step 2: Resize
        resized = self.processor.resize(file_data, width=width, height=height)

        # Step 3: Upload
        key = self.build_key(width, height)
        self.storage.upload_image(
            key=key,
            file_data=resized,
            content_type=self.processor.content_type,
            metadata={"width": str(width), "height": str(height)},
        )

        # Step 4: Sign (roll back storage on failure)
        try:
            url = self.storage.generate_presigned_get_url(
                key=key,
                expires_in=self.config.url_expires_in,
            )
        except ImageProcessingError:
            logger.exception("Failed to sign download URL", extra={"key": key})

            # Best-effort cleanup to avoid orphaned storage objects
            try:
                self.storage.remove_image(key=key)
            except ImageProcessingError:
                logger.warning(
                    "Failed to clean up resized image after signing failure",
                    extra={"key": key},
                )
            raise

        logger.info(
            "Image resized successfully",
            extra={
                "bucket": self.config.target_bucket,
                "key": key,
                "width": width,
                "height": height,
            },
        )

        return ResizedImage(
            key=key,
            bucket=self.config.target_bucket,
            content_type=self.processor.content_type,
            width=width,
            height=height,
            file_size=len(resized),
            created_at=utc_now_iso(),
            download_url=url,
            expires_in=self.config.url_expires_in,
        )
