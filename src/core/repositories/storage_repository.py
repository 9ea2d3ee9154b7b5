"""Abstract contract for resized image storage."""

from abc import ABC, abstractmethod


class ImageStorageRepository(ABC):
    """Contract for storing resized images and handing out download links.

    Implementations could be S3, GCS, local disk, etc.
    The resize service depends on this interface, not the implementation.
    """

    @abstractmethod
    def upload_image(
        self,
        *,
        key: str,
        file_data: bytes,
        content_type: str,
        metadata: dict[str, str] | None = None,
    ) -> str:
        """Store image bytes under ``key`` and return the key.

        Args:
            key: Object key to write
            file_data: Encoded image content
            content_type: MIME type (e.g., 'image/jpeg')
            metadata: Optional string metadata stored with the object

        Returns:
            Storage key for later retrieval

        Raises:
            ImageUploadFailedError: If upload fails
        """

    @abstractmethod
    def generate_presigned_get_url(self, *, key: str, expires_in: int) -> str:
        """Return a read-only URL for one object that expires after ``expires_in`` seconds.

        Raises:
            PresignedUrlFailedError: If the URL cannot be signed
        """

    @abstractmethod
    def remove_image(self, *, key: str) -> None:
        """Delete image by key.

        Raises:
            ImageProcessingError: If deletion fails
        """
