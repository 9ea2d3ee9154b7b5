"""Abstract contract for the image resizing backend."""

from abc import ABC, abstractmethod


class ImageProcessor(ABC):
    """Contract for turning source image bytes into resized output bytes."""

    content_type: str

    @abstractmethod
    def resize(self, file_data: bytes, *, width: int, height: int) -> bytes:
        """Resize to exactly ``width`` x ``height`` pixels and encode the result.

        Aspect ratio is not preserved.

        Raises:
            ImageResizeFailedError: If the input cannot be decoded, resized
                or encoded
        """
