"""Pillow-backed implementation of ImageProcessor."""

import io

from aws_lambda_powertools import Logger
from PIL import Image, ImageOps, UnidentifiedImageError

from core.models.errors import ImageResizeFailedError
from core.repositories.image_processor import ImageProcessor
from core.utils.constants import (
    DEFAULT_JPEG_QUALITY,
    OUTPUT_CONTENT_TYPE,
    OUTPUT_FORMAT,
)

logger = Logger(UTC=True)

# JPEG has no alpha channel and no palette
_JPEG_COMPATIBLE_MODES = frozenset({"RGB", "L", "CMYK"})


class PillowImageProcessor(ImageProcessor):
    """Resize images with Pillow and always encode the result as JPEG."""

    content_type = OUTPUT_CONTENT_TYPE

    def __init__(self, *, quality: int = DEFAULT_JPEG_QUALITY) -> None:
        self._quality = quality

    def resize(self, file_data: bytes, *, width: int, height: int) -> bytes:
        logger.debug(
            "Resizing image",
            extra={"size": len(file_data), "width": width, "height": height},
        )

        try:
            with Image.open(io.BytesIO(file_data)) as source:
                source_format = source.format
                source_size = source.size

                image = ImageOps.exif_transpose(source)
                if image.mode not in _JPEG_COMPATIBLE_MODES:
                    image = image.convert("RGB")

                resized = image.resize((width, height), Image.Resampling.LANCZOS)

                buffer = io.BytesIO()
                resized.save(buffer, format=OUTPUT_FORMAT, quality=self._quality)
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            OSError,
            ValueError,
        ) as exc:
            logger.error(
                "Image resize failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise ImageResizeFailedError(
                message=f"Unable to resize image: {exc}",
                details={"width": width, "height": height},
            ) from exc

        output = buffer.getvalue()
        logger.info(
            "Image resized",
            extra={
                "source_format": source_format,
                "source_size": source_size,
                "target_size": (width, height),
                "output_bytes": len(output),
            },
        )
        return output
