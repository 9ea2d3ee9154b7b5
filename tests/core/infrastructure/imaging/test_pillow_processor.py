import io

from PIL import Image
import pytest

from core.infrastructure.imaging.pillow_processor import PillowImageProcessor
from core.models.errors import ImageResizeFailedError


def open_image(data: bytes) -> Image.Image:
    image = Image.open(io.BytesIO(data))
    image.load()
    return image


def encode(image: Image.Image, fmt: str) -> bytes:
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


class TestPillowImageProcessor:
    def test_resizes_to_exact_dimensions(self, sample_jpeg_binary) -> None:
        result = PillowImageProcessor().resize(sample_jpeg_binary, width=100, height=10)

        image = open_image(result)
        assert image.format == "JPEG"
        assert image.size == (100, 10)

    def test_png_with_alpha_becomes_rgb_jpeg(self, sample_png_binary) -> None:
        result = PillowImageProcessor().resize(sample_png_binary, width=7, height=9)

        image = open_image(result)
        assert image.format == "JPEG"
        assert image.mode == "RGB"
        assert image.size == (7, 9)

    def test_palette_image(self) -> None:
        source = encode(Image.new("P", (10, 10)), "GIF")

        result = PillowImageProcessor().resize(source, width=5, height=5)

        assert open_image(result).size == (5, 5)

    def test_exif_orientation_is_applied(self) -> None:
        image = Image.new("RGB", (40, 20))
        exif = Image.Exif()
        exif[0x0112] = 6  # rotate 90 degrees clockwise
        buffer = io.BytesIO()
        image.save(buffer, format="JPEG", exif=exif)

        processor = PillowImageProcessor()
        result = processor.resize(buffer.getvalue(), width=40, height=20)

        # dimensions are literal targets regardless of orientation
        assert open_image(result).size == (40, 20)

    def test_quality_affects_output_size(self) -> None:
        noisy = Image.effect_noise((64, 64), 100).convert("RGB")
        source = encode(noisy, "PNG")

        low = PillowImageProcessor(quality=10).resize(source, width=64, height=64)
        high = PillowImageProcessor(quality=95).resize(source, width=64, height=64)

        assert len(low) < len(high)

    def test_content_type(self) -> None:
        assert PillowImageProcessor.content_type == "image/jpeg"

    def test_corrupt_input(self) -> None:
        with pytest.raises(ImageResizeFailedError):
            PillowImageProcessor().resize(b"not an image", width=10, height=10)

    def test_truncated_input(self, sample_jpeg_binary) -> None:
        with pytest.raises(ImageResizeFailedError):
            PillowImageProcessor().resize(sample_jpeg_binary[:40], width=10, height=10)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, -1)])
    def test_invalid_dimensions(self, sample_jpeg_binary, width, height) -> None:
        with pytest.raises(ImageResizeFailedError):
            PillowImageProcessor().resize(sample_jpeg_binary, width=width, height=height)
