"""HTTP client for the image resize API.

Collects width, height and an image file, sends them to the resize
endpoint and downloads the resized image from the returned link.
"""

import base64
from dataclasses import dataclass
from pathlib import Path, PurePosixPath
from typing import Any
from urllib.parse import unquote, urlparse

from aws_lambda_powertools import Logger
import requests

from core.utils.constants import ALLOWED_MIME_TYPES
from core.utils.mime import detect_mime_type

logger = Logger(service="resize-client")

DEFAULT_TIMEOUT = 30
FALLBACK_ERROR_MESSAGE = "Error resizing image"


class ClientValidationError(ValueError):
    """Raised when form input is rejected before any request is sent."""


class DownloadError(RuntimeError):
    """Raised when the resized image cannot be downloaded."""


@dataclass(frozen=True)
class SubmitResult:
    ok: bool
    message: str
    download_url: str | None = None
    status_code: int | None = None


def strip_data_uri(value: str) -> str:
    """Return the base64 payload of a data URI, or ``value`` unchanged."""
    _, comma, payload = value.partition(",")
    return payload if comma else value


def encode_image_file(path: str | Path) -> str:
    """Read an image file and return its bare base64 payload.

    Raises:
        ClientValidationError: If the file is missing or not an image
    """
    file_path = Path(path)
    try:
        file_data = file_path.read_bytes()
    except OSError as exc:
        raise ClientValidationError("Error reading file") from exc

    try:
        mime_type = detect_mime_type(file_data)
    except ValueError as exc:
        raise ClientValidationError("Please upload an image file") from exc

    if mime_type not in ALLOWED_MIME_TYPES:
        raise ClientValidationError("Please upload an image file")

    return base64.b64encode(file_data).decode("ascii")


def _is_file(value: str) -> bool:
    try:
        return Path(value).is_file()
    except (OSError, ValueError):
        # Long base64 strings exceed the maximum path length
        return False


def filename_from_url(url: str) -> str:
    """Return the last path segment of ``url``, ignoring any query string.

    Falls back to ``resized.jpg`` when the segment is empty or a
    relative directory reference.
    """
    name = PurePosixPath(unquote(urlparse(url).path)).name
    if name in ("", ".", ".."):
        return "resized.jpg"
    return name


class ResizeClient:
    """Client for the resize endpoint."""

    def __init__(
        self,
        endpoint: str,
        *,
        session: requests.Session | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.endpoint = endpoint
        self.session = session or requests.Session()
        self.timeout = timeout

    def submit(
        self,
        *,
        width: int | str | None,
        height: int | str | None,
        image: str | Path | None,
    ) -> SubmitResult:
        """Send a resize request.

        ``image`` may be a file path, a data URI or a bare base64 string;
        only the bare payload is sent.

        Raises:
            ClientValidationError: If a field is missing or not usable
        """
        if not width or not height:
            raise ClientValidationError("Please fill in both height and width")

        if not image:
            raise ClientValidationError("Please upload an image")

        try:
            dimensions = {"height": int(height), "width": int(width)}
        except (TypeError, ValueError) as exc:
            raise ClientValidationError("Height and width must be whole numbers") from exc

        payload: dict[str, Any] = {**dimensions, "image": self._encode(image)}

        logger.info(
            "Sending resize request",
            extra={
                "endpoint": self.endpoint,
                "width": payload["width"],
                "height": payload["height"],
                "image_length": len(payload["image"]),
            },
        )

        try:
            response = self.session.post(self.endpoint, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Resize request failed", extra={"error": str(exc)})
            return SubmitResult(ok=False, message=FALLBACK_ERROR_MESSAGE)

        body = self._json_body(response)

        if not response.ok or not body.get("downloadUrl"):
            message = body.get("message") or FALLBACK_ERROR_MESSAGE
            logger.error(
                "Error resizing image",
                extra={"status_code": response.status_code, "server_message": message},
            )
            return SubmitResult(
                ok=False,
                message=message,
                status_code=response.status_code,
            )

        logger.info("Image resized successfully", extra={"download_url": body["downloadUrl"]})
        return SubmitResult(
            ok=True,
            message=body.get("message", "Image resized successfully"),
            download_url=body["downloadUrl"],
            status_code=response.status_code,
        )

    def download(self, download_url: str, destination: str | Path) -> Path:
        """Save the resized image into the ``destination`` directory.

        Raises:
            DownloadError: If the link has expired, the fetch fails or the
                file cannot be written
        """
        try:
            response = self.session.get(download_url, timeout=self.timeout)
        except requests.RequestException as exc:
            logger.error("Download failed", extra={"error": str(exc)})
            raise DownloadError("Error downloading image") from exc

        if response.status_code == requests.codes.forbidden:
            logger.error("Download link has expired", extra={"url": download_url})
            raise DownloadError("Download link has expired")

        if not response.ok:
            logger.error("Download failed", extra={"status_code": response.status_code})
            raise DownloadError("Error downloading image")

        target = Path(destination) / filename_from_url(download_url)
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_bytes(response.content)
        except OSError as exc:
            logger.error("Failed to save image", extra={"path": str(target), "error": str(exc)})
            raise DownloadError("Error downloading image") from exc

        logger.info(
            "Image downloaded",
            extra={"path": str(target), "size": len(response.content)},
        )
        return target

    @staticmethod
    def _encode(image: str | Path) -> str:
        if isinstance(image, Path):
            return encode_image_file(image)
        if image.startswith("data:"):
            if not image.startswith("data:image/"):
                raise ClientValidationError("Please upload an image file")
            return strip_data_uri(image)
        if _is_file(image):
            return encode_image_file(image)
        return image

    @staticmethod
    def _json_body(response: requests.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}
