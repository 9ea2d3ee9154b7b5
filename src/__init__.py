"""Image Resize Service Package."""

__version__ = "1.0.0"
__author__ = "Bharat kumar"
__description__ = (
    "Serverless image resize service using AWS Lambda, Pillow, and S3"
)

__all__ = ["handlers", "core", "client"]
