"""
Pytest configuration and fixtures for image resize tests.
Provides AWS mocking, S3 fixtures with proper cleanup, and sample images.
"""

from collections.abc import Callable
import io
import os
from typing import Any

import boto3
from botocore.exceptions import ClientError
from moto import mock_aws
from PIL import Image
import pytest

os.environ.setdefault("AWS_ACCESS_KEY_ID", "testing")
os.environ.setdefault("AWS_SECRET_ACCESS_KEY", "testing")
os.environ.setdefault("AWS_SECURITY_TOKEN", "testing")
os.environ.setdefault("AWS_SESSION_TOKEN", "testing")
os.environ.setdefault("AWS_DEFAULT_REGION", "us-east-1")
os.environ.setdefault("AWS_REGION", "us-east-1")
os.environ.setdefault("TARGET_BUCKET_NAME", "resized-images-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "image-resize-test")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "ImageResizeTest")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "true")


@pytest.fixture(scope="function")
def aws_mock():
    with mock_aws():
        yield


@pytest.fixture(scope="function")
def s3_client(aws_mock):
    """S3 client for bucket operations."""
    return boto3.client("s3", region_name=os.getenv("AWS_REGION"))


def _cleanup_s3_objects(s3_client, bucket_name):
    """Helper to delete all objects from S3 bucket."""
    try:
        paginator = s3_client.get_paginator("list_objects_v2")
        for page in paginator.paginate(Bucket=bucket_name):
            objects = page.get("Contents", [])
            if objects:
                delete_keys = [{"Key": obj["Key"]} for obj in objects]
                s3_client.delete_objects(
                    Bucket=bucket_name, Delete={"Objects": delete_keys}
                )
    except ClientError as e:
        if e.response["Error"]["Code"] != "NoSuchBucket":
            raise


@pytest.fixture(scope="function")
def s3_bucket(s3_client):
    """
    Create and manage the target S3 bucket for testing.

    Cleanup Strategy:
    - Objects are deleted after each test (teardown)
    - Bucket is NOT deleted (moto cleans up on context exit)
    """
    bucket_name = os.getenv("TARGET_BUCKET_NAME")

    try:
        s3_client.head_bucket(Bucket=bucket_name)
    except ClientError:
        s3_client.create_bucket(Bucket=bucket_name)

    yield s3_client

    _cleanup_s3_objects(s3_client, bucket_name)


@pytest.fixture
def s3_list_keys(s3_client) -> Callable[[], list[str]]:
    """
    Helper to list all object keys in the target bucket.

    Usage:
        keys = s3_list_keys()
    """

    def _list() -> list[str]:
        response = s3_client.list_objects_v2(Bucket=os.getenv("TARGET_BUCKET_NAME"))
        return [obj["Key"] for obj in response.get("Contents", [])]

    return _list


@pytest.fixture
def s3_get_object(s3_client) -> Callable[[str], dict[str, Any]]:
    """
    Helper to fetch an object (body bytes plus head fields) from S3.

    Usage:
        obj = s3_get_object("resized-10x10-1.jpg")
        obj["Body"], obj["ContentType"]
    """

    def _get(key: str) -> dict[str, Any]:
        response: dict[str, Any] = s3_client.get_object(
            Bucket=os.getenv("TARGET_BUCKET_NAME"),
            Key=key,
        )
        return {**response, "Body": response["Body"].read()}

    return _get


def _encode_image(mode: str, size: tuple[int, int], fmt: str) -> bytes:
    color: Any = (200, 30, 30, 128) if mode == "RGBA" else (200, 30, 30)
    buffer = io.BytesIO()
    Image.new(mode, size, color).save(buffer, format=fmt)
    return buffer.getvalue()


@pytest.fixture
def sample_png_binary() -> bytes:
    """40x20 RGBA PNG."""
    return _encode_image("RGBA", (40, 20), "PNG")


@pytest.fixture
def sample_jpeg_binary() -> bytes:
    """64x48 RGB JPEG."""
    return _encode_image("RGB", (64, 48), "JPEG")
