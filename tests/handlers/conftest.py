import base64
from collections.abc import Callable, Iterator
import json
from types import SimpleNamespace
from typing import Any

import pytest

from handlers.resize_image.handler import get_service


@pytest.fixture
def lambda_context():
    return SimpleNamespace(
        aws_request_id="test-request-id",
        function_name="test-function",
        memory_limit_in_mb=256,
        invoked_function_arn="arn:aws:lambda:us-east-1:000000000000:function:test",
        log_group_name="/aws/lambda/test-function",
        log_stream_name="2024/01/01/[$LATEST]test",
    )


@pytest.fixture(autouse=True)
def reset_service_cache() -> Iterator[None]:
    """Every test starts from a cold container."""
    get_service.cache_clear()
    yield
    get_service.cache_clear()


@pytest.fixture
def sample_image_base64(sample_jpeg_binary) -> str:
    return base64.b64encode(sample_jpeg_binary).decode("utf-8")


@pytest.fixture
def make_resize_event() -> Callable[..., dict[str, Any]]:
    """
    Build an API Gateway POST event.

    Usage:
        event = make_resize_event({"width": 10, "height": 10, "image": "..."})
        event = make_resize_event(raw_body="not json")
    """

    def _make(
        payload: dict[str, Any] | None = None,
        *,
        raw_body: str | None = None,
    ) -> dict[str, Any]:
        body = raw_body if raw_body is not None else json.dumps(payload)
        return {
            "httpMethod": "POST",
            "path": "/resize",
            "body": body,
            "isBase64Encoded": False,
            "headers": {"Content-Type": "application/json"},
        }

    return _make
