"""Request validation utilities."""

import math
from typing import Any, TypeVar

from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)


def sanitize_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Sanitize Pydantic validation errors for API responses.

    Removes sensitive/internal fields like:
    - url
    - ctx
    - input (which may hold megabytes of base64)
    """
    sanitized: list[dict[str, str]] = []

    for err in errors:
        field = ".".join(str(x) for x in err.get("loc", [])) or "body"
        raw_msg = err.get("msg", "Invalid value")

        # Remove noisy prefixes
        msg = raw_msg.replace("Value error,", "").strip()

        msg_lower = msg.lower()
        if "field required" in msg_lower:
            msg = "This field is required"
        elif "valid string" in msg_lower:
            msg = "Invalid value type"

        sanitized.append(
            {
                "field": field,
                "message": msg,
            }
        )

    return sanitized


def validate_request(
    model: type[ModelT],
    data: dict[str, Any],
    *,
    context: dict[str, Any] | None = None,
) -> ModelT:
    """Validate request data against a Pydantic model.

    Args:
        model: Pydantic model class
        data: Input data to validate
        context: Optional validation context passed to field validators

    Raises:
        pydantic.ValidationError: If the payload does not satisfy the model
    """
    return model.model_validate(data, context=context)


def _is_present(value: Any) -> bool:
    # Arrays and objects count as present even when empty; NaN does not
    if isinstance(value, (list, dict)):
        return True
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def field_presence(data: dict[str, Any], *fields: str) -> dict[str, bool]:
    """Report which fields are present with a usable value.

    Keys are ``has<Field>`` so ``field_presence(body, "height")`` returns
    ``{"hasHeight": ...}``. Zero, NaN, ``false``, empty strings and null
    count as absent; arrays and objects count as present, even when empty.
    """
    return {f"has{name[:1].upper()}{name[1:]}": _is_present(data.get(name)) for name in fields}
