"""
Common API utilities for consistent response formatting across all controllers.
"""

import json
from typing import Any

from flask import Response, current_app

JSON_ENCODING_ERROR = "Error converting to JSON"


def format_json_error(message: str) -> bytes:
    """
    Encode an error message as the wire error payload.

    Args:
        message: Human-readable error text

    Returns:
        UTF-8 bytes of ``{"message": <message>}``
    """
    return json.dumps({"message": message}, ensure_ascii=False).encode("utf-8")


def json_error(message: str, status_code: int) -> Response:
    """Build a JSON error response with the standard error payload."""
    return current_app.response_class(
        format_json_error(message),
        status=status_code,
        mimetype="application/json",
    )


def json_body(data: Any, status_code: int = 200) -> Response:
    """
    Serialize ``data`` with the app's JSON provider.

    Encoding failures become a 500 carrying a fixed message, so a
    half-written body never reaches the client.
    """
    try:
        payload = current_app.json.dumps(data)
    except (TypeError, ValueError):
        current_app.logger.error(
            "Failed to encode response body",
            extra={"context": {"data_type": type(data).__name__}},
            exc_info=True,
        )
        return json_error(JSON_ENCODING_ERROR, 500)
    return current_app.response_class(
        payload, status=status_code, mimetype="application/json"
    )


def text_error(message: str, status_code: int) -> Response:
    """Plain-text error used on the rendered-view path."""
    return current_app.response_class(
        message + "\n",
        status=status_code,
        mimetype="text/plain",
    )


def empty_response(status_code: int) -> Response:
    """Response with a status line and no body (201/204)."""
    response = current_app.response_class(status=status_code)
    response.headers.pop("Content-Type", None)
    return response
