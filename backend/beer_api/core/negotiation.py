"""
Content negotiation for the beer endpoints.

The Accept header is compared verbatim against ``application/json``; any
other value, including a missing header, selects the rendered view.
"""

from enum import Enum
from typing import Optional

JSON_MIMETYPE = "application/json"


class ResponseFormat(str, Enum):
    JSON = "json"
    HTML = "html"


def negotiate_format(accept: Optional[str]) -> ResponseFormat:
    """Map the raw Accept header value to the response format."""
    if accept == JSON_MIMETYPE:
        return ResponseFormat.JSON
    return ResponseFormat.HTML
