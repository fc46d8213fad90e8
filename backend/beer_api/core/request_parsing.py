"""
Request input decoding for the beer endpoints.

Path identifiers and JSON bodies arrive as text/bytes; these helpers turn
them into domain values or raise the matching client error.
"""

import json
import re

from beer_api.core.exceptions import InvalidBeerIdError, PayloadDecodeError
from beer_api.domain.entities import Beer

_ID_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECODER = json.JSONDecoder()

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def parse_beer_id(raw: str) -> int:
    """
    Parse a base-10 path identifier.

    Accepts an optional sign followed by ASCII digits and nothing else
    (no whitespace, underscores or radix prefixes).

    Raises:
        InvalidBeerIdError: malformed text or outside the signed 64-bit range
    """
    if raw is None or not _ID_PATTERN.fullmatch(raw):
        raise InvalidBeerIdError(f'invalid beer id "{raw}": invalid syntax')
    value = int(raw, 10)
    if value < INT64_MIN or value > INT64_MAX:
        raise InvalidBeerIdError(f'invalid beer id "{raw}": value out of range')
    return value


def _int_field(fields: dict, field: str) -> int:
    value = fields.get(field, 0)
    # bool is an int subclass; true/false are not beer codes
    if isinstance(value, bool) or not isinstance(value, int):
        raise PayloadDecodeError(f"field '{field}' must be an integer")
    return value


def decode_beer(raw: bytes) -> Beer:
    """
    Decode a JSON request body into a Beer.

    Only the first JSON value of the body is read; anything after it is
    ignored. Keys match case-insensitively and, when several keys fold to
    the same field, the last one wins. Missing fields fall back to empty
    defaults so validation can report them. ``id`` and unknown keys are
    ignored.

    Raises:
        PayloadDecodeError: empty body, invalid JSON or wrong field types
    """
    if not raw or not raw.strip():
        raise PayloadDecodeError("request body is empty")
    try:
        data, _ = _DECODER.raw_decode(raw.decode("utf-8").lstrip())
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise PayloadDecodeError(str(e)) from e

    if not isinstance(data, dict):
        raise PayloadDecodeError("request body must be a JSON object")

    fields = {key.lower(): value for key, value in data.items()}

    name = fields.get("name", "")
    if not isinstance(name, str):
        raise PayloadDecodeError("field 'name' must be a string")

    return Beer(
        name=name,
        type=_int_field(fields, "type"),
        style=_int_field(fields, "style"),
    )
