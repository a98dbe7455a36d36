"""
Location: python/x402check/extraction.py

Summary:
    Pulls an x402 config out of an HTTP 402 response. The JSON body wins
    when it looks like a config; otherwise the PAYMENT-REQUIRED header is
    decoded (base64 JSON first, raw JSON second).

Usage:
    Used by check.check(). Accepts an httpx.Response or a response-like
    mapping {"body": ..., "headers": ...}; header lookup is
    case-insensitive either way.

Example:
    import httpx
    from x402check.extraction import extract_config

    response = httpx.get("https://api.example.com/paid")
    extraction = extract_config(response)
    if extraction.config is not None:
        print(extraction.source)  # "body" or "header"
"""

import base64
import binascii
import json
import logging
from typing import Any, Mapping, Optional, Union

import httpx

from .detection import is_record
from .types import ExtractionResult

logger = logging.getLogger(__name__)


# x402 protocol header names
X402_HEADERS = {
    "PAYMENT_REQUIRED": "PAYMENT-REQUIRED",
}

# Any of these at the top level marks a body as an x402 config
CONFIG_FIELDS = ("x402Version", "accepts", "payTo")

NO_CONFIG_ERROR = "No x402 config found in response body or PAYMENT-REQUIRED header"

ResponseLike = Union[httpx.Response, Mapping[str, Any], None]


def _parse_json_object(text: Union[str, bytes]) -> Optional[dict[str, Any]]:
    try:
        value = json.loads(text)
    except (ValueError, RecursionError):
        return None
    return value if is_record(value) else None


def _body_config(body: Any) -> Optional[dict[str, Any]]:
    if isinstance(body, (str, bytes, bytearray)):
        body = _parse_json_object(body)
    if is_record(body) and any(key in body for key in CONFIG_FIELDS):
        return body
    return None


def decode_payment_required_header(value: str) -> Optional[dict[str, Any]]:
    """
    Decode a PAYMENT-REQUIRED header value.

    Args:
        value: Header value, base64-encoded JSON or raw JSON

    Returns:
        The decoded JSON object, or None if neither encoding yields one
    """
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        decoded = None

    if decoded is not None:
        config = _parse_json_object(decoded)
        if config is not None:
            return config

    return _parse_json_object(value)


def _split_response(response: ResponseLike) -> tuple[Any, Optional[httpx.Headers]]:
    if isinstance(response, httpx.Response):
        return response.text, response.headers
    if not isinstance(response, Mapping):
        return None, None

    headers = response.get("headers")
    if isinstance(headers, httpx.Headers):
        return response.get("body"), headers
    if isinstance(headers, Mapping):
        return response.get("body"), httpx.Headers(
            {
                key: value
                for key, value in headers.items()
                if isinstance(key, str) and isinstance(value, str)
            },
            encoding="utf-8",
        )
    return response.get("body"), None


def extract_config(response: ResponseLike) -> ExtractionResult:
    """
    Find the x402 config in a response.

    Args:
        response: httpx.Response, {"body": ..., "headers": ...}, or None

    Returns:
        ExtractionResult with config and source set, or error set when
        nothing usable was found
    """
    body, headers = _split_response(response)

    config = _body_config(body)
    if config is not None:
        return ExtractionResult(config=config, source="body")

    header_value = headers.get(X402_HEADERS["PAYMENT_REQUIRED"]) if headers else None
    if header_value:
        logger.debug("Response body has no x402 config, trying %s header",
                     X402_HEADERS["PAYMENT_REQUIRED"])
        config = decode_payment_required_header(header_value)
        if config is not None:
            return ExtractionResult(config=config, source="header")

    return ExtractionResult(error=NO_CONFIG_ERROR)
