"""
Encoding and decoding utilities for Bouncer.
Provides safe base64 and JSON helpers used by the token codec.
"""

import base64
import binascii
import json
from typing import Any, Dict, Union


def base64_encode(data: Union[str, bytes]) -> str:
    """Encode data to a standard, padded base64 string."""
    if isinstance(data, str):
        data = data.encode('utf-8')

    return base64.b64encode(data).decode('ascii')


def base64_decode(encoded: str) -> bytes:
    """
    Decode a standard base64 string to bytes.

    Characters outside the base64 alphabet are rejected rather than skipped,
    and so is any string that is not the canonical encoding of its bytes.

    Raises:
        ValueError: If the input is not valid base64
    """
    if not isinstance(encoded, str):
        raise ValueError("Base64 input must be a string")

    try:
        raw = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Invalid base64 data: {e}")

    # Unused trailing bits let several strings decode to the same bytes
    if base64.b64encode(raw).decode('ascii') != encoded:
        raise ValueError("Non-canonical base64 data")

    return raw


def encode_json_base64(data: Dict[str, Any]) -> str:
    """Serialize a dict to compact JSON and encode it as base64."""
    return base64_encode(json.dumps(data, separators=(',', ':')))


def decode_json_base64(encoded: str) -> Any:
    """
    Decode base64 and parse the result as JSON.

    Raises:
        ValueError: If the input is not valid base64, UTF-8 or JSON
    """
    raw = base64_decode(encoded)
    try:
        return json.loads(raw.decode('utf-8'))
    except UnicodeDecodeError as e:
        raise ValueError(f"Invalid UTF-8 data: {e}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON data: {e}")
