"""
Utility package providing encoding and configuration helpers for Bouncer.
"""

from .encoding import (
    base64_encode,
    base64_decode,
    encode_json_base64,
    decode_json_base64,
)
from .config import (
    get_config_value,
    get_bool_config,
    load_config_file,
    parse_bool,
    read_text_file,
)

__all__ = [
    "base64_encode",
    "base64_decode",
    "encode_json_base64",
    "decode_json_base64",
    "get_config_value",
    "get_bool_config",
    "parse_bool",
    "load_config_file",
    "read_text_file",
]
