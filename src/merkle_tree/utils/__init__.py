"""
Utility Functions
"""

from .hex_helpers import (
    bytes_to_hex,
    digests_to_hex,
    hex_to_bytes,
    is_hex_string,
    short_hex,
    strip_hex_prefix,
)

__all__ = [
    "bytes_to_hex",
    "digests_to_hex",
    "hex_to_bytes",
    "is_hex_string",
    "short_hex",
    "strip_hex_prefix",
]
