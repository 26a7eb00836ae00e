"""
Hex String Utilities

Conversions between digests and the hex strings used for display and for
proofs passed on the command line.
"""

from typing import List, Optional

from ..exceptions import InvalidInputError

HEX_CHARS = "0123456789abcdefABCDEF"


def strip_hex_prefix(hex_str: str) -> str:
    return hex_str[2:] if hex_str.startswith(("0x", "0X")) else hex_str


def is_hex_string(hex_str: str, expected_bytes: Optional[int] = None) -> bool:
    """
    Check that a string is an even-length hex string, optionally of a given size.

    Args:
        hex_str: Hex string with or without '0x' prefix
        expected_bytes: Optional expected byte length

    Returns:
        True if the string decodes to bytes of the expected length
    """
    if not isinstance(hex_str, str):
        return False
    hex_part = strip_hex_prefix(hex_str)
    if len(hex_part) % 2 == 1 or not all(c in HEX_CHARS for c in hex_part):
        return False
    return expected_bytes is None or len(hex_part) // 2 == expected_bytes


def hex_to_bytes(hex_str: str, expected_bytes: Optional[int] = None) -> bytes:
    """
    Convert a hex string to bytes.

    Args:
        hex_str: Hex string (with or without '0x' prefix)
        expected_bytes: Optional expected byte length for validation

    Returns:
        Bytes representation of the hex string

    Raises:
        InvalidInputError: If the string is not valid hex or has the wrong length

    Examples:
        >>> hex_to_bytes("0x1234")
        b'\\x12\\x34'
        >>> hex_to_bytes("1234")
        b'\\x12\\x34'
    """
    if not is_hex_string(hex_str):
        raise InvalidInputError(f"Invalid hex string: {hex_str}")

    data = bytes.fromhex(strip_hex_prefix(hex_str))
    if expected_bytes is not None and len(data) != expected_bytes:
        raise InvalidInputError(
            f"Expected {expected_bytes} bytes, got {len(data)} bytes"
        )
    return data


def bytes_to_hex(data: bytes, prefix: bool = True) -> str:
    """
    Convert bytes to a hex string.

    Args:
        data: Bytes to convert
        prefix: Whether to include '0x' prefix

    Returns:
        Hex string representation

    Examples:
        >>> bytes_to_hex(b'\\x12\\x34')
        "0x1234"
        >>> bytes_to_hex(b'\\x12\\x34', prefix=False)
        "1234"
    """
    hex_str = data.hex()
    return f"0x{hex_str}" if prefix else hex_str


def short_hex(data: bytes, length: int = 8) -> str:
    """Abbreviated hex for tables and tree diagrams."""
    hex_str = data.hex()
    if len(hex_str) <= 2 * length:
        return hex_str
    return f"{hex_str[:length]}...{hex_str[-length:]}"


def digests_to_hex(digests: List[bytes], prefix: bool = True) -> List[str]:
    return [bytes_to_hex(d, prefix) for d in digests]
