"""
Digest Primitives

This module wraps the cryptographic hash function used by the tree. Leaves
are the digest of the raw element bytes and inner nodes are the digest of
the concatenation `left || right`:

- hash_leaf(element) = H(element)
- hash_pair(left, right) = H(left || right)

The concrete function defaults to SHA3-256 and can be swapped for any
fixed-length hashlib algorithm through `Hasher`.
"""

import hashlib
from dataclasses import dataclass
from typing import Optional, Union

from .constants import DEFAULT_HASH_ALGORITHM, ELEMENT_ENCODING
from .exceptions import InvalidInputError

Element = Union[bytes, bytearray, memoryview, str]


def element_to_bytes(element: Element) -> bytes:
    """
    Convert an element to the bytes that get hashed.

    Args:
        element: Raw element (bytes-like, or str which is UTF-8 encoded)

    Returns:
        Byte representation of the element

    Raises:
        InvalidInputError: If the element is neither bytes-like nor str
    """
    if isinstance(element, str):
        return element.encode(ELEMENT_ENCODING)
    if isinstance(element, (bytes, bytearray, memoryview)):
        return bytes(element)
    raise InvalidInputError(
        f"Elements must be bytes or str, got {type(element).__name__}"
    )


@dataclass(frozen=True)
class Hasher:
    """
    Fixed-length digest function identified by its hashlib name.

    Examples:
        >>> Hasher().digest_size
        32
        >>> Hasher("sha256").hash_pair(b"\\x01" * 32, b"\\x02" * 32)
    """
    algorithm: str = DEFAULT_HASH_ALGORITHM

    def __post_init__(self):
        try:
            probe = hashlib.new(self.algorithm)
        except (ValueError, TypeError):
            raise InvalidInputError(f"Unknown hash algorithm: {self.algorithm}")
        # SHAKE functions need an explicit output length
        if probe.digest_size == 0:
            raise InvalidInputError(
                f"Hash algorithm must have a fixed digest size: {self.algorithm}"
            )

    @property
    def digest_size(self) -> int:
        return hashlib.new(self.algorithm).digest_size

    def hash(self, data: bytes) -> bytes:
        return hashlib.new(self.algorithm, data).digest()

    def hash_leaf(self, element: Element) -> bytes:
        """Hash a single element into a leaf digest."""
        return self.hash(element_to_bytes(element))

    def hash_pair(self, left: bytes, right: bytes) -> bytes:
        """Hash two child digests into their parent. Order matters."""
        return self.hash(bytes(left) + bytes(right))


DEFAULT_HASHER = Hasher()


def hash_leaf(element: Element) -> bytes:
    """
    Hash a leaf element with the default hasher.

    Args:
        element: Raw element bytes (or str)

    Returns:
        32-byte SHA3-256 leaf digest
    """
    return DEFAULT_HASHER.hash_leaf(element)


def hash_pair(left: bytes, right: bytes) -> bytes:
    """
    Hash a pair of digests with the default hasher: H(left || right).

    Args:
        left: Left child digest
        right: Right child digest

    Returns:
        32-byte SHA3-256 parent digest
    """
    return DEFAULT_HASHER.hash_pair(left, right)


def get_hasher(algorithm: Optional[str] = None) -> Hasher:
    """Return the default hasher, or a new one for `algorithm`."""
    if algorithm is None or algorithm == DEFAULT_HASHER.algorithm:
        return DEFAULT_HASHER
    return Hasher(algorithm)
