"""
Merkle Tree Exceptions

Errors raised by the merkle tree library. Precondition violations are
reported explicitly instead of surfacing as index faults.
"""


class MerkleTreeError(Exception):
    """Base exception for merkle tree operations."""
    pass


class InvalidInputError(MerkleTreeError, ValueError):
    """Raised when an operation is called with input that breaks its contract."""
    pass
